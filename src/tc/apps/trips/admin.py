from django.contrib import admin

from tc.apps.common.admin_utils import admin_link
from tc.apps.members.models import TripMember

from . import models


class TripMemberInline(admin.TabularInline):
    model = TripMember
    fk_name = 'trip'
    extra = 0
    readonly_fields = ( 'added_datetime', )

    fields = (
        'user',
        'role',
        'added_by',
        'added_datetime',
    )


class TripTagInline(admin.TabularInline):
    model = models.TripTag
    extra = 0


@admin.register( models.Trip )
class TripAdmin(admin.ModelAdmin):
    show_full_result_count = False

    list_display = (
        'name',
        'destination',
        'owner_link',
        'start_date',
        'end_date',
        'is_shared',
        'created_datetime',
    )

    list_filter = ( 'is_shared', 'start_date' )
    search_fields = [ 'name', 'destination', 'owner__username' ]
    readonly_fields = ( 'created_datetime', 'modified_datetime' )
    inlines = [ TripMemberInline, TripTagInline ]

    @admin_link( 'owner', 'Owner' )
    def owner_link(self, owner):
        return owner.username


@admin.register( models.TripTag )
class TripTagAdmin(admin.ModelAdmin):
    show_full_result_count = False

    list_display = ( 'name', 'color', 'trip_link' )
    list_select_related = ( 'trip', )
    search_fields = [ 'name', 'trip__name' ]

    @admin_link( 'trip', 'Trip' )
    def trip_link(self, trip):
        return trip.name

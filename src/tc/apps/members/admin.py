from django.contrib import admin

from tc.apps.common.admin_utils import admin_link

from . import models


@admin.register( models.TripMember )
class TripMemberAdmin(admin.ModelAdmin):
    show_full_result_count = False

    list_display = ( 'trip_link', 'user_link', 'role', 'can_edit', 'added_by_link', 'added_datetime' )
    list_select_related = ( 'trip', 'user', 'added_by' )
    list_filter = ( 'role', )
    search_fields = [ 'trip__name', 'user__username' ]
    readonly_fields = ( 'added_datetime', )

    @admin_link( 'trip', 'Trip' )
    def trip_link(self, trip):
        return trip.name

    @admin_link( 'user', 'User' )
    def user_link(self, user):
        return user.username

    @admin_link( 'added_by', 'Shared By' )
    def added_by_link(self, added_by):
        return added_by.username

    @admin.display( boolean = True, description = 'Can edit' )
    def can_edit(self, trip_member):
        return trip_member.role.can_edit

from django.contrib import admin

from tc.apps.common.admin_utils import admin_link

from . import models


@admin.register( models.Accommodation )
class AccommodationAdmin(admin.ModelAdmin):
    show_full_result_count = False

    list_display = ( 'name', 'trip_link', 'check_in', 'check_out', 'nights' )
    list_select_related = ( 'trip', )
    list_filter = ( 'check_in', )
    search_fields = [ 'name', 'address', 'confirmation_number', 'trip__name' ]
    readonly_fields = ( 'created_datetime', 'modified_datetime' )

    @admin_link( 'trip', 'Trip' )
    def trip_link(self, trip):
        return trip.name

from django.contrib import admin

from . import models


@admin.register( models.Schedule )
class ScheduleAdmin(admin.ModelAdmin):
    show_full_result_count = False

    list_display = (
        'title',
        'trip',
        'day',
        'time',
        'location',
    )
    list_filter = ( 'day', )
    search_fields = [ 'title', 'location', 'trip__name' ]

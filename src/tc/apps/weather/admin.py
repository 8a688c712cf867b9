from django.contrib import admin

from . import models


@admin.register( models.WeatherCache )
class WeatherCacheAdmin(admin.ModelAdmin):
    show_full_result_count = False

    list_display = ( 'location', 'timestamp' )
    search_fields = [ 'location' ]
    readonly_fields = ( 'location', 'data', 'timestamp' )
    ordering = ( '-timestamp', )

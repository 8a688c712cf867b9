from django.contrib import admin

from . import models


@admin.register( models.PackingCategory )
class PackingCategoryAdmin(admin.ModelAdmin):

    list_display = ( 'name', 'color' )
    search_fields = [ 'name' ]


@admin.register( models.PackingItem )
class PackingItemAdmin(admin.ModelAdmin):
    show_full_result_count = False

    list_display = (
        'name',
        'trip',
        'category',
        'quantity',
        'is_packed',
    )
    list_filter = ( 'is_packed', 'category' )
    search_fields = [ 'name', 'trip__name' ]

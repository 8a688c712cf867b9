from typing import Any, Dict

from tc.apps.trips.models import Trip

from .models import PackingCategory, PackingItem


class PackingItemService:

    UPDATABLE_FIELDS = (
        'name',
        'quantity',
        'category',
        'is_packed',
    )

    @classmethod
    def create( cls, trip : Trip, validated_data : Dict[ str, Any ] ) -> PackingItem:
        item_fields = {
            name: value for name, value in validated_data.items()
            if name in cls.UPDATABLE_FIELDS
        }
        return PackingItem.objects.create( trip = trip, **item_fields )

    @classmethod
    def update( cls, packing_item : PackingItem, validated_data : Dict[ str, Any ] ) -> PackingItem:
        update_fields = [ name for name in validated_data if name in cls.UPDATABLE_FIELDS ]
        for name in update_fields:
            setattr( packing_item, name, validated_data[name] )
            continue
        if update_fields:
            packing_item.save( update_fields = update_fields )
        return packing_item


class PackingCategoryService:

    @classmethod
    def create( cls, validated_data : Dict[ str, Any ] ) -> PackingCategory:
        return PackingCategory.objects.create( **validated_data )

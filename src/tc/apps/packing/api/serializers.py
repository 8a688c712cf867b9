from typing import Any, Dict

from rest_framework import serializers

from tc.apps.api.constants import APIFields as F
from tc.apps.api.serializers import StrictFieldsMixin
from tc.apps.packing.models import PackingCategory, PackingItem


class PackingItemSerializer( serializers.Serializer ):

    name = serializers.CharField( min_length = 2, max_length = 200 )
    quantity = serializers.IntegerField( min_value = 1, required = False )
    categoryId = serializers.PrimaryKeyRelatedField(
        source = 'category',
        queryset = PackingCategory.objects.all(),
        required = False,
        allow_null = True,
    )
    isPacked = serializers.BooleanField( source = 'is_packed', required = False )

    def to_representation( self, instance: PackingItem ) -> Dict[str, Any]:
        return {
            F.ID: instance.pk,
            F.TRIP_ID: instance.trip_id,
            F.CATEGORY_ID: instance.category_id,
            F.NAME: instance.name,
            F.QUANTITY: instance.quantity,
            F.IS_PACKED: instance.is_packed,
        }


class PackingItemPatchSerializer( StrictFieldsMixin, PackingItemSerializer ):
    pass


class PackingCategorySerializer( serializers.Serializer ):

    name = serializers.CharField( min_length = 1, max_length = 100 )
    color = serializers.CharField( max_length = 32, required = False )

    def to_representation( self, instance: PackingCategory ) -> Dict[str, Any]:
        return {
            F.ID: instance.pk,
            F.NAME: instance.name,
            F.COLOR: instance.color,
        }

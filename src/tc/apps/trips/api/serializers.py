from typing import Any, Dict

from rest_framework import serializers

from tc.apps.api.constants import APIFields as F
from tc.apps.api.messages import APIMessages as M
from tc.apps.api.serializers import StrictFieldsMixin
from tc.apps.trips.models import Trip, TripTag

# Browsers serialise Date objects as full ISO timestamps; accept those too.
DATE_INPUT_FORMATS = [ 'iso-8601', '%Y-%m-%dT%H:%M:%S.%fZ', '%Y-%m-%dT%H:%M:%SZ' ]


class TripSerializer( serializers.Serializer ):
    """
    Explicit serializer for Trip model with manual field mapping.

    Field attribute names are the camelCase JSON keys; `source` maps them
    onto model attributes, so validated_data is keyed by model names.
    """
    name = serializers.CharField( min_length = 3, max_length = 200 )
    destination = serializers.CharField( min_length = 2, max_length = 200 )
    startDate = serializers.DateField(
        source = 'start_date',
        input_formats = DATE_INPUT_FORMATS,
    )
    endDate = serializers.DateField(
        source = 'end_date',
        input_formats = DATE_INPUT_FORMATS,
    )
    imageUrl = serializers.CharField(
        source = 'image_url',
        max_length = 1024,
        required = False,
        allow_null = True,
        allow_blank = True,
    )
    description = serializers.CharField(
        required = False,
        allow_null = True,
        allow_blank = True,
    )

    def validate( self, attrs : Dict[ str, Any ] ) -> Dict[ str, Any ]:
        # Partial updates compare against whatever the trip already has.
        start_date = attrs.get( 'start_date', getattr( self.instance, 'start_date', None ))
        end_date = attrs.get( 'end_date', getattr( self.instance, 'end_date', None ))
        if start_date and end_date and end_date < start_date:
            raise serializers.ValidationError({ F.END_DATE: [ M.END_BEFORE_START ] })
        return attrs

    def to_representation( self, instance: Trip ) -> Dict[str, Any]:
        return {
            F.ID: instance.pk,
            F.USER_ID: instance.owner_id,
            F.NAME: instance.name,
            F.DESTINATION: instance.destination,
            F.START_DATE: instance.start_date.isoformat(),
            F.END_DATE: instance.end_date.isoformat(),
            F.IMAGE_URL: instance.image_url,
            F.DESCRIPTION: instance.description,
            F.IS_SHARED: instance.is_shared,
        }


class TripPatchSerializer( StrictFieldsMixin, TripSerializer ):
    """ Owner edits; ownership and the shared flag are not patchable. """
    pass


class TripTagSerializer( serializers.Serializer ):

    name = serializers.CharField( min_length = 1, max_length = 100 )
    color = serializers.CharField( max_length = 32, required = False )

    def to_representation( self, instance: TripTag ) -> Dict[str, Any]:
        return {
            F.ID: instance.pk,
            F.TRIP_ID: instance.trip_id,
            F.NAME: instance.name,
            F.COLOR: instance.color,
        }

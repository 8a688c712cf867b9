from typing import Any, Dict

from rest_framework import serializers

from tc.apps.accommodations.models import Accommodation
from tc.apps.api.constants import APIFields as F
from tc.apps.api.messages import APIMessages as M
from tc.apps.api.serializers import StrictFieldsMixin
from tc.apps.trips.api.serializers import DATE_INPUT_FORMATS


class AccommodationSerializer( serializers.Serializer ):

    name = serializers.CharField( min_length = 2, max_length = 200 )
    address = serializers.CharField( min_length = 2, max_length = 500 )
    checkIn = serializers.DateField(
        source = 'check_in',
        input_formats = DATE_INPUT_FORMATS,
    )
    checkOut = serializers.DateField(
        source = 'check_out',
        input_formats = DATE_INPUT_FORMATS,
    )
    confirmationNumber = serializers.CharField(
        source = 'confirmation_number',
        max_length = 100,
        required = False,
        allow_null = True,
        allow_blank = True,
    )
    notes = serializers.CharField(
        required = False,
        allow_null = True,
        allow_blank = True,
    )

    def validate( self, attrs : Dict[ str, Any ] ) -> Dict[ str, Any ]:
        check_in = attrs.get( 'check_in', getattr( self.instance, 'check_in', None ))
        check_out = attrs.get( 'check_out', getattr( self.instance, 'check_out', None ))
        if check_in and check_out and check_out < check_in:
            raise serializers.ValidationError({ F.CHECK_OUT: [ M.CHECK_OUT_BEFORE_CHECK_IN ] })
        return attrs

    def to_representation( self, instance: Accommodation ) -> Dict[str, Any]:
        return {
            F.ID: instance.pk,
            F.TRIP_ID: instance.trip_id,
            F.NAME: instance.name,
            F.ADDRESS: instance.address,
            F.CHECK_IN: instance.check_in.isoformat(),
            F.CHECK_OUT: instance.check_out.isoformat(),
            F.CONFIRMATION_NUMBER: instance.confirmation_number,
            F.NOTES: instance.notes,
        }


class AccommodationPatchSerializer( StrictFieldsMixin, AccommodationSerializer ):
    """ An accommodation cannot be moved to another trip. """
    pass

from typing import Any, Dict

from tc.apps.trips.models import Trip

from .models import Accommodation


class AccommodationService:

    UPDATABLE_FIELDS = (
        'name',
        'address',
        'check_in',
        'check_out',
        'confirmation_number',
        'notes',
    )

    @classmethod
    def create( cls, trip : Trip, validated_data : Dict[ str, Any ] ) -> Accommodation:
        accommodation_fields = {
            name: validated_data[name] for name in cls.UPDATABLE_FIELDS
            if name in validated_data
        }
        return Accommodation.objects.create( trip = trip, **accommodation_fields )

    @classmethod
    def update( cls,
                accommodation  : Accommodation,
                validated_data : Dict[ str, Any ] ) -> Accommodation:
        update_fields = [ name for name in cls.UPDATABLE_FIELDS if name in validated_data ]
        for name in update_fields:
            setattr( accommodation, name, validated_data[name] )
            continue
        if update_fields:
            accommodation.save( update_fields = update_fields + [ 'modified_datetime' ] )
        return accommodation

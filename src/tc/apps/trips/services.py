"""
Trip and trip tag persistence operations, kept out of serializers and
views.  Callers pass serializer validated_data, whose keys are already
model attribute names.
"""
import logging
from typing import Any, Dict

from django.db import transaction

from .models import Trip, TripTag

logger = logging.getLogger(__name__)


class TripService:

    # The only Trip attributes a PATCH may touch.
    UPDATABLE_FIELDS = (
        'name',
        'destination',
        'start_date',
        'end_date',
        'image_url',
        'description',
    )

    @classmethod
    def create( cls, owner, validated_data : Dict[ str, Any ] ) -> Trip:
        trip_fields = {
            name: value for name, value in validated_data.items()
            if name in cls.UPDATABLE_FIELDS
        }
        trip = Trip.objects.create( owner = owner, **trip_fields )
        logger.debug( f'Created trip {trip.pk} for user {owner.pk}' )
        return trip

    @classmethod
    def update( cls, trip : Trip, validated_data : Dict[ str, Any ] ) -> Trip:
        update_fields = list()
        with transaction.atomic():
            for name, value in validated_data.items():
                if name not in cls.UPDATABLE_FIELDS:
                    continue
                setattr( trip, name, value )
                update_fields.append( name )
                continue
            if update_fields:
                update_fields.append( 'modified_datetime' )
                trip.save( update_fields = update_fields )
        return trip

    @classmethod
    def delete( cls, trip : Trip ) -> None:
        """ Schedules, packing items, tags and memberships go with it. """
        trip_id = trip.pk
        trip.delete()
        logger.debug( f'Deleted trip {trip_id}' )
        return


class TripTagService:

    @classmethod
    def create( cls, trip : Trip, validated_data : Dict[ str, Any ] ) -> TripTag:
        return TripTag.objects.create( trip = trip, **validated_data )

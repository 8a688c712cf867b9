from typing import Any, Dict

from tc.apps.trips.models import Trip

from .models import Schedule


class ScheduleService:

    UPDATABLE_FIELDS = (
        'day',
        'title',
        'time',
        'location',
        'description',
    )

    @classmethod
    def create( cls, trip : Trip, validated_data : Dict[ str, Any ] ) -> Schedule:
        schedule_fields = {
            name: value for name, value in validated_data.items()
            if name in cls.UPDATABLE_FIELDS
        }
        return Schedule.objects.create( trip = trip, **schedule_fields )

    @classmethod
    def update( cls, schedule : Schedule, validated_data : Dict[ str, Any ] ) -> Schedule:
        update_fields = [ name for name in validated_data if name in cls.UPDATABLE_FIELDS ]
        for name in update_fields:
            setattr( schedule, name, validated_data[name] )
            continue
        if update_fields:
            schedule.save( update_fields = update_fields )
        return schedule

from typing import Any, Dict

from rest_framework import serializers

from tc.apps.api.constants import APIFields as F
from tc.apps.api.serializers import StrictFieldsMixin
from tc.apps.schedules.models import Schedule
from tc.apps.trips.api.serializers import DATE_INPUT_FORMATS


class ScheduleSerializer( serializers.Serializer ):

    day = serializers.DateField( input_formats = DATE_INPUT_FORMATS )
    title = serializers.CharField( min_length = 2, max_length = 200 )
    time = serializers.CharField(
        max_length = 32,
        required = False,
        allow_null = True,
        allow_blank = True,
    )
    location = serializers.CharField(
        max_length = 255,
        required = False,
        allow_null = True,
        allow_blank = True,
    )
    description = serializers.CharField(
        required = False,
        allow_null = True,
        allow_blank = True,
    )

    def to_representation( self, instance: Schedule ) -> Dict[str, Any]:
        return {
            F.ID: instance.pk,
            F.TRIP_ID: instance.trip_id,
            F.DAY: instance.day.isoformat(),
            F.TITLE: instance.title,
            F.TIME: instance.time,
            F.LOCATION: instance.location,
            F.DESCRIPTION: instance.description,
        }


class SchedulePatchSerializer( StrictFieldsMixin, ScheduleSerializer ):
    """ A schedule cannot be moved to another trip. """
    pass

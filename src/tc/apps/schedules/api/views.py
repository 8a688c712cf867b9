from rest_framework import status
from rest_framework.exceptions import NotFound, ValidationError
from rest_framework.request import Request
from rest_framework.response import Response

from tc.apps.api.constants import APIFields as F
from tc.apps.api.messages import APIMessages as M
from tc.apps.api.utils import get_int
from tc.apps.api.views import TcApiView
from tc.apps.schedules.models import Schedule
from tc.apps.schedules.services import ScheduleService
from tc.apps.trips.mixins import TripViewMixin

from .serializers import SchedulePatchSerializer, ScheduleSerializer


class ScheduleCreateMixin:

    def create_schedule( self, request : Request, trip ) -> Response:
        serializer = ScheduleSerializer( data = request.data )
        serializer.is_valid( raise_exception = True )

        schedule = ScheduleService.create(
            trip = trip,
            validated_data = serializer.validated_data,
        )
        return Response( ScheduleSerializer( schedule ).data, status = status.HTTP_201_CREATED )


class TripScheduleCollectionView( ScheduleCreateMixin, TripViewMixin, TcApiView ):
    """
    GET /api/trips/{id}/schedules    readers; ordered by day then time
    POST /api/trips/{id}/schedules   writers (owner or editor)
    """

    def get( self, request: Request, trip_id: int ) -> Response:
        trip = self.get_readable_trip( request, trip_id )
        schedules = Schedule.objects.for_trip( trip )
        return Response( ScheduleSerializer( schedules, many = True ).data )

    def post( self, request: Request, trip_id: int ) -> Response:
        trip = self.get_writable_trip( request, trip_id )
        return self.create_schedule( request, trip )


class UserScheduleCollectionView( ScheduleCreateMixin, TripViewMixin, TcApiView ):
    """
    GET /api/schedules    schedules of every readable trip
    POST /api/schedules   same as the trip-scoped POST with tripId in the body
    """

    def get( self, request: Request ) -> Response:
        schedules = Schedule.objects.for_user( request.user )
        return Response( ScheduleSerializer( schedules, many = True ).data )

    def post( self, request: Request ) -> Response:
        trip_id = get_int( request.data, F.TRIP_ID )
        if trip_id is None:
            raise ValidationError({ F.TRIP_ID: [ M.is_required( 'Trip id' ) ] })
        trip = self.get_writable_trip( request, trip_id )
        return self.create_schedule( request, trip )


class ScheduleItemView( TripViewMixin, TcApiView ):
    """
    GET /api/schedules/{id}       readers of the schedule's trip
    PATCH /api/schedules/{id}     writers
    DELETE /api/schedules/{id}    writers
    """

    def _get_schedule( self, schedule_id : int ) -> Schedule:
        try:
            return Schedule.objects.select_related( 'trip' ).get( pk = schedule_id )
        except Schedule.DoesNotExist:
            raise NotFound( M.not_found( 'Schedule' ))

    def get( self, request: Request, schedule_id: int ) -> Response:
        schedule = self._get_schedule( schedule_id )
        self.assert_can_read( request, schedule.trip )
        return Response( ScheduleSerializer( schedule ).data )

    def patch( self, request: Request, schedule_id: int ) -> Response:
        schedule = self._get_schedule( schedule_id )
        self.assert_can_write( request, schedule.trip )

        serializer = SchedulePatchSerializer( schedule, data = request.data, partial = True )
        serializer.is_valid( raise_exception = True )

        schedule = ScheduleService.update(
            schedule = schedule,
            validated_data = serializer.validated_data,
        )
        return Response( ScheduleSerializer( schedule ).data )

    def delete( self, request: Request, schedule_id: int ) -> Response:
        schedule = self._get_schedule( schedule_id )
        self.assert_can_write( request, schedule.trip )
        schedule.delete()
        return Response( status = status.HTTP_204_NO_CONTENT )

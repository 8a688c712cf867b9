from rest_framework import status
from rest_framework.exceptions import NotFound
from rest_framework.request import Request
from rest_framework.response import Response

from tc.apps.api.messages import APIMessages as M
from tc.apps.api.views import TcApiView
from tc.apps.trips.mixins import TripViewMixin
from tc.apps.trips.models import Trip, TripTag
from tc.apps.trips.services import TripService, TripTagService

from .serializers import TripPatchSerializer, TripSerializer, TripTagSerializer


class TripCollectionView( TcApiView ):
    """
    GET /api/trips
    Trips the user owns or has been shared, most recent start date first.

    POST /api/trips
    Creates a trip owned by the user.
    """

    def get( self, request: Request ) -> Response:
        trips = Trip.objects.for_user( request.user )
        serializer = TripSerializer( trips, many = True )
        return Response( serializer.data )

    def post( self, request: Request ) -> Response:
        serializer = TripSerializer( data = request.data )
        serializer.is_valid( raise_exception = True )

        trip = TripService.create(
            owner = request.user,
            validated_data = serializer.validated_data,
        )
        return Response( TripSerializer( trip ).data, status = status.HTTP_201_CREATED )


class TripItemView( TripViewMixin, TcApiView ):
    """
    GET /api/trips/{id}      any member or the owner
    PATCH /api/trips/{id}    owner only
    DELETE /api/trips/{id}   owner only; cascades to all child entities
    """

    def get( self, request: Request, trip_id: int ) -> Response:
        trip = self.get_readable_trip( request, trip_id )
        return Response( TripSerializer( trip ).data )

    def patch( self, request: Request, trip_id: int ) -> Response:
        trip = self.get_owned_trip( request, trip_id )

        serializer = TripPatchSerializer( trip, data = request.data, partial = True )
        serializer.is_valid( raise_exception = True )

        trip = TripService.update(
            trip = trip,
            validated_data = serializer.validated_data,
        )
        return Response( TripSerializer( trip ).data )

    def delete( self, request: Request, trip_id: int ) -> Response:
        trip = self.get_owned_trip( request, trip_id )
        TripService.delete( trip )
        return Response( status = status.HTTP_204_NO_CONTENT )


class SharedTripCollectionView( TcApiView ):
    """
    GET /api/shared-trips
    Trips other users have shared with the requesting user.
    """

    def get( self, request: Request ) -> Response:
        trips = Trip.objects.shared_with( request.user ).order_by( '-start_date', '-id' )
        serializer = TripSerializer( trips, many = True )
        return Response( serializer.data )


class UserTripTagCollectionView( TcApiView ):
    """
    GET /api/trip-tags
    Tags of every trip the user can read.
    """

    def get( self, request: Request ) -> Response:
        trip_tags = TripTag.objects.for_user( request.user )
        serializer = TripTagSerializer( trip_tags, many = True )
        return Response( serializer.data )


class TripTagCollectionView( TripViewMixin, TcApiView ):
    """
    GET /api/trips/{id}/tags    readers
    POST /api/trips/{id}/tags   writers
    """

    def get( self, request: Request, trip_id: int ) -> Response:
        trip = self.get_readable_trip( request, trip_id )
        serializer = TripTagSerializer( TripTag.objects.for_trip( trip ), many = True )
        return Response( serializer.data )

    def post( self, request: Request, trip_id: int ) -> Response:
        trip = self.get_writable_trip( request, trip_id )

        serializer = TripTagSerializer( data = request.data )
        serializer.is_valid( raise_exception = True )

        trip_tag = TripTagService.create(
            trip = trip,
            validated_data = serializer.validated_data,
        )
        return Response( TripTagSerializer( trip_tag ).data, status = status.HTTP_201_CREATED )


class TripTagItemView( TripViewMixin, TcApiView ):
    """
    DELETE /api/trip-tags/{id}   writers of the tag's trip
    """

    def delete( self, request: Request, tag_id: int ) -> Response:
        try:
            trip_tag = TripTag.objects.select_related( 'trip' ).get( pk = tag_id )
        except TripTag.DoesNotExist:
            raise NotFound( M.not_found( 'Trip tag' ))

        self.assert_can_write( request, trip_tag.trip )
        trip_tag.delete()
        return Response( status = status.HTTP_204_NO_CONTENT )

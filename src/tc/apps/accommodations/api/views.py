from rest_framework import status
from rest_framework.exceptions import NotFound
from rest_framework.request import Request
from rest_framework.response import Response

from tc.apps.accommodations.models import Accommodation
from tc.apps.accommodations.services import AccommodationService
from tc.apps.api.messages import APIMessages as M
from tc.apps.api.views import TcApiView
from tc.apps.trips.mixins import TripViewMixin

from .serializers import AccommodationPatchSerializer, AccommodationSerializer


class TripAccommodationCollectionView( TripViewMixin, TcApiView ):
    """
    GET /api/trips/{id}/accommodations    readers; ordered by check-in
    POST /api/trips/{id}/accommodations   writers (owner or editor)
    """

    def get( self, request: Request, trip_id: int ) -> Response:
        trip = self.get_readable_trip( request, trip_id )
        accommodations = Accommodation.objects.for_trip( trip )
        return Response( AccommodationSerializer( accommodations, many = True ).data )

    def post( self, request: Request, trip_id: int ) -> Response:
        trip = self.get_writable_trip( request, trip_id )

        serializer = AccommodationSerializer( data = request.data )
        serializer.is_valid( raise_exception = True )

        accommodation = AccommodationService.create(
            trip = trip,
            validated_data = serializer.validated_data,
        )
        return Response( AccommodationSerializer( accommodation ).data, status = status.HTTP_201_CREATED )


class AccommodationItemView( TripViewMixin, TcApiView ):
    """
    GET /api/accommodations/{id}       readers of the accommodation's trip
    PATCH /api/accommodations/{id}     writers
    DELETE /api/accommodations/{id}    writers
    """

    def _get_accommodation( self, accommodation_id : int ) -> Accommodation:
        try:
            return Accommodation.objects.select_related( 'trip' ).get( pk = accommodation_id )
        except Accommodation.DoesNotExist:
            raise NotFound( M.not_found( 'Accommodation' ))

    def get( self, request: Request, accommodation_id: int ) -> Response:
        accommodation = self._get_accommodation( accommodation_id )
        self.assert_can_read( request, accommodation.trip )
        return Response( AccommodationSerializer( accommodation ).data )

    def patch( self, request: Request, accommodation_id: int ) -> Response:
        accommodation = self._get_accommodation( accommodation_id )
        self.assert_can_write( request, accommodation.trip )

        serializer = AccommodationPatchSerializer( accommodation, data = request.data, partial = True )
        serializer.is_valid( raise_exception = True )

        accommodation = AccommodationService.update(
            accommodation = accommodation,
            validated_data = serializer.validated_data,
        )
        return Response( AccommodationSerializer( accommodation ).data )

    def delete( self, request: Request, accommodation_id: int ) -> Response:
        accommodation = self._get_accommodation( accommodation_id )
        self.assert_can_write( request, accommodation.trip )
        accommodation.delete()
        return Response( status = status.HTTP_204_NO_CONTENT )

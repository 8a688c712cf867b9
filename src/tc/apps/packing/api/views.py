from rest_framework import status
from rest_framework.exceptions import NotFound, ValidationError
from rest_framework.permissions import AllowAny, IsAuthenticated
from rest_framework.request import Request
from rest_framework.response import Response

from tc.apps.api.constants import APIFields as F
from tc.apps.api.messages import APIMessages as M
from tc.apps.api.utils import get_int
from tc.apps.api.views import TcApiView
from tc.apps.packing.models import PackingCategory, PackingItem
from tc.apps.packing.services import PackingCategoryService, PackingItemService
from tc.apps.trips.mixins import TripViewMixin

from .serializers import (
    PackingCategorySerializer,
    PackingItemPatchSerializer,
    PackingItemSerializer,
)


class PackingItemCreateMixin:

    def create_packing_item( self, request : Request, trip ) -> Response:
        serializer = PackingItemSerializer( data = request.data )
        serializer.is_valid( raise_exception = True )

        packing_item = PackingItemService.create(
            trip = trip,
            validated_data = serializer.validated_data,
        )
        return Response( PackingItemSerializer( packing_item ).data, status = status.HTTP_201_CREATED )


class TripPackingItemCollectionView( PackingItemCreateMixin, TripViewMixin, TcApiView ):
    """
    GET /api/trips/{id}/packing-items    readers; ordered by category then name
    POST /api/trips/{id}/packing-items   writers (owner or editor)
    """

    def get( self, request: Request, trip_id: int ) -> Response:
        trip = self.get_readable_trip( request, trip_id )
        packing_items = PackingItem.objects.for_trip( trip )
        return Response( PackingItemSerializer( packing_items, many = True ).data )

    def post( self, request: Request, trip_id: int ) -> Response:
        trip = self.get_writable_trip( request, trip_id )
        return self.create_packing_item( request, trip )


class UserPackingItemCollectionView( PackingItemCreateMixin, TripViewMixin, TcApiView ):
    """
    GET /api/packing-items    items of every readable trip
    POST /api/packing-items   same as the trip-scoped POST with tripId in the body
    """

    def get( self, request: Request ) -> Response:
        packing_items = PackingItem.objects.for_user( request.user )
        return Response( PackingItemSerializer( packing_items, many = True ).data )

    def post( self, request: Request ) -> Response:
        trip_id = get_int( request.data, F.TRIP_ID )
        if trip_id is None:
            raise ValidationError({ F.TRIP_ID: [ M.is_required( 'Trip id' ) ] })
        trip = self.get_writable_trip( request, trip_id )
        return self.create_packing_item( request, trip )


class PackingItemItemView( TripViewMixin, TcApiView ):
    """
    PATCH /api/packing-items/{id}     writers of the item's trip
    DELETE /api/packing-items/{id}    writers
    """

    def _get_packing_item( self, item_id : int ) -> PackingItem:
        try:
            return PackingItem.objects.select_related( 'trip' ).get( pk = item_id )
        except PackingItem.DoesNotExist:
            raise NotFound( M.not_found( 'Packing item' ))

    def patch( self, request: Request, item_id: int ) -> Response:
        packing_item = self._get_packing_item( item_id )
        self.assert_can_write( request, packing_item.trip )

        serializer = PackingItemPatchSerializer( packing_item, data = request.data, partial = True )
        serializer.is_valid( raise_exception = True )

        packing_item = PackingItemService.update(
            packing_item = packing_item,
            validated_data = serializer.validated_data,
        )
        return Response( PackingItemSerializer( packing_item ).data )

    def delete( self, request: Request, item_id: int ) -> Response:
        packing_item = self._get_packing_item( item_id )
        self.assert_can_write( request, packing_item.trip )
        packing_item.delete()
        return Response( status = status.HTTP_204_NO_CONTENT )


class PackingCategoryCollectionView( TcApiView ):
    """
    GET /api/packing-categories    public reference data, ordered by name
    POST /api/packing-categories   any signed-in user
    """

    def get_permissions( self ):
        if self.request.method == 'GET':
            return [ AllowAny() ]
        return [ IsAuthenticated() ]

    def get( self, request: Request ) -> Response:
        packing_categories = PackingCategory.objects.ordered()
        return Response( PackingCategorySerializer( packing_categories, many = True ).data )

    def post( self, request: Request ) -> Response:
        serializer = PackingCategorySerializer( data = request.data )
        serializer.is_valid( raise_exception = True )
        packing_category = PackingCategoryService.create( serializer.validated_data )
        return Response(
            PackingCategorySerializer( packing_category ).data,
            status = status.HTTP_201_CREATED,
        )

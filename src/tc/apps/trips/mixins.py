from typing import List

from rest_framework.exceptions import NotFound, PermissionDenied
from rest_framework.request import Request

from tc.apps.api.messages import APIMessages as M
from tc.apps.members.models import TripMember

from .models import Trip
from .policy import TripAccessPolicy


class TripViewMixin:
    """
    Resolves a trip for an API view and applies the access policy,
    turning a missing trip into 404 and a denied policy check into 403.
    """

    def get_trip( self, trip_id : int ) -> Trip:
        try:
            return Trip.objects.get( pk = trip_id )
        except Trip.DoesNotExist:
            raise NotFound( M.not_found( 'Trip' ))

    def get_trip_members( self, trip : Trip ) -> List[ TripMember ]:
        return list( TripMember.objects.for_trip( trip ))

    def assert_can_read( self, request : Request, trip : Trip ) -> None:
        members = self.get_trip_members( trip )
        if not TripAccessPolicy.can_read( request.user, trip, members ):
            raise PermissionDenied( M.TRIP_READ_DENIED )

    def assert_can_write( self, request : Request, trip : Trip ) -> None:
        members = self.get_trip_members( trip )
        if not TripAccessPolicy.can_write( request.user, trip, members ):
            raise PermissionDenied( M.TRIP_WRITE_DENIED )

    def assert_is_owner( self, request : Request, trip : Trip ) -> None:
        if not TripAccessPolicy.can_manage( request.user, trip ):
            raise PermissionDenied( M.TRIP_OWNER_ONLY )

    def get_readable_trip( self, request : Request, trip_id : int ) -> Trip:
        trip = self.get_trip( trip_id )
        self.assert_can_read( request, trip )
        return trip

    def get_writable_trip( self, request : Request, trip_id : int ) -> Trip:
        trip = self.get_trip( trip_id )
        self.assert_can_write( request, trip )
        return trip

    def get_owned_trip( self, request : Request, trip_id : int ) -> Trip:
        trip = self.get_trip( trip_id )
        self.assert_is_owner( request, trip )
        return trip

from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response

from tc.apps.api.views import TcApiView
from tc.apps.members.models import TripMember
from tc.apps.members.services import TripSharingService
from tc.apps.trips.mixins import TripViewMixin

from .serializers import TripMemberSerializer, TripShareSerializer


class TripShareView( TripViewMixin, TcApiView ):
    """
    POST /api/trips/{id}/share
    Owner grants another user viewer (default) or editor access.
    """

    def post( self, request: Request, trip_id: int ) -> Response:
        trip = self.get_owned_trip( request, trip_id )

        serializer = TripShareSerializer( data = request.data )
        serializer.is_valid( raise_exception = True )

        trip_member = TripSharingService.share_trip(
            owner_user = request.user,
            trip = trip,
            target_username = serializer.validated_data['username'],
            role = serializer.validated_data['role'],
        )
        return Response(
            TripMemberSerializer( trip_member ).data,
            status = status.HTTP_201_CREATED,
        )


class TripMemberCollectionView( TripViewMixin, TcApiView ):
    """
    GET /api/trips/{id}/members
    Anyone who can read the trip can see who else can.
    """

    def get( self, request: Request, trip_id: int ) -> Response:
        trip = self.get_readable_trip( request, trip_id )
        trip_members = TripMember.objects.for_trip( trip )
        return Response( TripMemberSerializer( trip_members, many = True ).data )


class TripMemberItemView( TripViewMixin, TcApiView ):
    """
    DELETE /api/trips/{id}/members/{user_id}
    Owner revokes a member's access.
    """

    def delete( self, request: Request, trip_id: int, user_id: int ) -> Response:
        trip = self.get_owned_trip( request, trip_id )
        TripSharingService.remove_member(
            owner_user = request.user,
            trip = trip,
            user_id = user_id,
        )
        return Response( status = status.HTTP_204_NO_CONTENT )

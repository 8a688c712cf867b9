from typing import Any, Dict

from rest_framework import serializers

from tc.apps.api.constants import APIFields as F
from tc.apps.members.models import TripMember
from tc.apps.trips.enums import TripMemberRole


class TripShareSerializer( serializers.Serializer ):
    """ Body of a share request: { username, role? } """
    username = serializers.CharField( max_length = 150 )
    role = serializers.ChoiceField(
        choices = [ str( x ) for x in TripMemberRole.shareable() ],
        required = False,
        default = str( TripMemberRole.default() ),
    )

    def validate_role( self, value : str ) -> TripMemberRole:
        return TripMemberRole.from_name( value )


class TripMemberSerializer( serializers.Serializer ):

    def to_representation( self, instance: TripMember ) -> Dict[str, Any]:
        return {
            F.ID: instance.pk,
            F.TRIP_ID: instance.trip_id,
            F.USER_ID: instance.user_id,
            F.USERNAME: instance.user.username,
            F.ROLE: str( instance.role ),
        }

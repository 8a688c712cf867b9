import logging

from django.contrib.auth import get_user_model
from django.db import IntegrityError, transaction

from tc.apps.api.messages import APIMessages as M
from tc.apps.trips.enums import TripMemberRole
from tc.apps.trips.models import Trip
from tc.apps.trips.policy import TripAccessPolicy
from tc.exceptions import (
    AccessDeniedError,
    ConflictError,
    EntityNotFoundError,
    InvalidRequestError,
)

from .models import TripMember

User = get_user_model()
logger = logging.getLogger(__name__)


class TripSharingService:
    """
    Grants and revokes other users' access to a trip.

    Sharing is deliberately not idempotent: a second share of the same
    trip with the same user is a ConflictError, never an update.
    """

    @classmethod
    def share_trip( cls,
                    owner_user       : User,
                    trip             : Trip,
                    target_username  : str,
                    role             : TripMemberRole = None ) -> TripMember:
        """
        Checks, in order: ownership (AccessDeniedError), a shareable role
        and a username (InvalidRequestError), the target user exists
        (EntityNotFoundError), the target is not the owner
        (InvalidRequestError), no existing membership (ConflictError).
        The shared-flag flip and the membership insert commit together.
        """
        if not TripAccessPolicy.can_manage( owner_user, trip ):
            raise AccessDeniedError( M.TRIP_OWNER_ONLY )

        if role is None:
            role = TripMemberRole.default()
        if role not in TripMemberRole.shareable():
            raise InvalidRequestError( f'Role "{role}" cannot be granted by sharing' )

        target_username = ( target_username or '' ).strip()
        if not target_username:
            raise InvalidRequestError( M.is_required( 'Username' ))
        try:
            target_user = User.objects.get( username = target_username )
        except User.DoesNotExist:
            raise EntityNotFoundError( M.not_found( 'User' ))

        if target_user.pk == trip.owner_id:
            raise InvalidRequestError( M.SHARE_WITH_SELF )

        with transaction.atomic():
            locked_trip = Trip.objects.select_for_update().get( pk = trip.pk )

            if TripMember.objects.filter( trip = locked_trip, user = target_user ).exists():
                logger.debug( f'Trip {trip.pk} already shared with user {target_user.pk}' )
                raise ConflictError( M.ALREADY_SHARED )

            if not locked_trip.is_shared:
                locked_trip.is_shared = True
                locked_trip.save( update_fields = [ 'is_shared', 'modified_datetime' ] )

            try:
                trip_member = TripMember.objects.create(
                    trip = locked_trip,
                    user = target_user,
                    role = role,
                    added_by = owner_user,
                )
            except IntegrityError:
                # Lost a race with a concurrent share of the same pair.
                raise ConflictError( M.ALREADY_SHARED )

        trip.is_shared = True
        logger.info( f'Trip {trip.pk} shared with user {target_user.pk} as {role}' )
        return trip_member

    @classmethod
    def remove_member( cls,
                       owner_user  : User,
                       trip        : Trip,
                       user_id     : int ) -> None:
        """ Revoking access leaves the trip's shared flag set. """
        if not TripAccessPolicy.can_manage( owner_user, trip ):
            raise AccessDeniedError( M.TRIP_OWNER_ONLY )

        deleted_count, _ = TripMember.objects.filter( trip = trip, user_id = user_id ).delete()
        if not deleted_count:
            raise EntityNotFoundError( M.not_found( 'Trip member' ))

        logger.info( f'Removed user {user_id} from trip {trip.pk}' )
        return

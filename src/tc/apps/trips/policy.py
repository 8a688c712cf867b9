"""
Access decisions for a trip and its child entities (schedules, packing
items, tags).

These are pure functions of (user, trip, memberships): no queries, no
exceptions.  Resolving the trip (and answering "not found") happens before
a policy is consulted, and translating a False answer into an error is the
caller's job.
"""
from typing import Iterable


class TripAccessPolicy:

    @classmethod
    def is_owner( cls, user, trip ) -> bool:
        user_id = getattr( user, 'pk', None )
        return bool( user_id is not None and user_id == trip.owner_id )

    @classmethod
    def membership_for( cls, user, trip, members : Iterable ):
        user_id = getattr( user, 'pk', None )
        if user_id is None:
            return None
        for trip_member in members:
            if trip_member.trip_id == trip.pk and trip_member.user_id == user_id:
                return trip_member
            continue
        return None

    @classmethod
    def can_read( cls, user, trip, members : Iterable ) -> bool:
        """ Owner, or any member regardless of role. """
        if cls.is_owner( user, trip ):
            return True
        return bool( cls.membership_for( user, trip, members ) is not None )

    @classmethod
    def can_write( cls, user, trip, members : Iterable ) -> bool:
        """ Owner, or a member whose role is editor or owner. """
        if cls.is_owner( user, trip ):
            return True
        trip_member = cls.membership_for( user, trip, members )
        return bool( trip_member is not None and trip_member.role.can_edit )

    @classmethod
    def can_manage( cls, user, trip ) -> bool:
        """ Changing the trip itself, deleting it and sharing it. """
        return cls.is_owner( user, trip )

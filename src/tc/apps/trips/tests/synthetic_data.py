"""
Synthetic data generators for users, trips and memberships.

Creates real database rows (never mocks) for use in Django tests.
"""
from datetime import timedelta

from django.contrib.auth import get_user_model

from tc.apps.common import datetimeproxy
from tc.apps.members.models import TripMember
from tc.apps.trips.enums import TripMemberRole
from tc.apps.trips.models import Trip, TripTag

User = get_user_model()

TEST_PASSWORD = 'testpass123'


class TripSyntheticData:
    """Factory methods for creating Trip test data with proper relationships."""

    @staticmethod
    def create_test_user( username, password = TEST_PASSWORD, **kwargs ):
        kwargs.setdefault( 'email', f'{username}@example.com' )
        kwargs.setdefault( 'name', username.title() )
        return User.objects.create_user(
            username = username,
            password = password,
            **kwargs
        )

    @staticmethod
    def create_test_trip( user, name = 'Test Trip', destination = 'Paris',
                          start_date = None, end_date = None, **kwargs ):
        """
        Create a Trip owned by user.  Dates default to a week-long trip
        starting ten days from (proxied) today.
        """
        if start_date is None:
            start_date = datetimeproxy.today() + timedelta( days = 10 )
        if end_date is None:
            end_date = start_date + timedelta( days = 7 )
        return Trip.objects.create(
            owner = user,
            name = name,
            destination = destination,
            start_date = start_date,
            end_date = end_date,
            **kwargs
        )

    @staticmethod
    def add_trip_member( trip, user, role = TripMemberRole.VIEWER, added_by = None ):
        """
        Adds the membership row directly, bypassing the sharing service,
        but keeps the trip's shared flag consistent with it.
        """
        if added_by is None:
            added_by = trip.owner
        if not trip.is_shared:
            trip.is_shared = True
            trip.save( update_fields = [ 'is_shared' ] )
        return TripMember.objects.create(
            trip = trip,
            user = user,
            role = role,
            added_by = added_by,
        )

    @staticmethod
    def create_test_tag( trip, name = 'Beach', color = '#00aaff' ):
        return TripTag.objects.create( trip = trip, name = name, color = color )

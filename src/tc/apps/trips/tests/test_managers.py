import logging
from datetime import date

from django.test import TestCase

from tc.apps.accommodations.models import Accommodation
from tc.apps.members.models import TripMember
from tc.apps.packing.models import PackingItem
from tc.apps.schedules.models import Schedule
from tc.apps.trips.enums import TripMemberRole
from tc.apps.trips.models import Trip, TripTag
from tc.apps.trips.tests.synthetic_data import TripSyntheticData

logging.disable(logging.CRITICAL)


class TripManagerTestCase(TestCase):

    @classmethod
    def setUpTestData(cls):
        cls.owner = TripSyntheticData.create_test_user( 'owner' )
        cls.member = TripSyntheticData.create_test_user( 'member' )
        cls.other = TripSyntheticData.create_test_user( 'other' )

        cls.owned_trip = TripSyntheticData.create_test_trip(
            cls.member, name = 'Own Trip', start_date = date( 2025, 3, 1 ),
        )
        cls.shared_trip = TripSyntheticData.create_test_trip(
            cls.owner, name = 'Shared Trip', start_date = date( 2025, 5, 1 ),
        )
        TripSyntheticData.add_trip_member( cls.shared_trip, cls.member, role = TripMemberRole.EDITOR )
        cls.unrelated_trip = TripSyntheticData.create_test_trip(
            cls.other, name = 'Unrelated', start_date = date( 2025, 4, 1 ),
        )

    def test_for_user_is_owned_plus_shared(self):
        trips = list( Trip.objects.for_user( self.member ))
        self.assertEqual( trips, [ self.shared_trip, self.owned_trip ] )

    def test_for_user_no_duplicates_with_several_members(self):
        third = TripSyntheticData.create_test_user( 'third' )
        TripSyntheticData.add_trip_member( self.shared_trip, third )
        trips = list( Trip.objects.for_user( self.owner ))
        self.assertEqual( trips, [ self.shared_trip ] )

    def test_owned_by_and_shared_with(self):
        self.assertEqual( list( Trip.objects.owned_by( self.member )), [ self.owned_trip ] )
        self.assertEqual( list( Trip.objects.shared_with( self.member )), [ self.shared_trip ] )
        self.assertEqual( list( Trip.objects.shared_with( self.owner )), [] )

    def test_upcoming_for_user(self):
        trips = list( Trip.objects.upcoming_for_user( self.member, date( 2025, 3, 1 )))
        self.assertEqual( trips, [ self.owned_trip, self.shared_trip ] )

        trips = list( Trip.objects.upcoming_for_user( self.member, date( 2025, 3, 2 )))
        self.assertEqual( trips, [ self.shared_trip ] )

    def test_tags_for_user(self):
        TripSyntheticData.create_test_tag( self.shared_trip, name = 'Family' )
        TripSyntheticData.create_test_tag( self.unrelated_trip, name = 'Secret' )
        names = [ tag.name for tag in TripTag.objects.for_user( self.member ) ]
        self.assertEqual( names, [ 'Family' ] )


class TripCascadeTestCase(TestCase):

    def test_delete_trip_removes_children(self):
        owner = TripSyntheticData.create_test_user( 'owner' )
        viewer = TripSyntheticData.create_test_user( 'viewer' )
        trip = TripSyntheticData.create_test_trip( owner )
        TripSyntheticData.add_trip_member( trip, viewer )
        TripSyntheticData.create_test_tag( trip )
        Schedule.objects.create( trip = trip, day = trip.start_date, title = 'Museum' )
        PackingItem.objects.create( trip = trip, name = 'Socks' )
        Accommodation.objects.create(
            trip = trip, name = 'Hotel', address = 'Main St',
            check_in = trip.start_date, check_out = trip.end_date,
        )

        trip.delete()

        self.assertFalse( TripMember.objects.exists() )
        self.assertFalse( TripTag.objects.exists() )
        self.assertFalse( Schedule.objects.exists() )
        self.assertFalse( PackingItem.objects.exists() )
        self.assertFalse( Accommodation.objects.exists() )

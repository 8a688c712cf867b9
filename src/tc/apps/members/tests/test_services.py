import logging

from django.test import TestCase

from tc.apps.members.models import TripMember
from tc.apps.members.services import TripSharingService
from tc.apps.trips.enums import TripMemberRole
from tc.apps.trips.tests.synthetic_data import TripSyntheticData
from tc.exceptions import (
    AccessDeniedError,
    ConflictError,
    EntityNotFoundError,
    InvalidRequestError,
)

logging.disable(logging.CRITICAL)


class TripSharingServiceTestCase(TestCase):

    @classmethod
    def setUpTestData(cls):
        cls.owner = TripSyntheticData.create_test_user( 'owner' )
        cls.friend = TripSyntheticData.create_test_user( 'friend' )
        cls.editor = TripSyntheticData.create_test_user( 'editor' )

    def setUp(self):
        self.trip = TripSyntheticData.create_test_trip( self.owner )
        return

    def test_share_creates_viewer_by_default_and_flags_trip(self):
        self.assertFalse( self.trip.is_shared )

        trip_member = TripSharingService.share_trip(
            owner_user = self.owner,
            trip = self.trip,
            target_username = 'friend',
        )

        self.assertEqual( trip_member.user, self.friend )
        self.assertEqual( trip_member.role, TripMemberRole.VIEWER )
        self.assertEqual( trip_member.added_by, self.owner )
        self.assertTrue( self.trip.is_shared )
        self.trip.refresh_from_db()
        self.assertTrue( self.trip.is_shared )

    def test_share_as_editor(self):
        trip_member = TripSharingService.share_trip(
            owner_user = self.owner,
            trip = self.trip,
            target_username = 'friend',
            role = TripMemberRole.EDITOR,
        )
        trip_member.refresh_from_db()
        self.assertEqual( trip_member.role, TripMemberRole.EDITOR )

    def test_owner_role_cannot_be_granted(self):
        with self.assertRaises( InvalidRequestError ):
            TripSharingService.share_trip(
                owner_user = self.owner,
                trip = self.trip,
                target_username = 'friend',
                role = TripMemberRole.OWNER,
            )
        self.assertFalse( TripMember.objects.exists() )

    def test_non_owner_cannot_share_even_as_editor(self):
        TripSyntheticData.add_trip_member( self.trip, self.editor, role = TripMemberRole.EDITOR )
        with self.assertRaises( AccessDeniedError ):
            TripSharingService.share_trip(
                owner_user = self.editor,
                trip = self.trip,
                target_username = 'friend',
            )
        self.assertFalse( TripMember.objects.filter( user = self.friend ).exists() )

    def test_ownership_checked_before_role(self):
        with self.assertRaises( AccessDeniedError ):
            TripSharingService.share_trip(
                owner_user = self.friend,
                trip = self.trip,
                target_username = 'editor',
                role = TripMemberRole.OWNER,
            )
        self.assertFalse( TripMember.objects.exists() )

    def test_unknown_user(self):
        with self.assertRaises( EntityNotFoundError ):
            TripSharingService.share_trip(
                owner_user = self.owner,
                trip = self.trip,
                target_username = 'ghost',
            )
        self.trip.refresh_from_db()
        self.assertFalse( self.trip.is_shared )

    def test_blank_username(self):
        with self.assertRaises( InvalidRequestError ):
            TripSharingService.share_trip(
                owner_user = self.owner,
                trip = self.trip,
                target_username = '   ',
            )

    def test_share_with_self(self):
        with self.assertRaises( InvalidRequestError ) as context:
            TripSharingService.share_trip(
                owner_user = self.owner,
                trip = self.trip,
                target_username = 'owner',
            )
        self.assertEqual( context.exception.message, 'Cannot share trip with yourself' )
        self.assertFalse( TripMember.objects.exists() )

    def test_duplicate_share_is_conflict_not_update(self):
        TripSharingService.share_trip(
            owner_user = self.owner,
            trip = self.trip,
            target_username = 'friend',
        )
        with self.assertRaises( ConflictError ):
            TripSharingService.share_trip(
                owner_user = self.owner,
                trip = self.trip,
                target_username = 'friend',
                role = TripMemberRole.EDITOR,
            )
        trip_member = TripMember.objects.get( trip = self.trip, user = self.friend )
        self.assertEqual( trip_member.role, TripMemberRole.VIEWER )
        self.assertEqual( TripMember.objects.filter( trip = self.trip ).count(), 1 )

    def test_remove_member_keeps_shared_flag(self):
        TripSharingService.share_trip(
            owner_user = self.owner,
            trip = self.trip,
            target_username = 'friend',
        )
        TripSharingService.remove_member(
            owner_user = self.owner,
            trip = self.trip,
            user_id = self.friend.pk,
        )
        self.assertFalse( TripMember.objects.exists() )
        self.trip.refresh_from_db()
        self.assertTrue( self.trip.is_shared )

    def test_remove_member_rules(self):
        with self.assertRaises( EntityNotFoundError ):
            TripSharingService.remove_member(
                owner_user = self.owner,
                trip = self.trip,
                user_id = self.friend.pk,
            )
        TripSyntheticData.add_trip_member( self.trip, self.editor, role = TripMemberRole.EDITOR )
        with self.assertRaises( AccessDeniedError ):
            TripSharingService.remove_member(
                owner_user = self.editor,
                trip = self.trip,
                user_id = self.editor.pk,
            )

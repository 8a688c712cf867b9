"""
Access policy checks are pure functions, so these use plain stand-in
objects rather than database rows.
"""
import logging
from types import SimpleNamespace

from django.test import SimpleTestCase

from tc.apps.trips.enums import TripMemberRole
from tc.apps.trips.policy import TripAccessPolicy

logging.disable(logging.CRITICAL)


def make_user( pk ):
    return SimpleNamespace( pk = pk )


def make_member( trip, user, role ):
    return SimpleNamespace( trip_id = trip.pk, user_id = user.pk, role = role )


class TripAccessPolicyTestCase(SimpleTestCase):

    def setUp(self):
        self.owner = make_user( 1 )
        self.viewer = make_user( 2 )
        self.editor = make_user( 3 )
        self.stranger = make_user( 4 )
        self.trip = SimpleNamespace( pk = 10, owner_id = self.owner.pk )
        self.other_trip = SimpleNamespace( pk = 11, owner_id = self.stranger.pk )
        self.members = [
            make_member( self.trip, self.viewer, TripMemberRole.VIEWER ),
            make_member( self.trip, self.editor, TripMemberRole.EDITOR ),
            make_member( self.other_trip, self.stranger, TripMemberRole.EDITOR ),
        ]
        return

    def test_owner_has_every_right(self):
        self.assertTrue( TripAccessPolicy.is_owner( self.owner, self.trip ))
        self.assertTrue( TripAccessPolicy.can_read( self.owner, self.trip, [] ))
        self.assertTrue( TripAccessPolicy.can_write( self.owner, self.trip, [] ))
        self.assertTrue( TripAccessPolicy.can_manage( self.owner, self.trip ))

    def test_viewer_reads_only(self):
        self.assertTrue( TripAccessPolicy.can_read( self.viewer, self.trip, self.members ))
        self.assertFalse( TripAccessPolicy.can_write( self.viewer, self.trip, self.members ))
        self.assertFalse( TripAccessPolicy.can_manage( self.viewer, self.trip ))

    def test_editor_reads_and_writes_but_cannot_manage(self):
        self.assertTrue( TripAccessPolicy.can_read( self.editor, self.trip, self.members ))
        self.assertTrue( TripAccessPolicy.can_write( self.editor, self.trip, self.members ))
        self.assertFalse( TripAccessPolicy.can_manage( self.editor, self.trip ))

    def test_membership_on_another_trip_grants_nothing(self):
        self.assertFalse( TripAccessPolicy.can_read( self.stranger, self.trip, self.members ))
        self.assertFalse( TripAccessPolicy.can_write( self.stranger, self.trip, self.members ))

    def test_owner_role_membership_can_write(self):
        member_owner = make_user( 5 )
        members = [ make_member( self.trip, member_owner, TripMemberRole.OWNER ) ]
        self.assertTrue( TripAccessPolicy.can_write( member_owner, self.trip, members ))
        self.assertFalse( TripAccessPolicy.can_manage( member_owner, self.trip ))

    def test_anonymous_user_denied(self):
        anonymous = SimpleNamespace( pk = None )
        self.assertFalse( TripAccessPolicy.is_owner( anonymous, self.trip ))
        self.assertFalse( TripAccessPolicy.can_read( anonymous, self.trip, self.members ))
        self.assertIsNone( TripAccessPolicy.membership_for( anonymous, self.trip, self.members ))


class TripMemberRoleTestCase(SimpleTestCase):

    def test_ordering(self):
        self.assertLess( TripMemberRole.VIEWER, TripMemberRole.EDITOR )
        self.assertLess( TripMemberRole.EDITOR, TripMemberRole.OWNER )

    def test_can_edit(self):
        self.assertFalse( TripMemberRole.VIEWER.can_edit )
        self.assertTrue( TripMemberRole.EDITOR.can_edit )
        self.assertTrue( TripMemberRole.OWNER.can_edit )

    def test_shareable_excludes_owner(self):
        self.assertEqual( TripMemberRole.shareable(), [ TripMemberRole.VIEWER, TripMemberRole.EDITOR ] )
        self.assertEqual( TripMemberRole.default(), TripMemberRole.VIEWER )

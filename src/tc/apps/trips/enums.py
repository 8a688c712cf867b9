from functools import total_ordering

from tc.apps.common.enums import LabeledEnum


@total_ordering
class TripMemberRole( LabeledEnum ):
    """
    Access granted to a trip member, ordered by how much it allows.  The
    trip owner never needs a membership row; OWNER exists so a membership
    can carry full rights.
    """
    VIEWER  = ( 'Viewer', 'Can view trip content'                  , 1 )
    EDITOR  = ( 'Editor', 'Can edit schedules and packing lists'   , 2 )
    OWNER   = ( 'Owner' , 'Full control of the trip'               , 3 )

    def __init__( self, label, description, priority ):
        super().__init__( label, description )
        self.priority = priority
        return

    @classmethod
    def default(cls):
        return cls.VIEWER

    @classmethod
    def shareable(cls):
        """ Roles that may be granted when sharing a trip. """
        return [ cls.VIEWER, cls.EDITOR ]

    def __lt__( self, other ):
        if not isinstance( other, TripMemberRole ):
            return NotImplemented
        return bool( self.priority < other.priority )

    @property
    def can_edit(self):
        return bool( self >= TripMemberRole.EDITOR )

from django.db import models
from django.conf import settings

from tc.apps.common.model_fields import LabeledEnumField
from tc.apps.trips.enums import TripMemberRole
from tc.apps.trips.models import Trip

from . import managers


class TripMember(models.Model):
    """
    Grants a non-owner user access to a trip at a given role.  At most one
    row exists per (trip, user); the owner never gets one.
    """
    objects = managers.TripMemberManager()

    trip = models.ForeignKey(
        Trip,
        on_delete = models.CASCADE,
        related_name = 'members',
    )
    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete = models.CASCADE,
        related_name = 'trip_memberships',
    )
    role = LabeledEnumField(
        TripMemberRole,
        'Role',
    )
    added_by = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete = models.SET_NULL,
        null = True,
        related_name = 'trips_shared_by_me',
    )
    added_datetime = models.DateTimeField( auto_now_add = True )

    class Meta:
        verbose_name = 'Trip Member'
        verbose_name_plural = 'Trip Members'
        unique_together = [ ('trip', 'user') ]

    def __str__(self):
        return f'{self.user.username} - {self.trip.name} ({self.role})'

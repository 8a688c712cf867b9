from django.conf import settings
from django.db import models

from . import managers


class Trip(models.Model):
    """
    Top-level planning unit.  Owned by exactly one user; other users get
    access only through TripMember rows.
    """
    objects = managers.TripManager()

    owner = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete = models.CASCADE,
        related_name = 'owned_trips',
    )
    name = models.CharField(
        max_length = 200,
    )
    destination = models.CharField(
        max_length = 200,
    )
    start_date = models.DateField()
    end_date = models.DateField()
    image_url = models.CharField(
        max_length = 1024,
        null = True,
        blank = True,
    )
    description = models.TextField(
        null = True,
        blank = True,
    )

    # Becomes True when the first member is added and is never cleared.
    is_shared = models.BooleanField(
        default = False,
    )
    created_datetime = models.DateTimeField( auto_now_add = True )
    modified_datetime = models.DateTimeField( auto_now = True )

    class Meta:
        verbose_name = 'Trip'
        verbose_name_plural = 'Trips'

    def __str__(self):
        return f'{self.name} ({self.destination})'


class TripTag(models.Model):

    objects = managers.TripTagManager()

    trip = models.ForeignKey(
        Trip,
        on_delete = models.CASCADE,
        related_name = 'tags',
    )
    name = models.CharField(
        max_length = 100,
    )
    color = models.CharField(
        max_length = 32,
        default = '#888888',
    )

    class Meta:
        verbose_name = 'Trip Tag'
        verbose_name_plural = 'Trip Tags'

    def __str__(self):
        return self.name

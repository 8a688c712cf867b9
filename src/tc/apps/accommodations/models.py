from django.db import models

from tc.apps.trips.models import Trip

from . import managers


class Accommodation(models.Model):
    """ A place to stay during a trip, from check-in to check-out. """

    objects = managers.AccommodationManager()

    trip = models.ForeignKey(
        Trip,
        on_delete = models.CASCADE,
        related_name = 'accommodations',
    )
    name = models.CharField(
        max_length = 200,
    )
    address = models.CharField(
        max_length = 500,
    )
    check_in = models.DateField()
    check_out = models.DateField()
    confirmation_number = models.CharField(
        max_length = 100,
        null = True,
        blank = True,
    )
    notes = models.TextField(
        null = True,
        blank = True,
    )
    created_datetime = models.DateTimeField(
        auto_now_add = True,
    )
    modified_datetime = models.DateTimeField(
        auto_now = True,
    )

    class Meta:
        verbose_name = 'Accommodation'
        verbose_name_plural = 'Accommodations'

    def __str__(self):
        return f'{self.name} ({self.check_in} - {self.check_out})'

    @property
    def nights(self) -> int:
        return ( self.check_out - self.check_in ).days

from django.db import models

from tc.apps.trips.models import Trip

from . import managers


class Schedule(models.Model):
    """ One itinerary entry on a given day of a trip. """

    objects = managers.ScheduleManager()

    trip = models.ForeignKey(
        Trip,
        on_delete = models.CASCADE,
        related_name = 'schedules',
    )
    day = models.DateField()
    title = models.CharField(
        max_length = 200,
    )
    # Free-form (e.g. "09:30"); sorts lexically within a day.
    time = models.CharField(
        max_length = 32,
        null = True,
        blank = True,
    )
    location = models.CharField(
        max_length = 255,
        null = True,
        blank = True,
    )
    description = models.TextField(
        null = True,
        blank = True,
    )

    class Meta:
        verbose_name = 'Schedule'
        verbose_name_plural = 'Schedules'

    def __str__(self):
        return f'{self.day} {self.title}'

import json

from django.db import models

from . import managers


class WeatherCache(models.Model):
    """
    One fetched current-weather payload.  Keyed by the literal location
    string the caller asked for; no case or whitespace normalization.
    """
    objects = managers.WeatherCacheManager()

    location = models.CharField(
        max_length = 255,
        db_index = True,
    )
    data = models.TextField()
    timestamp = models.DateTimeField(
        db_index = True,
    )

    class Meta:
        verbose_name = 'Weather Cache Entry'
        verbose_name_plural = 'Weather Cache Entries'

    def __str__(self):
        return f'{self.location} @ {self.timestamp.isoformat()}'

    @property
    def payload(self):
        return json.loads( self.data )

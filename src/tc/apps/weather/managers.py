import json
from typing import Any, Dict

from django.db import models

from tc.apps.common import datetimeproxy


class WeatherCacheManager(models.Manager):

    def latest_for_location(self, location : str):
        """ Most recent row for exactly this location string, or None. """
        return self.filter( location = location ).order_by( '-timestamp', '-id' ).first()

    def record(self, location : str, payload : Dict[ str, Any ]):
        """
        Always appends a new row; older rows for the location stay behind
        and are simply never the latest again.
        """
        return self.create(
            location = location,
            data = json.dumps( payload ),
            timestamp = datetimeproxy.now(),
        )

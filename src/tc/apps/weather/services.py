"""
Read-through cache in front of the weather provider.

A cached row younger than CACHE_FRESHNESS is served as-is.  Otherwise the
provider is asked, and a successful answer is stored as a new row.  Two
concurrent requests for the same stale location may both fetch and both
store; the newest row wins on the next read and nothing is locked.

Provider failures never reach the caller: current weather degrades to a
placeholder payload (isPlaceholder = true, never cached) and a forecast
degrades to an empty list.
"""
from datetime import timedelta
import logging
import math
from typing import Any, Dict, List, Optional

from django.conf import settings

from tc.apps.common import datetimeproxy
from tc.apps.trips.models import Trip
from tc.exceptions import UpstreamError

from .client import OpenWeatherClient
from .models import WeatherCache
from .schemas import WeatherData

logger = logging.getLogger(__name__)


class WeatherService:

    CACHE_FRESHNESS = timedelta( minutes = 30 )

    FORECAST_PREFERRED_TIME = '12:00:00'

    PLACEHOLDER_TEMPERATURE = 25
    PLACEHOLDER_CONDITION = 'Unknown'
    PLACEHOLDER_ICON = '01d'

    def __init__( self, client : OpenWeatherClient, default_location : str = 'London' ):
        self._client = client
        self._default_location = default_location
        return

    @classmethod
    def from_settings( cls ) -> 'WeatherService':
        client = OpenWeatherClient(
            api_key = settings.OPENWEATHER_API_KEY,
            base_url = settings.OPENWEATHER_BASE_URL,
            timeout = settings.WEATHER_TIMEOUT_SECS,
        )
        return cls(
            client = client,
            default_location = settings.WEATHER_DEFAULT_LOCATION,
        )

    def query_location( self, location : str ) -> str:
        """ What gets sent upstream: blank input falls back to the default. """
        if location and location.strip():
            return location
        return self._default_location

    def is_fresh( self, weather_cache : WeatherCache ) -> bool:
        return bool( datetimeproxy.now() - weather_cache.timestamp < self.CACHE_FRESHNESS )

    def get_weather( self, location : str ) -> WeatherData:
        """
        Current conditions for the literal location string.  The cache is
        keyed by exactly what the caller passed: "Paris" and "paris" are
        separate entries.
        """
        weather_cache = WeatherCache.objects.latest_for_location( location )
        if weather_cache and self.is_fresh( weather_cache ):
            logger.debug( f'Weather cache hit for "{location}"' )
            return WeatherData.from_dict( weather_cache.payload )

        logger.debug( f'Weather cache miss for "{location}"' )
        try:
            weather_data = self._fetch_current_weather( self.query_location( location ))
        except UpstreamError as ue:
            logger.warning( f'Weather unavailable for "{location}": {ue}' )
            return self.placeholder( location )

        WeatherCache.objects.record( location, weather_data.to_dict() )
        return weather_data

    def get_forecast( self, location : str ) -> List[ WeatherData ]:
        """ One entry per day, noon when the provider has it. Never cached. """
        try:
            data = self._client.get_forecast( self.query_location( location ))
            return self._collapse_forecast( data )
        except UpstreamError as ue:
            logger.warning( f'Forecast unavailable for "{location}": {ue}' )
            return list()

    def get_next_trip_weather( self, user ) -> Optional[ WeatherData ]:
        """
        Weather at the destination of the soonest readable trip starting
        today or later.  None means there is no such trip, which is not the
        same thing as a placeholder from a provider failure.
        """
        next_trip = Trip.objects.upcoming_for_user( user, datetimeproxy.today() ).first()
        if next_trip is None:
            return None
        return self.get_weather( next_trip.destination )

    def placeholder( self, location : str ) -> WeatherData:
        return WeatherData(
            temperature = self.PLACEHOLDER_TEMPERATURE,
            condition = self.PLACEHOLDER_CONDITION,
            location = location,
            date = datetimeproxy.to_date_str(),
            icon = self.PLACEHOLDER_ICON,
            is_placeholder = True,
        )

    def _fetch_current_weather( self, query_location : str ) -> WeatherData:
        data = self._client.get_current_weather( query_location )
        try:
            return self._to_weather_data(
                item = data,
                location = data['name'],
                date = datetimeproxy.to_date_str(),
            )
        except ( KeyError, IndexError, TypeError, ValueError ) as e:
            raise UpstreamError( f'Unexpected weather payload: {e!r}' )

    def _collapse_forecast( self, data : Dict[ str, Any ] ) -> List[ WeatherData ]:
        try:
            city_name = data['city']['name']
            items_by_date = dict()
            for item in data['list']:
                date_str, time_str = item['dt_txt'].split( ' ', 1 )
                if time_str == self.FORECAST_PREFERRED_TIME or date_str not in items_by_date:
                    # Re-assigning an existing key keeps its original position.
                    items_by_date[date_str] = item
                continue

            return [
                self._to_weather_data( item = item, location = city_name, date = date_str )
                for date_str, item in items_by_date.items()
            ]
        except ( KeyError, IndexError, TypeError, ValueError ) as e:
            raise UpstreamError( f'Unexpected forecast payload: {e!r}' )

    @classmethod
    def _to_weather_data( cls, item : Dict[ str, Any ], location : str, date : str ) -> WeatherData:
        condition = item['weather'][0]
        return WeatherData(
            temperature = cls.round_temperature( item['main']['temp'] ),
            condition = condition['main'],
            location = location,
            date = date,
            icon = condition['icon'],
        )

    @classmethod
    def round_temperature( cls, value ) -> int:
        """ Halves round up (toward +infinity), e.g. -2.5 -> -2 and 2.5 -> 3. """
        return int( math.floor( float( value ) + 0.5 ))

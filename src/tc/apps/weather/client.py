"""
Thin HTTP client for the OpenWeatherMap v2.5 API.  Knows the wire
format and nothing about caching; every failure mode surfaces as an
UpstreamError so the service has one thing to absorb.
"""
import logging
from typing import Any, Dict

import requests

from tc.exceptions import UpstreamError

logger = logging.getLogger(__name__)


class OpenWeatherClient:

    CURRENT_WEATHER_PATH = '/weather'
    FORECAST_PATH = '/forecast'
    UNITS = 'metric'

    def __init__( self,
                  api_key   : str,
                  base_url  : str    = 'https://api.openweathermap.org/data/2.5',
                  timeout   : float  = 8.0 ):
        self._api_key = api_key or ''
        self._base_url = base_url.rstrip( '/' )
        self._timeout = timeout
        return

    def get_current_weather( self, location : str ) -> Dict[ str, Any ]:
        return self._get_json( self.CURRENT_WEATHER_PATH, location )

    def get_forecast( self, location : str ) -> Dict[ str, Any ]:
        """ The 5 day / 3 hour forecast list for the location. """
        return self._get_json( self.FORECAST_PATH, location )

    def _get_json( self, path : str, location : str ) -> Dict[ str, Any ]:
        if not self._api_key:
            raise UpstreamError( 'Weather provider API key is not configured' )

        url = f'{self._base_url}{path}'
        params = {
            'q': location,
            'units': self.UNITS,
            'appid': self._api_key,
        }
        try:
            response = requests.get( url, params = params, timeout = self._timeout )
            response.raise_for_status()
        except requests.RequestException as e:
            # Exception text can include the full URL; keep the key out of logs.
            status_code = getattr( getattr( e, 'response', None ), 'status_code', None )
            raise UpstreamError( f'Weather request for "{location}" failed (status={status_code})' )

        try:
            data = response.json()
        except ValueError:
            raise UpstreamError( f'Weather response for "{location}" was not JSON' )

        if not isinstance( data, dict ):
            raise UpstreamError( f'Weather response for "{location}" was not an object' )
        return data

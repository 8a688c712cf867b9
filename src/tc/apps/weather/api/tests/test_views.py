"""
Tests for the weather API views.  The app's service instance is swapped
for one wrapping a mocked upstream client.
"""
import logging
from datetime import timedelta
from unittest.mock import Mock, patch

from django.apps import apps
from django.test import TestCase
from rest_framework.test import APIClient

from tc.apps.common import datetimeproxy
from tc.apps.trips.tests.synthetic_data import TripSyntheticData
from tc.apps.weather.client import OpenWeatherClient
from tc.apps.weather.services import WeatherService
from tc.exceptions import UpstreamError

logging.disable( logging.CRITICAL )


class WeatherViewTestCase( TestCase ):

    @classmethod
    def setUpTestData( cls ):
        cls.user = TripSyntheticData.create_test_user( 'weatheruser' )

    def setUp( self ):
        self.client = APIClient()
        self.client.force_authenticate( user = self.user )

        self.client_mock = Mock( spec = OpenWeatherClient )
        self.client_mock.get_current_weather.side_effect = lambda location: {
            'name': location,
            'main': { 'temp': 12.2 },
            'weather': [ { 'main': 'Rain', 'icon': '10d' } ],
        }
        weather_config = apps.get_app_config( 'weather' )
        patcher = patch.object(
            weather_config,
            'weather_service',
            WeatherService( client = self.client_mock, default_location = 'London' ),
        )
        patcher.start()
        self.addCleanup( patcher.stop )

    def test_requires_authentication( self ):
        anonymous_client = APIClient()
        for url in [ '/api/weather/Paris', '/api/weather/next-trip', '/api/weather/forecast/Paris' ]:
            response = anonymous_client.get( url )
            self.assertEqual( response.status_code, 401, url )
            continue

    def test_location_weather( self ):
        response = self.client.get( '/api/weather/Paris' )

        self.assertEqual( response.status_code, 200 )
        self.assertEqual( response.json(), {
            'temperature': 12,
            'condition': 'Rain',
            'location': 'Paris',
            'date': datetimeproxy.to_date_str(),
            'icon': '10d',
            'isPlaceholder': False,
        })

    def test_location_weather_placeholder_is_still_200( self ):
        self.client_mock.get_current_weather.side_effect = UpstreamError()

        response = self.client.get( '/api/weather/Paris' )

        self.assertEqual( response.status_code, 200 )
        self.assertTrue( response.json()['isPlaceholder'] )
        self.assertEqual( response.json()['condition'], 'Unknown' )

    def test_next_trip_not_read_as_location( self ):
        response = self.client.get( '/api/weather/next-trip' )

        self.assertEqual( response.status_code, 404 )
        self.assertEqual( response.json(), { 'message': 'No upcoming trips found' } )
        self.client_mock.get_current_weather.assert_not_called()

    def test_next_trip_weather( self ):
        TripSyntheticData.create_test_trip(
            self.user,
            destination = 'Berlin',
            start_date = datetimeproxy.today() + timedelta( days = 3 ),
        )

        response = self.client.get( '/api/weather/next-trip' )

        self.assertEqual( response.status_code, 200 )
        self.assertEqual( response.json()['location'], 'Berlin' )

    def test_forecast( self ):
        self.client_mock.get_forecast.return_value = {
            'city': { 'name': 'Rome' },
            'list': [
                {
                    'dt_txt': '2025-06-01 12:00:00',
                    'main': { 'temp': 21.0 },
                    'weather': [ { 'main': 'Clear', 'icon': '01d' } ],
                },
            ],
        }

        response = self.client.get( '/api/weather/forecast/Rome' )

        self.assertEqual( response.status_code, 200 )
        data = response.json()
        self.assertEqual( len( data ), 1 )
        self.assertEqual( data[0]['date'], '2025-06-01' )
        self.assertEqual( data[0]['location'], 'Rome' )

    def test_forecast_failure_is_empty_list( self ):
        self.client_mock.get_forecast.side_effect = UpstreamError()

        response = self.client.get( '/api/weather/forecast/Rome' )

        self.assertEqual( response.status_code, 200 )
        self.assertEqual( response.json(), [] )

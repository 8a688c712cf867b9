import logging
from unittest.mock import Mock, patch

import requests

from django.test import SimpleTestCase

from tc.apps.weather.client import OpenWeatherClient
from tc.exceptions import UpstreamError

logging.disable(logging.CRITICAL)


class OpenWeatherClientTestCase(SimpleTestCase):

    def setUp(self):
        self.client = OpenWeatherClient(
            api_key = 'secret',
            base_url = 'https://weather.example.com/data/2.5/',
            timeout = 3.0,
        )
        return

    @patch('tc.apps.weather.client.requests.get')
    def test_current_weather_request(self, mock_get):
        mock_get.return_value = Mock( status_code = 200 )
        mock_get.return_value.json.return_value = { 'name': 'Paris' }

        data = self.client.get_current_weather( 'Paris' )

        self.assertEqual( data, { 'name': 'Paris' } )
        mock_get.assert_called_once_with(
            'https://weather.example.com/data/2.5/weather',
            params = { 'q': 'Paris', 'units': 'metric', 'appid': 'secret' },
            timeout = 3.0,
        )

    @patch('tc.apps.weather.client.requests.get')
    def test_forecast_path(self, mock_get):
        mock_get.return_value.json.return_value = { 'list': [] }
        self.client.get_forecast( 'Rome' )
        self.assertEqual( mock_get.call_args[0][0], 'https://weather.example.com/data/2.5/forecast' )

    @patch('tc.apps.weather.client.requests.get')
    def test_http_error_raises_upstream_error(self, mock_get):
        error_response = Mock( status_code = 404 )
        mock_get.return_value.raise_for_status.side_effect = requests.HTTPError(
            '404 Client Error', response = error_response,
        )
        with self.assertRaises( UpstreamError ) as context:
            self.client.get_current_weather( 'Nowhere' )
        self.assertIn( '404', context.exception.message )
        self.assertNotIn( 'secret', context.exception.message )

    @patch('tc.apps.weather.client.requests.get')
    def test_connection_error_raises_upstream_error(self, mock_get):
        mock_get.side_effect = requests.ConnectionError( 'unreachable' )
        with self.assertRaises( UpstreamError ):
            self.client.get_current_weather( 'Paris' )

    @patch('tc.apps.weather.client.requests.get')
    def test_timeout_raises_upstream_error(self, mock_get):
        mock_get.side_effect = requests.Timeout()
        with self.assertRaises( UpstreamError ):
            self.client.get_forecast( 'Paris' )

    @patch('tc.apps.weather.client.requests.get')
    def test_non_json_body_raises_upstream_error(self, mock_get):
        mock_get.return_value.json.side_effect = ValueError( 'no json' )
        with self.assertRaises( UpstreamError ):
            self.client.get_current_weather( 'Paris' )

    @patch('tc.apps.weather.client.requests.get')
    def test_missing_api_key_never_calls_upstream(self, mock_get):
        client = OpenWeatherClient( api_key = '' )
        with self.assertRaises( UpstreamError ):
            client.get_current_weather( 'Paris' )
        mock_get.assert_not_called()

import logging
from unittest.mock import patch

from django.db import DatabaseError
from django.test import TestCase

from tc.apps.common.healthcheck import do_healthcheck
from tc.apps.trips.models import Trip
from tc.apps.trips.tests.synthetic_data import TripSyntheticData

logging.disable(logging.CRITICAL)


class HealthViewTestCase(TestCase):

    def test_health_needs_no_session(self):
        response = self.client.get( '/health' )

        self.assertEqual( response.status_code, 200 )
        status_dict = response.json()['status']
        self.assertTrue( status_dict['is_healthy'] )
        self.assertEqual( status_dict['database'], 'healthy' )
        self.assertEqual( status_dict['weather'], 'not-configured' )
        self.assertIn( 'version', status_dict )


class UnhandledErrorTestCase(TestCase):

    def test_unexpected_error_is_generic_500(self):
        user = TripSyntheticData.create_test_user( 'crashy' )
        self.client.force_login( user )
        with patch.object( Trip.objects, 'for_user', side_effect = RuntimeError( 'secret detail' )):
            response = self.client.get( '/api/trips' )

        self.assertEqual( response.status_code, 500 )
        self.assertEqual( response.json(), { 'message': 'Internal server error' } )


class HealthcheckTestCase(TestCase):

    def test_weather_key_is_reported(self):
        with self.settings( OPENWEATHER_API_KEY = 'abc' ):
            status_dict = do_healthcheck( db_layer = False )
        self.assertEqual( status_dict['weather'], 'configured' )
        self.assertEqual( status_dict['database'], 'not-checked' )
        self.assertTrue( status_dict['is_healthy'] )

    def test_unreachable_database_is_unhealthy(self):
        with patch( 'tc.apps.common.healthcheck.connection' ) as mock_connection:
            mock_connection.ensure_connection.side_effect = DatabaseError( 'down' )
            status_dict = do_healthcheck()
        self.assertFalse( status_dict['is_healthy'] )
        self.assertEqual( status_dict['database'], 'unhealthy' )

import logging
from types import SimpleNamespace

from django.core.exceptions import BadRequest
from django.http import Http404
from django.test import TestCase

from rest_framework import exceptions

from tc.apps.api.exception_handler import exception_handler
from tc.exceptions import (
    AccessDeniedError,
    ConflictError,
    EntityNotFoundError,
    InvalidRequestError,
    TripPlannerError,
    UpstreamError,
)

logging.disable(logging.CRITICAL)


class ExceptionHandlerTestCase(TestCase):

    def setUp(self):
        self.context = { 'view': SimpleNamespace() }
        return

    def test_domain_errors_map_to_status_codes(self):
        expected = [
            ( EntityNotFoundError( 'Trip not found' ), 404 ),
            ( AccessDeniedError(), 403 ),
            ( InvalidRequestError(), 400 ),
            ( ConflictError(), 409 ),
            ( UpstreamError(), 502 ),
            ( TripPlannerError(), 400 ),
        ]
        for exc, status_code in expected:
            response = exception_handler( exc, self.context )
            self.assertEqual( response.status_code, status_code, exc.__class__.__name__ )
            self.assertEqual( response.data, { 'message': exc.message } )
            continue

    def test_validation_error_has_itemized_errors(self):
        exc = exceptions.ValidationError({ 'name': [ 'Too short' ] })
        response = exception_handler( exc, self.context )

        self.assertEqual( response.status_code, 400 )
        self.assertEqual( response.data['message'], 'Validation failed' )
        self.assertEqual( response.data['errors'], { 'name': [ 'Too short' ] } )

    def test_non_field_validation_error(self):
        exc = exceptions.ValidationError( 'Bad shape' )
        response = exception_handler( exc, self.context )
        self.assertEqual( response.status_code, 400 )
        self.assertIn( 'non_field_errors', response.data['errors'] )

    def test_drf_detail_becomes_message(self):
        response = exception_handler( exceptions.PermissionDenied( 'Nope' ), self.context )
        self.assertEqual( response.status_code, 403 )
        self.assertEqual( response.data, { 'message': 'Nope' } )

        response = exception_handler( Http404(), self.context )
        self.assertEqual( response.status_code, 404 )
        self.assertIn( 'message', response.data )

    def test_bad_request(self):
        response = exception_handler( BadRequest( 'Malformed' ), self.context )
        self.assertEqual( response.status_code, 400 )
        self.assertEqual( response.data, { 'message': 'Malformed' } )

    def test_unexpected_error_is_generic_500(self):
        response = exception_handler( RuntimeError( 'db password is hunter2' ), self.context )
        self.assertEqual( response.status_code, 500 )
        self.assertEqual( response.data, { 'message': 'Internal server error' } )

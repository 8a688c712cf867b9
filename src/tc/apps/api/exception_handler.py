import logging
from typing import Optional

from django.core.exceptions import BadRequest

from rest_framework import exceptions, status
from rest_framework.response import Response
from rest_framework.views import exception_handler as drf_exception_handler
from rest_framework.views import set_rollback

from tc.exceptions import (
    AccessDeniedError,
    ConflictError,
    EntityNotFoundError,
    InvalidRequestError,
    TripPlannerError,
    UpstreamError,
)

from .constants import APIFields as F
from .messages import APIMessages as M

logger = logging.getLogger(__name__)

DOMAIN_ERROR_STATUS_CODES = [
    ( EntityNotFoundError, status.HTTP_404_NOT_FOUND ),
    ( AccessDeniedError, status.HTTP_403_FORBIDDEN ),
    ( InvalidRequestError, status.HTTP_400_BAD_REQUEST ),
    ( ConflictError, status.HTTP_409_CONFLICT ),
    ( UpstreamError, status.HTTP_502_BAD_GATEWAY ),
]


def exception_handler(exc: Exception, context: dict) -> Optional[Response]:
    """
    Custom exception handler that extends DRF's default handler.

    Every error body has a "message" key; validation failures add an
    "errors" mapping of field name to messages.  Handles, beyond DRF:
    - domain errors from tc.exceptions -> mapped status codes
    - BadRequest -> 400
    - anything else -> 500 with a generic message (details are logged only)
    """
    if isinstance(exc, TripPlannerError):
        set_rollback()
        return Response(
            { F.MESSAGE: exc.message },
            status = domain_error_status_code( exc ),
        )

    response = drf_exception_handler(exc, context)

    if response is not None:
        response.data = normalize_error_data( exc, response.data )
        return response

    if isinstance(exc, BadRequest):
        return Response(
            { F.MESSAGE: str(exc) or M.BAD_REQUEST },
            status = status.HTTP_400_BAD_REQUEST,
        )

    view = context.get( 'view' )
    logger.exception( f'Unhandled API error in {view.__class__.__name__}: {exc}' )
    set_rollback()
    return Response(
        { F.MESSAGE: M.INTERNAL_ERROR },
        status = status.HTTP_500_INTERNAL_SERVER_ERROR,
    )


def domain_error_status_code( exc : TripPlannerError ) -> int:
    for error_class, status_code in DOMAIN_ERROR_STATUS_CODES:
        if isinstance( exc, error_class ):
            return status_code
        continue
    return status.HTTP_400_BAD_REQUEST


def normalize_error_data( exc : Exception, data ):
    if isinstance( exc, exceptions.ValidationError ):
        if not isinstance( data, dict ):
            data = { 'non_field_errors': data }
        return {
            F.MESSAGE: M.VALIDATION_FAILED,
            F.ERRORS: data,
        }
    if isinstance( data, dict ) and 'detail' in data:
        return { F.MESSAGE: str( data['detail'] ) }
    return data

import logging

from django.conf import settings
from django.http import JsonResponse
from django.views.generic import View

from tc.apps.api.constants import APIFields as F
from tc.apps.api.messages import APIMessages as M
from tc.apps.common.healthcheck import do_healthcheck

logger = logging.getLogger(__name__)


def custom_404_handler( request, exception = None ):
    """ Unrouted URLs answer in the same JSON shape as API errors. """
    return JsonResponse( { F.MESSAGE: M.not_found( 'Resource' ) }, status = 404 )


def custom_500_handler( request ):
    return JsonResponse( { F.MESSAGE: M.INTERNAL_ERROR }, status = 500 )


class HealthView( View ):

    def get(self, request, *args, **kwargs):
        status_dict = do_healthcheck()
        response_status = 200 if status_dict['is_healthy'] else 500
        status_dict['version'] = settings.ENV.VERSION
        return JsonResponse( {'status': status_dict }, status = response_status)

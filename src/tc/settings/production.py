# -*- coding: utf-8 -*-
from .base import *

DEBUG = False

SESSION_COOKIE_SECURE = True
CSRF_COOKIE_SECURE = True

STATIC_ROOT = '/src/static'

LOGGING = logging_config( django_level = 'ERROR', formatter = 'verbose' )

# JSON only; no browsable API.
REST_FRAMEWORK = {
    **REST_FRAMEWORK,
    'DEFAULT_RENDERER_CLASSES': [
        'rest_framework.renderers.JSONRenderer',
    ],
}

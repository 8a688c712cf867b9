# -*- coding: utf-8 -*-
from .base import *

DEBUG = True

TEMPLATES[0]['OPTIONS']['debug'] = True

STATIC_ROOT = '/tmp/tc/static'

LOGGING = logging_config(
    overrides = {
        'django.server': { 'level': 'INFO', 'propagate': False },
        # Cache hit/miss tracing for the weather endpoints.
        'tc.apps.weather': { 'level': 'DEBUG', 'propagate': False },
    },
)

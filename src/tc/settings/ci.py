# -*- coding: utf-8 -*-
"""
Test-suite settings: development settings on a throwaway SQLite file, with
defaults for every required variable so a bare checkout can run pytest.
"""
import os

os.environ.setdefault( 'DJANGO_SETTINGS_MODULE', 'tc.settings.ci' )
os.environ.setdefault( 'DJANGO_SECRET_KEY', 'ci-only-insecure-secret-key' )
os.environ.setdefault( 'TC_DB_PATH', '/tmp' )

from .development import *

DATABASES = {
    'default': {
        'ENGINE': 'django.db.backends.sqlite3',
        'NAME': os.path.join( ENV.DATABASES_NAME_PATH, 'tc-ci.sqlite3' ),
    }
}

# Never talk to the real provider from tests.
OPENWEATHER_API_KEY = ''

PASSWORD_HASHERS = [
    'django.contrib.auth.hashers.MD5PasswordHasher',
]

REST_FRAMEWORK = {
    **REST_FRAMEWORK,
    'DEFAULT_THROTTLE_RATES': {
        'auth_attempts': '1000/minute',
    },
}

LOGGING = logging_config( django_level = 'WARNING', app_level = 'WARNING' )

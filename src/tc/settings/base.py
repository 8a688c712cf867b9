# -*- coding: utf-8 -*-
"""
Settings shared by every environment.  Environment-specific modules do
"from .base import *" and then override.  All external configuration is
read through EnvironmentSettings so there is one place listing every
variable the server consumes.
"""
import os

from tc.environment.server import EnvironmentSettings

ENV = EnvironmentSettings.get()

BASE_DIR = os.path.dirname( os.path.dirname( os.path.dirname( os.path.abspath( __file__ ))))

SECRET_KEY = ENV.SECRET_KEY

DEBUG = False

ALLOWED_HOSTS = list( ENV.ALLOWED_HOSTS )
CSRF_TRUSTED_ORIGINS = list( ENV.TRUSTED_ORIGINS )

INSTALLED_APPS = [
    'django.contrib.admin',
    'django.contrib.auth',
    'django.contrib.contenttypes',
    'django.contrib.sessions',
    'django.contrib.messages',
    'django.contrib.staticfiles',

    'rest_framework',

    'custom',
    'tc.apps.common',
    'tc.apps.api',
    'tc.apps.user',
    'tc.apps.trips',
    'tc.apps.members',
    'tc.apps.schedules',
    'tc.apps.packing',
    'tc.apps.accommodations',
    'tc.apps.weather',
]

MIDDLEWARE = [
    'django.middleware.security.SecurityMiddleware',
    'django.contrib.sessions.middleware.SessionMiddleware',
    'django.middleware.common.CommonMiddleware',
    'django.middleware.csrf.CsrfViewMiddleware',
    'django.contrib.auth.middleware.AuthenticationMiddleware',
    'django.contrib.messages.middleware.MessageMiddleware',
    'django.middleware.clickjacking.XFrameOptionsMiddleware',
]

ROOT_URLCONF = 'tc.urls'

TEMPLATES = [
    {
        'BACKEND': 'django.template.backends.django.DjangoTemplates',
        'DIRS': [],
        'APP_DIRS': True,
        'OPTIONS': {
            'context_processors': [
                'django.template.context_processors.debug',
                'django.template.context_processors.request',
                'django.contrib.auth.context_processors.auth',
                'django.contrib.messages.context_processors.messages',
            ],
        },
    },
]

WSGI_APPLICATION = 'tc.wsgi.application'

if ENV.has_server_database:
    DATABASES = {
        'default': {
            'ENGINE': 'django.db.backends.postgresql',
            'HOST': ENV.DATABASE_HOST,
            'PORT': ENV.DATABASE_PORT,
            'NAME': ENV.DATABASE_NAME,
            'USER': ENV.DATABASE_USER,
            'PASSWORD': ENV.DATABASE_PASSWORD,
        }
    }
else:
    DATABASES = {
        'default': {
            'ENGINE': 'django.db.backends.sqlite3',
            'NAME': os.path.join( ENV.DATABASES_NAME_PATH, 'tc.sqlite3' ),
        }
    }

DEFAULT_AUTO_FIELD = 'django.db.models.BigAutoField'

AUTH_USER_MODEL = 'custom.CustomUser'

AUTH_PASSWORD_VALIDATORS = [
    {
        'NAME': 'django.contrib.auth.password_validation.MinimumLengthValidator',
        'OPTIONS': { 'min_length': 6 },
    },
]

SESSION_COOKIE_AGE = 60 * 60 * 24 * 7
SESSION_COOKIE_HTTPONLY = True

LANGUAGE_CODE = 'en-us'
TIME_ZONE = 'UTC'
USE_I18N = True
USE_TZ = True

STATIC_URL = '/static/'
STATIC_ROOT = os.path.join( BASE_DIR, 'static' )

REST_FRAMEWORK = {
    'DEFAULT_AUTHENTICATION_CLASSES': [
        'tc.apps.api.authentication.SessionDRFAuthAdapter',
    ],
    'DEFAULT_PERMISSION_CLASSES': [
        'rest_framework.permissions.IsAuthenticated',
    ],
    'DEFAULT_RENDERER_CLASSES': [
        'rest_framework.renderers.JSONRenderer',
        'rest_framework.renderers.BrowsableAPIRenderer',
    ],
    'DEFAULT_PARSER_CLASSES': [
        'rest_framework.parsers.JSONParser',
    ],
    'EXCEPTION_HANDLER': 'tc.apps.api.exception_handler.exception_handler',
    'DEFAULT_THROTTLE_RATES': {
        'auth_attempts': '20/minute',
    },
    'TEST_REQUEST_DEFAULT_FORMAT': 'json',
}

# Weather provider wiring, consumed once at startup by the weather app.
OPENWEATHER_API_KEY = ENV.OPENWEATHER_API_KEY
OPENWEATHER_BASE_URL = ENV.OPENWEATHER_BASE_URL
WEATHER_TIMEOUT_SECS = ENV.WEATHER_TIMEOUT_SECS
WEATHER_DEFAULT_LOCATION = ENV.WEATHER_DEFAULT_LOCATION

LOG_FORMATS = {
    'simple': '{levelname} {message}',
    'verbose': '{asctime} {levelname} {name} {process:d} {message}',
}


def logging_config( django_level = 'INFO', app_level = 'INFO', formatter = 'simple',
                    overrides = None ):
    """
    Every environment logs to the console and differs only in verbosity,
    so settings modules describe levels rather than whole dictConfig trees.
    """
    loggers = {
        'django': { 'level': django_level },
        'django.db.backends': { 'level': django_level },
        'tc': { 'level': app_level },
    }
    loggers.update( overrides or {} )
    for logger_config in loggers.values():
        logger_config.setdefault( 'handlers', [ 'console' ] )
        continue

    return {
        'version': 1,
        'disable_existing_loggers': False,
        'formatters': {
            name: { 'format': fmt, 'style': '{' } for name, fmt in LOG_FORMATS.items()
        },
        'handlers': {
            'console': {
                'class': 'logging.StreamHandler',
                'formatter': formatter,
            },
        },
        'loggers': loggers,
    }


LOGGING = logging_config()

from dataclasses import dataclass, field
import os
import re
from typing import List, Tuple
import urllib.parse

from django.core.exceptions import ImproperlyConfigured

VERSION_FILE_PATH = os.path.join(
    os.path.dirname( __file__ ), '..', '..', '..', 'TC_VERSION',
)


@dataclass
class EnvironmentSettings:
    """
    Every environment variable the server reads, in one place.

    A default of None marks a required variable: EnvironmentSettings.get()
    raises ImproperlyConfigured when it is absent.
    """

    DJANGO_SETTINGS_MODULE     : str           = None
    DJANGO_SERVER_PORT         : int           = 8000
    VERSION                    : str           = 'unknown'
    SECRET_KEY                 : str           = None
    ALLOWED_HOSTS              : Tuple[ str ]  = field( default_factory = tuple )
    TRUSTED_ORIGINS            : Tuple[ str ]  = field( default_factory = tuple )

    # PostgreSQL needs all five of TC_DB_HOST/PORT/NAME/USER/PASSWORD,
    # otherwise TC_DB_PATH names the directory for a SQLite file.
    DATABASE_HOST              : str           = ''
    DATABASE_PORT              : str           = ''
    DATABASE_NAME              : str           = ''
    DATABASE_USER              : str           = ''
    DATABASE_PASSWORD          : str           = ''
    DATABASES_NAME_PATH        : str           = ''

    OPENWEATHER_API_KEY        : str           = ''
    OPENWEATHER_BASE_URL       : str           = 'https://api.openweathermap.org/data/2.5'
    WEATHER_TIMEOUT_SECS       : float         = 8.0
    WEATHER_DEFAULT_LOCATION   : str           = 'London'

    @property
    def has_server_database(self) -> bool:
        return all([
            self.DATABASE_HOST,
            self.DATABASE_PORT,
            self.DATABASE_NAME,
            self.DATABASE_USER,
            self.DATABASE_PASSWORD,
        ])

    @property
    def has_sqlite_database(self) -> bool:
        return bool( self.DATABASES_NAME_PATH )

    @classmethod
    def get( cls ) -> 'EnvironmentSettings':
        env_settings = cls()
        env_settings.load_core()
        env_settings.load_databases()
        env_settings.load_weather()
        env_settings.load_hosts()

        if not ( env_settings.has_server_database or env_settings.has_sqlite_database ):
            raise ImproperlyConfigured(
                'No database configured: set TC_DB_PATH for SQLite, or all of'
                ' TC_DB_HOST, TC_DB_PORT, TC_DB_NAME, TC_DB_USER, TC_DB_PASSWORD.'
            )
        return env_settings

    def load_core( self ) -> None:
        # Django reads DJANGO_SETTINGS_MODULE itself; it is listed here so
        # this class stays the complete inventory.
        self.DJANGO_SETTINGS_MODULE = self.get_env_variable(
            'DJANGO_SETTINGS_MODULE', self.DJANGO_SETTINGS_MODULE,
        )
        self.DJANGO_SERVER_PORT = int( self.get_number_variable(
            'DJANGO_SERVER_PORT', self.DJANGO_SERVER_PORT,
        ))
        self.SECRET_KEY = self.get_env_variable( 'DJANGO_SECRET_KEY', self.SECRET_KEY )
        self.VERSION = self.read_version()
        return

    def load_databases( self ) -> None:
        self.DATABASE_HOST = self.get_env_variable( 'TC_DB_HOST', '' )
        self.DATABASE_PORT = self.get_env_variable( 'TC_DB_PORT', '' )
        self.DATABASE_NAME = self.get_env_variable( 'TC_DB_NAME', '' )
        self.DATABASE_USER = self.get_env_variable( 'TC_DB_USER', '' )
        self.DATABASE_PASSWORD = self.get_env_variable( 'TC_DB_PASSWORD', '' )
        self.DATABASES_NAME_PATH = self.get_env_variable( 'TC_DB_PATH', '' )
        return

    def load_weather( self ) -> None:
        self.OPENWEATHER_API_KEY = self.get_env_variable(
            'TC_OPENWEATHER_API_KEY', self.OPENWEATHER_API_KEY,
        )
        self.OPENWEATHER_BASE_URL = self.get_env_variable(
            'TC_OPENWEATHER_BASE_URL', self.OPENWEATHER_BASE_URL,
        ).rstrip( '/' )
        self.WEATHER_TIMEOUT_SECS = self.get_number_variable(
            'TC_WEATHER_TIMEOUT_SECS', self.WEATHER_TIMEOUT_SECS,
        )
        # A blank override keeps the built-in default.
        default_location = self.get_env_variable( 'TC_WEATHER_DEFAULT_LOCATION', '' ).strip()
        if default_location:
            self.WEATHER_DEFAULT_LOCATION = default_location
        return

    def load_hosts( self ) -> None:
        """
        Local addresses are always allowed.  TC_EXTRA_HOST_URLS adds public
        URLs, each contributing a host to ALLOWED_HOSTS and an origin to
        the CSRF trusted origins.
        """
        host_list = [ '127.0.0.1', 'localhost' ]
        origin_list = [ f'http://{host}:{self.DJANGO_SERVER_PORT}' for host in host_list ]

        extra_host_urls_str = self.get_env_variable( 'TC_EXTRA_HOST_URLS', '' )
        for host, origin in self.parse_url_list_str( extra_host_urls_str ):
            host_list.append( host )
            origin_list.append( origin )
            continue

        self.ALLOWED_HOSTS = tuple( host_list )
        self.TRUSTED_ORIGINS = tuple( origin_list )
        return

    @classmethod
    def read_version( cls ) -> str:
        try:
            with open( VERSION_FILE_PATH, 'r' ) as fh:
                return fh.read().strip()
        except OSError as e:
            raise ImproperlyConfigured( f'Cannot read version file {VERSION_FILE_PATH}: {e}' )

    @classmethod
    def get_env_variable( cls, var_name, default = None ) -> str:
        value = os.environ.get( var_name )
        if value is not None:
            return value
        if default is None:
            raise ImproperlyConfigured( f'Set the {var_name} environment variable' )
        return default

    @classmethod
    def get_number_variable( cls, var_name, default : float ) -> float:
        """ Unparseable values fall back to the default. """
        try:
            return float( cls.get_env_variable( var_name, default ))
        except ( TypeError, ValueError ):
            return default

    @classmethod
    def parse_url_list_str( cls, a_string : str ) -> List[ Tuple[ str, str ]]:
        host_origin_list = list()
        for url_str in re.split( r'[\s;,]+', a_string or '' ):
            parsed_url = urllib.parse.urlparse( url_str )
            if not ( parsed_url.scheme and parsed_url.hostname ):
                continue
            try:
                port = parsed_url.port
            except ValueError:
                continue
            origin = f'{parsed_url.scheme}://{parsed_url.hostname}'
            if port:
                origin = f'{origin}:{port}'
            host_origin_list.append( ( parsed_url.hostname, origin ) )
            continue
        return host_origin_list

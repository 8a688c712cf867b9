# -*- coding: utf-8 -*-
"""
The single source of "now" for application code.

Cache freshness and "upcoming trip" decisions read the clock through here
so tests can pin it with set() or step it forward with increment()
instead of sleeping.  The offset is process-global; tests must reset().
"""
import datetime

from django.utils import timezone

API_DATE_FORMAT = '%Y-%m-%d'

_offset = datetime.timedelta()


def now() -> datetime.datetime:
    """ Aware UTC datetime, shifted by any offset set by tests. """
    return timezone.now() + _offset


def today() -> datetime.date:
    return now().date()


def set( force_datetime : datetime.datetime ):
    global _offset
    _offset = force_datetime - timezone.now()
    return


def increment( **timedelta_kwargs ):
    global _offset
    _offset += datetime.timedelta( **timedelta_kwargs )
    return


def reset():
    global _offset
    _offset = datetime.timedelta()
    return


def to_date_str( date_or_datetime = None ) -> str:
    if date_or_datetime is None:
        date_or_datetime = now()
    return date_or_datetime.strftime( API_DATE_FORMAT )

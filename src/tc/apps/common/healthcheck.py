import logging
from typing import Dict

from django.conf import settings
from django.db import DatabaseError, connection

logger = logging.getLogger(__name__)


def do_healthcheck( db_layer = True ) -> Dict[ str, object ]:
    """
    Only the database decides health.  A missing weather key is reported
    but is not a failure: weather endpoints degrade to placeholders.
    """
    status = {
        'is_healthy': True,
        'database': 'not-checked',
        'weather': 'configured' if settings.OPENWEATHER_API_KEY else 'not-configured',
    }
    if db_layer:
        try:
            connection.ensure_connection()
            status['database'] = 'healthy'
        except DatabaseError as e:
            logger.error( 'Health check cannot reach the database: %s', e )
            status['database'] = 'unhealthy'
            status['is_healthy'] = False
    return status

#!/usr/bin/env python
"""Django's command-line utility for administrative tasks."""
import os
import sys


def main():
    """Run administrative tasks."""
    os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'tc.settings.development')
    try:
        from django.core.management import execute_from_command_line
    except ImportError as exc:
        raise ImportError(
            "Couldn't import Django. Are you sure it's installed and "
            "available on your PYTHONPATH environment variable? Did you "
            "forget to activate a virtual environment?"
        ) from exc

    set_runserver_port_if_needed()
    execute_from_command_line( sys.argv )


def set_runserver_port_if_needed():
    """
    When runserver is given no address, listen on DJANGO_SERVER_PORT (if
    set) so the server matches the trusted origins built from it.
    """
    if len( sys.argv ) < 2 or sys.argv[1] != 'runserver':
        return

    for arg in sys.argv[2:]:
        if not arg.startswith( '--' ):
            return
        continue

    default_port = os.environ.get( 'DJANGO_SERVER_PORT' )
    if default_port:
        sys.argv.append( f'127.0.0.1:{default_port}' )
    return


if __name__ == '__main__':
    main()

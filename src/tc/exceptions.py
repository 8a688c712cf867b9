"""
Domain failures raised by services and workflows.  The API layer maps
these to HTTP status codes; nothing in here knows about HTTP.
"""


class TripPlannerError( Exception ):

    default_message = 'Request could not be completed'

    def __init__( self, message : str = None ):
        self.message = message or self.default_message
        super().__init__( self.message )
        return


class EntityNotFoundError( TripPlannerError ):
    default_message = 'Not found'


class AccessDeniedError( TripPlannerError ):
    default_message = 'Permission denied'


class InvalidRequestError( TripPlannerError ):
    default_message = 'Invalid request'


class ConflictError( TripPlannerError ):
    default_message = 'Conflict'


class UpstreamError( TripPlannerError ):
    """ An external provider was unreachable or answered with garbage. """
    default_message = 'Upstream provider failure'

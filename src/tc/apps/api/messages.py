"""
User-facing message text for API responses.  Anything the client may show
verbatim belongs here so wording stays consistent between endpoints.
"""


class APIMessages:

    @staticmethod
    def is_required(field: str) -> str:
        return f'{field} is required'

    @staticmethod
    def not_found(resource: str) -> str:
        return f'{resource} not found'

    @staticmethod
    def already_exists(resource: str, field: str) -> str:
        return f'{resource} with this {field} already exists'

    # -------------------------------------------------------------------------
    # Authentication messages
    # -------------------------------------------------------------------------
    INVALID_CREDENTIALS = 'Invalid username or password'
    INCORRECT_PASSWORD = 'Current password is incorrect'
    LOGGED_OUT = 'Logged out'

    # -------------------------------------------------------------------------
    # Authorization messages
    # -------------------------------------------------------------------------
    TRIP_READ_DENIED = 'You do not have access to this trip'
    TRIP_WRITE_DENIED = 'You do not have permission to modify this trip'
    TRIP_OWNER_ONLY = 'Only the trip owner can perform this action'

    # -------------------------------------------------------------------------
    # Sharing messages
    # -------------------------------------------------------------------------
    SHARE_WITH_SELF = 'Cannot share trip with yourself'
    ALREADY_SHARED = 'Trip already shared with this user'

    # -------------------------------------------------------------------------
    # Weather messages
    # -------------------------------------------------------------------------
    NO_UPCOMING_TRIPS = 'No upcoming trips found'

    # -------------------------------------------------------------------------
    # Generic error messages
    # -------------------------------------------------------------------------
    BAD_REQUEST = 'Bad request'
    VALIDATION_FAILED = 'Validation failed'
    UNKNOWN_FIELD = 'This field is not allowed'
    INTERNAL_ERROR = 'Internal server error'
    END_BEFORE_START = 'End date must not be before start date'
    CHECK_OUT_BEFORE_CHECK_IN = 'Check-out must not be before check-in'

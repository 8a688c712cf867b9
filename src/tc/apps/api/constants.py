"""
API field name constants for consistent serialization.

These constants define the JSON keys used in API responses and requests.
The browser client expects camelCase keys, so any key that differs from
the model attribute name is spelled out here.  Check here first before
adding a new field.
"""


class APIFields:
    """
    Field names for API responses and requests.

    All modules should import from here to ensure consistent naming.
    """

    # -------------------------------------------------------------------------
    # Common fields (used across multiple endpoints)
    # -------------------------------------------------------------------------
    ID = 'id'
    NAME = 'name'
    TITLE = 'title'
    DESCRIPTION = 'description'
    COLOR = 'color'
    LOCATION = 'location'
    MESSAGE = 'message'
    ERRORS = 'errors'

    # -------------------------------------------------------------------------
    # Users
    # -------------------------------------------------------------------------
    USER_ID = 'userId'
    USERNAME = 'username'
    EMAIL = 'email'
    PASSWORD = 'password'

    # -------------------------------------------------------------------------
    # Trips
    # -------------------------------------------------------------------------
    TRIP_ID = 'tripId'
    DESTINATION = 'destination'
    START_DATE = 'startDate'
    END_DATE = 'endDate'
    IMAGE_URL = 'imageUrl'
    IS_SHARED = 'isShared'
    ROLE = 'role'

    # -------------------------------------------------------------------------
    # Schedules
    # -------------------------------------------------------------------------
    DAY = 'day'
    TIME = 'time'

    # -------------------------------------------------------------------------
    # Packing
    # -------------------------------------------------------------------------
    CATEGORY_ID = 'categoryId'
    QUANTITY = 'quantity'
    IS_PACKED = 'isPacked'

    # -------------------------------------------------------------------------
    # Accommodations
    # -------------------------------------------------------------------------
    ADDRESS = 'address'
    CHECK_IN = 'checkIn'
    CHECK_OUT = 'checkOut'
    CONFIRMATION_NUMBER = 'confirmationNumber'
    NOTES = 'notes'

    # -------------------------------------------------------------------------
    # Weather
    # -------------------------------------------------------------------------
    TEMPERATURE = 'temperature'
    CONDITION = 'condition'
    DATE = 'date'
    ICON = 'icon'
    IS_PLACEHOLDER = 'isPlaceholder'

"""
Utility functions for API request data handling.
"""
from typing import Optional


def get_int(request_data, key: str) -> Optional[int]:
    """
    Get an integer id from request data.  Accepts ints or numeric strings;
    returns None if missing or not an integer (booleans are rejected).
    """
    value = request_data.get(key)
    if value is None or isinstance(value, bool):
        return None
    try:
        return int(str(value).strip())
    except (TypeError, ValueError):
        return None

"""
DRF throttling classes for API rate limiting.
"""

from rest_framework.throttling import AnonRateThrottle


class AuthAttemptRateThrottle( AnonRateThrottle ):
    """Rate limit for unauthenticated login and registration attempts."""
    scope = 'auth_attempts'

"""
Utility modules for the reviews service
"""

from .business_profile_client import BusinessProfileClient
from .oauth_client import OAuthClient
from .validators import clamp_int, parse_limit, validate_location_ids

__all__ = [
    "BusinessProfileClient",
    "OAuthClient",
    "clamp_int",
    "parse_limit",
    "validate_location_ids",
]

"""
Validation utilities for the reviews gateway
"""

import math
from typing import Optional

from reviews_service.utils.errors import ConfigurationError

MIN_LIMIT = 1
MAX_LIMIT = 50
DEFAULT_LIMIT = "10"

# Marker left in sample configuration, e.g. accounts/YOUR_ACCOUNT_ID
PLACEHOLDER_MARKER = "YOUR_"

_RADIX_PREFIXES = {"0x": 16, "0o": 8, "0b": 2}


def clamp_int(value: Optional[str], minimum: int, maximum: int) -> int:
    """
    Read a query string value as a number and clamp it to [minimum, maximum]

    Surrounding whitespace is ignored and an empty string reads as 0.
    Unsigned ``0x``/``0o``/``0b`` literals read in their base. Decimals are
    truncated toward zero. Anything that does not read as a finite number,
    including non-ASCII digits, falls back to ``minimum``.
    """
    text = (value or "").strip()
    if not text:
        number = 0.0
    elif not text.isascii() or "_" in text:
        # float() accepts these, a query string number does not
        return minimum
    elif text[:2].lower() in _RADIX_PREFIXES:
        if not text[2:].isalnum():
            return minimum
        try:
            number = float(int(text[2:], _RADIX_PREFIXES[text[:2].lower()]))
        except ValueError:
            return minimum
    else:
        try:
            number = float(text)
        except ValueError:
            return minimum

    if not math.isfinite(number):
        return minimum

    return max(minimum, min(maximum, math.trunc(number)))


def parse_limit(raw: Optional[str]) -> int:
    """
    Effective review count for a request

    An absent parameter means 10. A present but non-numeric one means 1, not
    10.
    """
    if raw is None:
        raw = DEFAULT_LIMIT
    return clamp_int(raw, MIN_LIMIT, MAX_LIMIT)


def validate_location_ids(account_id: Optional[str], location_id: Optional[str]) -> None:
    """Raise ConfigurationError unless both identifiers are usable"""
    if (
        not account_id
        or not location_id
        or PLACEHOLDER_MARKER in account_id
        or PLACEHOLDER_MARKER in location_id
    ):
        raise ConfigurationError(
            "Missing/placeholder accountId or locationId. "
            "Provide ?accountId=...&locationId=... or set GBP_ACCOUNT_ID and GBP_LOCATION_ID."
        )

"""
Error types for the reviews gateway
Every failure in the fetch pipeline surfaces as one of these
"""

from typing import Optional

# Upstream bodies can be large HTML error pages; keep only the head
BODY_EXCERPT_LIMIT = 1000


def excerpt(body: Optional[str], limit: int = BODY_EXCERPT_LIMIT) -> str:
    """Trim an upstream response body for inclusion in an error message"""
    if not body:
        return ""
    body = body.strip()
    if len(body) <= limit:
        return body
    return body[:limit] + "..."


class ReviewsGatewayError(Exception):
    """Base error for the reviews gateway"""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ConfigurationError(ReviewsGatewayError):
    """Missing OAuth secrets or missing/placeholder location identifiers"""


class UpstreamError(ReviewsGatewayError):
    """An upstream Google endpoint rejected a request or could not be reached"""

    def __init__(self, message: str, status_code: Optional[int] = None, body: str = ""):
        super().__init__(message)
        self.status_code = status_code
        self.body = body


class UpstreamAuthError(UpstreamError):
    """OAuth token refresh was rejected or returned something unusable"""


class MissingAccessTokenError(UpstreamAuthError):
    """Token endpoint answered 2xx but without an access_token"""


class UpstreamFetchError(UpstreamError):
    """Reviews listing endpoint rejected a page request"""

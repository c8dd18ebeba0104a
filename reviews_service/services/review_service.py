"""
Review Service
Business logic for fetching, normalizing and ordering location reviews
"""

import math
import re
from datetime import datetime, timezone
from typing import Any, Dict, Iterable, List, Optional

import httpx
import structlog

from reviews_service.models.review import STAR_RATING_VALUES, NormalizedReview
from reviews_service.utils.business_profile_client import BusinessProfileClient
from reviews_service.utils.config import BusinessProfileConfig, OAuthConfig
from reviews_service.utils.errors import ConfigurationError
from reviews_service.utils.oauth_client import OAuthClient
from reviews_service.utils.validators import validate_location_ids

logger = structlog.get_logger(__name__)

_FRACTION = re.compile(r"\.(\d+)")


def star_rating_to_number(label: Any) -> int:
    """Map ONE..FIVE to 1..5; anything else is 0"""
    if not isinstance(label, str):
        return 0
    return STAR_RATING_VALUES.get(label, 0)


def parse_epoch_seconds(raw: Any) -> int:
    """
    Parse an RFC 3339 timestamp into whole epoch seconds

    The API sends values such as ``2024-03-01T10:15:30.123456789Z``. Naive
    values are read as UTC. Missing or unparseable input gives 0.
    """
    if not raw or not isinstance(raw, str):
        return 0

    value = raw.strip()
    if value[-1:] in ("Z", "z"):
        value = value[:-1] + "+00:00"
    # fromisoformat wants microseconds at most
    value = _FRACTION.sub(lambda m: "." + (m.group(1) + "000000")[:6], value, count=1)

    try:
        parsed = datetime.fromisoformat(value)
    except ValueError:
        return 0

    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return math.floor(parsed.timestamp())


def _text(value: Any) -> Optional[str]:
    if not value:
        return None
    return value if isinstance(value, str) else str(value)


def normalize_review(raw: Dict[str, Any]) -> NormalizedReview:
    """Map one upstream review record onto the output shape"""
    if not isinstance(raw, dict):
        raw = {}
    reviewer = raw.get("reviewer")
    if not isinstance(reviewer, dict):
        reviewer = {}

    return NormalizedReview(
        review_id=_text(raw.get("reviewId")),
        author_name=_text(reviewer.get("displayName")) or "Anonymous",
        profile_photo_url=_text(reviewer.get("profilePhotoUrl")) or "",
        rating=star_rating_to_number(raw.get("starRating")),
        time=parse_epoch_seconds(raw.get("createTime")),
        text=_text(raw.get("comment")) or "",
        create_time=_text(raw.get("createTime")),
        update_time=_text(raw.get("updateTime")),
    )


def order_reviews(reviews: Iterable[NormalizedReview], limit: int) -> List[NormalizedReview]:
    """Newest first, unknown creation times last, at most ``limit`` entries"""
    ordered = sorted(reviews, key=lambda r: (r.time != 0, r.time), reverse=True)
    return ordered[:limit]


class ReviewService:
    """Runs the token -> pages -> normalize -> order pipeline for one request"""

    def __init__(
        self,
        oauth_config: OAuthConfig,
        profile_config: BusinessProfileConfig,
        timeout: float = 30.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.oauth_config = oauth_config
        self.profile_config = profile_config
        self.timeout = timeout
        self.transport = transport

    async def fetch_latest_reviews(
        self,
        limit: int,
        account_id: Optional[str] = None,
        location_id: Optional[str] = None,
    ) -> List[NormalizedReview]:
        """
        Fetch the newest ``limit`` reviews for a location

        Empty identifiers fall back to the configured defaults. Secrets and
        identifiers are checked before anything goes over the network. There is
        no retry and no partial result: any failure propagates.
        """
        account_id = account_id or self.profile_config.account_id
        location_id = location_id or self.profile_config.location_id

        missing = self.oauth_config.missing_secrets()
        if missing:
            raise ConfigurationError(f"Missing OAuth secrets: {', '.join(missing)}")
        validate_location_ids(account_id, location_id)

        async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
            oauth = OAuthClient(self.oauth_config, client)
            access_token = await oauth.refresh_access_token()

            profile = BusinessProfileClient(client, base_url=self.profile_config.api_base_url)
            raw_reviews = await profile.list_reviews(access_token, account_id, location_id, limit)

        reviews = order_reviews((normalize_review(r) for r in raw_reviews), limit)
        logger.info(
            "Fetched latest reviews",
            account_id=account_id,
            location_id=location_id,
            limit=limit,
            fetched=len(raw_reviews),
            returned=len(reviews),
        )
        return reviews

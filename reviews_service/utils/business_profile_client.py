"""
Google Business Profile Reviews Client
Pages through the reviews listing for one account/location
"""

from typing import Any, Dict, List, Optional
from urllib.parse import quote

import httpx
import structlog

from reviews_service.utils.errors import UpstreamFetchError, excerpt
from reviews_service.utils.validators import validate_location_ids

logger = structlog.get_logger(__name__)

# Upstream rejects larger pages
MAX_PAGE_SIZE = 50


class BusinessProfileClient:
    """Client for the accounts.locations.reviews.list endpoint"""

    def __init__(self, client: httpx.AsyncClient, base_url: str = "https://mybusiness.googleapis.com/v4"):
        self.client = client
        self.base_url = base_url.rstrip("/")

    def reviews_url(self, account_id: str, location_id: str) -> str:
        return (
            f"{self.base_url}/accounts/{quote(account_id, safe='')}"
            f"/locations/{quote(location_id, safe='')}/reviews"
        )

    async def _get_page(
        self,
        url: str,
        access_token: str,
        page_size: int,
        page_token: Optional[str],
    ) -> Dict[str, Any]:
        params = {"pageSize": str(page_size)}
        if page_token:
            params["pageToken"] = page_token

        try:
            response = await self.client.get(
                url,
                params=params,
                headers={"Authorization": f"Bearer {access_token}"},
            )
        except httpx.HTTPError as e:
            logger.error("Reviews list request failed", error=str(e))
            raise UpstreamFetchError(f"Business Profile reviews list failed: {e}") from e

        if not response.is_success:
            body = excerpt(response.text)
            logger.error("Reviews list rejected", status_code=response.status_code)
            raise UpstreamFetchError(
                f"Business Profile reviews list failed: {response.status_code} {body}",
                status_code=response.status_code,
                body=body,
            )

        try:
            payload = response.json()
        except ValueError as e:
            raise UpstreamFetchError(
                "Business Profile reviews list returned invalid JSON",
                status_code=response.status_code,
                body=excerpt(response.text),
            ) from e

        if not isinstance(payload, dict):
            raise UpstreamFetchError(
                "Business Profile reviews list returned an unexpected payload",
                status_code=response.status_code,
                body=excerpt(response.text),
            )
        return payload

    async def list_reviews(
        self,
        access_token: str,
        account_id: str,
        location_id: str,
        target_count: int,
    ) -> List[Dict[str, Any]]:
        """
        Accumulate raw review records until target_count is reached

        Stops early when the upstream has no continuation token or returns an
        empty page, so a token paired with zero results cannot loop forever.
        Records come back in upstream order, neither sorted nor truncated.
        Any failed page aborts the whole listing.
        """
        validate_location_ids(account_id, location_id)

        url = self.reviews_url(account_id, location_id)
        collected: List[Dict[str, Any]] = []
        page_token: Optional[str] = None
        pages = 0

        while len(collected) < target_count:
            page_size = min(MAX_PAGE_SIZE, target_count - len(collected))
            payload = await self._get_page(url, access_token, page_size, page_token)
            pages += 1

            reviews = payload.get("reviews") or []
            if not isinstance(reviews, list):
                reviews = []
            collected.extend(reviews)

            page_token = payload.get("nextPageToken")
            logger.info(
                "Fetched reviews page",
                page=pages,
                page_size=page_size,
                received=len(reviews),
                has_more=bool(page_token),
            )

            if not page_token or not reviews:
                break

        return collected

"""
Review listing routes
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query
from fastapi.responses import JSONResponse
import structlog

from reviews_service.models.review import ErrorResponse, ReviewsResponse
from reviews_service.services.review_service import ReviewService
from reviews_service.utils.config import (
    get_app_config,
    load_business_profile_config,
    load_oauth_config,
)
from reviews_service.utils.errors import UpstreamError
from reviews_service.utils.validators import parse_limit

logger = structlog.get_logger(__name__)

router = APIRouter()


class UTF8JSONResponse(JSONResponse):
    media_type = "application/json; charset=utf-8"


def get_review_service() -> ReviewService:
    """Dependency building the pipeline with freshly read credentials"""
    return ReviewService(
        oauth_config=load_oauth_config(),
        profile_config=load_business_profile_config(),
        timeout=get_app_config().upstream_timeout_seconds,
    )


@router.get("/reviews", response_model=ReviewsResponse, responses={500: {"model": ErrorResponse}})
async def list_reviews(
    limit: Optional[str] = Query(None, description="Number of reviews, clamped to 1..50"),
    account_id: Optional[str] = Query(None, alias="accountId", description="Overrides GBP_ACCOUNT_ID"),
    location_id: Optional[str] = Query(None, alias="locationId", description="Overrides GBP_LOCATION_ID"),
    service: ReviewService = Depends(get_review_service),
):
    """List the latest reviews for a location, newest first"""
    effective_limit = parse_limit(limit)

    try:
        reviews = await service.fetch_latest_reviews(
            effective_limit,
            account_id=account_id,
            location_id=location_id,
        )
    except Exception as e:
        logger.error(
            "Failed to list reviews",
            error=str(e),
            error_type=type(e).__name__,
            upstream_status=e.status_code if isinstance(e, UpstreamError) else None,
        )
        return UTF8JSONResponse(status_code=500, content=ErrorResponse(error=str(e)).model_dump())

    body = ReviewsResponse(reviews=reviews)
    return UTF8JSONResponse(status_code=200, content=body.model_dump(by_alias=True))

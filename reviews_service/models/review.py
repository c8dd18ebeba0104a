"""
Review data models and schemas
"""

from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class StarRating(str, Enum):
    """Star rating labels sent by the reviews API"""
    STAR_RATING_UNSPECIFIED = "STAR_RATING_UNSPECIFIED"
    ONE = "ONE"
    TWO = "TWO"
    THREE = "THREE"
    FOUR = "FOUR"
    FIVE = "FIVE"


STAR_RATING_VALUES = {
    StarRating.ONE.value: 1,
    StarRating.TWO.value: 2,
    StarRating.THREE.value: 3,
    StarRating.FOUR.value: 4,
    StarRating.FIVE.value: 5,
}


class NormalizedReview(BaseModel):
    """Review in the shape the display widget consumes"""
    review_id: Optional[str] = Field(None, alias="reviewId", description="Upstream review identifier")
    author_name: str = Field("Anonymous", description="Reviewer display name")
    profile_photo_url: str = Field("", description="Reviewer photo URL")
    rating: int = Field(0, ge=0, le=5, description="Star rating, 0 when unknown")
    time: int = Field(0, description="Creation time in epoch seconds, 0 when unknown")
    text: str = Field("", description="Review comment")
    create_time: Optional[str] = Field(None, alias="createTime", description="Raw creation timestamp")
    update_time: Optional[str] = Field(None, alias="updateTime", description="Raw update timestamp")

    model_config = ConfigDict(populate_by_name=True)


class ReviewsResponse(BaseModel):
    """Body of a successful GET /reviews"""
    reviews: List[NormalizedReview] = Field(default_factory=list)


class ErrorResponse(BaseModel):
    """Body of a failed GET /reviews"""
    error: str

"""
Data models for the reviews service
"""

from .review import (
    STAR_RATING_VALUES,
    ErrorResponse,
    NormalizedReview,
    ReviewsResponse,
    StarRating,
)

__all__ = [
    "STAR_RATING_VALUES",
    "ErrorResponse",
    "NormalizedReview",
    "ReviewsResponse",
    "StarRating",
]

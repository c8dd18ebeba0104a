"""
Business logic services for the reviews service
"""

from .review_service import ReviewService

__all__ = ["ReviewService"]

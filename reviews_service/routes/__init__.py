"""
API routes for the reviews service
"""

from . import reviews

__all__ = ["reviews"]

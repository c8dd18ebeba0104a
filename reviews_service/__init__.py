"""
Reviews Service
Read-only gateway for the latest Google Business Profile reviews
"""

__version__ = "1.0.0"

"""
Tests for reviews service
"""

"""
Pytest configuration for reviews-service tests
"""

import os

# Keep module-level logging setup quiet and predictable under test
os.environ.setdefault("LOG_LEVEL", "WARNING")


def pytest_configure(config):
    config.addinivalue_line(
        "markers", "asyncio: mark test as an asyncio test."
    )

"""
Pytest fixtures for reviews service tests
"""

import pytest

from reviews_service.utils.config import BusinessProfileConfig, OAuthConfig
from tests.fakes import API_BASE_URL, TOKEN_URL, FakeGoogleAPI


@pytest.fixture
def oauth_config() -> OAuthConfig:
    """OAuth configuration with fake credentials"""
    return OAuthConfig(
        client_id="test-client-id",
        client_secret="test-client-secret",
        refresh_token="test-refresh-token",
        token_url=TOKEN_URL,
    )


@pytest.fixture
def profile_config() -> BusinessProfileConfig:
    """Business Profile configuration with default identifiers"""
    return BusinessProfileConfig(
        account_id="1234567890",
        location_id="9876543210",
        api_base_url=API_BASE_URL,
    )


@pytest.fixture
def fake_google() -> FakeGoogleAPI:
    """Fake upstream with no pages queued"""
    return FakeGoogleAPI()

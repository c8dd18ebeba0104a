"""
Unit tests for configuration loading
"""

import pytest
from pydantic import ValidationError

from reviews_service.utils.config import (
    AppConfig,
    load_business_profile_config,
    load_oauth_config,
)


class TestOAuthConfig:
    """Test OAuthConfig"""

    def test_reads_secrets_from_environment(self, monkeypatch):
        monkeypatch.setenv("GOOGLE_OAUTH_CLIENT_ID", "env-client-id")
        monkeypatch.setenv("GOOGLE_OAUTH_CLIENT_SECRET", "env-client-secret")
        monkeypatch.setenv("GOOGLE_OAUTH_REFRESH_TOKEN", "env-refresh-token")

        config = load_oauth_config()

        assert config.client_id.get_secret_value() == "env-client-id"
        assert config.missing_secrets() == []
        assert config.token_url == "https://oauth2.googleapis.com/token"

    def test_reports_missing_secrets_by_name(self, monkeypatch):
        monkeypatch.setenv("GOOGLE_OAUTH_CLIENT_ID", "env-client-id")
        monkeypatch.setenv("GOOGLE_OAUTH_CLIENT_SECRET", "")
        monkeypatch.delenv("GOOGLE_OAUTH_REFRESH_TOKEN", raising=False)

        config = load_oauth_config()

        assert config.missing_secrets() == [
            "GOOGLE_OAUTH_CLIENT_SECRET",
            "GOOGLE_OAUTH_REFRESH_TOKEN",
        ]

    def test_secrets_are_hidden_from_repr(self, monkeypatch):
        monkeypatch.setenv("GOOGLE_OAUTH_CLIENT_SECRET", "super-secret-value")

        config = load_oauth_config()

        assert "super-secret-value" not in repr(config)
        assert "super-secret-value" not in str(config.model_dump())

    def test_read_fresh_on_every_load(self, monkeypatch):
        monkeypatch.setenv("GOOGLE_OAUTH_REFRESH_TOKEN", "first")
        first = load_oauth_config()
        monkeypatch.setenv("GOOGLE_OAUTH_REFRESH_TOKEN", "second")
        second = load_oauth_config()

        assert first.refresh_token.get_secret_value() == "first"
        assert second.refresh_token.get_secret_value() == "second"


class TestBusinessProfileConfig:
    """Test BusinessProfileConfig"""

    def test_reads_default_identifiers(self, monkeypatch):
        monkeypatch.setenv("GBP_ACCOUNT_ID", "111")
        monkeypatch.setenv("GBP_LOCATION_ID", "222")

        config = load_business_profile_config()

        assert config.account_id == "111"
        assert config.location_id == "222"
        assert config.api_base_url == "https://mybusiness.googleapis.com/v4"


class TestAppConfig:
    """Test AppConfig"""

    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("ALLOWED_ORIGIN", raising=False)
        monkeypatch.delenv("UPSTREAM_TIMEOUT_SECONDS", raising=False)

        config = AppConfig()

        assert config.allowed_origin == "*"
        assert config.upstream_timeout_seconds == 30.0

    def test_allowed_origin_from_environment(self, monkeypatch):
        monkeypatch.setenv("ALLOWED_ORIGIN", "https://shop.example.com")

        assert AppConfig().allowed_origin == "https://shop.example.com"

    def test_blank_allowed_origin_means_any(self, monkeypatch):
        monkeypatch.setenv("ALLOWED_ORIGIN", "  ")

        assert AppConfig().allowed_origin == "*"

    def test_timeout_must_be_positive(self, monkeypatch):
        monkeypatch.setenv("UPSTREAM_TIMEOUT_SECONDS", "0")

        with pytest.raises(ValidationError):
            AppConfig()

    def test_log_level_is_normalized(self, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", "debug")

        assert AppConfig().log_level == "DEBUG"

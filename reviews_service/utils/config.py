"""
Configuration Management
Environment-based configuration for OAuth credentials, Business Profile
location defaults and application settings
"""

from typing import List, Optional

from pydantic import SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
import structlog

logger = structlog.get_logger(__name__)


class OAuthConfig(BaseSettings):
    """Google OAuth client credentials used for the refresh-token grant"""

    client_id: Optional[SecretStr] = None
    client_secret: Optional[SecretStr] = None
    refresh_token: Optional[SecretStr] = None

    token_url: str = "https://oauth2.googleapis.com/token"

    model_config = SettingsConfigDict(env_prefix="GOOGLE_OAUTH_", case_sensitive=False)

    def missing_secrets(self) -> List[str]:
        """Names of the env vars whose secret is absent or empty"""
        missing = []
        for name in ("client_id", "client_secret", "refresh_token"):
            value = getattr(self, name)
            if value is None or not value.get_secret_value():
                missing.append(f"GOOGLE_OAUTH_{name.upper()}")
        return missing

    def log_config(self):
        """Log configuration (without sensitive data)"""
        logger.info(
            "OAuth configuration",
            token_url=self.token_url,
            credentials_complete=not self.missing_secrets(),
        )


class BusinessProfileConfig(BaseSettings):
    """Default account/location and the reviews API location"""

    account_id: Optional[str] = None
    location_id: Optional[str] = None

    api_base_url: str = "https://mybusiness.googleapis.com/v4"

    model_config = SettingsConfigDict(env_prefix="GBP_", case_sensitive=False)

    def log_config(self):
        """Log configuration"""
        logger.info(
            "Business Profile configuration",
            api_base_url=self.api_base_url,
            account_id=self.account_id,
            location_id=self.location_id,
        )


class AppConfig(BaseSettings):
    """Application Configuration"""

    # Service info
    service_name: str = "reviews-service"
    service_version: str = "1.0.0"

    # CORS
    allowed_origin: str = "*"

    # Outbound calls
    upstream_timeout_seconds: float = 30.0

    # Server
    host: str = "0.0.0.0"
    port: int = 8000
    log_level: str = "INFO"

    model_config = SettingsConfigDict(env_prefix="", case_sensitive=False)

    @field_validator("allowed_origin")
    @classmethod
    def default_blank_origin(cls, v):
        return v.strip() or "*"

    @field_validator("upstream_timeout_seconds")
    @classmethod
    def validate_timeout(cls, v):
        if v <= 0:
            raise ValueError("Upstream timeout must be greater than 0 seconds")
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v):
        level = v.upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Unknown log level: {v}")
        return level


# Global configuration instance
_app_config: Optional[AppConfig] = None


def get_app_config() -> AppConfig:
    """Get application configuration instance"""
    global _app_config
    if _app_config is None:
        _app_config = AppConfig()
    return _app_config


def load_oauth_config() -> OAuthConfig:
    """Read OAuth secrets from the environment. Not cached, read per request."""
    return OAuthConfig()


def load_business_profile_config() -> BusinessProfileConfig:
    """Read location defaults from the environment. Not cached, read per request."""
    return BusinessProfileConfig()


def validate_configuration() -> bool:
    """Log the effective configuration and warn on gaps"""
    app_config = get_app_config()
    oauth_config = load_oauth_config()
    profile_config = load_business_profile_config()

    logger.info(
        "Application configuration",
        service=app_config.service_name,
        allowed_origin=app_config.allowed_origin,
        upstream_timeout_seconds=app_config.upstream_timeout_seconds,
    )
    oauth_config.log_config()
    profile_config.log_config()

    missing = oauth_config.missing_secrets()
    if missing:
        logger.warning("OAuth secrets not configured, /reviews will fail", missing=missing)
    if not profile_config.account_id or not profile_config.location_id:
        logger.warning("No default account/location configured, callers must pass accountId and locationId")

    return True

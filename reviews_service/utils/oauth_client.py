"""
Google OAuth Client
Exchanges the stored refresh token for a short-lived access token
"""

import httpx
import structlog

from reviews_service.utils.config import OAuthConfig
from reviews_service.utils.errors import (
    ConfigurationError,
    MissingAccessTokenError,
    UpstreamAuthError,
    excerpt,
)

logger = structlog.get_logger(__name__)


class OAuthClient:
    """Client for the OAuth token endpoint (refresh-token grant only)"""

    def __init__(self, config: OAuthConfig, client: httpx.AsyncClient):
        self.config = config
        self.client = client

    def _form(self) -> dict:
        missing = self.config.missing_secrets()
        if missing:
            raise ConfigurationError(f"Missing OAuth secrets: {', '.join(missing)}")

        return {
            "client_id": self.config.client_id.get_secret_value(),
            "client_secret": self.config.client_secret.get_secret_value(),
            "refresh_token": self.config.refresh_token.get_secret_value(),
            "grant_type": "refresh_token",
        }

    async def refresh_access_token(self) -> str:
        """
        Run one refresh-token exchange and return the access token

        Raises:
            ConfigurationError: a secret is missing (no request is made)
            UpstreamAuthError: the endpoint answered non-2xx or was unreachable
            MissingAccessTokenError: 2xx without an access_token
        """
        form = self._form()

        try:
            response = await self.client.post(
                self.config.token_url,
                data=form,
                headers={"Content-Type": "application/x-www-form-urlencoded"},
            )
        except httpx.HTTPError as e:
            logger.error("OAuth token request failed", error=str(e))
            raise UpstreamAuthError(f"OAuth token refresh failed: {e}") from e

        if not response.is_success:
            body = excerpt(response.text)
            logger.error("OAuth token refresh rejected", status_code=response.status_code)
            raise UpstreamAuthError(
                f"OAuth token refresh failed: {response.status_code} {body}",
                status_code=response.status_code,
                body=body,
            )

        try:
            payload = response.json()
        except ValueError:
            payload = None

        access_token = payload.get("access_token") if isinstance(payload, dict) else None
        if not access_token:
            logger.error("OAuth token response had no access_token", status_code=response.status_code)
            raise MissingAccessTokenError(
                "OAuth token refresh returned no access_token.",
                status_code=response.status_code,
                body=excerpt(response.text),
            )

        logger.info("OAuth access token refreshed", expires_in=payload.get("expires_in"))
        return access_token

"""JWT token domain service."""

import logfire

from market.config import AuthSettings
from market.util.jwt import TokenPayload, verify_token

from .base import Service


class JWTService(Service):
    """Domain service for verifying bearer tokens."""

    def __init__(self, auth_settings: AuthSettings) -> None:
        """Initialize JWT service.

        Args:
            auth_settings: Authentication settings
        """
        self.auth_settings = auth_settings

    def verify_token(self, token: str) -> TokenPayload:
        """Verify JWT token and extract payload.

        Raises:
            JWTError: If token is invalid or expired
        """
        with logfire.span("jwt_service.verify_token"):
            try:
                payload = verify_token(token, self.auth_settings)
                logfire.debug("JWT token verified", user_id=payload.user_id)
                return payload
            except Exception as e:
                logfire.warn("JWT token verification failed", error=str(e))
                raise

    def get_user_id_from_authorization(self, authorization: str | None) -> str | None:
        """Extract user ID from an ``Authorization: Bearer <token>`` header.

        Args:
            authorization: Raw header value (optional)

        Returns:
            User ID if the header carries a valid token, None otherwise
        """
        if not authorization:
            return None

        scheme, _, token = authorization.partition(" ")
        if scheme.lower() != "bearer" or not token.strip():
            return None

        try:
            payload = self.verify_token(token.strip())
            return payload.user_id
        except Exception as e:
            # Invalid or expired token, treat as unauthenticated
            logfire.debug(
                "JWT verification failed, treating as unauthenticated", error=str(e)
            )
            return None

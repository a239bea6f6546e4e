"""JWT token domain service."""

import logfire
from pydantic import ValidationError as PydanticValidationError

from artbook.config import AuthSettings
from artbook.util.jwt import JWTError, TokenPayload, create_token, verify_token

from .base import Service


class JWTService(Service):
    """Domain service for session token operations."""

    def __init__(self, auth_settings: AuthSettings) -> None:
        """Initialize JWT service.

        Args:
            auth_settings: Authentication settings
        """
        self.auth_settings = auth_settings

    def create_token(
        self, user_id: str, email: str | None = None, name: str | None = None
    ) -> str:
        """Create a session token for a user.

        Tokens are normally minted by the auth service; this is used by
        tooling and tests that share the secret.
        """
        with logfire.span("jwt_service.create_token", user_id=user_id):
            token = create_token(user_id, self.auth_settings, email=email, name=name)
            logfire.info("JWT token created", user_id=user_id)
            return token

    def verify_token(self, token: str) -> TokenPayload:
        """Verify JWT token and extract payload.

        Raises:
            JWTError: If token is invalid or expired
        """
        with logfire.span("jwt_service.verify_token"):
            try:
                payload = verify_token(token, self.auth_settings)
            except (JWTError, PydanticValidationError) as e:
                logfire.warn("JWT token verification failed", error=str(e))
                raise JWTError(str(e)) from e
            logfire.info("JWT token verified", user_id=payload.user_id)
            return payload

    def get_user_id_from_token(self, token: str | None) -> str | None:
        """Extract user ID from JWT token without raising exceptions.

        Lets routes authenticate optionally: readers without a session still
        get comments, just without per-viewer like flags.

        Args:
            token: JWT token string (optional)

        Returns:
            User ID if token is valid, None if token is missing or invalid
        """
        if not token:
            return None

        try:
            return self.verify_token(token).user_id
        except JWTError as e:
            logfire.debug(
                "JWT verification failed, treating as unauthenticated", error=str(e)
            )
            return None

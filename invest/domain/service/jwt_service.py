"""JWT token domain service."""

import logfire

from invest.config import AuthSettings
from invest.domain.value import Caller, Role
from invest.util.jwt import JWTError, TokenPayload, create_token, verify_token

from .base import Service


class JWTService(Service):
    """Domain service for JWT token operations."""

    def __init__(self, auth_settings: AuthSettings) -> None:
        """Initialize JWT service.

        Args:
            auth_settings: Authentication settings
        """
        self.auth_settings = auth_settings

    def create_token(
        self, user_id: int, role: Role = Role.USER, email_verified: bool = False
    ) -> str:
        """Create JWT token for a user.

        Used by operational tooling and tests; production tokens come from the
        platform's identity service.
        """
        with logfire.span("jwt_service.create_token", user_id=user_id, role=role.value):
            return create_token(user_id, role, email_verified, self.auth_settings)

    def verify_token(self, token: str) -> TokenPayload:
        """Verify JWT token and extract payload.

        Raises:
            JWTError: If token is invalid or expired
        """
        with logfire.span("jwt_service.verify_token"):
            try:
                payload = verify_token(token, self.auth_settings)
            except JWTError as e:
                logfire.warn("JWT token verification failed", error=str(e))
                raise
            logfire.debug(
                "JWT token verified", user_id=payload.user_id, role=payload.role.value
            )
            return payload

    def get_caller_from_token(self, token: str | None) -> Caller | None:
        """Resolve the caller identity from a token without raising.

        Args:
            token: JWT token string (optional)

        Returns:
            Caller if the token is valid, None if it is missing or invalid
        """
        if not token:
            return None

        try:
            payload = self.verify_token(token)
        except JWTError:
            return None

        return Caller(
            user_id=payload.user_id,
            role=payload.role,
            email_verified=payload.email_verified,
        )

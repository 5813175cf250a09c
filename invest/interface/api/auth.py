"""Caller extraction for API routes."""

from invest.domain.service import JWTService
from invest.domain.value import Caller
from invest.interface.error import UnauthenticatedError


def require_caller(jwt_service: JWTService, auth_token: str | None) -> Caller:
    """Resolve the authenticated caller from the auth cookie.

    Args:
        jwt_service: JWT service
        auth_token: Token from the ``auth_token`` cookie

    Returns:
        Caller identity from the token claims

    Raises:
        UnauthenticatedError: If the token is missing, invalid or expired
    """
    if not auth_token:
        raise UnauthenticatedError("Not authenticated")

    caller = jwt_service.get_caller_from_token(auth_token)
    if caller is None:
        raise UnauthenticatedError("Invalid or expired token")
    return caller

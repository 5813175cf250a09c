"""Unit tests for JWTService."""

from datetime import datetime, timedelta, timezone

import jwt
import pytest

from invest.config import AuthSettings
from invest.domain.service import JWTService
from invest.domain.value import Role
from invest.util.jwt import JWTError

SECRET = "test-secret-key-long-enough-for-hs256-signing"


@pytest.fixture
def jwt_service() -> JWTService:
    return JWTService(auth_settings=AuthSettings(jwt_secret=SECRET))


class TestCallerFromToken:
    """Tests for resolving callers from tokens."""

    def test_round_trip_preserves_claims(self, jwt_service):
        token = jwt_service.create_token(42, role=Role.ADMIN, email_verified=True)

        caller = jwt_service.get_caller_from_token(token)

        assert caller is not None
        assert caller.user_id == 42
        assert caller.role == Role.ADMIN
        assert caller.email_verified is True

    def test_claims_default_to_unverified_user(self, jwt_service):
        token = jwt.encode(
            {"user_id": 7, "exp": datetime.now(timezone.utc) + timedelta(hours=1)},
            SECRET,
            algorithm="HS256",
        )

        caller = jwt_service.get_caller_from_token(token)

        assert caller.role == Role.USER
        assert caller.email_verified is False

    def test_missing_token_gives_no_caller(self, jwt_service):
        assert jwt_service.get_caller_from_token(None) is None
        assert jwt_service.get_caller_from_token("") is None

    def test_garbage_token_gives_no_caller(self, jwt_service):
        assert jwt_service.get_caller_from_token("not-a-jwt") is None

    def test_token_signed_with_other_secret_rejected(self, jwt_service):
        other = JWTService(auth_settings=AuthSettings(jwt_secret="other-secret-key-used-only-by-the-issuer-under-test"))
        token = other.create_token(42)

        with pytest.raises(JWTError, match="Invalid token"):
            jwt_service.verify_token(token)

    def test_expired_token_rejected(self, jwt_service):
        token = jwt.encode(
            {"user_id": 7, "exp": datetime.now(timezone.utc) - timedelta(minutes=1)},
            SECRET,
            algorithm="HS256",
        )

        with pytest.raises(JWTError, match="expired"):
            jwt_service.verify_token(token)

    def test_unknown_role_rejected(self, jwt_service):
        token = jwt.encode(
            {
                "user_id": 7,
                "role": "superuser",
                "exp": datetime.now(timezone.utc) + timedelta(hours=1),
            },
            SECRET,
            algorithm="HS256",
        )

        assert jwt_service.get_caller_from_token(token) is None

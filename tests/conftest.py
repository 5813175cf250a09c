"""Test configuration and fixtures."""

from datetime import timedelta

import logfire
import pytest

from invest.config import Settings
from invest.domain.model.common import utcnow
from invest.domain.model.reservation import Reservation
from invest.domain.value import Caller, ReservationId, Role, UserId
from invest.util.jwt import create_token

# Keep telemetry local while testing
logfire.configure(send_to_logfire=False, console=False)


def make_caller(
    user_id: int = 1, role: Role = Role.USER, email_verified: bool = True
) -> Caller:
    """Build a caller identity for use case tests."""
    return Caller(user_id=UserId(user_id), role=role, email_verified=email_verified)


def make_lapsed_reservation(
    reservation_id: ReservationId,
    user_id: int = 1,
    offering_id: int = 10,
    minutes_ago: int = 5,
) -> Reservation:
    """Build an active reservation whose hold already ran out."""
    now = utcnow()
    return Reservation(
        id=reservation_id,
        offering_id=offering_id,
        user_id=user_id,
        share_quantity=3,
        expires_at=now - timedelta(minutes=minutes_ago),
        reserved_at=now - timedelta(minutes=minutes_ago + 30),
    )


def auth_cookies(
    user_id: int, role: Role = Role.USER, email_verified: bool = True
) -> dict[str, str]:
    """Auth cookie signed with the configured JWT secret."""
    token = create_token(user_id, role, email_verified, Settings().auth)
    return {"auth_token": token}


@pytest.fixture
def admin() -> Caller:
    return make_caller(user_id=900, role=Role.ADMIN)


@pytest.fixture
def investor() -> Caller:
    return make_caller(user_id=1)

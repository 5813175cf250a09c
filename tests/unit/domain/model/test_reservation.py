"""Unit tests for the Reservation entity."""

from datetime import timedelta
from uuid import uuid4

import pytest
from pydantic import ValidationError

from invest.domain.model.common import utcnow
from invest.domain.model.reservation import Reservation
from invest.domain.value import ReservationId, ReservationStatus


def _reservation(status=ReservationStatus.ACTIVE, expires_in=timedelta(minutes=30)):
    return Reservation(
        id=ReservationId(uuid4()),
        offering_id=10,
        user_id=1,
        share_quantity=5,
        status=status,
        expires_at=utcnow() + expires_in,
    )


class TestEffectiveStatus:
    """Tests for read-time expiry."""

    def test_active_hold_before_expiry_stays_active(self):
        reservation = _reservation()

        assert not reservation.is_expired(utcnow())
        assert reservation.effective_status(utcnow()) == ReservationStatus.ACTIVE

    def test_active_hold_past_expiry_reads_as_expired(self):
        reservation = _reservation(expires_in=timedelta(minutes=-1))

        assert reservation.is_expired(utcnow())
        assert reservation.effective_status(utcnow()) == ReservationStatus.EXPIRED

    def test_hold_expiring_exactly_now_is_expired(self):
        reservation = _reservation()

        assert reservation.effective_status(reservation.expires_at) == (
            ReservationStatus.EXPIRED
        )

    @pytest.mark.parametrize(
        "status", [ReservationStatus.CANCELLED, ReservationStatus.CONVERTED]
    )
    def test_terminal_status_wins_over_elapsed_expiry(self, status):
        reservation = _reservation(status=status, expires_in=timedelta(minutes=-10))

        assert not reservation.is_expired(utcnow())
        assert reservation.effective_status(utcnow()) == status


class TestTransitions:
    """Tests for the reservation transition table."""

    @pytest.mark.parametrize(
        "target",
        [
            ReservationStatus.CANCELLED,
            ReservationStatus.CONVERTED,
            ReservationStatus.EXPIRED,
        ],
    )
    def test_active_hold_can_leave_active(self, target):
        assert _reservation().can_transition_to(target, utcnow())

    @pytest.mark.parametrize(
        "status",
        [
            ReservationStatus.CANCELLED,
            ReservationStatus.CONVERTED,
            ReservationStatus.EXPIRED,
        ],
    )
    def test_terminal_states_allow_nothing(self, status):
        reservation = _reservation(status=status)

        for target in ReservationStatus:
            assert not reservation.can_transition_to(target, utcnow())

    def test_lapsed_hold_cannot_be_converted(self):
        reservation = _reservation(expires_in=timedelta(seconds=-1))

        assert not reservation.can_transition_to(ReservationStatus.CONVERTED, utcnow())


class TestValidation:
    """Tests for field constraints."""

    def test_share_quantity_must_be_positive(self):
        with pytest.raises(ValidationError):
            Reservation(
                id=ReservationId(uuid4()),
                offering_id=10,
                user_id=1,
                share_quantity=0,
                expires_at=utcnow(),
            )

    def test_reservation_is_immutable(self):
        reservation = _reservation()

        with pytest.raises(ValidationError):
            reservation.status = ReservationStatus.CANCELLED

"""Reservation view shared by reservation use cases."""

from datetime import datetime

from pydantic import BaseModel

from invest.domain.model import Reservation
from invest.domain.value import ReservationStatus


class ReservationView(BaseModel):
    """Reservation as returned to callers.

    ``status`` is the effective status: a lapsed active hold reads as expired.
    """

    reservation_id: str
    offering_id: int
    user_id: int
    share_quantity: int
    status: ReservationStatus
    expires_at: datetime
    reserved_at: datetime
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_reservation(cls, reservation: Reservation, now: datetime) -> "ReservationView":
        return cls(
            reservation_id=str(reservation.id),
            offering_id=reservation.offering_id,
            user_id=reservation.user_id,
            share_quantity=reservation.share_quantity,
            status=reservation.effective_status(now),
            expires_at=reservation.expires_at,
            reserved_at=reservation.reserved_at,
            created_at=reservation.created_at,
            updated_at=reservation.updated_at,
        )

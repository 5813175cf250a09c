"""Reservation entity.

A reservation is a time-boxed hold on shares of an offering. Holds past their
expiry are treated as expired at every read, whether or not the expiry sweep
has persisted that status yet.
"""

from datetime import datetime

from pydantic import Field

from invest.domain.model.common import DomainModel, utcnow
from invest.domain.value import OfferingId, ReservationId, ReservationStatus, UserId

RESERVATION_TRANSITIONS: dict[ReservationStatus, frozenset[ReservationStatus]] = {
    ReservationStatus.ACTIVE: frozenset(
        {
            ReservationStatus.CANCELLED,
            ReservationStatus.CONVERTED,
            ReservationStatus.EXPIRED,
        }
    ),
    ReservationStatus.CANCELLED: frozenset(),
    ReservationStatus.CONVERTED: frozenset(),
    ReservationStatus.EXPIRED: frozenset(),
}


class Reservation(DomainModel):
    """Reservation entity.

    Business rules:
    - share_quantity is always positive
    - Only the owner or an admin may read or cancel it
    - Only admins convert it into an investment
    - Never physically deleted
    """

    id: ReservationId
    offering_id: OfferingId
    user_id: UserId
    share_quantity: int = Field(gt=0)
    status: ReservationStatus = ReservationStatus.ACTIVE
    expires_at: datetime
    reserved_at: datetime = Field(default_factory=utcnow)
    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)

    def is_expired(self, now: datetime) -> bool:
        """Whether the hold has lapsed without being cancelled or converted."""
        return self.status == ReservationStatus.ACTIVE and self.expires_at <= now

    def effective_status(self, now: datetime) -> ReservationStatus:
        """Status as seen by readers at ``now``."""
        if self.is_expired(now):
            return ReservationStatus.EXPIRED
        return self.status

    def can_transition_to(self, target: ReservationStatus, now: datetime) -> bool:
        return target in RESERVATION_TRANSITIONS[self.effective_status(now)]

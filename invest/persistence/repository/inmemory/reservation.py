"""In-memory reservation repository for testing."""

from datetime import datetime
from typing import Optional

from invest.domain.model.common import utcnow
from invest.domain.model.reservation import Reservation
from invest.domain.repository.reservation import ReservationRepository
from invest.domain.value import OfferingId, ReservationId, ReservationStatus, UserId


class InMemoryReservationRepository(ReservationRepository):
    """In-memory implementation of ReservationRepository for testing."""

    def __init__(self) -> None:
        self._reservations: dict[ReservationId, Reservation] = {}

    def _newest_first(self, reservations: list[Reservation]) -> list[Reservation]:
        # Later inserts win ties on created_at
        return sorted(reversed(reservations), key=lambda r: r.created_at, reverse=True)

    async def find_by_id(self, reservation_id: ReservationId) -> Optional[Reservation]:
        """Find a reservation by ID."""
        return self._reservations.get(reservation_id)

    async def find_by_user(self, user_id: UserId) -> list[Reservation]:
        """Find a user's reservations, newest first."""
        return self._newest_first(
            [r for r in self._reservations.values() if r.user_id == user_id]
        )

    async def find_by_offering(self, offering_id: OfferingId) -> list[Reservation]:
        """Find an offering's reservations, newest first."""
        return self._newest_first(
            [r for r in self._reservations.values() if r.offering_id == offering_id]
        )

    async def save(self, reservation: Reservation) -> Reservation:
        """Save a reservation."""
        self._reservations[reservation.id] = reservation
        return reservation

    async def update_status(
        self,
        reservation_id: ReservationId,
        status: ReservationStatus,
        expected_status: Optional[ReservationStatus] = None,
        unexpired_at: Optional[datetime] = None,
    ) -> Optional[Reservation]:
        """Change a reservation's status if the guards still hold."""
        reservation = self._reservations.get(reservation_id)
        if reservation is None:
            return None
        if expected_status is not None and reservation.status != expected_status:
            return None
        if unexpired_at is not None and reservation.expires_at <= unexpired_at:
            return None

        updated = reservation.model_copy(
            update={"status": status, "updated_at": utcnow()}
        )
        self._reservations[reservation_id] = updated
        return updated

    async def mark_expired(self, now: datetime) -> int:
        """Persist the expired status on lapsed active holds."""
        lapsed = [r for r in self._reservations.values() if r.is_expired(now)]
        for reservation in lapsed:
            self._reservations[reservation.id] = reservation.model_copy(
                update={"status": ReservationStatus.EXPIRED, "updated_at": now}
            )
        return len(lapsed)

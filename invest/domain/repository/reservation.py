"""Reservation repository interface."""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import Optional

from invest.domain.model.reservation import Reservation
from invest.domain.value import OfferingId, ReservationId, ReservationStatus, UserId


class ReservationRepository(ABC):
    """Repository for Reservation entity.

    Defines the contract for reservation persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_id(self, reservation_id: ReservationId) -> Optional[Reservation]:
        """Find a reservation by ID.

        Args:
            reservation_id: The reservation's unique identifier

        Returns:
            The reservation if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_user(self, user_id: UserId) -> list[Reservation]:
        """Find all reservations held by a user, newest first.

        Args:
            user_id: The user's ID

        Returns:
            List of the user's reservations
        """
        pass

    @abstractmethod
    async def find_by_offering(self, offering_id: OfferingId) -> list[Reservation]:
        """Find all reservations on an offering, newest first.

        Args:
            offering_id: The offering's ID

        Returns:
            List of reservations across all users
        """
        pass

    @abstractmethod
    async def save(self, reservation: Reservation) -> Reservation:
        """Save a new reservation.

        Args:
            reservation: The reservation to save

        Returns:
            The saved reservation
        """
        pass

    @abstractmethod
    async def update_status(
        self,
        reservation_id: ReservationId,
        status: ReservationStatus,
        expected_status: Optional[ReservationStatus] = None,
        unexpired_at: Optional[datetime] = None,
    ) -> Optional[Reservation]:
        """Atomically change a reservation's status.

        Acts as a compare-and-set when guards are given: the row is only
        updated if it still has ``expected_status`` and, when
        ``unexpired_at`` is set, its expiry lies after that instant.

        Args:
            reservation_id: Reservation to update
            status: New status
            expected_status: Required current status, or None for no check
            unexpired_at: Instant the hold must still be valid at, or None

        Returns:
            The updated reservation, or None if no row matched
        """
        pass

    @abstractmethod
    async def mark_expired(self, now: datetime) -> int:
        """Persist the expired status on every lapsed active reservation.

        Args:
            now: Cut-off instant; holds expiring at or before it are expired

        Returns:
            Number of reservations updated
        """
        pass

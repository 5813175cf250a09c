"""Reservation domain service."""

from datetime import timedelta
from uuid import uuid4

import logfire

from invest.config import ReservationSettings
from invest.domain.error import InvalidTransitionError, NotFoundError, ValidationError
from invest.domain.model.common import utcnow
from invest.domain.model.reservation import Reservation
from invest.domain.repository import ReservationRepository
from invest.domain.value import OfferingId, ReservationId, ReservationStatus, UserId

from .base import Service


class ReservationService(Service):
    """Domain service for share reservations."""

    def __init__(
        self,
        reservation_repository: ReservationRepository,
        settings: ReservationSettings,
    ) -> None:
        """Initialize reservation service.

        Args:
            reservation_repository: Reservation repository
            settings: Reservation settings
        """
        self.reservation_repository = reservation_repository
        self.settings = settings

    async def create_reservation(
        self,
        offering_id: OfferingId,
        user_id: UserId,
        share_quantity: int,
        expiration_minutes: int | None = None,
    ) -> Reservation:
        """Place a new hold on shares of an offering.

        Args:
            offering_id: Offering to reserve shares in
            user_id: User placing the hold
            share_quantity: Number of shares (positive)
            expiration_minutes: Hold length, defaults to the configured value

        Returns:
            Created reservation

        Raises:
            ValidationError: If the quantity or hold length is out of range
        """
        if expiration_minutes is None:
            expiration_minutes = self.settings.default_expiration_minutes

        with logfire.span(
            "reservation_service.create_reservation",
            offering_id=offering_id,
            user_id=user_id,
            share_quantity=share_quantity,
            expiration_minutes=expiration_minutes,
        ):
            if share_quantity <= 0:
                raise ValidationError("Share quantity must be positive")
            if expiration_minutes < 1:
                raise ValidationError("Expiration must be at least 1 minute")
            cap = self.settings.max_expiration_minutes
            if cap is not None and expiration_minutes > cap:
                raise ValidationError(
                    f"Expiration must be between 1 and {cap} minutes"
                )

            now = utcnow()
            reservation = Reservation(
                id=ReservationId(uuid4()),
                offering_id=offering_id,
                user_id=user_id,
                share_quantity=share_quantity,
                status=ReservationStatus.ACTIVE,
                expires_at=now + timedelta(minutes=expiration_minutes),
                reserved_at=now,
                created_at=now,
                updated_at=now,
            )

            saved = await self.reservation_repository.save(reservation)
            logfire.info(
                "Reservation created",
                reservation_id=str(saved.id),
                offering_id=offering_id,
                user_id=user_id,
                expires_at=saved.expires_at.isoformat(),
            )
            return saved

    async def get_reservation(self, reservation_id: ReservationId) -> Reservation:
        """Get a reservation by ID.

        Raises:
            NotFoundError: If the reservation doesn't exist
        """
        reservation = await self.reservation_repository.find_by_id(reservation_id)
        if reservation is None:
            logfire.warn("Reservation not found", reservation_id=str(reservation_id))
            raise NotFoundError("Reservation", str(reservation_id))
        return reservation

    async def list_user_reservations(
        self, user_id: UserId, active_only: bool = False
    ) -> list[Reservation]:
        """List a user's reservations, newest first.

        Args:
            user_id: Owner of the reservations
            active_only: Keep only holds that are still effectively active

        Returns:
            List of reservations
        """
        reservations = await self.reservation_repository.find_by_user(user_id)
        if active_only:
            now = utcnow()
            reservations = [
                r
                for r in reservations
                if r.effective_status(now) == ReservationStatus.ACTIVE
            ]
        return reservations

    async def list_offering_reservations(
        self, offering_id: OfferingId
    ) -> list[Reservation]:
        """List every reservation on an offering, newest first."""
        return await self.reservation_repository.find_by_offering(offering_id)

    async def cancel_reservation(self, reservation: Reservation) -> Reservation:
        """Release a hold."""
        return await self._transition(reservation, ReservationStatus.CANCELLED)

    async def convert_reservation(self, reservation: Reservation) -> Reservation:
        """Promote a hold into an investment."""
        return await self._transition(reservation, ReservationStatus.CONVERTED)

    async def expire_lapsed_reservations(self) -> int:
        """Persist the expired status on every lapsed hold.

        Returns:
            Number of reservations expired
        """
        with logfire.span("reservation_service.expire_lapsed_reservations"):
            count = await self.reservation_repository.mark_expired(utcnow())
            logfire.info("Lapsed reservations expired", count=count)
            return count

    async def _transition(
        self, reservation: Reservation, target: ReservationStatus
    ) -> Reservation:
        with logfire.span(
            "reservation_service.transition",
            reservation_id=str(reservation.id),
            target=target.value,
            enforced=self.settings.enforce_transitions,
        ):
            now = utcnow()

            if not self.settings.enforce_transitions:
                updated = await self.reservation_repository.update_status(
                    reservation.id, target
                )
                if updated is None:
                    raise NotFoundError("Reservation", str(reservation.id))
                logfire.info(
                    "Reservation status overwritten",
                    reservation_id=str(reservation.id),
                    previous=reservation.status.value,
                    status=target.value,
                )
                return updated

            if not reservation.can_transition_to(target, now):
                current = reservation.effective_status(now)
                logfire.warn(
                    "Reservation transition rejected",
                    reservation_id=str(reservation.id),
                    current=current.value,
                    target=target.value,
                )
                raise InvalidTransitionError("reservation", current.value, target.value)

            updated = await self.reservation_repository.update_status(
                reservation.id,
                target,
                expected_status=ReservationStatus.ACTIVE,
                unexpired_at=now,
            )
            if updated is None:
                # Lost a race with another decision or the hold just lapsed
                latest = await self.get_reservation(reservation.id)
                raise InvalidTransitionError(
                    "reservation", latest.effective_status(utcnow()).value, target.value
                )

            logfire.info(
                "Reservation status changed",
                reservation_id=str(reservation.id),
                status=target.value,
            )
            return updated


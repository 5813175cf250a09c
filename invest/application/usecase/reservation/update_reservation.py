"""Reservation status change use cases."""

from uuid import UUID

from pydantic import BaseModel

from invest.application.usecase.base import BaseUseCase
from invest.domain.service import AccessPolicy, Capability, ReservationService
from invest.domain.value import Caller, ReservationId, ReservationStatus


class CancelReservationRequest(BaseModel):
    """Request to release a hold."""

    caller: Caller
    reservation_id: UUID


class ConvertReservationRequest(BaseModel):
    """Request to convert a hold into an investment."""

    caller: Caller
    reservation_id: UUID


class UpdateReservationResponse(BaseModel):
    """Response after a reservation status change."""

    success: bool = True
    reservation_id: str
    status: ReservationStatus


class CancelReservationUseCase(BaseUseCase):
    """Use case for cancelling a reservation as its owner or an admin."""

    def __init__(
        self, reservation_service: ReservationService, access_policy: AccessPolicy
    ) -> None:
        """Initialize cancel reservation use case.

        Args:
            reservation_service: Reservation domain service
            access_policy: Access policy
        """
        self.reservation_service = reservation_service
        self.access_policy = access_policy

    async def execute(
        self, request: CancelReservationRequest
    ) -> UpdateReservationResponse:
        """Execute cancel reservation flow.

        Raises:
            NotFoundError: If the reservation doesn't exist
            ForbiddenError: If the caller is neither owner nor admin
            InvalidTransitionError: If the hold is no longer active
        """
        # 1. Load and check ownership
        reservation = await self.reservation_service.get_reservation(
            ReservationId(request.reservation_id)
        )
        self.access_policy.require_owner_or_admin(
            request.caller,
            reservation.user_id,
            "Not authorized to cancel this reservation",
        )

        # 2. Transition
        updated = await self.reservation_service.cancel_reservation(reservation)

        return UpdateReservationResponse(
            reservation_id=str(updated.id), status=updated.status
        )


class ConvertReservationUseCase(BaseUseCase):
    """Use case for converting a reservation (admin only)."""

    def __init__(
        self, reservation_service: ReservationService, access_policy: AccessPolicy
    ) -> None:
        self.reservation_service = reservation_service
        self.access_policy = access_policy

    async def execute(
        self, request: ConvertReservationRequest
    ) -> UpdateReservationResponse:
        """Execute convert reservation flow.

        Raises:
            ForbiddenError: If the caller isn't an admin
            NotFoundError: If the reservation doesn't exist
            InvalidTransitionError: If the hold is no longer active
        """
        self.access_policy.require(request.caller, Capability.RESERVATION_CONVERT)

        reservation = await self.reservation_service.get_reservation(
            ReservationId(request.reservation_id)
        )
        updated = await self.reservation_service.convert_reservation(reservation)

        return UpdateReservationResponse(
            reservation_id=str(updated.id), status=updated.status
        )

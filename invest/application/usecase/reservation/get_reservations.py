"""Reservation query use cases."""

from uuid import UUID

from pydantic import BaseModel

from invest.application.usecase.base import BaseUseCase
from invest.domain.model.common import utcnow
from invest.domain.service import AccessPolicy, Capability, ReservationService
from invest.domain.value import Caller, OfferingId, ReservationId

from .view import ReservationView


class GetReservationRequest(BaseModel):
    """Request for a single reservation."""

    caller: Caller
    reservation_id: UUID


class GetMyReservationsRequest(BaseModel):
    """Request for the caller's reservations."""

    caller: Caller
    active_only: bool = False


class GetOfferingReservationsRequest(BaseModel):
    """Request for every reservation on an offering."""

    caller: Caller
    offering_id: int


class ReservationListResponse(BaseModel):
    """List of reservations, newest first."""

    reservations: list[ReservationView]


class GetReservationUseCase(BaseUseCase):
    """Use case for reading one reservation as its owner or an admin."""

    def __init__(
        self, reservation_service: ReservationService, access_policy: AccessPolicy
    ) -> None:
        self.reservation_service = reservation_service
        self.access_policy = access_policy

    async def execute(self, request: GetReservationRequest) -> ReservationView:
        """Execute get reservation flow.

        Raises:
            NotFoundError: If the reservation doesn't exist
            ForbiddenError: If the caller is neither owner nor admin
        """
        reservation = await self.reservation_service.get_reservation(
            ReservationId(request.reservation_id)
        )
        self.access_policy.require_owner_or_admin(
            request.caller,
            reservation.user_id,
            "Not authorized to view this reservation",
        )
        return ReservationView.from_reservation(reservation, utcnow())


class GetMyReservationsUseCase(BaseUseCase):
    """Use case for listing the caller's own reservations."""

    def __init__(self, reservation_service: ReservationService) -> None:
        self.reservation_service = reservation_service

    async def execute(self, request: GetMyReservationsRequest) -> ReservationListResponse:
        reservations = await self.reservation_service.list_user_reservations(
            request.caller.user_id, active_only=request.active_only
        )
        now = utcnow()
        return ReservationListResponse(
            reservations=[ReservationView.from_reservation(r, now) for r in reservations]
        )


class GetOfferingReservationsUseCase(BaseUseCase):
    """Use case for listing reservations on an offering (admins, fundraisers)."""

    def __init__(
        self, reservation_service: ReservationService, access_policy: AccessPolicy
    ) -> None:
        self.reservation_service = reservation_service
        self.access_policy = access_policy

    async def execute(
        self, request: GetOfferingReservationsRequest
    ) -> ReservationListResponse:
        self.access_policy.require(
            request.caller, Capability.RESERVATION_VIEW_OFFERING
        )

        reservations = await self.reservation_service.list_offering_reservations(
            OfferingId(request.offering_id)
        )
        now = utcnow()
        return ReservationListResponse(
            reservations=[ReservationView.from_reservation(r, now) for r in reservations]
        )

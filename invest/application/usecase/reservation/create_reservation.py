"""Create reservation use case."""

from datetime import datetime

from pydantic import BaseModel, Field

from invest.application.usecase.base import BaseUseCase
from invest.domain.service import AccessPolicy, ReservationService
from invest.domain.value import Caller, OfferingId


class CreateReservationRequest(BaseModel):
    """Request to reserve shares of an offering."""

    caller: Caller
    offering_id: int
    share_quantity: int = Field(gt=0)
    expiration_minutes: int | None = Field(default=None, ge=1)  # None = default


class CreateReservationResponse(BaseModel):
    """Response after reserving shares."""

    success: bool = True
    reservation_id: str
    expires_at: datetime


class CreateReservationUseCase(BaseUseCase):
    """Use case for placing a share reservation."""

    def __init__(
        self, reservation_service: ReservationService, access_policy: AccessPolicy
    ) -> None:
        """Initialize create reservation use case.

        Args:
            reservation_service: Reservation domain service
            access_policy: Access policy
        """
        self.reservation_service = reservation_service
        self.access_policy = access_policy

    async def execute(
        self, request: CreateReservationRequest
    ) -> CreateReservationResponse:
        """Execute create reservation flow.

        Args:
            request: Offering, quantity and optional hold length

        Returns:
            The new reservation's ID and expiry

        Raises:
            ForbiddenError: If the caller's email isn't verified
            ValidationError: If the hold length exceeds the configured maximum
        """
        self.access_policy.require_verified_email(request.caller)

        reservation = await self.reservation_service.create_reservation(
            offering_id=OfferingId(request.offering_id),
            user_id=request.caller.user_id,
            share_quantity=request.share_quantity,
            expiration_minutes=request.expiration_minutes,
        )

        return CreateReservationResponse(
            reservation_id=str(reservation.id),
            expires_at=reservation.expires_at,
        )

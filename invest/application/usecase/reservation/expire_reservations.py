"""Expire lapsed reservations use case."""

from pydantic import BaseModel

from invest.application.usecase.base import BaseUseCase
from invest.domain.service import AccessPolicy, Capability, ReservationService
from invest.domain.value import Caller


class ExpireReservationsRequest(BaseModel):
    """Request to run the expiry sweep."""

    caller: Caller


class ExpireReservationsResponse(BaseModel):
    """Response after the expiry sweep."""

    success: bool = True
    expired_count: int


class ExpireReservationsUseCase(BaseUseCase):
    """Use case for persisting the expired status on lapsed holds."""

    def __init__(
        self, reservation_service: ReservationService, access_policy: AccessPolicy
    ) -> None:
        self.reservation_service = reservation_service
        self.access_policy = access_policy

    async def execute(
        self, request: ExpireReservationsRequest
    ) -> ExpireReservationsResponse:
        self.access_policy.require(request.caller, Capability.RESERVATION_EXPIRE)
        count = await self.reservation_service.expire_lapsed_reservations()
        return ExpireReservationsResponse(expired_count=count)

"""Reservation routes."""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, status
from pydantic import BaseModel, Field

from invest.application.usecase.reservation import (
    CancelReservationRequest,
    CancelReservationUseCase,
    ConvertReservationRequest,
    ConvertReservationUseCase,
    CreateReservationRequest,
    CreateReservationResponse,
    CreateReservationUseCase,
    ExpireReservationsRequest,
    ExpireReservationsResponse,
    ExpireReservationsUseCase,
    GetMyReservationsRequest,
    GetMyReservationsUseCase,
    GetOfferingReservationsRequest,
    GetOfferingReservationsUseCase,
    GetReservationRequest,
    GetReservationUseCase,
    ReservationListResponse,
    ReservationView,
    UpdateReservationResponse,
)
from invest.domain.service import JWTService
from invest.interface.api.auth import require_caller

router = APIRouter(prefix="/reservations", tags=["reservations"], route_class=DishkaRoute)


class CreateReservationAPIRequest(BaseModel):
    """API request for reserving shares."""

    offering_id: int
    share_quantity: int = Field(gt=0)
    expiration_minutes: int | None = Field(default=None, ge=1)


@router.post(
    "", response_model=CreateReservationResponse, status_code=status.HTTP_201_CREATED
)
async def create_reservation(
    request: CreateReservationAPIRequest,
    use_case: FromDishka[CreateReservationUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> CreateReservationResponse:
    """Reserve shares of an offering.

    Requires authentication and a verified email address.
    """
    caller = require_caller(jwt_service, auth_token)
    return await use_case.execute(
        CreateReservationRequest(
            caller=caller,
            offering_id=request.offering_id,
            share_quantity=request.share_quantity,
            expiration_minutes=request.expiration_minutes,
        )
    )


@router.get("/me", response_model=ReservationListResponse)
async def get_my_reservations(
    use_case: FromDishka[GetMyReservationsUseCase],
    jwt_service: FromDishka[JWTService],
    active_only: bool = False,
    auth_token: str | None = Cookie(default=None),
) -> ReservationListResponse:
    """List the caller's reservations, newest first."""
    caller = require_caller(jwt_service, auth_token)
    return await use_case.execute(
        GetMyReservationsRequest(caller=caller, active_only=active_only)
    )


@router.get("/offering/{offering_id}", response_model=ReservationListResponse)
async def get_offering_reservations(
    offering_id: int,
    use_case: FromDishka[GetOfferingReservationsUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> ReservationListResponse:
    """List every reservation on an offering (admins and fundraisers)."""
    caller = require_caller(jwt_service, auth_token)
    return await use_case.execute(
        GetOfferingReservationsRequest(caller=caller, offering_id=offering_id)
    )


@router.post("/expire", response_model=ExpireReservationsResponse)
async def expire_reservations(
    use_case: FromDishka[ExpireReservationsUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> ExpireReservationsResponse:
    """Persist the expired status on lapsed holds (admin only)."""
    caller = require_caller(jwt_service, auth_token)
    return await use_case.execute(ExpireReservationsRequest(caller=caller))


@router.get("/{reservation_id}", response_model=ReservationView)
async def get_reservation(
    reservation_id: UUID,
    use_case: FromDishka[GetReservationUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> ReservationView:
    """Get a reservation as its owner or an admin."""
    caller = require_caller(jwt_service, auth_token)
    return await use_case.execute(
        GetReservationRequest(caller=caller, reservation_id=reservation_id)
    )


@router.post("/{reservation_id}/cancel", response_model=UpdateReservationResponse)
async def cancel_reservation(
    reservation_id: UUID,
    use_case: FromDishka[CancelReservationUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> UpdateReservationResponse:
    """Cancel a reservation as its owner or an admin."""
    caller = require_caller(jwt_service, auth_token)
    return await use_case.execute(
        CancelReservationRequest(caller=caller, reservation_id=reservation_id)
    )


@router.post("/{reservation_id}/convert", response_model=UpdateReservationResponse)
async def convert_reservation(
    reservation_id: UUID,
    use_case: FromDishka[ConvertReservationUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> UpdateReservationResponse:
    """Convert a reservation into an investment (admin only)."""
    caller = require_caller(jwt_service, auth_token)
    return await use_case.execute(
        ConvertReservationRequest(caller=caller, reservation_id=reservation_id)
    )

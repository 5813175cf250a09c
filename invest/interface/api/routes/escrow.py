"""Escrow account routes."""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, status
from pydantic import BaseModel, Field

from invest.application.usecase.escrow import (
    CreateEscrowAccountRequest,
    CreateEscrowAccountResponse,
    CreateEscrowAccountUseCase,
    EscrowAccountListResponse,
    EscrowAccountView,
    GetActiveEscrowAccountsRequest,
    GetActiveEscrowAccountsUseCase,
    GetEscrowAccountRequest,
    GetEscrowAccountUseCase,
    GetOfferingEscrowRequest,
    GetOfferingEscrowResponse,
    GetOfferingEscrowUseCase,
    UpdateEscrowBalanceRequest,
    UpdateEscrowBalanceResponse,
    UpdateEscrowBalanceUseCase,
    UpdateEscrowStatusRequest,
    UpdateEscrowStatusResponse,
    UpdateEscrowStatusUseCase,
)
from invest.domain.service import JWTService
from invest.domain.value import EscrowStatus
from invest.interface.api.auth import require_caller

router = APIRouter(prefix="/escrow", tags=["escrow"], route_class=DishkaRoute)


class CreateEscrowAccountAPIRequest(BaseModel):
    """API request for opening an escrow account."""

    offering_id: int
    account_number: str = Field(min_length=1, max_length=100)
    account_name: str | None = Field(default=None, max_length=255)
    bank_name: str | None = Field(default=None, max_length=255)
    release_conditions: str | None = None
    notes: str | None = None


class UpdateEscrowStatusAPIRequest(BaseModel):
    """API request for an escrow status change."""

    status: EscrowStatus


class UpdateEscrowBalanceAPIRequest(BaseModel):
    """API request for a signed balance change."""

    amount_cents: int


@router.post(
    "", response_model=CreateEscrowAccountResponse, status_code=status.HTTP_201_CREATED
)
async def create_escrow_account(
    request: CreateEscrowAccountAPIRequest,
    use_case: FromDishka[CreateEscrowAccountUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> CreateEscrowAccountResponse:
    """Open an escrow account for an offering (admin only)."""
    caller = require_caller(jwt_service, auth_token)
    return await use_case.execute(
        CreateEscrowAccountRequest(caller=caller, **request.model_dump())
    )


@router.get("/active", response_model=EscrowAccountListResponse)
async def get_active_escrow_accounts(
    use_case: FromDishka[GetActiveEscrowAccountsUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> EscrowAccountListResponse:
    """List active escrow accounts (admin only)."""
    caller = require_caller(jwt_service, auth_token)
    return await use_case.execute(GetActiveEscrowAccountsRequest(caller=caller))


@router.get("/offering/{offering_id}", response_model=GetOfferingEscrowResponse)
async def get_offering_escrow(
    offering_id: int,
    use_case: FromDishka[GetOfferingEscrowUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> GetOfferingEscrowResponse:
    """Get an offering's escrow account, or null."""
    caller = require_caller(jwt_service, auth_token)
    return await use_case.execute(
        GetOfferingEscrowRequest(caller=caller, offering_id=offering_id)
    )


@router.get("/{escrow_id}", response_model=EscrowAccountView)
async def get_escrow_account(
    escrow_id: UUID,
    use_case: FromDishka[GetEscrowAccountUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> EscrowAccountView:
    """Get an escrow account."""
    caller = require_caller(jwt_service, auth_token)
    return await use_case.execute(
        GetEscrowAccountRequest(caller=caller, escrow_id=escrow_id)
    )


@router.patch("/{escrow_id}/status", response_model=UpdateEscrowStatusResponse)
async def update_escrow_status(
    escrow_id: UUID,
    request: UpdateEscrowStatusAPIRequest,
    use_case: FromDishka[UpdateEscrowStatusUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> UpdateEscrowStatusResponse:
    """Change an escrow account's status (admin only)."""
    caller = require_caller(jwt_service, auth_token)
    return await use_case.execute(
        UpdateEscrowStatusRequest(
            caller=caller, escrow_id=escrow_id, status=request.status
        )
    )


@router.post("/{escrow_id}/balance", response_model=UpdateEscrowBalanceResponse)
async def update_escrow_balance(
    escrow_id: UUID,
    request: UpdateEscrowBalanceAPIRequest,
    use_case: FromDishka[UpdateEscrowBalanceUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> UpdateEscrowBalanceResponse:
    """Deposit into or withdraw from an escrow account (admin only)."""
    caller = require_caller(jwt_service, auth_token)
    return await use_case.execute(
        UpdateEscrowBalanceRequest(
            caller=caller, escrow_id=escrow_id, amount_cents=request.amount_cents
        )
    )

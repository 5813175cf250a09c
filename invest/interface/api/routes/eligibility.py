"""Eligibility routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie
from pydantic import BaseModel, Field

from invest.application.usecase.eligibility import (
    CheckEligibilityRequest,
    CheckEligibilityResponse,
    CheckEligibilityUseCase,
    GetMyEligibilityChecksRequest,
    GetMyEligibilityChecksResponse,
    GetMyEligibilityChecksUseCase,
    GetMyEligibilityRequest,
    GetMyEligibilityResponse,
    GetMyEligibilityUseCase,
    IsEligibleRequest,
    IsEligibleResponse,
    IsEligibleUseCase,
    UpdateUserEligibilityRequest,
    UpdateUserEligibilityResponse,
    UpdateUserEligibilityUseCase,
)
from invest.domain.service import JWTService
from invest.domain.value import AccreditationStatus, JurisdictionCheck
from invest.interface.api.auth import require_caller

router = APIRouter(prefix="/eligibility", tags=["eligibility"], route_class=DishkaRoute)


class CheckEligibilityAPIRequest(BaseModel):
    """API request for a self-service eligibility check.

    Omitted fields keep their stored values.
    """

    offering_id: int
    is_eligible: bool | None = None
    accreditation_status: AccreditationStatus | None = None
    jurisdiction_check: JurisdictionCheck | None = None
    investment_limit_cents: int | None = Field(default=None, ge=0)
    notes: str | None = None


class UpdateUserEligibilityAPIRequest(BaseModel):
    """API request for an admin eligibility override."""

    is_eligible: bool
    accreditation_status: AccreditationStatus
    jurisdiction_check: JurisdictionCheck
    investment_limit_cents: int | None = Field(default=None, ge=0)
    notes: str | None = None


@router.post("/check", response_model=CheckEligibilityResponse)
async def check_eligibility(
    request: CheckEligibilityAPIRequest,
    use_case: FromDishka[CheckEligibilityUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> CheckEligibilityResponse:
    """Record the caller's eligibility for an offering."""
    caller = require_caller(jwt_service, auth_token)
    # Only forward what the client sent so omitted fields stay untouched
    return await use_case.execute(
        CheckEligibilityRequest(
            caller=caller, **request.model_dump(exclude_unset=True)
        )
    )


@router.get("/me", response_model=GetMyEligibilityChecksResponse)
async def get_my_eligibility_checks(
    use_case: FromDishka[GetMyEligibilityChecksUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> GetMyEligibilityChecksResponse:
    """List the caller's eligibility records, most recently checked first."""
    caller = require_caller(jwt_service, auth_token)
    return await use_case.execute(GetMyEligibilityChecksRequest(caller=caller))


@router.get("/me/{offering_id}", response_model=GetMyEligibilityResponse)
async def get_my_eligibility(
    offering_id: int,
    use_case: FromDishka[GetMyEligibilityUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> GetMyEligibilityResponse:
    """Get the caller's record for an offering, or null."""
    caller = require_caller(jwt_service, auth_token)
    return await use_case.execute(
        GetMyEligibilityRequest(caller=caller, offering_id=offering_id)
    )


@router.get("/me/{offering_id}/status", response_model=IsEligibleResponse)
async def is_eligible(
    offering_id: int,
    use_case: FromDishka[IsEligibleUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> IsEligibleResponse:
    """Whether the caller is currently cleared to invest in an offering."""
    caller = require_caller(jwt_service, auth_token)
    return await use_case.execute(IsEligibleRequest(caller=caller, offering_id=offering_id))


@router.put(
    "/users/{user_id}/offerings/{offering_id}",
    response_model=UpdateUserEligibilityResponse,
)
async def update_user_eligibility(
    user_id: int,
    offering_id: int,
    request: UpdateUserEligibilityAPIRequest,
    use_case: FromDishka[UpdateUserEligibilityUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> UpdateUserEligibilityResponse:
    """Set a user's eligibility for an offering (admin only)."""
    caller = require_caller(jwt_service, auth_token)
    return await use_case.execute(
        UpdateUserEligibilityRequest(
            caller=caller,
            user_id=user_id,
            offering_id=offering_id,
            **request.model_dump(exclude_unset=True),
        )
    )

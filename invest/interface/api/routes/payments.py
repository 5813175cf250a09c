"""Payment routes."""

from datetime import datetime
from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, status
from pydantic import BaseModel, Field, field_validator

from invest.application.usecase.payment import (
    CreatePaymentRequest,
    CreatePaymentResponse,
    CreatePaymentUseCase,
    GetInvestmentPaymentTotalRequest,
    GetInvestmentPaymentTotalUseCase,
    GetInvestmentPaymentsRequest,
    GetInvestmentPaymentsUseCase,
    GetPaymentRequest,
    GetPaymentUseCase,
    GetPendingPaymentsRequest,
    GetPendingPaymentsUseCase,
    PaymentListResponse,
    PaymentTotalResponse,
    PaymentView,
    VerifyPaymentRequest,
    VerifyPaymentResponse,
    VerifyPaymentUseCase,
)
from invest.domain.service import JWTService
from invest.domain.value import PaymentMethod, VerificationStatus
from invest.interface.api.auth import require_caller

router = APIRouter(prefix="/payments", tags=["payments"], route_class=DishkaRoute)


class CreatePaymentAPIRequest(BaseModel):
    """API request for recording a payment."""

    investment_id: int
    payment_method: PaymentMethod
    amount_cents: int = Field(gt=0)
    payment_reference: str | None = Field(default=None, max_length=255)
    payment_date: datetime | None = None
    receipt_url: str | None = None
    receipt_key: str | None = Field(default=None, max_length=500)
    notes: str | None = None


class VerifyPaymentAPIRequest(BaseModel):
    """API request for a verification decision."""

    status: VerificationStatus
    notes: str | None = None

    @field_validator("status")
    @classmethod
    def status_must_be_terminal(cls, value: VerificationStatus) -> VerificationStatus:
        if value == VerificationStatus.PENDING:
            raise ValueError("status must be verified, failed or rejected")
        return value


@router.post("", response_model=CreatePaymentResponse, status_code=status.HTTP_201_CREATED)
async def create_payment(
    request: CreatePaymentAPIRequest,
    use_case: FromDishka[CreatePaymentUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> CreatePaymentResponse:
    """Record a payment. It starts pending until an admin verifies it."""
    caller = require_caller(jwt_service, auth_token)
    return await use_case.execute(
        CreatePaymentRequest(caller=caller, **request.model_dump())
    )


@router.get("/pending", response_model=PaymentListResponse)
async def get_pending_payments(
    use_case: FromDishka[GetPendingPaymentsUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> PaymentListResponse:
    """List payments awaiting verification, newest first (admin only)."""
    caller = require_caller(jwt_service, auth_token)
    return await use_case.execute(GetPendingPaymentsRequest(caller=caller))


@router.get("/investment/{investment_id}", response_model=PaymentListResponse)
async def get_investment_payments(
    investment_id: int,
    use_case: FromDishka[GetInvestmentPaymentsUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> PaymentListResponse:
    """List an investment's payments, newest first."""
    caller = require_caller(jwt_service, auth_token)
    return await use_case.execute(
        GetInvestmentPaymentsRequest(caller=caller, investment_id=investment_id)
    )


@router.get("/investment/{investment_id}/total", response_model=PaymentTotalResponse)
async def get_investment_payment_total(
    investment_id: int,
    use_case: FromDishka[GetInvestmentPaymentTotalUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> PaymentTotalResponse:
    """Sum of verified payments for an investment."""
    caller = require_caller(jwt_service, auth_token)
    return await use_case.execute(
        GetInvestmentPaymentTotalRequest(caller=caller, investment_id=investment_id)
    )


@router.get("/{payment_id}", response_model=PaymentView)
async def get_payment(
    payment_id: UUID,
    use_case: FromDishka[GetPaymentUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> PaymentView:
    """Get a payment."""
    caller = require_caller(jwt_service, auth_token)
    return await use_case.execute(GetPaymentRequest(caller=caller, payment_id=payment_id))


@router.post("/{payment_id}/verify", response_model=VerifyPaymentResponse)
async def verify_payment(
    payment_id: UUID,
    request: VerifyPaymentAPIRequest,
    use_case: FromDishka[VerifyPaymentUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> VerifyPaymentResponse:
    """Verify, fail or reject a pending payment (admin only)."""
    caller = require_caller(jwt_service, auth_token)
    return await use_case.execute(
        VerifyPaymentRequest(
            caller=caller,
            payment_id=payment_id,
            status=request.status,
            notes=request.notes,
        )
    )

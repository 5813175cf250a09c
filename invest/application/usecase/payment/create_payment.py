"""Create payment use case."""

from datetime import datetime

from pydantic import BaseModel, Field

from invest.application.usecase.base import BaseUseCase
from invest.domain.service import PaymentService
from invest.domain.value import Caller, InvestmentId, PaymentMethod


class CreatePaymentRequest(BaseModel):
    """Request to record a payment against an investment."""

    caller: Caller
    investment_id: int
    payment_method: PaymentMethod
    amount_cents: int = Field(gt=0)
    payment_reference: str | None = Field(default=None, max_length=255)
    payment_date: datetime | None = None
    receipt_url: str | None = None
    receipt_key: str | None = Field(default=None, max_length=500)
    notes: str | None = None


class CreatePaymentResponse(BaseModel):
    """Response after recording a payment."""

    success: bool = True
    payment_id: str


class CreatePaymentUseCase(BaseUseCase):
    """Use case for recording a payment. It always starts as pending."""

    def __init__(self, payment_service: PaymentService) -> None:
        """Initialize create payment use case.

        Args:
            payment_service: Payment domain service
        """
        self.payment_service = payment_service

    async def execute(self, request: CreatePaymentRequest) -> CreatePaymentResponse:
        payment = await self.payment_service.create_payment(
            investment_id=InvestmentId(request.investment_id),
            payment_method=request.payment_method,
            amount_cents=request.amount_cents,
            payment_reference=request.payment_reference,
            payment_date=request.payment_date,
            receipt_url=request.receipt_url,
            receipt_key=request.receipt_key,
            notes=request.notes,
        )
        return CreatePaymentResponse(payment_id=str(payment.id))

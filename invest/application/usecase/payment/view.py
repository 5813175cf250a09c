"""Payment view shared by payment use cases."""

from datetime import datetime

from pydantic import BaseModel

from invest.domain.model import Payment
from invest.domain.value import PaymentMethod, VerificationStatus


class PaymentView(BaseModel):
    """Payment as returned to callers."""

    payment_id: str
    investment_id: int
    payment_method: PaymentMethod
    amount_cents: int
    payment_reference: str | None
    payment_date: datetime | None
    receipt_url: str | None
    receipt_key: str | None
    notes: str | None
    verification_status: VerificationStatus
    verified_by: int | None
    verified_at: datetime | None
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_payment(cls, payment: Payment) -> "PaymentView":
        return cls(
            payment_id=str(payment.id),
            investment_id=payment.investment_id,
            payment_method=payment.payment_method,
            amount_cents=payment.amount_cents,
            payment_reference=payment.payment_reference,
            payment_date=payment.payment_date,
            receipt_url=payment.receipt_url,
            receipt_key=payment.receipt_key,
            notes=payment.notes,
            verification_status=payment.verification_status,
            verified_by=payment.verified_by,
            verified_at=payment.verified_at,
            created_at=payment.created_at,
            updated_at=payment.updated_at,
        )

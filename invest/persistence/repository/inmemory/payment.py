"""In-memory payment repository for testing."""

from datetime import datetime
from typing import Any, Optional

from invest.domain.model.payment import Payment
from invest.domain.repository.payment import PaymentRepository
from invest.domain.value import InvestmentId, PaymentId, UserId, VerificationStatus


class InMemoryPaymentRepository(PaymentRepository):
    """In-memory implementation of PaymentRepository for testing."""

    def __init__(self) -> None:
        self._payments: dict[PaymentId, Payment] = {}

    async def find_by_id(self, payment_id: PaymentId) -> Optional[Payment]:
        """Find a payment by ID."""
        return self._payments.get(payment_id)

    async def find_by_investment(self, investment_id: InvestmentId) -> list[Payment]:
        """Find an investment's payments, newest first."""
        payments = [
            p for p in self._payments.values() if p.investment_id == investment_id
        ]
        return sorted(reversed(payments), key=lambda p: p.created_at, reverse=True)

    async def find_by_status(self, status: VerificationStatus) -> list[Payment]:
        """Find payments with a status, newest first."""
        payments = [
            p for p in self._payments.values() if p.verification_status == status
        ]
        return sorted(reversed(payments), key=lambda p: p.created_at, reverse=True)

    async def save(self, payment: Payment) -> Payment:
        """Save a payment."""
        self._payments[payment.id] = payment
        return payment

    async def sum_verified_amount(self, investment_id: InvestmentId) -> int:
        """Sum verified amounts for an investment."""
        return sum(
            p.amount_cents
            for p in self._payments.values()
            if p.investment_id == investment_id
            and p.verification_status == VerificationStatus.VERIFIED
        )

    async def record_verification(
        self,
        payment_id: PaymentId,
        status: VerificationStatus,
        verified_by: UserId,
        verified_at: datetime,
        notes: Optional[str] = None,
    ) -> Optional[Payment]:
        """Decide a payment if it is still pending."""
        payment = self._payments.get(payment_id)
        if payment is None or not payment.is_pending:
            return None

        changes: dict[str, Any] = {
            "verification_status": status,
            "verified_by": verified_by,
            "verified_at": verified_at,
            "updated_at": verified_at,
        }
        if notes is not None:
            changes["notes"] = notes

        updated = payment.model_copy(update=changes)
        self._payments[payment_id] = updated
        return updated

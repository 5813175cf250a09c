"""Payment domain service."""

from datetime import datetime
from typing import Optional
from uuid import uuid4

import logfire

from invest.domain.error import InvalidTransitionError, NotFoundError, ValidationError
from invest.domain.model.common import utcnow
from invest.domain.model.payment import Payment
from invest.domain.repository import PaymentRepository
from invest.domain.value import (
    InvestmentId,
    PaymentId,
    PaymentMethod,
    UserId,
    VerificationStatus,
)

from .base import Service


class PaymentService(Service):
    """Domain service for investment payments and their verification."""

    def __init__(self, payment_repository: PaymentRepository) -> None:
        """Initialize payment service.

        Args:
            payment_repository: Payment repository
        """
        self.payment_repository = payment_repository

    async def create_payment(
        self,
        investment_id: InvestmentId,
        payment_method: PaymentMethod,
        amount_cents: int,
        payment_reference: Optional[str] = None,
        payment_date: Optional[datetime] = None,
        receipt_url: Optional[str] = None,
        receipt_key: Optional[str] = None,
        notes: Optional[str] = None,
    ) -> Payment:
        """Record a payment against an investment.

        The payment always starts as pending; verification can't be claimed
        by the submitter.

        Args:
            investment_id: Investment the funds apply to
            payment_method: How the funds were sent
            amount_cents: Amount in cents (positive)
            payment_reference: Transaction reference
            payment_date: When the investor sent the funds
            receipt_url: Link to the receipt
            receipt_key: Storage key of the receipt
            notes: Free-form notes

        Returns:
            Created payment

        Raises:
            ValidationError: If the amount isn't positive
        """
        with logfire.span(
            "payment_service.create_payment",
            investment_id=investment_id,
            payment_method=payment_method.value,
            amount_cents=amount_cents,
        ):
            if amount_cents <= 0:
                raise ValidationError("Payment amount must be positive")

            now = utcnow()
            payment = Payment(
                id=PaymentId(uuid4()),
                investment_id=investment_id,
                payment_method=payment_method,
                amount_cents=amount_cents,
                payment_reference=payment_reference,
                payment_date=payment_date,
                receipt_url=receipt_url,
                receipt_key=receipt_key,
                notes=notes,
                verification_status=VerificationStatus.PENDING,
                created_at=now,
                updated_at=now,
            )

            saved = await self.payment_repository.save(payment)
            logfire.info(
                "Payment recorded",
                payment_id=str(saved.id),
                investment_id=investment_id,
                amount_cents=amount_cents,
            )
            return saved

    async def get_payment(self, payment_id: PaymentId) -> Payment:
        """Get a payment by ID.

        Raises:
            NotFoundError: If the payment doesn't exist
        """
        payment = await self.payment_repository.find_by_id(payment_id)
        if payment is None:
            logfire.warn("Payment not found", payment_id=str(payment_id))
            raise NotFoundError("Payment", str(payment_id))
        return payment

    async def list_investment_payments(
        self, investment_id: InvestmentId
    ) -> list[Payment]:
        """List an investment's payments, newest first."""
        return await self.payment_repository.find_by_investment(investment_id)

    async def get_verified_total(self, investment_id: InvestmentId) -> int:
        """Sum of verified payment amounts for an investment, in cents."""
        return await self.payment_repository.sum_verified_amount(investment_id)

    async def list_pending_payments(self) -> list[Payment]:
        """List payments awaiting verification, newest first."""
        return await self.payment_repository.find_by_status(VerificationStatus.PENDING)

    async def verify_payment(
        self,
        payment_id: PaymentId,
        status: VerificationStatus,
        verified_by: UserId,
        notes: Optional[str] = None,
    ) -> Payment:
        """Record an admin's verification decision on a pending payment.

        Args:
            payment_id: Payment to decide on
            status: verified, failed or rejected
            verified_by: Admin making the decision
            notes: Replacement notes

        Returns:
            Updated payment

        Raises:
            ValidationError: If status is pending
            NotFoundError: If the payment doesn't exist
            InvalidTransitionError: If the payment was already decided
        """
        with logfire.span(
            "payment_service.verify_payment",
            payment_id=str(payment_id),
            status=status.value,
            verified_by=verified_by,
        ):
            if status == VerificationStatus.PENDING:
                raise ValidationError(
                    "Verification status must be verified, failed or rejected"
                )

            payment = await self.get_payment(payment_id)
            if not payment.is_pending:
                logfire.warn(
                    "Payment already decided",
                    payment_id=str(payment_id),
                    current=payment.verification_status.value,
                    target=status.value,
                )
                raise InvalidTransitionError(
                    "payment", payment.verification_status.value, status.value
                )

            updated = await self.payment_repository.record_verification(
                payment_id, status, verified_by, utcnow(), notes
            )
            if updated is None:
                # Another admin decided first
                latest = await self.get_payment(payment_id)
                raise InvalidTransitionError(
                    "payment", latest.verification_status.value, status.value
                )

            logfire.info(
                "Payment verification recorded",
                payment_id=str(payment_id),
                status=status.value,
                verified_by=verified_by,
                amount_cents=updated.amount_cents,
            )
            return updated

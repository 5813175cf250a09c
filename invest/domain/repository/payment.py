"""Payment repository interface."""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import Optional

from invest.domain.model.payment import Payment
from invest.domain.value import InvestmentId, PaymentId, UserId, VerificationStatus


class PaymentRepository(ABC):
    """Repository for Payment entity.

    Defines the contract for payment persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_id(self, payment_id: PaymentId) -> Optional[Payment]:
        """Find a payment by ID.

        Args:
            payment_id: The payment's unique identifier

        Returns:
            The payment if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_investment(self, investment_id: InvestmentId) -> list[Payment]:
        """Find all payments for an investment, newest first.

        Args:
            investment_id: The investment's ID

        Returns:
            List of payments
        """
        pass

    @abstractmethod
    async def find_by_status(self, status: VerificationStatus) -> list[Payment]:
        """Find payments platform-wide with a verification status, newest first.

        Args:
            status: Verification status to filter on

        Returns:
            List of payments
        """
        pass

    @abstractmethod
    async def save(self, payment: Payment) -> Payment:
        """Save a new payment.

        Args:
            payment: The payment to save

        Returns:
            The saved payment
        """
        pass

    @abstractmethod
    async def sum_verified_amount(self, investment_id: InvestmentId) -> int:
        """Sum amount_cents over verified payments of an investment.

        Args:
            investment_id: The investment's ID

        Returns:
            Total in cents, 0 when nothing is verified
        """
        pass

    @abstractmethod
    async def record_verification(
        self,
        payment_id: PaymentId,
        status: VerificationStatus,
        verified_by: UserId,
        verified_at: datetime,
        notes: Optional[str] = None,
    ) -> Optional[Payment]:
        """Move a pending payment to a terminal verification status.

        Compare-and-set on ``pending``: a payment that has already been
        decided is left untouched.

        Args:
            payment_id: Payment to verify
            status: Terminal status
            verified_by: Admin recording the decision
            verified_at: When the decision was recorded
            notes: Replacement notes, or None to keep the current ones

        Returns:
            The updated payment, or None if it was missing or not pending
        """
        pass

"""Payment entity.

Payments record funds applied toward an investment. They only count toward
the investment's verified total once an admin verifies them.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from invest.domain.model.common import DomainModel, utcnow
from invest.domain.value import (
    InvestmentId,
    PaymentId,
    PaymentMethod,
    UserId,
    VerificationStatus,
)


class Payment(DomainModel):
    """Payment entity.

    Business rules:
    - amount_cents is always positive
    - Created as pending whatever the submitter claims
    - pending -> verified/failed/rejected exactly once, by an admin
    """

    id: PaymentId
    investment_id: InvestmentId
    payment_method: PaymentMethod
    amount_cents: int = Field(gt=0)
    payment_reference: Optional[str] = None  # Transaction ID
    payment_date: Optional[datetime] = None  # When the investor sent funds
    receipt_url: Optional[str] = None
    receipt_key: Optional[str] = None  # Object storage key for the receipt
    notes: Optional[str] = None
    verification_status: VerificationStatus = VerificationStatus.PENDING
    verified_by: Optional[UserId] = None
    verified_at: Optional[datetime] = None
    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)

    @property
    def is_pending(self) -> bool:
        return self.verification_status == VerificationStatus.PENDING

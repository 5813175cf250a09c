"""Repository interfaces for the investment flow domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the infrastructure layer.
"""

from invest.domain.repository.eligibility import (
    UPSERTABLE_FIELDS,
    EligibilityRepository,
)
from invest.domain.repository.escrow_account import EscrowAccountRepository
from invest.domain.repository.payment import PaymentRepository
from invest.domain.repository.reservation import ReservationRepository

__all__ = [
    "ReservationRepository",
    "EligibilityRepository",
    "PaymentRepository",
    "EscrowAccountRepository",
    "UPSERTABLE_FIELDS",
]

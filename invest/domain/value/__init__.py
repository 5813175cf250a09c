"""Domain value objects for the investment flow."""

from invest.domain.value.identifiers import (
    EligibilityId,
    EscrowAccountId,
    InvestmentId,
    OfferingId,
    PaymentId,
    ReservationId,
    UserId,
)
from invest.domain.value.types import (
    AccreditationStatus,
    Caller,
    EscrowStatus,
    JurisdictionCheck,
    PaymentMethod,
    ReservationStatus,
    Role,
    VerificationStatus,
)

__all__ = [
    # Identifiers
    "ReservationId",
    "EligibilityId",
    "PaymentId",
    "EscrowAccountId",
    "UserId",
    "OfferingId",
    "InvestmentId",
    # Types
    "Role",
    "Caller",
    "ReservationStatus",
    "AccreditationStatus",
    "JurisdictionCheck",
    "PaymentMethod",
    "VerificationStatus",
    "EscrowStatus",
]

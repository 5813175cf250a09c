"""In-memory repository implementations for testing."""

from .eligibility import InMemoryEligibilityRepository
from .escrow_account import InMemoryEscrowAccountRepository
from .payment import InMemoryPaymentRepository
from .reservation import InMemoryReservationRepository

__all__ = [
    "InMemoryEligibilityRepository",
    "InMemoryEscrowAccountRepository",
    "InMemoryPaymentRepository",
    "InMemoryReservationRepository",
]

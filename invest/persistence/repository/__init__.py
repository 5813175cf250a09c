"""PostgreSQL repository implementations."""

from invest.persistence.repository.eligibility import PostgresEligibilityRepository
from invest.persistence.repository.escrow_account import (
    PostgresEscrowAccountRepository,
)
from invest.persistence.repository.payment import PostgresPaymentRepository
from invest.persistence.repository.reservation import PostgresReservationRepository

__all__ = [
    "PostgresReservationRepository",
    "PostgresEligibilityRepository",
    "PostgresPaymentRepository",
    "PostgresEscrowAccountRepository",
]

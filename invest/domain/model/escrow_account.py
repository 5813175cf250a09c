"""Escrow account entity.

A bank-style holding account tied to one offering. Investor funds sit here
until the release conditions are met.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from invest.domain.model.common import DomainModel, utcnow
from invest.domain.value import EscrowAccountId, EscrowStatus, OfferingId

# Only consulted when escrow.enforce_status_transitions is enabled
ESCROW_TRANSITIONS: dict[EscrowStatus, frozenset[EscrowStatus]] = {
    EscrowStatus.PENDING_SETUP: frozenset({EscrowStatus.ACTIVE, EscrowStatus.CLOSED}),
    EscrowStatus.ACTIVE: frozenset({EscrowStatus.RELEASING, EscrowStatus.CLOSED}),
    EscrowStatus.RELEASING: frozenset({EscrowStatus.RELEASED, EscrowStatus.ACTIVE}),
    EscrowStatus.RELEASED: frozenset({EscrowStatus.CLOSED}),
    EscrowStatus.CLOSED: frozenset(),
}


class EscrowAccount(DomainModel):
    """Escrow account entity.

    Business rules:
    - account_number is unique across the platform
    - total_held_cents only changes through signed deltas
    - Status and balance are admin-controlled; accounts are never deleted
    """

    id: EscrowAccountId
    offering_id: OfferingId
    account_number: str = Field(min_length=1, max_length=100)
    account_name: Optional[str] = None
    bank_name: Optional[str] = None
    release_conditions: Optional[str] = None
    notes: Optional[str] = None
    status: EscrowStatus = EscrowStatus.PENDING_SETUP
    total_held_cents: int = 0
    opened_at: Optional[datetime] = None
    closed_at: Optional[datetime] = None
    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)

    def can_transition_to(self, target: EscrowStatus) -> bool:
        return target in ESCROW_TRANSITIONS[self.status]

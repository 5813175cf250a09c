"""Escrow account view shared by escrow use cases."""

from datetime import datetime

from pydantic import BaseModel

from invest.domain.model import EscrowAccount
from invest.domain.value import EscrowStatus


class EscrowAccountView(BaseModel):
    """Escrow account as returned to callers."""

    escrow_id: str
    offering_id: int
    account_number: str
    account_name: str | None
    bank_name: str | None
    release_conditions: str | None
    notes: str | None
    status: EscrowStatus
    total_held_cents: int
    opened_at: datetime | None
    closed_at: datetime | None
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_account(cls, account: EscrowAccount) -> "EscrowAccountView":
        return cls(
            escrow_id=str(account.id),
            offering_id=account.offering_id,
            account_number=account.account_number,
            account_name=account.account_name,
            bank_name=account.bank_name,
            release_conditions=account.release_conditions,
            notes=account.notes,
            status=account.status,
            total_held_cents=account.total_held_cents,
            opened_at=account.opened_at,
            closed_at=account.closed_at,
            created_at=account.created_at,
            updated_at=account.updated_at,
        )

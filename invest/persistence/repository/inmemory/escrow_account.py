"""In-memory escrow account repository for testing."""

from datetime import datetime
from typing import Any, Optional

from sqlalchemy.exc import IntegrityError

from invest.domain.model.escrow_account import EscrowAccount
from invest.domain.repository.escrow_account import EscrowAccountRepository
from invest.domain.value import EscrowAccountId, EscrowStatus, OfferingId


class InMemoryEscrowAccountRepository(EscrowAccountRepository):
    """In-memory implementation of EscrowAccountRepository for testing."""

    def __init__(self) -> None:
        self._accounts: dict[EscrowAccountId, EscrowAccount] = {}

    async def find_by_id(self, account_id: EscrowAccountId) -> Optional[EscrowAccount]:
        """Find an account by ID."""
        return self._accounts.get(account_id)

    async def find_latest_by_offering(
        self, offering_id: OfferingId
    ) -> Optional[EscrowAccount]:
        """Find an offering's most recently created account."""
        accounts = [
            a for a in reversed(self._accounts.values()) if a.offering_id == offering_id
        ]
        if not accounts:
            return None
        return max(accounts, key=lambda a: a.created_at)

    async def find_by_status(self, status: EscrowStatus) -> list[EscrowAccount]:
        """Find accounts with a status, newest first."""
        accounts = [a for a in self._accounts.values() if a.status == status]
        return sorted(reversed(accounts), key=lambda a: a.created_at, reverse=True)

    async def save(self, account: EscrowAccount) -> EscrowAccount:
        """Save a new account.

        Raises:
            IntegrityError: If the account number is already in use
        """
        if any(
            a.account_number == account.account_number for a in self._accounts.values()
        ):
            raise IntegrityError("Duplicate escrow account number", None, Exception())

        self._accounts[account.id] = account
        return account

    async def update_status(
        self,
        account_id: EscrowAccountId,
        status: EscrowStatus,
        now: datetime,
        expected_status: Optional[EscrowStatus] = None,
    ) -> Optional[EscrowAccount]:
        """Change an account's status, stamping opened_at/closed_at."""
        account = self._accounts.get(account_id)
        if account is None:
            return None
        if expected_status is not None and account.status != expected_status:
            return None

        changes: dict[str, Any] = {"status": status, "updated_at": now}
        if status == EscrowStatus.ACTIVE and account.opened_at is None:
            changes["opened_at"] = now
        elif status == EscrowStatus.CLOSED:
            changes["closed_at"] = now

        updated = account.model_copy(update=changes)
        self._accounts[account_id] = updated
        return updated

    async def apply_balance_delta(
        self,
        account_id: EscrowAccountId,
        amount_cents: int,
        now: datetime,
        floor_cents: Optional[int] = None,
    ) -> Optional[EscrowAccount]:
        """Add a signed delta to the held balance."""
        account = self._accounts.get(account_id)
        if account is None:
            return None

        new_total = account.total_held_cents + amount_cents
        if floor_cents is not None and new_total < floor_cents:
            return None

        updated = account.model_copy(
            update={"total_held_cents": new_total, "updated_at": now}
        )
        self._accounts[account_id] = updated
        return updated

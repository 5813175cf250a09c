"""PostgreSQL implementation of EscrowAccount repository."""

from datetime import datetime
from typing import Any, Optional

from sqlalchemy import and_, func, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from invest.domain.model import EscrowAccount
from invest.domain.repository import EscrowAccountRepository
from invest.domain.value import EscrowAccountId, EscrowStatus, OfferingId
from invest.persistence.mappers import escrow_account_to_dict, row_to_escrow_account
from invest.persistence.tables import escrow_accounts_table


class PostgresEscrowAccountRepository(EscrowAccountRepository):
    """PostgreSQL implementation of EscrowAccountRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, account_id: EscrowAccountId) -> Optional[EscrowAccount]:
        stmt = select(escrow_accounts_table).where(
            escrow_accounts_table.c.id == account_id
        )
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_escrow_account(dict(row)) if row else None

    async def find_latest_by_offering(
        self, offering_id: OfferingId
    ) -> Optional[EscrowAccount]:
        stmt = (
            select(escrow_accounts_table)
            .where(escrow_accounts_table.c.offering_id == offering_id)
            .order_by(escrow_accounts_table.c.created_at.desc())
            .limit(1)
        )
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_escrow_account(dict(row)) if row else None

    async def find_by_status(self, status: EscrowStatus) -> list[EscrowAccount]:
        stmt = (
            select(escrow_accounts_table)
            .where(escrow_accounts_table.c.status == status.value)
            .order_by(escrow_accounts_table.c.created_at.desc())
        )
        result = await self.session.execute(stmt)
        return [row_to_escrow_account(dict(row)) for row in result.mappings().all()]

    async def save(self, account: EscrowAccount) -> EscrowAccount:
        """Insert a new account.

        Runs inside a savepoint so a unique violation on account_number only
        rolls back this insert, not the request's transaction.
        """
        stmt = insert(escrow_accounts_table).values(**escrow_account_to_dict(account))
        async with self.session.begin_nested():
            await self.session.execute(stmt)
        return account

    async def update_status(
        self,
        account_id: EscrowAccountId,
        status: EscrowStatus,
        now: datetime,
        expected_status: Optional[EscrowStatus] = None,
    ) -> Optional[EscrowAccount]:
        values: dict[str, Any] = {"status": status.value, "updated_at": now}
        if status == EscrowStatus.ACTIVE:
            values["opened_at"] = func.coalesce(escrow_accounts_table.c.opened_at, now)
        elif status == EscrowStatus.CLOSED:
            values["closed_at"] = now

        conditions = [escrow_accounts_table.c.id == account_id]
        if expected_status is not None:
            conditions.append(escrow_accounts_table.c.status == expected_status.value)

        stmt = (
            update(escrow_accounts_table)
            .where(and_(*conditions))
            .values(**values)
            .returning(escrow_accounts_table)
        )
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        await self.session.flush()
        return row_to_escrow_account(dict(row)) if row else None

    async def apply_balance_delta(
        self,
        account_id: EscrowAccountId,
        amount_cents: int,
        now: datetime,
        floor_cents: Optional[int] = None,
    ) -> Optional[EscrowAccount]:
        """Add a signed delta to the stored balance in a single UPDATE."""
        total = escrow_accounts_table.c.total_held_cents
        conditions = [escrow_accounts_table.c.id == account_id]
        if floor_cents is not None:
            conditions.append(total + amount_cents >= floor_cents)

        stmt = (
            update(escrow_accounts_table)
            .where(and_(*conditions))
            .values(total_held_cents=total + amount_cents, updated_at=now)
            .returning(escrow_accounts_table)
        )
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        await self.session.flush()
        return row_to_escrow_account(dict(row)) if row else None

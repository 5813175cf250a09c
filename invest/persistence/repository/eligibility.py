"""PostgreSQL implementation of Eligibility repository."""

from collections.abc import Collection
from typing import Optional

from sqlalchemy import and_, select
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.ext.asyncio import AsyncSession

from invest.domain.model import Eligibility
from invest.domain.repository import EligibilityRepository
from invest.domain.value import OfferingId, UserId
from invest.persistence.mappers import eligibility_to_dict, row_to_eligibility
from invest.persistence.tables import eligibility_table

# Stamped on every write, whichever fields the caller supplied
_ALWAYS_UPDATED = ("checked_at", "expires_at", "updated_at")


class PostgresEligibilityRepository(EligibilityRepository):
    """PostgreSQL implementation of EligibilityRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_user_and_offering(
        self, user_id: UserId, offering_id: OfferingId
    ) -> Optional[Eligibility]:
        stmt = select(eligibility_table).where(
            and_(
                eligibility_table.c.user_id == user_id,
                eligibility_table.c.offering_id == offering_id,
            )
        )
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_eligibility(dict(row)) if row else None

    async def find_by_user(self, user_id: UserId) -> list[Eligibility]:
        stmt = (
            select(eligibility_table)
            .where(eligibility_table.c.user_id == user_id)
            .order_by(eligibility_table.c.checked_at.desc())
        )
        result = await self.session.execute(stmt)
        return [row_to_eligibility(dict(row)) for row in result.mappings().all()]

    async def upsert(
        self, eligibility: Eligibility, update_fields: Collection[str]
    ) -> Eligibility:
        """Insert or update in a single INSERT ... ON CONFLICT statement."""
        stmt = insert(eligibility_table).values(**eligibility_to_dict(eligibility))
        columns = [*update_fields, *_ALWAYS_UPDATED]
        stmt = stmt.on_conflict_do_update(
            index_elements=[eligibility_table.c.user_id, eligibility_table.c.offering_id],
            set_={name: stmt.excluded[name] for name in columns},
        ).returning(eligibility_table)

        result = await self.session.execute(stmt)
        row = result.mappings().one()
        await self.session.flush()
        return row_to_eligibility(dict(row))

"""PostgreSQL implementation of Payment repository."""

from datetime import datetime
from typing import Optional

from sqlalchemy import and_, func, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from invest.domain.model import Payment
from invest.domain.repository import PaymentRepository
from invest.domain.value import InvestmentId, PaymentId, UserId, VerificationStatus
from invest.persistence.mappers import payment_to_dict, row_to_payment
from invest.persistence.tables import payments_table


class PostgresPaymentRepository(PaymentRepository):
    """PostgreSQL implementation of PaymentRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, payment_id: PaymentId) -> Optional[Payment]:
        stmt = select(payments_table).where(payments_table.c.id == payment_id)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_payment(dict(row)) if row else None

    async def find_by_investment(self, investment_id: InvestmentId) -> list[Payment]:
        stmt = (
            select(payments_table)
            .where(payments_table.c.investment_id == investment_id)
            .order_by(payments_table.c.created_at.desc())
        )
        result = await self.session.execute(stmt)
        return [row_to_payment(dict(row)) for row in result.mappings().all()]

    async def find_by_status(self, status: VerificationStatus) -> list[Payment]:
        stmt = (
            select(payments_table)
            .where(payments_table.c.verification_status == status.value)
            .order_by(payments_table.c.created_at.desc())
        )
        result = await self.session.execute(stmt)
        return [row_to_payment(dict(row)) for row in result.mappings().all()]

    async def save(self, payment: Payment) -> Payment:
        stmt = insert(payments_table).values(**payment_to_dict(payment))
        await self.session.execute(stmt)
        await self.session.flush()
        return payment

    async def sum_verified_amount(self, investment_id: InvestmentId) -> int:
        stmt = select(func.coalesce(func.sum(payments_table.c.amount_cents), 0)).where(
            and_(
                payments_table.c.investment_id == investment_id,
                payments_table.c.verification_status
                == VerificationStatus.VERIFIED.value,
            )
        )
        result = await self.session.execute(stmt)
        return int(result.scalar() or 0)

    async def record_verification(
        self,
        payment_id: PaymentId,
        status: VerificationStatus,
        verified_by: UserId,
        verified_at: datetime,
        notes: Optional[str] = None,
    ) -> Optional[Payment]:
        values = {
            "verification_status": status.value,
            "verified_by": verified_by,
            "verified_at": verified_at,
            "updated_at": verified_at,
        }
        if notes is not None:
            values["notes"] = notes

        stmt = (
            update(payments_table)
            .where(
                and_(
                    payments_table.c.id == payment_id,
                    payments_table.c.verification_status
                    == VerificationStatus.PENDING.value,
                )
            )
            .values(**values)
            .returning(payments_table)
        )
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        await self.session.flush()
        return row_to_payment(dict(row)) if row else None

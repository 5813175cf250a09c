"""PostgreSQL implementation of Reservation repository."""

from datetime import datetime
from typing import Optional

from sqlalchemy import and_, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from invest.domain.model import Reservation
from invest.domain.model.common import utcnow
from invest.domain.repository import ReservationRepository
from invest.domain.value import OfferingId, ReservationId, ReservationStatus, UserId
from invest.persistence.mappers import reservation_to_dict, row_to_reservation
from invest.persistence.tables import reservations_table


class PostgresReservationRepository(ReservationRepository):
    """PostgreSQL implementation of ReservationRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, reservation_id: ReservationId) -> Optional[Reservation]:
        stmt = select(reservations_table).where(
            reservations_table.c.id == reservation_id
        )
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_reservation(dict(row)) if row else None

    async def find_by_user(self, user_id: UserId) -> list[Reservation]:
        stmt = (
            select(reservations_table)
            .where(reservations_table.c.user_id == user_id)
            .order_by(reservations_table.c.created_at.desc())
        )
        result = await self.session.execute(stmt)
        return [row_to_reservation(dict(row)) for row in result.mappings().all()]

    async def find_by_offering(self, offering_id: OfferingId) -> list[Reservation]:
        stmt = (
            select(reservations_table)
            .where(reservations_table.c.offering_id == offering_id)
            .order_by(reservations_table.c.created_at.desc())
        )
        result = await self.session.execute(stmt)
        return [row_to_reservation(dict(row)) for row in result.mappings().all()]

    async def save(self, reservation: Reservation) -> Reservation:
        stmt = insert(reservations_table).values(**reservation_to_dict(reservation))
        await self.session.execute(stmt)
        await self.session.flush()
        return reservation

    async def update_status(
        self,
        reservation_id: ReservationId,
        status: ReservationStatus,
        expected_status: Optional[ReservationStatus] = None,
        unexpired_at: Optional[datetime] = None,
    ) -> Optional[Reservation]:
        """Atomically change a reservation's status.

        Guards are applied in the UPDATE's WHERE clause. Returns None when
        no row matched.
        """
        conditions = [reservations_table.c.id == reservation_id]
        if expected_status is not None:
            conditions.append(reservations_table.c.status == expected_status.value)
        if unexpired_at is not None:
            conditions.append(reservations_table.c.expires_at > unexpired_at)

        stmt = (
            update(reservations_table)
            .where(and_(*conditions))
            .values(status=status.value, updated_at=utcnow())
            .returning(reservations_table)
        )
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        await self.session.flush()
        return row_to_reservation(dict(row)) if row else None

    async def mark_expired(self, now: datetime) -> int:
        stmt = (
            update(reservations_table)
            .where(
                and_(
                    reservations_table.c.status == ReservationStatus.ACTIVE.value,
                    reservations_table.c.expires_at <= now,
                )
            )
            .values(status=ReservationStatus.EXPIRED.value, updated_at=now)
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount or 0

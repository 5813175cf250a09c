"""Persistence infrastructure providers."""

from collections.abc import AsyncIterator

import logfire
from dishka import Scope, provide
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from invest.config import Settings
from invest.domain.repository import (
    EligibilityRepository,
    EscrowAccountRepository,
    PaymentRepository,
    ReservationRepository,
)
from invest.persistence.database import create_engine, create_session_factory
from invest.persistence.repository import (
    PostgresEligibilityRepository,
    PostgresEscrowAccountRepository,
    PostgresPaymentRepository,
    PostgresReservationRepository,
)
from invest.util.di.base import ProviderBase
from invest.util.observability import instrument_sqlalchemy


class PersistenceProvider(ProviderBase):
    """Persistence component base."""

    __mock_component__ = "persistence"


class ProdPersistenceProvider(PersistenceProvider):
    """Production persistence provider using PostgreSQL."""

    __is_mock__ = False

    scope = Scope.APP

    @provide(scope=Scope.APP)
    async def get_engine(self, settings: Settings) -> AsyncIterator[AsyncEngine]:
        """Provide database engine, disposed when the app container closes."""
        engine = create_engine(settings)
        instrument_sqlalchemy(engine)
        yield engine
        await engine.dispose()

    @provide(scope=Scope.APP)
    def get_session_factory(
        self, engine: AsyncEngine
    ) -> async_sessionmaker[AsyncSession]:
        """Provide session factory."""
        return create_session_factory(engine)

    @provide(scope=Scope.REQUEST)
    async def get_session(
        self, session_factory: async_sessionmaker[AsyncSession]
    ) -> AsyncIterator[AsyncSession]:
        """Provide database session for request scope.

        The session is committed at the end of the request if no exception
        occurred, or rolled back if one was raised.
        """
        async with session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception as e:
                logfire.warn("Session rollback", error=str(e))
                await session.rollback()
                raise

    @provide(scope=Scope.REQUEST)
    def get_reservation_repository(
        self, session: AsyncSession
    ) -> ReservationRepository:
        """Provide Reservation repository."""
        return PostgresReservationRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_eligibility_repository(
        self, session: AsyncSession
    ) -> EligibilityRepository:
        """Provide Eligibility repository."""
        return PostgresEligibilityRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_payment_repository(self, session: AsyncSession) -> PaymentRepository:
        """Provide Payment repository."""
        return PostgresPaymentRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_escrow_account_repository(
        self, session: AsyncSession
    ) -> EscrowAccountRepository:
        """Provide EscrowAccount repository."""
        return PostgresEscrowAccountRepository(session)

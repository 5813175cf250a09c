"""Unit tests for ReservationService."""

from datetime import timedelta
from uuid import uuid4

import pytest

from invest.config import ReservationSettings
from invest.domain.error import InvalidTransitionError, NotFoundError, ValidationError
from invest.domain.model.common import utcnow
from invest.domain.repository import ReservationRepository
from invest.domain.service import ReservationService
from invest.domain.value import OfferingId, ReservationId, ReservationStatus, UserId
from invest.persistence.repository.inmemory import InMemoryReservationRepository
from tests.conftest import make_lapsed_reservation
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked, no database needed
unit_env = create_env_fixture()


def _legacy_service() -> ReservationService:
    return ReservationService(
        reservation_repository=InMemoryReservationRepository(),
        settings=ReservationSettings(enforce_transitions=False),
    )


class TestCreateReservation:
    """Tests for create_reservation."""

    @pytest.mark.asyncio
    async def test_create_reservation_uses_default_hold(self, unit_env):
        """New holds are active and expire after the default window."""
        # Arrange
        service = await unit_env.get(ReservationService)
        repo = await unit_env.get(ReservationRepository)
        before = utcnow()

        # Act
        reservation = await service.create_reservation(
            OfferingId(10), UserId(1), share_quantity=5
        )

        # Assert
        assert reservation.status == ReservationStatus.ACTIVE
        assert reservation.share_quantity == 5
        assert reservation.expires_at - before >= timedelta(minutes=30)
        assert reservation.expires_at - before < timedelta(minutes=31)
        assert await repo.find_by_id(reservation.id) == reservation

    @pytest.mark.asyncio
    async def test_create_reservation_with_custom_hold(self, unit_env):
        service = await unit_env.get(ReservationService)

        reservation = await service.create_reservation(
            OfferingId(10), UserId(1), share_quantity=1, expiration_minutes=90
        )

        delta = reservation.expires_at - reservation.reserved_at
        assert delta == timedelta(minutes=90)

    @pytest.mark.asyncio
    @pytest.mark.parametrize("quantity", [0, -3])
    async def test_non_positive_quantity_rejected(self, unit_env, quantity):
        service = await unit_env.get(ReservationService)

        with pytest.raises(ValidationError, match="Share quantity"):
            await service.create_reservation(OfferingId(10), UserId(1), quantity)

    @pytest.mark.asyncio
    async def test_multi_day_hold_accepted_without_cap(self, unit_env):
        """No upper bound on hold length unless one is configured."""
        service = await unit_env.get(ReservationService)

        reservation = await service.create_reservation(
            OfferingId(10), UserId(1), 10, expiration_minutes=2880
        )

        delta = reservation.expires_at - reservation.reserved_at
        assert delta == timedelta(days=2)

    @pytest.mark.asyncio
    async def test_hold_longer_than_configured_cap_rejected(self):
        service = ReservationService(
            reservation_repository=InMemoryReservationRepository(),
            settings=ReservationSettings(max_expiration_minutes=24 * 60),
        )

        with pytest.raises(ValidationError, match="Expiration"):
            await service.create_reservation(
                OfferingId(10), UserId(1), 1, expiration_minutes=24 * 60 + 1
            )


class TestListReservations:
    """Tests for reservation listings."""

    @pytest.mark.asyncio
    async def test_list_user_reservations_newest_first(self, unit_env):
        service = await unit_env.get(ReservationService)
        first = await service.create_reservation(OfferingId(10), UserId(1), 1)
        second = await service.create_reservation(OfferingId(11), UserId(1), 2)
        await service.create_reservation(OfferingId(10), UserId(2), 3)

        reservations = await service.list_user_reservations(UserId(1))

        assert [r.id for r in reservations] == [second.id, first.id]

    @pytest.mark.asyncio
    async def test_active_only_hides_lapsed_and_cancelled(self, unit_env):
        # Arrange
        service = await unit_env.get(ReservationService)
        repo = await unit_env.get(ReservationRepository)
        live = await service.create_reservation(OfferingId(10), UserId(1), 1)
        cancelled = await service.create_reservation(OfferingId(10), UserId(1), 1)
        await service.cancel_reservation(cancelled)
        await repo.save(make_lapsed_reservation(ReservationId(uuid4()), user_id=1))

        # Act
        everything = await service.list_user_reservations(UserId(1))
        active = await service.list_user_reservations(UserId(1), active_only=True)

        # Assert
        assert len(everything) == 3
        assert [r.id for r in active] == [live.id]

    @pytest.mark.asyncio
    async def test_list_offering_reservations(self, unit_env):
        service = await unit_env.get(ReservationService)
        mine = await service.create_reservation(OfferingId(10), UserId(1), 1)
        theirs = await service.create_reservation(OfferingId(10), UserId(2), 1)
        await service.create_reservation(OfferingId(99), UserId(1), 1)

        reservations = await service.list_offering_reservations(OfferingId(10))

        assert {r.id for r in reservations} == {mine.id, theirs.id}

    @pytest.mark.asyncio
    async def test_get_missing_reservation_raises(self, unit_env):
        service = await unit_env.get(ReservationService)

        with pytest.raises(NotFoundError):
            await service.get_reservation(ReservationId(uuid4()))


class TestTransitions:
    """Tests for cancel and convert with transition enforcement."""

    @pytest.mark.asyncio
    async def test_cancel_active_reservation(self, unit_env):
        service = await unit_env.get(ReservationService)
        reservation = await service.create_reservation(OfferingId(10), UserId(1), 1)

        cancelled = await service.cancel_reservation(reservation)

        assert cancelled.status == ReservationStatus.CANCELLED

    @pytest.mark.asyncio
    async def test_convert_active_reservation(self, unit_env):
        service = await unit_env.get(ReservationService)
        reservation = await service.create_reservation(OfferingId(10), UserId(1), 1)

        converted = await service.convert_reservation(reservation)

        assert converted.status == ReservationStatus.CONVERTED

    @pytest.mark.asyncio
    async def test_cancelled_reservation_cannot_be_converted(self, unit_env):
        # Arrange
        service = await unit_env.get(ReservationService)
        reservation = await service.create_reservation(OfferingId(10), UserId(1), 1)
        cancelled = await service.cancel_reservation(reservation)

        # Act & Assert
        with pytest.raises(InvalidTransitionError) as exc_info:
            await service.convert_reservation(cancelled)

        assert exc_info.value.current == "cancelled"
        assert exc_info.value.target == "converted"

    @pytest.mark.asyncio
    async def test_lapsed_reservation_cannot_be_converted(self, unit_env):
        service = await unit_env.get(ReservationService)
        repo = await unit_env.get(ReservationRepository)
        lapsed = await repo.save(make_lapsed_reservation(ReservationId(uuid4())))

        with pytest.raises(InvalidTransitionError) as exc_info:
            await service.convert_reservation(lapsed)

        assert exc_info.value.current == "expired"
        stored = await repo.find_by_id(lapsed.id)
        assert stored.status == ReservationStatus.ACTIVE

    @pytest.mark.asyncio
    async def test_stale_copy_loses_to_concurrent_decision(self, unit_env):
        """A decision made from a stale read must not overwrite a newer one."""
        # Arrange
        service = await unit_env.get(ReservationService)
        reservation = await service.create_reservation(OfferingId(10), UserId(1), 1)
        await service.cancel_reservation(reservation)

        # Act & Assert - reservation still holds the stale active status
        with pytest.raises(InvalidTransitionError):
            await service.convert_reservation(reservation)

        latest = await service.get_reservation(reservation.id)
        assert latest.status == ReservationStatus.CANCELLED


class TestLegacyTransitions:
    """Tests for cancel and convert with enforcement disabled."""

    @pytest.mark.asyncio
    async def test_cancelled_reservation_can_be_converted(self):
        service = _legacy_service()
        reservation = await service.create_reservation(OfferingId(10), UserId(1), 1)
        cancelled = await service.cancel_reservation(reservation)

        converted = await service.convert_reservation(cancelled)

        assert converted.status == ReservationStatus.CONVERTED

    @pytest.mark.asyncio
    async def test_lapsed_reservation_can_be_cancelled(self):
        service = _legacy_service()
        lapsed = await service.reservation_repository.save(
            make_lapsed_reservation(ReservationId(uuid4()))
        )

        cancelled = await service.cancel_reservation(lapsed)

        assert cancelled.status == ReservationStatus.CANCELLED


class TestExpireLapsedReservations:
    """Tests for the expiry sweep."""

    @pytest.mark.asyncio
    async def test_sweep_expires_only_lapsed_active_holds(self, unit_env):
        # Arrange
        service = await unit_env.get(ReservationService)
        repo = await unit_env.get(ReservationRepository)
        live = await service.create_reservation(OfferingId(10), UserId(1), 1)
        lapsed = await repo.save(make_lapsed_reservation(ReservationId(uuid4())))

        # Act
        count = await service.expire_lapsed_reservations()

        # Assert
        assert count == 1
        assert (await repo.find_by_id(lapsed.id)).status == ReservationStatus.EXPIRED
        assert (await repo.find_by_id(live.id)).status == ReservationStatus.ACTIVE

    @pytest.mark.asyncio
    async def test_sweep_is_idempotent(self, unit_env):
        service = await unit_env.get(ReservationService)
        repo = await unit_env.get(ReservationRepository)
        await repo.save(make_lapsed_reservation(ReservationId(uuid4())))

        assert await service.expire_lapsed_reservations() == 1
        assert await service.expire_lapsed_reservations() == 0

"""Unit tests for reservation cancel, convert and expiry use cases."""

from uuid import UUID, uuid4

import pytest

from invest.application.usecase.reservation import (
    CancelReservationRequest,
    CancelReservationUseCase,
    ConvertReservationRequest,
    ConvertReservationUseCase,
    CreateReservationRequest,
    CreateReservationUseCase,
    ExpireReservationsRequest,
    ExpireReservationsUseCase,
    GetMyReservationsRequest,
    GetMyReservationsUseCase,
)
from invest.domain.error import ForbiddenError, InvalidTransitionError, NotFoundError
from invest.domain.repository import ReservationRepository
from invest.domain.value import ReservationId, ReservationStatus, Role
from tests.conftest import make_caller, make_lapsed_reservation
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


async def _reserve(unit_env, user_id: int = 1) -> UUID:
    use_case = await unit_env.get(CreateReservationUseCase)
    response = await use_case.execute(
        CreateReservationRequest(
            caller=make_caller(user_id=user_id), offering_id=10, share_quantity=2
        )
    )
    return UUID(response.reservation_id)


class TestCancelReservationUseCase:
    """Tests for CancelReservationUseCase."""

    @pytest.mark.asyncio
    async def test_owner_cancels(self, unit_env):
        reservation_id = await _reserve(unit_env, user_id=1)
        use_case = await unit_env.get(CancelReservationUseCase)

        response = await use_case.execute(
            CancelReservationRequest(
                caller=make_caller(user_id=1), reservation_id=reservation_id
            )
        )

        assert response.status == ReservationStatus.CANCELLED

    @pytest.mark.asyncio
    async def test_admin_cancels_anyones_reservation(self, unit_env, admin):
        reservation_id = await _reserve(unit_env, user_id=1)
        use_case = await unit_env.get(CancelReservationUseCase)

        response = await use_case.execute(
            CancelReservationRequest(caller=admin, reservation_id=reservation_id)
        )

        assert response.status == ReservationStatus.CANCELLED

    @pytest.mark.asyncio
    async def test_other_user_cannot_cancel(self, unit_env):
        # Arrange
        reservation_id = await _reserve(unit_env, user_id=1)
        use_case = await unit_env.get(CancelReservationUseCase)
        repo = await unit_env.get(ReservationRepository)

        # Act & Assert
        with pytest.raises(ForbiddenError, match="Not authorized to cancel"):
            await use_case.execute(
                CancelReservationRequest(
                    caller=make_caller(user_id=2), reservation_id=reservation_id
                )
            )

        stored = await repo.find_by_id(ReservationId(reservation_id))
        assert stored.status == ReservationStatus.ACTIVE

    @pytest.mark.asyncio
    async def test_cancel_missing_reservation(self, unit_env):
        use_case = await unit_env.get(CancelReservationUseCase)

        with pytest.raises(NotFoundError):
            await use_case.execute(
                CancelReservationRequest(caller=make_caller(), reservation_id=uuid4())
            )


class TestConvertReservationUseCase:
    """Tests for ConvertReservationUseCase."""

    @pytest.mark.asyncio
    async def test_admin_converts(self, unit_env, admin):
        reservation_id = await _reserve(unit_env)
        use_case = await unit_env.get(ConvertReservationUseCase)

        response = await use_case.execute(
            ConvertReservationRequest(caller=admin, reservation_id=reservation_id)
        )

        assert response.status == ReservationStatus.CONVERTED

    @pytest.mark.asyncio
    @pytest.mark.parametrize("role", [Role.USER, Role.FUNDRAISER])
    async def test_owner_cannot_convert(self, unit_env, role):
        reservation_id = await _reserve(unit_env, user_id=1)
        use_case = await unit_env.get(ConvertReservationUseCase)

        with pytest.raises(ForbiddenError, match="Only admins"):
            await use_case.execute(
                ConvertReservationRequest(
                    caller=make_caller(user_id=1, role=role),
                    reservation_id=reservation_id,
                )
            )

    @pytest.mark.asyncio
    async def test_role_is_checked_before_existence(self, unit_env):
        use_case = await unit_env.get(ConvertReservationUseCase)

        with pytest.raises(ForbiddenError):
            await use_case.execute(
                ConvertReservationRequest(caller=make_caller(), reservation_id=uuid4())
            )

    @pytest.mark.asyncio
    async def test_cancel_then_convert_is_rejected(self, unit_env, admin):
        """A cancelled hold stays cancelled when an admin later tries to convert."""
        # Arrange
        reservation_id = await _reserve(unit_env, user_id=1)
        cancel = await unit_env.get(CancelReservationUseCase)
        convert = await unit_env.get(ConvertReservationUseCase)
        await cancel.execute(
            CancelReservationRequest(
                caller=make_caller(user_id=1), reservation_id=reservation_id
            )
        )

        # Act & Assert
        with pytest.raises(InvalidTransitionError):
            await convert.execute(
                ConvertReservationRequest(caller=admin, reservation_id=reservation_id)
            )


class TestExpireReservationsUseCase:
    """Tests for ExpireReservationsUseCase."""

    @pytest.mark.asyncio
    async def test_admin_sweeps_lapsed_holds(self, unit_env, admin):
        # Arrange
        repo = await unit_env.get(ReservationRepository)
        lapsed = await repo.save(make_lapsed_reservation(ReservationId(uuid4())))
        await _reserve(unit_env)
        use_case = await unit_env.get(ExpireReservationsUseCase)

        # Act
        response = await use_case.execute(ExpireReservationsRequest(caller=admin))

        # Assert
        assert response.expired_count == 1
        stored = await repo.find_by_id(lapsed.id)
        assert stored.status == ReservationStatus.EXPIRED

    @pytest.mark.asyncio
    async def test_user_cannot_sweep(self, unit_env):
        use_case = await unit_env.get(ExpireReservationsUseCase)

        with pytest.raises(ForbiddenError):
            await use_case.execute(ExpireReservationsRequest(caller=make_caller()))


class TestGetMyReservationsUseCase:
    """Tests for GetMyReservationsUseCase."""

    @pytest.mark.asyncio
    async def test_lapsed_hold_reported_as_expired_before_sweep(self, unit_env):
        # Arrange
        repo = await unit_env.get(ReservationRepository)
        lapsed = await repo.save(
            make_lapsed_reservation(ReservationId(uuid4()), user_id=1)
        )
        use_case = await unit_env.get(GetMyReservationsUseCase)

        # Act
        everything = await use_case.execute(
            GetMyReservationsRequest(caller=make_caller(user_id=1))
        )
        active = await use_case.execute(
            GetMyReservationsRequest(caller=make_caller(user_id=1), active_only=True)
        )

        # Assert
        assert [r.reservation_id for r in everything.reservations] == [str(lapsed.id)]
        assert everything.reservations[0].status == ReservationStatus.EXPIRED
        assert active.reservations == []

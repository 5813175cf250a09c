"""Unit tests for reservation read use cases."""

from uuid import UUID

import pytest

from invest.application.usecase.reservation import (
    CreateReservationRequest,
    CreateReservationUseCase,
    GetOfferingReservationsRequest,
    GetOfferingReservationsUseCase,
    GetReservationRequest,
    GetReservationUseCase,
)
from invest.domain.error import ForbiddenError
from invest.domain.value import Role
from tests.conftest import make_caller
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


async def _reserve(unit_env, user_id: int, offering_id: int = 10) -> UUID:
    use_case = await unit_env.get(CreateReservationUseCase)
    response = await use_case.execute(
        CreateReservationRequest(
            caller=make_caller(user_id=user_id),
            offering_id=offering_id,
            share_quantity=1,
        )
    )
    return UUID(response.reservation_id)


class TestGetReservationUseCase:
    """Tests for GetReservationUseCase."""

    @pytest.mark.asyncio
    async def test_owner_reads_reservation(self, unit_env):
        reservation_id = await _reserve(unit_env, user_id=1)
        use_case = await unit_env.get(GetReservationUseCase)

        view = await use_case.execute(
            GetReservationRequest(
                caller=make_caller(user_id=1), reservation_id=reservation_id
            )
        )

        assert view.reservation_id == str(reservation_id)
        assert view.user_id == 1

    @pytest.mark.asyncio
    async def test_admin_reads_any_reservation(self, unit_env, admin):
        reservation_id = await _reserve(unit_env, user_id=1)
        use_case = await unit_env.get(GetReservationUseCase)

        view = await use_case.execute(
            GetReservationRequest(caller=admin, reservation_id=reservation_id)
        )

        assert view.user_id == 1

    @pytest.mark.asyncio
    async def test_other_user_cannot_read(self, unit_env):
        reservation_id = await _reserve(unit_env, user_id=1)
        use_case = await unit_env.get(GetReservationUseCase)

        with pytest.raises(ForbiddenError, match="Not authorized to view"):
            await use_case.execute(
                GetReservationRequest(
                    caller=make_caller(user_id=2), reservation_id=reservation_id
                )
            )


class TestGetOfferingReservationsUseCase:
    """Tests for GetOfferingReservationsUseCase."""

    @pytest.mark.asyncio
    @pytest.mark.parametrize("role", [Role.ADMIN, Role.FUNDRAISER])
    async def test_staff_list_offering_reservations(self, unit_env, role):
        await _reserve(unit_env, user_id=1)
        await _reserve(unit_env, user_id=2)
        await _reserve(unit_env, user_id=2, offering_id=11)
        use_case = await unit_env.get(GetOfferingReservationsUseCase)

        response = await use_case.execute(
            GetOfferingReservationsRequest(
                caller=make_caller(user_id=50, role=role), offering_id=10
            )
        )

        assert sorted(r.user_id for r in response.reservations) == [1, 2]

    @pytest.mark.asyncio
    async def test_user_cannot_list_offering_reservations(self, unit_env):
        use_case = await unit_env.get(GetOfferingReservationsUseCase)

        with pytest.raises(ForbiddenError):
            await use_case.execute(
                GetOfferingReservationsRequest(caller=make_caller(), offering_id=10)
            )

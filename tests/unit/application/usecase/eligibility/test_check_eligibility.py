"""Unit tests for eligibility use cases."""

import pytest

from invest.application.usecase.eligibility import (
    CheckEligibilityRequest,
    CheckEligibilityUseCase,
    GetMyEligibilityChecksRequest,
    GetMyEligibilityChecksUseCase,
    GetMyEligibilityRequest,
    GetMyEligibilityUseCase,
    IsEligibleRequest,
    IsEligibleUseCase,
    UpdateUserEligibilityRequest,
    UpdateUserEligibilityUseCase,
)
from invest.domain.error import ForbiddenError
from invest.domain.value import AccreditationStatus, JurisdictionCheck
from tests.conftest import make_caller
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestCheckEligibilityUseCase:
    """Tests for CheckEligibilityUseCase."""

    @pytest.mark.asyncio
    async def test_check_writes_callers_own_record(self, unit_env):
        # Arrange
        check = await unit_env.get(CheckEligibilityUseCase)
        get_mine = await unit_env.get(GetMyEligibilityUseCase)
        caller = make_caller(user_id=4)

        # Act
        response = await check.execute(
            CheckEligibilityRequest(
                caller=caller,
                offering_id=10,
                accreditation_status=AccreditationStatus.PENDING,
            )
        )

        # Assert
        mine = await get_mine.execute(
            GetMyEligibilityRequest(caller=caller, offering_id=10)
        )
        assert mine.eligibility.eligibility_id == response.eligibility_id
        assert mine.eligibility.user_id == 4
        assert mine.eligibility.accreditation_status == AccreditationStatus.PENDING

    @pytest.mark.asyncio
    async def test_partial_check_keeps_omitted_fields(self, unit_env):
        """Fields left out of a later check keep their stored values."""
        # Arrange
        check = await unit_env.get(CheckEligibilityUseCase)
        get_mine = await unit_env.get(GetMyEligibilityUseCase)
        caller = make_caller(user_id=4)
        await check.execute(
            CheckEligibilityRequest(
                caller=caller,
                offering_id=10,
                jurisdiction_check=JurisdictionCheck.ALLOWED,
                investment_limit_cents=100_000,
            )
        )

        # Act
        await check.execute(
            CheckEligibilityRequest(
                caller=caller,
                offering_id=10,
                accreditation_status=AccreditationStatus.VERIFIED,
            )
        )

        # Assert
        mine = await get_mine.execute(
            GetMyEligibilityRequest(caller=caller, offering_id=10)
        )
        assert mine.eligibility.jurisdiction_check == JurisdictionCheck.ALLOWED
        assert mine.eligibility.accreditation_status == AccreditationStatus.VERIFIED
        assert mine.eligibility.investment_limit_cents == 100_000

    @pytest.mark.asyncio
    async def test_explicit_null_flag_is_ignored(self, unit_env):
        check = await unit_env.get(CheckEligibilityUseCase)
        get_mine = await unit_env.get(GetMyEligibilityUseCase)
        caller = make_caller(user_id=4)
        await check.execute(
            CheckEligibilityRequest(caller=caller, offering_id=10, is_eligible=True)
        )

        await check.execute(
            CheckEligibilityRequest(caller=caller, offering_id=10, is_eligible=None)
        )

        mine = await get_mine.execute(
            GetMyEligibilityRequest(caller=caller, offering_id=10)
        )
        assert mine.eligibility.is_eligible is True

    @pytest.mark.asyncio
    async def test_no_record_reads_as_none(self, unit_env):
        get_mine = await unit_env.get(GetMyEligibilityUseCase)

        mine = await get_mine.execute(
            GetMyEligibilityRequest(caller=make_caller(), offering_id=10)
        )

        assert mine.eligibility is None


class TestUpdateUserEligibilityUseCase:
    """Tests for UpdateUserEligibilityUseCase."""

    @pytest.mark.asyncio
    async def test_admin_clears_user_to_invest(self, unit_env, admin):
        # Arrange
        update = await unit_env.get(UpdateUserEligibilityUseCase)
        is_eligible = await unit_env.get(IsEligibleUseCase)
        user = make_caller(user_id=4)

        # Act
        await update.execute(
            UpdateUserEligibilityRequest(
                caller=admin,
                user_id=4,
                offering_id=10,
                is_eligible=True,
                accreditation_status=AccreditationStatus.VERIFIED,
                jurisdiction_check=JurisdictionCheck.ALLOWED,
            )
        )

        # Assert
        decision = await is_eligible.execute(
            IsEligibleRequest(caller=user, offering_id=10)
        )
        assert decision.is_eligible is True

    @pytest.mark.asyncio
    async def test_admin_override_updates_existing_record(self, unit_env, admin):
        # Arrange
        check = await unit_env.get(CheckEligibilityUseCase)
        update = await unit_env.get(UpdateUserEligibilityUseCase)
        checks = await unit_env.get(GetMyEligibilityChecksUseCase)
        user = make_caller(user_id=4)
        first = await check.execute(
            CheckEligibilityRequest(caller=user, offering_id=10, notes="self check")
        )

        # Act
        second = await update.execute(
            UpdateUserEligibilityRequest(
                caller=admin,
                user_id=4,
                offering_id=10,
                is_eligible=False,
                accreditation_status=AccreditationStatus.REJECTED,
                jurisdiction_check=JurisdictionCheck.PROHIBITED,
            )
        )

        # Assert
        assert second.eligibility_id == first.eligibility_id
        listed = await checks.execute(GetMyEligibilityChecksRequest(caller=user))
        assert len(listed.checks) == 1
        assert listed.checks[0].notes == "self check"
        assert listed.checks[0].jurisdiction_check == JurisdictionCheck.PROHIBITED

    @pytest.mark.asyncio
    async def test_non_admin_cannot_override(self, unit_env):
        update = await unit_env.get(UpdateUserEligibilityUseCase)

        with pytest.raises(ForbiddenError):
            await update.execute(
                UpdateUserEligibilityRequest(
                    caller=make_caller(user_id=4),
                    user_id=4,
                    offering_id=10,
                    is_eligible=True,
                    accreditation_status=AccreditationStatus.VERIFIED,
                    jurisdiction_check=JurisdictionCheck.ALLOWED,
                )
            )

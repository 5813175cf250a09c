"""Unit tests for EligibilityService."""

from datetime import timedelta

import pytest

from invest.config import EligibilitySettings
from invest.domain.error import ValidationError
from invest.domain.model.common import utcnow
from invest.domain.service import EligibilityService
from invest.domain.value import (
    AccreditationStatus,
    JurisdictionCheck,
    OfferingId,
    UserId,
)
from invest.persistence.repository.inmemory import InMemoryEligibilityRepository
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()

CLEARED = {
    "is_eligible": True,
    "accreditation_status": AccreditationStatus.VERIFIED,
    "jurisdiction_check": JurisdictionCheck.ALLOWED,
}


class TestRecordCheck:
    """Tests for record_check upserts."""

    @pytest.mark.asyncio
    async def test_first_check_creates_record_with_defaults(self, unit_env):
        service = await unit_env.get(EligibilityService)

        record = await service.record_check(UserId(1), OfferingId(10), {})

        assert record.is_eligible is False
        assert record.accreditation_status == AccreditationStatus.NOT_CHECKED
        assert record.jurisdiction_check == JurisdictionCheck.NOT_CHECKED
        assert record.expires_at is None

    @pytest.mark.asyncio
    async def test_repeated_checks_keep_a_single_record(self, unit_env):
        """Writes for the same user and offering update one record."""
        # Arrange
        service = await unit_env.get(EligibilityService)
        first = await service.record_check(
            UserId(1), OfferingId(10), {"notes": "first pass"}
        )

        # Act
        second = await service.record_check(UserId(1), OfferingId(10), CLEARED)

        # Assert
        assert second.id == first.id
        assert second.checked_at >= first.checked_at
        checks = await service.list_user_checks(UserId(1))
        assert len(checks) == 1

    @pytest.mark.asyncio
    async def test_omitted_fields_keep_stored_values(self, unit_env):
        # Arrange
        service = await unit_env.get(EligibilityService)
        await service.record_check(
            UserId(1),
            OfferingId(10),
            {**CLEARED, "investment_limit_cents": 500_000, "notes": "reviewed"},
        )

        # Act
        updated = await service.record_check(
            UserId(1),
            OfferingId(10),
            {"jurisdiction_check": JurisdictionCheck.RESTRICTED},
        )

        # Assert
        assert updated.jurisdiction_check == JurisdictionCheck.RESTRICTED
        assert updated.is_eligible is True
        assert updated.accreditation_status == AccreditationStatus.VERIFIED
        assert updated.investment_limit_cents == 500_000
        assert updated.notes == "reviewed"

    @pytest.mark.asyncio
    async def test_supplied_none_clears_nullable_field(self, unit_env):
        service = await unit_env.get(EligibilityService)
        await service.record_check(UserId(1), OfferingId(10), {"notes": "temporary"})

        updated = await service.record_check(UserId(1), OfferingId(10), {"notes": None})

        assert updated.notes is None

    @pytest.mark.asyncio
    async def test_unknown_field_rejected(self, unit_env):
        service = await unit_env.get(EligibilityService)

        with pytest.raises(ValidationError, match="user_id"):
            await service.record_check(UserId(1), OfferingId(10), {"user_id": 2})

    @pytest.mark.asyncio
    async def test_validity_window_sets_expiry(self):
        service = EligibilityService(
            eligibility_repository=InMemoryEligibilityRepository(),
            settings=EligibilitySettings(validity_days=90),
        )

        record = await service.record_check(UserId(1), OfferingId(10), CLEARED)

        assert record.expires_at == record.checked_at + timedelta(days=90)


class TestIsEligible:
    """Tests for the eligibility decision."""

    @pytest.mark.asyncio
    async def test_no_record_means_not_eligible(self, unit_env):
        service = await unit_env.get(EligibilityService)

        assert await service.is_eligible(UserId(1), OfferingId(10)) is False

    @pytest.mark.asyncio
    async def test_cleared_record_is_eligible(self, unit_env):
        service = await unit_env.get(EligibilityService)
        await service.record_check(UserId(1), OfferingId(10), CLEARED)

        assert await service.is_eligible(UserId(1), OfferingId(10)) is True
        assert await service.is_eligible(UserId(1), OfferingId(11)) is False

    @pytest.mark.asyncio
    async def test_pending_accreditation_is_not_eligible(self, unit_env):
        service = await unit_env.get(EligibilityService)
        await service.record_check(
            UserId(1),
            OfferingId(10),
            {**CLEARED, "accreditation_status": AccreditationStatus.PENDING},
        )

        assert await service.is_eligible(UserId(1), OfferingId(10)) is False

    @pytest.mark.asyncio
    async def test_expired_record_is_not_eligible(self):
        # Arrange
        repo = InMemoryEligibilityRepository()
        service = EligibilityService(
            eligibility_repository=repo,
            settings=EligibilitySettings(validity_days=30),
        )
        record = await service.record_check(UserId(1), OfferingId(10), CLEARED)
        await repo.upsert(
            record.model_copy(update={"expires_at": utcnow() - timedelta(seconds=1)}),
            [],
        )

        # Act & Assert
        assert await service.is_eligible(UserId(1), OfferingId(10)) is False


class TestListUserChecks:
    """Tests for list_user_checks."""

    @pytest.mark.asyncio
    async def test_most_recently_checked_first(self, unit_env):
        service = await unit_env.get(EligibilityService)
        await service.record_check(UserId(1), OfferingId(10), {})
        await service.record_check(UserId(1), OfferingId(11), {})
        await service.record_check(UserId(2), OfferingId(10), {})

        # Re-checking offering 10 moves it to the front
        await service.record_check(UserId(1), OfferingId(10), CLEARED)
        checks = await service.list_user_checks(UserId(1))

        assert [c.offering_id for c in checks] == [10, 11]

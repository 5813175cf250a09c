"""Eligibility domain service."""

from datetime import timedelta
from typing import Any, Optional
from uuid import uuid4

import logfire

from invest.config import EligibilitySettings
from invest.domain.error import ValidationError
from invest.domain.model.common import utcnow
from invest.domain.model.eligibility import Eligibility
from invest.domain.repository import UPSERTABLE_FIELDS, EligibilityRepository
from invest.domain.value import EligibilityId, OfferingId, UserId

from .base import Service


class EligibilityService(Service):
    """Domain service for per-offering investment eligibility."""

    def __init__(
        self,
        eligibility_repository: EligibilityRepository,
        settings: EligibilitySettings,
    ) -> None:
        """Initialize eligibility service.

        Args:
            eligibility_repository: Eligibility repository
            settings: Eligibility settings
        """
        self.eligibility_repository = eligibility_repository
        self.settings = settings

    async def record_check(
        self,
        user_id: UserId,
        offering_id: OfferingId,
        updates: dict[str, Any],
    ) -> Eligibility:
        """Create or refresh the eligibility record for a user and offering.

        Only the fields present in ``updates`` overwrite an existing record;
        the rest keep their stored values. ``checked_at`` is always stamped.

        Args:
            user_id: User the record belongs to
            offering_id: Offering the record applies to
            updates: Field values supplied by the caller

        Returns:
            The stored record

        Raises:
            ValidationError: If updates name a field that can't be written
        """
        unknown = set(updates) - UPSERTABLE_FIELDS
        if unknown:
            raise ValidationError(
                f"Unknown eligibility fields: {', '.join(sorted(unknown))}"
            )

        with logfire.span(
            "eligibility_service.record_check",
            user_id=user_id,
            offering_id=offering_id,
            fields=sorted(updates),
        ):
            now = utcnow()
            expires_at = (
                now + timedelta(days=self.settings.validity_days)
                if self.settings.validity_days
                else None
            )

            candidate = Eligibility(
                id=EligibilityId(uuid4()),
                user_id=user_id,
                offering_id=offering_id,
                checked_at=now,
                expires_at=expires_at,
                created_at=now,
                updated_at=now,
                **updates,
            )

            saved = await self.eligibility_repository.upsert(candidate, updates.keys())
            logfire.info(
                "Eligibility recorded",
                eligibility_id=str(saved.id),
                user_id=user_id,
                offering_id=offering_id,
                is_eligible=saved.is_eligible,
                accreditation_status=saved.accreditation_status.value,
                jurisdiction_check=saved.jurisdiction_check.value,
            )
            return saved

    async def get_eligibility(
        self, user_id: UserId, offering_id: OfferingId
    ) -> Optional[Eligibility]:
        """Get a user's record for an offering, if any."""
        return await self.eligibility_repository.find_by_user_and_offering(
            user_id, offering_id
        )

    async def is_eligible(self, user_id: UserId, offering_id: OfferingId) -> bool:
        """Decide whether a user is currently cleared to invest in an offering.

        Returns:
            False when there is no record, it has expired, or any of the
            eligibility flag, accreditation or jurisdiction check fails
        """
        eligibility = await self.get_eligibility(user_id, offering_id)
        if eligibility is None:
            return False
        return eligibility.is_cleared(utcnow())

    async def list_user_checks(self, user_id: UserId) -> list[Eligibility]:
        """List a user's records across offerings, most recently checked first."""
        return await self.eligibility_repository.find_by_user(user_id)

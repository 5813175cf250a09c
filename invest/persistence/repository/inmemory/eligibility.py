"""In-memory eligibility repository for testing."""

from collections.abc import Collection
from typing import Optional

from invest.domain.model.eligibility import Eligibility
from invest.domain.repository.eligibility import EligibilityRepository
from invest.domain.value import OfferingId, UserId


class InMemoryEligibilityRepository(EligibilityRepository):
    """In-memory implementation of EligibilityRepository for testing."""

    def __init__(self) -> None:
        self._records: dict[tuple[UserId, OfferingId], Eligibility] = {}

    async def find_by_user_and_offering(
        self, user_id: UserId, offering_id: OfferingId
    ) -> Optional[Eligibility]:
        """Find the record for a user and offering."""
        return self._records.get((user_id, offering_id))

    async def find_by_user(self, user_id: UserId) -> list[Eligibility]:
        """Find a user's records, most recently checked first."""
        records = [e for e in self._records.values() if e.user_id == user_id]
        return sorted(reversed(records), key=lambda e: e.checked_at, reverse=True)

    async def upsert(
        self, eligibility: Eligibility, update_fields: Collection[str]
    ) -> Eligibility:
        """Insert the record, or merge the supplied fields into the existing one."""
        key = (eligibility.user_id, eligibility.offering_id)
        existing = self._records.get(key)
        if existing is None:
            self._records[key] = eligibility
            return eligibility

        changes = {name: getattr(eligibility, name) for name in update_fields}
        changes.update(
            checked_at=eligibility.checked_at,
            expires_at=eligibility.expires_at,
            updated_at=eligibility.updated_at,
        )
        merged = existing.model_copy(update=changes)
        self._records[key] = merged
        return merged

"""Eligibility repository interface."""

from abc import ABC, abstractmethod
from collections.abc import Collection
from typing import Optional

from invest.domain.model.eligibility import Eligibility
from invest.domain.value import OfferingId, UserId

# Fields an upsert may overwrite on an existing record
UPSERTABLE_FIELDS = frozenset(
    {
        "is_eligible",
        "accreditation_status",
        "jurisdiction_check",
        "investment_limit_cents",
        "notes",
    }
)


class EligibilityRepository(ABC):
    """Repository for Eligibility entity.

    Records are keyed on (user_id, offering_id). Writes go through
    :meth:`upsert`, which must be atomic per write.
    """

    @abstractmethod
    async def find_by_user_and_offering(
        self, user_id: UserId, offering_id: OfferingId
    ) -> Optional[Eligibility]:
        """Find the eligibility record for a user and offering.

        Args:
            user_id: The user's ID
            offering_id: The offering's ID

        Returns:
            The record if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_user(self, user_id: UserId) -> list[Eligibility]:
        """Find every eligibility record for a user, most recently checked first.

        Args:
            user_id: The user's ID

        Returns:
            List of eligibility records
        """
        pass

    @abstractmethod
    async def upsert(
        self, eligibility: Eligibility, update_fields: Collection[str]
    ) -> Eligibility:
        """Insert a record or update the existing one for the same pair.

        On insert the whole ``eligibility`` is stored. On conflict only the
        names in ``update_fields`` are copied over, together with
        ``checked_at``, ``expires_at`` and ``updated_at``; the existing id
        and ``created_at`` are kept.

        Args:
            eligibility: Candidate record
            update_fields: Subset of UPSERTABLE_FIELDS supplied by the caller

        Returns:
            The stored record
        """
        pass

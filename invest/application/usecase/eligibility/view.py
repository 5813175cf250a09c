"""Eligibility view shared by eligibility use cases."""

from datetime import datetime
from typing import Any

from pydantic import BaseModel

from invest.domain.model import Eligibility
from invest.domain.value import AccreditationStatus, JurisdictionCheck

# Columns that may be cleared by sending null; the rest ignore nulls
NULLABLE_FIELDS = frozenset({"investment_limit_cents", "notes"})


class EligibilityView(BaseModel):
    """Eligibility record as returned to callers."""

    eligibility_id: str
    user_id: int
    offering_id: int
    is_eligible: bool
    accreditation_status: AccreditationStatus
    jurisdiction_check: JurisdictionCheck
    investment_limit_cents: int | None
    notes: str | None
    checked_at: datetime
    expires_at: datetime | None
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_eligibility(cls, eligibility: Eligibility) -> "EligibilityView":
        return cls(
            eligibility_id=str(eligibility.id),
            user_id=eligibility.user_id,
            offering_id=eligibility.offering_id,
            is_eligible=eligibility.is_eligible,
            accreditation_status=eligibility.accreditation_status,
            jurisdiction_check=eligibility.jurisdiction_check,
            investment_limit_cents=eligibility.investment_limit_cents,
            notes=eligibility.notes,
            checked_at=eligibility.checked_at,
            expires_at=eligibility.expires_at,
            created_at=eligibility.created_at,
            updated_at=eligibility.updated_at,
        )


def supplied_fields(request: BaseModel, names: frozenset[str]) -> dict[str, Any]:
    """Collect the eligibility fields the caller actually sent.

    Args:
        request: Request model
        names: Writable field names

    Returns:
        Mapping of supplied field names to values
    """
    supplied = request.model_dump(include=set(names), exclude_unset=True)
    return {
        name: value
        for name, value in supplied.items()
        if value is not None or name in NULLABLE_FIELDS
    }

"""Eligibility entity.

One record per (user, offering) pair stating whether the user may invest.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from invest.domain.model.common import DomainModel, utcnow
from invest.domain.value import (
    AccreditationStatus,
    EligibilityId,
    JurisdictionCheck,
    OfferingId,
    UserId,
)


class Eligibility(DomainModel):
    """Eligibility entity.

    Business rules:
    - At most one record per (user_id, offering_id); writes are upserts
    - Every write stamps checked_at
    - A user is cleared to invest only when the record is unexpired, flagged
      eligible, accreditation is verified and jurisdiction is allowed
    """

    id: EligibilityId
    user_id: UserId
    offering_id: OfferingId
    is_eligible: bool = False
    accreditation_status: AccreditationStatus = AccreditationStatus.NOT_CHECKED
    jurisdiction_check: JurisdictionCheck = JurisdictionCheck.NOT_CHECKED
    investment_limit_cents: Optional[int] = Field(default=None, ge=0)
    notes: Optional[str] = None
    checked_at: datetime = Field(default_factory=utcnow)
    expires_at: Optional[datetime] = None
    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)

    def is_cleared(self, now: datetime) -> bool:
        if self.expires_at is not None and now > self.expires_at:
            return False
        return (
            self.is_eligible
            and self.accreditation_status == AccreditationStatus.VERIFIED
            and self.jurisdiction_check == JurisdictionCheck.ALLOWED
        )

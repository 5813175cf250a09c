"""Self-service eligibility check use case."""

from pydantic import BaseModel, Field

from invest.application.usecase.base import BaseUseCase
from invest.domain.repository import UPSERTABLE_FIELDS
from invest.domain.service import EligibilityService
from invest.domain.value import (
    AccreditationStatus,
    Caller,
    JurisdictionCheck,
    OfferingId,
)

from .view import supplied_fields


class CheckEligibilityRequest(BaseModel):
    """Request to record the caller's own eligibility for an offering.

    Omitted fields keep their stored values.
    """

    caller: Caller
    offering_id: int
    is_eligible: bool | None = None
    accreditation_status: AccreditationStatus | None = None
    jurisdiction_check: JurisdictionCheck | None = None
    investment_limit_cents: int | None = Field(default=None, ge=0)
    notes: str | None = None


class CheckEligibilityResponse(BaseModel):
    """Response after recording eligibility."""

    success: bool = True
    eligibility_id: str


class CheckEligibilityUseCase(BaseUseCase):
    """Use case for upserting the caller's eligibility record."""

    def __init__(self, eligibility_service: EligibilityService) -> None:
        """Initialize check eligibility use case.

        Args:
            eligibility_service: Eligibility domain service
        """
        self.eligibility_service = eligibility_service

    async def execute(self, request: CheckEligibilityRequest) -> CheckEligibilityResponse:
        eligibility = await self.eligibility_service.record_check(
            user_id=request.caller.user_id,
            offering_id=OfferingId(request.offering_id),
            updates=supplied_fields(request, UPSERTABLE_FIELDS),
        )
        return CheckEligibilityResponse(eligibility_id=str(eligibility.id))

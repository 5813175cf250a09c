"""Admin eligibility override use case."""

from pydantic import BaseModel, Field

from invest.application.usecase.base import BaseUseCase
from invest.domain.repository import UPSERTABLE_FIELDS
from invest.domain.service import AccessPolicy, Capability, EligibilityService
from invest.domain.value import (
    AccreditationStatus,
    Caller,
    JurisdictionCheck,
    OfferingId,
    UserId,
)

from .view import supplied_fields


class UpdateUserEligibilityRequest(BaseModel):
    """Request to set another user's eligibility for an offering."""

    caller: Caller
    user_id: int
    offering_id: int
    is_eligible: bool
    accreditation_status: AccreditationStatus
    jurisdiction_check: JurisdictionCheck
    investment_limit_cents: int | None = Field(default=None, ge=0)
    notes: str | None = None


class UpdateUserEligibilityResponse(BaseModel):
    """Response after an admin override."""

    success: bool = True
    eligibility_id: str


class UpdateUserEligibilityUseCase(BaseUseCase):
    """Use case for admins overriding a user's eligibility."""

    def __init__(
        self, eligibility_service: EligibilityService, access_policy: AccessPolicy
    ) -> None:
        """Initialize update user eligibility use case.

        Args:
            eligibility_service: Eligibility domain service
            access_policy: Access policy
        """
        self.eligibility_service = eligibility_service
        self.access_policy = access_policy

    async def execute(
        self, request: UpdateUserEligibilityRequest
    ) -> UpdateUserEligibilityResponse:
        """Execute the override.

        Raises:
            ForbiddenError: If the caller isn't an admin
        """
        self.access_policy.require(request.caller, Capability.ELIGIBILITY_OVERRIDE)

        # Core fields are required, so they're always part of the update
        updates = supplied_fields(request, UPSERTABLE_FIELDS)
        updates.update(
            is_eligible=request.is_eligible,
            accreditation_status=request.accreditation_status,
            jurisdiction_check=request.jurisdiction_check,
        )

        eligibility = await self.eligibility_service.record_check(
            user_id=UserId(request.user_id),
            offering_id=OfferingId(request.offering_id),
            updates=updates,
        )
        return UpdateUserEligibilityResponse(eligibility_id=str(eligibility.id))

"""Eligibility query use cases."""

from pydantic import BaseModel

from invest.application.usecase.base import BaseUseCase
from invest.domain.service import EligibilityService
from invest.domain.value import Caller, OfferingId

from .view import EligibilityView


class GetMyEligibilityRequest(BaseModel):
    """Request for the caller's record on one offering."""

    caller: Caller
    offering_id: int


class GetMyEligibilityResponse(BaseModel):
    """The caller's record, or None if they were never checked."""

    eligibility: EligibilityView | None


class IsEligibleRequest(BaseModel):
    """Request for the caller's eligibility decision on one offering."""

    caller: Caller
    offering_id: int


class IsEligibleResponse(BaseModel):
    """Eligibility decision."""

    is_eligible: bool


class GetMyEligibilityChecksRequest(BaseModel):
    """Request for all of the caller's records."""

    caller: Caller


class GetMyEligibilityChecksResponse(BaseModel):
    """The caller's records, most recently checked first."""

    checks: list[EligibilityView]


class GetMyEligibilityUseCase(BaseUseCase):
    """Use case for reading the caller's record on an offering."""

    def __init__(self, eligibility_service: EligibilityService) -> None:
        self.eligibility_service = eligibility_service

    async def execute(self, request: GetMyEligibilityRequest) -> GetMyEligibilityResponse:
        eligibility = await self.eligibility_service.get_eligibility(
            request.caller.user_id, OfferingId(request.offering_id)
        )
        return GetMyEligibilityResponse(
            eligibility=(
                EligibilityView.from_eligibility(eligibility) if eligibility else None
            )
        )


class IsEligibleUseCase(BaseUseCase):
    """Use case for deciding whether the caller may invest in an offering."""

    def __init__(self, eligibility_service: EligibilityService) -> None:
        self.eligibility_service = eligibility_service

    async def execute(self, request: IsEligibleRequest) -> IsEligibleResponse:
        is_eligible = await self.eligibility_service.is_eligible(
            request.caller.user_id, OfferingId(request.offering_id)
        )
        return IsEligibleResponse(is_eligible=is_eligible)


class GetMyEligibilityChecksUseCase(BaseUseCase):
    """Use case for listing the caller's records across offerings."""

    def __init__(self, eligibility_service: EligibilityService) -> None:
        self.eligibility_service = eligibility_service

    async def execute(
        self, request: GetMyEligibilityChecksRequest
    ) -> GetMyEligibilityChecksResponse:
        checks = await self.eligibility_service.list_user_checks(request.caller.user_id)
        return GetMyEligibilityChecksResponse(
            checks=[EligibilityView.from_eligibility(e) for e in checks]
        )

"""Eligibility use cases."""

from .check_eligibility import (
    CheckEligibilityRequest,
    CheckEligibilityResponse,
    CheckEligibilityUseCase,
)
from .get_eligibility import (
    GetMyEligibilityChecksRequest,
    GetMyEligibilityChecksResponse,
    GetMyEligibilityChecksUseCase,
    GetMyEligibilityRequest,
    GetMyEligibilityResponse,
    GetMyEligibilityUseCase,
    IsEligibleRequest,
    IsEligibleResponse,
    IsEligibleUseCase,
)
from .update_user_eligibility import (
    UpdateUserEligibilityRequest,
    UpdateUserEligibilityResponse,
    UpdateUserEligibilityUseCase,
)
from .view import EligibilityView

__all__ = [
    "CheckEligibilityRequest",
    "CheckEligibilityResponse",
    "CheckEligibilityUseCase",
    "EligibilityView",
    "GetMyEligibilityChecksRequest",
    "GetMyEligibilityChecksResponse",
    "GetMyEligibilityChecksUseCase",
    "GetMyEligibilityRequest",
    "GetMyEligibilityResponse",
    "GetMyEligibilityUseCase",
    "IsEligibleRequest",
    "IsEligibleResponse",
    "IsEligibleUseCase",
    "UpdateUserEligibilityRequest",
    "UpdateUserEligibilityResponse",
    "UpdateUserEligibilityUseCase",
]

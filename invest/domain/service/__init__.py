"""Domain services."""

from .access_policy import AccessPolicy, Capability
from .base import Service
from .eligibility_service import EligibilityService
from .escrow_service import EscrowService
from .jwt_service import JWTService
from .payment_service import PaymentService
from .reservation_service import ReservationService

__all__ = [
    "AccessPolicy",
    "Capability",
    "EligibilityService",
    "EscrowService",
    "JWTService",
    "PaymentService",
    "ReservationService",
    "Service",
]

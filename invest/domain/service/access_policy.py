"""Role and ownership checks for investment flow operations.

Single source of truth for who may do what. Each gated operation maps to a
capability; each role maps to the capabilities it holds. Use cases call the
policy before touching domain services.
"""

from enum import Enum

import logfire

from invest.domain.error import ForbiddenError
from invest.domain.value import Caller, Role, UserId

from .base import Service


class Capability(str, Enum):
    """Role-gated investment flow capabilities."""

    RESERVATION_CONVERT = "reservation:convert"
    RESERVATION_VIEW_OFFERING = "reservation:view_offering"
    RESERVATION_EXPIRE = "reservation:expire"
    ELIGIBILITY_OVERRIDE = "eligibility:override"
    PAYMENT_READ_ANY = "payment:read_any"
    PAYMENT_VERIFY = "payment:verify"
    PAYMENT_REVIEW = "payment:review"
    ESCROW_CREATE = "escrow:create"
    ESCROW_UPDATE_STATUS = "escrow:update_status"
    ESCROW_UPDATE_BALANCE = "escrow:update_balance"
    ESCROW_VIEW_ACTIVE = "escrow:view_active"


ROLE_CAPABILITIES: dict[Role, frozenset[Capability]] = {
    Role.ADMIN: frozenset(Capability),
    Role.FUNDRAISER: frozenset({Capability.RESERVATION_VIEW_OFFERING}),
    Role.USER: frozenset(),
}

# Message shown to a caller who lacks the capability
DENIAL_MESSAGES: dict[Capability, str] = {
    Capability.RESERVATION_CONVERT: "Only admins can convert reservations",
    Capability.RESERVATION_VIEW_OFFERING: "Not authorized to view offering reservations",
    Capability.RESERVATION_EXPIRE: "Only admins can expire reservations",
    Capability.ELIGIBILITY_OVERRIDE: "Only admins can update user eligibility",
    Capability.PAYMENT_READ_ANY: "Only admins can view payments",
    Capability.PAYMENT_VERIFY: "Only admins can verify payments",
    Capability.PAYMENT_REVIEW: "Only admins can view pending payments",
    Capability.ESCROW_CREATE: "Only admins can create escrow accounts",
    Capability.ESCROW_UPDATE_STATUS: "Only admins can update escrow status",
    Capability.ESCROW_UPDATE_BALANCE: "Only admins can update escrow balance",
    Capability.ESCROW_VIEW_ACTIVE: "Only admins can view escrow accounts",
}

EMAIL_NOT_VERIFIED_MESSAGE = (
    "Please verify your email address before making an investment. "
    "Check your inbox for the verification link."
)


class AccessPolicy(Service):
    """Domain service deciding whether a caller may proceed."""

    def has_capability(self, caller: Caller, capability: Capability) -> bool:
        """Check a capability without raising.

        Args:
            caller: Authenticated caller
            capability: Capability to check

        Returns:
            True if the caller's role grants the capability
        """
        return capability in ROLE_CAPABILITIES.get(caller.role, frozenset())

    def require(self, caller: Caller, capability: Capability) -> None:
        """Require a capability.

        Args:
            caller: Authenticated caller
            capability: Capability the operation needs

        Raises:
            ForbiddenError: If the caller's role lacks the capability
        """
        if not self.has_capability(caller, capability):
            logfire.warn(
                "Access denied",
                user_id=caller.user_id,
                role=caller.role.value,
                capability=capability.value,
            )
            raise ForbiddenError(DENIAL_MESSAGES[capability])

    def require_owner_or_admin(
        self, caller: Caller, owner_id: UserId, message: str
    ) -> None:
        """Require that the caller owns the resource or is an admin.

        Args:
            caller: Authenticated caller
            owner_id: User who owns the resource
            message: Denial message for display

        Raises:
            ForbiddenError: If the caller is neither owner nor admin
        """
        if caller.user_id != owner_id and not caller.is_admin:
            logfire.warn(
                "Ownership check failed",
                user_id=caller.user_id,
                owner_id=owner_id,
                role=caller.role.value,
            )
            raise ForbiddenError(message)

    def require_verified_email(self, caller: Caller) -> None:
        """Require a verified email address.

        Raises:
            ForbiddenError: With instructions to verify the email
        """
        if not caller.email_verified:
            logfire.warn("Email not verified", user_id=caller.user_id)
            raise ForbiddenError(EMAIL_NOT_VERIFIED_MESSAGE)

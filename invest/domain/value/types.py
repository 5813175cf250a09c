"""Domain value objects for the investment flow.

Value objects are immutable and defined by their values, not identity.
"""

from enum import Enum

from invest.domain.value.common import ValueObject
from invest.domain.value.identifiers import UserId


class Role(str, Enum):
    """Platform role of an authenticated caller."""

    ADMIN = "admin"
    FUNDRAISER = "fundraiser"
    USER = "user"


class ReservationStatus(str, Enum):
    """Lifecycle status of a share reservation."""

    ACTIVE = "active"
    CANCELLED = "cancelled"
    CONVERTED = "converted"
    EXPIRED = "expired"


class AccreditationStatus(str, Enum):
    """Regulatory investor-qualification state."""

    NOT_CHECKED = "not_checked"
    PENDING = "pending"
    VERIFIED = "verified"
    REJECTED = "rejected"
    EXPIRED = "expired"


class JurisdictionCheck(str, Enum):
    """Result of the investor's jurisdiction check."""

    NOT_CHECKED = "not_checked"
    ALLOWED = "allowed"
    RESTRICTED = "restricted"
    PROHIBITED = "prohibited"


class PaymentMethod(str, Enum):
    """How the investor sent funds."""

    BANK_TRANSFER = "bank_transfer"
    WIRE_TRANSFER = "wire_transfer"
    CREDIT_CARD = "credit_card"
    DEBIT_CARD = "debit_card"
    ACH = "ach"
    CHECK = "check"
    CRYPTO = "crypto"
    OTHER = "other"


class VerificationStatus(str, Enum):
    """Admin verification state of a payment.

    Only PENDING is non-terminal.
    """

    PENDING = "pending"
    VERIFIED = "verified"
    FAILED = "failed"
    REJECTED = "rejected"


class EscrowStatus(str, Enum):
    """Lifecycle status of an escrow account."""

    PENDING_SETUP = "pending_setup"
    ACTIVE = "active"
    RELEASING = "releasing"
    RELEASED = "released"
    CLOSED = "closed"


class Caller(ValueObject):
    """Authenticated identity making a request.

    Supplied by the identity collaborator (JWT claims) and passed explicitly
    to every use case.
    """

    user_id: UserId
    role: Role = Role.USER
    email_verified: bool = False

    @property
    def is_admin(self) -> bool:
        return self.role == Role.ADMIN

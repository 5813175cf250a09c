"""Mappers for converting between database rows and domain models.

Since we're using Pydantic domain models (immutable), we use manual mapping
instead of SQLAlchemy's classical imperative mapping.
"""

from enum import Enum
from typing import Any, Dict
from uuid import UUID

from pydantic import BaseModel

from invest.domain.model import Eligibility, EscrowAccount, Payment, Reservation
from invest.domain.value import (
    AccreditationStatus,
    EligibilityId,
    EscrowAccountId,
    EscrowStatus,
    InvestmentId,
    JurisdictionCheck,
    OfferingId,
    PaymentId,
    PaymentMethod,
    ReservationId,
    ReservationStatus,
    UserId,
    VerificationStatus,
)


def _uuid(value: Any) -> UUID:
    return UUID(value) if isinstance(value, str) else value


def _to_dict(model: BaseModel) -> Dict[str, Any]:
    """Dump a domain model with enums flattened to their stored values."""
    return {
        key: value.value if isinstance(value, Enum) else value
        for key, value in model.model_dump().items()
    }


def row_to_reservation(row: Dict[str, Any]) -> Reservation:
    """Convert database row to Reservation domain model.

    Args:
        row: Database row as dict

    Returns:
        Reservation domain model
    """
    return Reservation(
        id=ReservationId(_uuid(row["id"])),
        offering_id=OfferingId(row["offering_id"]),
        user_id=UserId(row["user_id"]),
        share_quantity=row["share_quantity"],
        status=ReservationStatus(row["status"]),
        expires_at=row["expires_at"],
        reserved_at=row["reserved_at"],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def reservation_to_dict(reservation: Reservation) -> Dict[str, Any]:
    """Convert Reservation domain model to database dict."""
    return _to_dict(reservation)


def row_to_eligibility(row: Dict[str, Any]) -> Eligibility:
    """Convert database row to Eligibility domain model."""
    return Eligibility(
        id=EligibilityId(_uuid(row["id"])),
        user_id=UserId(row["user_id"]),
        offering_id=OfferingId(row["offering_id"]),
        is_eligible=row["is_eligible"],
        accreditation_status=AccreditationStatus(row["accreditation_status"]),
        jurisdiction_check=JurisdictionCheck(row["jurisdiction_check"]),
        investment_limit_cents=row.get("investment_limit_cents"),
        notes=row.get("notes"),
        checked_at=row["checked_at"],
        expires_at=row.get("expires_at"),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def eligibility_to_dict(eligibility: Eligibility) -> Dict[str, Any]:
    """Convert Eligibility domain model to database dict."""
    return _to_dict(eligibility)


def row_to_payment(row: Dict[str, Any]) -> Payment:
    """Convert database row to Payment domain model."""
    verified_by = row.get("verified_by")
    return Payment(
        id=PaymentId(_uuid(row["id"])),
        investment_id=InvestmentId(row["investment_id"]),
        payment_method=PaymentMethod(row["payment_method"]),
        amount_cents=row["amount_cents"],
        payment_reference=row.get("payment_reference"),
        payment_date=row.get("payment_date"),
        receipt_url=row.get("receipt_url"),
        receipt_key=row.get("receipt_key"),
        notes=row.get("notes"),
        verification_status=VerificationStatus(row["verification_status"]),
        verified_by=UserId(verified_by) if verified_by is not None else None,
        verified_at=row.get("verified_at"),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def payment_to_dict(payment: Payment) -> Dict[str, Any]:
    """Convert Payment domain model to database dict."""
    return _to_dict(payment)


def row_to_escrow_account(row: Dict[str, Any]) -> EscrowAccount:
    """Convert database row to EscrowAccount domain model."""
    return EscrowAccount(
        id=EscrowAccountId(_uuid(row["id"])),
        offering_id=OfferingId(row["offering_id"]),
        account_number=row["account_number"],
        account_name=row.get("account_name"),
        bank_name=row.get("bank_name"),
        release_conditions=row.get("release_conditions"),
        notes=row.get("notes"),
        status=EscrowStatus(row["status"]),
        total_held_cents=row["total_held_cents"],
        opened_at=row.get("opened_at"),
        closed_at=row.get("closed_at"),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def escrow_account_to_dict(account: EscrowAccount) -> Dict[str, Any]:
    """Convert EscrowAccount domain model to database dict."""
    return _to_dict(account)

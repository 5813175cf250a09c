"""Unit tests for row/domain mappers."""

from datetime import datetime, timezone
from uuid import uuid4

from invest.domain.model import EscrowAccount, Payment
from invest.domain.value import (
    AccreditationStatus,
    EscrowAccountId,
    EscrowStatus,
    JurisdictionCheck,
    PaymentId,
    PaymentMethod,
    ReservationStatus,
    VerificationStatus,
)
from invest.persistence.mappers import (
    escrow_account_to_dict,
    payment_to_dict,
    row_to_eligibility,
    row_to_escrow_account,
    row_to_payment,
    row_to_reservation,
)

NOW = datetime(2026, 1, 15, 12, 0, tzinfo=timezone.utc)


class TestRowMapping:
    """Tests for rows read back from the database."""

    def test_reservation_row_accepts_string_ids_and_enum_values(self):
        reservation_id = uuid4()
        row = {
            "id": str(reservation_id),
            "offering_id": 10,
            "user_id": 1,
            "share_quantity": 5,
            "status": "converted",
            "expires_at": NOW,
            "reserved_at": NOW,
            "created_at": NOW,
            "updated_at": NOW,
        }

        reservation = row_to_reservation(row)

        assert reservation.id == reservation_id
        assert reservation.status == ReservationStatus.CONVERTED

    def test_eligibility_row_with_optional_columns_missing(self):
        row = {
            "id": uuid4(),
            "user_id": 1,
            "offering_id": 10,
            "is_eligible": True,
            "accreditation_status": "verified",
            "jurisdiction_check": "restricted",
            "checked_at": NOW,
            "expires_at": None,
            "created_at": NOW,
            "updated_at": NOW,
        }

        eligibility = row_to_eligibility(row)

        assert eligibility.accreditation_status == AccreditationStatus.VERIFIED
        assert eligibility.jurisdiction_check == JurisdictionCheck.RESTRICTED
        assert eligibility.investment_limit_cents is None
        assert eligibility.notes is None


class TestDictMapping:
    """Tests for values written to the database."""

    def test_payment_dict_flattens_enums(self):
        payment = Payment(
            id=PaymentId(uuid4()),
            investment_id=7,
            payment_method=PaymentMethod.WIRE_TRANSFER,
            amount_cents=1_000,
        )

        values = payment_to_dict(payment)

        assert values["payment_method"] == "wire_transfer"
        assert values["verification_status"] == "pending"
        assert row_to_payment(values).verification_status == VerificationStatus.PENDING

    def test_escrow_dict_round_trips(self):
        account = EscrowAccount(
            id=EscrowAccountId(uuid4()),
            offering_id=10,
            account_number="ESC-001",
            status=EscrowStatus.ACTIVE,
            total_held_cents=-200,
            opened_at=NOW,
        )

        values = escrow_account_to_dict(account)

        assert values["status"] == "active"
        assert row_to_escrow_account(values) == account

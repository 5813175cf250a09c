"""SQLAlchemy table definitions for the investment flow service.

These table definitions are used with SQLAlchemy Core.
They match the schema defined in Alembic migrations.
"""

from sqlalchemy import (
    BigInteger,
    Boolean,
    CheckConstraint,
    Column,
    Index,
    Integer,
    MetaData,
    String,
    Table,
    Text,
    UniqueConstraint,
)
from sqlalchemy.dialects.postgresql import ENUM, TIMESTAMP, UUID

from invest.domain.value import (
    AccreditationStatus,
    EscrowStatus,
    JurisdictionCheck,
    PaymentMethod,
    ReservationStatus,
    VerificationStatus,
)

# Metadata object for all tables
metadata = MetaData()


def _enum(enum_cls: type, name: str) -> ENUM:
    """Postgres enum column type carrying the values of a domain enum."""
    return ENUM(*[member.value for member in enum_cls], name=name, create_type=False)


# ============================================================================
# RESERVATIONS TABLE
# ============================================================================
reservations_table = Table(
    "reservations",
    metadata,
    Column("id", UUID(as_uuid=True), primary_key=True),
    Column("offering_id", Integer, nullable=False),  # Owned by the offerings service
    Column("user_id", Integer, nullable=False),  # Owned by the identity service
    Column("share_quantity", Integer, nullable=False),
    Column(
        "status",
        _enum(ReservationStatus, "reservation_status"),
        nullable=False,
        server_default="active",
    ),
    Column("expires_at", TIMESTAMP(timezone=True), nullable=False),
    Column(
        "reserved_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    CheckConstraint("share_quantity > 0", name="share_quantity_positive"),
)

Index("idx_reservations_user_id", reservations_table.c.user_id)
Index("idx_reservations_offering_id", reservations_table.c.offering_id)
# Expiry sweep scans active holds by expiry
Index(
    "idx_reservations_status_expires_at",
    reservations_table.c.status,
    reservations_table.c.expires_at,
)

# ============================================================================
# ELIGIBILITY TABLE
# ============================================================================
eligibility_table = Table(
    "investment_eligibility",
    metadata,
    Column("id", UUID(as_uuid=True), primary_key=True),
    Column("user_id", Integer, nullable=False),
    Column("offering_id", Integer, nullable=False),
    Column("is_eligible", Boolean, nullable=False, server_default="false"),
    Column(
        "accreditation_status",
        _enum(AccreditationStatus, "accreditation_status"),
        nullable=False,
        server_default="not_checked",
    ),
    Column(
        "jurisdiction_check",
        _enum(JurisdictionCheck, "jurisdiction_check"),
        nullable=False,
        server_default="not_checked",
    ),
    Column("investment_limit_cents", BigInteger, nullable=True),
    Column("notes", Text, nullable=True),
    Column(
        "checked_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column("expires_at", TIMESTAMP(timezone=True), nullable=True),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    UniqueConstraint("user_id", "offering_id", name="uq_eligibility_user_offering"),
    CheckConstraint(
        "investment_limit_cents IS NULL OR investment_limit_cents >= 0",
        name="investment_limit_non_negative",
    ),
)

Index("idx_eligibility_user_id", eligibility_table.c.user_id)

# ============================================================================
# PAYMENTS TABLE
# ============================================================================
payments_table = Table(
    "payments",
    metadata,
    Column("id", UUID(as_uuid=True), primary_key=True),
    Column("investment_id", Integer, nullable=False),
    Column(
        "payment_method",
        _enum(PaymentMethod, "payment_method"),
        nullable=False,
    ),
    Column("amount_cents", BigInteger, nullable=False),
    Column("payment_reference", String(255), nullable=True),
    Column("payment_date", TIMESTAMP(timezone=True), nullable=True),
    Column("receipt_url", Text, nullable=True),
    Column("receipt_key", String(500), nullable=True),
    Column("notes", Text, nullable=True),
    Column(
        "verification_status",
        _enum(VerificationStatus, "payment_verification_status"),
        nullable=False,
        server_default="pending",
    ),
    Column("verified_by", Integer, nullable=True),
    Column("verified_at", TIMESTAMP(timezone=True), nullable=True),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    CheckConstraint("amount_cents > 0", name="amount_cents_positive"),
)

Index("idx_payments_investment_id", payments_table.c.investment_id)
Index("idx_payments_verification_status", payments_table.c.verification_status)

# ============================================================================
# ESCROW ACCOUNTS TABLE
# ============================================================================
escrow_accounts_table = Table(
    "escrow_accounts",
    metadata,
    Column("id", UUID(as_uuid=True), primary_key=True),
    Column("offering_id", Integer, nullable=False),
    Column("account_number", String(100), nullable=False, unique=True),
    Column("account_name", String(255), nullable=True),
    Column("bank_name", String(255), nullable=True),
    Column("release_conditions", Text, nullable=True),
    Column("notes", Text, nullable=True),
    Column(
        "status",
        _enum(EscrowStatus, "escrow_status"),
        nullable=False,
        server_default="pending_setup",
    ),
    Column("total_held_cents", BigInteger, nullable=False, server_default="0"),
    Column("opened_at", TIMESTAMP(timezone=True), nullable=True),
    Column("closed_at", TIMESTAMP(timezone=True), nullable=True),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index("idx_escrow_accounts_offering_id", escrow_accounts_table.c.offering_id)
Index("idx_escrow_accounts_status", escrow_accounts_table.c.status)

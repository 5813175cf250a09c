"""initial_investment_flow_schema

Create the investment flow schema:
- Reservations (time-boxed share holds)
- Investment eligibility (one record per user and offering)
- Payments (admin-verified funds against an investment)
- Escrow accounts (per-offering holding accounts)

Revision ID: 3f1c9a7d2b64
Revises:
Create Date: 2026-10-18 09:12:44.518203

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql


# revision identifiers, used by Alembic.
revision: str = "3f1c9a7d2b64"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


ENUM_TYPES: dict[str, tuple[str, ...]] = {
    "reservation_status": ("active", "cancelled", "converted", "expired"),
    "accreditation_status": (
        "not_checked",
        "pending",
        "verified",
        "rejected",
        "expired",
    ),
    "jurisdiction_check": ("not_checked", "allowed", "restricted", "prohibited"),
    "payment_method": (
        "bank_transfer",
        "wire_transfer",
        "credit_card",
        "debit_card",
        "ach",
        "check",
        "crypto",
        "other",
    ),
    "payment_verification_status": ("pending", "verified", "failed", "rejected"),
    "escrow_status": ("pending_setup", "active", "releasing", "released", "closed"),
}


def _enum(name: str) -> postgresql.ENUM:
    return postgresql.ENUM(*ENUM_TYPES[name], name=name, create_type=False)


def _timestamps() -> list[sa.Column]:
    return [
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.Column(
            "updated_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
    ]


def upgrade() -> None:
    """Upgrade schema."""
    # Create ENUM types (idempotent)
    for name, values in ENUM_TYPES.items():
        labels = ", ".join(f"'{value}'" for value in values)
        op.execute(f"""
            DO $$ BEGIN
                CREATE TYPE {name} AS ENUM ({labels});
            EXCEPTION
                WHEN duplicate_object THEN null;
            END $$;
        """)

    # ========================================================================
    # RESERVATIONS table
    # ========================================================================
    op.create_table(
        "reservations",
        sa.Column("id", sa.UUID(), nullable=False),
        sa.Column("offering_id", sa.Integer(), nullable=False),
        sa.Column("user_id", sa.Integer(), nullable=False),
        sa.Column("share_quantity", sa.Integer(), nullable=False),
        sa.Column(
            "status",
            _enum("reservation_status"),
            nullable=False,
            server_default="active",
        ),
        sa.Column("expires_at", sa.TIMESTAMP(timezone=True), nullable=False),
        sa.Column(
            "reserved_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
        sa.CheckConstraint("share_quantity > 0", name="share_quantity_positive"),
    )
    op.create_index("idx_reservations_user_id", "reservations", ["user_id"])
    op.create_index("idx_reservations_offering_id", "reservations", ["offering_id"])
    op.create_index(
        "idx_reservations_status_expires_at",
        "reservations",
        ["status", "expires_at"],
    )

    # ========================================================================
    # INVESTMENT_ELIGIBILITY table
    # ========================================================================
    op.create_table(
        "investment_eligibility",
        sa.Column("id", sa.UUID(), nullable=False),
        sa.Column("user_id", sa.Integer(), nullable=False),
        sa.Column("offering_id", sa.Integer(), nullable=False),
        sa.Column("is_eligible", sa.Boolean(), nullable=False, server_default="false"),
        sa.Column(
            "accreditation_status",
            _enum("accreditation_status"),
            nullable=False,
            server_default="not_checked",
        ),
        sa.Column(
            "jurisdiction_check",
            _enum("jurisdiction_check"),
            nullable=False,
            server_default="not_checked",
        ),
        sa.Column("investment_limit_cents", sa.BigInteger(), nullable=True),
        sa.Column("notes", sa.Text(), nullable=True),
        sa.Column(
            "checked_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.Column("expires_at", sa.TIMESTAMP(timezone=True), nullable=True),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint(
            "user_id", "offering_id", name="uq_eligibility_user_offering"
        ),
        sa.CheckConstraint(
            "investment_limit_cents IS NULL OR investment_limit_cents >= 0",
            name="investment_limit_non_negative",
        ),
    )
    op.create_index(
        "idx_eligibility_user_id", "investment_eligibility", ["user_id"]
    )

    # ========================================================================
    # PAYMENTS table
    # ========================================================================
    op.create_table(
        "payments",
        sa.Column("id", sa.UUID(), nullable=False),
        sa.Column("investment_id", sa.Integer(), nullable=False),
        sa.Column("payment_method", _enum("payment_method"), nullable=False),
        sa.Column("amount_cents", sa.BigInteger(), nullable=False),
        sa.Column("payment_reference", sa.String(255), nullable=True),
        sa.Column("payment_date", sa.TIMESTAMP(timezone=True), nullable=True),
        sa.Column("receipt_url", sa.Text(), nullable=True),
        sa.Column("receipt_key", sa.String(500), nullable=True),
        sa.Column("notes", sa.Text(), nullable=True),
        sa.Column(
            "verification_status",
            _enum("payment_verification_status"),
            nullable=False,
            server_default="pending",
        ),
        sa.Column("verified_by", sa.Integer(), nullable=True),
        sa.Column("verified_at", sa.TIMESTAMP(timezone=True), nullable=True),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
        sa.CheckConstraint("amount_cents > 0", name="amount_cents_positive"),
    )
    op.create_index("idx_payments_investment_id", "payments", ["investment_id"])
    op.create_index(
        "idx_payments_verification_status", "payments", ["verification_status"]
    )

    # ========================================================================
    # ESCROW_ACCOUNTS table
    # ========================================================================
    op.create_table(
        "escrow_accounts",
        sa.Column("id", sa.UUID(), nullable=False),
        sa.Column("offering_id", sa.Integer(), nullable=False),
        sa.Column("account_number", sa.String(100), nullable=False),
        sa.Column("account_name", sa.String(255), nullable=True),
        sa.Column("bank_name", sa.String(255), nullable=True),
        sa.Column("release_conditions", sa.Text(), nullable=True),
        sa.Column("notes", sa.Text(), nullable=True),
        sa.Column(
            "status",
            _enum("escrow_status"),
            nullable=False,
            server_default="pending_setup",
        ),
        sa.Column(
            "total_held_cents", sa.BigInteger(), nullable=False, server_default="0"
        ),
        sa.Column("opened_at", sa.TIMESTAMP(timezone=True), nullable=True),
        sa.Column("closed_at", sa.TIMESTAMP(timezone=True), nullable=True),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("account_number"),
    )
    op.create_index(
        "idx_escrow_accounts_offering_id", "escrow_accounts", ["offering_id"]
    )
    op.create_index("idx_escrow_accounts_status", "escrow_accounts", ["status"])


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_table("escrow_accounts")
    op.drop_table("payments")
    op.drop_table("investment_eligibility")
    op.drop_table("reservations")

    for name in reversed(list(ENUM_TYPES)):
        op.execute(f"DROP TYPE IF EXISTS {name}")

"""Unit tests for the EscrowAccount entity."""

from uuid import uuid4

import pytest

from invest.domain.model.escrow_account import EscrowAccount
from invest.domain.value import EscrowAccountId, EscrowStatus


def _account(status: EscrowStatus) -> EscrowAccount:
    return EscrowAccount(
        id=EscrowAccountId(uuid4()),
        offering_id=10,
        account_number="ESC-001",
        status=status,
    )


class TestEscrowLifecycle:
    """Tests for the escrow lifecycle table."""

    @pytest.mark.parametrize(
        ("current", "target"),
        [
            (EscrowStatus.PENDING_SETUP, EscrowStatus.ACTIVE),
            (EscrowStatus.ACTIVE, EscrowStatus.RELEASING),
            (EscrowStatus.RELEASING, EscrowStatus.RELEASED),
            (EscrowStatus.RELEASING, EscrowStatus.ACTIVE),
            (EscrowStatus.RELEASED, EscrowStatus.CLOSED),
            (EscrowStatus.ACTIVE, EscrowStatus.CLOSED),
        ],
    )
    def test_allowed_moves(self, current, target):
        assert _account(current).can_transition_to(target)

    @pytest.mark.parametrize(
        ("current", "target"),
        [
            (EscrowStatus.PENDING_SETUP, EscrowStatus.RELEASED),
            (EscrowStatus.ACTIVE, EscrowStatus.PENDING_SETUP),
            (EscrowStatus.RELEASED, EscrowStatus.ACTIVE),
        ],
    )
    def test_disallowed_moves(self, current, target):
        assert not _account(current).can_transition_to(target)

    def test_closed_is_terminal(self):
        account = _account(EscrowStatus.CLOSED)

        for target in EscrowStatus:
            assert not account.can_transition_to(target)

    def test_new_account_starts_empty_in_setup(self):
        account = EscrowAccount(
            id=EscrowAccountId(uuid4()), offering_id=10, account_number="ESC-002"
        )

        assert account.status == EscrowStatus.PENDING_SETUP
        assert account.total_held_cents == 0
        assert account.opened_at is None

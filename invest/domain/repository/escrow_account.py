"""Escrow account repository interface."""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import Optional

from invest.domain.model.escrow_account import EscrowAccount
from invest.domain.value import EscrowAccountId, EscrowStatus, OfferingId


class EscrowAccountRepository(ABC):
    """Repository for EscrowAccount entity."""

    @abstractmethod
    async def find_by_id(self, account_id: EscrowAccountId) -> Optional[EscrowAccount]:
        """Find an escrow account by ID.

        Args:
            account_id: The account's unique identifier

        Returns:
            The account if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_latest_by_offering(
        self, offering_id: OfferingId
    ) -> Optional[EscrowAccount]:
        """Find the most recently created account for an offering.

        Args:
            offering_id: The offering's ID

        Returns:
            The account if one exists, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_status(self, status: EscrowStatus) -> list[EscrowAccount]:
        """Find accounts with a status, newest first."""
        pass

    @abstractmethod
    async def save(self, account: EscrowAccount) -> EscrowAccount:
        """Save a new escrow account.

        Args:
            account: The account to save

        Returns:
            The saved account

        Raises:
            IntegrityError: If the account number is already in use
        """
        pass

    @abstractmethod
    async def update_status(
        self,
        account_id: EscrowAccountId,
        status: EscrowStatus,
        now: datetime,
        expected_status: Optional[EscrowStatus] = None,
    ) -> Optional[EscrowAccount]:
        """Atomically change an account's status.

        Moving to ``active`` stamps ``opened_at`` if it is not set yet;
        moving to ``closed`` stamps ``closed_at``.

        Args:
            account_id: Account to update
            status: New status
            now: Timestamp for the stamps and updated_at
            expected_status: Required current status, or None for no check

        Returns:
            The updated account, or None if no row matched
        """
        pass

    @abstractmethod
    async def apply_balance_delta(
        self,
        account_id: EscrowAccountId,
        amount_cents: int,
        now: datetime,
        floor_cents: Optional[int] = None,
    ) -> Optional[EscrowAccount]:
        """Atomically add a signed delta to total_held_cents.

        Args:
            account_id: Account to update
            amount_cents: Signed delta (deposit > 0, withdrawal < 0)
            now: Timestamp for updated_at
            floor_cents: Lowest balance the delta may leave, or None for no limit

        Returns:
            The updated account, or None if no row matched (missing account
            or the floor would be crossed)
        """
        pass

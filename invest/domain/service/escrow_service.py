"""Escrow account domain service."""

from typing import Optional
from uuid import uuid4

import logfire
from sqlalchemy.exc import IntegrityError

from invest.config import EscrowSettings
from invest.domain.error import (
    BusinessRuleViolationError,
    InvalidTransitionError,
    NotFoundError,
)
from invest.domain.model.common import utcnow
from invest.domain.model.escrow_account import EscrowAccount
from invest.domain.repository import EscrowAccountRepository
from invest.domain.value import EscrowAccountId, EscrowStatus, OfferingId

from .base import Service


class EscrowService(Service):
    """Domain service for offering escrow accounts."""

    def __init__(
        self,
        escrow_account_repository: EscrowAccountRepository,
        settings: EscrowSettings,
    ) -> None:
        """Initialize escrow service.

        Args:
            escrow_account_repository: Escrow account repository
            settings: Escrow settings
        """
        self.escrow_account_repository = escrow_account_repository
        self.settings = settings

    async def create_account(
        self,
        offering_id: OfferingId,
        account_number: str,
        account_name: Optional[str] = None,
        bank_name: Optional[str] = None,
        release_conditions: Optional[str] = None,
        notes: Optional[str] = None,
    ) -> EscrowAccount:
        """Open an escrow account for an offering.

        The account starts in pending_setup with an empty balance.

        Raises:
            BusinessRuleViolationError: If the account number is already used
        """
        with logfire.span(
            "escrow_service.create_account",
            offering_id=offering_id,
            bank_name=bank_name,
        ):
            now = utcnow()
            account = EscrowAccount(
                id=EscrowAccountId(uuid4()),
                offering_id=offering_id,
                account_number=account_number,
                account_name=account_name,
                bank_name=bank_name,
                release_conditions=release_conditions,
                notes=notes,
                status=EscrowStatus.PENDING_SETUP,
                total_held_cents=0,
                created_at=now,
                updated_at=now,
            )

            try:
                saved = await self.escrow_account_repository.save(account)
            except IntegrityError:
                logfire.warn(
                    "Duplicate escrow account number", offering_id=offering_id
                )
                raise BusinessRuleViolationError(
                    f"Escrow account number already exists: {account_number}"
                )

            logfire.info(
                "Escrow account created",
                escrow_id=str(saved.id),
                offering_id=offering_id,
            )
            return saved

    async def get_account(self, account_id: EscrowAccountId) -> EscrowAccount:
        """Get an escrow account by ID.

        Raises:
            NotFoundError: If the account doesn't exist
        """
        account = await self.escrow_account_repository.find_by_id(account_id)
        if account is None:
            logfire.warn("Escrow account not found", escrow_id=str(account_id))
            raise NotFoundError("Escrow account", str(account_id))
        return account

    async def get_offering_account(
        self, offering_id: OfferingId
    ) -> Optional[EscrowAccount]:
        """Get the primary (most recent) escrow account of an offering."""
        return await self.escrow_account_repository.find_latest_by_offering(
            offering_id
        )

    async def list_active_accounts(self) -> list[EscrowAccount]:
        """List accounts currently in the active status."""
        return await self.escrow_account_repository.find_by_status(EscrowStatus.ACTIVE)

    async def update_status(
        self, account_id: EscrowAccountId, status: EscrowStatus
    ) -> EscrowAccount:
        """Move an escrow account to a new status.

        Without transition enforcement any status may follow any other.

        Raises:
            NotFoundError: If the account doesn't exist
            InvalidTransitionError: If enforcement is on and the move isn't
                part of the escrow lifecycle
        """
        with logfire.span(
            "escrow_service.update_status",
            escrow_id=str(account_id),
            status=status.value,
            enforced=self.settings.enforce_status_transitions,
        ):
            account = await self.get_account(account_id)
            enforce = self.settings.enforce_status_transitions

            if enforce and not account.can_transition_to(status):
                logfire.warn(
                    "Escrow transition rejected",
                    escrow_id=str(account_id),
                    current=account.status.value,
                    target=status.value,
                )
                raise InvalidTransitionError(
                    "escrow account", account.status.value, status.value
                )

            updated = await self.escrow_account_repository.update_status(
                account_id,
                status,
                utcnow(),
                expected_status=account.status if enforce else None,
            )
            if updated is None:
                latest = await self.get_account(account_id)
                raise InvalidTransitionError(
                    "escrow account", latest.status.value, status.value
                )

            logfire.info(
                "Escrow status changed",
                escrow_id=str(account_id),
                previous=account.status.value,
                status=status.value,
            )
            return updated

    async def apply_balance_change(
        self, account_id: EscrowAccountId, amount_cents: int
    ) -> EscrowAccount:
        """Deposit into or withdraw from an escrow account.

        Args:
            account_id: Account to adjust
            amount_cents: Signed delta; positive deposits, negative withdraws,
                zero leaves the balance unchanged

        Returns:
            Account with its new balance

        Raises:
            NotFoundError: If the account doesn't exist
            BusinessRuleViolationError: If negative balances are disallowed
                and the withdrawal exceeds the balance
        """
        with logfire.span(
            "escrow_service.apply_balance_change",
            escrow_id=str(account_id),
            amount_cents=amount_cents,
        ):
            floor = None if self.settings.allow_negative_balance else 0
            updated = await self.escrow_account_repository.apply_balance_delta(
                account_id, amount_cents, utcnow(), floor_cents=floor
            )
            if updated is None:
                account = await self.get_account(account_id)
                logfire.warn(
                    "Escrow withdrawal exceeds balance",
                    escrow_id=str(account_id),
                    amount_cents=amount_cents,
                    total_held_cents=account.total_held_cents,
                )
                raise BusinessRuleViolationError(
                    f"Withdrawal of {-amount_cents} cents exceeds the "
                    f"{account.total_held_cents} cents held in escrow"
                )

            logfire.info(
                "Escrow balance changed",
                escrow_id=str(account_id),
                amount_cents=amount_cents,
                total_held_cents=updated.total_held_cents,
            )
            return updated

"""Escrow account update use cases."""

from uuid import UUID

from pydantic import BaseModel

from invest.application.usecase.base import BaseUseCase
from invest.domain.service import AccessPolicy, Capability, EscrowService
from invest.domain.value import Caller, EscrowAccountId, EscrowStatus


class UpdateEscrowStatusRequest(BaseModel):
    """Request to move an escrow account to a new status."""

    caller: Caller
    escrow_id: UUID
    status: EscrowStatus


class UpdateEscrowStatusResponse(BaseModel):
    """Response after a status change."""

    success: bool = True
    escrow_id: str
    status: EscrowStatus


class UpdateEscrowBalanceRequest(BaseModel):
    """Request to deposit into or withdraw from an escrow account."""

    caller: Caller
    escrow_id: UUID
    amount_cents: int  # Positive deposits, negative withdraws


class UpdateEscrowBalanceResponse(BaseModel):
    """Response after a balance change."""

    success: bool = True
    total_held_cents: int


class UpdateEscrowStatusUseCase(BaseUseCase):
    """Use case for admins changing an escrow account's status."""

    def __init__(self, escrow_service: EscrowService, access_policy: AccessPolicy) -> None:
        """Initialize update escrow status use case.

        Args:
            escrow_service: Escrow domain service
            access_policy: Access policy
        """
        self.escrow_service = escrow_service
        self.access_policy = access_policy

    async def execute(
        self, request: UpdateEscrowStatusRequest
    ) -> UpdateEscrowStatusResponse:
        """Execute status change.

        Raises:
            ForbiddenError: If the caller isn't an admin
            NotFoundError: If the account doesn't exist
            InvalidTransitionError: If lifecycle enforcement rejects the move
        """
        self.access_policy.require(request.caller, Capability.ESCROW_UPDATE_STATUS)

        account = await self.escrow_service.update_status(
            EscrowAccountId(request.escrow_id), request.status
        )
        return UpdateEscrowStatusResponse(
            escrow_id=str(account.id), status=account.status
        )


class UpdateEscrowBalanceUseCase(BaseUseCase):
    """Use case for admins applying a signed balance change."""

    def __init__(self, escrow_service: EscrowService, access_policy: AccessPolicy) -> None:
        self.escrow_service = escrow_service
        self.access_policy = access_policy

    async def execute(
        self, request: UpdateEscrowBalanceRequest
    ) -> UpdateEscrowBalanceResponse:
        """Execute balance change.

        Raises:
            ForbiddenError: If the caller isn't an admin
            NotFoundError: If the account doesn't exist
            BusinessRuleViolationError: If the withdrawal would overdraw a
                non-negative account
        """
        self.access_policy.require(request.caller, Capability.ESCROW_UPDATE_BALANCE)

        account = await self.escrow_service.apply_balance_change(
            EscrowAccountId(request.escrow_id), request.amount_cents
        )
        return UpdateEscrowBalanceResponse(total_held_cents=account.total_held_cents)

"""Escrow account query use cases."""

from uuid import UUID

from pydantic import BaseModel

from invest.application.usecase.base import BaseUseCase
from invest.domain.service import AccessPolicy, Capability, EscrowService
from invest.domain.value import Caller, EscrowAccountId, OfferingId

from .view import EscrowAccountView


class GetEscrowAccountRequest(BaseModel):
    """Request for one escrow account."""

    caller: Caller
    escrow_id: UUID


class GetOfferingEscrowRequest(BaseModel):
    """Request for an offering's escrow account."""

    caller: Caller
    offering_id: int


class GetOfferingEscrowResponse(BaseModel):
    """The offering's newest escrow account, if it has one."""

    escrow_account: EscrowAccountView | None


class GetActiveEscrowAccountsRequest(BaseModel):
    """Request for every active escrow account."""

    caller: Caller


class EscrowAccountListResponse(BaseModel):
    """List of escrow accounts, newest first."""

    escrow_accounts: list[EscrowAccountView]


class GetEscrowAccountUseCase(BaseUseCase):
    """Use case for reading one escrow account."""

    def __init__(self, escrow_service: EscrowService) -> None:
        self.escrow_service = escrow_service

    async def execute(self, request: GetEscrowAccountRequest) -> EscrowAccountView:
        account = await self.escrow_service.get_account(
            EscrowAccountId(request.escrow_id)
        )
        return EscrowAccountView.from_account(account)


class GetOfferingEscrowUseCase(BaseUseCase):
    """Use case for reading an offering's primary escrow account."""

    def __init__(self, escrow_service: EscrowService) -> None:
        self.escrow_service = escrow_service

    async def execute(self, request: GetOfferingEscrowRequest) -> GetOfferingEscrowResponse:
        account = await self.escrow_service.get_offering_account(
            OfferingId(request.offering_id)
        )
        return GetOfferingEscrowResponse(
            escrow_account=EscrowAccountView.from_account(account) if account else None
        )


class GetActiveEscrowAccountsUseCase(BaseUseCase):
    """Use case for listing active escrow accounts (admin only)."""

    def __init__(self, escrow_service: EscrowService, access_policy: AccessPolicy) -> None:
        self.escrow_service = escrow_service
        self.access_policy = access_policy

    async def execute(
        self, request: GetActiveEscrowAccountsRequest
    ) -> EscrowAccountListResponse:
        self.access_policy.require(request.caller, Capability.ESCROW_VIEW_ACTIVE)
        accounts = await self.escrow_service.list_active_accounts()
        return EscrowAccountListResponse(
            escrow_accounts=[EscrowAccountView.from_account(a) for a in accounts]
        )

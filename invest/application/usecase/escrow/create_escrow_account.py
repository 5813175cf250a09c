"""Create escrow account use case."""

from pydantic import BaseModel, Field

from invest.application.usecase.base import BaseUseCase
from invest.domain.service import AccessPolicy, Capability, EscrowService
from invest.domain.value import Caller, OfferingId


class CreateEscrowAccountRequest(BaseModel):
    """Request to open an escrow account for an offering."""

    caller: Caller
    offering_id: int
    account_number: str = Field(min_length=1, max_length=100)
    account_name: str | None = Field(default=None, max_length=255)
    bank_name: str | None = Field(default=None, max_length=255)
    release_conditions: str | None = None
    notes: str | None = None


class CreateEscrowAccountResponse(BaseModel):
    """Response after opening an escrow account."""

    success: bool = True
    escrow_id: str


class CreateEscrowAccountUseCase(BaseUseCase):
    """Use case for admins opening an escrow account."""

    def __init__(self, escrow_service: EscrowService, access_policy: AccessPolicy) -> None:
        """Initialize create escrow account use case.

        Args:
            escrow_service: Escrow domain service
            access_policy: Access policy
        """
        self.escrow_service = escrow_service
        self.access_policy = access_policy

    async def execute(
        self, request: CreateEscrowAccountRequest
    ) -> CreateEscrowAccountResponse:
        """Execute create escrow account flow.

        Raises:
            ForbiddenError: If the caller isn't an admin
            BusinessRuleViolationError: If the account number is taken
        """
        self.access_policy.require(request.caller, Capability.ESCROW_CREATE)

        account = await self.escrow_service.create_account(
            offering_id=OfferingId(request.offering_id),
            account_number=request.account_number,
            account_name=request.account_name,
            bank_name=request.bank_name,
            release_conditions=request.release_conditions,
            notes=request.notes,
        )
        return CreateEscrowAccountResponse(escrow_id=str(account.id))

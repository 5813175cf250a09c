"""Verify payment use case."""

from uuid import UUID

from pydantic import BaseModel, field_validator

from invest.application.usecase.base import BaseUseCase
from invest.domain.service import AccessPolicy, Capability, PaymentService
from invest.domain.value import Caller, PaymentId, VerificationStatus


class VerifyPaymentRequest(BaseModel):
    """Request to record a verification decision."""

    caller: Caller
    payment_id: UUID
    status: VerificationStatus
    notes: str | None = None

    @field_validator("status")
    @classmethod
    def status_must_be_terminal(cls, value: VerificationStatus) -> VerificationStatus:
        if value == VerificationStatus.PENDING:
            raise ValueError("status must be verified, failed or rejected")
        return value


class VerifyPaymentResponse(BaseModel):
    """Response after verification."""

    success: bool = True
    payment_id: str
    verification_status: VerificationStatus


class VerifyPaymentUseCase(BaseUseCase):
    """Use case for admins deciding a pending payment."""

    def __init__(
        self, payment_service: PaymentService, access_policy: AccessPolicy
    ) -> None:
        """Initialize verify payment use case.

        Args:
            payment_service: Payment domain service
            access_policy: Access policy
        """
        self.payment_service = payment_service
        self.access_policy = access_policy

    async def execute(self, request: VerifyPaymentRequest) -> VerifyPaymentResponse:
        """Execute verification.

        Raises:
            ForbiddenError: If the caller isn't an admin
            NotFoundError: If the payment doesn't exist
            InvalidTransitionError: If the payment was already decided
        """
        self.access_policy.require(request.caller, Capability.PAYMENT_VERIFY)

        payment = await self.payment_service.verify_payment(
            payment_id=PaymentId(request.payment_id),
            status=request.status,
            verified_by=request.caller.user_id,
            notes=request.notes,
        )
        return VerifyPaymentResponse(
            payment_id=str(payment.id),
            verification_status=payment.verification_status,
        )

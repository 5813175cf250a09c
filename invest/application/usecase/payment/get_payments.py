"""Payment query use cases."""

from uuid import UUID

from pydantic import BaseModel

from invest.application.usecase.base import BaseUseCase
from invest.config import PaymentSettings
from invest.domain.service import AccessPolicy, Capability, PaymentService
from invest.domain.value import Caller, InvestmentId, PaymentId

from .view import PaymentView


class GetPaymentRequest(BaseModel):
    """Request for a single payment."""

    caller: Caller
    payment_id: UUID


class GetInvestmentPaymentsRequest(BaseModel):
    """Request for an investment's payments."""

    caller: Caller
    investment_id: int


class GetInvestmentPaymentTotalRequest(BaseModel):
    """Request for an investment's verified total."""

    caller: Caller
    investment_id: int


class GetPendingPaymentsRequest(BaseModel):
    """Request for the verification queue."""

    caller: Caller


class PaymentListResponse(BaseModel):
    """List of payments."""

    payments: list[PaymentView]


class PaymentTotalResponse(BaseModel):
    """Sum of verified payments, in cents."""

    total_cents: int


class _PaymentReadUseCase(BaseUseCase):
    """Shared read gate for payment queries."""

    def __init__(
        self,
        payment_service: PaymentService,
        access_policy: AccessPolicy,
        settings: PaymentSettings,
    ) -> None:
        """Initialize payment read use case.

        Args:
            payment_service: Payment domain service
            access_policy: Access policy
            settings: Payment settings (read restriction)
        """
        self.payment_service = payment_service
        self.access_policy = access_policy
        self.settings = settings

    def _authorize_read(self, caller: Caller) -> None:
        if self.settings.restrict_reads_to_admins:
            self.access_policy.require(caller, Capability.PAYMENT_READ_ANY)


class GetPaymentUseCase(_PaymentReadUseCase):
    """Use case for reading one payment."""

    async def execute(self, request: GetPaymentRequest) -> PaymentView:
        """Execute get payment flow.

        Raises:
            ForbiddenError: If reads are restricted and the caller isn't an admin
            NotFoundError: If the payment doesn't exist
        """
        self._authorize_read(request.caller)

        payment = await self.payment_service.get_payment(PaymentId(request.payment_id))
        return PaymentView.from_payment(payment)


class GetInvestmentPaymentsUseCase(_PaymentReadUseCase):
    """Use case for listing an investment's payments, newest first."""

    async def execute(self, request: GetInvestmentPaymentsRequest) -> PaymentListResponse:
        self._authorize_read(request.caller)
        payments = await self.payment_service.list_investment_payments(
            InvestmentId(request.investment_id)
        )
        return PaymentListResponse(payments=[PaymentView.from_payment(p) for p in payments])


class GetInvestmentPaymentTotalUseCase(_PaymentReadUseCase):
    """Use case for an investment's verified payment total."""

    async def execute(
        self, request: GetInvestmentPaymentTotalRequest
    ) -> PaymentTotalResponse:
        self._authorize_read(request.caller)
        total = await self.payment_service.get_verified_total(
            InvestmentId(request.investment_id)
        )
        return PaymentTotalResponse(total_cents=total)


class GetPendingPaymentsUseCase(BaseUseCase):
    """Use case for the admin verification queue, newest first."""

    def __init__(
        self, payment_service: PaymentService, access_policy: AccessPolicy
    ) -> None:
        self.payment_service = payment_service
        self.access_policy = access_policy

    async def execute(self, request: GetPendingPaymentsRequest) -> PaymentListResponse:
        self.access_policy.require(request.caller, Capability.PAYMENT_REVIEW)
        payments = await self.payment_service.list_pending_payments()
        return PaymentListResponse(payments=[PaymentView.from_payment(p) for p in payments])

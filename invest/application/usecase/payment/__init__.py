"""Payment use cases."""

from .create_payment import (
    CreatePaymentRequest,
    CreatePaymentResponse,
    CreatePaymentUseCase,
)
from .get_payments import (
    GetInvestmentPaymentTotalRequest,
    GetInvestmentPaymentTotalUseCase,
    GetInvestmentPaymentsRequest,
    GetInvestmentPaymentsUseCase,
    GetPaymentRequest,
    GetPaymentUseCase,
    GetPendingPaymentsRequest,
    GetPendingPaymentsUseCase,
    PaymentListResponse,
    PaymentTotalResponse,
)
from .verify_payment import (
    VerifyPaymentRequest,
    VerifyPaymentResponse,
    VerifyPaymentUseCase,
)
from .view import PaymentView

__all__ = [
    "CreatePaymentRequest",
    "CreatePaymentResponse",
    "CreatePaymentUseCase",
    "GetInvestmentPaymentTotalRequest",
    "GetInvestmentPaymentTotalUseCase",
    "GetInvestmentPaymentsRequest",
    "GetInvestmentPaymentsUseCase",
    "GetPaymentRequest",
    "GetPaymentUseCase",
    "GetPendingPaymentsRequest",
    "GetPendingPaymentsUseCase",
    "PaymentListResponse",
    "PaymentTotalResponse",
    "PaymentView",
    "VerifyPaymentRequest",
    "VerifyPaymentResponse",
    "VerifyPaymentUseCase",
]

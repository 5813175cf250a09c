"""Escrow account use cases."""

from .create_escrow_account import (
    CreateEscrowAccountRequest,
    CreateEscrowAccountResponse,
    CreateEscrowAccountUseCase,
)
from .get_escrow import (
    EscrowAccountListResponse,
    GetActiveEscrowAccountsRequest,
    GetActiveEscrowAccountsUseCase,
    GetEscrowAccountRequest,
    GetEscrowAccountUseCase,
    GetOfferingEscrowRequest,
    GetOfferingEscrowResponse,
    GetOfferingEscrowUseCase,
)
from .update_escrow import (
    UpdateEscrowBalanceRequest,
    UpdateEscrowBalanceResponse,
    UpdateEscrowBalanceUseCase,
    UpdateEscrowStatusRequest,
    UpdateEscrowStatusResponse,
    UpdateEscrowStatusUseCase,
)
from .view import EscrowAccountView

__all__ = [
    "CreateEscrowAccountRequest",
    "CreateEscrowAccountResponse",
    "CreateEscrowAccountUseCase",
    "EscrowAccountListResponse",
    "EscrowAccountView",
    "GetActiveEscrowAccountsRequest",
    "GetActiveEscrowAccountsUseCase",
    "GetEscrowAccountRequest",
    "GetEscrowAccountUseCase",
    "GetOfferingEscrowRequest",
    "GetOfferingEscrowResponse",
    "GetOfferingEscrowUseCase",
    "UpdateEscrowBalanceRequest",
    "UpdateEscrowBalanceResponse",
    "UpdateEscrowBalanceUseCase",
    "UpdateEscrowStatusRequest",
    "UpdateEscrowStatusResponse",
    "UpdateEscrowStatusUseCase",
]

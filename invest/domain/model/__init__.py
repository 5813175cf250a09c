"""Domain model entities for the investment flow."""

from invest.domain.model.eligibility import Eligibility
from invest.domain.model.escrow_account import ESCROW_TRANSITIONS, EscrowAccount
from invest.domain.model.payment import Payment
from invest.domain.model.reservation import RESERVATION_TRANSITIONS, Reservation

__all__ = [
    "Reservation",
    "Eligibility",
    "Payment",
    "EscrowAccount",
    "RESERVATION_TRANSITIONS",
    "ESCROW_TRANSITIONS",
]

"""Reservation use cases."""

from .create_reservation import (
    CreateReservationRequest,
    CreateReservationResponse,
    CreateReservationUseCase,
)
from .expire_reservations import (
    ExpireReservationsRequest,
    ExpireReservationsResponse,
    ExpireReservationsUseCase,
)
from .get_reservations import (
    GetMyReservationsRequest,
    GetMyReservationsUseCase,
    GetOfferingReservationsRequest,
    GetOfferingReservationsUseCase,
    GetReservationRequest,
    GetReservationUseCase,
    ReservationListResponse,
)
from .update_reservation import (
    CancelReservationRequest,
    CancelReservationUseCase,
    ConvertReservationRequest,
    ConvertReservationUseCase,
    UpdateReservationResponse,
)
from .view import ReservationView

__all__ = [
    "CancelReservationRequest",
    "CancelReservationUseCase",
    "ConvertReservationRequest",
    "ConvertReservationUseCase",
    "CreateReservationRequest",
    "CreateReservationResponse",
    "CreateReservationUseCase",
    "ExpireReservationsRequest",
    "ExpireReservationsResponse",
    "ExpireReservationsUseCase",
    "GetMyReservationsRequest",
    "GetMyReservationsUseCase",
    "GetOfferingReservationsRequest",
    "GetOfferingReservationsUseCase",
    "GetReservationRequest",
    "GetReservationUseCase",
    "ReservationListResponse",
    "ReservationView",
    "UpdateReservationResponse",
]

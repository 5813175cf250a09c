"""Domain layer DI providers."""

from dishka import Scope, provide

from invest.config import (
    AuthSettings,
    EligibilitySettings,
    EscrowSettings,
    ReservationSettings,
)
from invest.domain.repository import (
    EligibilityRepository,
    EscrowAccountRepository,
    PaymentRepository,
    ReservationRepository,
)
from invest.domain.service import (
    AccessPolicy,
    EligibilityService,
    EscrowService,
    JWTService,
    PaymentService,
    ReservationService,
)
from invest.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Each HTTP request gets fresh service instances with their own transaction.
    """

    scope = Scope.REQUEST

    @provide
    def get_jwt_service(self, auth_settings: AuthSettings) -> JWTService:
        """Provide JWT token domain service."""
        return JWTService(auth_settings=auth_settings)

    @provide
    def get_access_policy(self) -> AccessPolicy:
        """Provide access policy."""
        return AccessPolicy()

    @provide
    def get_reservation_service(
        self,
        reservation_repository: ReservationRepository,
        settings: ReservationSettings,
    ) -> ReservationService:
        """Provide reservation domain service."""
        return ReservationService(
            reservation_repository=reservation_repository, settings=settings
        )

    @provide
    def get_eligibility_service(
        self,
        eligibility_repository: EligibilityRepository,
        settings: EligibilitySettings,
    ) -> EligibilityService:
        """Provide eligibility domain service."""
        return EligibilityService(
            eligibility_repository=eligibility_repository, settings=settings
        )

    @provide
    def get_payment_service(
        self, payment_repository: PaymentRepository
    ) -> PaymentService:
        """Provide payment domain service."""
        return PaymentService(payment_repository=payment_repository)

    @provide
    def get_escrow_service(
        self,
        escrow_account_repository: EscrowAccountRepository,
        settings: EscrowSettings,
    ) -> EscrowService:
        """Provide escrow domain service."""
        return EscrowService(
            escrow_account_repository=escrow_account_repository, settings=settings
        )

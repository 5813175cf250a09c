"""Application layer DI providers."""

from dishka import Scope, provide

from invest.application.usecase.eligibility import (
    CheckEligibilityUseCase,
    GetMyEligibilityChecksUseCase,
    GetMyEligibilityUseCase,
    IsEligibleUseCase,
    UpdateUserEligibilityUseCase,
)
from invest.application.usecase.escrow import (
    CreateEscrowAccountUseCase,
    GetActiveEscrowAccountsUseCase,
    GetEscrowAccountUseCase,
    GetOfferingEscrowUseCase,
    UpdateEscrowBalanceUseCase,
    UpdateEscrowStatusUseCase,
)
from invest.application.usecase.payment import (
    CreatePaymentUseCase,
    GetInvestmentPaymentTotalUseCase,
    GetInvestmentPaymentsUseCase,
    GetPaymentUseCase,
    GetPendingPaymentsUseCase,
    VerifyPaymentUseCase,
)
from invest.application.usecase.reservation import (
    CancelReservationUseCase,
    ConvertReservationUseCase,
    CreateReservationUseCase,
    ExpireReservationsUseCase,
    GetMyReservationsUseCase,
    GetOfferingReservationsUseCase,
    GetReservationUseCase,
)
from invest.config import PaymentSettings
from invest.domain.service import (
    AccessPolicy,
    EligibilityService,
    EscrowService,
    PaymentService,
    ReservationService,
)
from invest.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    scope = Scope.REQUEST

    # Reservation use cases
    @provide
    def get_create_reservation_use_case(
        self, reservation_service: ReservationService, access_policy: AccessPolicy
    ) -> CreateReservationUseCase:
        """Provide create reservation use case."""
        return CreateReservationUseCase(
            reservation_service=reservation_service, access_policy=access_policy
        )

    @provide
    def get_get_reservation_use_case(
        self, reservation_service: ReservationService, access_policy: AccessPolicy
    ) -> GetReservationUseCase:
        """Provide get reservation use case."""
        return GetReservationUseCase(
            reservation_service=reservation_service, access_policy=access_policy
        )

    @provide
    def get_get_my_reservations_use_case(
        self, reservation_service: ReservationService
    ) -> GetMyReservationsUseCase:
        """Provide get my reservations use case."""
        return GetMyReservationsUseCase(reservation_service=reservation_service)

    @provide
    def get_get_offering_reservations_use_case(
        self, reservation_service: ReservationService, access_policy: AccessPolicy
    ) -> GetOfferingReservationsUseCase:
        """Provide get offering reservations use case."""
        return GetOfferingReservationsUseCase(
            reservation_service=reservation_service, access_policy=access_policy
        )

    @provide
    def get_cancel_reservation_use_case(
        self, reservation_service: ReservationService, access_policy: AccessPolicy
    ) -> CancelReservationUseCase:
        """Provide cancel reservation use case."""
        return CancelReservationUseCase(
            reservation_service=reservation_service, access_policy=access_policy
        )

    @provide
    def get_convert_reservation_use_case(
        self, reservation_service: ReservationService, access_policy: AccessPolicy
    ) -> ConvertReservationUseCase:
        """Provide convert reservation use case."""
        return ConvertReservationUseCase(
            reservation_service=reservation_service, access_policy=access_policy
        )

    @provide
    def get_expire_reservations_use_case(
        self, reservation_service: ReservationService, access_policy: AccessPolicy
    ) -> ExpireReservationsUseCase:
        """Provide expire reservations use case."""
        return ExpireReservationsUseCase(
            reservation_service=reservation_service, access_policy=access_policy
        )

    # Eligibility use cases
    @provide
    def get_check_eligibility_use_case(
        self, eligibility_service: EligibilityService
    ) -> CheckEligibilityUseCase:
        """Provide check eligibility use case."""
        return CheckEligibilityUseCase(eligibility_service=eligibility_service)

    @provide
    def get_get_my_eligibility_use_case(
        self, eligibility_service: EligibilityService
    ) -> GetMyEligibilityUseCase:
        """Provide get my eligibility use case."""
        return GetMyEligibilityUseCase(eligibility_service=eligibility_service)

    @provide
    def get_is_eligible_use_case(
        self, eligibility_service: EligibilityService
    ) -> IsEligibleUseCase:
        """Provide is eligible use case."""
        return IsEligibleUseCase(eligibility_service=eligibility_service)

    @provide
    def get_get_my_eligibility_checks_use_case(
        self, eligibility_service: EligibilityService
    ) -> GetMyEligibilityChecksUseCase:
        """Provide get my eligibility checks use case."""
        return GetMyEligibilityChecksUseCase(eligibility_service=eligibility_service)

    @provide
    def get_update_user_eligibility_use_case(
        self, eligibility_service: EligibilityService, access_policy: AccessPolicy
    ) -> UpdateUserEligibilityUseCase:
        """Provide update user eligibility use case."""
        return UpdateUserEligibilityUseCase(
            eligibility_service=eligibility_service, access_policy=access_policy
        )

    # Payment use cases
    @provide
    def get_create_payment_use_case(
        self, payment_service: PaymentService
    ) -> CreatePaymentUseCase:
        """Provide create payment use case."""
        return CreatePaymentUseCase(payment_service=payment_service)

    @provide
    def get_get_payment_use_case(
        self,
        payment_service: PaymentService,
        access_policy: AccessPolicy,
        settings: PaymentSettings,
    ) -> GetPaymentUseCase:
        """Provide get payment use case."""
        return GetPaymentUseCase(
            payment_service=payment_service,
            access_policy=access_policy,
            settings=settings,
        )

    @provide
    def get_get_investment_payments_use_case(
        self,
        payment_service: PaymentService,
        access_policy: AccessPolicy,
        settings: PaymentSettings,
    ) -> GetInvestmentPaymentsUseCase:
        """Provide get investment payments use case."""
        return GetInvestmentPaymentsUseCase(
            payment_service=payment_service,
            access_policy=access_policy,
            settings=settings,
        )

    @provide
    def get_get_investment_payment_total_use_case(
        self,
        payment_service: PaymentService,
        access_policy: AccessPolicy,
        settings: PaymentSettings,
    ) -> GetInvestmentPaymentTotalUseCase:
        """Provide get investment payment total use case."""
        return GetInvestmentPaymentTotalUseCase(
            payment_service=payment_service,
            access_policy=access_policy,
            settings=settings,
        )

    @provide
    def get_get_pending_payments_use_case(
        self, payment_service: PaymentService, access_policy: AccessPolicy
    ) -> GetPendingPaymentsUseCase:
        """Provide get pending payments use case."""
        return GetPendingPaymentsUseCase(
            payment_service=payment_service, access_policy=access_policy
        )

    @provide
    def get_verify_payment_use_case(
        self, payment_service: PaymentService, access_policy: AccessPolicy
    ) -> VerifyPaymentUseCase:
        """Provide verify payment use case."""
        return VerifyPaymentUseCase(
            payment_service=payment_service, access_policy=access_policy
        )

    # Escrow use cases
    @provide
    def get_create_escrow_account_use_case(
        self, escrow_service: EscrowService, access_policy: AccessPolicy
    ) -> CreateEscrowAccountUseCase:
        """Provide create escrow account use case."""
        return CreateEscrowAccountUseCase(
            escrow_service=escrow_service, access_policy=access_policy
        )

    @provide
    def get_get_escrow_account_use_case(
        self, escrow_service: EscrowService
    ) -> GetEscrowAccountUseCase:
        """Provide get escrow account use case."""
        return GetEscrowAccountUseCase(escrow_service=escrow_service)

    @provide
    def get_get_offering_escrow_use_case(
        self, escrow_service: EscrowService
    ) -> GetOfferingEscrowUseCase:
        """Provide get offering escrow use case."""
        return GetOfferingEscrowUseCase(escrow_service=escrow_service)

    @provide
    def get_get_active_escrow_accounts_use_case(
        self, escrow_service: EscrowService, access_policy: AccessPolicy
    ) -> GetActiveEscrowAccountsUseCase:
        """Provide get active escrow accounts use case."""
        return GetActiveEscrowAccountsUseCase(
            escrow_service=escrow_service, access_policy=access_policy
        )

    @provide
    def get_update_escrow_status_use_case(
        self, escrow_service: EscrowService, access_policy: AccessPolicy
    ) -> UpdateEscrowStatusUseCase:
        """Provide update escrow status use case."""
        return UpdateEscrowStatusUseCase(
            escrow_service=escrow_service, access_policy=access_policy
        )

    @provide
    def get_update_escrow_balance_use_case(
        self, escrow_service: EscrowService, access_policy: AccessPolicy
    ) -> UpdateEscrowBalanceUseCase:
        """Provide update escrow balance use case."""
        return UpdateEscrowBalanceUseCase(
            escrow_service=escrow_service, access_policy=access_policy
        )

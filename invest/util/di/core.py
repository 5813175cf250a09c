"""Core DI providers (non-mockable)."""

from dishka import Scope, provide

from invest.config import (
    AuthSettings,
    EligibilitySettings,
    EscrowSettings,
    PaymentSettings,
    ReservationSettings,
    Settings,
)
from invest.util.di.base import ProviderBase


class ProdConfigProvider(ProviderBase):
    """Production config provider - concrete, no mocks needed.

    Settings are loaded from environment variables and .env file automatically.
    Each section is provided separately so services depend only on their own.
    """

    scope = Scope.APP

    @provide
    def provide_settings(self) -> Settings:
        """Provide application settings from environment."""
        return Settings()

    @provide
    def provide_auth_settings(self, settings: Settings) -> AuthSettings:
        return settings.auth

    @provide
    def provide_reservation_settings(self, settings: Settings) -> ReservationSettings:
        return settings.reservations

    @provide
    def provide_eligibility_settings(self, settings: Settings) -> EligibilitySettings:
        return settings.eligibility

    @provide
    def provide_payment_settings(self, settings: Settings) -> PaymentSettings:
        return settings.payments

    @provide
    def provide_escrow_settings(self, settings: Settings) -> EscrowSettings:
        return settings.escrow

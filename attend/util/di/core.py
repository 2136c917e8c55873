"""Core DI providers (non-mockable)."""

from dishka import Scope, provide

from attend.config import InvitationSettings, Settings
from attend.domain.value import OfficeReference
from attend.util.di.base import ProviderBase


class ProdConfigProvider(ProviderBase):
    """Production config provider - concrete, no mocks needed.

    Settings are loaded from environment variables and .env file automatically.
    """

    @provide(scope=Scope.APP)
    def provide_settings(self) -> Settings:
        """Provide application settings from environment."""
        return Settings()

    @provide(scope=Scope.APP)
    def provide_invitation_settings(self, settings: Settings) -> InvitationSettings:
        """Provide invitation settings."""
        return settings.invitations

    @provide(scope=Scope.APP)
    def provide_office_reference(self, settings: Settings) -> OfficeReference:
        """Provide the office geofence, built once per process."""
        return settings.office.to_reference()

"""Core DI providers (non-mockable)."""

from dishka import Scope, provide

from board.config import ProfileSettings, Settings, SweeperSettings
from board.util.di.base import ProviderBase


class ProdConfigProvider(ProviderBase):
    """Production config provider - concrete, no mocks needed.

    Settings are loaded from environment variables and .env file automatically.
    """

    @provide(scope=Scope.APP)
    def provide_settings(self) -> Settings:
        """Provide application settings from environment."""
        return Settings()

    @provide(scope=Scope.APP)
    def provide_sweeper_settings(self, settings: Settings) -> SweeperSettings:
        """Provide sweeper settings."""
        return settings.sweeper

    @provide(scope=Scope.APP)
    def provide_profile_settings(self, settings: Settings) -> ProfileSettings:
        """Provide profile validation settings."""
        return settings.profile

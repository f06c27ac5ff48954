"""Core DI providers (non-mockable)."""

from dishka import Scope, provide

from redditclone.config import AuthSettings, Settings, load_settings
from redditclone.util.di.base import ProviderBase


class ProdConfigProvider(ProviderBase):
    """Production config provider - concrete, no mocks needed.

    Settings are loaded once from the environment and the dotenv file
    named by START, then shared for the life of the container.
    """

    @provide(scope=Scope.APP)
    def provide_settings(self) -> Settings:
        """Provide application settings from environment."""
        return load_settings()

    @provide(scope=Scope.APP)
    def provide_auth_settings(self, settings: Settings) -> AuthSettings:
        """Provide immutable auth settings."""
        return settings.auth

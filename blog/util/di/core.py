"""Configuration providers (never mocked)."""

from dishka import Scope, provide

from blog.config import IdentitySettings, Settings
from blog.util.di.base import ProviderBase


class ProdConfigProvider(ProviderBase):
    """Settings for the whole process, read once per container.

    Tests override values through environment variables rather than by
    swapping this provider.
    """

    scope = Scope.APP

    @provide
    def provide_settings(self) -> Settings:
        """Provide application settings from environment and ``.env``."""
        return Settings()

    @provide
    def provide_identity_settings(self, settings: Settings) -> IdentitySettings:
        """Provide the current-user name and identity cookie name."""
        return settings.identity

"""Core DI providers (non-mockable)."""

from dishka import Scope, provide

from artbook.config import AuthSettings, ClientSettings, CommentSettings, Settings
from artbook.util.di.base import ProviderBase
from artbook.util.error import check_settings


class ProdConfigProvider(ProviderBase):
    """Production config provider - concrete, no mocks needed.

    Settings are loaded from environment variables and .env file automatically.
    """

    @provide(scope=Scope.APP)
    def provide_settings(self) -> Settings:
        """Provide application settings from environment."""
        return check_settings(Settings())

    @provide(scope=Scope.APP)
    def provide_auth_settings(self, settings: Settings) -> AuthSettings:
        """Provide auth settings."""
        return settings.auth

    @provide(scope=Scope.APP)
    def provide_comment_settings(self, settings: Settings) -> CommentSettings:
        """Provide comment listing settings."""
        return settings.comments

    @provide(scope=Scope.APP)
    def provide_client_settings(self, settings: Settings) -> ClientSettings:
        """Provide comment API client settings."""
        return settings.client

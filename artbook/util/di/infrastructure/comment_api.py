"""Comment API client providers."""

from dishka import Scope, provide

from artbook.adapter.artbook_api import CommentApiClient, HttpCommentApiClient
from artbook.config import Settings
from artbook.util.di.base import ProviderBase
from artbook.util.observability import instrument_httpx


class CommentApiProvider(ProviderBase):
    """Comment API component base."""

    __mock_component__ = "comment_api"


class ProdCommentApiProvider(CommentApiProvider):
    """Production comment API client over HTTP."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_comment_api_client(self, settings: Settings) -> CommentApiClient:
        """Provide the HTTP comment API client.

        Raises:
            ValueError: If no API base URL is configured
        """
        if not settings.client.base_url:
            raise ValueError("Comment API base URL must be configured")

        instrument_httpx()
        return HttpCommentApiClient(
            base_url=settings.client.base_url,
            auth_token=settings.client.auth_token,
            cookie_name=settings.auth.cookie_name,
            timeout=settings.client.timeout_seconds,
        )

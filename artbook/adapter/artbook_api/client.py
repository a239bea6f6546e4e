"""Comment API client.

Transport used by the client-side comment controller. Responses are parsed
into the same models the API serves, so both sides share one wire shape.
"""

from abc import ABC, abstractmethod
from typing import Any, TypeVar

import httpx
import logfire
from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from artbook.adapter.error import ApiRequestError
from artbook.application.usecase.comment import CommentItem, GetCommentsResponse
from artbook.application.usecase.like import ToggleLikeResponse

ModelT = TypeVar("ModelT", bound=BaseModel)


class CommentApiClient(ABC):
    """Operations the comment controller needs from the server."""

    @abstractmethod
    async def fetch_comments(
        self, slug: str, page: int = 1, limit: int | None = None
    ) -> GetCommentsResponse:
        """Fetch one page of the comment tree."""
        pass

    @abstractmethod
    async def create_comment(
        self, slug: str, content: str, parent_id: str | None = None
    ) -> CommentItem:
        """Create a comment or reply."""
        pass

    @abstractmethod
    async def update_comment(
        self, slug: str, comment_id: str, content: str
    ) -> CommentItem:
        """Edit a comment."""
        pass

    @abstractmethod
    async def delete_comment(self, slug: str, comment_id: str) -> None:
        """Delete a comment."""
        pass

    @abstractmethod
    async def toggle_comment_like(
        self, slug: str, comment_id: str
    ) -> ToggleLikeResponse:
        """Toggle the viewer's like on a comment."""
        pass


class HttpCommentApiClient(CommentApiClient):
    """CommentApiClient over HTTP using httpx.

    The session token is sent as a cookie, the same way a browser does.
    """

    def __init__(
        self,
        base_url: str,
        auth_token: str | None = None,
        cookie_name: str = "auth_token",
        timeout: float = 10.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize client.

        Args:
            base_url: API base URL, e.g. http://localhost:8000
            auth_token: Session token (anonymous when None)
            cookie_name: Cookie carrying the session token
            timeout: Request timeout in seconds
            transport: Custom transport (tests)
        """
        self.base_url = base_url.rstrip("/")
        self.cookies = {cookie_name: auth_token} if auth_token else {}
        self.timeout = timeout
        self.transport = transport

    async def _request(
        self,
        method: str,
        path: str,
        json: dict[str, Any] | None = None,
        params: dict[str, Any] | None = None,
    ) -> httpx.Response:
        """Send a request and return the successful response.

        Raises:
            ApiRequestError: On transport failure or any non-2xx response
        """
        try:
            async with httpx.AsyncClient(
                base_url=self.base_url,
                cookies=self.cookies,
                timeout=self.timeout,
                transport=self.transport,
            ) as client:
                response = await client.request(method, path, json=json, params=params)
        except httpx.HTTPError as e:
            logfire.error("Comment API HTTP error", method=method, path=path, error=str(e))
            raise ApiRequestError(None) from e

        if response.is_success:
            return response

        detail = ""
        try:
            body = response.json()
            if isinstance(body, dict) and isinstance(body.get("detail"), str):
                detail = body["detail"]
        except ValueError:
            pass
        logfire.warn(
            "Comment API request failed",
            method=method,
            path=path,
            status_code=response.status_code,
            detail=detail,
        )
        raise ApiRequestError(response.status_code, detail)

    @staticmethod
    def _parse(
        response: httpx.Response, model: type[ModelT], key: str | None = None
    ) -> ModelT:
        """Decode a successful response into ``model``.

        Args:
            response: Successful response
            model: Expected body model
            key: Envelope key the model sits under, e.g. ``"comment"``

        Raises:
            ApiRequestError: If the body is not JSON or not the expected shape
        """
        try:
            body = response.json()
            if key is not None:
                body = body[key]
            return model.model_validate(body)
        except (ValueError, KeyError, TypeError, PydanticValidationError) as e:
            logfire.error(
                "Unexpected comment API response",
                url=str(response.request.url),
                status_code=response.status_code,
                model=model.__name__,
                error=str(e),
            )
            raise ApiRequestError(response.status_code) from e

    async def fetch_comments(
        self, slug: str, page: int = 1, limit: int | None = None
    ) -> GetCommentsResponse:
        params: dict[str, Any] = {"page": page}
        if limit is not None:
            params["limit"] = limit
        response = await self._request(
            "GET", f"/artbooks/{slug}/comments", params=params
        )
        return self._parse(response, GetCommentsResponse)

    async def create_comment(
        self, slug: str, content: str, parent_id: str | None = None
    ) -> CommentItem:
        payload: dict[str, Any] = {"content": content}
        if parent_id:
            payload["parentId"] = parent_id
        response = await self._request(
            "POST", f"/artbooks/{slug}/comments", json=payload
        )
        return self._parse(response, CommentItem, key="comment")

    async def update_comment(
        self, slug: str, comment_id: str, content: str
    ) -> CommentItem:
        response = await self._request(
            "PUT",
            f"/artbooks/{slug}/comments/{comment_id}",
            json={"content": content},
        )
        return self._parse(response, CommentItem, key="comment")

    async def delete_comment(self, slug: str, comment_id: str) -> None:
        # Any 2xx means the comment is gone; the body is not needed
        await self._request("DELETE", f"/artbooks/{slug}/comments/{comment_id}")

    async def toggle_comment_like(
        self, slug: str, comment_id: str
    ) -> ToggleLikeResponse:
        response = await self._request(
            "POST", f"/artbooks/{slug}/comments/{comment_id}/like"
        )
        return self._parse(response, ToggleLikeResponse)

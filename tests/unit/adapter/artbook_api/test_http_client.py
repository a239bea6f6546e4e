"""Unit tests for HttpCommentApiClient."""

import json

import httpx
import pytest

from artbook.adapter.artbook_api import HttpCommentApiClient
from artbook.adapter.error import ApiRequestError
from tests.di.comment_api import make_item, make_page


def client_for(
    handler, auth_token: str | None = "session-token"
) -> HttpCommentApiClient:
    return HttpCommentApiClient(
        base_url="http://api.test/",
        auth_token=auth_token,
        cookie_name="auth_token",
        transport=httpx.MockTransport(handler),
    )


class TestHttpCommentApiClient:
    """Requests go out in the API's shape, responses come back parsed."""

    @pytest.mark.asyncio
    async def test_fetch_comments_sends_paging_and_parses_tree(self):
        # Arrange
        seen = {}
        reply = make_item("Thanks!", comment_id="r1", parent_id="c1")
        page = make_page(
            [make_item(comment_id="c1", reply_count=1, replies=[reply])]
        )

        def handler(request: httpx.Request) -> httpx.Response:
            seen["url"] = str(request.url)
            seen["cookie"] = request.headers.get("cookie")
            return httpx.Response(
                200, json=page.model_dump(mode="json", by_alias=True)
            )

        # Act
        response = await client_for(handler).fetch_comments(
            "fairy-tale", page=2, limit=5
        )

        # Assert
        assert seen["url"] == (
            "http://api.test/artbooks/fairy-tale/comments?page=2&limit=5"
        )
        assert seen["cookie"] == "auth_token=session-token"
        assert response.comments[0].replies[0].id == "r1"
        assert response.pagination.total == 1

    @pytest.mark.asyncio
    async def test_create_comment_posts_camel_case_body(self):
        seen = {}

        def handler(request: httpx.Request) -> httpx.Response:
            seen["method"] = request.method
            seen["body"] = json.loads(request.content)
            item = make_item("Thanks!", comment_id="r1", parent_id="c1")
            return httpx.Response(
                201, json={"comment": item.model_dump(mode="json", by_alias=True)}
            )

        item = await client_for(handler).create_comment("fairy-tale", "Thanks!", "c1")

        assert seen["method"] == "POST"
        assert seen["body"] == {"content": "Thanks!", "parentId": "c1"}
        assert item.parent_id == "c1"

    @pytest.mark.asyncio
    async def test_error_detail_becomes_message(self):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(
                409, json={"detail": "Cannot delete comment with replies"}
            )

        with pytest.raises(ApiRequestError) as exc_info:
            await client_for(handler).delete_comment("fairy-tale", "c1")

        assert exc_info.value.status_code == 409
        assert exc_info.value.message == "Cannot delete comment with replies"

    @pytest.mark.asyncio
    async def test_error_without_json_has_empty_message(self):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(502, text="Bad Gateway")

        with pytest.raises(ApiRequestError) as exc_info:
            await client_for(handler).toggle_comment_like("fairy-tale", "c1")

        assert exc_info.value.status_code == 502
        assert exc_info.value.message == ""

    @pytest.mark.asyncio
    async def test_transport_failure_has_no_status(self):
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        with pytest.raises(ApiRequestError) as exc_info:
            await client_for(handler).update_comment("fairy-tale", "c1", "Edited")

        assert exc_info.value.status_code is None

    @pytest.mark.asyncio
    async def test_anonymous_client_sends_no_cookie(self):
        seen = {}

        def handler(request: httpx.Request) -> httpx.Response:
            seen["cookie"] = request.headers.get("cookie")
            return httpx.Response(
                200, json=make_page([]).model_dump(mode="json", by_alias=True)
            )

        await client_for(handler, auth_token=None).fetch_comments("fairy-tale")

        assert seen["cookie"] is None

    @pytest.mark.asyncio
    async def test_non_json_success_body_is_a_request_error(self):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, text="<html>proxy</html>")

        with pytest.raises(ApiRequestError) as exc_info:
            await client_for(handler).create_comment("fairy-tale", "Nice!")

        assert exc_info.value.status_code == 200
        assert exc_info.value.message == ""

    @pytest.mark.asyncio
    async def test_missing_envelope_is_a_request_error(self):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, json={"success": True})

        with pytest.raises(ApiRequestError):
            await client_for(handler).update_comment("fairy-tale", "c1", "Edited")

    @pytest.mark.asyncio
    async def test_wrong_shape_is_a_request_error(self):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, json={"liked": "maybe"})

        with pytest.raises(ApiRequestError):
            await client_for(handler).toggle_comment_like("fairy-tale", "c1")

    @pytest.mark.asyncio
    async def test_delete_ignores_body(self):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(204)

        assert await client_for(handler).delete_comment("fairy-tale", "c1") is None

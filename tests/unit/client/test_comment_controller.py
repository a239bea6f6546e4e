"""Unit tests for the optimistic comment state controller."""

from datetime import datetime

import httpx
import pytest
import pytest_asyncio

from artbook.adapter.artbook_api import CommentApiClient, HttpCommentApiClient
from artbook.adapter.error import ApiRequestError
from artbook.application.usecase.comment import CommentAuthorItem
from artbook.application.usecase.like import ToggleLikeResponse
from artbook.client import CommentStateController, Notifier
from artbook.client.model import TEMP_ID_PREFIX, CommentNode, new_temp_id
from tests.di import build_test_client_container
from tests.di.comment_api import make_item, make_page


class RecordingNotifier(Notifier):
    """Keeps every message for assertions."""

    def __init__(self) -> None:
        self.messages: list[str] = []

    def error(self, message: str) -> None:
        self.messages.append(message)


@pytest_asyncio.fixture
async def api():
    """Scripted API client resolved through the client container."""
    container = build_test_client_container()
    yield await container.get(CommentApiClient)
    await container.close()


@pytest.fixture
def notifier():
    return RecordingNotifier()


@pytest.fixture
def controller(api, notifier):
    return CommentStateController(
        api,
        slug="fairy-tale",
        notifier=notifier,
        viewer=CommentAuthorItem(id="user-1", name="Alice"),
    )


async def load_tree(api, controller, *items, total=None):
    api.queue("fetch_comments", make_page(list(items), total=total))
    await controller.load()


class TestLoading:
    """Tests for loading pages into the tree."""

    @pytest.mark.asyncio
    async def test_first_page_replaces_tree(self, api, controller):
        # Arrange
        reply = make_item("Thanks!", parent_id="c1")
        await load_tree(api, controller, make_item("Old", comment_id="old"))
        api.queue(
            "fetch_comments",
            make_page([make_item("Nice!", comment_id="c1", reply_count=1, replies=[reply])]),
        )

        # Act
        await controller.load(1)

        # Assert
        assert [n.id for n in controller.state.comments] == ["c1"]
        assert controller.state.comments[0].replies[0].content == "Thanks!"
        assert controller.total_comments == 2
        assert controller.state.loading is False

    @pytest.mark.asyncio
    async def test_load_more_appends_without_duplicates(self, api, controller):
        # Arrange
        api.queue(
            "fetch_comments",
            make_page([make_item(comment_id="a"), make_item(comment_id="b")], limit=2, total=3),
            make_page(
                [make_item(comment_id="b"), make_item(comment_id="c")],
                page=2,
                limit=2,
                total=3,
            ),
        )
        await controller.load()
        assert controller.state.has_more is True

        # Act
        await controller.load_more()

        # Assert
        assert [n.id for n in controller.state.comments] == ["a", "b", "c"]
        assert controller.state.page == 2
        assert controller.state.has_more is False

    @pytest.mark.asyncio
    async def test_load_more_without_next_page_does_nothing(self, api, controller):
        await load_tree(api, controller, make_item(comment_id="a"))

        await controller.load_more()

        assert [call[0] for call in api.calls] == ["fetch_comments"]

    @pytest.mark.asyncio
    async def test_load_failure_uses_fallback_message(self, api, controller, notifier):
        api.queue("fetch_comments", ApiRequestError(None))

        await controller.load()

        assert notifier.messages == ["Failed to load comments"]
        assert controller.state.loading is False

    @pytest.mark.asyncio
    async def test_listeners_see_changes_until_unsubscribed(self, api, controller):
        seen = []
        unsubscribe = controller.subscribe(lambda state: seen.append(state.loading))

        await load_tree(api, controller, make_item())
        unsubscribe()
        await load_tree(api, controller, make_item())

        assert seen == [True, False]


class TestFind:
    """Tests for node lookup."""

    @pytest.mark.asyncio
    async def test_deepest_reply_is_found_under_later_thread(self, api, controller):
        deepest = make_item(comment_id="d2", parent_id="d1")
        middle = make_item(comment_id="d1", parent_id="c2", replies=[deepest])
        await load_tree(
            api,
            controller,
            make_item(comment_id="c1"),
            make_item(comment_id="c2", replies=[middle]),
        )

        assert controller.find("d2").parent_id == "d1"
        assert controller.find("c1").id == "c1"

    @pytest.mark.asyncio
    async def test_lookup_stops_at_maximum_depth(self, api, controller):
        too_deep = make_item(comment_id="d3", parent_id="d2")
        deepest = make_item(comment_id="d2", parent_id="d1", replies=[too_deep])
        middle = make_item(comment_id="d1", parent_id="c1", replies=[deepest])
        await load_tree(api, controller, make_item(comment_id="c1", replies=[middle]))

        assert controller.find("d2") is not None
        assert controller.find("d3") is None


class TestSubmit:
    """Tests for optimistic comment creation."""

    @pytest.mark.asyncio
    async def test_top_level_placeholder_then_server_comment(self, api, controller):
        # Arrange
        await load_tree(api, controller, make_item("Older", comment_id="c1"), total=1)
        during = {}

        def inspect(operation):
            first = controller.state.comments[0]
            during.update(
                id=first.id,
                pending=first.pending,
                content=first.content,
                total=controller.total_comments,
                pending_count=controller.pending_count,
            )

        api.on_call = inspect
        api.queue("create_comment", make_item("Nice!", comment_id="server-1"))

        # Act
        node = await controller.submit("  <b>Nice!</b> ")

        # Assert
        assert during["id"].startswith(TEMP_ID_PREFIX)
        assert during["pending"] is True
        assert during["content"] == "Nice!"
        assert during["total"] == 2
        assert during["pending_count"] == 1
        assert node.id == "server-1"
        assert node.pending is False
        assert [n.id for n in controller.state.comments] == ["server-1", "c1"]
        assert controller.state.total_top_level == 2
        assert controller.pending_count == 0

    @pytest.mark.asyncio
    async def test_reply_goes_last_under_parent(self, api, controller):
        existing = make_item("First reply", comment_id="r1", parent_id="c1")
        await load_tree(
            api,
            controller,
            make_item(comment_id="c1", reply_count=1, replies=[existing]),
        )
        api.queue(
            "create_comment", make_item("Second reply", comment_id="r2", parent_id="c1")
        )

        await controller.submit("Second reply", parent_id="c1")

        parent = controller.find("c1")
        assert [r.id for r in parent.replies] == ["r1", "r2"]
        assert parent.reply_count == 2
        assert controller.total_comments == 3

    @pytest.mark.asyncio
    async def test_failed_reply_rolls_back(self, api, controller, notifier):
        # Arrange
        await load_tree(api, controller, make_item(comment_id="c1"))
        api.queue(
            "create_comment",
            ApiRequestError(409, "Maximum nesting depth of 2 exceeded"),
        )

        # Act
        node = await controller.submit("Too deep", parent_id="c1")

        # Assert
        assert node is None
        parent = controller.find("c1")
        assert parent.replies == []
        assert parent.reply_count == 0
        assert controller.total_comments == 1
        assert notifier.messages == ["Maximum nesting depth of 2 exceeded"]

    @pytest.mark.asyncio
    async def test_failed_top_level_submit_uses_fallback(self, api, controller, notifier):
        await load_tree(api, controller, make_item(comment_id="c1"), total=1)
        api.queue("create_comment", ApiRequestError(None))

        await controller.submit("Hello")

        assert [n.id for n in controller.state.comments] == ["c1"]
        assert controller.state.total_top_level == 1
        assert notifier.messages == ["Failed to post comment"]

    @pytest.mark.asyncio
    async def test_unknown_parent_sends_nothing(self, api, controller, notifier):
        await load_tree(api, controller, make_item(comment_id="c1"))

        assert await controller.submit("Hi", parent_id="missing") is None

        assert notifier.messages == ["Comment not found"]
        assert [call[0] for call in api.calls] == ["fetch_comments"]


class TestToggleLike:
    """Tests for optimistic likes."""

    @pytest.mark.asyncio
    async def test_nested_reply_like_is_optimistic_then_confirmed(self, api, controller):
        # Arrange
        reply = make_item("Thanks!", comment_id="r1", parent_id="c1", like_count=2)
        await load_tree(
            api, controller, make_item(comment_id="c1", reply_count=1, replies=[reply])
        )
        during = {}
        api.on_call = lambda op: during.update(
            liked=controller.find("r1").viewer_liked,
            count=controller.find("r1").like_count,
        )
        api.queue(
            "toggle_comment_like",
            ToggleLikeResponse(liked=True, like_count=5, message="Comment liked"),
        )

        # Act
        await controller.toggle_like("r1")

        # Assert
        assert during == {"liked": True, "count": 3}
        node = controller.find("r1")
        assert (node.viewer_liked, node.like_count) == (True, 5)
        assert controller.pending_count == 0

    @pytest.mark.asyncio
    async def test_failed_like_restores_snapshot(self, api, controller, notifier):
        await load_tree(
            api, controller, make_item(comment_id="c1", like_count=4, viewer_liked=True)
        )
        api.queue("toggle_comment_like", ApiRequestError(500))

        await controller.toggle_like("c1")

        node = controller.find("c1")
        assert (node.viewer_liked, node.like_count) == (True, 4)
        assert notifier.messages == ["Failed to update like"]

    @pytest.mark.asyncio
    async def test_response_for_vanished_comment_is_ignored(self, api, controller, notifier):
        # Arrange
        await load_tree(api, controller, make_item(comment_id="c1"))

        def drop_tree(operation):
            controller.state.comments.clear()

        api.on_call = drop_tree
        api.queue(
            "toggle_comment_like",
            ToggleLikeResponse(liked=True, like_count=1, message="Comment liked"),
        )

        # Act
        await controller.toggle_like("c1")

        # Assert
        assert controller.state.comments == []
        assert notifier.messages == []
        assert controller.pending_count == 0

    @pytest.mark.asyncio
    async def test_pending_placeholder_cannot_be_liked(self, api, controller):
        await load_tree(api, controller)
        placeholder = CommentNode(
            id=new_temp_id(),
            content="Sending...",
            author=CommentAuthorItem(id="user-1", name="Alice"),
            created_at=datetime.now(),
            updated_at=datetime.now(),
            pending=True,
        )
        controller.state.comments.append(placeholder)

        await controller.toggle_like(placeholder.id)

        assert placeholder.like_count == 0
        assert [call[0] for call in api.calls] == ["fetch_comments"]


class TestEditAndDelete:
    """Tests for optimistic edits and deletes."""

    @pytest.mark.asyncio
    async def test_failed_edit_restores_content(self, api, controller, notifier):
        await load_tree(api, controller, make_item("Original", comment_id="c1"))
        api.queue("update_comment", ApiRequestError(403, "Not authorized to edit this comment"))

        await controller.edit("c1", "Changed")

        assert controller.find("c1").content == "Original"
        assert notifier.messages == ["Not authorized to edit this comment"]

    @pytest.mark.asyncio
    async def test_edit_takes_server_version(self, api, controller):
        await load_tree(api, controller, make_item("Original", comment_id="c1"))
        api.queue("update_comment", make_item("Edited", comment_id="c1"))

        await controller.edit("c1", "Edited ")

        assert controller.find("c1").content == "Edited"

    @pytest.mark.asyncio
    async def test_failed_delete_puts_comment_back_in_place(self, api, controller, notifier):
        # Arrange
        await load_tree(
            api,
            controller,
            make_item(comment_id="a"),
            make_item(comment_id="b"),
            make_item(comment_id="c"),
            total=3,
        )
        during = {}
        api.on_call = lambda op: during.update(
            ids=[n.id for n in controller.state.comments]
        )
        api.queue("delete_comment", ApiRequestError(409, "Cannot delete comment with replies"))

        # Act
        await controller.delete("b")

        # Assert
        assert during["ids"] == ["a", "c"]
        assert [n.id for n in controller.state.comments] == ["a", "b", "c"]
        assert controller.state.total_top_level == 3
        assert notifier.messages == ["Cannot delete comment with replies"]

    @pytest.mark.asyncio
    async def test_deleting_reply_updates_parent_count(self, api, controller):
        reply = make_item(comment_id="r1", parent_id="c1")
        await load_tree(
            api, controller, make_item(comment_id="c1", reply_count=1, replies=[reply])
        )
        api.queue("delete_comment", None)

        await controller.delete("r1")

        parent = controller.find("c1")
        assert parent.replies == []
        assert parent.reply_count == 0
        assert controller.total_comments == 1


class TestMalformedServerResponses:
    """A 2xx response the client cannot read counts as a failed request."""

    @staticmethod
    def http_controller(notifier) -> CommentStateController:
        page = make_page([make_item("Nice!", comment_id="c1", like_count=2)])

        def handler(request: httpx.Request) -> httpx.Response:
            if request.method == "GET":
                return httpx.Response(
                    200, json=page.model_dump(mode="json", by_alias=True)
                )
            return httpx.Response(200, text="<html>proxy</html>")

        api = HttpCommentApiClient(
            base_url="http://api.test",
            auth_token="session-token",
            transport=httpx.MockTransport(handler),
        )
        return CommentStateController(
            api,
            slug="fairy-tale",
            notifier=notifier,
            viewer=CommentAuthorItem(id="user-1", name="Alice"),
        )

    @pytest.mark.asyncio
    async def test_submit_removes_placeholder_and_notifies(self, notifier):
        controller = self.http_controller(notifier)
        await controller.load()

        result = await controller.submit("Lovely!")

        assert result is None
        assert [node.id for node in controller.state.comments] == ["c1"]
        assert controller.pending_count == 0
        assert controller.state.total_top_level == 1
        assert notifier.messages == ["Failed to post comment"]

    @pytest.mark.asyncio
    async def test_like_is_rolled_back_and_notified(self, notifier):
        controller = self.http_controller(notifier)
        await controller.load()

        await controller.toggle_like("c1")

        node = controller.find("c1")
        assert (node.viewer_liked, node.like_count) == (False, 2)
        assert controller.pending_count == 0
        assert notifier.messages == ["Failed to update like"]

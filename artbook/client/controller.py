"""Client-side comment state controller.

Owns the comment tree of one artbook page and applies every user action
in two phases: the tree changes immediately (optimistic), the request is
sent, and the response either reconciles the change with the server's
version or rolls it back from a snapshot. Each in-flight action is tracked
by a correlation id, so actions on different comments never interfere, and
a response for a comment that is no longer in the tree is ignored.
"""

from collections.abc import Callable
from datetime import datetime

import logfire

from artbook.adapter.artbook_api import CommentApiClient
from artbook.adapter.error import ApiRequestError
from artbook.application.usecase.comment import CommentAuthorItem
from artbook.domain.model.comment import MAX_COMMENT_DEPTH
from artbook.domain.service.sanitizer import sanitize

from .model import (
    CommentNode,
    CommentTreeState,
    PendingMutation,
    new_temp_id,
)
from .notifier import Notifier

Listener = Callable[[CommentTreeState], None]

LOAD_FAILED = "Failed to load comments"
SUBMIT_FAILED = "Failed to post comment"
LIKE_FAILED = "Failed to update like"
EDIT_FAILED = "Failed to update comment"
DELETE_FAILED = "Failed to delete comment"


class CommentStateController:
    """Optimistic comment tree for one artbook."""

    def __init__(
        self,
        api: CommentApiClient,
        slug: str,
        notifier: Notifier,
        viewer: CommentAuthorItem | None = None,
        page_size: int = 10,
    ) -> None:
        """Initialize controller.

        Args:
            api: Transport to the comment API
            slug: Artbook whose comments are shown
            notifier: Where failures are surfaced
            viewer: Signed-in user, shown as author of optimistic comments
            page_size: Top-level comments per page
        """
        self.api = api
        self.slug = slug
        self.notifier = notifier
        self.viewer = viewer
        self.state = CommentTreeState(limit=page_size)
        self._listeners: list[Listener] = []
        self._pending: dict[str, PendingMutation] = {}

    # Listeners

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Call ``listener`` after every tree change. Returns an unsubscribe."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _emit(self) -> None:
        for listener in list(self._listeners):
            listener(self.state)

    @property
    def total_comments(self) -> int:
        return self.state.total_comments

    @property
    def pending_count(self) -> int:
        return len(self._pending)

    # Lookup

    def _locate(
        self, comment_id: str
    ) -> tuple[list[CommentNode], int, CommentNode | None] | None:
        """Find a node as (siblings, index, parent).

        Depth-first, descending at most MAX_COMMENT_DEPTH levels below the
        top level.
        """
        return self._search(self.state.comments, None, comment_id, 0)

    def _search(
        self,
        siblings: list[CommentNode],
        parent: CommentNode | None,
        comment_id: str,
        depth: int,
    ) -> tuple[list[CommentNode], int, CommentNode | None] | None:
        for index, node in enumerate(siblings):
            if node.id == comment_id:
                return siblings, index, parent
            if node.replies and depth < MAX_COMMENT_DEPTH:
                found = self._search(node.replies, node, comment_id, depth + 1)
                if found is not None:
                    return found
        return None

    def find(self, comment_id: str) -> CommentNode | None:
        """Find a node anywhere in the tree."""
        located = self._locate(comment_id)
        if located is None:
            return None
        siblings, index, _ = located
        return siblings[index]

    def _begin(self, mutation: PendingMutation) -> PendingMutation:
        self._pending[mutation.correlation_id] = mutation
        return mutation

    def _finish(self, correlation_id: str) -> PendingMutation | None:
        return self._pending.pop(correlation_id, None)

    def _fail(self, error: ApiRequestError, fallback: str) -> None:
        self.notifier.error(error.message or fallback)

    # Loading

    async def load(self, page: int = 1) -> None:
        """Fetch a page. Page 1 replaces the tree, later pages extend it."""
        self.state.loading = True
        self._emit()
        try:
            response = await self.api.fetch_comments(
                self.slug, page=page, limit=self.state.limit
            )
        except ApiRequestError as e:
            self.state.loading = False
            self._emit()
            self._fail(e, LOAD_FAILED)
            return

        nodes = [CommentNode.from_item(item) for item in response.comments]
        if page == 1:
            self.state.comments = nodes
        else:
            # Comments added since page 1 shift offsets; skip ones already shown
            known = {node.id for node in self.state.comments}
            self.state.comments.extend(n for n in nodes if n.id not in known)

        pagination = response.pagination
        self.state.page = pagination.page
        self.state.limit = pagination.limit
        self.state.total_top_level = pagination.total
        self.state.has_more = pagination.has_next
        self.state.loading = False
        logfire.debug(
            "Comments loaded",
            slug=self.slug,
            page=pagination.page,
            count=len(nodes),
        )
        self._emit()

    async def load_more(self) -> None:
        """Fetch the next page, if there is one."""
        if self.state.has_more and not self.state.loading:
            await self.load(self.state.page + 1)

    # Mutations

    async def submit(
        self, content: str, parent_id: str | None = None
    ) -> CommentNode | None:
        """Post a comment, or a reply when ``parent_id`` is given.

        A placeholder is shown right away: new top-level comments go first
        (newest first), replies go last under their parent (oldest first).

        Returns:
            The confirmed node, or None if the request failed
        """
        parent = None
        if parent_id is not None:
            parent = self.find(parent_id)
            if parent is None:
                self.notifier.error("Comment not found")
                return None

        now = datetime.now()
        placeholder = CommentNode(
            id=new_temp_id(),
            parent_id=parent_id,
            content=sanitize(content),
            author=self.viewer or CommentAuthorItem(id="", name=""),
            created_at=now,
            updated_at=now,
            pending=True,
        )
        if parent is None:
            self.state.comments.insert(0, placeholder)
            self.state.total_top_level += 1
        else:
            parent.replies.append(placeholder)
            parent.reply_count += 1
        mutation = self._begin(
            PendingMutation(kind="submit", node_id=placeholder.id, parent_id=parent_id)
        )
        self._emit()

        try:
            item = await self.api.create_comment(self.slug, content, parent_id)
        except ApiRequestError as e:
            self._finish(mutation.correlation_id)
            located = self._locate(placeholder.id)
            if located is not None:
                siblings, index, owner = located
                siblings.pop(index)
                if owner is not None:
                    owner.reply_count = max(0, owner.reply_count - 1)
                else:
                    self.state.total_top_level = max(
                        0, self.state.total_top_level - 1
                    )
                self._emit()
            self._fail(e, SUBMIT_FAILED)
            return None

        self._finish(mutation.correlation_id)
        node = self.find(placeholder.id)
        if node is None:
            logfire.debug("Placeholder gone before confirmation", temp_id=placeholder.id)
            return None
        node.apply_server(item)
        self._emit()
        return node

    async def toggle_like(self, comment_id: str) -> None:
        """Flip the viewer's like, then settle on the server's answer."""
        node = self.find(comment_id)
        if node is None or node.pending:
            return

        mutation = self._begin(
            PendingMutation(
                kind="like",
                node_id=comment_id,
                snapshot={
                    "viewer_liked": node.viewer_liked,
                    "like_count": node.like_count,
                },
            )
        )
        node.viewer_liked = not node.viewer_liked
        node.like_count = max(0, node.like_count + (1 if node.viewer_liked else -1))
        self._emit()

        try:
            response = await self.api.toggle_comment_like(self.slug, comment_id)
        except ApiRequestError as e:
            self._finish(mutation.correlation_id)
            current = self.find(comment_id)
            if current is not None:
                current.viewer_liked = mutation.snapshot["viewer_liked"]
                current.like_count = mutation.snapshot["like_count"]
                self._emit()
            self._fail(e, LIKE_FAILED)
            return

        self._finish(mutation.correlation_id)
        current = self.find(comment_id)
        if current is None:
            return
        current.viewer_liked = response.liked
        current.like_count = response.like_count
        self._emit()

    async def edit(self, comment_id: str, content: str) -> None:
        """Replace a comment's content, restoring it if the server refuses."""
        node = self.find(comment_id)
        if node is None or node.pending:
            return

        mutation = self._begin(
            PendingMutation(
                kind="edit",
                node_id=comment_id,
                snapshot={"content": node.content, "updated_at": node.updated_at},
            )
        )
        node.content = sanitize(content)
        node.updated_at = datetime.now()
        self._emit()

        try:
            item = await self.api.update_comment(self.slug, comment_id, content)
        except ApiRequestError as e:
            self._finish(mutation.correlation_id)
            current = self.find(comment_id)
            if current is not None:
                current.content = mutation.snapshot["content"]
                current.updated_at = mutation.snapshot["updated_at"]
                self._emit()
            self._fail(e, EDIT_FAILED)
            return

        self._finish(mutation.correlation_id)
        current = self.find(comment_id)
        if current is None:
            return
        current.apply_server(item)
        self._emit()

    async def delete(self, comment_id: str) -> None:
        """Remove a comment; put it back where it was if the server refuses."""
        located = self._locate(comment_id)
        if located is None:
            return
        siblings, index, parent = located
        node = siblings[index]
        if node.pending:
            return

        mutation = self._begin(
            PendingMutation(
                kind="delete",
                node_id=comment_id,
                parent_id=parent.id if parent else None,
                snapshot={"node": node, "index": index},
            )
        )
        siblings.pop(index)
        if parent is not None:
            parent.reply_count = max(0, parent.reply_count - 1)
        else:
            self.state.total_top_level = max(0, self.state.total_top_level - 1)
        self._emit()

        try:
            await self.api.delete_comment(self.slug, comment_id)
        except ApiRequestError as e:
            self._finish(mutation.correlation_id)
            self._restore_deleted(mutation)
            self._fail(e, DELETE_FAILED)
            return

        self._finish(mutation.correlation_id)

    def _restore_deleted(self, mutation: PendingMutation) -> None:
        node: CommentNode = mutation.snapshot["node"]
        index: int = mutation.snapshot["index"]
        if mutation.parent_id is None:
            siblings = self.state.comments
            self.state.total_top_level += 1
        else:
            parent = self.find(mutation.parent_id)
            if parent is None:
                return
            siblings = parent.replies
            parent.reply_count += 1
        siblings.insert(min(index, len(siblings)), node)
        self._emit()

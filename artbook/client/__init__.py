"""Client-side comment state."""

from .controller import CommentStateController
from .model import CommentNode, CommentTreeState, PendingMutation
from .notifier import LogfireNotifier, Notifier

__all__ = [
    "CommentNode",
    "CommentStateController",
    "CommentTreeState",
    "LogfireNotifier",
    "Notifier",
    "PendingMutation",
]

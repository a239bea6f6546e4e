"""User-facing notifications from the comment controller."""

from abc import ABC, abstractmethod

import logfire


class Notifier(ABC):
    """Surface for error toasts and similar messages."""

    @abstractmethod
    def error(self, message: str) -> None:
        pass


class LogfireNotifier(Notifier):
    """Notifier for headless clients: messages go to the log."""

    def error(self, message: str) -> None:
        logfire.warn("Comment action failed", message=message)

import logging
from typing import Protocol

logger = logging.getLogger(__name__)


class Notifier(Protocol):
    """User-facing side channel (toasts); separate from raised errors."""

    def error(self, message: str) -> None: ...


class LoggingNotifier:
    def error(self, message: str) -> None:
        logger.warning("Notify user: %s", message)


class CollectingNotifier:
    def __init__(self) -> None:
        self.messages: list[str] = []

    def error(self, message: str) -> None:
        self.messages.append(message)

    def clear(self) -> None:
        self.messages.clear()

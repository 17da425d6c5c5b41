"""
Rest-complete notifications.

Delivery is best-effort: the rest timer logs and ignores any failure.
"""

import logging
from typing import Callable, Protocol

logger = logging.getLogger(__name__)

REST_COMPLETE_TITLE = "Rest complete!"
REST_COMPLETE_BODY = "Time to continue your workout"


class Notifier(Protocol):
    def notify(self, title: str, body: str) -> None:
        ...


class LoggingNotifier:
    """Default notifier: writes the notification to the log."""

    def notify(self, title: str, body: str) -> None:
        logger.info(f"{title} {body}")


class CallbackNotifier:
    """Adapts a plain ``callback(title, body)`` to the Notifier protocol."""

    def __init__(self, callback: Callable[[str, str], None]):
        self._callback = callback

    def notify(self, title: str, body: str) -> None:
        self._callback(title, body)

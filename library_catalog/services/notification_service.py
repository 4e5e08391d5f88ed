"""
Notification channels used for loan and return confirmations.

A channel delivers a text message to a recipient identifier. The catalog
treats delivery as fire-and-forget, so each channel decides for itself how
to handle its own failures.
"""

import logging
from abc import ABC, abstractmethod
from typing import Optional

from rich.console import Console
from rich.markup import escape

logger = logging.getLogger(__name__)


class NotificationChannel(ABC):
    """Delivers a message to a specific recipient."""

    @abstractmethod
    def send_notification(self, recipient_id: str, message: str) -> None:
        """Attempt to deliver ``message`` to ``recipient_id``."""


class ConsoleNotificationChannel(NotificationChannel):
    """Prints an operator-facing line in place of sending an email."""

    def __init__(self, console: Optional[Console] = None) -> None:
        self.console = console or Console()

    def send_notification(self, recipient_id: str, message: str) -> None:
        self.console.print(f"[cyan]✉️  Sending email to {escape(recipient_id)}:[/] {escape(message)}")


class LoggingNotificationChannel(NotificationChannel):
    """Writes each notification to the application log."""

    def __init__(self, level: int = logging.INFO) -> None:
        self.level = level

    def send_notification(self, recipient_id: str, message: str) -> None:
        logger.log(self.level, "Notification for %s: %s", recipient_id, message)


CHANNELS = {
    "console": ConsoleNotificationChannel,
    "log": LoggingNotificationChannel,
}


def build_notification_channel(kind: str, console: Optional[Console] = None) -> NotificationChannel:
    """Create a channel by its configured name ('console' or 'log')."""
    key = (kind or "").lower().strip()
    if key not in CHANNELS:
        raise ValueError(f"Unknown notification channel: {kind!r}. Expected one of: {', '.join(CHANNELS)}")
    if key == "console":
        return ConsoleNotificationChannel(console)
    return CHANNELS[key]()

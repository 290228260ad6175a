"""Notification surface.

Fire-and-forget transient messages shown to the user. Notifications are
kept in memory so a front end (or a test) can read them back.
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Protocol

import structlog

logger = structlog.get_logger()


class NotificationLevel(str, Enum):
    """Severity of a notification."""

    INFO = "info"
    SUCCESS = "success"
    WARNING = "warning"
    ERROR = "error"


@dataclass(frozen=True)
class Notification:
    """A single user-visible message."""

    level: NotificationLevel
    message: str
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))


class Notifier(Protocol):
    """What the catalog view needs from a notification surface."""

    def info(self, message: str) -> None: ...

    def error(self, message: str) -> None: ...


class NotificationCenter:
    """In-memory notification surface."""

    def __init__(self) -> None:
        self._notifications: list[Notification] = []

    def notify(self, level: NotificationLevel, message: str) -> Notification:
        """Record and log a notification."""
        notification = Notification(level=level, message=message)
        self._notifications.append(notification)
        logger.info("Notification", level=level.value, message=message)
        return notification

    def info(self, message: str) -> None:
        self.notify(NotificationLevel.INFO, message)

    def success(self, message: str) -> None:
        self.notify(NotificationLevel.SUCCESS, message)

    def warning(self, message: str) -> None:
        self.notify(NotificationLevel.WARNING, message)

    def error(self, message: str) -> None:
        self.notify(NotificationLevel.ERROR, message)

    @property
    def notifications(self) -> list[Notification]:
        """All notifications in the order they were raised."""
        return list(self._notifications)

    def messages(self, level: NotificationLevel | None = None) -> list[str]:
        """Message texts, optionally restricted to one level."""
        return [
            n.message
            for n in self._notifications
            if level is None or n.level == level
        ]

    def drain(self) -> list[Notification]:
        """Return and forget all notifications."""
        drained = self._notifications
        self._notifications = []
        return drained

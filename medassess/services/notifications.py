"""Notification channel for user-visible operation outcomes.

Services report failures here in addition to raising typed errors, so
tests can assert on the raised error without depending on this channel.
"""

import logging
from abc import ABC, abstractmethod
from collections import deque

from medassess.core.logging import get_logger
from medassess.schemas.notification import Notification, NotificationLevel
from medassess.utils.time import utc_now


class Notifier(ABC):
    """Abstract sink for success/error notifications."""

    @abstractmethod
    def notify(self, notification: Notification) -> None:
        pass

    def success(
        self,
        message: str,
        action: str | None = None,
        entity: str | None = None,
        entity_id: int | None = None,
    ) -> None:
        self.notify(
            Notification(
                level=NotificationLevel.SUCCESS,
                message=message,
                action=action,
                entity=entity,
                entity_id=entity_id,
                created_at=utc_now(),
            )
        )

    def error(
        self,
        message: str,
        action: str | None = None,
        entity: str | None = None,
        entity_id: int | None = None,
    ) -> None:
        self.notify(
            Notification(
                level=NotificationLevel.ERROR,
                message=message,
                action=action,
                entity=entity,
                entity_id=entity_id,
                created_at=utc_now(),
            )
        )


class LoggingNotifier(Notifier):
    """Writes notifications to the application log."""

    def __init__(self) -> None:
        self.logger = get_logger("notifications")

    def notify(self, notification: Notification) -> None:
        level = (
            logging.INFO
            if notification.level == NotificationLevel.SUCCESS
            else logging.WARNING
        )
        self.logger.log(level, f"[{notification.level.value}] {notification.message}")


class NotificationFeed(LoggingNotifier):
    """Logs notifications and keeps the most recent ones for display."""

    def __init__(self, maxlen: int = 50) -> None:
        super().__init__()
        self._items: deque[Notification] = deque(maxlen=maxlen)

    def notify(self, notification: Notification) -> None:
        super().notify(notification)
        self._items.append(notification)

    def recent(self, limit: int | None = None) -> list[Notification]:
        """Return notifications newest first."""
        items = list(reversed(self._items))
        return items[:limit] if limit is not None else items

    def clear(self) -> None:
        self._items.clear()

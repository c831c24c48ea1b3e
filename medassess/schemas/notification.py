"""Notification schemas."""

from datetime import datetime
from enum import Enum

from pydantic import BaseModel


class NotificationLevel(str, Enum):
    """Notification outcome."""

    SUCCESS = "success"
    ERROR = "error"


class Notification(BaseModel):
    """A transient user-visible message about an operation outcome."""

    level: NotificationLevel
    message: str
    action: str | None = None
    entity: str | None = None
    entity_id: int | None = None
    created_at: datetime

"""Recent operation outcome notifications."""

from fastapi import APIRouter, Query

from medassess.api.deps import Notifications
from medassess.schemas.notification import Notification

router = APIRouter()


@router.get("", response_model=list[Notification])
async def list_notifications(
    feed: Notifications,
    limit: int | None = Query(None, ge=1),
) -> list[Notification]:
    """Most recent notifications, newest first."""
    return feed.recent(limit)

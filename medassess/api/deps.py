"""FastAPI dependency injection utilities.

Record clients are built per request from an injected record service, so
tests can swap in an in-memory store via ``app.dependency_overrides``.
"""

from typing import Annotated

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from medassess.db.session import get_db
from medassess.services.assessments import AssessmentService
from medassess.services.library import ProtocolService, ReferenceService
from medassess.services.notifications import NotificationFeed
from medassess.store.base import RecordService
from medassess.store.sql import SqlRecordService


async def get_record_service(
    session: Annotated[AsyncSession, Depends(get_db)],
) -> RecordService:
    """Record service for the current request."""
    return SqlRecordService(session)


def get_notifier(request: Request) -> NotificationFeed:
    """Application-wide notification feed."""
    return request.app.state.notification_feed


RecordStore = Annotated[RecordService, Depends(get_record_service)]
Notifications = Annotated[NotificationFeed, Depends(get_notifier)]


def get_assessment_service(records: RecordStore, notifier: Notifications) -> AssessmentService:
    return AssessmentService(records, notifier)


def get_protocol_service(records: RecordStore, notifier: Notifications) -> ProtocolService:
    return ProtocolService(records, notifier)


def get_reference_service(records: RecordStore, notifier: Notifications) -> ReferenceService:
    return ReferenceService(records, notifier)


Assessments = Annotated[AssessmentService, Depends(get_assessment_service)]
Protocols = Annotated[ProtocolService, Depends(get_protocol_service)]
References = Annotated[ReferenceService, Depends(get_reference_service)]

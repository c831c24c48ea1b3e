"""Record service boundary: the external store the application proxies to."""

from medassess.store.base import RecordResult, RecordService, RecordServiceError, TABLES
from medassess.store.memory import InMemoryRecordService
from medassess.store.sql import SqlRecordService

__all__ = [
    "TABLES",
    "RecordResult",
    "RecordService",
    "RecordServiceError",
    "InMemoryRecordService",
    "SqlRecordService",
]

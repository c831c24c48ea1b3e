"""Shared plumbing for the typed record clients."""

from abc import ABC, abstractmethod
from collections.abc import Awaitable, Callable
from typing import Any, Generic, NoReturn, TypeVar

from medassess.core.exceptions import (
    MedAssessError,
    NotFoundError,
    PartialWriteFailure,
    ServiceError,
)
from medassess.core.logging import activity_logger
from medassess.services.notifications import LoggingNotifier, Notifier
from medassess.store.base import RecordResult, RecordService, RecordServiceError

T = TypeVar("T")
R = TypeVar("R")


class RecordClient(ABC, Generic[T]):
    """Typed façade over one table of a record service.

    Every failure is raised as a typed error and also reported to the
    notifier.
    """

    table: str
    entity: str

    def __init__(self, records: RecordService, notifier: Notifier | None = None) -> None:
        self.records = records
        self.notifier = notifier or LoggingNotifier()

    @abstractmethod
    def normalize(self, raw: dict[str, Any]) -> T:
        """Build a typed record from a raw store record."""
        pass

    def _fail(
        self,
        error: MedAssessError,
        action: str,
        message: str,
        entity_id: int | None = None,
    ) -> NoReturn:
        self.notifier.error(message, action=action, entity=self.entity, entity_id=entity_id)
        activity_logger.log(
            action=action,
            entity=self.entity,
            entity_id=entity_id,
            outcome="failure",
            metadata={"error": error.message},
        )
        raise error

    def _succeed(self, action: str, message: str, entity_id: int | None = None) -> None:
        self.notifier.success(message, action=action, entity=self.entity, entity_id=entity_id)
        activity_logger.log(action=action, entity=self.entity, entity_id=entity_id)

    async def _call(
        self,
        operation: Callable[[], Awaitable[R]],
        action: str,
        message: str,
        entity_id: int | None = None,
    ) -> R:
        """Run a record service call, turning store failures into ServiceError."""
        try:
            return await operation()
        except RecordServiceError as exc:
            self._fail(ServiceError(str(exc) or message), action, message, entity_id)

    def _normalize_all(self, raws: list[dict[str, Any]], action: str, message: str) -> list[T]:
        try:
            return [self.normalize(raw) for raw in raws]
        except ServiceError as exc:
            self._fail(exc, action, message)

    async def _fetch_all(self, action: str, message: str) -> list[T]:
        raws = await self._call(lambda: self.records.fetch_records(self.table), action, message)
        return self._normalize_all(raws, action, message)

    async def _fetch_one(self, record_id: int, action: str, message: str) -> T:
        raw = await self._call(
            lambda: self.records.get_record_by_id(self.table, record_id),
            action,
            message,
            record_id,
        )
        if raw is None:
            self._fail(
                NotFoundError(self.entity, record_id),
                action,
                f"{self.entity.capitalize()} not found",
                record_id,
            )
        try:
            return self.normalize(raw)
        except ServiceError as exc:
            self._fail(exc, action, message, record_id)

    def _check_write(
        self,
        results: list[RecordResult],
        action: str,
        message: str,
        entity_id: int | None = None,
        success_message: str | None = None,
    ) -> list[RecordResult]:
        """Classify per-record results of a write call.

        Returns the successful results when nothing was rejected. On a
        partial failure the accepted records are reported with
        success_message before the error is raised.

        Raises:
            NotFoundError: Nothing succeeded and the store reported no match
            ServiceError: Nothing succeeded
            PartialWriteFailure: Some records succeeded, some were rejected
        """
        succeeded = [result for result in results if result.success]
        failed = [result for result in results if not result.success]

        if not failed:
            return succeeded

        if not succeeded:
            if all(result.not_found for result in failed):
                self._fail(NotFoundError(self.entity, entity_id), action, message, entity_id)
            self._fail(
                ServiceError(failed[0].message or message),
                action,
                message,
                entity_id,
            )

        saved = [self.normalize(result.record) for result in succeeded if result.record]
        if success_message:
            for result in succeeded:
                self._succeed(action, success_message, result.record_id)
        self._fail(
            PartialWriteFailure(
                saved=saved,
                failures=[result.message or "Record rejected" for result in failed],
            ),
            action,
            message,
            entity_id,
        )

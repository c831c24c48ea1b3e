"""In-memory record service used in tests and local demos."""

import copy
from collections.abc import Callable
from typing import Any

from medassess.store.base import (
    TABLES,
    RecordResult,
    RecordService,
    RecordServiceError,
    check_table,
)


class InMemoryRecordService(RecordService):
    """Dict-backed record service with failure injection.

    Records are deep-copied in and out so callers never share state with
    the store.
    """

    def __init__(self, seed: dict[str, list[dict[str, Any]]] | None = None) -> None:
        self._tables: dict[str, dict[int, dict[str, Any]]] = {table: {} for table in TABLES}
        self._next_id: dict[str, int] = {table: 1 for table in TABLES}
        self.calls: list[tuple[str, str]] = []
        self.reject_when: Callable[[dict[str, Any]], bool] | None = None
        self._fail_next: str | None = None

        for table, records in (seed or {}).items():
            check_table(table)
            for record in records:
                record = copy.deepcopy(record)
                record_id = record.get("id") or self._next_id[table]
                record["id"] = record_id
                self._tables[table][record_id] = record
                self._next_id[table] = max(self._next_id[table], record_id + 1)

    def fail_next(self, message: str = "Record service unavailable") -> None:
        """Make the next call raise RecordServiceError."""
        self._fail_next = message

    def calls_to(self, operation: str) -> int:
        return sum(1 for op, _ in self.calls if op == operation)

    def _enter(self, operation: str, table: str) -> None:
        check_table(table)
        self.calls.append((operation, table))
        if self._fail_next is not None:
            message, self._fail_next = self._fail_next, None
            raise RecordServiceError(message)

    def _rejected(self, record: dict[str, Any]) -> bool:
        return self.reject_when is not None and self.reject_when(record)

    async def fetch_records(self, table: str) -> list[dict[str, Any]]:
        self._enter("fetch", table)
        return [copy.deepcopy(record) for record in self._tables[table].values()]

    async def get_record_by_id(self, table: str, record_id: int) -> dict[str, Any] | None:
        self._enter("get", table)
        record = self._tables[table].get(record_id)
        return copy.deepcopy(record) if record is not None else None

    async def create_records(
        self, table: str, records: list[dict[str, Any]]
    ) -> list[RecordResult]:
        self._enter("create", table)
        results = []
        for record in records:
            if self._rejected(record):
                results.append(RecordResult(success=False, message="Record rejected"))
                continue
            stored = copy.deepcopy(record)
            stored["id"] = self._next_id[table]
            self._next_id[table] += 1
            self._tables[table][stored["id"]] = stored
            results.append(
                RecordResult(success=True, record_id=stored["id"], record=copy.deepcopy(stored))
            )
        return results

    async def update_records(
        self, table: str, records: list[dict[str, Any]]
    ) -> list[RecordResult]:
        self._enter("update", table)
        results = []
        for record in records:
            record_id = record.get("id")
            existing = self._tables[table].get(record_id)
            if existing is None:
                results.append(
                    RecordResult(
                        success=False,
                        record_id=record_id,
                        message="Record not found",
                        not_found=True,
                    )
                )
                continue
            if self._rejected(record):
                results.append(
                    RecordResult(success=False, record_id=record_id, message="Record rejected")
                )
                continue
            existing.update(copy.deepcopy(record))
            results.append(
                RecordResult(success=True, record_id=record_id, record=copy.deepcopy(existing))
            )
        return results

    async def delete_records(self, table: str, record_ids: list[int]) -> list[RecordResult]:
        self._enter("delete", table)
        results = []
        for record_id in record_ids:
            if self._tables[table].pop(record_id, None) is None:
                results.append(
                    RecordResult(
                        success=False,
                        record_id=record_id,
                        message="Record not found",
                        not_found=True,
                    )
                )
            else:
                results.append(RecordResult(success=True, record_id=record_id))
        return results

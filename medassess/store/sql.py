"""SQLAlchemy-backed record service."""

import logging
from datetime import datetime
from typing import Any

from sqlalchemy import DateTime, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from medassess.db.base import Base
from medassess.models.records import TABLE_MODELS
from medassess.store.base import (
    RecordResult,
    RecordService,
    RecordServiceError,
    check_table,
)
from medassess.utils.time import format_datetime, parse_datetime

logger = logging.getLogger(__name__)


def _model(table: str) -> type[Base]:
    check_table(table)
    return TABLE_MODELS[table]


def _to_record(row: Base) -> dict[str, Any]:
    """Serialize a row to a raw wire record (datetimes as ISO strings)."""
    record: dict[str, Any] = {}
    for column in row.__table__.columns:
        value = getattr(row, column.key)
        if isinstance(value, datetime):
            value = format_datetime(value)
        record[column.key] = value
    return record


def _to_values(model: type[Base], record: dict[str, Any]) -> dict[str, Any]:
    """Map a raw wire record onto column values, dropping unknown keys and the id."""
    values: dict[str, Any] = {}
    for column in model.__table__.columns:
        if column.key == "id" or column.key not in record:
            continue
        value = record[column.key]
        if value is None and column.default is not None:
            continue
        if isinstance(column.type, DateTime) and isinstance(value, str):
            value = parse_datetime(value)
        values[column.key] = value
    return values


def _missing_required(model: type[Base], values: dict[str, Any]) -> list[str]:
    return [
        column.key
        for column in model.__table__.columns
        if not column.nullable
        and not column.primary_key
        and column.default is None
        and values.get(column.key) is None
    ]


class SqlRecordService(RecordService):
    """Record service over an async SQLAlchemy session.

    Records failing NOT NULL constraints are rejected individually; the
    remaining records of the batch are still written. Database errors
    roll back the whole call and raise RecordServiceError.
    """

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def fetch_records(self, table: str) -> list[dict[str, Any]]:
        model = _model(table)
        try:
            result = await self.session.execute(select(model).order_by(model.id))
        except SQLAlchemyError as exc:
            logger.error(f"Failed to fetch {table} records: {exc}")
            raise RecordServiceError(f"Failed to fetch {table} records") from exc
        return [_to_record(row) for row in result.scalars().all()]

    async def get_record_by_id(self, table: str, record_id: int) -> dict[str, Any] | None:
        model = _model(table)
        try:
            row = await self._get(model, record_id)
        except SQLAlchemyError as exc:
            logger.error(f"Failed to fetch {table} {record_id}: {exc}")
            raise RecordServiceError(f"Failed to fetch {table} record") from exc
        return _to_record(row) if row is not None else None

    async def create_records(
        self, table: str, records: list[dict[str, Any]]
    ) -> list[RecordResult]:
        model = _model(table)
        results: list[RecordResult] = []
        rows: list[tuple[int, Base]] = []

        for record in records:
            values = _to_values(model, record)
            missing = _missing_required(model, values)
            if missing:
                results.append(
                    RecordResult(
                        success=False,
                        message=f"Missing required fields: {', '.join(missing)}",
                    )
                )
                continue
            row = model(**values)
            self.session.add(row)
            rows.append((len(results), row))
            results.append(RecordResult(success=True))

        await self._commit(f"create {table} records")

        for index, row in rows:
            await self.session.refresh(row)
            results[index].record_id = row.id
            results[index].record = _to_record(row)

        return results

    async def update_records(
        self, table: str, records: list[dict[str, Any]]
    ) -> list[RecordResult]:
        model = _model(table)
        results: list[RecordResult] = []
        rows: list[tuple[int, Base]] = []

        for record in records:
            record_id = record.get("id")
            row = await self._get(model, record_id) if record_id is not None else None
            if row is None:
                results.append(
                    RecordResult(
                        success=False,
                        record_id=record_id,
                        message="Record not found",
                        not_found=True,
                    )
                )
                continue

            values = _to_values(model, record)
            merged = {
                column.key: values.get(column.key, getattr(row, column.key))
                for column in model.__table__.columns
            }
            missing = _missing_required(model, merged)
            if missing:
                results.append(
                    RecordResult(
                        success=False,
                        record_id=record_id,
                        message=f"Missing required fields: {', '.join(missing)}",
                    )
                )
                continue
            for key, value in values.items():
                setattr(row, key, value)
            rows.append((len(results), row))
            results.append(RecordResult(success=True, record_id=record_id))

        await self._commit(f"update {table} records")

        for index, row in rows:
            await self.session.refresh(row)
            results[index].record = _to_record(row)

        return results

    async def delete_records(self, table: str, record_ids: list[int]) -> list[RecordResult]:
        model = _model(table)
        results: list[RecordResult] = []

        for record_id in record_ids:
            row = await self._get(model, record_id)
            if row is None:
                results.append(
                    RecordResult(
                        success=False,
                        record_id=record_id,
                        message="Record not found",
                        not_found=True,
                    )
                )
                continue
            await self.session.delete(row)
            results.append(RecordResult(success=True, record_id=record_id))

        await self._commit(f"delete {table} records")
        return results

    async def _commit(self, action: str) -> None:
        try:
            await self.session.commit()
        except SQLAlchemyError as exc:
            await self.session.rollback()
            logger.error(f"Failed to {action}: {exc}")
            raise RecordServiceError(f"Failed to {action}") from exc

    async def _get(self, model: type[Base], record_id: int) -> Base | None:
        try:
            return await self.session.get(model, record_id)
        except SQLAlchemyError as exc:
            await self.session.rollback()
            logger.error(f"Failed to load {model.__tablename__} {record_id}: {exc}")
            raise RecordServiceError(f"Failed to load {model.__tablename__} record") from exc

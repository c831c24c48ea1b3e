"""Abstract record service.

The record service is the sole source of truth for assessments, protocols
and references. Implementations speak raw dict records; typing and
normalization happen in the client services.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any

TABLES = ("assessment", "protocol", "reference")


class RecordServiceError(Exception):
    """A record service call failed as a whole."""

    pass


@dataclass
class RecordResult:
    """Per-record outcome of a write call."""

    success: bool
    record_id: int | None = None
    record: dict[str, Any] | None = None
    message: str | None = None
    not_found: bool = False


class RecordService(ABC):
    """Abstract base class for record services."""

    @abstractmethod
    async def fetch_records(self, table: str) -> list[dict[str, Any]]:
        """Fetch every record in a table.

        Raises:
            RecordServiceError: If the fetch fails
        """
        pass

    @abstractmethod
    async def get_record_by_id(self, table: str, record_id: int) -> dict[str, Any] | None:
        """Fetch a single record, or None if no record has that id.

        Raises:
            RecordServiceError: If the fetch fails
        """
        pass

    @abstractmethod
    async def create_records(
        self, table: str, records: list[dict[str, Any]]
    ) -> list[RecordResult]:
        """Create records; ids are assigned by the service.

        Returns:
            One result per submitted record, in order
        """
        pass

    @abstractmethod
    async def update_records(
        self, table: str, records: list[dict[str, Any]]
    ) -> list[RecordResult]:
        """Update records; each record must carry its ``id``.

        Returns:
            One result per submitted record, in order. Unknown ids come
            back with ``not_found=True``.
        """
        pass

    @abstractmethod
    async def delete_records(self, table: str, record_ids: list[int]) -> list[RecordResult]:
        """Delete records by id.

        Returns:
            One result per id, in order
        """
        pass


def check_table(table: str) -> None:
    if table not in TABLES:
        raise RecordServiceError(f"Unknown table: {table}")

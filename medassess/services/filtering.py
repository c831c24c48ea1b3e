"""Client-side filtering and sorting of in-memory collections.

All functions are pure: they return new lists and never mutate their
input. Items may be pydantic models, plain objects or dicts.
"""

from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from enum import Enum
from typing import Any, TypeVar

T = TypeVar("T")

ALL = "All"


def field_value(item: Any, field: str) -> Any:
    """Read a field from a dict or an object; enums yield their value."""
    value = item.get(field) if isinstance(item, dict) else getattr(item, field, None)
    if isinstance(value, Enum):
        return value.value
    return value


def _bucket(item: Any, field: str) -> str:
    value = field_value(item, field)
    return "" if value is None else str(value)


def matches_query(item: Any, query: str, search_fields: Iterable[str]) -> bool:
    """Case-insensitive substring match against any of the search fields."""
    needle = query.lower()
    for field in search_fields:
        value = field_value(item, field)
        if value is not None and needle in str(value).lower():
            return True
    return False


def filter_items(
    items: Sequence[T],
    query: str = "",
    search_fields: Sequence[str] = (),
    category_field: str | None = None,
    category_value: str = ALL,
) -> list[T]:
    """Derive the displayed subset of a collection.

    Args:
        items: Full collection
        query: Free-text query; empty keeps everything
        search_fields: Fields the query is matched against
        category_field: Field compared against category_value
        category_value: Exact, case-sensitive category; "All" keeps everything

    Returns:
        New list of matching items, in input order
    """
    filtered = list(items)

    if query:
        filtered = [item for item in filtered if matches_query(item, query, search_fields)]

    if category_field is not None and category_value != ALL:
        filtered = [item for item in filtered if _bucket(item, category_field) == category_value]

    return filtered


def category_options(items: Iterable[Any], field: str) -> list[str]:
    """Return ["All"] followed by each distinct value in first-seen order."""
    return [ALL, *category_counts(items, field)]


def category_counts(items: Iterable[Any], field: str) -> dict[str, int]:
    """Count items per category value, keys in first-seen order.

    Missing values are counted under the "" bucket.
    """
    counts: dict[str, int] = {}
    for item in items:
        key = _bucket(item, field)
        counts[key] = counts.get(key, 0) + 1
    return counts


def _sort_key(value: Any) -> Any:
    return value.casefold() if isinstance(value, str) else value


def sort_by(items: Iterable[T], field: str, descending: bool = False) -> list[T]:
    """Stable sort on a single field; strings compare case-insensitively."""
    return sorted(
        items,
        key=lambda item: _sort_key(field_value(item, field)),
        reverse=descending,
    )


@dataclass(frozen=True)
class ListFilter:
    """Search fields and category field for one kind of list."""

    search_fields: tuple[str, ...]
    category_field: str

    def apply(self, items: Sequence[T], query: str = "", category: str = ALL) -> list[T]:
        return filter_items(items, query, self.search_fields, self.category_field, category)

    def options(self, items: Iterable[Any]) -> list[str]:
        return category_options(items, self.category_field)

    def counts(self, items: Iterable[Any]) -> dict[str, int]:
        return category_counts(items, self.category_field)


ASSESSMENT_FILTER = ListFilter(search_fields=("patient_id", "chief_complaint"), category_field="status")
PROTOCOL_FILTER = ListFilter(search_fields=("title", "content"), category_field="category")
REFERENCE_FILTER = ListFilter(search_fields=("title", "description"), category_field="type")

"""Schemas for filtered list responses."""

from typing import Generic, TypeVar

from pydantic import BaseModel

T = TypeVar("T")


class FilteredList(BaseModel, Generic[T]):
    """A filtered view over a collection plus the data for its filter controls."""

    items: list[T]
    total: int
    options: list[str]
    counts: dict[str, int]

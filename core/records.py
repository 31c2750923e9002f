"""Ordered container for records handed to the matching layer."""

from __future__ import annotations

from typing import Generic, Iterable, Iterator, Optional, TypeVar

T = TypeVar("T")


class RecordList(Generic[T]):
    """
    Append-only ordered list of records with a read-only view.

    The matching layer iterates it but never mutates it.
    """

    def __init__(self, records: Optional[Iterable[T]] = None):
        self._records: list[T] = list(records) if records is not None else []

    @property
    def records(self) -> tuple[T, ...]:
        """Read-only snapshot of the records in insertion order."""
        return tuple(self._records)

    def add(self, record: T) -> None:
        """Append one record."""
        self._records.append(record)

    def clear(self) -> "RecordList[T]":
        """Remove all records and return this list."""
        self._records.clear()
        return self

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[T]:
        return iter(self.records)

    def __getitem__(self, index: int) -> T:
        return self._records[index]

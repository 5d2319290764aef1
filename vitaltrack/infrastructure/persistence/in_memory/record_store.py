"""Shared dictionary store for timestamped, user-owned records."""

from copy import deepcopy
from datetime import datetime
from typing import Callable, Generic, Optional, TypeVar

from vitaltrack.domain.shared.time import to_naive_utc

T = TypeVar("T")


class InMemoryRecordStore(Generic[T]):
    """
    Dictionary-backed store for records with id, user_id and timestamp.

    Reads return deep copies ordered by timestamp ascending; records with
    the same timestamp keep insertion order.
    """

    def __init__(self) -> None:
        self._records: dict[str, T] = {}

    async def save(self, record: T) -> None:
        self._records[record.id] = deepcopy(record)

    async def find_by_id(self, record_id: str) -> Optional[T]:
        record = self._records.get(record_id)
        return deepcopy(record) if record else None

    async def find_by_user(self, user_id: str) -> list[T]:
        return self._select(lambda r: r.user_id == user_id)

    async def find_by_user_and_range(
        self, user_id: str, start: datetime, end: datetime
    ) -> list[T]:
        """
        Args:
            user_id: Owner profile id
            start: Start of range (inclusive)
            end: End of range (inclusive)
        """
        start, end = to_naive_utc(start), to_naive_utc(end)
        return self._select(lambda r: r.user_id == user_id and start <= r.timestamp <= end)

    async def delete(self, record_id: str) -> bool:
        return self._records.pop(record_id, None) is not None

    def clear(self) -> None:
        """Remove all records (test helper)."""
        self._records.clear()

    def count(self) -> int:
        return len(self._records)

    def _select(self, predicate: Callable[[T], bool]) -> list[T]:
        matches = [r for r in self._records.values() if predicate(r)]
        matches.sort(key=lambda r: r.timestamp)
        return [deepcopy(r) for r in matches]

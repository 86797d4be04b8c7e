"""
In-memory record storage.
"""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType

from recording_logger.levels import Level
from recording_logger.record import LogRecord


class RecordStore:
    """
    Append-only record store with a per-level index.

    Every record lives in ``records`` and in the bucket for its level.
    Buckets are created on first append only, so an existing bucket is
    never empty. Records are removed only by ``clear()``.
    """

    def __init__(self) -> None:
        self._records: list[LogRecord] = []
        self._by_level: dict[Level, list[LogRecord]] = {}

    def append(self, record: LogRecord) -> None:
        """
        Store a record in both views.

        Args:
            record: The record to store.
        """
        self._by_level.setdefault(record.level, []).append(record)
        self._records.append(record)

    def bucket(self, level: Level) -> tuple[LogRecord, ...]:
        """Return the records stored at ``level``, in insertion order."""
        return tuple(self._by_level.get(level, ()))

    def has_level(self, level: Level) -> bool:
        """Return True if at least one record was stored at ``level``."""
        return len(self._by_level.get(level, ())) > 0

    def clear(self) -> None:
        """Remove all stored records."""
        self._records.clear()
        self._by_level.clear()

    @property
    def records(self) -> tuple[LogRecord, ...]:
        """Return all records in insertion order."""
        return tuple(self._records)

    @property
    def records_by_level(self) -> Mapping[Level, tuple[LogRecord, ...]]:
        """Return a read-only snapshot of the per-level buckets."""
        return MappingProxyType({level: tuple(bucket) for level, bucket in self._by_level.items()})

    def __len__(self) -> int:
        """Return the number of stored records."""
        return len(self._records)

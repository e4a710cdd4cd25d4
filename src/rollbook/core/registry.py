from __future__ import annotations

import logging
import threading

from .records import StudentRecord

logger = logging.getLogger(__name__)


class StudentRegistry:
    """In-memory `roll_no -> StudentRecord` mapping.

    Safe to share between request threads: every read and write holds the lock,
    and records are immutable, so a lookup never sees a partially written entry.
    """

    def __init__(self) -> None:
        self._lock = threading.RLock()
        self._records: dict[int, StudentRecord] = {}

    def register(self, record: StudentRecord) -> None:
        """Store `record` under its roll number, replacing any existing entry."""

        key = int(record.roll_no)
        with self._lock:
            replaced = key in self._records
            self._records[key] = record
        logger.debug("%s student rollNo=%d", "Overwrote" if replaced else "Registered", key)

    def lookup(self, roll_no: int) -> StudentRecord | None:
        """Return the record for `roll_no`, or None if nothing is registered under it."""

        with self._lock:
            return self._records.get(int(roll_no))

    def __len__(self) -> int:
        with self._lock:
            return len(self._records)

    def __contains__(self, roll_no: object) -> bool:
        with self._lock:
            return roll_no in self._records

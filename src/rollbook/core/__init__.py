from __future__ import annotations

from .records import ROLL_NO_FIELD, StudentRecord, is_roll_no
from .registry import StudentRegistry

__all__ = [
    "ROLL_NO_FIELD",
    "StudentRecord",
    "StudentRegistry",
    "is_roll_no",
]

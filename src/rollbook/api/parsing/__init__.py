from __future__ import annotations

from .records import MalformedInputError, parse_record_body, parse_roll_no

__all__ = [
    "MalformedInputError",
    "parse_record_body",
    "parse_roll_no",
]

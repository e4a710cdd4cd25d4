from __future__ import annotations

import json
import math
import re
from typing import Any

from ...core.records import ROLL_NO_FIELD, StudentRecord

_ROLL_NO_RE = re.compile(r"[+-]?[0-9]+")


class MalformedInputError(ValueError):
    """Request payload or query could not be decoded into a registry call."""


def _reject_constant(name: str) -> Any:
    raise MalformedInputError(f"Invalid JSON constant: {name}")


def _parse_finite_float(text: str) -> float:
    value = float(text)
    if not math.isfinite(value):
        raise MalformedInputError(f"Number out of range: {text[:32]}")
    return value


def parse_roll_no(value: Any) -> int:
    if value is None:
        raise MalformedInputError(f"Missing query param: {ROLL_NO_FIELD}")
    if isinstance(value, bool):
        raise MalformedInputError(f"Invalid {ROLL_NO_FIELD}")
    if isinstance(value, int):
        return value
    s = str(value).strip()
    # ASCII digits with an optional sign.
    if not s.isascii() or _ROLL_NO_RE.fullmatch(s) is None:
        raise MalformedInputError(f"Invalid {ROLL_NO_FIELD}: {s[:32]!r}")
    try:
        return int(s)
    except ValueError as ex:
        raise MalformedInputError(f"Invalid {ROLL_NO_FIELD}: too many digits") from ex


def parse_record_body(raw: bytes | str) -> StudentRecord:
    """Decode a JSON request body into a `StudentRecord`.

    The body must be a JSON object carrying an integer `rollNo`. Every other key
    is kept as-is. Numbers that cannot be sent back as JSON (NaN, Infinity, floats
    that overflow) are rejected here rather than stored.
    """

    if isinstance(raw, bytes):
        try:
            raw = raw.decode("utf-8")
        except UnicodeDecodeError as ex:
            raise MalformedInputError("Request body must be UTF-8 encoded JSON") from ex
    if not raw.strip():
        raise MalformedInputError("Request body is empty")

    try:
        data = json.loads(raw, parse_constant=_reject_constant, parse_float=_parse_finite_float)
    except MalformedInputError:
        raise
    except json.JSONDecodeError as ex:
        raise MalformedInputError(f"Invalid JSON: {ex.msg}") from ex
    except ValueError as ex:
        # e.g. integers longer than the interpreter's int string conversion limit
        raise MalformedInputError(f"Invalid JSON: {ex}") from ex
    except RecursionError as ex:
        raise MalformedInputError("Invalid JSON: nested too deeply") from ex

    if not isinstance(data, dict):
        raise MalformedInputError("Request body must be a JSON object")

    try:
        return StudentRecord.from_dict(data)
    except ValueError as ex:
        raise MalformedInputError(str(ex)) from ex

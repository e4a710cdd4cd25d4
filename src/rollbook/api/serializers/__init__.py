from __future__ import annotations

from .records import record_to_response, registered_response

__all__ = [
    "record_to_response",
    "registered_response",
]

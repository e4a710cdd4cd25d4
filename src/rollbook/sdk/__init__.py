from __future__ import annotations

from .client import RollbookClient

__all__ = ["RollbookClient"]

from __future__ import annotations

__version__ = "0.1.0"

from .core.records import StudentRecord
from .core.registry import StudentRegistry
from .runtime.server import RollbookServer, run
from .sdk.client import RollbookClient

__all__ = [
    "__version__",
    "run",
    "RollbookClient",
    "RollbookServer",
    "StudentRecord",
    "StudentRegistry",
]

from __future__ import annotations

from fastapi import FastAPI

from ..api import create_api_app
from ..core.registry import StudentRegistry


def create_app(registry: StudentRegistry | None = None) -> FastAPI:
    """Create the full app with its own registry (or the one passed in)."""

    return create_api_app(registry)


# Convenience for uvicorn: `uvicorn rollbook.runtime.app:app`
app = create_app()

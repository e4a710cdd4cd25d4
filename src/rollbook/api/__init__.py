from __future__ import annotations

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from ..core.registry import StudentRegistry
from .routes import mount_health_api, mount_students_api

logger = logging.getLogger(__name__)


def create_api_app(registry: StudentRegistry | None = None) -> FastAPI:
    """Build the HTTP API around `registry`.

    The app owns the registry for its lifetime; handlers reach it through
    `app.state.registry`. A fresh empty registry is created when none is given.
    """

    from .. import __version__

    app = FastAPI(title="rollbook", version=__version__)
    app.state.registry = registry if registry is not None else StudentRegistry()

    app.add_middleware(
        CORSMiddleware,
        allow_origins=[
            "http://localhost:5173",
            "http://127.0.0.1:5173",
        ],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    mount_health_api(app)
    mount_students_api(app)

    logger.debug("API app created")
    return app


__all__ = ["create_api_app"]

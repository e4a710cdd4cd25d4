from __future__ import annotations

from typing import Any

from fastapi import FastAPI, Request

from .table import Route, mount_routes


def healthz(request: Request) -> dict[str, Any]:
    return {"ok": True, "records": len(request.app.state.registry)}


HEALTH_ROUTES: tuple[Route, ...] = (
    Route("GET", "/healthz", healthz, "healthz"),
)


def mount_health_api(app: FastAPI) -> None:
    mount_routes(app, HEALTH_ROUTES)

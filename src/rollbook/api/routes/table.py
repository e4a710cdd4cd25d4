from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Iterable

from fastapi import FastAPI


@dataclass(frozen=True)
class Route:
    method: str
    path: str
    endpoint: Callable[..., Any]
    name: str


def mount_routes(app: FastAPI, routes: Iterable[Route]) -> None:
    """Register each (method, path) -> endpoint entry on `app`."""

    for route in routes:
        app.add_api_route(
            route.path,
            route.endpoint,
            methods=[route.method],
            name=route.name,
        )

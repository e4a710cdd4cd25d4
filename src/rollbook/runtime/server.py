from __future__ import annotations

import contextlib
import logging
import os
import socket
import threading
import time
from dataclasses import dataclass, field
from typing import Any, Mapping

import uvicorn

from ..core.records import StudentRecord
from ..core.registry import StudentRegistry
from ..sdk.client import RollbookClient
from .app import create_app

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RollbookServer:
    host: str
    port: int
    url: str
    registry: StudentRegistry = field(repr=False, compare=False)

    def register(self, record: StudentRecord | Mapping[str, Any]) -> None:
        """Register a record directly in this process's registry (no HTTP round trip)."""

        if not isinstance(record, StudentRecord):
            record = StudentRecord.from_dict(record)
        self.registry.register(record)

    def lookup(self, roll_no: int) -> StudentRecord | None:
        return self.registry.lookup(roll_no)

    def client(self) -> RollbookClient:
        return RollbookClient(self.url.rstrip("/"))


def _find_free_port(host: str) -> int:
    with contextlib.closing(socket.socket(socket.AF_INET, socket.SOCK_STREAM)) as s:
        s.bind((host, 0))
        return int(s.getsockname()[1])


def _normalize_base_url(url: str) -> str:
    url = url.strip()
    if not url:
        return ""
    # Allow passing just host:port.
    if "://" not in url:
        url = "http://" + url
    return url.rstrip("/")


def _is_server_alive(base_url: str, *, timeout_s: float = 0.2) -> bool:
    """Best-effort probe to determine if a rollbook server is reachable."""

    import httpx

    try:
        with httpx.Client(base_url=base_url, timeout=timeout_s) as client:
            r = client.get("/healthz")
            if r.status_code != 200:
                return False
            data = r.json()
            return bool(data.get("ok"))
    except (httpx.HTTPError, ValueError):
        return False


def _wait_until_started(server: uvicorn.Server, thread: threading.Thread, *, timeout_s: float) -> None:
    deadline = time.monotonic() + timeout_s
    while not server.started:
        if not thread.is_alive():
            raise RuntimeError("rollbook server exited during startup")
        if time.monotonic() > deadline:
            raise RuntimeError(f"rollbook server did not start within {timeout_s:.1f}s")
        time.sleep(0.01)


def run(
    *,
    host: str = "127.0.0.1",
    port: int = 0,
    log_level: str = "info",
    access_log: bool = False,
    new_server: bool = False,
    connect_timeout_s: float = 0.2,
    startup_timeout_s: float = 10.0,
    registry: StudentRegistry | None = None,
) -> RollbookServer | RollbookClient:
    """Start rollbook with a single Python call.

    Behavior:
    - If ROLLBOOK_URL is set and reachable, we *attach* to that existing server
      (client mode) unless `new_server=True`.
    - Otherwise, if `port != 0` and a server is already reachable at http://{host}:{port},
      we attach to it unless `new_server=True`.
    - Otherwise we start a new server on a daemon thread and return a `RollbookServer`
      that holds the registry it serves.

    Notes:
    - `port=0` means "pick a free port", so there's nothing to attach to.
    - Uvicorn's per-request access log is off by default.
    """

    env_url = _normalize_base_url(os.getenv("ROLLBOOK_URL", ""))

    # 1) Try attaching to an explicitly provided server.
    if env_url and not new_server:
        if _is_server_alive(env_url, timeout_s=connect_timeout_s):
            logger.info("Attaching to rollbook server at %s", env_url)
            return RollbookClient(env_url)
        logger.warning("ROLLBOOK_URL=%s is not reachable; starting a new server", env_url)

    # 2) Try attaching to host/port if they are explicitly chosen.
    if port != 0 and not new_server:
        default_url = _normalize_base_url(f"http://{host}:{port}")
        if _is_server_alive(default_url, timeout_s=connect_timeout_s):
            logger.info("Attaching to rollbook server at %s", default_url)
            return RollbookClient(default_url)

    # 3) Start a fresh server.
    if port == 0:
        port = _find_free_port(host)

    reg = registry if registry is not None else StudentRegistry()
    app = create_app(reg)

    config = uvicorn.Config(app, host=host, port=port, log_level=log_level, access_log=access_log)
    server = uvicorn.Server(config)

    thread = threading.Thread(target=server.run, daemon=True)
    thread.start()
    _wait_until_started(server, thread, timeout_s=startup_timeout_s)

    url = f"http://{host}:{port}/"
    logger.info("rollbook server listening on %s", url)
    return RollbookServer(host=host, port=port, url=url, registry=reg)

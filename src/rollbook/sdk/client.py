from __future__ import annotations

import contextlib
from typing import TYPE_CHECKING, Any, Iterator, Mapping

from ..core.records import ROLL_NO_FIELD, StudentRecord

if TYPE_CHECKING:
    import httpx


def _as_record(record: StudentRecord | Mapping[str, Any]) -> StudentRecord:
    if isinstance(record, StudentRecord):
        return record
    return StudentRecord.from_dict(record)


class RollbookClient:
    """HTTP client for a running rollbook server.

    Contract:
    - POST /registerStudent          (JSON record, must carry an integer `rollNo`)
    - GET  /getStudentInfo?rollNo=N  (JSON record, or `null` when absent)

    An already-open `httpx.Client` (e.g. FastAPI's `TestClient`) can be passed as
    `http`; it is reused for every call and left open. Otherwise each call opens
    a short-lived client against `base_url`.
    """

    def __init__(self, base_url: str = "http://127.0.0.1:8000", *, http: httpx.Client | None = None) -> None:
        self.base_url = base_url.rstrip("/")
        self._http = http

    @contextlib.contextmanager
    def _client(self, timeout_s: float) -> Iterator[httpx.Client]:
        if self._http is not None:
            yield self._http
            return

        import httpx

        with httpx.Client(base_url=self.base_url, timeout=timeout_s) as client:
            yield client

    def register(self, record: StudentRecord | Mapping[str, Any], *, timeout_s: float = 10.0) -> None:
        """Register (add or overwrite) a student record.

        Accepts a `StudentRecord` or a plain mapping such as
        `{"rollNo": 7, "name": "Asha"}`.
        """

        rec = _as_record(record)
        with self._client(timeout_s) as client:
            res = client.post("/registerStudent", json=rec.to_dict())
            if res.status_code >= 400:
                raise RuntimeError(f"Failed to register student: {res.status_code} {res.text}")

    def lookup(self, roll_no: int, *, timeout_s: float = 10.0) -> StudentRecord | None:
        """Return the record registered under `roll_no`, or None if there is none."""

        with self._client(timeout_s) as client:
            res = client.get("/getStudentInfo", params={ROLL_NO_FIELD: int(roll_no)})
            if res.status_code >= 400:
                raise RuntimeError(f"Failed to get student info: {res.status_code} {res.text}")
            data = res.json() if res.content else None
            if data is None:
                return None
            return StudentRecord.from_dict(data)

    def health(self, *, timeout_s: float = 10.0) -> dict[str, Any]:
        with self._client(timeout_s) as client:
            res = client.get("/healthz")
            if res.status_code >= 400:
                raise RuntimeError(f"Health check failed: {res.status_code} {res.text}")
            return dict(res.json())

from __future__ import annotations

from starlette.responses import JSONResponse, Response

from ...core.records import StudentRecord


def record_to_response(record: StudentRecord | None) -> Response:
    # Absent records are encoded as JSON `null`, never as an empty object.
    content = None if record is None else record.to_dict()
    return JSONResponse(content=content)


def registered_response() -> Response:
    return Response(status_code=200)

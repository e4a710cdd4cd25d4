from __future__ import annotations

import logging

from fastapi import FastAPI, HTTPException, Request
from starlette.responses import Response

from ...core.registry import StudentRegistry
from ..parsing import MalformedInputError, parse_record_body, parse_roll_no
from ..serializers import record_to_response, registered_response
from .table import Route, mount_routes

logger = logging.getLogger(__name__)


def registry_from_request(request: Request) -> StudentRegistry:
    return request.app.state.registry


async def register_student(request: Request) -> Response:
    """Store the posted student record under its `rollNo`."""

    raw = await request.body()
    try:
        record = parse_record_body(raw)
    except MalformedInputError as ex:
        logger.info("Rejected registration: %s", ex)
        raise HTTPException(status_code=400, detail=str(ex))

    registry_from_request(request).register(record)
    return registered_response()


def get_student_info(request: Request) -> Response:
    """Return the record for `?rollNo=`, or `null` if none is registered."""

    try:
        roll_no = parse_roll_no(request.query_params.get("rollNo"))
    except MalformedInputError as ex:
        logger.info("Rejected lookup: %s", ex)
        raise HTTPException(status_code=400, detail=str(ex))

    record = registry_from_request(request).lookup(roll_no)
    return record_to_response(record)


STUDENT_ROUTES: tuple[Route, ...] = (
    Route("POST", "/registerStudent", register_student, "register_student"),
    Route("GET", "/getStudentInfo", get_student_info, "get_student_info"),
)


def mount_students_api(app: FastAPI) -> None:
    mount_routes(app, STUDENT_ROUTES)

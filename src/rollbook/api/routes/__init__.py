from __future__ import annotations

from .health import HEALTH_ROUTES, mount_health_api
from .students import STUDENT_ROUTES, mount_students_api
from .table import Route, mount_routes

__all__ = [
    "HEALTH_ROUTES",
    "STUDENT_ROUTES",
    "Route",
    "mount_health_api",
    "mount_routes",
    "mount_students_api",
]

"""Small request and serialization helpers shared across the app."""

from datetime import datetime
from typing import Any

from fastapi import Request
from sqlmodel import SQLModel
from starlette.routing import Match, Route

DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
NO_UPDATES = "No updates"


def host(request: Request) -> str:
    """Client IP, or ``"unknown"`` when the transport does not report one."""
    return request.client.host if request.client else "unknown"


def _local(moment: datetime) -> str:
    return moment.astimezone().strftime(DATE_FORMAT)


def today_str() -> str:
    return _local(datetime.now().astimezone())


def get_summary(request: Request) -> str | None:
    """OpenAPI summary of the route serving ``request``, falling back to its name."""
    for route in request.app.routes:
        if isinstance(route, Route) and route.matches(request.scope)[0] is Match.FULL:
            return getattr(route, "summary", None) or route.name
    return None


def response_datetime(db: SQLModel) -> dict[str, Any]:
    """
    Dump a row with its timestamps rendered in server local time.

    ``updated_at`` is only touched on models that have the column; a row
    that was never updated reports ``"No updates"``.
    """
    data = db.model_dump()
    data["created_at"] = _local(data["created_at"])
    if "updated_at" in data:
        updated = data["updated_at"]
        data["updated_at"] = _local(updated) if updated else NO_UPDATES
    return data

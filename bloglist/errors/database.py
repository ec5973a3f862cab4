"""Persistence errors raised by the repositories."""

from starlette.status import HTTP_404_NOT_FOUND, HTTP_409_CONFLICT

from bloglist.errors.base import BaseAppError, create_exception_handler
from bloglist.monitoring import get_logger

logger = get_logger(__name__)


class DatabaseError(BaseAppError):
    """A statement the database refused."""

    detail = "database error"


class DatabaseConnectionError(DatabaseError):
    """The database could not be reached or the session failed mid-statement."""

    detail = "database unavailable"


class DuplicateEntryError(DatabaseError):
    """A unique column already holds the submitted value."""

    status_code = HTTP_409_CONFLICT
    detail = "a record with this value already exists"


class RecordNotFoundError(DatabaseError):
    """No row of ``resource`` carries the requested ID."""

    status_code = HTTP_404_NOT_FOUND
    detail = "record not found"

    def __init__(self, resource: str | None = None, record_id: object = None) -> None:
        if resource is None:
            super().__init__()
        else:
            super().__init__(f"{resource} with ID {record_id} not found")
        self.resource = resource
        self.record_id = record_id


database_exception_handler = create_exception_handler(logger)

"""Generic async repository shared by the entity repositories."""

from collections.abc import Mapping
from datetime import datetime
from uuid import UUID

from sqlalchemy import Select, func, select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import SQLModel

from bloglist.errors.database import (
    DatabaseConnectionError,
    DatabaseError,
    DuplicateEntryError,
    RecordNotFoundError,
)
from bloglist.monitoring import get_logger

logger = get_logger(__name__)

type FilterValue = str | int | float | bool | UUID | datetime | None


class BaseRepository[ModelT: SQLModel]:
    """
    Common reads, deletes and guarded writes for one table.

    Subclasses set ``model`` and add their own create and query methods.
    Rows come back in creation order wherever order matters, since the
    statistics tie-breaks depend on it.

    Attributes:
        model: SQLModel table class.
        resource: Human name used in not-found messages, e.g. ``"Blog"``.
    """

    model: type[ModelT]
    resource: str = "Record"

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    def _oldest_first(self) -> Select[tuple[ModelT]]:
        # id settles rows created in the same microsecond
        return select(self.model).order_by(self.model.created_at, self.model.id)

    async def get_by_id(self, record_id: UUID) -> ModelT | None:
        """Primary-key lookup. ``None`` when there is no such row."""
        result = await self.session.execute(select(self.model).where(self.model.id == record_id))
        return result.scalar_one_or_none()

    async def get_or_raise(self, record_id: UUID) -> ModelT:
        """
        Primary-key lookup that refuses to come back empty.

        Raises:
            RecordNotFoundError: If no row has ``record_id``
        """
        record = await self.get_by_id(record_id)
        if record is None:
            raise RecordNotFoundError(self.resource, record_id)
        return record

    async def get_all(self, skip: int = 0, limit: int | None = None) -> list[ModelT]:
        """
        Page through the table, oldest row first.

        Args:
            skip: Rows to skip from the start
            limit: Page size, or None for every remaining row

        Returns:
            list[ModelT]: The requested rows
        """
        statement = self._oldest_first().offset(skip)
        if limit is not None:
            statement = statement.limit(limit)
        result = await self.session.execute(statement)
        return list(result.scalars().all())

    async def delete(self, record_id: UUID) -> bool:
        """Remove a row. Returns False when it was already gone."""
        record = await self.get_by_id(record_id)
        if record is None:
            return False
        await self.session.delete(record)
        await self.session.flush()
        return True

    async def count(self) -> int:
        result = await self.session.execute(select(func.count()).select_from(self.model))
        return result.scalar() or 0

    async def _save(self, record: ModelT, unique: Mapping[str, str] | None = None) -> ModelT:
        """
        Flush ``record`` and reload server-side defaults into it.

        Args:
            record: New or modified row
            unique: Column name to client message for unique columns

        Returns:
            ModelT: The same row, refreshed

        Raises:
            DuplicateEntryError: A unique column clashed
            DatabaseError: Any other constraint failed
            DatabaseConnectionError: The statement did not run
        """
        self.session.add(record)
        try:
            await self.session.flush()
            await self.session.refresh(record)
        except IntegrityError as e:
            await self.session.rollback()
            raise self._integrity_error(e, unique or {}) from e
        except SQLAlchemyError as e:
            await self.session.rollback()
            logger.exception(f"Failed to save {self.resource.lower()}")
            raise DatabaseConnectionError from e
        return record

    def _integrity_error(self, error: IntegrityError, unique: Mapping[str, str]) -> DatabaseError:
        reason = str(error.orig or error)
        lowered = reason.lower()
        for column, message in unique.items():
            if column in lowered:
                return DuplicateEntryError(message)
        if "unique" in lowered or "duplicate" in lowered:
            return DuplicateEntryError()
        logger.warning(f"{self.resource} rejected by the database: {reason}")
        return DatabaseError(f"{self.resource.lower()} violates a database constraint")

    async def _exists(self, exclude_id: UUID | None = None, **filters: FilterValue) -> bool:
        """
        Whether any row matches every ``column=value`` filter.

        Args:
            exclude_id: Row to ignore, for updates that keep their own value
            **filters: Column equality filters
        """
        statement = select(1).select_from(self.model)
        for column, value in filters.items():
            statement = statement.where(getattr(self.model, column) == value)
        if exclude_id is not None:
            statement = statement.where(self.model.id != exclude_id)
        result = await self.session.execute(statement.limit(1))
        return result.scalar_one_or_none() is not None

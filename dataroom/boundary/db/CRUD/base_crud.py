"""
Base CRUD operations for SQLAlchemy models.

Generic lookup and atomic upsert that model-specific CRUD classes inherit
and extend.

Dependencies: sqlalchemy
System role: Foundation for all database CRUD operations
"""

from typing import Any, Generic, TypeVar

from sqlalchemy import select
from sqlalchemy.dialects import postgresql, sqlite
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.sql.elements import ColumnElement

from dataroom.boundary.db.base import Base

ModelT = TypeVar("ModelT", bound=Base)

_UPSERT_INSERTS = {
    "postgresql": postgresql.insert,
    "sqlite": sqlite.insert,
}


class BaseCRUD(Generic[ModelT]):
    """
    Generic base class for CRUD operations.

    Type Parameters:
        ModelT: SQLAlchemy model class inheriting from Base

    Attributes:
        model: The SQLAlchemy model class to operate on
    """

    def __init__(self, model: type[ModelT]) -> None:
        self.model = model

    async def get_one_by(self, session: AsyncSession, **filters: Any) -> ModelT | None:
        """
        Retrieve the single row matching all column filters.

        Rows already in the session are refreshed from the database.

        Args:
            session: Async database session
            **filters: Column name to value

        Returns:
            Model instance if found, None otherwise
        """
        stmt = (
            select(self.model)
            .filter_by(**filters)
            .execution_options(populate_existing=True)
        )
        result = await session.execute(stmt)
        return result.scalar_one_or_none()

    async def upsert(
        self,
        session: AsyncSession,
        values: dict[str, Any],
        conflict_columns: list[str],
        update_values: dict[str, Any | ColumnElement],
    ) -> ModelT:
        """
        Insert a row or update the conflicting one in a single statement.

        Uses INSERT ... ON CONFLICT DO UPDATE, so concurrent writers to the
        same key never collide; the last statement to run wins. Caller commits.

        Args:
            session: Async database session
            values: Column values for a new row
            conflict_columns: Columns of the unique constraint to upsert on
            update_values: Column values (or SQL expressions) applied on conflict

        Returns:
            The inserted or updated row

        Raises:
            NotImplementedError: Dialect has no ON CONFLICT support here
        """
        dialect = session.get_bind().dialect.name
        insert = _UPSERT_INSERTS.get(dialect)
        if insert is None:
            raise NotImplementedError(f"Upsert is not supported for dialect: {dialect}")

        stmt = insert(self.model.__table__).values(**values)
        stmt = stmt.on_conflict_do_update(
            index_elements=conflict_columns,
            set_=update_values,
        )
        await session.execute(stmt)

        row = await self.get_one_by(session, **{c: values[c] for c in conflict_columns})
        if row is None:
            raise LookupError(f"Upserted {self.model.__name__} row not found")
        return row

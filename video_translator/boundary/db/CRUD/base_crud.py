"""
Generic async CRUD over a single UUID-keyed model.

Writes flush and return the affected row; committing is left to the
caller so several writes can share one transaction.

Dependencies: sqlalchemy
"""

from typing import Any, Generic, Sequence, TypeVar
from uuid import UUID

from sqlalchemy import delete, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from video_translator.boundary.db.base import Base

ModelT = TypeVar("ModelT", bound=Base)


class BaseCRUD(Generic[ModelT]):
    def __init__(self, model: type[ModelT]) -> None:
        self.model = model

    async def create(self, session: AsyncSession, **values) -> ModelT:
        """Insert a row and reload it so server-side defaults are populated."""
        row = self.model(**values)
        session.add(row)
        await session.flush()
        await session.refresh(row)
        return row

    async def get_by_id(self, session: AsyncSession, id: UUID) -> ModelT | None:
        return await session.get(self.model, id, populate_existing=True)

    async def get_all(
        self,
        session: AsyncSession,
        limit: int | None = None,
        offset: int = 0,
        order_by: Any = None,
    ) -> Sequence[ModelT]:
        stmt = select(self.model).offset(offset)
        if order_by is not None:
            stmt = stmt.order_by(order_by)
        if limit is not None:
            stmt = stmt.limit(limit)
        return (await session.scalars(stmt)).all()

    async def update_by_id(self, session: AsyncSession, id: UUID, *criteria, **values) -> ModelT | None:
        """
        UPDATE ... RETURNING for one row.

        Args:
            *criteria: Extra WHERE clauses the row must also satisfy

        Returns:
            The updated row, or None when no row matched
        """
        stmt = (
            update(self.model)
            .where(self.model.id == id, *criteria)
            .values(**values)
            .returning(self.model)
            .execution_options(populate_existing=True)
        )
        return (await session.execute(stmt)).scalar_one_or_none()

    async def delete_by_id(self, session: AsyncSession, id: UUID) -> bool:
        result = await session.execute(delete(self.model).where(self.model.id == id))
        return result.rowcount > 0

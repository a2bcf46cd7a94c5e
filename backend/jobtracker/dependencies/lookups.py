"""Row lookup helpers shared by the API routers."""

from typing import Any, TypeVar
from uuid import UUID

from fastapi import HTTPException
from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from jobtracker.models.base import Base

ModelT = TypeVar("ModelT", bound=Base)


def _label(model: type[Base], name: str | None) -> str:
    return name or model.__name__


async def get_or_404(
    db: AsyncSession,
    model: type[ModelT],
    obj_id: UUID,
    *options: Any,
    name: str | None = None,
) -> ModelT:
    """Load a row by id, reloading any state left stale by an earlier flush."""
    query = (
        select(model)
        .where(model.id == obj_id)
        .execution_options(populate_existing=True)
    )
    if options:
        query = query.options(*options)
    result = await db.execute(query)
    obj = result.scalar_one_or_none()
    if not obj:
        raise HTTPException(status_code=404, detail=f"{_label(model, name)} not found")
    return obj


async def ensure_exists(
    db: AsyncSession,
    model: type[Base],
    obj_id: UUID | None,
    name: str | None = None,
) -> None:
    """Raise 404 when a referenced parent row is missing. None is allowed."""
    if obj_id is None:
        return
    result = await db.execute(select(model.id).where(model.id == obj_id))
    if not result.scalar_one_or_none():
        raise HTTPException(status_code=404, detail=f"{_label(model, name)} not found")


async def delete_or_404(
    db: AsyncSession,
    model: type[Base],
    obj_id: UUID,
    name: str | None = None,
) -> None:
    """Delete a row by id; dependent rows follow the foreign key ON DELETE rules."""
    result = await db.execute(delete(model).where(model.id == obj_id))
    if result.rowcount == 0:
        raise HTTPException(status_code=404, detail=f"{_label(model, name)} not found")

"""Learning item API endpoints."""

import logging
from datetime import datetime, timezone
from typing import Any
from uuid import UUID

from fastapi import APIRouter, Depends, Query
from sqlalchemy import case, or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from jobtracker.dependencies.lookups import delete_or_404, get_or_404
from jobtracker.models.base import get_db
from jobtracker.models.enums import LearningPriority, LearningStatus, LearningType
from jobtracker.models.learning_item import LearningItem
from jobtracker.schemas.common import DeleteResponse
from jobtracker.schemas.learning_item import LearningItemCreate, LearningItemRead, LearningItemUpdate

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/learning", tags=["learning"])

# HIGH first; priorities are stored as strings so order them explicitly
PRIORITY_RANK = case(
    {
        LearningPriority.HIGH.value: 0,
        LearningPriority.MEDIUM.value: 1,
        LearningPriority.LOW.value: 2,
    },
    value=LearningItem.priority,
    else_=3,
)


def _apply_status_stamps(item: LearningItem, changes: dict[str, Any]) -> None:
    """Stamp start/completion times for a status change held in ``changes``."""
    status = changes.get("status")
    if status == LearningStatus.IN_PROGRESS.value:
        if not changes.get("started_at") and not item.started_at:
            changes["started_at"] = datetime.now(timezone.utc)
    elif status == LearningStatus.COMPLETED.value:
        changes["completed_at"] = datetime.now(timezone.utc)
        changes["progress"] = 100


@router.get("", response_model=list[LearningItemRead])
async def list_learning_items(
    db: AsyncSession = Depends(get_db),
    skip: int = Query(0, ge=0),
    limit: int = Query(200, ge=1, le=500),
    type: LearningType | None = Query(None, description="Filter by type"),
    status: LearningStatus | None = Query(None, description="Filter by status"),
    category: str | None = Query(None, description="Filter by category"),
    search: str | None = Query(None, description="Search title, description or tags"),
):
    """List learning items, highest priority first."""
    query = select(LearningItem)

    if type:
        query = query.where(LearningItem.type == type.value)
    if status:
        query = query.where(LearningItem.status == status.value)
    if category:
        query = query.where(LearningItem.category == category)
    if search:
        pattern = f"%{search}%"
        query = query.where(
            or_(
                LearningItem.title.ilike(pattern),
                LearningItem.description.ilike(pattern),
                LearningItem.tags.ilike(pattern),
            )
        )

    query = query.order_by(PRIORITY_RANK, LearningItem.created_at.desc()).offset(skip).limit(limit)
    result = await db.execute(query)
    return result.scalars().all()


@router.post("", response_model=LearningItemRead, status_code=201)
async def create_learning_item(
    payload: LearningItemCreate,
    db: AsyncSession = Depends(get_db),
):
    item = LearningItem()
    changes = payload.model_dump()
    _apply_status_stamps(item, changes)
    for key, value in changes.items():
        setattr(item, key, value)
    db.add(item)
    await db.flush()
    logger.info("Created learning item %s (%s)", item.id, item.title)
    return await get_or_404(db, LearningItem, item.id, name="Learning item")


@router.get("/{item_id}", response_model=LearningItemRead)
async def get_learning_item(
    item_id: UUID,
    db: AsyncSession = Depends(get_db),
):
    return await get_or_404(db, LearningItem, item_id, name="Learning item")


@router.patch("/{item_id}", response_model=LearningItemRead)
async def update_learning_item(
    item_id: UUID,
    payload: LearningItemUpdate,
    db: AsyncSession = Depends(get_db),
):
    """Update a learning item; status changes stamp started/completed times."""
    item = await get_or_404(db, LearningItem, item_id, name="Learning item")
    changes = payload.changes()
    _apply_status_stamps(item, changes)

    for key, value in changes.items():
        setattr(item, key, value)
    await db.flush()
    return await get_or_404(db, LearningItem, item_id, name="Learning item")


@router.delete("/{item_id}", response_model=DeleteResponse)
async def delete_learning_item(
    item_id: UUID,
    db: AsyncSession = Depends(get_db),
):
    await delete_or_404(db, LearningItem, item_id, name="Learning item")
    logger.info("Deleted learning item %s", item_id)
    return DeleteResponse()

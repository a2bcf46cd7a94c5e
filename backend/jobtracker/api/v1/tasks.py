"""Daily to-do task API endpoints."""

import logging
from datetime import date, datetime, time, timedelta, timezone
from uuid import UUID

from fastapi import APIRouter, Depends, Query
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from jobtracker.dependencies.lookups import delete_or_404, ensure_exists, get_or_404
from jobtracker.models.base import get_db
from jobtracker.models.task import Task
from jobtracker.schemas.common import DeleteResponse
from jobtracker.schemas.task import TaskCreate, TaskRead, TaskUpdate

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/tasks", tags=["tasks"])


@router.get("", response_model=list[TaskRead])
async def list_tasks(
    db: AsyncSession = Depends(get_db),
    day: date | None = Query(None, alias="date", description="Only tasks due on this day (UTC)"),
):
    """Top-level tasks by due date, each with its subtasks."""
    query = (
        select(Task)
        .options(selectinload(Task.subtasks))
        .where(Task.parent_task_id.is_(None))
    )
    if day:
        start = datetime.combine(day, time.min, tzinfo=timezone.utc)
        query = query.where(Task.due_date >= start, Task.due_date < start + timedelta(days=1))

    result = await db.execute(query.order_by(Task.due_date, Task.created_at))
    return result.scalars().all()


@router.post("", response_model=TaskRead, status_code=201)
async def create_task(
    payload: TaskCreate,
    db: AsyncSession = Depends(get_db),
):
    """Create a task, or a subtask when parent_task_id is given."""
    await ensure_exists(db, Task, payload.parent_task_id, name="Parent task")

    task = Task(**payload.model_dump())
    db.add(task)
    await db.flush()
    logger.info("Created task %s (%s)", task.id, task.title)
    return await get_or_404(db, Task, task.id, selectinload(Task.subtasks))


@router.get("/{task_id}", response_model=TaskRead)
async def get_task(
    task_id: UUID,
    db: AsyncSession = Depends(get_db),
):
    return await get_or_404(db, Task, task_id, selectinload(Task.subtasks))


@router.patch("/{task_id}", response_model=TaskRead)
async def update_task(
    task_id: UUID,
    payload: TaskUpdate,
    db: AsyncSession = Depends(get_db),
):
    """Update a task. Completing stamps completed_at, reopening clears it."""
    task = await get_or_404(db, Task, task_id)
    changes = payload.changes()
    if "is_completed" in changes:
        changes["completed_at"] = datetime.now(timezone.utc) if changes["is_completed"] else None

    for key, value in changes.items():
        setattr(task, key, value)
    await db.flush()
    return await get_or_404(db, Task, task_id, selectinload(Task.subtasks))


@router.delete("/{task_id}", response_model=DeleteResponse)
async def delete_task(
    task_id: UUID,
    db: AsyncSession = Depends(get_db),
):
    """Delete a task and its subtasks."""
    await delete_or_404(db, Task, task_id)
    return DeleteResponse()

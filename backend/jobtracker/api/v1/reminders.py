"""Reminder API endpoints."""

import logging
from datetime import datetime, timezone
from uuid import UUID

from fastapi import APIRouter, Depends, Query
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from jobtracker.dependencies.lookups import delete_or_404, ensure_exists, get_or_404
from jobtracker.models.base import get_db
from jobtracker.models.application import Application
from jobtracker.models.reminder import Reminder
from jobtracker.schemas.common import DeleteResponse
from jobtracker.schemas.reminder import ReminderCreate, ReminderRead, ReminderUpdate

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/reminders", tags=["reminders"])


@router.get("", response_model=list[ReminderRead])
async def list_reminders(
    db: AsyncSession = Depends(get_db),
    skip: int = Query(0, ge=0),
    limit: int = Query(100, ge=1, le=500),
    is_completed: bool | None = Query(None, description="Filter by completion"),
    overdue: bool = Query(False, description="Only open reminders past their due date"),
):
    """List reminders by due date."""
    query = select(Reminder)
    if is_completed is not None:
        query = query.where(Reminder.is_completed == is_completed)
    if overdue:
        query = query.where(
            Reminder.is_completed.is_(False),
            Reminder.due_date < datetime.now(timezone.utc),
        )

    query = query.order_by(Reminder.due_date).offset(skip).limit(limit)
    result = await db.execute(query)
    return result.scalars().all()


@router.post("", response_model=ReminderRead, status_code=201)
async def create_reminder(
    payload: ReminderCreate,
    db: AsyncSession = Depends(get_db),
):
    await ensure_exists(db, Application, payload.application_id)

    reminder = Reminder(**payload.model_dump())
    db.add(reminder)
    await db.flush()
    logger.info("Created reminder %s due %s", reminder.id, reminder.due_date)
    return await get_or_404(db, Reminder, reminder.id)


@router.get("/{reminder_id}", response_model=ReminderRead)
async def get_reminder(
    reminder_id: UUID,
    db: AsyncSession = Depends(get_db),
):
    return await get_or_404(db, Reminder, reminder_id)


@router.patch("/{reminder_id}", response_model=ReminderRead)
async def update_reminder(
    reminder_id: UUID,
    payload: ReminderUpdate,
    db: AsyncSession = Depends(get_db),
):
    """Update a reminder. Completing stamps completed_at, reopening clears it."""
    reminder = await get_or_404(db, Reminder, reminder_id)
    changes = payload.changes()

    if "application_id" in changes:
        await ensure_exists(db, Application, changes["application_id"])
    if "is_completed" in changes:
        changes["completed_at"] = datetime.now(timezone.utc) if changes["is_completed"] else None

    for key, value in changes.items():
        setattr(reminder, key, value)
    await db.flush()
    return await get_or_404(db, Reminder, reminder_id)


@router.delete("/{reminder_id}", response_model=DeleteResponse)
async def delete_reminder(
    reminder_id: UUID,
    db: AsyncSession = Depends(get_db),
):
    await delete_or_404(db, Reminder, reminder_id)
    logger.info("Deleted reminder %s", reminder_id)
    return DeleteResponse()

"""Event API endpoints — calendar items, next-step checklists and the month view."""

import logging
from datetime import datetime, timezone
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy import or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from jobtracker.dependencies.lookups import delete_or_404, ensure_exists, get_or_404
from jobtracker.models.base import get_db
from jobtracker.models.application import Application
from jobtracker.models.contact import Contact
from jobtracker.models.enums import EventStatus, EventType
from jobtracker.models.event import Event
from jobtracker.schemas.common import DeleteResponse
from jobtracker.schemas.event import CalendarMonth, EventCreate, EventDeleted, EventRead, EventUpdate
from jobtracker.services.calendar_service import build_month, grid_bounds
from jobtracker.services.next_steps import all_completed, dump_steps, load_steps, toggle_step

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/events", tags=["events"])


async def _finish_if_done(db: AsyncSession, event: Event, steps) -> EventDeleted | None:
    """Delete the event once every next step is checked off."""
    if not all_completed(steps):
        return None
    await db.delete(event)
    await db.flush()
    logger.info("Deleted event %s after all next steps were completed", event.id)
    return EventDeleted(message="All next steps completed. Event deleted.")


@router.get("", response_model=list[EventRead])
async def list_events(
    db: AsyncSession = Depends(get_db),
    skip: int = Query(0, ge=0),
    limit: int = Query(200, ge=1, le=500),
    search: str | None = Query(None, description="Search title, description, position or contact"),
    type: EventType | None = Query(None, description="Filter by event type"),
    status: EventStatus | None = Query(None, description="Filter by status"),
    is_completed: bool | None = Query(None, description="Filter by completion"),
    upcoming: bool = Query(False, description="Only events from now on"),
):
    """List events by scheduled date with linked application and contact."""
    query = select(Event)

    if search:
        pattern = f"%{search}%"
        query = (
            query.outerjoin(Application, Event.application_id == Application.id)
            .outerjoin(Contact, Event.contact_id == Contact.id)
            .where(
                or_(
                    Event.title.ilike(pattern),
                    Event.description.ilike(pattern),
                    Application.position_title.ilike(pattern),
                    Contact.name.ilike(pattern),
                )
            )
        )
    if type:
        query = query.where(Event.type == type.value)
    if status:
        query = query.where(Event.status == status.value)
    if is_completed is not None:
        query = query.where(Event.is_completed == is_completed)
    if upcoming:
        query = query.where(Event.scheduled_date >= datetime.now(timezone.utc))

    query = query.order_by(Event.scheduled_date).offset(skip).limit(limit)
    result = await db.execute(query)
    return result.scalars().all()


@router.get("/calendar", response_model=CalendarMonth)
async def get_calendar(
    db: AsyncSession = Depends(get_db),
    year: int | None = Query(None, ge=1970, le=9999),
    month: int | None = Query(None, ge=1, le=12),
):
    """Month grid (Sunday-first weeks) with each day's events."""
    today = datetime.now(timezone.utc).date()
    year = year or today.year
    month = month or today.month

    start, end = grid_bounds(year, month)
    result = await db.execute(
        select(Event)
        .where(Event.scheduled_date >= start, Event.scheduled_date < end)
        .order_by(Event.scheduled_date)
    )
    return build_month(year, month, result.scalars().all(), today=today)


@router.post("", response_model=EventRead, status_code=201)
async def create_event(
    payload: EventCreate,
    db: AsyncSession = Depends(get_db),
):
    await ensure_exists(db, Application, payload.application_id)
    await ensure_exists(db, Contact, payload.contact_id)

    event = Event(**payload.model_dump())
    db.add(event)
    await db.flush()
    logger.info("Created %s event %s", event.type, event.id)
    return await get_or_404(db, Event, event.id)


@router.get("/{event_id}", response_model=EventRead)
async def get_event(
    event_id: UUID,
    db: AsyncSession = Depends(get_db),
):
    return await get_or_404(db, Event, event_id)


@router.patch("/{event_id}", response_model=EventRead | EventDeleted)
async def update_event(
    event_id: UUID,
    payload: EventUpdate,
    db: AsyncSession = Depends(get_db),
):
    """Update an event.

    Completing an event stamps completed_at and marks it COMPLETED. Sending a
    next-steps list in which every step is completed removes the event.
    """
    event = await get_or_404(db, Event, event_id)
    changes = payload.changes()

    if "application_id" in changes:
        await ensure_exists(db, Application, changes["application_id"])
    if "contact_id" in changes:
        await ensure_exists(db, Contact, changes["contact_id"])

    if "is_completed" in changes:
        if changes["is_completed"]:
            changes["completed_at"] = datetime.now(timezone.utc)
            changes["status"] = EventStatus.COMPLETED.value
        else:
            changes["completed_at"] = None

    steps = None
    if "next_steps" in changes:
        steps = payload.next_steps
        changes["next_steps"] = dump_steps(steps)

    for key, value in changes.items():
        setattr(event, key, value)
    await db.flush()

    deleted = await _finish_if_done(db, event, steps)
    if deleted:
        return deleted
    return await get_or_404(db, Event, event_id)


@router.post("/{event_id}/next-steps/{index}/toggle", response_model=EventRead | EventDeleted)
async def toggle_next_step(
    event_id: UUID,
    index: int,
    db: AsyncSession = Depends(get_db),
):
    """Flip one next step's completion and store the whole checklist again."""
    event = await get_or_404(db, Event, event_id)
    try:
        steps = toggle_step(load_steps(event.next_steps) or [], index)
    except IndexError as e:
        raise HTTPException(status_code=404, detail=str(e))

    event.next_steps = dump_steps(steps)
    await db.flush()

    deleted = await _finish_if_done(db, event, steps)
    if deleted:
        return deleted
    return await get_or_404(db, Event, event_id)


@router.delete("/{event_id}", response_model=DeleteResponse)
async def delete_event(
    event_id: UUID,
    db: AsyncSession = Depends(get_db),
):
    await delete_or_404(db, Event, event_id)
    logger.info("Deleted event %s", event_id)
    return DeleteResponse()

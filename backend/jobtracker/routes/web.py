"""Web routes for HTML pages."""

from datetime import datetime, timezone
from pathlib import Path

from fastapi import APIRouter, Depends, Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from jobtracker.config import get_settings
from jobtracker.models.base import get_db
from jobtracker.models.event import Event
from jobtracker.models.reminder import Reminder
from jobtracker.services.achievements import compute_achievements
from jobtracker.services.analytics import compute_analytics, load_tracker_data
from jobtracker.services.insights import generate_insights

router = APIRouter()
templates = Jinja2Templates(directory=str(Path(__file__).resolve().parent.parent / "templates"))

DASHBOARD_LIST_SIZE = 5


def _ctx(**extra) -> dict:
    """Common template context."""
    return {"app_name": get_settings().app_name, **extra}


@router.get("/", response_class=HTMLResponse)
async def dashboard(request: Request, db: AsyncSession = Depends(get_db)):
    """Overview counts, tips, badges, upcoming events and open reminders."""
    applications, contacts = await load_tracker_data(db)
    now = datetime.now(timezone.utc)

    events_result = await db.execute(
        select(Event)
        .where(Event.is_completed.is_(False), Event.scheduled_date >= now)
        .order_by(Event.scheduled_date)
        .limit(DASHBOARD_LIST_SIZE)
    )
    reminders_result = await db.execute(
        select(Reminder)
        .where(Reminder.is_completed.is_(False))
        .order_by(Reminder.due_date)
        .limit(DASHBOARD_LIST_SIZE)
    )

    return templates.TemplateResponse(
        request,
        "dashboard.html",
        _ctx(
            overview=compute_analytics(applications, contacts).overview,
            insights=generate_insights(applications, contacts, now=now),
            achievements=compute_achievements(applications, contacts),
            upcoming_events=events_result.scalars().all(),
            open_reminders=reminders_result.scalars().all(),
        ),
    )


@router.get("/analytics", response_class=HTMLResponse)
async def analytics_page(request: Request, db: AsyncSession = Depends(get_db)):
    applications, contacts = await load_tracker_data(db)
    return templates.TemplateResponse(
        request,
        "analytics.html",
        _ctx(analytics=compute_analytics(applications, contacts)),
    )

"""Analytics API endpoints — aggregates, achievements and insights."""

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from jobtracker.models.base import get_db
from jobtracker.schemas.analytics import AchievementsResponse, AnalyticsResponse, Insight
from jobtracker.services.achievements import compute_achievements
from jobtracker.services.analytics import compute_analytics, load_tracker_data
from jobtracker.services.insights import generate_insights

router = APIRouter(prefix="/analytics", tags=["analytics"])


@router.get("", response_model=AnalyticsResponse)
async def get_analytics(db: AsyncSession = Depends(get_db)):
    """Status breakdown, success rates, response time and activity over time."""
    applications, contacts = await load_tracker_data(db)
    return compute_analytics(applications, contacts)


@router.get("/achievements", response_model=AchievementsResponse)
async def get_achievements(db: AsyncSession = Depends(get_db)):
    applications, contacts = await load_tracker_data(db)
    return compute_achievements(applications, contacts)


@router.get("/insights", response_model=list[Insight])
async def get_insights(
    db: AsyncSession = Depends(get_db),
    compact: bool = Query(False, description="Return at most two insights"),
):
    applications, contacts = await load_tracker_data(db)
    return generate_insights(applications, contacts, compact=compact)

"""Interview API endpoints."""

import logging
from datetime import datetime, timezone
from uuid import UUID

from fastapi import APIRouter, Depends, Query
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from jobtracker.dependencies.lookups import delete_or_404, ensure_exists, get_or_404
from jobtracker.models.base import get_db
from jobtracker.models.application import Application
from jobtracker.models.interview import Interview
from jobtracker.schemas.common import DeleteResponse
from jobtracker.schemas.interview import InterviewCreate, InterviewRead, InterviewUpdate

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/interviews", tags=["interviews"])


@router.get("", response_model=list[InterviewRead])
async def list_interviews(
    db: AsyncSession = Depends(get_db),
    skip: int = Query(0, ge=0),
    limit: int = Query(100, ge=1, le=500),
    application_id: UUID | None = Query(None, description="Filter by application"),
    upcoming: bool = Query(False, description="Only interviews from now on"),
):
    """List interviews by date, each with its application and company."""
    query = select(Interview)
    if application_id:
        query = query.where(Interview.application_id == application_id)
    if upcoming:
        query = query.where(Interview.interview_date >= datetime.now(timezone.utc))

    query = query.order_by(Interview.interview_date).offset(skip).limit(limit)
    result = await db.execute(query)
    return result.scalars().all()


@router.post("", response_model=InterviewRead, status_code=201)
async def create_interview(
    payload: InterviewCreate,
    db: AsyncSession = Depends(get_db),
):
    """Schedule an interview round for an application."""
    await ensure_exists(db, Application, payload.application_id)

    interview = Interview(**payload.model_dump())
    db.add(interview)
    await db.flush()
    logger.info("Created interview %s (round %d)", interview.id, interview.round)
    return await get_or_404(db, Interview, interview.id)


@router.get("/{interview_id}", response_model=InterviewRead)
async def get_interview(
    interview_id: UUID,
    db: AsyncSession = Depends(get_db),
):
    return await get_or_404(db, Interview, interview_id)


@router.patch("/{interview_id}", response_model=InterviewRead)
async def update_interview(
    interview_id: UUID,
    payload: InterviewUpdate,
    db: AsyncSession = Depends(get_db),
):
    interview = await get_or_404(db, Interview, interview_id)
    for key, value in payload.changes().items():
        setattr(interview, key, value)
    await db.flush()
    return await get_or_404(db, Interview, interview_id)


@router.delete("/{interview_id}", response_model=DeleteResponse)
async def delete_interview(
    interview_id: UUID,
    db: AsyncSession = Depends(get_db),
):
    await delete_or_404(db, Interview, interview_id)
    logger.info("Deleted interview %s", interview_id)
    return DeleteResponse()

"""Application API endpoints."""

import logging
from datetime import datetime, timezone
from uuid import UUID

from fastapi import APIRouter, Depends, File, HTTPException, Query, UploadFile
from sqlalchemy import func, or_, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from jobtracker.config import Settings, get_settings
from jobtracker.dependencies.lookups import delete_or_404, ensure_exists, get_or_404
from jobtracker.models.base import get_db
from jobtracker.models.application import Application
from jobtracker.models.company import Company
from jobtracker.models.contact import Contact
from jobtracker.models.enums import ApplicationStatus
from jobtracker.models.reminder import Reminder
from jobtracker.schemas.application import (
    ApplicationCreate,
    ApplicationDetail,
    ApplicationListItem,
    ApplicationUpdate,
    ApplicationWithCompany,
)
from jobtracker.schemas.common import DeleteResponse
from jobtracker.schemas.interview import InterviewSummary
from jobtracker.services.file_storage import (
    COVER_LETTER_FOLDER,
    RESUME_FOLDER,
    UploadRejected,
    read_upload,
    store_upload,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/applications", tags=["applications"])


async def _load_detail(db: AsyncSession, application_id: UUID) -> Application:
    return await get_or_404(
        db, Application, application_id,
        selectinload(Application.interviews),
        selectinload(Application.reminders.and_(Reminder.is_completed.is_(False))),
    )


@router.get("", response_model=list[ApplicationListItem])
async def list_applications(
    db: AsyncSession = Depends(get_db),
    skip: int = Query(0, ge=0),
    limit: int = Query(100, ge=1, le=500),
    status: ApplicationStatus | None = Query(None, description="Filter by status"),
    company_id: UUID | None = Query(None, description="Filter by company"),
    search: str | None = Query(None, description="Search position title or company name"),
):
    """List applications, newest first, with company, referrer and interviews."""
    query = select(Application).options(selectinload(Application.interviews))

    if status:
        query = query.where(Application.status == status.value)
    if company_id:
        query = query.where(Application.company_id == company_id)
    if search:
        query = query.join(Application.company).where(
            or_(
                Application.position_title.ilike(f"%{search}%"),
                Company.name.ilike(f"%{search}%"),
            )
        )

    query = query.order_by(Application.created_at.desc()).offset(skip).limit(limit)
    result = await db.execute(query)
    applications = result.scalars().all()

    app_ids = [app.id for app in applications]
    if app_ids:
        reminder_counts_query = (
            select(Reminder.application_id, func.count(Reminder.id).label("count"))
            .where(Reminder.application_id.in_(app_ids))
            .group_by(Reminder.application_id)
        )
        reminder_result = await db.execute(reminder_counts_query)
        reminder_counts = {row.application_id: row.count for row in reminder_result}
    else:
        reminder_counts = {}

    return [
        ApplicationListItem(
            **ApplicationWithCompany.model_validate(app).model_dump(),
            interviews=[InterviewSummary.model_validate(i) for i in app.interviews],
            interview_count=len(app.interviews),
            reminder_count=reminder_counts.get(app.id, 0),
        )
        for app in applications
    ]


@router.post("", response_model=ApplicationWithCompany, status_code=201)
async def create_application(
    payload: ApplicationCreate,
    db: AsyncSession = Depends(get_db),
):
    """Create an application. Creating it as APPLIED stamps the applied date."""
    await ensure_exists(db, Company, payload.company_id)
    await ensure_exists(db, Contact, payload.referred_by_id)

    application = Application(**payload.model_dump())
    if application.status == ApplicationStatus.APPLIED.value and not application.applied_date:
        application.applied_date = datetime.now(timezone.utc)
    db.add(application)
    await db.flush()
    logger.info("Created application %s (%s)", application.id, application.position_title)
    return await get_or_404(db, Application, application.id)


@router.get("/{application_id}", response_model=ApplicationDetail)
async def get_application(
    application_id: UUID,
    db: AsyncSession = Depends(get_db),
):
    """Get an application with its interviews and open reminders."""
    return await _load_detail(db, application_id)


@router.patch("/{application_id}", response_model=ApplicationWithCompany)
async def update_application(
    application_id: UUID,
    payload: ApplicationUpdate,
    db: AsyncSession = Depends(get_db),
):
    """Update an application; moving to APPLIED stamps a missing applied date."""
    application = await get_or_404(db, Application, application_id)
    changes = payload.changes()

    if "company_id" in changes:
        await ensure_exists(db, Company, changes["company_id"])
    if "referred_by_id" in changes:
        await ensure_exists(db, Contact, changes["referred_by_id"])

    if (
        changes.get("status") == ApplicationStatus.APPLIED.value
        and not changes.get("applied_date")
        and not application.applied_date
    ):
        changes["applied_date"] = datetime.now(timezone.utc)

    for key, value in changes.items():
        setattr(application, key, value)
    await db.flush()
    return await get_or_404(db, Application, application_id)


@router.delete("/{application_id}", response_model=DeleteResponse)
async def delete_application(
    application_id: UUID,
    db: AsyncSession = Depends(get_db),
):
    """Delete an application with its interviews and reminders."""
    await delete_or_404(db, Application, application_id)
    logger.info("Deleted application %s", application_id)
    return DeleteResponse()


@router.post("/{application_id}/documents", response_model=ApplicationWithCompany)
async def upload_documents(
    application_id: UUID,
    resume: UploadFile | None = File(None),
    cover_letter: UploadFile | None = File(None),
    db: AsyncSession = Depends(get_db),
    settings: Settings = Depends(get_settings),
):
    """Attach a resume and/or cover letter; only the stored path is kept."""
    application = await get_or_404(db, Application, application_id)
    if not resume and not cover_letter:
        raise HTTPException(status_code=400, detail="Provide a resume or cover_letter file")

    max_bytes = settings.max_upload_mb * 1024 * 1024
    files = [
        (upload, folder)
        for upload, folder in ((resume, RESUME_FOLDER), (cover_letter, COVER_LETTER_FOLDER))
        if upload
    ]
    # Both files are checked before either is written
    try:
        contents = [await read_upload(upload, folder, max_bytes) for upload, folder in files]
    except UploadRejected as e:
        logger.warning("Rejected upload for application %s: %s", application_id, e)
        raise HTTPException(status_code=400, detail=str(e))

    for (upload, folder), content in zip(files, contents):
        path = await store_upload(upload.filename or "", content, folder, settings.upload_dir)
        if folder == RESUME_FOLDER:
            application.resume_path = path
        else:
            application.cover_letter_path = path

    await db.flush()
    return await get_or_404(db, Application, application_id)

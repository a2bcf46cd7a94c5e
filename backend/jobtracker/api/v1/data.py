"""Data export/import API endpoints."""

import logging
from datetime import datetime, timezone
from typing import Any

from fastapi import APIRouter, Body, Depends, HTTPException
from fastapi.responses import Response
from pydantic import ValidationError
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from jobtracker.models.base import get_db
from jobtracker.models.application import Application
from jobtracker.schemas.analytics import ExportBundle, ImportResult
from jobtracker.services.data_transfer import (
    InvalidBundle,
    applications_csv,
    export_bundle,
    import_bundle,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/data", tags=["data"])


@router.get("/export", response_model=ExportBundle)
async def export_data(db: AsyncSession = Depends(get_db)):
    """JSON backup of companies, contacts, applications, interviews, events, reminders and email templates."""
    bundle = await export_bundle(db)
    logger.info("Exported %d applications", len(bundle.data.applications))
    return bundle


@router.get("/export/applications.csv")
async def export_applications_csv(db: AsyncSession = Depends(get_db)):
    result = await db.execute(select(Application).order_by(Application.created_at.desc()))
    content = applications_csv(result.scalars().all())
    filename = f"applications-{datetime.now(timezone.utc).date().isoformat()}.csv"
    return Response(
        content=content,
        media_type="text/csv",
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )


@router.post("/import", response_model=ImportResult)
async def import_data(
    payload: dict[str, Any] = Body(...),
    db: AsyncSession = Depends(get_db),
):
    """Restore a backup. Records whose ids already exist are skipped."""
    try:
        bundle = ExportBundle.model_validate(payload)
    except ValidationError as e:
        logger.warning("Rejected import bundle: %d validation error(s)", e.error_count())
        raise HTTPException(status_code=400, detail="Invalid backup file: version and data are required")

    try:
        results = await import_bundle(db, bundle)
    except InvalidBundle as e:
        logger.warning("Rejected import bundle: %s", e)
        raise HTTPException(status_code=400, detail=str(e))
    return ImportResult(results=results)

"""Email template API endpoints."""

import logging
from uuid import UUID

from fastapi import APIRouter, Depends, Query
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from jobtracker.dependencies.lookups import delete_or_404, get_or_404
from jobtracker.models.base import get_db
from jobtracker.models.email_template import EmailTemplate
from jobtracker.models.enums import EmailTemplateCategory
from jobtracker.schemas.common import DeleteResponse
from jobtracker.schemas.email_template import (
    EmailTemplateCreate,
    EmailTemplateRead,
    EmailTemplateUpdate,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/email-templates", tags=["email-templates"])

LABEL = "Email template"


@router.get("", response_model=list[EmailTemplateRead])
async def list_email_templates(
    db: AsyncSession = Depends(get_db),
    category: EmailTemplateCategory | None = Query(None, description="Filter by category"),
):
    """List templates alphabetically."""
    query = select(EmailTemplate)
    if category:
        query = query.where(EmailTemplate.category == category.value)
    result = await db.execute(query.order_by(EmailTemplate.name))
    return result.scalars().all()


@router.post("", response_model=EmailTemplateRead, status_code=201)
async def create_email_template(
    payload: EmailTemplateCreate,
    db: AsyncSession = Depends(get_db),
):
    template = EmailTemplate(**payload.model_dump())
    db.add(template)
    await db.flush()
    logger.info("Created email template %s (%s)", template.id, template.name)
    return await get_or_404(db, EmailTemplate, template.id, name=LABEL)


@router.get("/{template_id}", response_model=EmailTemplateRead)
async def get_email_template(
    template_id: UUID,
    db: AsyncSession = Depends(get_db),
):
    return await get_or_404(db, EmailTemplate, template_id, name=LABEL)


@router.patch("/{template_id}", response_model=EmailTemplateRead)
async def update_email_template(
    template_id: UUID,
    payload: EmailTemplateUpdate,
    db: AsyncSession = Depends(get_db),
):
    template = await get_or_404(db, EmailTemplate, template_id, name=LABEL)
    for key, value in payload.changes().items():
        setattr(template, key, value)
    await db.flush()
    return await get_or_404(db, EmailTemplate, template_id, name=LABEL)


@router.delete("/{template_id}", response_model=DeleteResponse)
async def delete_email_template(
    template_id: UUID,
    db: AsyncSession = Depends(get_db),
):
    await delete_or_404(db, EmailTemplate, template_id, name=LABEL)
    return DeleteResponse()

"""Resume template and section API endpoints."""

import logging
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, Query
from fastapi.responses import PlainTextResponse
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from jobtracker.dependencies.lookups import delete_or_404, ensure_exists, get_or_404
from jobtracker.models.base import get_db
from jobtracker.models.resume_template import ResumeSection, ResumeTemplate
from jobtracker.schemas.common import DeleteResponse
from jobtracker.schemas.resume_template import (
    ResumeSectionCreate,
    ResumeSectionRead,
    ResumeSectionUpdate,
    ResumeTemplateCreate,
    ResumeTemplateRead,
    ResumeTemplateUpdate,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/resume-templates", tags=["resume-templates"])
sections_router = APIRouter(prefix="/resume-sections", tags=["resume-templates"])

DUPLICATE_SECTION = "A section with this name already exists in this template"


def _template_read(template: ResumeTemplate) -> ResumeTemplateRead:
    read = ResumeTemplateRead.model_validate(template)
    read.section_count = len(template.sections)
    return read


async def _load_template(db: AsyncSession, template_id: UUID) -> ResumeTemplate:
    return await get_or_404(
        db, ResumeTemplate, template_id, selectinload(ResumeTemplate.sections), name="Resume template",
    )


def render_latex(template: ResumeTemplate) -> str:
    """Concatenate the template's section LaTeX in section order."""
    return "\n\n".join(section.latex_code for section in template.sections if section.latex_code)


# --- Templates ---

@router.get("", response_model=list[ResumeTemplateRead])
async def list_templates(
    db: AsyncSession = Depends(get_db),
    skip: int = Query(0, ge=0),
    limit: int = Query(100, ge=1, le=500),
):
    """List templates, most recently updated first, with ordered sections."""
    query = (
        select(ResumeTemplate)
        .options(selectinload(ResumeTemplate.sections))
        .order_by(ResumeTemplate.updated_at.desc())
        .offset(skip)
        .limit(limit)
    )
    result = await db.execute(query)
    return [_template_read(t) for t in result.scalars().all()]


@router.post("", response_model=ResumeTemplateRead, status_code=201)
async def create_template(
    payload: ResumeTemplateCreate,
    db: AsyncSession = Depends(get_db),
):
    template = ResumeTemplate(**payload.model_dump())
    db.add(template)
    await db.flush()
    logger.info("Created resume template %s (%s)", template.id, template.name)
    return _template_read(await _load_template(db, template.id))


@router.get("/{template_id}", response_model=ResumeTemplateRead)
async def get_template(
    template_id: UUID,
    db: AsyncSession = Depends(get_db),
):
    return _template_read(await _load_template(db, template_id))


@router.get("/{template_id}/latex", response_class=PlainTextResponse)
async def get_template_latex(
    template_id: UUID,
    db: AsyncSession = Depends(get_db),
):
    """The full LaTeX document assembled from the template's sections."""
    return render_latex(await _load_template(db, template_id))


@router.patch("/{template_id}", response_model=ResumeTemplateRead)
async def update_template(
    template_id: UUID,
    payload: ResumeTemplateUpdate,
    db: AsyncSession = Depends(get_db),
):
    template = await _load_template(db, template_id)
    for key, value in payload.changes().items():
        setattr(template, key, value)
    await db.flush()
    return _template_read(await _load_template(db, template_id))


@router.delete("/{template_id}", response_model=DeleteResponse)
async def delete_template(
    template_id: UUID,
    db: AsyncSession = Depends(get_db),
):
    """Delete a template and all of its sections."""
    await delete_or_404(db, ResumeTemplate, template_id, name="Resume template")
    logger.info("Deleted resume template %s", template_id)
    return DeleteResponse()


# --- Sections ---

async def _check_unique_name(
    db: AsyncSession, template_id: UUID, name: str, section_id: UUID | None = None,
) -> None:
    query = select(ResumeSection.id).where(
        ResumeSection.template_id == template_id,
        ResumeSection.name == name,
    )
    if section_id:
        query = query.where(ResumeSection.id != section_id)
    if (await db.execute(query)).first():
        logger.warning("Duplicate section name %r in template %s", name, template_id)
        raise HTTPException(status_code=400, detail=DUPLICATE_SECTION)


@sections_router.post("", response_model=ResumeSectionRead, status_code=201)
async def create_section(
    payload: ResumeSectionCreate,
    db: AsyncSession = Depends(get_db),
):
    await ensure_exists(db, ResumeTemplate, payload.template_id, name="Resume template")
    await _check_unique_name(db, payload.template_id, payload.name)

    section = ResumeSection(**payload.model_dump())
    db.add(section)
    await db.flush()
    return await get_or_404(db, ResumeSection, section.id, name="Resume section")


@sections_router.get("/{section_id}", response_model=ResumeSectionRead)
async def get_section(
    section_id: UUID,
    db: AsyncSession = Depends(get_db),
):
    return await get_or_404(db, ResumeSection, section_id, name="Resume section")


@sections_router.patch("/{section_id}", response_model=ResumeSectionRead)
async def update_section(
    section_id: UUID,
    payload: ResumeSectionUpdate,
    db: AsyncSession = Depends(get_db),
):
    section = await get_or_404(db, ResumeSection, section_id, name="Resume section")
    changes = payload.changes()
    if "name" in changes and changes["name"] != section.name:
        await _check_unique_name(db, section.template_id, changes["name"], section_id)

    for key, value in changes.items():
        setattr(section, key, value)
    await db.flush()
    return await get_or_404(db, ResumeSection, section_id, name="Resume section")


@sections_router.delete("/{section_id}", response_model=DeleteResponse)
async def delete_section(
    section_id: UUID,
    db: AsyncSession = Depends(get_db),
):
    await delete_or_404(db, ResumeSection, section_id, name="Resume section")
    return DeleteResponse()

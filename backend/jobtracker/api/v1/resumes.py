"""Resume builder API endpoints: resumes and their ordered entries."""

import logging
from uuid import UUID

from fastapi import APIRouter, Depends, Query
from pydantic import BaseModel
from sqlalchemy import select, update
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from jobtracker.dependencies.lookups import delete_or_404, ensure_exists, get_or_404
from jobtracker.models.base import get_db
from jobtracker.models.resume import Education, Experience, Project, Resume, SkillCategory
from jobtracker.schemas.common import DeleteResponse, PartialUpdate
from jobtracker.schemas.resume import (
    EducationCreate,
    EducationRead,
    EducationUpdate,
    ExperienceCreate,
    ExperienceRead,
    ExperienceUpdate,
    ProjectCreate,
    ProjectRead,
    ProjectUpdate,
    ResumeCreate,
    ResumeRead,
    ResumeUpdate,
    SkillCategoryCreate,
    SkillCategoryRead,
    SkillCategoryUpdate,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/resumes", tags=["resumes"])

_ENTRIES = (
    selectinload(Resume.experiences),
    selectinload(Resume.projects),
    selectinload(Resume.skills),
    selectinload(Resume.education),
)


async def _clear_other_defaults(db: AsyncSession, resume_id: UUID) -> None:
    """Only one resume may be the default."""
    await db.execute(
        update(Resume)
        .where(Resume.id != resume_id, Resume.is_default.is_(True))
        .values(is_default=False)
    )


@router.get("", response_model=list[ResumeRead])
async def list_resumes(
    db: AsyncSession = Depends(get_db),
    skip: int = Query(0, ge=0),
    limit: int = Query(100, ge=1, le=500),
):
    """List resumes, most recently updated first, with all entries."""
    query = (
        select(Resume)
        .options(*_ENTRIES)
        .order_by(Resume.updated_at.desc())
        .offset(skip)
        .limit(limit)
    )
    result = await db.execute(query)
    return result.scalars().all()


@router.post("", response_model=ResumeRead, status_code=201)
async def create_resume(
    payload: ResumeCreate,
    db: AsyncSession = Depends(get_db),
):
    resume = Resume(**payload.model_dump())
    db.add(resume)
    await db.flush()
    if resume.is_default:
        await _clear_other_defaults(db, resume.id)
    logger.info("Created resume %s (%s)", resume.id, resume.name)
    return await get_or_404(db, Resume, resume.id, *_ENTRIES)


@router.get("/{resume_id}", response_model=ResumeRead)
async def get_resume(
    resume_id: UUID,
    db: AsyncSession = Depends(get_db),
):
    return await get_or_404(db, Resume, resume_id, *_ENTRIES)


@router.patch("/{resume_id}", response_model=ResumeRead)
async def update_resume(
    resume_id: UUID,
    payload: ResumeUpdate,
    db: AsyncSession = Depends(get_db),
):
    """Update a resume; marking it default clears the flag on the others."""
    resume = await get_or_404(db, Resume, resume_id)
    changes = payload.changes()
    for key, value in changes.items():
        setattr(resume, key, value)
    await db.flush()
    if changes.get("is_default"):
        await _clear_other_defaults(db, resume_id)
    return await get_or_404(db, Resume, resume_id, *_ENTRIES)


@router.delete("/{resume_id}", response_model=DeleteResponse)
async def delete_resume(
    resume_id: UUID,
    db: AsyncSession = Depends(get_db),
):
    """Delete a resume and all of its entries."""
    await delete_or_404(db, Resume, resume_id)
    logger.info("Deleted resume %s", resume_id)
    return DeleteResponse()


# --- Entries ---

def entry_router(
    prefix: str,
    model: type,
    create_schema: type[BaseModel],
    update_schema: type[PartialUpdate],
    read_schema: type[BaseModel],
    label: str,
) -> APIRouter:
    """CRUD router for one kind of resume entry, ordered by position."""
    entries = APIRouter(prefix=prefix, tags=["resumes"])

    @entries.get("", response_model=list[read_schema], name=f"list_{model.__tablename__}")
    async def list_entries(
        db: AsyncSession = Depends(get_db),
        resume_id: UUID | None = Query(None, description="Filter by resume"),
    ):
        query = select(model)
        if resume_id:
            query = query.where(model.resume_id == resume_id)
        result = await db.execute(query.order_by(model.order, model.created_at))
        return result.scalars().all()

    @entries.post("", response_model=read_schema, status_code=201, name=f"create_{model.__tablename__}")
    async def create_entry(
        payload: create_schema,
        db: AsyncSession = Depends(get_db),
    ):
        await ensure_exists(db, Resume, payload.resume_id)
        entry = model(**payload.model_dump())
        db.add(entry)
        await db.flush()
        return await get_or_404(db, model, entry.id, name=label)

    @entries.patch("/{entry_id}", response_model=read_schema, name=f"update_{model.__tablename__}")
    async def update_entry(
        entry_id: UUID,
        payload: update_schema,
        db: AsyncSession = Depends(get_db),
    ):
        entry = await get_or_404(db, model, entry_id, name=label)
        for key, value in payload.changes().items():
            setattr(entry, key, value)
        await db.flush()
        return await get_or_404(db, model, entry_id, name=label)

    @entries.delete("/{entry_id}", response_model=DeleteResponse, name=f"delete_{model.__tablename__}")
    async def delete_entry(
        entry_id: UUID,
        db: AsyncSession = Depends(get_db),
    ):
        await delete_or_404(db, model, entry_id, name=label)
        return DeleteResponse()

    return entries


experiences_router = entry_router(
    "/experiences", Experience, ExperienceCreate, ExperienceUpdate, ExperienceRead, "Experience",
)
projects_router = entry_router(
    "/projects", Project, ProjectCreate, ProjectUpdate, ProjectRead, "Project",
)
skills_router = entry_router(
    "/skills", SkillCategory, SkillCategoryCreate, SkillCategoryUpdate, SkillCategoryRead, "Skill category",
)
education_router = entry_router(
    "/education", Education, EducationCreate, EducationUpdate, EducationRead, "Education",
)

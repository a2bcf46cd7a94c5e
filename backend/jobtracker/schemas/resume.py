"""Pydantic schemas for the resume builder (Resume and its entries)."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from jobtracker.schemas.common import PartialUpdate, UTCDateTime


# --- Entries ---

class EntryRead(BaseModel):
    """Fields every stored entry carries."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    resume_id: UUID
    order: int
    created_at: datetime
    updated_at: datetime


class ExperienceBase(BaseModel):
    company: str = Field(min_length=1, max_length=255)
    position: str = Field(min_length=1, max_length=255)
    location: str | None = None
    start_date: str | None = None
    end_date: str | None = None
    bullet_points: str | None = None


class ExperienceCreate(ExperienceBase):
    resume_id: UUID
    order: int = Field(0, ge=0)


class ExperienceUpdate(PartialUpdate):
    required_fields = ("company", "position", "order")

    company: str | None = Field(None, min_length=1, max_length=255)
    position: str | None = Field(None, min_length=1, max_length=255)
    location: str | None = None
    start_date: str | None = None
    end_date: str | None = None
    bullet_points: str | None = None
    order: int | None = Field(None, ge=0)


class ExperienceRead(EntryRead, ExperienceBase):
    pass


class ProjectBase(BaseModel):
    name: str = Field(min_length=1, max_length=255)
    description: str | None = None
    technologies: str | None = None
    github_url: str | None = None
    live_url: str | None = None
    start_date: str | None = None
    end_date: str | None = None
    bullet_points: str | None = None


class ProjectCreate(ProjectBase):
    resume_id: UUID
    order: int = Field(0, ge=0)


class ProjectUpdate(PartialUpdate):
    required_fields = ("name", "order")

    name: str | None = Field(None, min_length=1, max_length=255)
    description: str | None = None
    technologies: str | None = None
    github_url: str | None = None
    live_url: str | None = None
    start_date: str | None = None
    end_date: str | None = None
    bullet_points: str | None = None
    order: int | None = Field(None, ge=0)


class ProjectRead(EntryRead, ProjectBase):
    pass


class SkillCategoryBase(BaseModel):
    name: str = Field(min_length=1, max_length=255)
    skills: str | None = None


class SkillCategoryCreate(SkillCategoryBase):
    resume_id: UUID
    order: int = Field(0, ge=0)


class SkillCategoryUpdate(PartialUpdate):
    required_fields = ("name", "order")

    name: str | None = Field(None, min_length=1, max_length=255)
    skills: str | None = None
    order: int | None = Field(None, ge=0)


class SkillCategoryRead(EntryRead, SkillCategoryBase):
    pass


class EducationBase(BaseModel):
    school: str = Field(min_length=1, max_length=255)
    degree: str | None = None
    field: str | None = None
    location: str | None = None
    start_date: str | None = None
    end_date: str | None = None
    gpa: str | None = None
    achievements: str | None = None


class EducationCreate(EducationBase):
    resume_id: UUID
    order: int = Field(0, ge=0)


class EducationUpdate(PartialUpdate):
    required_fields = ("school", "order")

    school: str | None = Field(None, min_length=1, max_length=255)
    degree: str | None = None
    field: str | None = None
    location: str | None = None
    start_date: str | None = None
    end_date: str | None = None
    gpa: str | None = None
    achievements: str | None = None
    order: int | None = Field(None, ge=0)


class EducationRead(EntryRead, EducationBase):
    pass


# --- Resume ---

class ResumeBase(BaseModel):
    """Base fields for a resume."""

    name: str = Field(min_length=1, max_length=255)
    description: str | None = None
    target_role: str | None = None
    is_default: bool = False


class ResumeCreate(ResumeBase):
    """Fields for creating a resume."""


class ResumeUpdate(PartialUpdate):
    """Fields for updating a resume (all optional)."""

    required_fields = ("name", "is_default")

    name: str | None = Field(None, min_length=1, max_length=255)
    description: str | None = None
    target_role: str | None = None
    is_default: bool | None = None
    last_used_at: UTCDateTime | None = None


class ResumeRead(ResumeBase):
    """Resume with all entries, each list ordered by position."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    last_used_at: datetime | None = None
    created_at: datetime
    updated_at: datetime
    experiences: list[ExperienceRead] = []
    projects: list[ProjectRead] = []
    skills: list[SkillCategoryRead] = []
    education: list[EducationRead] = []

"""Pydantic schemas for ResumeTemplate and ResumeSection models."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from jobtracker.schemas.common import PartialUpdate


class ResumeSectionBase(BaseModel):
    """Base fields for a resume section."""

    name: str = Field(min_length=1, max_length=255)
    order: int = Field(ge=0)
    latex_code: str = ""
    notes: str | None = None


class ResumeSectionCreate(ResumeSectionBase):
    """Fields for creating a section."""

    template_id: UUID


class ResumeSectionUpdate(PartialUpdate):
    """Fields for updating a section (all optional)."""

    required_fields = ("name", "order", "latex_code")

    name: str | None = Field(None, min_length=1, max_length=255)
    order: int | None = Field(None, ge=0)
    latex_code: str | None = None
    notes: str | None = None


class ResumeSectionRead(ResumeSectionBase):
    """Full section output."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    template_id: UUID
    created_at: datetime
    updated_at: datetime


class ResumeTemplateBase(BaseModel):
    """Base fields for a resume template."""

    name: str = Field(min_length=1, max_length=255)
    description: str | None = None


class ResumeTemplateCreate(ResumeTemplateBase):
    """Fields for creating a template."""


class ResumeTemplateUpdate(PartialUpdate):
    """Fields for updating a template (all optional)."""

    required_fields = ("name",)

    name: str | None = Field(None, min_length=1, max_length=255)
    description: str | None = None


class ResumeTemplateRead(ResumeTemplateBase):
    """Template with its ordered sections."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    created_at: datetime
    updated_at: datetime
    sections: list[ResumeSectionRead] = []
    section_count: int = 0

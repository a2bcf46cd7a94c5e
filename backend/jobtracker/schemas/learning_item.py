"""Pydantic schemas for LearningItem model."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from jobtracker.models.enums import LearningPriority, LearningStatus, LearningType
from jobtracker.schemas.common import PartialUpdate, UTCDateTime


class LearningItemBase(BaseModel):
    """Base fields for learning item."""

    model_config = ConfigDict(use_enum_values=True)

    type: LearningType = LearningType.CONCEPT
    title: str = Field(min_length=1, max_length=255)
    description: str | None = None
    resource_url: str | None = None
    additional_links: str | None = None
    category: str | None = None
    tags: str | None = None
    status: LearningStatus = LearningStatus.TO_LEARN
    priority: LearningPriority = LearningPriority.MEDIUM
    progress: int = Field(0, ge=0, le=100)
    target_date: UTCDateTime | None = None
    notes: str | None = None


class LearningItemCreate(LearningItemBase):
    """Fields for creating a learning item."""


class LearningItemUpdate(PartialUpdate):
    """Fields for updating a learning item (all optional)."""

    required_fields = ("type", "title", "status", "priority", "progress")

    type: LearningType | None = None
    title: str | None = Field(None, min_length=1, max_length=255)
    description: str | None = None
    resource_url: str | None = None
    additional_links: str | None = None
    category: str | None = None
    tags: str | None = None
    status: LearningStatus | None = None
    priority: LearningPriority | None = None
    progress: int | None = Field(None, ge=0, le=100)
    target_date: UTCDateTime | None = None
    started_at: UTCDateTime | None = None
    notes: str | None = None
    key_takeaways: str | None = None


class LearningItemRead(LearningItemBase):
    """Full learning item output."""

    model_config = ConfigDict(from_attributes=True, use_enum_values=True)

    id: UUID
    key_takeaways: str | None = None
    started_at: datetime | None = None
    completed_at: datetime | None = None
    created_at: datetime
    updated_at: datetime

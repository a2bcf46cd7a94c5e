"""Pydantic schemas for Resource model."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from jobtracker.models.enums import ResourceType
from jobtracker.schemas.common import PartialUpdate


class ResourceBase(BaseModel):
    """Base fields for resource."""

    model_config = ConfigDict(use_enum_values=True)

    title: str = Field(min_length=1, max_length=255)
    description: str | None = None
    url: str | None = None
    type: ResourceType | None = None
    category: str | None = None
    tags: str | None = None
    parent_id: UUID | None = None
    is_completed: bool = False
    is_favorite: bool = False
    notes: str | None = None


class ResourceCreate(ResourceBase):
    """Fields for creating a resource."""


class ResourceUpdate(PartialUpdate):
    """Fields for updating a resource (all optional)."""

    required_fields = ("title", "is_completed", "is_favorite")

    title: str | None = Field(None, min_length=1, max_length=255)
    description: str | None = None
    url: str | None = None
    type: ResourceType | None = None
    category: str | None = None
    tags: str | None = None
    parent_id: UUID | None = None
    is_completed: bool | None = None
    is_favorite: bool | None = None
    notes: str | None = None


class ResourceRead(ResourceBase):
    """Full resource output."""

    model_config = ConfigDict(from_attributes=True, use_enum_values=True)

    id: UUID
    created_at: datetime
    updated_at: datetime


class ResourceSummary(BaseModel):
    """Minimal resource info for parent/child references."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    title: str
    url: str | None = None
    type: str | None = None
    is_completed: bool = False


class ResourceWithRelations(ResourceRead):
    """Resource with its parent, sub-resources and completion percentage."""

    parent: ResourceSummary | None = None
    sub_resources: list[ResourceSummary] = []
    progress: int = 0

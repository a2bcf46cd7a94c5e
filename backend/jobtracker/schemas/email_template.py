"""Pydantic schemas for EmailTemplate model."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from jobtracker.models.enums import EmailTemplateCategory
from jobtracker.schemas.common import PartialUpdate


class EmailTemplateBase(BaseModel):
    model_config = ConfigDict(use_enum_values=True)

    name: str = Field(min_length=1, max_length=255)
    subject: str = Field(min_length=1, max_length=500)
    body: str = Field(min_length=1)
    category: EmailTemplateCategory


class EmailTemplateCreate(EmailTemplateBase):
    pass


class EmailTemplateUpdate(PartialUpdate):
    required_fields = ("name", "subject", "body", "category")

    name: str | None = Field(None, min_length=1, max_length=255)
    subject: str | None = Field(None, min_length=1, max_length=500)
    body: str | None = Field(None, min_length=1)
    category: EmailTemplateCategory | None = None


class EmailTemplateRead(EmailTemplateBase):
    model_config = ConfigDict(from_attributes=True, use_enum_values=True)

    id: UUID
    created_at: datetime
    updated_at: datetime

"""Pydantic schemas for Reminder model."""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from jobtracker.models.enums import ReminderType
from jobtracker.schemas.common import PartialUpdate, UTCDateTime

if TYPE_CHECKING:
    from jobtracker.schemas.application import ApplicationBrief


class ReminderCreate(BaseModel):
    """Fields for creating a reminder."""

    model_config = ConfigDict(use_enum_values=True)

    application_id: UUID | None = None
    title: str = Field(min_length=1, max_length=255)
    description: str | None = None
    due_date: UTCDateTime
    type: ReminderType = ReminderType.FOLLOW_UP


class ReminderUpdate(PartialUpdate):
    """Fields for updating a reminder (all optional)."""

    required_fields = ("title", "due_date", "type", "is_completed")

    application_id: UUID | None = None
    title: str | None = Field(None, min_length=1, max_length=255)
    description: str | None = None
    due_date: UTCDateTime | None = None
    type: ReminderType | None = None
    is_completed: bool | None = None


class ReminderSummary(BaseModel):
    """Reminder info for nesting under an application."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    title: str
    due_date: datetime
    type: str
    is_completed: bool


class ReminderRead(ReminderSummary):
    """Full reminder output with its application."""

    application_id: UUID | None = None
    description: str | None = None
    completed_at: datetime | None = None
    created_at: datetime
    updated_at: datetime
    application: "ApplicationBrief | None" = None

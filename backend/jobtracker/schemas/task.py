"""Pydantic schemas for Task model."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from jobtracker.schemas.common import PartialUpdate, UTCDateTime


class TaskCreate(BaseModel):
    """Fields for creating a task or a subtask."""

    title: str = Field(min_length=1, max_length=255)
    notes: str | None = None
    due_date: UTCDateTime
    parent_task_id: UUID | None = None


class TaskUpdate(PartialUpdate):
    """Fields for updating a task (all optional)."""

    required_fields = ("title", "due_date", "is_completed")

    title: str | None = Field(None, min_length=1, max_length=255)
    notes: str | None = None
    due_date: UTCDateTime | None = None
    is_completed: bool | None = None


class SubtaskRead(BaseModel):
    """Task output without nested subtasks."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    parent_task_id: UUID | None = None
    title: str
    notes: str | None = None
    due_date: datetime
    is_completed: bool = False
    completed_at: datetime | None = None
    created_at: datetime
    updated_at: datetime


class TaskRead(SubtaskRead):
    """Top-level task with its subtasks."""

    subtasks: list[SubtaskRead] = []

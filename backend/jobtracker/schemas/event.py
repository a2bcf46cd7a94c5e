"""Pydantic schemas for Event model."""

from __future__ import annotations

from datetime import date, datetime
from typing import TYPE_CHECKING
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, field_validator

from jobtracker.models.enums import EventStatus, EventType
from jobtracker.schemas.common import PartialUpdate, UTCDateTime
from jobtracker.services.next_steps import NextStep, load_steps, parse_steps

if TYPE_CHECKING:
    from jobtracker.schemas.application import ApplicationBrief
    from jobtracker.schemas.contact import ContactBrief


class EventBase(BaseModel):
    """Base fields for event."""

    model_config = ConfigDict(use_enum_values=True)

    type: EventType = EventType.REMINDER
    application_id: UUID | None = None
    contact_id: UUID | None = None
    title: str = Field(min_length=1, max_length=255)
    description: str | None = None
    duration: int | None = Field(None, ge=0)
    round: int | None = Field(None, ge=1)
    interviewers: str | None = None
    location: str | None = None
    meeting_link: str | None = None
    status: EventStatus = EventStatus.PENDING
    notes: str | None = None


class EventCreate(EventBase):
    """Fields for creating an event."""

    scheduled_date: UTCDateTime


class EventUpdate(PartialUpdate):
    """Fields for updating an event (all optional)."""

    required_fields = ("type", "title", "scheduled_date", "status", "is_completed")

    type: EventType | None = None
    application_id: UUID | None = None
    contact_id: UUID | None = None
    title: str | None = Field(None, min_length=1, max_length=255)
    description: str | None = None
    scheduled_date: UTCDateTime | None = None
    duration: int | None = Field(None, ge=0)
    round: int | None = Field(None, ge=1)
    interviewers: str | None = None
    location: str | None = None
    meeting_link: str | None = None
    status: EventStatus | None = None
    is_completed: bool | None = None
    feedback: str | None = None
    notes: str | None = None
    outcome: str | None = None
    next_steps: list[NextStep] | None = None
    next_steps_due_date: UTCDateTime | None = None

    @field_validator("next_steps", mode="before")
    @classmethod
    def parse_next_steps(cls, value):
        # Older clients send the serialised array
        if isinstance(value, str):
            return parse_steps(value) if value else None
        return value


class EventRead(EventBase):
    """Full event output with linked application and contact."""

    model_config = ConfigDict(from_attributes=True, use_enum_values=True)

    id: UUID
    scheduled_date: datetime
    is_completed: bool = False
    completed_at: datetime | None = None
    feedback: str | None = None
    outcome: str | None = None
    next_steps: list[NextStep] | None = None
    next_steps_due_date: datetime | None = None
    created_at: datetime
    updated_at: datetime
    application: "ApplicationBrief | None" = None
    contact: "ContactBrief | None" = None

    @field_validator("next_steps", mode="before")
    @classmethod
    def parse_next_steps(cls, value):
        if isinstance(value, str):
            return load_steps(value)
        return value


class EventDeleted(BaseModel):
    """Returned when an update completes every next step and removes the event."""

    success: bool = True
    deleted: bool = True
    message: str


class CalendarEvent(BaseModel):
    """Compact event info for a calendar cell."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    title: str
    type: str
    status: str
    scheduled_date: datetime
    is_completed: bool


class CalendarDay(BaseModel):
    day: date
    in_month: bool
    is_today: bool = False
    events: list[CalendarEvent] = []


class CalendarMonth(BaseModel):
    year: int
    month: int
    weeks: list[list[CalendarDay]]

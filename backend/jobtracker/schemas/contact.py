"""Pydantic schemas for Contact and ContactInteraction models."""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from jobtracker.models.enums import ContactStatus
from jobtracker.schemas.common import PartialUpdate, UTCDateTime

if TYPE_CHECKING:
    from jobtracker.schemas.application import ApplicationBrief
    from jobtracker.schemas.company import CompanySummary


class ContactBase(BaseModel):
    """Base fields for contact."""

    model_config = ConfigDict(use_enum_values=True)

    name: str = Field(min_length=1, max_length=255)
    position: str | None = None
    linkedin_url: str | None = None
    email: str | None = None
    phone: str | None = None
    status: ContactStatus = ContactStatus.REQUEST_SENT
    can_refer: bool = False
    willing_to_refer: bool = False
    notes: str | None = None
    conversation_notes: str | None = None


class ContactCreate(ContactBase):
    """Fields for creating a contact."""

    company_id: UUID
    messaged_date: UTCDateTime | None = None
    last_interaction_date: UTCDateTime | None = None


class ContactUpdate(PartialUpdate):
    """Fields for updating a contact (all optional)."""

    required_fields = ("company_id", "name", "status", "can_refer", "willing_to_refer")

    company_id: UUID | None = None
    name: str | None = Field(None, min_length=1, max_length=255)
    position: str | None = None
    linkedin_url: str | None = None
    email: str | None = None
    phone: str | None = None
    status: ContactStatus | None = None
    can_refer: bool | None = None
    willing_to_refer: bool | None = None
    messaged_date: UTCDateTime | None = None
    last_interaction_date: UTCDateTime | None = None
    notes: str | None = None
    conversation_notes: str | None = None


class ContactRead(ContactBase):
    """Full contact output."""

    model_config = ConfigDict(from_attributes=True, use_enum_values=True)

    id: UUID
    company_id: UUID
    messaged_date: datetime | None = None
    last_interaction_date: datetime | None = None
    created_at: datetime
    updated_at: datetime


class ContactSummary(BaseModel):
    """Minimal contact info for nested responses."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    company_id: UUID
    name: str
    position: str | None = None
    email: str | None = None
    linkedin_url: str | None = None
    status: str
    can_refer: bool = False
    willing_to_refer: bool = False


class ContactBrief(ContactSummary):
    """Contact summary with its company."""

    company: "CompanySummary | None" = None


class InteractionCreate(BaseModel):
    """Fields for logging an interaction with a contact."""

    interaction_type: str = Field("MESSAGE", min_length=1, max_length=50)
    interaction_date: UTCDateTime | None = None
    notes: str | None = None


class InteractionRead(BaseModel):
    """Interaction output."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    contact_id: UUID
    interaction_type: str
    interaction_date: datetime
    notes: str | None = None
    created_at: datetime


class ContactWithCompany(ContactRead):
    """Contact with embedded company."""

    company: "CompanySummary | None" = None


class ContactListItem(ContactWithCompany):
    """Contact row for list views, with recent interactions."""

    interactions: list[InteractionRead] = []
    referred_application_count: int = 0
    interaction_count: int = 0


class ContactDetail(ContactWithCompany):
    """Contact with all interactions and the applications they referred."""

    interactions: list[InteractionRead] = []
    referred_applications: list["ApplicationBrief"] = []

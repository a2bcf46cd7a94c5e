"""Pydantic schemas for Company model."""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from jobtracker.schemas.common import PartialUpdate

if TYPE_CHECKING:
    from jobtracker.schemas.application import ApplicationSummary
    from jobtracker.schemas.contact import ContactSummary


class CompanyBase(BaseModel):
    """Base fields for company."""

    name: str = Field(min_length=1, max_length=255)
    website: str | None = None
    careers_url: str | None = None
    notes: str | None = None


class CompanyCreate(CompanyBase):
    """Fields for creating a company."""


class CompanyUpdate(PartialUpdate):
    """Fields for updating a company (all optional)."""

    required_fields = ("name",)

    name: str | None = Field(None, min_length=1, max_length=255)
    website: str | None = None
    careers_url: str | None = None
    notes: str | None = None


class CompanyRead(CompanyBase):
    """Full company output."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    created_at: datetime
    updated_at: datetime


class CompanySummary(BaseModel):
    """Minimal company info for nested responses."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    name: str
    website: str | None = None
    careers_url: str | None = None


class CompanyWithCounts(CompanyRead):
    """Company with application/contact counts."""

    application_count: int = 0
    contact_count: int = 0


class CompanyDetail(CompanyRead):
    """Company with its applications and contacts."""

    applications: list["ApplicationSummary"] = []
    contacts: list["ContactSummary"] = []

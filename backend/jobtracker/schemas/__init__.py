"""Pydantic schemas package."""

from jobtracker.schemas.company import (
    CompanyCreate,
    CompanyUpdate,
    CompanyRead,
    CompanySummary,
    CompanyWithCounts,
    CompanyDetail,
)
from jobtracker.schemas.application import (
    ApplicationCreate,
    ApplicationUpdate,
    ApplicationRead,
    ApplicationSummary,
    ApplicationBrief,
    ApplicationWithCompany,
    ApplicationListItem,
    ApplicationDetail,
)
from jobtracker.schemas.contact import (
    ContactCreate,
    ContactUpdate,
    ContactRead,
    ContactSummary,
    ContactBrief,
    ContactWithCompany,
    ContactListItem,
    ContactDetail,
    InteractionCreate,
    InteractionRead,
)
from jobtracker.schemas.interview import (
    InterviewCreate,
    InterviewUpdate,
    InterviewSummary,
    InterviewRead,
)
from jobtracker.schemas.reminder import (
    ReminderCreate,
    ReminderUpdate,
    ReminderSummary,
    ReminderRead,
)
from jobtracker.schemas.event import (
    EventCreate,
    EventUpdate,
    EventRead,
    EventDeleted,
    CalendarEvent,
    CalendarDay,
    CalendarMonth,
)

# Rebuild models to resolve forward references
CompanyDetail.model_rebuild()
ApplicationBrief.model_rebuild()
ApplicationWithCompany.model_rebuild()
ApplicationListItem.model_rebuild()
ApplicationDetail.model_rebuild()
ContactBrief.model_rebuild()
ContactWithCompany.model_rebuild()
ContactListItem.model_rebuild()
ContactDetail.model_rebuild()
InterviewRead.model_rebuild()
ReminderRead.model_rebuild()
EventRead.model_rebuild()

__all__ = [
    # Company
    "CompanyCreate",
    "CompanyUpdate",
    "CompanyRead",
    "CompanySummary",
    "CompanyWithCounts",
    "CompanyDetail",
    # Application
    "ApplicationCreate",
    "ApplicationUpdate",
    "ApplicationRead",
    "ApplicationSummary",
    "ApplicationBrief",
    "ApplicationWithCompany",
    "ApplicationListItem",
    "ApplicationDetail",
    # Contact
    "ContactCreate",
    "ContactUpdate",
    "ContactRead",
    "ContactSummary",
    "ContactBrief",
    "ContactWithCompany",
    "ContactListItem",
    "ContactDetail",
    "InteractionCreate",
    "InteractionRead",
    # Interview
    "InterviewCreate",
    "InterviewUpdate",
    "InterviewSummary",
    "InterviewRead",
    # Reminder
    "ReminderCreate",
    "ReminderUpdate",
    "ReminderSummary",
    "ReminderRead",
    # Event
    "EventCreate",
    "EventUpdate",
    "EventRead",
    "EventDeleted",
    "CalendarEvent",
    "CalendarDay",
    "CalendarMonth",
]

"""Enumerated values for status, type and category columns.

Columns store the plain string value; membership is enforced by the Pydantic
schemas at the API boundary.
"""

import enum


class ApplicationStatus(str, enum.Enum):
    NOT_APPLIED = "NOT_APPLIED"
    APPLIED = "APPLIED"
    IN_REVIEW = "IN_REVIEW"
    INTERVIEW_SCHEDULED = "INTERVIEW_SCHEDULED"
    OFFER_RECEIVED = "OFFER_RECEIVED"
    ACCEPTED = "ACCEPTED"
    REJECTED = "REJECTED"
    WITHDRAWN = "WITHDRAWN"


class ContactStatus(str, enum.Enum):
    REQUEST_SENT = "REQUEST_SENT"
    CONNECTED = "CONNECTED"
    MESSAGED = "MESSAGED"
    REPLIED = "REPLIED"
    MEETING_SCHEDULED = "MEETING_SCHEDULED"
    REFERRED = "REFERRED"
    NO_RESPONSE = "NO_RESPONSE"


class InterviewStatus(str, enum.Enum):
    SCHEDULED = "SCHEDULED"
    COMPLETED = "COMPLETED"
    CANCELLED = "CANCELLED"
    RESCHEDULED = "RESCHEDULED"


class EventType(str, enum.Enum):
    INTERVIEW = "INTERVIEW"
    NETWORKING_CALL = "NETWORKING_CALL"
    REMINDER = "REMINDER"
    TODO = "TODO"


class EventStatus(str, enum.Enum):
    PENDING = "PENDING"
    COMPLETED = "COMPLETED"
    CANCELLED = "CANCELLED"
    RESCHEDULED = "RESCHEDULED"


class ReminderType(str, enum.Enum):
    FOLLOW_UP = "FOLLOW_UP"
    INTERVIEW_PREP = "INTERVIEW_PREP"
    APPLICATION_DEADLINE = "APPLICATION_DEADLINE"
    NETWORK = "NETWORK"
    OTHER = "OTHER"


class LearningType(str, enum.Enum):
    SKILL = "SKILL"
    PROJECT = "PROJECT"
    CONCEPT = "CONCEPT"
    COURSE = "COURSE"


class LearningStatus(str, enum.Enum):
    TO_LEARN = "TO_LEARN"
    IN_PROGRESS = "IN_PROGRESS"
    COMPLETED = "COMPLETED"
    ON_HOLD = "ON_HOLD"


class LearningPriority(str, enum.Enum):
    LOW = "LOW"
    MEDIUM = "MEDIUM"
    HIGH = "HIGH"


class ResourceType(str, enum.Enum):
    YOUTUBE = "youtube"
    GITHUB = "github"
    ARTICLE = "article"
    DOCUMENTATION = "documentation"
    COURSE = "course"
    OTHER = "other"


class EmailTemplateCategory(str, enum.Enum):
    CONNECTION_REQUEST = "CONNECTION_REQUEST"
    FOLLOW_UP = "FOLLOW_UP"
    THANK_YOU = "THANK_YOU"
    REFERRAL_REQUEST = "REFERRAL_REQUEST"
    COLD_OUTREACH = "COLD_OUTREACH"
    OTHER = "OTHER"


# Statuses that count as having reached the interview stage or later
INTERVIEW_STAGE_STATUSES = (
    ApplicationStatus.INTERVIEW_SCHEDULED.value,
    ApplicationStatus.OFFER_RECEIVED.value,
    ApplicationStatus.ACCEPTED.value,
)

OFFER_STATUSES = (
    ApplicationStatus.OFFER_RECEIVED.value,
    ApplicationStatus.ACCEPTED.value,
)

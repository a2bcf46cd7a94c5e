"""Reminder model — due-dated follow-ups, optionally tied to an application."""

from sqlalchemy import Column, String, Boolean, DateTime, Text, ForeignKey, Uuid
from sqlalchemy.orm import relationship

from jobtracker.models.base import Base, TimestampMixin, UUIDMixin
from jobtracker.models.enums import ReminderType


class Reminder(UUIDMixin, TimestampMixin, Base):
    __tablename__ = "reminders"

    application_id = Column(Uuid(as_uuid=True), ForeignKey("applications.id", ondelete="CASCADE"), index=True)

    title = Column(String(255), nullable=False)
    description = Column(Text)
    due_date = Column(DateTime(timezone=True), nullable=False, index=True)
    type = Column(String(30), nullable=False, default=ReminderType.FOLLOW_UP.value)  # see ReminderType
    is_completed = Column(Boolean, default=False, nullable=False, index=True)
    completed_at = Column(DateTime(timezone=True))

    application = relationship("Application", back_populates="reminders", lazy="selectin")

"""Event model — calendar items (interviews, calls, reminders, to-dos)."""

from sqlalchemy import Column, String, Integer, Boolean, DateTime, Text, ForeignKey, Uuid, Index
from sqlalchemy.orm import relationship

from jobtracker.models.base import Base, TimestampMixin, UUIDMixin
from jobtracker.models.enums import EventStatus, EventType


class Event(UUIDMixin, TimestampMixin, Base):
    __tablename__ = "events"

    type = Column(String(30), nullable=False, default=EventType.REMINDER.value, index=True)  # see EventType
    application_id = Column(Uuid(as_uuid=True), ForeignKey("applications.id", ondelete="SET NULL"), index=True)
    contact_id = Column(Uuid(as_uuid=True), ForeignKey("contacts.id", ondelete="SET NULL"), index=True)

    # Core
    title = Column(String(255), nullable=False)
    description = Column(Text)
    scheduled_date = Column(DateTime(timezone=True), nullable=False, index=True)
    duration = Column(Integer)  # minutes

    # Interview details
    round = Column(Integer)
    interviewers = Column(Text)
    location = Column(String(255))
    meeting_link = Column(String(1000))

    # Lifecycle
    status = Column(String(20), nullable=False, default=EventStatus.PENDING.value)  # see EventStatus
    is_completed = Column(Boolean, default=False, nullable=False)
    completed_at = Column(DateTime(timezone=True))

    # Outcome
    feedback = Column(Text)
    notes = Column(Text)
    outcome = Column(Text)
    next_steps = Column(Text)  # JSON array of {"text": str, "completed": bool}
    next_steps_due_date = Column(DateTime(timezone=True))

    application = relationship("Application", back_populates="events", lazy="selectin")
    contact = relationship("Contact", back_populates="events", lazy="selectin")

    __table_args__ = (
        Index("idx_event_completed_date", "is_completed", "scheduled_date"),
    )

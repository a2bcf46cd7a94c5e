"""Interview model — interview rounds tied to an application."""

from sqlalchemy import Column, String, Integer, DateTime, Text, ForeignKey, Uuid
from sqlalchemy.orm import relationship

from jobtracker.models.base import Base, TimestampMixin, UUIDMixin
from jobtracker.models.enums import InterviewStatus


class Interview(UUIDMixin, TimestampMixin, Base):
    __tablename__ = "interviews"

    application_id = Column(
        Uuid(as_uuid=True), ForeignKey("applications.id", ondelete="CASCADE"), nullable=False, index=True,
    )

    round = Column(Integer, nullable=False)
    title = Column(String(255), nullable=False)
    interview_date = Column(DateTime(timezone=True), nullable=False, index=True)
    duration = Column(Integer)  # minutes
    interviewers = Column(Text)
    location = Column(String(255))
    meeting_link = Column(String(1000))
    status = Column(String(20), nullable=False, default=InterviewStatus.SCHEDULED.value)  # see InterviewStatus
    feedback = Column(Text)
    notes = Column(Text)

    application = relationship("Application", back_populates="interviews", lazy="selectin")

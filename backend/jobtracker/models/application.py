"""Application model — one job application at a company."""

from sqlalchemy import Column, String, Integer, Boolean, DateTime, Text, ForeignKey, Uuid, Index
from sqlalchemy.orm import relationship

from jobtracker.models.base import Base, TimestampMixin, UUIDMixin
from jobtracker.models.enums import ApplicationStatus


class Application(UUIDMixin, TimestampMixin, Base):
    __tablename__ = "applications"

    company_id = Column(Uuid(as_uuid=True), ForeignKey("companies.id", ondelete="CASCADE"), nullable=False, index=True)

    # Core
    position_title = Column(String(255), nullable=False)
    description = Column(Text)
    job_posting_url = Column(String(1000))
    status = Column(
        String(30), nullable=False, default=ApplicationStatus.NOT_APPLIED.value, index=True,
    )  # see ApplicationStatus
    applied_date = Column(DateTime(timezone=True))
    application_deadline = Column(DateTime(timezone=True))

    # Compensation
    salary_min = Column(Integer)
    salary_max = Column(Integer)
    salary_currency = Column(String(3), default="USD", nullable=False)

    # Documents (stored by path reference only)
    resume_path = Column(String(500))
    cover_letter_path = Column(String(500))

    # Referral
    is_referred = Column(Boolean, default=False, nullable=False)
    referred_by_id = Column(Uuid(as_uuid=True), ForeignKey("contacts.id", ondelete="SET NULL"), index=True)

    notes = Column(Text)

    # Relationships
    company = relationship("Company", back_populates="applications", lazy="selectin")
    referred_by = relationship(
        "Contact", back_populates="referred_applications", foreign_keys=[referred_by_id], lazy="selectin",
    )
    interviews = relationship(
        "Interview",
        back_populates="application",
        cascade="all, delete-orphan",
        passive_deletes=True,
        order_by="Interview.interview_date",
    )
    reminders = relationship(
        "Reminder",
        back_populates="application",
        cascade="all, delete-orphan",
        passive_deletes=True,
        order_by="Reminder.due_date",
    )
    events = relationship("Event", back_populates="application", passive_deletes=True)

    __table_args__ = (
        Index("idx_application_company_status", "company_id", "status"),
    )

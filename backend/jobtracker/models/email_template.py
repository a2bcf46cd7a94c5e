"""Email template model — reusable outreach messages."""

from sqlalchemy import Column, String, Text

from jobtracker.models.base import Base, TimestampMixin, UUIDMixin


class EmailTemplate(UUIDMixin, TimestampMixin, Base):
    __tablename__ = "email_templates"

    name = Column(String(255), nullable=False, index=True)
    subject = Column(String(500), nullable=False)
    body = Column(Text, nullable=False)
    category = Column(String(30), nullable=False, index=True)  # see EmailTemplateCategory

"""Resume template models — named groups of ordered LaTeX sections."""

from sqlalchemy import Column, String, Integer, Text, ForeignKey, Uuid, UniqueConstraint
from sqlalchemy.orm import relationship

from jobtracker.models.base import Base, TimestampMixin, UUIDMixin


class ResumeTemplate(UUIDMixin, TimestampMixin, Base):
    __tablename__ = "resume_templates"

    name = Column(String(255), nullable=False)
    description = Column(Text)

    sections = relationship(
        "ResumeSection",
        back_populates="template",
        cascade="all, delete-orphan",
        passive_deletes=True,
        order_by="ResumeSection.order",
    )


class ResumeSection(UUIDMixin, TimestampMixin, Base):
    __tablename__ = "resume_sections"

    template_id = Column(
        Uuid(as_uuid=True), ForeignKey("resume_templates.id", ondelete="CASCADE"), nullable=False, index=True,
    )
    name = Column(String(255), nullable=False)
    order = Column(Integer, nullable=False, default=0)
    latex_code = Column(Text, nullable=False, default="")
    notes = Column(Text)

    template = relationship("ResumeTemplate", back_populates="sections")

    __table_args__ = (
        UniqueConstraint("template_id", "name", name="uq_resume_sections_template_name"),
    )

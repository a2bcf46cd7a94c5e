"""Resume builder models — a resume and its ordered entries."""

from sqlalchemy import Column, String, Integer, Boolean, DateTime, Text, ForeignKey, Uuid
from sqlalchemy.orm import declared_attr, relationship

from jobtracker.models.base import Base, TimestampMixin, UUIDMixin


class Resume(UUIDMixin, TimestampMixin, Base):
    __tablename__ = "resumes"

    name = Column(String(255), nullable=False)
    description = Column(Text)
    target_role = Column(String(255))
    is_default = Column(Boolean, default=False, nullable=False)
    last_used_at = Column(DateTime(timezone=True))

    experiences = relationship(
        "Experience", back_populates="resume", cascade="all, delete-orphan",
        passive_deletes=True, order_by="Experience.order",
    )
    projects = relationship(
        "Project", back_populates="resume", cascade="all, delete-orphan",
        passive_deletes=True, order_by="Project.order",
    )
    skills = relationship(
        "SkillCategory", back_populates="resume", cascade="all, delete-orphan",
        passive_deletes=True, order_by="SkillCategory.order",
    )
    education = relationship(
        "Education", back_populates="resume", cascade="all, delete-orphan",
        passive_deletes=True, order_by="Education.order",
    )


class ResumeEntryMixin:
    """Columns shared by every ordered resume entry."""

    @declared_attr
    def resume_id(cls):
        return Column(Uuid(as_uuid=True), ForeignKey("resumes.id", ondelete="CASCADE"), nullable=False, index=True)

    order = Column(Integer, nullable=False, default=0)


class Experience(ResumeEntryMixin, UUIDMixin, TimestampMixin, Base):
    __tablename__ = "experiences"

    company = Column(String(255), nullable=False)
    position = Column(String(255), nullable=False)
    location = Column(String(255))
    start_date = Column(String(50))  # free text, e.g. "Jan 2022"
    end_date = Column(String(50))
    bullet_points = Column(Text)

    resume = relationship("Resume", back_populates="experiences")


class Project(ResumeEntryMixin, UUIDMixin, TimestampMixin, Base):
    __tablename__ = "projects"

    name = Column(String(255), nullable=False)
    description = Column(Text)
    technologies = Column(String(500))
    github_url = Column(String(500))
    live_url = Column(String(500))
    start_date = Column(String(50))
    end_date = Column(String(50))
    bullet_points = Column(Text)

    resume = relationship("Resume", back_populates="projects")


class SkillCategory(ResumeEntryMixin, UUIDMixin, TimestampMixin, Base):
    __tablename__ = "skill_categories"

    name = Column(String(255), nullable=False)
    skills = Column(Text)  # comma separated

    resume = relationship("Resume", back_populates="skills")


class Education(ResumeEntryMixin, UUIDMixin, TimestampMixin, Base):
    __tablename__ = "education"

    school = Column(String(255), nullable=False)
    degree = Column(String(255))
    field = Column(String(255))
    location = Column(String(255))
    start_date = Column(String(50))
    end_date = Column(String(50))
    gpa = Column(String(20))
    achievements = Column(Text)

    resume = relationship("Resume", back_populates="education")

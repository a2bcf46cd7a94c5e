"""Learning item model — skills, concepts, courses and projects to study."""

from sqlalchemy import Column, String, Integer, DateTime, Text

from jobtracker.models.base import Base, TimestampMixin, UUIDMixin
from jobtracker.models.enums import LearningPriority, LearningStatus, LearningType


class LearningItem(UUIDMixin, TimestampMixin, Base):
    __tablename__ = "learning_items"

    type = Column(String(20), nullable=False, default=LearningType.CONCEPT.value, index=True)  # see LearningType
    title = Column(String(255), nullable=False)
    description = Column(Text)
    resource_url = Column(String(1000))
    additional_links = Column(Text)
    category = Column(String(100), index=True)
    tags = Column(String(500))

    # Progress tracking
    status = Column(String(20), nullable=False, default=LearningStatus.TO_LEARN.value, index=True)
    priority = Column(String(10), nullable=False, default=LearningPriority.MEDIUM.value)
    progress = Column(Integer, nullable=False, default=0)  # 0-100
    target_date = Column(DateTime(timezone=True))
    started_at = Column(DateTime(timezone=True))
    completed_at = Column(DateTime(timezone=True))

    notes = Column(Text)
    key_takeaways = Column(Text)

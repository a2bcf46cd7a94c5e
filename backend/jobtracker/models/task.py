"""Task model — daily to-do items with one level of subtasks."""

from sqlalchemy import Column, String, Boolean, DateTime, Text, ForeignKey, Uuid
from sqlalchemy.orm import relationship

from jobtracker.models.base import Base, TimestampMixin, UUIDMixin


class Task(UUIDMixin, TimestampMixin, Base):
    __tablename__ = "tasks"

    parent_task_id = Column(Uuid(as_uuid=True), ForeignKey("tasks.id", ondelete="CASCADE"), index=True)

    title = Column(String(255), nullable=False)
    notes = Column(Text)
    due_date = Column(DateTime(timezone=True), nullable=False, index=True)
    is_completed = Column(Boolean, default=False, nullable=False)
    completed_at = Column(DateTime(timezone=True))

    parent = relationship("Task", remote_side="Task.id", back_populates="subtasks")
    subtasks = relationship(
        "Task",
        back_populates="parent",
        cascade="all, delete-orphan",
        passive_deletes=True,
        order_by="Task.created_at",
    )

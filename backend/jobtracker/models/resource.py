"""Resource model — bookmarked study material, nested via parent/children."""

from sqlalchemy import Column, String, Boolean, Text, ForeignKey, Uuid
from sqlalchemy.orm import relationship

from jobtracker.models.base import Base, TimestampMixin, UUIDMixin


class Resource(UUIDMixin, TimestampMixin, Base):
    __tablename__ = "resources"

    parent_id = Column(Uuid(as_uuid=True), ForeignKey("resources.id", ondelete="CASCADE"), index=True)

    title = Column(String(255), nullable=False)
    description = Column(Text)
    url = Column(String(1000))
    type = Column(String(20))  # see ResourceType
    category = Column(String(100), index=True)
    tags = Column(String(500))
    is_completed = Column(Boolean, default=False, nullable=False)
    is_favorite = Column(Boolean, default=False, nullable=False)
    notes = Column(Text)

    parent = relationship("Resource", remote_side="Resource.id", back_populates="sub_resources")
    sub_resources = relationship(
        "Resource",
        back_populates="parent",
        cascade="all, delete-orphan",
        passive_deletes=True,
        order_by="Resource.created_at",
    )

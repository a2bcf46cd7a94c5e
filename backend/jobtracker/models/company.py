"""Company model — employers the user applies to or networks with."""

from sqlalchemy import Column, String, Text
from sqlalchemy.orm import relationship

from jobtracker.models.base import Base, TimestampMixin, UUIDMixin


class Company(UUIDMixin, TimestampMixin, Base):
    __tablename__ = "companies"

    name = Column(String(255), nullable=False, index=True)
    website = Column(String(500))
    careers_url = Column(String(500))
    notes = Column(Text)

    # Relationships (rows removed by ON DELETE CASCADE)
    applications = relationship(
        "Application",
        back_populates="company",
        cascade="all, delete-orphan",
        passive_deletes=True,
        order_by="desc(Application.created_at)",
    )
    contacts = relationship(
        "Contact",
        back_populates="company",
        cascade="all, delete-orphan",
        passive_deletes=True,
        order_by="desc(Contact.created_at)",
    )

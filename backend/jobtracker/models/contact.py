"""Contact model — networking relationships, optionally able to refer the user."""

from sqlalchemy import Column, String, Boolean, DateTime, Text, ForeignKey, Uuid, Index
from sqlalchemy.orm import relationship

from jobtracker.models.base import Base, TimestampMixin, UUIDMixin
from jobtracker.models.enums import ContactStatus


class Contact(UUIDMixin, TimestampMixin, Base):
    __tablename__ = "contacts"

    company_id = Column(Uuid(as_uuid=True), ForeignKey("companies.id", ondelete="CASCADE"), nullable=False, index=True)

    # Identity
    name = Column(String(255), nullable=False)
    position = Column(String(255))
    linkedin_url = Column(String(500))
    email = Column(String(255))
    phone = Column(String(50))

    # Relationship status
    status = Column(
        String(30), nullable=False, default=ContactStatus.REQUEST_SENT.value, index=True,
    )  # see ContactStatus
    can_refer = Column(Boolean, default=False, nullable=False)
    willing_to_refer = Column(Boolean, default=False, nullable=False)
    messaged_date = Column(DateTime(timezone=True))
    last_interaction_date = Column(DateTime(timezone=True))

    notes = Column(Text)
    conversation_notes = Column(Text)

    # Relationships
    company = relationship("Company", back_populates="contacts", lazy="selectin")
    interactions = relationship(
        "ContactInteraction",
        back_populates="contact",
        cascade="all, delete-orphan",
        passive_deletes=True,
        order_by="desc(ContactInteraction.interaction_date)",
    )
    referred_applications = relationship(
        "Application", back_populates="referred_by", foreign_keys="Application.referred_by_id", passive_deletes=True,
    )
    events = relationship("Event", back_populates="contact", passive_deletes=True)

    __table_args__ = (
        Index("idx_contact_referrals", "can_refer", "willing_to_refer"),
    )


class ContactInteraction(UUIDMixin, TimestampMixin, Base):
    __tablename__ = "contact_interactions"

    contact_id = Column(Uuid(as_uuid=True), ForeignKey("contacts.id", ondelete="CASCADE"), nullable=False, index=True)
    interaction_type = Column(String(50), nullable=False, default="MESSAGE")  # MESSAGE, CALL, MEETING, EMAIL, ...
    interaction_date = Column(DateTime(timezone=True), nullable=False, index=True)
    notes = Column(Text)

    contact = relationship("Contact", back_populates="interactions")

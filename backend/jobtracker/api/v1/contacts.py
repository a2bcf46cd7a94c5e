"""Contact API endpoints."""

import logging
from datetime import datetime, timezone
from uuid import UUID

from fastapi import APIRouter, Depends, Query
from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from jobtracker.dependencies.lookups import delete_or_404, ensure_exists, get_or_404
from jobtracker.models.base import get_db
from jobtracker.models.application import Application
from jobtracker.models.company import Company
from jobtracker.models.contact import Contact, ContactInteraction
from jobtracker.models.enums import ContactStatus
from jobtracker.schemas.common import DeleteResponse
from jobtracker.schemas.contact import (
    ContactCreate,
    ContactDetail,
    ContactListItem,
    ContactUpdate,
    ContactWithCompany,
    InteractionCreate,
    InteractionRead,
)
from jobtracker.services.analytics import ensure_utc

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/contacts", tags=["contacts"])

RECENT_INTERACTIONS = 5

# Moving into any of these marks the contact as messaged
MESSAGED_STATUSES = (
    ContactStatus.MESSAGED.value,
    ContactStatus.REPLIED.value,
    ContactStatus.MEETING_SCHEDULED.value,
)


@router.get("", response_model=list[ContactListItem])
async def list_contacts(
    db: AsyncSession = Depends(get_db),
    skip: int = Query(0, ge=0),
    limit: int = Query(100, ge=1, le=500),
    company_id: UUID | None = Query(None, description="Filter by company"),
    can_refer: bool | None = Query(None, description="Filter by referral ability"),
):
    """List contacts by most recent interaction, with their latest interactions."""
    query = select(Contact).options(selectinload(Contact.interactions))

    if company_id:
        query = query.where(Contact.company_id == company_id)
    if can_refer is not None:
        query = query.where(Contact.can_refer == can_refer)

    query = (
        query.order_by(
            Contact.last_interaction_date.desc().nulls_last(),
            Contact.created_at.desc(),
        )
        .offset(skip)
        .limit(limit)
    )
    result = await db.execute(query)
    contacts = result.scalars().all()

    contact_ids = [c.id for c in contacts]
    if contact_ids:
        referral_counts_query = (
            select(Application.referred_by_id, func.count(Application.id).label("count"))
            .where(Application.referred_by_id.in_(contact_ids))
            .group_by(Application.referred_by_id)
        )
        referral_result = await db.execute(referral_counts_query)
        referral_counts = {row.referred_by_id: row.count for row in referral_result}
    else:
        referral_counts = {}

    return [
        ContactListItem(
            **ContactWithCompany.model_validate(contact).model_dump(),
            interactions=[
                InteractionRead.model_validate(i)
                for i in contact.interactions[:RECENT_INTERACTIONS]
            ],
            referred_application_count=referral_counts.get(contact.id, 0),
            interaction_count=len(contact.interactions),
        )
        for contact in contacts
    ]


@router.post("", response_model=ContactWithCompany, status_code=201)
async def create_contact(
    payload: ContactCreate,
    db: AsyncSession = Depends(get_db),
):
    """Create a contact."""
    await ensure_exists(db, Company, payload.company_id)

    contact = Contact(**payload.model_dump())
    db.add(contact)
    await db.flush()
    logger.info("Created contact %s (%s)", contact.id, contact.name)
    return await get_or_404(db, Contact, contact.id)


@router.get("/{contact_id}", response_model=ContactDetail)
async def get_contact(
    contact_id: UUID,
    db: AsyncSession = Depends(get_db),
):
    """Get a contact with all interactions and referred applications."""
    return await get_or_404(
        db, Contact, contact_id,
        selectinload(Contact.interactions),
        selectinload(Contact.referred_applications),
    )


@router.patch("/{contact_id}", response_model=ContactWithCompany)
async def update_contact(
    contact_id: UUID,
    payload: ContactUpdate,
    db: AsyncSession = Depends(get_db),
):
    """Update a contact; reaching out stamps a missing messaged date."""
    contact = await get_or_404(db, Contact, contact_id)
    changes = payload.changes()

    if "company_id" in changes:
        await ensure_exists(db, Company, changes["company_id"])

    if (
        changes.get("status") in MESSAGED_STATUSES
        and not changes.get("messaged_date")
        and not contact.messaged_date
    ):
        changes["messaged_date"] = datetime.now(timezone.utc)

    for key, value in changes.items():
        setattr(contact, key, value)
    await db.flush()
    return await get_or_404(db, Contact, contact_id)


@router.delete("/{contact_id}", response_model=DeleteResponse)
async def delete_contact(
    contact_id: UUID,
    db: AsyncSession = Depends(get_db),
):
    """Delete a contact; applications they referred keep no referrer."""
    await delete_or_404(db, Contact, contact_id)
    logger.info("Deleted contact %s", contact_id)
    return DeleteResponse()


# --- Interactions ---

@router.get("/{contact_id}/interactions", response_model=list[InteractionRead])
async def list_interactions(
    contact_id: UUID,
    db: AsyncSession = Depends(get_db),
):
    """Interactions with a contact, newest first."""
    await ensure_exists(db, Contact, contact_id)
    result = await db.execute(
        select(ContactInteraction)
        .where(ContactInteraction.contact_id == contact_id)
        .order_by(ContactInteraction.interaction_date.desc())
    )
    return result.scalars().all()


@router.post("/{contact_id}/interactions", response_model=InteractionRead, status_code=201)
async def log_interaction(
    contact_id: UUID,
    payload: InteractionCreate,
    db: AsyncSession = Depends(get_db),
):
    """Record an interaction and advance the contact's last interaction date."""
    contact = await get_or_404(db, Contact, contact_id)

    interaction = ContactInteraction(
        contact_id=contact_id,
        interaction_type=payload.interaction_type,
        interaction_date=payload.interaction_date or datetime.now(timezone.utc),
        notes=payload.notes,
    )
    db.add(interaction)

    last = ensure_utc(contact.last_interaction_date)
    if last is None or interaction.interaction_date > last:
        contact.last_interaction_date = interaction.interaction_date

    await db.flush()
    logger.info("Logged %s interaction for contact %s", interaction.interaction_type, contact_id)
    return await get_or_404(db, ContactInteraction, interaction.id, name="Interaction")

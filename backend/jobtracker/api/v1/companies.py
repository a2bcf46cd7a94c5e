"""Company API endpoints."""

import logging
from uuid import UUID

from fastapi import APIRouter, Depends, Query
from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from jobtracker.dependencies.lookups import delete_or_404, get_or_404
from jobtracker.models.base import get_db
from jobtracker.models.company import Company
from jobtracker.models.application import Application
from jobtracker.models.contact import Contact
from jobtracker.schemas.common import DeleteResponse
from jobtracker.schemas.company import (
    CompanyCreate,
    CompanyDetail,
    CompanyRead,
    CompanyUpdate,
    CompanyWithCounts,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/companies", tags=["companies"])


async def _load_detail(db: AsyncSession, company_id: UUID) -> Company:
    return await get_or_404(
        db, Company, company_id,
        selectinload(Company.applications),
        selectinload(Company.contacts),
    )


@router.get("", response_model=list[CompanyWithCounts])
async def list_companies(
    db: AsyncSession = Depends(get_db),
    skip: int = Query(0, ge=0),
    limit: int = Query(100, ge=1, le=500),
    search: str | None = Query(None, description="Search by name"),
):
    """List companies, newest first, with application and contact counts."""
    query = select(Company)
    if search:
        query = query.where(Company.name.ilike(f"%{search}%"))
    query = query.order_by(Company.created_at.desc()).offset(skip).limit(limit)
    result = await db.execute(query)
    companies = result.scalars().all()

    company_ids = [c.id for c in companies]
    if company_ids:
        app_counts_query = (
            select(Application.company_id, func.count(Application.id).label("count"))
            .where(Application.company_id.in_(company_ids))
            .group_by(Application.company_id)
        )
        app_result = await db.execute(app_counts_query)
        app_counts = {row.company_id: row.count for row in app_result}

        contact_counts_query = (
            select(Contact.company_id, func.count(Contact.id).label("count"))
            .where(Contact.company_id.in_(company_ids))
            .group_by(Contact.company_id)
        )
        contact_result = await db.execute(contact_counts_query)
        contact_counts = {row.company_id: row.count for row in contact_result}
    else:
        app_counts = {}
        contact_counts = {}

    return [
        CompanyWithCounts(
            **CompanyRead.model_validate(company).model_dump(),
            application_count=app_counts.get(company.id, 0),
            contact_count=contact_counts.get(company.id, 0),
        )
        for company in companies
    ]


@router.post("", response_model=CompanyRead, status_code=201)
async def create_company(
    payload: CompanyCreate,
    db: AsyncSession = Depends(get_db),
):
    """Create a company."""
    company = Company(**payload.model_dump())
    db.add(company)
    await db.flush()
    logger.info("Created company %s (%s)", company.id, company.name)
    return await get_or_404(db, Company, company.id)


@router.get("/{company_id}", response_model=CompanyDetail)
async def get_company(
    company_id: UUID,
    db: AsyncSession = Depends(get_db),
):
    """Get a company with its applications and contacts."""
    return await _load_detail(db, company_id)


@router.patch("/{company_id}", response_model=CompanyRead)
async def update_company(
    company_id: UUID,
    payload: CompanyUpdate,
    db: AsyncSession = Depends(get_db),
):
    """Update a company."""
    company = await get_or_404(db, Company, company_id)
    for key, value in payload.changes().items():
        setattr(company, key, value)
    await db.flush()
    return await get_or_404(db, Company, company_id)


@router.delete("/{company_id}", response_model=DeleteResponse)
async def delete_company(
    company_id: UUID,
    db: AsyncSession = Depends(get_db),
):
    """Delete a company together with its applications and contacts."""
    await delete_or_404(db, Company, company_id)
    logger.info("Deleted company %s", company_id)
    return DeleteResponse()

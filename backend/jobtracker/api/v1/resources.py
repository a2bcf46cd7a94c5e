"""Learning resource API endpoints (nested bookmarks)."""

import logging
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy import or_, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from jobtracker.dependencies.lookups import delete_or_404, ensure_exists, get_or_404
from jobtracker.models.base import get_db
from jobtracker.models.enums import ResourceType
from jobtracker.models.resource import Resource
from jobtracker.schemas.common import DeleteResponse
from jobtracker.schemas.resource import (
    ResourceCreate,
    ResourceRead,
    ResourceSummary,
    ResourceUpdate,
    ResourceWithRelations,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/resources", tags=["resources"])

_RELATIONS = (selectinload(Resource.parent), selectinload(Resource.sub_resources))


def resource_progress(resource: Resource) -> int:
    """Percent of sub-resources completed, or the resource's own flag when it has none."""
    subs = resource.sub_resources
    if not subs:
        return 100 if resource.is_completed else 0
    return int(sum(1 for s in subs if s.is_completed) / len(subs) * 100 + 0.5)


def _with_relations(resource: Resource) -> ResourceWithRelations:
    return ResourceWithRelations(
        **ResourceRead.model_validate(resource).model_dump(),
        parent=ResourceSummary.model_validate(resource.parent) if resource.parent else None,
        sub_resources=[ResourceSummary.model_validate(s) for s in resource.sub_resources],
        progress=resource_progress(resource),
    )


async def _check_parent(db: AsyncSession, resource_id: UUID | None, parent_id: UUID | None) -> None:
    """Parent must exist and must not be the resource itself or one of its descendants."""
    if parent_id is None:
        return
    await ensure_exists(db, Resource, parent_id, name="Parent resource")
    if resource_id is None:
        return

    current = parent_id
    while current is not None:
        if current == resource_id:
            raise HTTPException(status_code=400, detail="A resource can not be its own ancestor")
        result = await db.execute(select(Resource.parent_id).where(Resource.id == current))
        current = result.scalar_one_or_none()


@router.get("", response_model=list[ResourceWithRelations])
async def list_resources(
    db: AsyncSession = Depends(get_db),
    skip: int = Query(0, ge=0),
    limit: int = Query(200, ge=1, le=500),
    category: str | None = Query(None, description="Filter by category"),
    type: ResourceType | None = Query(None, description="Filter by resource type"),
    search: str | None = Query(None, description="Search title, description or tags"),
    root_only: bool = Query(False, description="Only resources without a parent"),
):
    """List resources, newest first, with parent, sub-resources and progress."""
    query = select(Resource).options(*_RELATIONS)

    if category:
        query = query.where(Resource.category == category)
    if type:
        query = query.where(Resource.type == type.value)
    if search:
        pattern = f"%{search}%"
        query = query.where(
            or_(
                Resource.title.ilike(pattern),
                Resource.description.ilike(pattern),
                Resource.tags.ilike(pattern),
            )
        )
    if root_only:
        query = query.where(Resource.parent_id.is_(None))

    query = query.order_by(Resource.created_at.desc()).offset(skip).limit(limit)
    result = await db.execute(query)
    return [_with_relations(r) for r in result.scalars().all()]


@router.post("", response_model=ResourceWithRelations, status_code=201)
async def create_resource(
    payload: ResourceCreate,
    db: AsyncSession = Depends(get_db),
):
    await _check_parent(db, None, payload.parent_id)

    resource = Resource(**payload.model_dump())
    db.add(resource)
    await db.flush()
    logger.info("Created resource %s (%s)", resource.id, resource.title)
    return _with_relations(await get_or_404(db, Resource, resource.id, *_RELATIONS))


@router.get("/{resource_id}", response_model=ResourceWithRelations)
async def get_resource(
    resource_id: UUID,
    db: AsyncSession = Depends(get_db),
):
    return _with_relations(await get_or_404(db, Resource, resource_id, *_RELATIONS))


@router.patch("/{resource_id}", response_model=ResourceWithRelations)
async def update_resource(
    resource_id: UUID,
    payload: ResourceUpdate,
    db: AsyncSession = Depends(get_db),
):
    resource = await get_or_404(db, Resource, resource_id)
    changes = payload.changes()
    if "parent_id" in changes:
        await _check_parent(db, resource_id, changes["parent_id"])

    for key, value in changes.items():
        setattr(resource, key, value)
    await db.flush()
    return _with_relations(await get_or_404(db, Resource, resource_id, *_RELATIONS))


@router.delete("/{resource_id}", response_model=DeleteResponse)
async def delete_resource(
    resource_id: UUID,
    db: AsyncSession = Depends(get_db),
):
    """Delete a resource and its sub-resources."""
    await delete_or_404(db, Resource, resource_id)
    logger.info("Deleted resource %s", resource_id)
    return DeleteResponse()

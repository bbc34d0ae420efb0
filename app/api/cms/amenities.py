"""Amenity API endpoints"""

from typing import List, Optional
from uuid import UUID

from fastapi import APIRouter, Depends, Request
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from app.database import get_db
from app.models.room import Amenity
from app.models.user import User
from app.schemas.room import AmenityCreate, AmenityUpdate, AmenityResponse
from app.api.auth import get_current_active_user, verify_business_unit_access
from app.api.audit import record_audit
from app.api.cms.common import require_content_manager, get_owned_or_404, apply_changes

router = APIRouter()


@router.get("", response_model=List[AmenityResponse])
async def list_amenities(
    business_unit_id: UUID,
    category: Optional[str] = None,
    current_user: User = Depends(get_current_active_user),
    db: AsyncSession = Depends(get_db),
):
    """List amenities for a business unit"""
    await verify_business_unit_access(business_unit_id, current_user)

    query = select(Amenity).where(Amenity.business_unit_id == business_unit_id)
    if category:
        query = query.where(Amenity.category == category)

    result = await db.execute(query.order_by(Amenity.sort_order, Amenity.name))
    return result.scalars().all()


@router.post("", response_model=AmenityResponse, status_code=201)
async def create_amenity(
    business_unit_id: UUID,
    data: AmenityCreate,
    request: Request,
    current_user: User = Depends(get_current_active_user),
    db: AsyncSession = Depends(get_db),
):
    """Create an amenity"""
    await require_content_manager(business_unit_id, current_user)

    amenity = Amenity(business_unit_id=business_unit_id, **data.model_dump())
    db.add(amenity)
    await db.flush()

    record_audit(
        db,
        business_unit_id=business_unit_id,
        actor=current_user,
        action="create",
        resource_type="amenity",
        resource_id=amenity.id,
        data=data.model_dump(),
        request=request,
    )
    await db.commit()
    await db.refresh(amenity)
    return amenity


@router.put("/{amenity_id}", response_model=AmenityResponse)
async def update_amenity(
    business_unit_id: UUID,
    amenity_id: UUID,
    data: AmenityUpdate,
    request: Request,
    current_user: User = Depends(get_current_active_user),
    db: AsyncSession = Depends(get_db),
):
    """Update an amenity"""
    await require_content_manager(business_unit_id, current_user)
    amenity = await get_owned_or_404(db, Amenity, business_unit_id, amenity_id, "Amenity")

    changes = data.model_dump(exclude_unset=True)
    apply_changes(amenity, changes)

    record_audit(
        db,
        business_unit_id=business_unit_id,
        actor=current_user,
        action="update",
        resource_type="amenity",
        resource_id=amenity.id,
        data=changes,
        request=request,
    )
    await db.commit()
    await db.refresh(amenity)
    return amenity


@router.delete("/{amenity_id}", status_code=204)
async def delete_amenity(
    business_unit_id: UUID,
    amenity_id: UUID,
    request: Request,
    current_user: User = Depends(get_current_active_user),
    db: AsyncSession = Depends(get_db),
):
    """Delete an amenity and detach it from room types"""
    await require_content_manager(business_unit_id, current_user)
    amenity = await get_owned_or_404(
        db, Amenity, business_unit_id, amenity_id, "Amenity", (selectinload(Amenity.room_types),)
    )

    await db.delete(amenity)
    record_audit(
        db,
        business_unit_id=business_unit_id,
        actor=current_user,
        action="delete",
        resource_type="amenity",
        resource_id=amenity_id,
        request=request,
    )
    await db.commit()

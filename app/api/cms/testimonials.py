"""Testimonial API endpoints"""

from typing import List
from uuid import UUID

from fastapi import APIRouter, Depends, Request
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import get_db
from app.models.cms import Testimonial
from app.models.user import User
from app.schemas.cms import TestimonialCreate, TestimonialUpdate, TestimonialResponse
from app.api.auth import get_current_active_user, verify_business_unit_access
from app.api.audit import record_audit
from app.api.cms.common import require_content_manager, get_owned_or_404, apply_changes

router = APIRouter()


@router.get("", response_model=List[TestimonialResponse])
async def list_testimonials(
    business_unit_id: UUID,
    featured_only: bool = False,
    current_user: User = Depends(get_current_active_user),
    db: AsyncSession = Depends(get_db),
):
    """List testimonials for a business unit"""
    await verify_business_unit_access(business_unit_id, current_user)

    query = select(Testimonial).where(Testimonial.business_unit_id == business_unit_id)
    if featured_only:
        query = query.where(Testimonial.is_featured == True)

    result = await db.execute(query.order_by(Testimonial.sort_order, Testimonial.created_at.desc()))
    return result.scalars().all()


@router.post("", response_model=TestimonialResponse, status_code=201)
async def create_testimonial(
    business_unit_id: UUID,
    data: TestimonialCreate,
    request: Request,
    current_user: User = Depends(get_current_active_user),
    db: AsyncSession = Depends(get_db),
):
    """Create a testimonial"""
    await require_content_manager(business_unit_id, current_user)

    testimonial = Testimonial(business_unit_id=business_unit_id, **data.model_dump())
    db.add(testimonial)
    await db.flush()

    record_audit(
        db,
        business_unit_id=business_unit_id,
        actor=current_user,
        action="create",
        resource_type="testimonial",
        resource_id=testimonial.id,
        data=data.model_dump(),
        request=request,
    )
    await db.commit()
    await db.refresh(testimonial)
    return testimonial


@router.put("/{testimonial_id}", response_model=TestimonialResponse)
async def update_testimonial(
    business_unit_id: UUID,
    testimonial_id: UUID,
    data: TestimonialUpdate,
    request: Request,
    current_user: User = Depends(get_current_active_user),
    db: AsyncSession = Depends(get_db),
):
    """Update a testimonial"""
    await require_content_manager(business_unit_id, current_user)
    testimonial = await get_owned_or_404(db, Testimonial, business_unit_id, testimonial_id, "Testimonial")

    changes = data.model_dump(exclude_unset=True)
    apply_changes(testimonial, changes)

    record_audit(
        db,
        business_unit_id=business_unit_id,
        actor=current_user,
        action="update",
        resource_type="testimonial",
        resource_id=testimonial.id,
        data=changes,
        request=request,
    )
    await db.commit()
    await db.refresh(testimonial)
    return testimonial


@router.delete("/{testimonial_id}", status_code=204)
async def delete_testimonial(
    business_unit_id: UUID,
    testimonial_id: UUID,
    request: Request,
    current_user: User = Depends(get_current_active_user),
    db: AsyncSession = Depends(get_db),
):
    """Delete a testimonial"""
    await require_content_manager(business_unit_id, current_user)
    testimonial = await get_owned_or_404(db, Testimonial, business_unit_id, testimonial_id, "Testimonial")

    await db.delete(testimonial)
    record_audit(
        db,
        business_unit_id=business_unit_id,
        actor=current_user,
        action="delete",
        resource_type="testimonial",
        resource_id=testimonial_id,
        request=request,
    )
    await db.commit()

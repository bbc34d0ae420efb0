"""Hero slide API endpoints"""

from typing import List
from uuid import UUID

import structlog
from fastapi import APIRouter, Depends, Request
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import get_db
from app.models.cms import HeroSlide
from app.models.user import User
from app.schemas.cms import HeroSlideCreate, HeroSlideUpdate, HeroSlideResponse
from app.api.auth import get_current_active_user, verify_business_unit_access
from app.api.audit import record_audit
from app.api.cms.common import require_content_manager, get_owned_or_404, apply_changes

router = APIRouter()
logger = structlog.get_logger()


@router.get("", response_model=List[HeroSlideResponse])
async def list_hero_slides(
    business_unit_id: UUID,
    active_only: bool = False,
    current_user: User = Depends(get_current_active_user),
    db: AsyncSession = Depends(get_db),
):
    """List hero slides for a business unit"""
    await verify_business_unit_access(business_unit_id, current_user)

    query = select(HeroSlide).where(HeroSlide.business_unit_id == business_unit_id)
    if active_only:
        query = query.where(HeroSlide.is_active == True)

    result = await db.execute(query.order_by(HeroSlide.sort_order, HeroSlide.created_at))
    return result.scalars().all()


@router.post("", response_model=HeroSlideResponse, status_code=201)
async def create_hero_slide(
    business_unit_id: UUID,
    data: HeroSlideCreate,
    request: Request,
    current_user: User = Depends(get_current_active_user),
    db: AsyncSession = Depends(get_db),
):
    """Create a hero slide"""
    await require_content_manager(business_unit_id, current_user)

    slide = HeroSlide(business_unit_id=business_unit_id, **data.model_dump())
    db.add(slide)
    await db.flush()

    record_audit(
        db,
        business_unit_id=business_unit_id,
        actor=current_user,
        action="create",
        resource_type="hero_slide",
        resource_id=slide.id,
        data=data.model_dump(),
        request=request,
    )
    await db.commit()
    await db.refresh(slide)

    logger.info("Hero slide created", business_unit_id=str(business_unit_id), slide_id=str(slide.id))
    return slide


@router.get("/{slide_id}", response_model=HeroSlideResponse)
async def get_hero_slide(
    business_unit_id: UUID,
    slide_id: UUID,
    current_user: User = Depends(get_current_active_user),
    db: AsyncSession = Depends(get_db),
):
    """Get a specific hero slide"""
    await verify_business_unit_access(business_unit_id, current_user)
    return await get_owned_or_404(db, HeroSlide, business_unit_id, slide_id, "Hero slide")


@router.put("/{slide_id}", response_model=HeroSlideResponse)
async def update_hero_slide(
    business_unit_id: UUID,
    slide_id: UUID,
    data: HeroSlideUpdate,
    request: Request,
    current_user: User = Depends(get_current_active_user),
    db: AsyncSession = Depends(get_db),
):
    """Update a hero slide"""
    await require_content_manager(business_unit_id, current_user)
    slide = await get_owned_or_404(db, HeroSlide, business_unit_id, slide_id, "Hero slide")

    changes = data.model_dump(exclude_unset=True)
    apply_changes(slide, changes)

    record_audit(
        db,
        business_unit_id=business_unit_id,
        actor=current_user,
        action="update",
        resource_type="hero_slide",
        resource_id=slide.id,
        data=changes,
        request=request,
    )
    await db.commit()
    await db.refresh(slide)
    return slide


@router.delete("/{slide_id}", status_code=204)
async def delete_hero_slide(
    business_unit_id: UUID,
    slide_id: UUID,
    request: Request,
    current_user: User = Depends(get_current_active_user),
    db: AsyncSession = Depends(get_db),
):
    """Delete a hero slide"""
    await require_content_manager(business_unit_id, current_user)
    slide = await get_owned_or_404(db, HeroSlide, business_unit_id, slide_id, "Hero slide")

    await db.delete(slide)
    record_audit(
        db,
        business_unit_id=business_unit_id,
        actor=current_user,
        action="delete",
        resource_type="hero_slide",
        resource_id=slide_id,
        request=request,
    )
    await db.commit()

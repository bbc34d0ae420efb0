"""Restaurant API endpoints"""

from typing import List
from uuid import UUID

import structlog
from fastapi import APIRouter, Depends, Request
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import get_db
from app.models.marketing import Restaurant
from app.models.user import User
from app.schemas.marketing import RestaurantCreate, RestaurantUpdate, RestaurantResponse
from app.api.auth import get_current_active_user, verify_business_unit_access
from app.api.audit import record_audit
from app.api.cms.common import (
    require_content_manager,
    get_owned_or_404,
    ensure_slug_available,
    apply_changes,
)

router = APIRouter()
logger = structlog.get_logger()


@router.get("", response_model=List[RestaurantResponse])
async def list_restaurants(
    business_unit_id: UUID,
    current_user: User = Depends(get_current_active_user),
    db: AsyncSession = Depends(get_db),
):
    """List restaurants for a business unit"""
    await verify_business_unit_access(business_unit_id, current_user)

    result = await db.execute(
        select(Restaurant)
        .where(Restaurant.business_unit_id == business_unit_id)
        .order_by(Restaurant.sort_order, Restaurant.name)
    )
    return result.scalars().all()


@router.post("", response_model=RestaurantResponse, status_code=201)
async def create_restaurant(
    business_unit_id: UUID,
    data: RestaurantCreate,
    request: Request,
    current_user: User = Depends(get_current_active_user),
    db: AsyncSession = Depends(get_db),
):
    """Create a restaurant"""
    await require_content_manager(business_unit_id, current_user)
    await ensure_slug_available(db, Restaurant, business_unit_id, data.slug)

    restaurant = Restaurant(business_unit_id=business_unit_id, **data.model_dump())
    db.add(restaurant)
    await db.flush()

    record_audit(
        db,
        business_unit_id=business_unit_id,
        actor=current_user,
        action="create",
        resource_type="restaurant",
        resource_id=restaurant.id,
        data=data.model_dump(),
        request=request,
    )
    await db.commit()
    await db.refresh(restaurant)

    logger.info("Restaurant created", business_unit_id=str(business_unit_id), restaurant_id=str(restaurant.id))
    return restaurant


@router.get("/{restaurant_id}", response_model=RestaurantResponse)
async def get_restaurant(
    business_unit_id: UUID,
    restaurant_id: UUID,
    current_user: User = Depends(get_current_active_user),
    db: AsyncSession = Depends(get_db),
):
    """Get a specific restaurant"""
    await verify_business_unit_access(business_unit_id, current_user)
    return await get_owned_or_404(db, Restaurant, business_unit_id, restaurant_id, "Restaurant")


@router.put("/{restaurant_id}", response_model=RestaurantResponse)
async def update_restaurant(
    business_unit_id: UUID,
    restaurant_id: UUID,
    data: RestaurantUpdate,
    request: Request,
    current_user: User = Depends(get_current_active_user),
    db: AsyncSession = Depends(get_db),
):
    """Update a restaurant"""
    await require_content_manager(business_unit_id, current_user)
    restaurant = await get_owned_or_404(db, Restaurant, business_unit_id, restaurant_id, "Restaurant")

    changes = data.model_dump(exclude_unset=True)
    if changes.get("slug") and changes["slug"] != restaurant.slug:
        await ensure_slug_available(db, Restaurant, business_unit_id, changes["slug"], exclude_id=restaurant.id)

    apply_changes(restaurant, changes)

    record_audit(
        db,
        business_unit_id=business_unit_id,
        actor=current_user,
        action="update",
        resource_type="restaurant",
        resource_id=restaurant.id,
        data=changes,
        request=request,
    )
    await db.commit()
    await db.refresh(restaurant)
    return restaurant


@router.delete("/{restaurant_id}", status_code=204)
async def delete_restaurant(
    business_unit_id: UUID,
    restaurant_id: UUID,
    request: Request,
    current_user: User = Depends(get_current_active_user),
    db: AsyncSession = Depends(get_db),
):
    """Delete a restaurant"""
    await require_content_manager(business_unit_id, current_user)
    restaurant = await get_owned_or_404(db, Restaurant, business_unit_id, restaurant_id, "Restaurant")

    await db.delete(restaurant)
    record_audit(
        db,
        business_unit_id=business_unit_id,
        actor=current_user,
        action="delete",
        resource_type="restaurant",
        resource_id=restaurant_id,
        request=request,
    )
    await db.commit()

"""Business unit API endpoints"""

from typing import Optional
from uuid import UUID

import structlog
from fastapi import APIRouter, Depends, HTTPException, Request
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import get_db
from app.models.business_unit import BusinessUnit
from app.models.cms import WebsiteConfiguration
from app.models.user import User
from app.schemas.business_unit import BusinessUnitCreate, BusinessUnitUpdate, BusinessUnitResponse
from app.api.auth import (
    get_current_active_user,
    require_super_admin,
    require_admin_access,
    verify_business_unit_access,
)
from app.api.audit import record_audit

router = APIRouter()
logger = structlog.get_logger()


async def get_business_unit_or_404(db: AsyncSession, business_unit_id: UUID) -> BusinessUnit:
    result = await db.execute(select(BusinessUnit).where(BusinessUnit.id == business_unit_id))
    business_unit = result.scalar_one_or_none()
    if not business_unit:
        raise HTTPException(status_code=404, detail="Business unit not found")
    return business_unit


async def create_business_unit(
    db: AsyncSession,
    data: BusinessUnitCreate,
    current_user: User,
    request: Optional[Request] = None,
) -> BusinessUnit:
    """Create a business unit with a default website configuration"""
    business_unit = BusinessUnit(**data.model_dump(), created_by=current_user.id)
    db.add(business_unit)
    await db.flush()

    db.add(
        WebsiteConfiguration(
            business_unit_id=business_unit.id,
            site_name=business_unit.display_name,
            description=business_unit.description,
            primary_phone=business_unit.phone,
            primary_email=business_unit.email,
            address=business_unit.address,
            social_links={},
        )
    )
    record_audit(
        db,
        business_unit_id=business_unit.id,
        actor=current_user,
        action="create",
        resource_type="business_unit",
        resource_id=business_unit.id,
        data=data.model_dump(),
        request=request,
    )
    await db.commit()
    await db.refresh(business_unit)

    logger.info("Business unit created", business_unit_id=str(business_unit.id), name=business_unit.name)
    return business_unit


@router.get("/{business_unit_id}", response_model=BusinessUnitResponse)
async def get_business_unit(
    business_unit_id: UUID,
    current_user: User = Depends(get_current_active_user),
    db: AsyncSession = Depends(get_db),
):
    """Get business unit details"""
    await verify_business_unit_access(business_unit_id, current_user)
    return await get_business_unit_or_404(db, business_unit_id)


@router.put("/{business_unit_id}", response_model=BusinessUnitResponse)
async def update_business_unit(
    business_unit_id: UUID,
    data: BusinessUnitUpdate,
    request: Request,
    current_user: User = Depends(get_current_active_user),
    db: AsyncSession = Depends(get_db),
):
    """Update business unit details (unit admins)"""
    await require_admin_access(business_unit_id, current_user)
    business_unit = await get_business_unit_or_404(db, business_unit_id)

    changes = data.model_dump(exclude_unset=True)
    for field, value in changes.items():
        setattr(business_unit, field, value)

    record_audit(
        db,
        business_unit_id=business_unit_id,
        actor=current_user,
        action="update",
        resource_type="business_unit",
        resource_id=business_unit_id,
        data=changes,
        request=request,
    )
    await db.commit()
    await db.refresh(business_unit)
    return business_unit


@router.delete("/{business_unit_id}", status_code=204)
async def delete_business_unit(
    business_unit_id: UUID,
    request: Request,
    current_user: User = Depends(require_super_admin),
    db: AsyncSession = Depends(get_db),
):
    """Deactivate a business unit (soft delete, super admins only)"""
    business_unit = await get_business_unit_or_404(db, business_unit_id)
    business_unit.is_active = False

    record_audit(
        db,
        business_unit_id=business_unit_id,
        actor=current_user,
        action="delete",
        resource_type="business_unit",
        resource_id=business_unit_id,
        request=request,
    )
    await db.commit()
    logger.info("Business unit deactivated", business_unit_id=str(business_unit_id))

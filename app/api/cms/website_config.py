"""Website configuration API endpoints"""

from typing import Optional
from uuid import UUID

import structlog
from fastapi import APIRouter, Depends, Request
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import get_db
from app.models.cms import WebsiteConfiguration
from app.models.user import User
from app.schemas.cms import WebsiteConfigUpsert, WebsiteConfigResponse
from app.api.auth import get_current_active_user, verify_business_unit_access
from app.api.audit import record_audit
from app.api.cms.common import require_content_manager, apply_changes

router = APIRouter()
logger = structlog.get_logger()


async def get_website_config(db: AsyncSession, business_unit_id: UUID) -> Optional[WebsiteConfiguration]:
    result = await db.execute(
        select(WebsiteConfiguration).where(WebsiteConfiguration.business_unit_id == business_unit_id)
    )
    return result.scalar_one_or_none()


@router.get("", response_model=Optional[WebsiteConfigResponse])
async def read_website_config(
    business_unit_id: UUID,
    current_user: User = Depends(get_current_active_user),
    db: AsyncSession = Depends(get_db),
):
    """Get the website configuration, or null when none exists"""
    await verify_business_unit_access(business_unit_id, current_user)
    return await get_website_config(db, business_unit_id)


@router.put("", response_model=WebsiteConfigResponse)
async def upsert_website_config(
    business_unit_id: UUID,
    data: WebsiteConfigUpsert,
    request: Request,
    current_user: User = Depends(get_current_active_user),
    db: AsyncSession = Depends(get_db),
):
    """Create or update the website configuration"""
    await require_content_manager(business_unit_id, current_user)

    config = await get_website_config(db, business_unit_id)
    action = "update"
    if config is None:
        config = WebsiteConfiguration(business_unit_id=business_unit_id)
        db.add(config)
        action = "create"

    apply_changes(config, data.model_dump())
    await db.flush()

    record_audit(
        db,
        business_unit_id=business_unit_id,
        actor=current_user,
        action=action,
        resource_type="website_config",
        resource_id=config.id,
        data=data.model_dump(),
        request=request,
    )
    await db.commit()
    await db.refresh(config)

    logger.info("Website configuration saved", business_unit_id=str(business_unit_id), action=action)
    return config

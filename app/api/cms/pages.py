"""Website page API endpoints"""

from datetime import datetime
from typing import List, Optional
from uuid import UUID

import structlog
from fastapi import APIRouter, Depends, HTTPException, Request
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import get_db
from app.models.cms import Page, PublishStatus
from app.models.user import User
from app.schemas.cms import PageCreate, PageUpdate, PageResponse
from app.api.auth import get_current_active_user, verify_business_unit_access
from app.api.audit import record_audit
from app.api.cms.common import require_content_manager, get_owned_or_404, apply_changes

router = APIRouter()
logger = structlog.get_logger()


@router.get("", response_model=List[PageResponse])
async def list_pages(
    business_unit_id: UUID,
    status: Optional[PublishStatus] = None,
    current_user: User = Depends(get_current_active_user),
    db: AsyncSession = Depends(get_db),
):
    """List pages, most recently updated first"""
    await verify_business_unit_access(business_unit_id, current_user)

    query = select(Page).where(Page.business_unit_id == business_unit_id)
    if status:
        query = query.where(Page.status == status)

    result = await db.execute(query.order_by(Page.updated_at.desc()))
    return result.scalars().all()


@router.post("", response_model=PageResponse, status_code=201)
async def create_page(
    business_unit_id: UUID,
    data: PageCreate,
    request: Request,
    current_user: User = Depends(get_current_active_user),
    db: AsyncSession = Depends(get_db),
):
    """Create a page"""
    await require_content_manager(business_unit_id, current_user)

    page = Page(business_unit_id=business_unit_id, **data.model_dump())
    if page.status == PublishStatus.PUBLISHED:
        page.published_at = datetime.utcnow()
    db.add(page)
    await db.flush()

    record_audit(
        db,
        business_unit_id=business_unit_id,
        actor=current_user,
        action="create",
        resource_type="page",
        resource_id=page.id,
        data=data.model_dump(),
        request=request,
    )
    await db.commit()
    await db.refresh(page)

    logger.info("Page created", business_unit_id=str(business_unit_id), page_id=str(page.id))
    return page


@router.get("/{page_id}", response_model=PageResponse)
async def get_page(
    business_unit_id: UUID,
    page_id: UUID,
    current_user: User = Depends(get_current_active_user),
    db: AsyncSession = Depends(get_db),
):
    """Get a specific page"""
    await verify_business_unit_access(business_unit_id, current_user)
    return await get_owned_or_404(db, Page, business_unit_id, page_id, "Page")


@router.patch("/{page_id}", response_model=PageResponse)
async def update_page(
    business_unit_id: UUID,
    page_id: UUID,
    data: PageUpdate,
    request: Request,
    current_user: User = Depends(get_current_active_user),
    db: AsyncSession = Depends(get_db),
):
    """Update a page; publishing stamps published_at"""
    await require_content_manager(business_unit_id, current_user)

    changes = data.model_dump(exclude_unset=True)
    if not changes:
        raise HTTPException(status_code=400, detail="No valid fields to update")

    page = await get_owned_or_404(db, Page, business_unit_id, page_id, "Page")
    apply_changes(page, changes)
    if changes.get("status") == PublishStatus.PUBLISHED:
        page.published_at = datetime.utcnow()

    record_audit(
        db,
        business_unit_id=business_unit_id,
        actor=current_user,
        action="update",
        resource_type="page",
        resource_id=page.id,
        data=changes,
        request=request,
    )
    await db.commit()
    await db.refresh(page)
    return page


@router.delete("/{page_id}", status_code=204)
async def delete_page(
    business_unit_id: UUID,
    page_id: UUID,
    request: Request,
    current_user: User = Depends(get_current_active_user),
    db: AsyncSession = Depends(get_db),
):
    """Delete a page"""
    await require_content_manager(business_unit_id, current_user)
    page = await get_owned_or_404(db, Page, business_unit_id, page_id, "Page")

    await db.delete(page)
    record_audit(
        db,
        business_unit_id=business_unit_id,
        actor=current_user,
        action="delete",
        resource_type="page",
        resource_id=page_id,
        request=request,
    )
    await db.commit()

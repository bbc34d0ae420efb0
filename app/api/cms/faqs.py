"""FAQ API endpoints"""

from typing import List, Optional
from uuid import UUID

from fastapi import APIRouter, Depends, Request
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import get_db
from app.models.cms import FAQ
from app.models.user import User
from app.schemas.cms import FAQCreate, FAQUpdate, FAQResponse
from app.api.auth import get_current_active_user, verify_business_unit_access
from app.api.audit import record_audit
from app.api.cms.common import require_content_manager, get_owned_or_404, apply_changes

router = APIRouter()


@router.get("", response_model=List[FAQResponse])
async def list_faqs(
    business_unit_id: UUID,
    category: Optional[str] = None,
    current_user: User = Depends(get_current_active_user),
    db: AsyncSession = Depends(get_db),
):
    """List FAQs for a business unit"""
    await verify_business_unit_access(business_unit_id, current_user)

    query = select(FAQ).where(FAQ.business_unit_id == business_unit_id)
    if category:
        query = query.where(FAQ.category == category)

    result = await db.execute(query.order_by(FAQ.category, FAQ.sort_order))
    return result.scalars().all()


@router.post("", response_model=FAQResponse, status_code=201)
async def create_faq(
    business_unit_id: UUID,
    data: FAQCreate,
    request: Request,
    current_user: User = Depends(get_current_active_user),
    db: AsyncSession = Depends(get_db),
):
    """Create a FAQ"""
    await require_content_manager(business_unit_id, current_user)

    faq = FAQ(business_unit_id=business_unit_id, **data.model_dump())
    db.add(faq)
    await db.flush()

    record_audit(
        db,
        business_unit_id=business_unit_id,
        actor=current_user,
        action="create",
        resource_type="faq",
        resource_id=faq.id,
        data=data.model_dump(),
        request=request,
    )
    await db.commit()
    await db.refresh(faq)
    return faq


@router.put("/{faq_id}", response_model=FAQResponse)
async def update_faq(
    business_unit_id: UUID,
    faq_id: UUID,
    data: FAQUpdate,
    request: Request,
    current_user: User = Depends(get_current_active_user),
    db: AsyncSession = Depends(get_db),
):
    """Update a FAQ"""
    await require_content_manager(business_unit_id, current_user)
    faq = await get_owned_or_404(db, FAQ, business_unit_id, faq_id, "FAQ")

    changes = data.model_dump(exclude_unset=True)
    apply_changes(faq, changes)

    record_audit(
        db,
        business_unit_id=business_unit_id,
        actor=current_user,
        action="update",
        resource_type="faq",
        resource_id=faq.id,
        data=changes,
        request=request,
    )
    await db.commit()
    await db.refresh(faq)
    return faq


@router.delete("/{faq_id}", status_code=204)
async def delete_faq(
    business_unit_id: UUID,
    faq_id: UUID,
    request: Request,
    current_user: User = Depends(get_current_active_user),
    db: AsyncSession = Depends(get_db),
):
    """Delete a FAQ"""
    await require_content_manager(business_unit_id, current_user)
    faq = await get_owned_or_404(db, FAQ, business_unit_id, faq_id, "FAQ")

    await db.delete(faq)
    record_audit(
        db,
        business_unit_id=business_unit_id,
        actor=current_user,
        action="delete",
        resource_type="faq",
        resource_id=faq_id,
        request=request,
    )
    await db.commit()

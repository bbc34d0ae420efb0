"""Special offer API endpoints"""

from typing import List, Optional
from uuid import UUID

import structlog
from fastapi import APIRouter, Depends, HTTPException, Request
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from app.database import get_db
from app.models.marketing import SpecialOffer, SpecialOfferRoomType, OfferStatus
from app.models.room import RoomType
from app.models.user import User
from app.schemas.marketing import SpecialOfferCreate, SpecialOfferUpdate, SpecialOfferResponse
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

OFFER_OPTIONS = (selectinload(SpecialOffer.room_types).selectinload(SpecialOfferRoomType.room_type),)


async def _room_type_links(db: AsyncSession, business_unit_id: UUID, room_type_ids: List[UUID]):
    """Build offer links, rejecting room types outside the business unit"""
    unique_ids = list(dict.fromkeys(room_type_ids))
    if not unique_ids:
        return []

    result = await db.execute(
        select(RoomType.id).where(
            RoomType.id.in_(unique_ids),
            RoomType.business_unit_id == business_unit_id,
        )
    )
    found = set(result.scalars().all())
    if len(found) != len(unique_ids):
        raise HTTPException(status_code=400, detail="Unknown room type for this business unit")

    return [SpecialOfferRoomType(room_type_id=room_type_id) for room_type_id in unique_ids]


async def _load_offer(db: AsyncSession, offer_id: UUID) -> SpecialOffer:
    result = await db.execute(
        select(SpecialOffer)
        .where(SpecialOffer.id == offer_id)
        .options(*OFFER_OPTIONS)
        .execution_options(populate_existing=True)
    )
    return result.scalar_one()


@router.get("", response_model=List[SpecialOfferResponse])
async def list_special_offers(
    business_unit_id: UUID,
    status: Optional[OfferStatus] = None,
    current_user: User = Depends(get_current_active_user),
    db: AsyncSession = Depends(get_db),
):
    """List special offers, featured and pinned first"""
    await verify_business_unit_access(business_unit_id, current_user)

    query = select(SpecialOffer).where(SpecialOffer.business_unit_id == business_unit_id)
    if status:
        query = query.where(SpecialOffer.status == status)

    query = query.options(*OFFER_OPTIONS).order_by(
        SpecialOffer.is_featured.desc(),
        SpecialOffer.is_pinned.desc(),
        SpecialOffer.sort_order,
        SpecialOffer.created_at.desc(),
    )
    result = await db.execute(query)
    return result.scalars().all()


@router.post("", response_model=SpecialOfferResponse, status_code=201)
async def create_special_offer(
    business_unit_id: UUID,
    data: SpecialOfferCreate,
    request: Request,
    current_user: User = Depends(get_current_active_user),
    db: AsyncSession = Depends(get_db),
):
    """Create a special offer (starts as DRAFT)"""
    await require_content_manager(business_unit_id, current_user)
    await ensure_slug_available(db, SpecialOffer, business_unit_id, data.slug)
    links = await _room_type_links(db, business_unit_id, data.room_type_ids)

    offer = SpecialOffer(
        business_unit_id=business_unit_id,
        status=OfferStatus.DRAFT,
        room_types=links,
        **data.model_dump(exclude={"room_type_ids"}),
    )
    db.add(offer)
    await db.flush()

    record_audit(
        db,
        business_unit_id=business_unit_id,
        actor=current_user,
        action="create",
        resource_type="special_offer",
        resource_id=offer.id,
        data=data.model_dump(),
        request=request,
    )
    await db.commit()

    logger.info("Special offer created", business_unit_id=str(business_unit_id), offer_id=str(offer.id))
    return await _load_offer(db, offer.id)


@router.get("/{offer_id}", response_model=SpecialOfferResponse)
async def get_special_offer(
    business_unit_id: UUID,
    offer_id: UUID,
    current_user: User = Depends(get_current_active_user),
    db: AsyncSession = Depends(get_db),
):
    """Get a specific special offer"""
    await verify_business_unit_access(business_unit_id, current_user)
    return await get_owned_or_404(db, SpecialOffer, business_unit_id, offer_id, "Special offer", OFFER_OPTIONS)


@router.put("/{offer_id}", response_model=SpecialOfferResponse)
async def update_special_offer(
    business_unit_id: UUID,
    offer_id: UUID,
    data: SpecialOfferUpdate,
    request: Request,
    current_user: User = Depends(get_current_active_user),
    db: AsyncSession = Depends(get_db),
):
    """Update a special offer and optionally its room types"""
    await require_content_manager(business_unit_id, current_user)
    offer = await get_owned_or_404(db, SpecialOffer, business_unit_id, offer_id, "Special offer", OFFER_OPTIONS)

    changes = data.model_dump(exclude_unset=True)
    if changes.get("slug") and changes["slug"] != offer.slug:
        await ensure_slug_available(db, SpecialOffer, business_unit_id, changes["slug"], exclude_id=offer.id)

    valid_from = changes.get("valid_from") or offer.valid_from
    valid_to = changes.get("valid_to") or offer.valid_to
    if valid_to < valid_from:
        raise HTTPException(status_code=422, detail="valid_to must not precede valid_from")

    room_type_ids = changes.pop("room_type_ids", None)
    if room_type_ids is not None:
        existing = {link.room_type_id: link for link in offer.room_types}
        offer.room_types = [
            existing.get(link.room_type_id, link)
            for link in await _room_type_links(db, business_unit_id, room_type_ids)
        ]

    apply_changes(offer, changes)

    record_audit(
        db,
        business_unit_id=business_unit_id,
        actor=current_user,
        action="update",
        resource_type="special_offer",
        resource_id=offer.id,
        data={**changes, "room_type_ids": room_type_ids},
        request=request,
    )
    await db.commit()
    return await _load_offer(db, offer.id)


@router.delete("/{offer_id}", status_code=204)
async def delete_special_offer(
    business_unit_id: UUID,
    offer_id: UUID,
    request: Request,
    current_user: User = Depends(get_current_active_user),
    db: AsyncSession = Depends(get_db),
):
    """Delete a special offer"""
    await require_content_manager(business_unit_id, current_user)
    offer = await get_owned_or_404(db, SpecialOffer, business_unit_id, offer_id, "Special offer", OFFER_OPTIONS)

    await db.delete(offer)
    record_audit(
        db,
        business_unit_id=business_unit_id,
        actor=current_user,
        action="delete",
        resource_type="special_offer",
        resource_id=offer_id,
        request=request,
    )
    await db.commit()

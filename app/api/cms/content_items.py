"""Feature highlights and contact details, stored as keyed content items"""

import json
import time
from typing import Any, Dict, List
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, Request
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import get_db
from app.models.cms import ContentItem, ContentType, PublishStatus
from app.models.user import User
from app.schemas.cms import (
    ContentItemResponse,
    FeatureCreate,
    FeatureUpdate,
    ContactInfoCreate,
    ContactInfoUpdate,
)
from app.api.auth import get_current_active_user, verify_business_unit_access
from app.api.audit import record_audit
from app.api.cms.common import require_content_manager, get_owned_or_404

features_router = APIRouter()
contact_router = APIRouter()

FEATURES_SECTION = "features"
CONTACT_SECTION = "contact"


def _timestamp_ms() -> int:
    return int(time.time() * 1000)


def _status_for(is_active: bool) -> PublishStatus:
    return PublishStatus.PUBLISHED if is_active else PublishStatus.DRAFT


async def _list_section(db: AsyncSession, business_unit_id: UUID, section: str) -> List[ContentItem]:
    result = await db.execute(
        select(ContentItem)
        .where(ContentItem.business_unit_id == business_unit_id, ContentItem.section == section)
        .order_by(ContentItem.created_at.desc())
    )
    return result.scalars().all()


async def _get_section_item(db: AsyncSession, business_unit_id: UUID, section: str, item_id: UUID, label: str):
    item = await get_owned_or_404(db, ContentItem, business_unit_id, item_id, label)
    if item.section != section:
        raise HTTPException(status_code=404, detail=f"{label} not found")
    return item


async def _save(
    db: AsyncSession,
    item: ContentItem,
    action: str,
    current_user: User,
    request: Request,
    data: Dict[str, Any],
) -> ContentItem:
    record_audit(
        db,
        business_unit_id=item.business_unit_id,
        actor=current_user,
        action=action,
        resource_type=f"content_item:{item.section}",
        resource_id=item.id,
        data=data,
        request=request,
    )
    await db.commit()
    await db.refresh(item)
    return item


async def _delete(
    db: AsyncSession,
    business_unit_id: UUID,
    section: str,
    item_id: UUID,
    label: str,
    current_user: User,
    request: Request,
):
    item = await _get_section_item(db, business_unit_id, section, item_id, label)
    await db.delete(item)
    record_audit(
        db,
        business_unit_id=business_unit_id,
        actor=current_user,
        action="delete",
        resource_type=f"content_item:{section}",
        resource_id=item_id,
        request=request,
    )
    await db.commit()


@features_router.get("", response_model=List[ContentItemResponse])
async def list_features(
    business_unit_id: UUID,
    current_user: User = Depends(get_current_active_user),
    db: AsyncSession = Depends(get_db),
):
    """List website feature highlights"""
    await verify_business_unit_access(business_unit_id, current_user)
    return await _list_section(db, business_unit_id, FEATURES_SECTION)


@features_router.post("", response_model=ContentItemResponse, status_code=201)
async def create_feature(
    business_unit_id: UUID,
    data: FeatureCreate,
    request: Request,
    current_user: User = Depends(get_current_active_user),
    db: AsyncSession = Depends(get_db),
):
    """Create a feature highlight"""
    await require_content_manager(business_unit_id, current_user)

    payload = {
        "title": data.title,
        "description": data.description,
        "icon_name": data.icon_name,
        "sort_order": data.sort_order,
    }
    item = ContentItem(
        business_unit_id=business_unit_id,
        key=f"feature_{_timestamp_ms()}",
        section=FEATURES_SECTION,
        name=data.title,
        description=data.description,
        content=json.dumps(payload),
        content_type=ContentType.JSON,
        status=_status_for(data.is_active),
        created_by_id=current_user.id,
    )
    db.add(item)
    await db.flush()
    return await _save(db, item, "create", current_user, request, data.model_dump())


@features_router.put("/{item_id}", response_model=ContentItemResponse)
async def update_feature(
    business_unit_id: UUID,
    item_id: UUID,
    data: FeatureUpdate,
    request: Request,
    current_user: User = Depends(get_current_active_user),
    db: AsyncSession = Depends(get_db),
):
    """Update a feature highlight"""
    await require_content_manager(business_unit_id, current_user)
    item = await _get_section_item(db, business_unit_id, FEATURES_SECTION, item_id, "Feature")

    changes = data.model_dump(exclude_unset=True)
    is_active = changes.pop("is_active", None)

    payload = item.payload
    payload.update(changes)
    item.content = json.dumps(payload)
    item.name = payload.get("title", item.name)
    item.description = payload.get("description", item.description)
    if is_active is not None:
        item.status = _status_for(is_active)

    return await _save(db, item, "update", current_user, request, data.model_dump(exclude_unset=True))


@features_router.delete("/{item_id}", status_code=204)
async def delete_feature(
    business_unit_id: UUID,
    item_id: UUID,
    request: Request,
    current_user: User = Depends(get_current_active_user),
    db: AsyncSession = Depends(get_db),
):
    """Delete a feature highlight"""
    await require_content_manager(business_unit_id, current_user)
    await _delete(db, business_unit_id, FEATURES_SECTION, item_id, "Feature", current_user, request)


@contact_router.get("", response_model=List[ContentItemResponse])
async def list_contact_info(
    business_unit_id: UUID,
    current_user: User = Depends(get_current_active_user),
    db: AsyncSession = Depends(get_db),
):
    """List contact details"""
    await verify_business_unit_access(business_unit_id, current_user)
    return await _list_section(db, business_unit_id, CONTACT_SECTION)


@contact_router.post("", response_model=ContentItemResponse, status_code=201)
async def create_contact_info(
    business_unit_id: UUID,
    data: ContactInfoCreate,
    request: Request,
    current_user: User = Depends(get_current_active_user),
    db: AsyncSession = Depends(get_db),
):
    """Create a contact detail"""
    await require_content_manager(business_unit_id, current_user)

    payload = {
        "type": data.type,
        "label": data.label,
        "value": data.value,
        "icon_name": data.icon_name,
        "sort_order": data.sort_order,
    }
    item = ContentItem(
        business_unit_id=business_unit_id,
        key=f"contact_{data.type.lower()}_{_timestamp_ms()}",
        section=CONTACT_SECTION,
        name=data.label,
        content=json.dumps(payload),
        content_type=ContentType.JSON,
        status=_status_for(data.is_active),
        created_by_id=current_user.id,
    )
    db.add(item)
    await db.flush()
    return await _save(db, item, "create", current_user, request, data.model_dump())


@contact_router.put("/{item_id}", response_model=ContentItemResponse)
async def update_contact_info(
    business_unit_id: UUID,
    item_id: UUID,
    data: ContactInfoUpdate,
    request: Request,
    current_user: User = Depends(get_current_active_user),
    db: AsyncSession = Depends(get_db),
):
    """Update a contact detail"""
    await require_content_manager(business_unit_id, current_user)
    item = await _get_section_item(db, business_unit_id, CONTACT_SECTION, item_id, "Contact info")

    changes = data.model_dump(exclude_unset=True)
    is_active = changes.pop("is_active", None)

    payload = item.payload
    payload.update(changes)
    item.content = json.dumps(payload)
    item.name = payload.get("label", item.name)
    if is_active is not None:
        item.status = _status_for(is_active)

    return await _save(db, item, "update", current_user, request, data.model_dump(exclude_unset=True))


@contact_router.delete("/{item_id}", status_code=204)
async def delete_contact_info(
    business_unit_id: UUID,
    item_id: UUID,
    request: Request,
    current_user: User = Depends(get_current_active_user),
    db: AsyncSession = Depends(get_db),
):
    """Delete a contact detail"""
    await require_content_manager(business_unit_id, current_user)
    await _delete(db, business_unit_id, CONTACT_SECTION, item_id, "Contact info", current_user, request)

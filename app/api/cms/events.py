"""Event API endpoints"""

from typing import List, Optional
from uuid import UUID

import structlog
from fastapi import APIRouter, Depends, HTTPException, Request
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from app.database import get_db
from app.models.marketing import Event, EventStatus
from app.models.user import User
from app.schemas.marketing import EventCreate, EventUpdate, EventResponse
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

EVENT_OPTIONS = (selectinload(Event.business_unit),)


async def _load_event(db: AsyncSession, event_id: UUID) -> Event:
    result = await db.execute(
        select(Event)
        .where(Event.id == event_id)
        .options(*EVENT_OPTIONS)
        .execution_options(populate_existing=True)
    )
    return result.scalar_one()


@router.get("", response_model=List[EventResponse])
async def list_events(
    business_unit_id: UUID,
    status: Optional[EventStatus] = None,
    published_only: bool = False,
    current_user: User = Depends(get_current_active_user),
    db: AsyncSession = Depends(get_db),
):
    """List events, featured and pinned first"""
    await verify_business_unit_access(business_unit_id, current_user)

    query = select(Event).where(Event.business_unit_id == business_unit_id)
    if status:
        query = query.where(Event.status == status)
    if published_only:
        query = query.where(Event.is_published == True)

    query = query.options(*EVENT_OPTIONS).order_by(
        Event.is_featured.desc(),
        Event.is_pinned.desc(),
        Event.sort_order,
        Event.start_date,
    )
    result = await db.execute(query)
    return result.scalars().all()


@router.post("", response_model=EventResponse, status_code=201)
async def create_event(
    business_unit_id: UUID,
    data: EventCreate,
    request: Request,
    current_user: User = Depends(get_current_active_user),
    db: AsyncSession = Depends(get_db),
):
    """Create an event"""
    await require_content_manager(business_unit_id, current_user)
    await ensure_slug_available(db, Event, business_unit_id, data.slug)

    event = Event(business_unit_id=business_unit_id, **data.model_dump())
    db.add(event)
    await db.flush()

    record_audit(
        db,
        business_unit_id=business_unit_id,
        actor=current_user,
        action="create",
        resource_type="event",
        resource_id=event.id,
        data=data.model_dump(),
        request=request,
    )
    await db.commit()

    logger.info("Event created", business_unit_id=str(business_unit_id), event_id=str(event.id))
    return await _load_event(db, event.id)


@router.get("/{event_id}", response_model=EventResponse)
async def get_event(
    business_unit_id: UUID,
    event_id: UUID,
    current_user: User = Depends(get_current_active_user),
    db: AsyncSession = Depends(get_db),
):
    """Get a specific event"""
    await verify_business_unit_access(business_unit_id, current_user)
    return await get_owned_or_404(db, Event, business_unit_id, event_id, "Event", EVENT_OPTIONS)


@router.put("/{event_id}", response_model=EventResponse)
async def update_event(
    business_unit_id: UUID,
    event_id: UUID,
    data: EventUpdate,
    request: Request,
    current_user: User = Depends(get_current_active_user),
    db: AsyncSession = Depends(get_db),
):
    """Update an event"""
    await require_content_manager(business_unit_id, current_user)
    event = await get_owned_or_404(db, Event, business_unit_id, event_id, "Event")

    changes = data.model_dump(exclude_unset=True)
    if changes.get("slug") and changes["slug"] != event.slug:
        await ensure_slug_available(db, Event, business_unit_id, changes["slug"], exclude_id=event.id)

    start_date = changes.get("start_date") or event.start_date
    end_date = changes.get("end_date") or event.end_date
    if end_date < start_date:
        raise HTTPException(status_code=422, detail="end_date must not precede start_date")

    apply_changes(event, changes)

    record_audit(
        db,
        business_unit_id=business_unit_id,
        actor=current_user,
        action="update",
        resource_type="event",
        resource_id=event.id,
        data=changes,
        request=request,
    )
    await db.commit()
    return await _load_event(db, event.id)


@router.delete("/{event_id}", status_code=204)
async def delete_event(
    business_unit_id: UUID,
    event_id: UUID,
    request: Request,
    current_user: User = Depends(get_current_active_user),
    db: AsyncSession = Depends(get_db),
):
    """Delete an event"""
    await require_content_manager(business_unit_id, current_user)
    event = await get_owned_or_404(db, Event, business_unit_id, event_id, "Event")

    await db.delete(event)
    record_audit(
        db,
        business_unit_id=business_unit_id,
        actor=current_user,
        action="delete",
        resource_type="event",
        resource_id=event_id,
        request=request,
    )
    await db.commit()

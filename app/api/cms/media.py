"""Media library and website gallery API endpoints"""

from typing import List, Optional
from uuid import UUID

import structlog
from fastapi import APIRouter, Depends, HTTPException, Request
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import get_db
from app.models.cms import MediaItem
from app.models.user import User
from app.schemas.cms import MediaItemCreate, MediaItemUpdate, MediaItemResponse, GalleryItemCreate
from app.api.auth import get_current_active_user, verify_business_unit_access
from app.api.audit import record_audit
from app.api.cms.common import require_content_manager, get_owned_or_404, apply_changes

router = APIRouter()
gallery_router = APIRouter()
logger = structlog.get_logger()

GALLERY_CATEGORY = "gallery"


@router.get("", response_model=List[MediaItemResponse])
async def list_media(
    business_unit_id: UUID,
    category: Optional[str] = None,
    current_user: User = Depends(get_current_active_user),
    db: AsyncSession = Depends(get_db),
):
    """List media items, newest first"""
    await verify_business_unit_access(business_unit_id, current_user)

    query = select(MediaItem).where(MediaItem.business_unit_id == business_unit_id)
    if category:
        query = query.where(MediaItem.category == category)

    result = await db.execute(query.order_by(MediaItem.created_at.desc()))
    return result.scalars().all()


@router.post("", response_model=MediaItemResponse, status_code=201)
async def create_media_item(
    business_unit_id: UUID,
    data: MediaItemCreate,
    request: Request,
    current_user: User = Depends(get_current_active_user),
    db: AsyncSession = Depends(get_db),
):
    """Register an uploaded file"""
    await require_content_manager(business_unit_id, current_user)

    item = MediaItem(business_unit_id=business_unit_id, **data.model_dump())
    db.add(item)
    await db.flush()

    record_audit(
        db,
        business_unit_id=business_unit_id,
        actor=current_user,
        action="create",
        resource_type="media_item",
        resource_id=item.id,
        data=data.model_dump(),
        request=request,
    )
    await db.commit()
    await db.refresh(item)

    logger.info("Media item created", business_unit_id=str(business_unit_id), media_id=str(item.id))
    return item


@router.get("/{media_id}", response_model=MediaItemResponse)
async def get_media_item(
    business_unit_id: UUID,
    media_id: UUID,
    current_user: User = Depends(get_current_active_user),
    db: AsyncSession = Depends(get_db),
):
    """Get a specific media item"""
    await verify_business_unit_access(business_unit_id, current_user)
    return await get_owned_or_404(db, MediaItem, business_unit_id, media_id, "Media item")


@router.patch("/{media_id}", response_model=MediaItemResponse)
async def update_media_item(
    business_unit_id: UUID,
    media_id: UUID,
    data: MediaItemUpdate,
    request: Request,
    current_user: User = Depends(get_current_active_user),
    db: AsyncSession = Depends(get_db),
):
    """Update media metadata (title, description, category, tags, alt text)"""
    await require_content_manager(business_unit_id, current_user)

    changes = data.model_dump(exclude_unset=True)
    if not changes:
        raise HTTPException(status_code=400, detail="No valid fields to update")

    item = await get_owned_or_404(db, MediaItem, business_unit_id, media_id, "Media item")
    apply_changes(item, changes)

    record_audit(
        db,
        business_unit_id=business_unit_id,
        actor=current_user,
        action="update",
        resource_type="media_item",
        resource_id=item.id,
        data=changes,
        request=request,
    )
    await db.commit()
    await db.refresh(item)
    return item


@router.delete("/{media_id}", status_code=204)
async def delete_media_item(
    business_unit_id: UUID,
    media_id: UUID,
    request: Request,
    current_user: User = Depends(get_current_active_user),
    db: AsyncSession = Depends(get_db),
):
    """Delete a media item"""
    await require_content_manager(business_unit_id, current_user)
    item = await get_owned_or_404(db, MediaItem, business_unit_id, media_id, "Media item")

    await db.delete(item)
    record_audit(
        db,
        business_unit_id=business_unit_id,
        actor=current_user,
        action="delete",
        resource_type="media_item",
        resource_id=media_id,
        request=request,
    )
    await db.commit()


@gallery_router.get("", response_model=List[MediaItemResponse])
async def list_gallery(
    business_unit_id: UUID,
    current_user: User = Depends(get_current_active_user),
    db: AsyncSession = Depends(get_db),
):
    """List active gallery images, newest first"""
    await verify_business_unit_access(business_unit_id, current_user)

    result = await db.execute(
        select(MediaItem)
        .where(
            MediaItem.business_unit_id == business_unit_id,
            MediaItem.category == GALLERY_CATEGORY,
            MediaItem.is_active == True,
        )
        .order_by(MediaItem.created_at.desc())
    )
    return result.scalars().all()


@gallery_router.post("", response_model=MediaItemResponse, status_code=201)
async def create_gallery_item(
    business_unit_id: UUID,
    data: GalleryItemCreate,
    request: Request,
    current_user: User = Depends(get_current_active_user),
    db: AsyncSession = Depends(get_db),
):
    """Add an image URL to the gallery"""
    await require_content_manager(business_unit_id, current_user)

    item = MediaItem(
        business_unit_id=business_unit_id,
        filename=data.image_url.rstrip("/").split("/")[-1] or "image",
        original_name=data.title,
        mime_type="image/jpeg",
        size=0,
        url=data.image_url,
        title=data.title,
        description=data.description,
        category=data.category,
        tags=[],
        is_active=data.is_active,
    )
    db.add(item)
    await db.flush()

    record_audit(
        db,
        business_unit_id=business_unit_id,
        actor=current_user,
        action="create",
        resource_type="gallery_item",
        resource_id=item.id,
        data=data.model_dump(),
        request=request,
    )
    await db.commit()
    await db.refresh(item)
    return item


@gallery_router.delete("/{media_id}", status_code=204)
async def delete_gallery_item(
    business_unit_id: UUID,
    media_id: UUID,
    request: Request,
    current_user: User = Depends(get_current_active_user),
    db: AsyncSession = Depends(get_db),
):
    """Remove an image from the gallery"""
    await require_content_manager(business_unit_id, current_user)
    item = await get_owned_or_404(db, MediaItem, business_unit_id, media_id, "Gallery item")
    # Other media is only removable through the media endpoints
    if item.category != GALLERY_CATEGORY:
        raise HTTPException(status_code=404, detail="Gallery item not found")

    await db.delete(item)
    record_audit(
        db,
        business_unit_id=business_unit_id,
        actor=current_user,
        action="delete",
        resource_type="gallery_item",
        resource_id=media_id,
        request=request,
    )
    await db.commit()

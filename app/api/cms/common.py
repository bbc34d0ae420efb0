"""Shared helpers for CMS endpoints"""

from typing import Any, Dict, Iterable, Optional, Type
from uuid import UUID

from fastapi import HTTPException, status
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.user import User, PermissionName
from app.api.auth import require_permission


async def require_content_manager(business_unit_id: UUID, current_user: User):
    """Writes need manage:content on the business unit"""
    return await require_permission(business_unit_id, current_user, PermissionName.MANAGE_CONTENT)


async def get_owned_or_404(
    db: AsyncSession,
    model: Type[Any],
    business_unit_id: UUID,
    item_id: UUID,
    label: str,
    options: Iterable = (),
):
    """Fetch a row by id, scoped to the business unit"""
    result = await db.execute(
        select(model)
        .where(model.id == item_id, model.business_unit_id == business_unit_id)
        .options(*options)
    )
    item = result.scalar_one_or_none()
    if not item:
        raise HTTPException(status_code=404, detail=f"{label} not found")
    return item


async def ensure_slug_available(
    db: AsyncSession,
    model: Type[Any],
    business_unit_id: UUID,
    slug: str,
    exclude_id: Optional[UUID] = None,
):
    """Raise 409 when the slug is already used within the business unit"""
    query = select(model.id).where(model.business_unit_id == business_unit_id, model.slug == slug)
    if exclude_id is not None:
        query = query.where(model.id != exclude_id)

    result = await db.execute(query)
    if result.first() is not None:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail=f"Slug '{slug}' is already in use",
        )


def apply_changes(item: Any, changes: Dict[str, Any]) -> None:
    for field, value in changes.items():
        setattr(item, field, value)

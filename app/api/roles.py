"""Role API endpoints"""

from typing import List
from uuid import UUID

from fastapi import APIRouter, Depends
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import get_db
from app.models.user import User, Role
from app.schemas.business_unit import RoleResponse
from app.api.auth import get_current_active_user, verify_business_unit_access

router = APIRouter()


@router.get("", response_model=List[RoleResponse])
async def list_roles(
    business_unit_id: UUID,
    current_user: User = Depends(get_current_active_user),
    db: AsyncSession = Depends(get_db),
):
    """List roles that can be assigned within a business unit"""
    await verify_business_unit_access(business_unit_id, current_user)

    result = await db.execute(select(Role).order_by(Role.display_name))
    return result.scalars().all()

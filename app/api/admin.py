"""Platform-level API endpoints (business unit, role and user directories)"""

from typing import List

from fastapi import APIRouter, Depends, Request, status
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import get_db
from app.models.business_unit import BusinessUnit
from app.models.user import User, Role
from app.schemas.business_unit import (
    BusinessUnitSummary,
    BusinessUnitCreate,
    BusinessUnitResponse,
    RoleSummary,
)
from app.schemas.user import UserCreate, UserResponse
from app.api.auth import get_current_active_user, require_super_admin
from app.api.business_units import create_business_unit
from app.api.users import ASSIGNMENT_OPTIONS, create_user

router = APIRouter()


@router.get("/business-units", response_model=List[BusinessUnitSummary])
async def list_business_units(
    current_user: User = Depends(get_current_active_user),
    db: AsyncSession = Depends(get_db),
):
    """List active business units for selectors"""
    result = await db.execute(
        select(BusinessUnit)
        .where(BusinessUnit.is_active == True)
        .order_by(BusinessUnit.display_name)
    )
    return result.scalars().all()


@router.post("/business-units", response_model=BusinessUnitResponse, status_code=status.HTTP_201_CREATED)
async def create_business_unit_endpoint(
    data: BusinessUnitCreate,
    request: Request,
    current_user: User = Depends(require_super_admin),
    db: AsyncSession = Depends(get_db),
):
    """Create a new business unit (super admins only)"""
    return await create_business_unit(db, data, current_user, request)


@router.get("/roles", response_model=List[RoleSummary])
async def list_roles(
    current_user: User = Depends(get_current_active_user),
    db: AsyncSession = Depends(get_db),
):
    """List roles for selectors"""
    result = await db.execute(select(Role).order_by(Role.display_name))
    return result.scalars().all()


@router.get("/users", response_model=List[UserResponse])
async def list_all_users(
    skip: int = 0,
    limit: int = 100,
    current_user: User = Depends(require_super_admin),
    db: AsyncSession = Depends(get_db),
):
    """List every user across business units (super admins only)"""
    result = await db.execute(
        select(User)
        .options(*ASSIGNMENT_OPTIONS)
        .order_by(User.first_name, User.last_name)
        .offset(skip)
        .limit(limit)
    )
    return result.scalars().all()


@router.post("/users", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
async def create_platform_user(
    data: UserCreate,
    request: Request,
    current_user: User = Depends(require_super_admin),
    db: AsyncSession = Depends(get_db),
):
    """Create a user on any business units (super admins only)"""
    return await create_user(db, data, current_user, request)

"""User management API endpoints"""

from datetime import datetime
from typing import List, Optional
from uuid import UUID

import structlog
from fastapi import APIRouter, Depends, HTTPException, Request, status
from sqlalchemy import select, or_
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from app.database import get_db
from app.models.business_unit import BusinessUnit
from app.models.user import User, Role, UserBusinessUnitRole, UserStatus, RoleName
from app.schemas.user import UserCreate, UserUpdate, UserStatusUpdate, UserResponse
from app.api.auth import (
    get_current_active_user,
    get_password_hash,
    load_user,
    require_admin_access,
    verify_business_unit_access,
)
from app.api.audit import record_audit

router = APIRouter()
logger = structlog.get_logger()

# Assignment details shown in user listings
ASSIGNMENT_OPTIONS = (
    selectinload(User.assignments).selectinload(UserBusinessUnitRole.business_unit),
    selectinload(User.assignments).selectinload(UserBusinessUnitRole.role),
)


async def ensure_unique_identity(
    db: AsyncSession,
    email: Optional[str],
    username: Optional[str],
    exclude_user_id: Optional[UUID] = None,
):
    """Raise 409 naming the field when email or username is taken"""
    conditions = []
    if email is not None:
        conditions.append(User.email == email)
    if username is not None:
        conditions.append(User.username == username)
    if not conditions:
        return

    query = select(User).where(or_(*conditions))
    if exclude_user_id is not None:
        query = query.where(User.id != exclude_user_id)

    result = await db.execute(query)
    for existing in result.scalars().all():
        if email is not None and existing.email == email:
            raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail="Email already exists")
        if username is not None and existing.username == username:
            raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail="Username already exists")


async def create_user(
    db: AsyncSession,
    data: UserCreate,
    current_user: User,
    request: Optional[Request] = None,
) -> User:
    """Create a user with business unit assignments"""
    await ensure_unique_identity(db, data.email, data.username)

    unit_ids = [a.business_unit_id for a in data.assignments]
    if len(set(unit_ids)) != len(unit_ids):
        raise HTTPException(status_code=400, detail="Duplicate business unit in assignments")

    is_super_admin = current_user.has_role(RoleName.SUPER_ADMIN)
    for assignment_data in data.assignments:
        if not is_super_admin:
            await require_admin_access(assignment_data.business_unit_id, current_user)

        business_unit = await db.get(BusinessUnit, assignment_data.business_unit_id)
        if business_unit is None or not business_unit.is_active:
            raise HTTPException(status_code=400, detail="Unknown business unit in assignments")

        role = await db.get(Role, assignment_data.role_id)
        if role is None:
            raise HTTPException(status_code=400, detail="Unknown role in assignments")

    user = User(
        email=data.email,
        username=data.username,
        hashed_password=get_password_hash(data.password),
        first_name=data.first_name,
        last_name=data.last_name,
        phone=data.phone,
        status=data.status,
        created_by=current_user.id,
    )
    db.add(user)
    await db.flush()

    for assignment_data in data.assignments:
        db.add(
            UserBusinessUnitRole(
                user_id=user.id,
                business_unit_id=assignment_data.business_unit_id,
                role_id=assignment_data.role_id,
                assigned_by=current_user.id,
            )
        )

    record_audit(
        db,
        business_unit_id=unit_ids[0],
        actor=current_user,
        action="create",
        resource_type="user",
        resource_id=user.id,
        data=data.model_dump(exclude={"password"}),
        request=request,
    )

    try:
        await db.commit()
    except IntegrityError:
        await db.rollback()
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail="Email or username already exists")

    logger.info("User created", user_id=str(user.id), username=user.username)
    return await load_user(db, user.id)


async def get_unit_member_or_404(db: AsyncSession, business_unit_id: UUID, user_id: UUID) -> User:
    """Load a user only if assigned to the business unit"""
    user = await load_user(db, user_id)
    if user is None or user.assignment_for(business_unit_id) is None:
        raise HTTPException(status_code=404, detail="User not found")
    return user


@router.get("", response_model=List[UserResponse])
async def list_users(
    business_unit_id: UUID,
    current_user: User = Depends(get_current_active_user),
    db: AsyncSession = Depends(get_db),
):
    """List users assigned to a business unit"""
    await verify_business_unit_access(business_unit_id, current_user)

    result = await db.execute(
        select(User)
        .join(UserBusinessUnitRole, UserBusinessUnitRole.user_id == User.id)
        .where(UserBusinessUnitRole.business_unit_id == business_unit_id)
        .options(*ASSIGNMENT_OPTIONS)
        .order_by(User.first_name, User.last_name)
    )
    return result.scalars().unique().all()


@router.post("", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
async def create_unit_user(
    business_unit_id: UUID,
    data: UserCreate,
    request: Request,
    current_user: User = Depends(get_current_active_user),
    db: AsyncSession = Depends(get_db),
):
    """Create a user (unit admins)"""
    await require_admin_access(business_unit_id, current_user)
    return await create_user(db, data, current_user, request)


@router.patch("/{user_id}", response_model=UserResponse)
async def update_user(
    business_unit_id: UUID,
    user_id: UUID,
    data: UserUpdate,
    request: Request,
    current_user: User = Depends(get_current_active_user),
    db: AsyncSession = Depends(get_db),
):
    """Update a user's profile and optionally password"""
    await require_admin_access(business_unit_id, current_user)
    user = await get_unit_member_or_404(db, business_unit_id, user_id)

    changes = data.model_dump(exclude_unset=True)
    await ensure_unique_identity(db, changes.get("email"), changes.get("username"), exclude_user_id=user.id)

    password = changes.pop("password", None)
    if password:
        user.hashed_password = get_password_hash(password)
        user.refresh_token = None

    for field, value in changes.items():
        setattr(user, field, value)

    record_audit(
        db,
        business_unit_id=business_unit_id,
        actor=current_user,
        action="update",
        resource_type="user",
        resource_id=user.id,
        data={**changes, "password_changed": bool(password)},
        request=request,
    )

    try:
        await db.commit()
    except IntegrityError:
        await db.rollback()
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail="Email or username already exists")

    return await load_user(db, user.id)


@router.patch("/{user_id}/status", response_model=UserResponse)
async def update_user_status(
    business_unit_id: UUID,
    user_id: UUID,
    data: UserStatusUpdate,
    request: Request,
    current_user: User = Depends(get_current_active_user),
    db: AsyncSession = Depends(get_db),
):
    """Activate or deactivate a user"""
    await require_admin_access(business_unit_id, current_user)

    if user_id == current_user.id and not data.is_active:
        raise HTTPException(status_code=400, detail="You cannot deactivate your own account")

    user = await get_unit_member_or_404(db, business_unit_id, user_id)
    user.status = UserStatus.ACTIVE if data.is_active else UserStatus.INACTIVE
    if not data.is_active:
        user.refresh_token = None
    user.updated_at = datetime.utcnow()

    record_audit(
        db,
        business_unit_id=business_unit_id,
        actor=current_user,
        action="activate" if data.is_active else "deactivate",
        resource_type="user",
        resource_id=user.id,
        data={"status": user.status},
        request=request,
    )
    await db.commit()

    logger.info("User status changed", user_id=str(user.id), status=user.status.value)
    return await load_user(db, user.id)


@router.delete("/{user_id}", status_code=204)
async def remove_user_from_unit(
    business_unit_id: UUID,
    user_id: UUID,
    request: Request,
    current_user: User = Depends(get_current_active_user),
    db: AsyncSession = Depends(get_db),
):
    """Remove a user's assignment to this business unit"""
    await require_admin_access(business_unit_id, current_user)

    if user_id == current_user.id:
        raise HTTPException(status_code=400, detail="You cannot remove yourself from this business unit")

    result = await db.execute(
        select(UserBusinessUnitRole).where(
            UserBusinessUnitRole.user_id == user_id,
            UserBusinessUnitRole.business_unit_id == business_unit_id,
        )
    )
    assignment = result.scalar_one_or_none()
    if not assignment:
        raise HTTPException(status_code=404, detail="User not found")

    await db.delete(assignment)
    record_audit(
        db,
        business_unit_id=business_unit_id,
        actor=current_user,
        action="unassign",
        resource_type="user",
        resource_id=user_id,
        request=request,
    )
    await db.commit()

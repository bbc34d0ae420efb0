"""Authentication API endpoints and access dependencies"""

from datetime import datetime, timedelta
from uuid import UUID, uuid4

import structlog
from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.security import OAuth2PasswordBearer, OAuth2PasswordRequestForm
from jose import JWTError, jwt
from passlib.context import CryptContext
from sqlalchemy import select, or_
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from app.config import settings
from app.database import get_db
from app.models.user import (
    User,
    Role,
    RolePermission,
    UserBusinessUnitRole,
    RoleName,
    ADMIN_ROLE_NAMES,
)
from app.schemas.auth import Token, RefreshRequest, MessageResponse
from app.schemas.user import UserResponse

router = APIRouter()
logger = structlog.get_logger()

# Password hashing
pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")

# OAuth2 scheme
oauth2_scheme = OAuth2PasswordBearer(tokenUrl="/auth/login")

# Assignments with their unit, role and role permissions
USER_ACCESS_OPTIONS = (
    selectinload(User.assignments).selectinload(UserBusinessUnitRole.business_unit),
    selectinload(User.assignments)
    .selectinload(UserBusinessUnitRole.role)
    .selectinload(Role.permissions)
    .selectinload(RolePermission.permission),
)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify password against hash"""
    return pwd_context.verify(plain_password, hashed_password)


def get_password_hash(password: str) -> str:
    """Hash password"""
    return pwd_context.hash(password)


def _encode_token(user: User, token_type: str, expires: timedelta) -> str:
    payload = {
        "sub": str(user.id),
        "type": token_type,
        "jti": uuid4().hex,
        "exp": datetime.utcnow() + expires,
    }
    return jwt.encode(payload, settings.jwt_secret_key, algorithm=settings.jwt_algorithm)


def create_access_token(user: User) -> str:
    """Create JWT access token"""
    return _encode_token(user, "access", timedelta(minutes=settings.access_token_expire_minutes))


def create_refresh_token(user: User) -> str:
    """Create JWT refresh token"""
    return _encode_token(user, "refresh", timedelta(days=settings.refresh_token_expire_days))


def _issue_tokens(user: User) -> Token:
    access_token = create_access_token(user)
    refresh_token = create_refresh_token(user)
    user.refresh_token = refresh_token
    return Token(
        access_token=access_token,
        refresh_token=refresh_token,
        expires_in=settings.access_token_expire_minutes * 60,
    )


def _decode_subject(token: str, expected_type: str):
    """Return the user id of a token of the expected type, or None"""
    try:
        payload = jwt.decode(token, settings.jwt_secret_key, algorithms=[settings.jwt_algorithm])
    except JWTError:
        return None

    user_id = payload.get("sub")
    if user_id is None or payload.get("type") != expected_type:
        return None

    try:
        return UUID(user_id)
    except ValueError:
        return None


async def load_user(db: AsyncSession, user_id: UUID):
    """Load a user with assignments, roles and permissions"""
    result = await db.execute(
        select(User)
        .where(User.id == user_id)
        .options(*USER_ACCESS_OPTIONS)
        .execution_options(populate_existing=True)
    )
    return result.scalar_one_or_none()


async def get_current_user(
    token: str = Depends(oauth2_scheme),
    db: AsyncSession = Depends(get_db),
) -> User:
    """Get current authenticated user from token"""
    credentials_exception = HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Could not validate credentials",
        headers={"WWW-Authenticate": "Bearer"},
    )

    user_id = _decode_subject(token, "access")
    if user_id is None:
        raise credentials_exception

    user = await load_user(db, user_id)
    if user is None or not user.is_active:
        raise credentials_exception

    return user


async def get_current_active_user(
    current_user: User = Depends(get_current_user),
) -> User:
    """Verify user is active"""
    if not current_user.is_active:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Inactive user")
    return current_user


def require_role(role_name: str):
    """Dependency factory: the user must hold the role on at least one business unit"""
    async def role_checker(current_user: User = Depends(get_current_active_user)) -> User:
        if not current_user.has_role(role_name):
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail="Insufficient permissions",
            )
        return current_user
    return role_checker


require_super_admin = require_role(RoleName.SUPER_ADMIN)


async def verify_business_unit_access(
    business_unit_id: UUID,
    current_user: User,
) -> UserBusinessUnitRole:
    """Verify user is assigned to the business unit and return the assignment"""
    assignment = current_user.assignment_for(business_unit_id)
    if assignment is None:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Access denied to this business unit",
        )
    return assignment


async def require_admin_access(
    business_unit_id: UUID,
    current_user: User,
) -> UserBusinessUnitRole:
    """Verify user administers the business unit"""
    assignment = await verify_business_unit_access(business_unit_id, current_user)
    if assignment.role.name not in ADMIN_ROLE_NAMES:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Admin access required",
        )
    return assignment


async def require_permission(
    business_unit_id: UUID,
    current_user: User,
    permission: str,
) -> UserBusinessUnitRole:
    """Verify the user's role on the business unit carries a permission"""
    assignment = await verify_business_unit_access(business_unit_id, current_user)
    if permission not in assignment.role.permission_names:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail=f"Missing permission: {permission}",
        )
    return assignment


@router.post("/login", response_model=Token)
async def login(
    form_data: OAuth2PasswordRequestForm = Depends(),
    db: AsyncSession = Depends(get_db),
):
    """Authenticate by username or email and return tokens"""
    result = await db.execute(
        select(User).where(
            or_(User.username == form_data.username, User.email == form_data.username)
        )
    )
    user = result.scalar_one_or_none()

    if not user or not verify_password(form_data.password, user.hashed_password):
        logger.info("Login failed", username=form_data.username)
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Incorrect username or password",
            headers={"WWW-Authenticate": "Bearer"},
        )

    if not user.is_active:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="User account is not active",
        )

    user.last_login_at = datetime.utcnow()
    token = _issue_tokens(user)
    await db.commit()

    logger.info("User logged in", user_id=str(user.id))
    return token


@router.post("/refresh", response_model=Token)
async def refresh_token(
    request: RefreshRequest,
    db: AsyncSession = Depends(get_db),
):
    """Rotate the refresh token and issue a new access token"""
    invalid = HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Invalid refresh token",
    )

    user_id = _decode_subject(request.refresh_token, "refresh")
    if user_id is None:
        raise invalid

    result = await db.execute(select(User).where(User.id == user_id))
    user = result.scalar_one_or_none()

    if not user or not user.is_active or user.refresh_token != request.refresh_token:
        raise invalid

    token = _issue_tokens(user)
    await db.commit()
    return token


@router.get("/me", response_model=UserResponse)
async def get_current_user_info(
    current_user: User = Depends(get_current_active_user),
):
    """Get current user with business unit assignments"""
    return current_user


@router.post("/logout", response_model=MessageResponse)
async def logout(
    current_user: User = Depends(get_current_active_user),
    db: AsyncSession = Depends(get_db),
):
    """Logout user by invalidating refresh token"""
    current_user.refresh_token = None
    await db.commit()
    return MessageResponse(message="Successfully logged out")

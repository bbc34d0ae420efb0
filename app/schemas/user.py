"""User management schemas"""

from datetime import datetime
from typing import Optional, List
from uuid import UUID
from pydantic import BaseModel, EmailStr, Field

from app.models.user import UserStatus
from app.schemas.business_unit import BusinessUnitSummary, RoleSummary


class AssignmentCreate(BaseModel):
    """Business unit and role to assign"""
    business_unit_id: UUID
    role_id: UUID


class AssignmentResponse(BaseModel):
    """User assignment with unit and role"""
    id: UUID
    business_unit_id: UUID
    role_id: UUID
    assigned_at: Optional[datetime]
    business_unit: BusinessUnitSummary
    role: RoleSummary

    class Config:
        from_attributes = True


class UserCreate(BaseModel):
    """Create user request"""
    email: EmailStr
    username: str = Field(min_length=3, max_length=100)
    password: str = Field(min_length=8)
    first_name: str = Field(min_length=1, max_length=100)
    last_name: str = Field(min_length=1, max_length=100)
    phone: Optional[str] = None
    status: UserStatus = UserStatus.PENDING_ACTIVATION
    assignments: List[AssignmentCreate] = Field(min_length=1)


class UserUpdate(BaseModel):
    """Update user request"""
    email: Optional[EmailStr] = None
    username: Optional[str] = Field(default=None, min_length=3, max_length=100)
    password: Optional[str] = Field(default=None, min_length=8)
    first_name: Optional[str] = Field(default=None, min_length=1, max_length=100)
    last_name: Optional[str] = Field(default=None, min_length=1, max_length=100)
    phone: Optional[str] = None
    avatar: Optional[str] = None


class UserStatusUpdate(BaseModel):
    """Activate or deactivate a user"""
    is_active: bool


class UserResponse(BaseModel):
    """User response (never carries the password hash)"""
    id: UUID
    email: str
    username: str
    first_name: str
    last_name: str
    phone: Optional[str]
    avatar: Optional[str]
    status: UserStatus
    is_active: bool
    last_login_at: Optional[datetime]
    created_at: datetime
    assignments: List[AssignmentResponse] = []

    class Config:
        from_attributes = True

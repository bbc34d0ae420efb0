"""Business unit and role schemas"""

from datetime import datetime
from typing import Optional
from uuid import UUID
from pydantic import BaseModel, Field

from app.models.business_unit import PropertyType


class BusinessUnitSummary(BaseModel):
    """Business unit option for selectors"""
    id: UUID
    name: str
    display_name: str

    class Config:
        from_attributes = True


class BusinessUnitCreate(BaseModel):
    """Create business unit request"""
    name: str = Field(min_length=1, max_length=255)
    display_name: str = Field(min_length=1, max_length=255)
    description: Optional[str] = None
    property_type: PropertyType = PropertyType.HOTEL
    address: Optional[str] = None
    city: Optional[str] = None
    country: Optional[str] = None
    phone: Optional[str] = None
    email: Optional[str] = None
    website: Optional[str] = None
    logo: Optional[str] = None


class BusinessUnitUpdate(BaseModel):
    """Update business unit request"""
    name: Optional[str] = Field(default=None, min_length=1, max_length=255)
    display_name: Optional[str] = Field(default=None, min_length=1, max_length=255)
    description: Optional[str] = None
    property_type: Optional[PropertyType] = None
    address: Optional[str] = None
    city: Optional[str] = None
    country: Optional[str] = None
    phone: Optional[str] = None
    email: Optional[str] = None
    website: Optional[str] = None
    logo: Optional[str] = None
    is_active: Optional[bool] = None


class BusinessUnitResponse(BaseModel):
    """Business unit response"""
    id: UUID
    name: str
    display_name: str
    description: Optional[str]
    property_type: PropertyType
    address: Optional[str]
    city: Optional[str]
    country: Optional[str]
    phone: Optional[str]
    email: Optional[str]
    website: Optional[str]
    logo: Optional[str]
    is_active: bool
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True


class RoleSummary(BaseModel):
    """Role option for selectors"""
    id: UUID
    name: str
    display_name: str

    class Config:
        from_attributes = True


class RoleResponse(RoleSummary):
    """Role with description"""
    description: Optional[str]
    is_system: bool

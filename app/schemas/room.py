"""Room type and amenity schemas"""

from datetime import datetime
from typing import Optional
from uuid import UUID
from pydantic import BaseModel, Field


class AmenityCreate(BaseModel):
    """Create amenity request"""
    name: str = Field(min_length=1, max_length=255)
    description: Optional[str] = None
    icon: str = Field(min_length=1)
    category: str = Field(min_length=1)
    is_active: bool = True
    sort_order: int = 0


class AmenityUpdate(BaseModel):
    """Update amenity request"""
    name: Optional[str] = Field(default=None, min_length=1, max_length=255)
    description: Optional[str] = None
    icon: Optional[str] = None
    category: Optional[str] = None
    is_active: Optional[bool] = None
    sort_order: Optional[int] = None


class AmenityResponse(BaseModel):
    """Amenity response"""
    id: UUID
    business_unit_id: UUID
    name: str
    description: Optional[str]
    icon: Optional[str]
    category: Optional[str]
    is_active: bool
    sort_order: int
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True


class RoomTypeSummary(BaseModel):
    """Room type reference embedded in other responses"""
    id: UUID
    name: str
    display_name: str
    base_rate: float

    class Config:
        from_attributes = True

"""Event, restaurant and special offer schemas"""

from datetime import datetime, timezone
from typing import Optional, List, Dict, Any
from uuid import UUID
from pydantic import BaseModel, Field, field_validator, model_validator

from app.config import settings
from app.models.marketing import EventStatus, OfferStatus
from app.schemas.business_unit import BusinessUnitSummary
from app.schemas.room import RoomTypeSummary


def to_naive_utc(value: Optional[datetime]) -> Optional[datetime]:
    """Store timestamps as naive UTC to match the DateTime columns"""
    if value is None or value.tzinfo is None:
        return value
    return value.astimezone(timezone.utc).replace(tzinfo=None)


class EventCreate(BaseModel):
    """Create event request"""
    title: str = Field(min_length=1, max_length=255)
    slug: str = Field(min_length=1, max_length=255)
    description: str = Field(min_length=1)
    short_desc: Optional[str] = None
    type: str = Field(min_length=1)
    status: EventStatus = EventStatus.PLANNING
    category: List[str] = []
    tags: List[str] = []
    start_date: datetime
    end_date: datetime
    start_time: Optional[str] = None
    end_time: Optional[str] = None
    timezone: str = settings.default_timezone
    is_multi_day: bool = False
    venue: str = Field(min_length=1)
    venue_details: Optional[str] = None
    venue_capacity: Optional[int] = Field(default=None, ge=0)
    is_free: bool = True
    ticket_price: Optional[float] = Field(default=None, ge=0)
    currency: str = "PHP"
    requires_booking: bool = False
    max_attendees: Optional[int] = Field(default=None, ge=0)
    featured_image: Optional[str] = None
    images: List[str] = []
    highlights: List[str] = []
    host_name: Optional[str] = None
    contact_info: Optional[str] = None
    is_published: bool = False
    is_featured: bool = False
    is_pinned: bool = False
    sort_order: int = 0

    @field_validator("start_date", "end_date")
    @classmethod
    def normalize_dates(cls, value):
        return to_naive_utc(value)

    @model_validator(mode="after")
    def check_dates(self):
        if self.end_date < self.start_date:
            raise ValueError("end_date must not precede start_date")
        return self


class EventUpdate(BaseModel):
    """Update event request"""
    title: Optional[str] = Field(default=None, min_length=1, max_length=255)
    slug: Optional[str] = Field(default=None, min_length=1, max_length=255)
    description: Optional[str] = None
    short_desc: Optional[str] = None
    type: Optional[str] = None
    status: Optional[EventStatus] = None
    category: Optional[List[str]] = None
    tags: Optional[List[str]] = None
    start_date: Optional[datetime] = None
    end_date: Optional[datetime] = None
    start_time: Optional[str] = None
    end_time: Optional[str] = None
    timezone: Optional[str] = None
    is_multi_day: Optional[bool] = None
    venue: Optional[str] = None
    venue_details: Optional[str] = None
    venue_capacity: Optional[int] = Field(default=None, ge=0)
    is_free: Optional[bool] = None
    ticket_price: Optional[float] = Field(default=None, ge=0)
    currency: Optional[str] = None
    requires_booking: Optional[bool] = None
    max_attendees: Optional[int] = Field(default=None, ge=0)
    featured_image: Optional[str] = None
    images: Optional[List[str]] = None
    highlights: Optional[List[str]] = None
    host_name: Optional[str] = None
    contact_info: Optional[str] = None
    is_published: Optional[bool] = None
    is_featured: Optional[bool] = None
    is_pinned: Optional[bool] = None
    sort_order: Optional[int] = None

    @field_validator("start_date", "end_date")
    @classmethod
    def normalize_dates(cls, value):
        return to_naive_utc(value)


class EventResponse(BaseModel):
    """Event response"""
    id: UUID
    business_unit_id: UUID
    title: str
    slug: str
    description: str
    short_desc: Optional[str]
    type: str
    status: EventStatus
    category: List[str]
    tags: List[str]
    start_date: datetime
    end_date: datetime
    start_time: Optional[str]
    end_time: Optional[str]
    timezone: Optional[str]
    venue: str
    venue_capacity: Optional[int]
    is_free: bool
    ticket_price: Optional[float]
    currency: str
    requires_booking: bool
    max_attendees: Optional[int]
    current_attendees: int
    featured_image: Optional[str]
    images: List[str]
    highlights: List[str]
    is_published: bool
    is_featured: bool
    is_pinned: bool
    sort_order: int
    view_count: int
    created_at: datetime
    updated_at: datetime
    business_unit: BusinessUnitSummary

    class Config:
        from_attributes = True


class RestaurantCreate(BaseModel):
    """Create restaurant request"""
    name: str = Field(min_length=1, max_length=255)
    slug: str = Field(min_length=1, max_length=255)
    description: str = Field(min_length=1)
    short_desc: Optional[str] = None
    type: str = Field(min_length=1)
    cuisine: List[str] = []
    location: Optional[str] = None
    phone: Optional[str] = None
    email: Optional[str] = None
    operating_hours: Dict[str, Any] = {}
    features: List[str] = []
    price_range: Optional[str] = None
    accepts_reservations: bool = True
    featured_image: Optional[str] = None
    images: List[str] = []
    is_active: bool = True
    is_published: bool = False
    is_featured: bool = False
    sort_order: int = 0


class RestaurantUpdate(BaseModel):
    """Update restaurant request"""
    name: Optional[str] = Field(default=None, min_length=1, max_length=255)
    slug: Optional[str] = Field(default=None, min_length=1, max_length=255)
    description: Optional[str] = None
    short_desc: Optional[str] = None
    type: Optional[str] = None
    cuisine: Optional[List[str]] = None
    location: Optional[str] = None
    phone: Optional[str] = None
    email: Optional[str] = None
    operating_hours: Optional[Dict[str, Any]] = None
    features: Optional[List[str]] = None
    price_range: Optional[str] = None
    accepts_reservations: Optional[bool] = None
    featured_image: Optional[str] = None
    images: Optional[List[str]] = None
    is_active: Optional[bool] = None
    is_published: Optional[bool] = None
    is_featured: Optional[bool] = None
    sort_order: Optional[int] = None


class RestaurantResponse(BaseModel):
    """Restaurant response"""
    id: UUID
    business_unit_id: UUID
    name: str
    slug: str
    description: str
    short_desc: Optional[str]
    type: str
    cuisine: List[str]
    location: Optional[str]
    phone: Optional[str]
    email: Optional[str]
    operating_hours: Dict[str, Any]
    features: List[str]
    price_range: Optional[str]
    accepts_reservations: bool
    featured_image: Optional[str]
    images: List[str]
    is_active: bool
    is_published: bool
    is_featured: bool
    sort_order: int
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True


class SpecialOfferCreate(BaseModel):
    """Create special offer request"""
    title: str = Field(min_length=1, max_length=255)
    slug: str = Field(min_length=1, max_length=255)
    subtitle: Optional[str] = None
    description: str = Field(min_length=1)
    short_desc: Optional[str] = None
    type: str = Field(min_length=1)
    offer_price: float = Field(ge=0)
    original_price: Optional[float] = Field(default=None, ge=0)
    currency: str = "PHP"
    valid_from: datetime
    valid_to: datetime
    booking_deadline: Optional[datetime] = None
    min_nights: int = Field(default=1, ge=1)
    max_nights: Optional[int] = Field(default=None, ge=1)
    inclusions: List[str] = []
    exclusions: List[str] = []
    terms_conditions: Optional[str] = None
    featured_image: Optional[str] = None
    images: List[str] = []
    promo_code: Optional[str] = None
    requires_code: bool = False
    is_published: bool = False
    is_featured: bool = False
    is_pinned: bool = False
    sort_order: int = 0
    room_type_ids: List[UUID] = []

    @field_validator("valid_from", "valid_to", "booking_deadline")
    @classmethod
    def normalize_dates(cls, value):
        return to_naive_utc(value)

    @model_validator(mode="after")
    def check_validity(self):
        if self.valid_to < self.valid_from:
            raise ValueError("valid_to must not precede valid_from")
        return self


class SpecialOfferUpdate(BaseModel):
    """Update special offer request"""
    title: Optional[str] = Field(default=None, min_length=1, max_length=255)
    slug: Optional[str] = Field(default=None, min_length=1, max_length=255)
    subtitle: Optional[str] = None
    description: Optional[str] = None
    short_desc: Optional[str] = None
    type: Optional[str] = None
    status: Optional[OfferStatus] = None
    offer_price: Optional[float] = Field(default=None, ge=0)
    original_price: Optional[float] = Field(default=None, ge=0)
    currency: Optional[str] = None
    valid_from: Optional[datetime] = None
    valid_to: Optional[datetime] = None
    booking_deadline: Optional[datetime] = None
    min_nights: Optional[int] = Field(default=None, ge=1)
    max_nights: Optional[int] = Field(default=None, ge=1)
    inclusions: Optional[List[str]] = None
    exclusions: Optional[List[str]] = None
    terms_conditions: Optional[str] = None
    featured_image: Optional[str] = None
    images: Optional[List[str]] = None
    promo_code: Optional[str] = None
    requires_code: Optional[bool] = None
    is_published: Optional[bool] = None
    is_featured: Optional[bool] = None
    is_pinned: Optional[bool] = None
    sort_order: Optional[int] = None
    room_type_ids: Optional[List[UUID]] = None

    @field_validator("valid_from", "valid_to", "booking_deadline")
    @classmethod
    def normalize_dates(cls, value):
        return to_naive_utc(value)


class OfferRoomTypeResponse(BaseModel):
    """Room type linked to an offer"""
    room_type_id: UUID
    room_type: RoomTypeSummary

    class Config:
        from_attributes = True


class SpecialOfferResponse(BaseModel):
    """Special offer response"""
    id: UUID
    business_unit_id: UUID
    title: str
    slug: str
    subtitle: Optional[str]
    description: str
    short_desc: Optional[str]
    type: str
    status: OfferStatus
    offer_price: float
    original_price: Optional[float]
    currency: str
    valid_from: datetime
    valid_to: datetime
    booking_deadline: Optional[datetime]
    min_nights: int
    max_nights: Optional[int]
    inclusions: List[str]
    exclusions: List[str]
    terms_conditions: Optional[str]
    featured_image: Optional[str]
    images: List[str]
    promo_code: Optional[str]
    requires_code: bool
    is_published: bool
    is_featured: bool
    is_pinned: bool
    sort_order: int
    created_at: datetime
    updated_at: datetime
    room_types: List[OfferRoomTypeResponse] = []

    class Config:
        from_attributes = True

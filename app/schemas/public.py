"""Public website schemas"""

from datetime import date, datetime
from typing import Optional, List
from uuid import UUID
from pydantic import BaseModel, EmailStr, Field, model_validator

from app.models.business_unit import PropertyType
from app.models.room import RoomCategory
from app.schemas.cms import (
    HeroSlideResponse,
    TestimonialResponse,
    FAQResponse,
    MediaItemResponse,
    WebsiteConfigResponse,
)
from app.schemas.marketing import EventResponse, RestaurantResponse, SpecialOfferResponse


class HotelSummary(BaseModel):
    """Property entry for navigation menus"""
    id: UUID
    display_name: str
    city: Optional[str]

    class Config:
        from_attributes = True


class PublicBusinessUnit(BaseModel):
    """Business unit details safe to show publicly"""
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

    class Config:
        from_attributes = True


class PublicAmenity(BaseModel):
    """Amenity shown on the website"""
    id: UUID
    name: str
    description: Optional[str]
    icon: Optional[str]
    category: Optional[str]

    class Config:
        from_attributes = True


class PublicRoomType(BaseModel):
    """Room type shown on the website"""
    id: UUID
    name: str
    display_name: str
    description: Optional[str]
    type: RoomCategory
    max_occupancy: int
    bed_configuration: Optional[str]
    room_size: Optional[float]
    base_rate: float
    primary_image: Optional[str]
    images: List[str] = []
    amenities: List[PublicAmenity] = []


class PublicHotel(PublicBusinessUnit):
    """Property with its room types and inventory counts"""
    room_types: List[PublicRoomType]
    room_count: int
    guest_count: int


class HomepageResponse(BaseModel):
    """Everything the homepage renders in one payload"""
    business_unit: PublicBusinessUnit
    hotels: List[HotelSummary]
    hero_slides: List[HeroSlideResponse]
    room_types: List[PublicRoomType]
    amenities: List[PublicAmenity]
    testimonials: List[TestimonialResponse]
    faqs: List[FAQResponse]
    website_config: Optional[WebsiteConfigResponse]


class PropertyHomepageResponse(HomepageResponse):
    """Property homepage with promotional content"""
    gallery: List[MediaItemResponse]
    events: List[EventResponse]
    restaurants: List[RestaurantResponse]
    special_offers: List[SpecialOfferResponse]


class PropertyHotelInfo(BaseModel):
    """Property header on the rooms page"""
    id: UUID
    display_name: str
    description: Optional[str]
    city: Optional[str]
    country: Optional[str]
    address: Optional[str]
    gallery: List[str]


class RoomListing(BaseModel):
    """Room type card on the rooms page"""
    id: UUID
    name: str
    display_name: str
    description: Optional[str]
    price_per_night: float
    max_occupancy: int
    bed_configuration: Optional[str]
    room_size: Optional[float]
    image: Optional[str]
    amenities: List[PublicAmenity]


class PropertyRoomsResponse(BaseModel):
    """Rooms page payload"""
    hotel: PropertyHotelInfo
    rooms: List[RoomListing]


class RoomDetailResponse(PublicRoomType):
    """Room detail page payload"""
    gallery: List[str]
    business_unit: PublicBusinessUnit
    currency: str


class QuoteRequest(BaseModel):
    """Stay to price"""
    check_in: date
    check_out: date
    guests: int = Field(default=1, ge=1)

    @model_validator(mode="after")
    def check_dates(self):
        if self.check_out <= self.check_in:
            raise ValueError("check_out must be after check_in")
        return self


class QuoteResponse(BaseModel):
    """Price breakdown for a stay"""
    room_type_id: UUID
    check_in: date
    check_out: date
    guests: int
    nights: int
    nightly_rate: float
    subtotal: float
    tax_rate: float
    taxes: float
    total: float
    currency: str


class ContactFormCreate(BaseModel):
    """Contact form submission"""
    name: str = Field(min_length=1, max_length=255)
    email: EmailStr
    phone: Optional[str] = None
    subject: Optional[str] = None
    message: str = Field(min_length=1)


class ContactFormResponse(BaseModel):
    """Stored contact form submission"""
    id: UUID
    business_unit_id: UUID
    name: str
    email: str
    subject: Optional[str]
    status: str
    created_at: datetime

    class Config:
        from_attributes = True


class NewsletterSubscribe(BaseModel):
    """Newsletter signup"""
    email: EmailStr
    first_name: Optional[str] = None


class NewsletterResponse(BaseModel):
    """Newsletter subscription"""
    id: UUID
    business_unit_id: UUID
    email: str
    is_active: bool
    created_at: datetime

    class Config:
        from_attributes = True

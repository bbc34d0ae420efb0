"""Events, restaurants and special offers promoted on the website"""

import uuid
import enum
from datetime import datetime
from sqlalchemy import Column, String, Integer, Boolean, DateTime, ForeignKey, JSON, Text, Numeric, Enum, UniqueConstraint
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import relationship

from app.database import Base


class EventStatus(str, enum.Enum):
    PLANNING = "PLANNING"
    CONFIRMED = "CONFIRMED"
    CANCELLED = "CANCELLED"
    COMPLETED = "COMPLETED"


class OfferStatus(str, enum.Enum):
    DRAFT = "DRAFT"
    ACTIVE = "ACTIVE"
    EXPIRED = "EXPIRED"


class Event(Base):
    """Hotel event"""
    __tablename__ = "events"
    __table_args__ = (
        UniqueConstraint("business_unit_id", "slug", name="uq_events_business_unit_slug"),
    )

    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    business_unit_id = Column(UUID(as_uuid=True), ForeignKey("business_units.id"), nullable=False)
    title = Column(String(255), nullable=False)
    slug = Column(String(255), nullable=False)
    description = Column(Text, nullable=False)
    short_desc = Column(String(500))
    type = Column(String(50), nullable=False)  # WEDDING, CONFERENCE, FESTIVAL, ...
    status = Column(Enum(EventStatus), default=EventStatus.PLANNING)
    category = Column(JSON, default=list)
    tags = Column(JSON, default=list)

    # Schedule
    start_date = Column(DateTime, nullable=False)
    end_date = Column(DateTime, nullable=False)
    start_time = Column(String(10))  # "18:00"
    end_time = Column(String(10))
    timezone = Column(String(50), default="Asia/Manila")
    is_multi_day = Column(Boolean, default=False)

    # Venue
    venue = Column(String(255), nullable=False)
    venue_details = Column(Text)
    venue_capacity = Column(Integer)

    # Tickets and booking
    is_free = Column(Boolean, default=True)
    ticket_price = Column(Numeric(12, 2))
    currency = Column(String(3), default="PHP")
    requires_booking = Column(Boolean, default=False)
    max_attendees = Column(Integer)
    current_attendees = Column(Integer, default=0)

    # Media
    featured_image = Column(String(500))
    images = Column(JSON, default=list)
    highlights = Column(JSON, default=list)

    # Host
    host_name = Column(String(255))
    contact_info = Column(String(255))

    # Publishing
    is_published = Column(Boolean, default=False)
    is_featured = Column(Boolean, default=False)
    is_pinned = Column(Boolean, default=False)
    sort_order = Column(Integer, default=0)
    view_count = Column(Integer, default=0)

    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    # Relationships
    business_unit = relationship("BusinessUnit")


class Restaurant(Base):
    """On-site restaurant or bar"""
    __tablename__ = "restaurants"
    __table_args__ = (
        UniqueConstraint("business_unit_id", "slug", name="uq_restaurants_business_unit_slug"),
    )

    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    business_unit_id = Column(UUID(as_uuid=True), ForeignKey("business_units.id"), nullable=False)
    name = Column(String(255), nullable=False)
    slug = Column(String(255), nullable=False)
    description = Column(Text, nullable=False)
    short_desc = Column(String(500))
    type = Column(String(50), nullable=False)  # RESTAURANT, BAR, CAFE, POOLSIDE
    cuisine = Column(JSON, default=list)
    location = Column(String(255))
    phone = Column(String(50))
    email = Column(String(255))

    # Operating hours (JSON: {"monday": {"open": "06:00", "close": "22:00"}, ...})
    operating_hours = Column(JSON, default=dict)
    features = Column(JSON, default=list)
    price_range = Column(String(10))  # $, $$, $$$
    accepts_reservations = Column(Boolean, default=True)

    featured_image = Column(String(500))
    images = Column(JSON, default=list)

    is_active = Column(Boolean, default=True)
    is_published = Column(Boolean, default=False)
    is_featured = Column(Boolean, default=False)
    sort_order = Column(Integer, default=0)

    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    # Relationships
    business_unit = relationship("BusinessUnit")


class SpecialOffer(Base):
    """Promotional package or discount"""
    __tablename__ = "special_offers"
    __table_args__ = (
        UniqueConstraint("business_unit_id", "slug", name="uq_special_offers_business_unit_slug"),
    )

    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    business_unit_id = Column(UUID(as_uuid=True), ForeignKey("business_units.id"), nullable=False)
    title = Column(String(255), nullable=False)
    slug = Column(String(255), nullable=False)
    subtitle = Column(String(500))
    description = Column(Text, nullable=False)
    short_desc = Column(String(500))
    type = Column(String(50), nullable=False)  # ROOM_PACKAGE, DINING, SEASONAL, EARLY_BIRD
    status = Column(Enum(OfferStatus), default=OfferStatus.DRAFT)

    # Pricing
    offer_price = Column(Numeric(12, 2), nullable=False)
    original_price = Column(Numeric(12, 2))
    currency = Column(String(3), default="PHP")

    # Validity
    valid_from = Column(DateTime, nullable=False)
    valid_to = Column(DateTime, nullable=False)
    booking_deadline = Column(DateTime)
    min_nights = Column(Integer, default=1)
    max_nights = Column(Integer)

    inclusions = Column(JSON, default=list)
    exclusions = Column(JSON, default=list)
    terms_conditions = Column(Text)

    featured_image = Column(String(500))
    images = Column(JSON, default=list)

    # Promo code
    promo_code = Column(String(50))
    requires_code = Column(Boolean, default=False)

    is_published = Column(Boolean, default=False)
    is_featured = Column(Boolean, default=False)
    is_pinned = Column(Boolean, default=False)
    sort_order = Column(Integer, default=0)

    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    # Relationships
    business_unit = relationship("BusinessUnit")
    room_types = relationship("SpecialOfferRoomType", back_populates="offer", cascade="all, delete-orphan")


class SpecialOfferRoomType(Base):
    """Room types an offer applies to"""
    __tablename__ = "special_offer_room_types"

    offer_id = Column(UUID(as_uuid=True), ForeignKey("special_offers.id"), primary_key=True)
    room_type_id = Column(UUID(as_uuid=True), ForeignKey("room_types.id"), primary_key=True)

    # Relationships
    offer = relationship("SpecialOffer", back_populates="room_types")
    room_type = relationship("RoomType")

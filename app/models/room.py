"""Room inventory models"""

import uuid
import enum
from datetime import datetime
from sqlalchemy import Column, String, Integer, Boolean, DateTime, ForeignKey, JSON, Text, Numeric, Enum
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import relationship

from app.database import Base


class RoomCategory(str, enum.Enum):
    STANDARD = "STANDARD"
    DELUXE = "DELUXE"
    SUITE = "SUITE"
    VILLA = "VILLA"
    FAMILY = "FAMILY"


class RoomStatus(str, enum.Enum):
    AVAILABLE = "AVAILABLE"
    OCCUPIED = "OCCUPIED"
    MAINTENANCE = "MAINTENANCE"
    OUT_OF_ORDER = "OUT_OF_ORDER"


class HousekeepingStatus(str, enum.Enum):
    CLEAN = "CLEAN"
    DIRTY = "DIRTY"
    INSPECTED = "INSPECTED"
    OUT_OF_ORDER = "OUT_OF_ORDER"


class RoomType(Base):
    """Sellable room category of a property"""
    __tablename__ = "room_types"

    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    business_unit_id = Column(UUID(as_uuid=True), ForeignKey("business_units.id"), nullable=False)
    name = Column(String(100), nullable=False)  # DELUXE_ROOM, EXECUTIVE_SUITE
    display_name = Column(String(255), nullable=False)
    type = Column(Enum(RoomCategory), default=RoomCategory.STANDARD)
    description = Column(Text)
    max_occupancy = Column(Integer, nullable=False, default=2)
    bed_configuration = Column(String(255))
    room_size = Column(Numeric(8, 2))  # Square meters
    base_rate = Column(Numeric(12, 2), nullable=False)
    primary_image = Column(String(500))
    images = Column(JSON, default=list)
    is_active = Column(Boolean, default=True)
    sort_order = Column(Integer, default=0)
    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    # Relationships
    business_unit = relationship("BusinessUnit", back_populates="room_types")
    amenities = relationship("RoomTypeAmenity", back_populates="room_type", cascade="all, delete-orphan")
    rooms = relationship("Room", back_populates="room_type")


class Amenity(Base):
    """Property or room amenity shown on the website"""
    __tablename__ = "amenities"

    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    business_unit_id = Column(UUID(as_uuid=True), ForeignKey("business_units.id"), nullable=False)
    name = Column(String(255), nullable=False)
    description = Column(Text)
    icon = Column(String(100))  # Lucide icon name: Wifi, Waves, Car
    category = Column(String(100))  # Room, Property, Dining
    is_active = Column(Boolean, default=True)
    sort_order = Column(Integer, default=0)
    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    # Relationships
    room_types = relationship("RoomTypeAmenity", back_populates="amenity", cascade="all, delete-orphan")


class RoomTypeAmenity(Base):
    """Room type to amenity join"""
    __tablename__ = "room_type_amenities"

    room_type_id = Column(UUID(as_uuid=True), ForeignKey("room_types.id"), primary_key=True)
    amenity_id = Column(UUID(as_uuid=True), ForeignKey("amenities.id"), primary_key=True)

    # Relationships
    room_type = relationship("RoomType", back_populates="amenities")
    amenity = relationship("Amenity", back_populates="room_types")


class Room(Base):
    """Physical room"""
    __tablename__ = "rooms"

    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    business_unit_id = Column(UUID(as_uuid=True), ForeignKey("business_units.id"), nullable=False)
    room_type_id = Column(UUID(as_uuid=True), ForeignKey("room_types.id"), nullable=False)
    room_number = Column(String(20), nullable=False)
    floor = Column(Integer)
    status = Column(Enum(RoomStatus), default=RoomStatus.AVAILABLE)
    housekeeping = Column(Enum(HousekeepingStatus), default=HousekeepingStatus.CLEAN)
    is_active = Column(Boolean, default=True)
    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    # Relationships
    business_unit = relationship("BusinessUnit", back_populates="rooms")
    room_type = relationship("RoomType", back_populates="rooms")

"""Business unit (tenant) models"""

import uuid
import enum
from datetime import datetime
from sqlalchemy import Column, String, Boolean, DateTime, Text, Enum
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import relationship

from app.database import Base


class PropertyType(str, enum.Enum):
    """Kind of hotel property"""
    HOTEL = "HOTEL"
    RESORT = "RESORT"
    BOUTIQUE_HOTEL = "BOUTIQUE_HOTEL"
    VILLA = "VILLA"
    APARTMENT = "APARTMENT"


class BusinessUnit(Base):
    """Hotel property tenant"""
    __tablename__ = "business_units"

    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    name = Column(String(255), nullable=False)
    display_name = Column(String(255), nullable=False)
    description = Column(Text)
    property_type = Column(Enum(PropertyType), default=PropertyType.HOTEL)

    # Location and contact
    address = Column(Text)
    city = Column(String(100))
    country = Column(String(100))
    phone = Column(String(50))
    email = Column(String(255))
    website = Column(String(255))  # Public hostname used to resolve the homepage
    logo = Column(String(500))

    is_active = Column(Boolean, default=True)
    created_by = Column(UUID(as_uuid=True))
    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    # Relationships
    assignments = relationship("UserBusinessUnitRole", back_populates="business_unit")
    room_types = relationship("RoomType", back_populates="business_unit")
    rooms = relationship("Room", back_populates="business_unit")
    website_config = relationship("WebsiteConfiguration", back_populates="business_unit", uselist=False)

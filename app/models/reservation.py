"""Guest and reservation models"""

import uuid
import enum
from datetime import datetime
from sqlalchemy import Column, String, Integer, DateTime, ForeignKey, Text, Numeric, Enum
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import relationship

from app.database import Base


class ReservationStatus(str, enum.Enum):
    PENDING = "PENDING"
    CONFIRMED = "CONFIRMED"
    CHECKED_IN = "CHECKED_IN"
    CHECKED_OUT = "CHECKED_OUT"
    CANCELLED = "CANCELLED"
    NO_SHOW = "NO_SHOW"


class Guest(Base):
    """Hotel guest profile"""
    __tablename__ = "guests"

    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    business_unit_id = Column(UUID(as_uuid=True), ForeignKey("business_units.id"), nullable=False)
    first_name = Column(String(100), nullable=False)
    last_name = Column(String(100), nullable=False)
    email = Column(String(255))
    phone = Column(String(50))
    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    # Relationships
    reservations = relationship("Reservation", back_populates="guest")

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"


class Reservation(Base):
    """Room reservations"""
    __tablename__ = "reservations"

    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    business_unit_id = Column(UUID(as_uuid=True), ForeignKey("business_units.id"), nullable=False)
    guest_id = Column(UUID(as_uuid=True), ForeignKey("guests.id"), nullable=False)
    confirmation_number = Column(String(50), unique=True, nullable=False)

    # Status
    status = Column(Enum(ReservationStatus), default=ReservationStatus.PENDING)

    # Stay
    check_in_date = Column(DateTime, nullable=False)
    check_out_date = Column(DateTime, nullable=False)
    nights = Column(Integer, nullable=False, default=1)
    adults = Column(Integer, default=1)
    children = Column(Integer, default=0)

    # Pricing
    total_amount = Column(Numeric(12, 2), nullable=False, default=0)
    currency = Column(String(3), default="PHP")

    special_requests = Column(Text)

    # Metadata
    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    # Relationships
    guest = relationship("Guest", back_populates="reservations")
    rooms = relationship("ReservationRoom", back_populates="reservation", cascade="all, delete-orphan")


class ReservationRoom(Base):
    """Room allocated to a reservation"""
    __tablename__ = "reservation_rooms"

    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    reservation_id = Column(UUID(as_uuid=True), ForeignKey("reservations.id"), nullable=False)
    room_id = Column(UUID(as_uuid=True), ForeignKey("rooms.id"), nullable=False)

    # Relationships
    reservation = relationship("Reservation", back_populates="rooms")
    room = relationship("Room")

"""Public website submissions"""

import uuid
from datetime import datetime
from sqlalchemy import Column, String, Boolean, DateTime, ForeignKey, Text, UniqueConstraint
from sqlalchemy.dialects.postgresql import UUID

from app.database import Base


class ContactForm(Base):
    """Contact form submitted from the public site"""
    __tablename__ = "contact_forms"

    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    business_unit_id = Column(UUID(as_uuid=True), ForeignKey("business_units.id"), nullable=False)
    name = Column(String(255), nullable=False)
    email = Column(String(255), nullable=False)
    phone = Column(String(50))
    subject = Column(String(255))
    message = Column(Text, nullable=False)
    status = Column(String(50), default="NEW")  # NEW, IN_PROGRESS, RESOLVED
    created_at = Column(DateTime, default=datetime.utcnow)


class Newsletter(Base):
    """Newsletter subscription"""
    __tablename__ = "newsletters"
    __table_args__ = (
        UniqueConstraint("business_unit_id", "email", name="uq_newsletters_business_unit_email"),
    )

    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    business_unit_id = Column(UUID(as_uuid=True), ForeignKey("business_units.id"), nullable=False)
    email = Column(String(255), nullable=False)
    first_name = Column(String(100))
    is_active = Column(Boolean, default=True)
    created_at = Column(DateTime, default=datetime.utcnow)

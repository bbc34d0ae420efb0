"""Website content models"""

import json
import uuid
import enum
from datetime import datetime
from sqlalchemy import Column, String, Integer, Boolean, DateTime, ForeignKey, JSON, Text, Numeric, Enum
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import relationship

from app.database import Base


class PublishStatus(str, enum.Enum):
    DRAFT = "DRAFT"
    PUBLISHED = "PUBLISHED"
    ARCHIVED = "ARCHIVED"


class ContentType(str, enum.Enum):
    TEXT = "TEXT"
    HTML = "HTML"
    MARKDOWN = "MARKDOWN"
    JSON = "JSON"


class HeroSlide(Base):
    """Homepage hero carousel slide"""
    __tablename__ = "hero_slides"

    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    business_unit_id = Column(UUID(as_uuid=True), ForeignKey("business_units.id"), nullable=False)
    title = Column(String(255), nullable=False)
    subtitle = Column(String(500))
    description = Column(Text)
    background_image = Column(String(500), nullable=False)
    background_video = Column(String(500))
    cta_text = Column(String(100))
    cta_url = Column(String(500))
    cta_style = Column(String(50), default="primary")
    text_position = Column(String(50), default="center")
    text_color = Column(String(50), default="white")
    overlay_opacity = Column(Numeric(3, 2), default=0.4)
    is_active = Column(Boolean, default=True)
    sort_order = Column(Integer, default=0)
    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)


class Testimonial(Base):
    """Guest testimonial"""
    __tablename__ = "testimonials"

    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    business_unit_id = Column(UUID(as_uuid=True), ForeignKey("business_units.id"), nullable=False)
    guest_name = Column(String(255), nullable=False)
    guest_title = Column(String(255))
    content = Column(Text, nullable=False)
    rating = Column(Integer, nullable=False, default=5)  # 1-5
    guest_image = Column(String(500))
    is_featured = Column(Boolean, default=False)
    is_active = Column(Boolean, default=True)
    sort_order = Column(Integer, default=0)
    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)


class FAQ(Base):
    """Frequently asked question"""
    __tablename__ = "faqs"

    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    business_unit_id = Column(UUID(as_uuid=True), ForeignKey("business_units.id"), nullable=False)
    question = Column(Text, nullable=False)
    answer = Column(Text, nullable=False)
    category = Column(String(100), nullable=False)
    is_active = Column(Boolean, default=True)
    sort_order = Column(Integer, default=0)
    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)


class MediaItem(Base):
    """Uploaded media in the library; category "gallery" feeds the website gallery"""
    __tablename__ = "media_items"

    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    business_unit_id = Column(UUID(as_uuid=True), ForeignKey("business_units.id"), nullable=False)
    filename = Column(String(255), nullable=False)
    original_name = Column(String(255), nullable=False)
    mime_type = Column(String(100), nullable=False)
    size = Column(Integer, default=0)  # Bytes
    url = Column(String(500), nullable=False)
    thumbnail_url = Column(String(500))
    title = Column(String(255))
    description = Column(Text)
    alt_text = Column(String(255))
    category = Column(String(100))
    tags = Column(JSON, default=list)
    is_active = Column(Boolean, default=True)
    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)


class Page(Base):
    """Free-form website page"""
    __tablename__ = "pages"

    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    business_unit_id = Column(UUID(as_uuid=True), ForeignKey("business_units.id"), nullable=False)
    title = Column(String(255), nullable=False)
    slug = Column(String(255), nullable=False)
    description = Column(Text)
    content = Column(Text)
    content_type = Column(Enum(ContentType), default=ContentType.HTML)
    meta_title = Column(String(255))
    meta_description = Column(Text)
    status = Column(Enum(PublishStatus), default=PublishStatus.DRAFT)
    published_at = Column(DateTime)
    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)


class ContentItem(Base):
    """Keyed content block; backs the features and contact sections"""
    __tablename__ = "content_items"

    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    business_unit_id = Column(UUID(as_uuid=True), ForeignKey("business_units.id"), nullable=False)
    key = Column(String(255), nullable=False)
    section = Column(String(100), nullable=False)  # features, contact
    name = Column(String(255), nullable=False)
    description = Column(Text)
    content = Column(Text, nullable=False)  # JSON payload
    content_type = Column(Enum(ContentType), default=ContentType.JSON)
    status = Column(Enum(PublishStatus), default=PublishStatus.DRAFT)
    created_by_id = Column(UUID(as_uuid=True), ForeignKey("users.id"))
    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    @property
    def payload(self) -> dict:
        """Decoded JSON content"""
        try:
            return json.loads(self.content or "{}")
        except ValueError:
            return {}


class WebsiteConfiguration(Base):
    """Per-property website settings"""
    __tablename__ = "website_configurations"

    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    business_unit_id = Column(UUID(as_uuid=True), ForeignKey("business_units.id"), unique=True, nullable=False)

    # Branding
    site_name = Column(String(255), nullable=False)
    tagline = Column(String(500))
    description = Column(Text)
    logo = Column(String(500))
    favicon = Column(String(500))
    primary_color = Column(String(20))
    secondary_color = Column(String(20))

    # Contact
    primary_phone = Column(String(50))
    primary_email = Column(String(255))
    address = Column(Text)

    # Social links ({"facebook": "...", "instagram": "..."})
    social_links = Column(JSON, default=dict)

    # SEO
    meta_title = Column(String(255))
    meta_description = Column(Text)

    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    # Relationships
    business_unit = relationship("BusinessUnit", back_populates="website_config")

"""Website content schemas"""

from datetime import datetime
from typing import Optional, List, Dict, Any
from uuid import UUID
from pydantic import BaseModel, Field

from app.models.cms import PublishStatus, ContentType


class HeroSlideCreate(BaseModel):
    """Create hero slide request"""
    title: str = Field(min_length=1, max_length=255)
    subtitle: Optional[str] = None
    description: Optional[str] = None
    background_image: str = Field(min_length=1)
    background_video: Optional[str] = None
    cta_text: Optional[str] = None
    cta_url: Optional[str] = None
    cta_style: str = "primary"
    text_position: str = "center"
    text_color: str = "white"
    overlay_opacity: float = Field(default=0.4, ge=0, le=1)
    is_active: bool = True
    sort_order: int = 0


class HeroSlideUpdate(BaseModel):
    """Update hero slide request"""
    title: Optional[str] = Field(default=None, min_length=1, max_length=255)
    subtitle: Optional[str] = None
    description: Optional[str] = None
    background_image: Optional[str] = Field(default=None, min_length=1)
    background_video: Optional[str] = None
    cta_text: Optional[str] = None
    cta_url: Optional[str] = None
    cta_style: Optional[str] = None
    text_position: Optional[str] = None
    text_color: Optional[str] = None
    overlay_opacity: Optional[float] = Field(default=None, ge=0, le=1)
    is_active: Optional[bool] = None
    sort_order: Optional[int] = None


class HeroSlideResponse(BaseModel):
    """Hero slide response"""
    id: UUID
    business_unit_id: UUID
    title: str
    subtitle: Optional[str]
    description: Optional[str]
    background_image: str
    background_video: Optional[str]
    cta_text: Optional[str]
    cta_url: Optional[str]
    cta_style: Optional[str]
    text_position: Optional[str]
    text_color: Optional[str]
    overlay_opacity: Optional[float]
    is_active: bool
    sort_order: int
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True


class TestimonialCreate(BaseModel):
    """Create testimonial request"""
    guest_name: str = Field(min_length=1, max_length=255)
    guest_title: Optional[str] = None
    content: str = Field(min_length=1)
    rating: int = Field(default=5, ge=1, le=5)
    guest_image: Optional[str] = None
    is_featured: bool = False
    is_active: bool = True
    sort_order: int = 0


class TestimonialUpdate(BaseModel):
    """Update testimonial request"""
    guest_name: Optional[str] = Field(default=None, min_length=1, max_length=255)
    guest_title: Optional[str] = None
    content: Optional[str] = Field(default=None, min_length=1)
    rating: Optional[int] = Field(default=None, ge=1, le=5)
    guest_image: Optional[str] = None
    is_featured: Optional[bool] = None
    is_active: Optional[bool] = None
    sort_order: Optional[int] = None


class TestimonialResponse(BaseModel):
    """Testimonial response"""
    id: UUID
    business_unit_id: UUID
    guest_name: str
    guest_title: Optional[str]
    content: str
    rating: int
    guest_image: Optional[str]
    is_featured: bool
    is_active: bool
    sort_order: int
    created_at: datetime

    class Config:
        from_attributes = True


class FAQCreate(BaseModel):
    """Create FAQ request"""
    question: str = Field(min_length=1)
    answer: str = Field(min_length=1)
    category: str = Field(min_length=1)
    is_active: bool = True
    sort_order: int = 0


class FAQUpdate(BaseModel):
    """Update FAQ request"""
    question: Optional[str] = Field(default=None, min_length=1)
    answer: Optional[str] = Field(default=None, min_length=1)
    category: Optional[str] = Field(default=None, min_length=1)
    is_active: Optional[bool] = None
    sort_order: Optional[int] = None


class FAQResponse(BaseModel):
    """FAQ response"""
    id: UUID
    business_unit_id: UUID
    question: str
    answer: str
    category: str
    is_active: bool
    sort_order: int
    created_at: datetime

    class Config:
        from_attributes = True


class MediaItemCreate(BaseModel):
    """Register an uploaded file in the media library"""
    filename: str = Field(min_length=1)
    original_name: str = Field(min_length=1)
    mime_type: str = Field(min_length=1)
    size: int = Field(default=0, ge=0)
    url: str = Field(min_length=1)
    thumbnail_url: Optional[str] = None
    title: Optional[str] = None
    description: Optional[str] = None
    alt_text: Optional[str] = None
    category: Optional[str] = None
    tags: List[str] = []


class MediaItemUpdate(BaseModel):
    """Editable media metadata; other fields are ignored"""
    title: Optional[str] = None
    description: Optional[str] = None
    category: Optional[str] = None
    tags: Optional[List[str]] = None
    alt_text: Optional[str] = None


class MediaItemResponse(BaseModel):
    """Media item response"""
    id: UUID
    business_unit_id: UUID
    filename: str
    original_name: str
    mime_type: str
    size: int
    url: str
    thumbnail_url: Optional[str]
    title: Optional[str]
    description: Optional[str]
    alt_text: Optional[str]
    category: Optional[str]
    tags: List[str]
    is_active: bool
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True


class GalleryItemCreate(BaseModel):
    """Add an image to the website gallery"""
    title: str = Field(min_length=1)
    image_url: str = Field(min_length=1)
    category: str = "gallery"
    description: Optional[str] = None
    is_active: bool = True


class PageCreate(BaseModel):
    """Create page request"""
    title: str = Field(min_length=1, max_length=255)
    slug: str = Field(min_length=1, max_length=255)
    description: Optional[str] = None
    content: Optional[str] = None
    content_type: ContentType = ContentType.HTML
    meta_title: Optional[str] = None
    meta_description: Optional[str] = None
    status: PublishStatus = PublishStatus.DRAFT


class PageUpdate(BaseModel):
    """Update page request"""
    title: Optional[str] = Field(default=None, min_length=1, max_length=255)
    slug: Optional[str] = Field(default=None, min_length=1, max_length=255)
    description: Optional[str] = None
    content: Optional[str] = None
    content_type: Optional[ContentType] = None
    meta_title: Optional[str] = None
    meta_description: Optional[str] = None
    status: Optional[PublishStatus] = None


class PageResponse(BaseModel):
    """Page response"""
    id: UUID
    business_unit_id: UUID
    title: str
    slug: str
    description: Optional[str]
    content: Optional[str]
    content_type: ContentType
    meta_title: Optional[str]
    meta_description: Optional[str]
    status: PublishStatus
    published_at: Optional[datetime]
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True


class FeatureCreate(BaseModel):
    """Create website feature highlight"""
    title: str = Field(min_length=1, max_length=255)
    description: str = Field(min_length=1)
    icon_name: str = Field(min_length=1)
    is_active: bool = True
    sort_order: int = 0


class FeatureUpdate(BaseModel):
    """Update website feature highlight"""
    title: Optional[str] = Field(default=None, min_length=1, max_length=255)
    description: Optional[str] = Field(default=None, min_length=1)
    icon_name: Optional[str] = Field(default=None, min_length=1)
    is_active: Optional[bool] = None
    sort_order: Optional[int] = None


class ContactInfoCreate(BaseModel):
    """Create contact detail (phone, email, address, ...)"""
    type: str = Field(min_length=1, max_length=50)
    label: str = Field(min_length=1, max_length=255)
    value: str = Field(min_length=1)
    icon_name: str = Field(min_length=1)
    is_active: bool = True
    sort_order: int = 0


class ContactInfoUpdate(BaseModel):
    """Update contact detail"""
    type: Optional[str] = Field(default=None, min_length=1, max_length=50)
    label: Optional[str] = Field(default=None, min_length=1, max_length=255)
    value: Optional[str] = Field(default=None, min_length=1)
    icon_name: Optional[str] = Field(default=None, min_length=1)
    is_active: Optional[bool] = None
    sort_order: Optional[int] = None


class ContentItemResponse(BaseModel):
    """Keyed content block with decoded payload"""
    id: UUID
    business_unit_id: UUID
    key: str
    section: str
    name: str
    description: Optional[str]
    content: str
    payload: Dict[str, Any]
    content_type: ContentType
    status: PublishStatus
    created_by_id: Optional[UUID]
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True


class WebsiteConfigUpsert(BaseModel):
    """Create or replace website configuration"""
    site_name: str = Field(min_length=1, max_length=255)
    tagline: Optional[str] = None
    description: Optional[str] = None
    logo: Optional[str] = None
    favicon: Optional[str] = None
    primary_color: Optional[str] = None
    secondary_color: Optional[str] = None
    primary_phone: Optional[str] = None
    primary_email: Optional[str] = None
    address: Optional[str] = None
    social_links: Dict[str, str] = {}
    meta_title: Optional[str] = None
    meta_description: Optional[str] = None


class WebsiteConfigResponse(BaseModel):
    """Website configuration response"""
    id: UUID
    business_unit_id: UUID
    site_name: str
    tagline: Optional[str]
    description: Optional[str]
    logo: Optional[str]
    favicon: Optional[str]
    primary_color: Optional[str]
    secondary_color: Optional[str]
    primary_phone: Optional[str]
    primary_email: Optional[str]
    address: Optional[str]
    social_links: Dict[str, Any]
    meta_title: Optional[str]
    meta_description: Optional[str]
    updated_at: datetime

    class Config:
        from_attributes = True


class ContentCount(BaseModel):
    """Published and total rows of one content type"""
    total: int
    published: int


class CmsAnalyticsResponse(BaseModel):
    """Website activity and content inventory over a window"""
    time_range: str
    start_date: datetime
    contact_submissions: int
    newsletter_signups: int
    content: Dict[str, ContentCount]

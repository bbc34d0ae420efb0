"""CMS analytics endpoint"""

from datetime import datetime, timedelta
from uuid import UUID

from fastapi import APIRouter, Depends, Query
from sqlalchemy import select, func, case
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import get_db
from app.models.cms import HeroSlide, Testimonial, FAQ, MediaItem, Page, ContentItem, PublishStatus
from app.models.inquiry import ContactForm, Newsletter
from app.models.marketing import Event, Restaurant, SpecialOffer
from app.models.user import User
from app.schemas.cms import CmsAnalyticsResponse, ContentCount
from app.api.auth import get_current_active_user, verify_business_unit_access

router = APIRouter()

TIME_RANGE_DAYS = {"7d": 7, "30d": 30, "90d": 90}

# (model, published condition, extra filter)
CONTENT_SOURCES = {
    "hero_slides": (HeroSlide, HeroSlide.is_active == True, None),
    "events": (Event, Event.is_published == True, None),
    "restaurants": (Restaurant, Restaurant.is_published == True, None),
    "special_offers": (SpecialOffer, SpecialOffer.is_published == True, None),
    "testimonials": (Testimonial, Testimonial.is_active == True, None),
    "faqs": (FAQ, FAQ.is_active == True, None),
    "media": (MediaItem, MediaItem.is_active == True, None),
    "pages": (Page, Page.status == PublishStatus.PUBLISHED, None),
    "features": (
        ContentItem,
        ContentItem.status == PublishStatus.PUBLISHED,
        ContentItem.section == "features",
    ),
}


async def _count_since(db: AsyncSession, model, business_unit_id: UUID, start_date: datetime) -> int:
    result = await db.execute(
        select(func.count(model.id)).where(
            model.business_unit_id == business_unit_id,
            model.created_at >= start_date,
        )
    )
    return result.scalar() or 0


@router.get("", response_model=CmsAnalyticsResponse)
async def get_cms_analytics(
    business_unit_id: UUID,
    time_range: str = Query("30d", pattern="^(7d|30d|90d)$"),
    current_user: User = Depends(get_current_active_user),
    db: AsyncSession = Depends(get_db),
):
    """Website submissions over the window and content inventory"""
    await verify_business_unit_access(business_unit_id, current_user)

    start_date = datetime.utcnow() - timedelta(days=TIME_RANGE_DAYS[time_range])

    content = {}
    for name, (model, published, extra) in CONTENT_SOURCES.items():
        query = select(
            func.count(model.id),
            func.coalesce(func.sum(case((published, 1), else_=0)), 0),
        ).where(model.business_unit_id == business_unit_id)
        if extra is not None:
            query = query.where(extra)

        total, published_count = (await db.execute(query)).one()
        content[name] = ContentCount(total=total or 0, published=published_count or 0)

    return CmsAnalyticsResponse(
        time_range=time_range,
        start_date=start_date,
        contact_submissions=await _count_since(db, ContactForm, business_unit_id, start_date),
        newsletter_signups=await _count_since(db, Newsletter, business_unit_id, start_date),
        content=content,
    )

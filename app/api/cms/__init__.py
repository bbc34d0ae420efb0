"""CMS routers mounted under /business-units/{business_unit_id}/cms"""

from fastapi import APIRouter

from app.api.cms import (
    hero_slides,
    events,
    restaurants,
    special_offers,
    amenities,
    testimonials,
    faqs,
    media,
    pages,
    content_items,
    website_config,
    analytics,
)

router = APIRouter()
router.include_router(hero_slides.router, prefix="/hero-slides")
router.include_router(events.router, prefix="/events")
router.include_router(restaurants.router, prefix="/restaurants")
router.include_router(special_offers.router, prefix="/special-offers")
router.include_router(amenities.router, prefix="/amenities")
router.include_router(testimonials.router, prefix="/testimonials")
router.include_router(faqs.router, prefix="/faqs")
router.include_router(media.router, prefix="/media")
router.include_router(media.gallery_router, prefix="/gallery")
router.include_router(pages.router, prefix="/pages")
router.include_router(content_items.features_router, prefix="/features")
router.include_router(content_items.contact_router, prefix="/contact-info")
router.include_router(website_config.router, prefix="/website-config")
router.include_router(analytics.router, prefix="/analytics")

"""Background job tasks"""

from datetime import datetime
from typing import Optional
import asyncio
import structlog
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.jobs.celery_app import celery_app
from app.api.audit import record_audit
from app.models.marketing import SpecialOffer, OfferStatus, Event, EventStatus

logger = structlog.get_logger()


def run_async(coro):
    """Helper to run async functions in sync context"""
    return asyncio.run(coro)


async def expire_offers(db: AsyncSession, now: Optional[datetime] = None) -> int:
    """Expire and unpublish offers whose validity has ended"""
    now = now or datetime.utcnow()
    result = await db.execute(
        select(SpecialOffer).where(
            SpecialOffer.status.in_((OfferStatus.DRAFT, OfferStatus.ACTIVE)),
            SpecialOffer.valid_to < now,
        )
    )
    offers = result.scalars().all()

    for offer in offers:
        offer.status = OfferStatus.EXPIRED
        offer.is_published = False
        record_audit(
            db,
            business_unit_id=offer.business_unit_id,
            actor=None,
            action="expire",
            resource_type="special_offer",
            resource_id=offer.id,
            data={"valid_to": offer.valid_to},
        )

    await db.commit()
    return len(offers)


async def complete_events(db: AsyncSession, now: Optional[datetime] = None) -> int:
    """Mark planned or confirmed events that have ended as completed"""
    now = now or datetime.utcnow()
    result = await db.execute(
        select(Event).where(
            Event.status.in_((EventStatus.PLANNING, EventStatus.CONFIRMED)),
            Event.end_date < now,
        )
    )
    events = result.scalars().all()

    for event in events:
        event.status = EventStatus.COMPLETED
        record_audit(
            db,
            business_unit_id=event.business_unit_id,
            actor=None,
            action="complete",
            resource_type="event",
            resource_id=event.id,
            data={"end_date": event.end_date},
        )

    await db.commit()
    return len(events)


@celery_app.task(name="expire_special_offers")
def expire_special_offers():
    """Expire special offers past their validity window"""
    logger.info("Expiring special offers")

    async def _expire():
        from app.database import SessionLocal, engine

        try:
            async with SessionLocal() as db:
                expired_count = await expire_offers(db)
                logger.info("Special offers expired", expired_count=expired_count)
                return expired_count
        finally:
            # Pooled connections are bound to this run's event loop
            await engine.dispose()

    return run_async(_expire())


@celery_app.task(name="complete_past_events")
def complete_past_events():
    """Complete events whose end date has passed"""
    logger.info("Completing past events")

    async def _complete():
        from app.database import SessionLocal, engine

        try:
            async with SessionLocal() as db:
                completed_count = await complete_events(db)
                logger.info("Past events completed", completed_count=completed_count)
                return completed_count
        finally:
            await engine.dispose()

    return run_async(_complete())

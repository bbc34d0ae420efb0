"""Tests for periodic background jobs"""

from datetime import datetime, timedelta

import pytest
from sqlalchemy import select

import app.database
import app.jobs.tasks
from app.jobs.celery_app import celery_app
from app.jobs.tasks import expire_offers, complete_events, expire_special_offers, complete_past_events
from app.models.audit import AuditLog
from app.models.marketing import SpecialOffer, OfferStatus, Event, EventStatus


def _offer(business_unit, slug, status, valid_to):
    return SpecialOffer(
        business_unit_id=business_unit.id,
        title=slug.replace("-", " ").title(),
        slug=slug,
        description="Offer",
        type="ROOM_PACKAGE",
        status=status,
        offer_price=5000,
        valid_from=valid_to - timedelta(days=30),
        valid_to=valid_to,
        is_published=True,
    )


def _event(business_unit, slug, status, end_date):
    return Event(
        business_unit_id=business_unit.id,
        title=slug.replace("-", " ").title(),
        slug=slug,
        description="Event",
        type="FESTIVAL",
        status=status,
        start_date=end_date - timedelta(hours=4),
        end_date=end_date,
        venue="Pool Deck",
        is_published=True,
    )


def test_beat_schedule():
    """Test that both periodic jobs are scheduled"""
    schedule = celery_app.conf.beat_schedule
    assert schedule["expire-special-offers"]["task"] == "expire_special_offers"
    assert schedule["complete-past-events"]["task"] == "complete_past_events"


@pytest.mark.asyncio
async def test_expire_offers(test_db, test_business_unit):
    """Test that ended offers are expired and unpublished"""
    now = datetime(2030, 6, 1)
    test_db.add_all([
        _offer(test_business_unit, "ended-active", OfferStatus.ACTIVE, now - timedelta(days=1)),
        _offer(test_business_unit, "ended-draft", OfferStatus.DRAFT, now - timedelta(days=1)),
        _offer(test_business_unit, "still-valid", OfferStatus.ACTIVE, now + timedelta(days=1)),
    ])
    await test_db.commit()

    assert await expire_offers(test_db, now=now) == 2

    result = await test_db.execute(select(SpecialOffer.slug, SpecialOffer.status, SpecialOffer.is_published))
    rows = {slug: (status, published) for slug, status, published in result.all()}
    assert rows["ended-active"] == (OfferStatus.EXPIRED, False)
    assert rows["ended-draft"] == (OfferStatus.EXPIRED, False)
    assert rows["still-valid"] == (OfferStatus.ACTIVE, True)

    result = await test_db.execute(select(AuditLog).where(AuditLog.action == "expire"))
    audits = result.scalars().all()
    assert len(audits) == 2
    assert all(a.actor_type == "system" and a.actor_id is None for a in audits)

    # Already expired offers are left alone
    assert await expire_offers(test_db, now=now) == 0


@pytest.mark.asyncio
async def test_complete_events(test_db, test_business_unit):
    """Test that ended events are completed"""
    now = datetime(2030, 6, 1)
    test_db.add_all([
        _event(test_business_unit, "past-planning", EventStatus.PLANNING, now - timedelta(days=1)),
        _event(test_business_unit, "past-confirmed", EventStatus.CONFIRMED, now - timedelta(hours=1)),
        _event(test_business_unit, "past-cancelled", EventStatus.CANCELLED, now - timedelta(days=1)),
        _event(test_business_unit, "upcoming", EventStatus.CONFIRMED, now + timedelta(days=3)),
    ])
    await test_db.commit()

    assert await complete_events(test_db, now=now) == 2

    result = await test_db.execute(select(Event.slug, Event.status))
    statuses = dict(result.all())
    assert statuses == {
        "past-planning": EventStatus.COMPLETED,
        "past-confirmed": EventStatus.COMPLETED,
        "past-cancelled": EventStatus.CANCELLED,
        "upcoming": EventStatus.CONFIRMED,
    }


class _StubSession:
    async def __aenter__(self):
        return self

    async def __aexit__(self, *exc):
        return False


class _StubEngine:
    def __init__(self):
        self.disposed = 0

    async def dispose(self):
        self.disposed += 1


def test_tasks_dispose_engine_each_run(monkeypatch):
    """Test that every run releases pooled connections before its loop closes"""
    engine = _StubEngine()
    monkeypatch.setattr(app.database, "SessionLocal", _StubSession)
    monkeypatch.setattr(app.database, "engine", engine)

    async def fake_expire(db):
        return 3

    async def fake_complete(db):
        return 1

    monkeypatch.setattr(app.jobs.tasks, "expire_offers", fake_expire)
    monkeypatch.setattr(app.jobs.tasks, "complete_events", fake_complete)

    # Consecutive runs each get a fresh event loop
    assert expire_special_offers.run() == 3
    assert expire_special_offers.run() == 3
    assert complete_past_events.run() == 1
    assert engine.disposed == 3


def test_tasks_dispose_engine_on_failure(monkeypatch):
    """Test that a failing run still disposes the engine"""
    engine = _StubEngine()
    monkeypatch.setattr(app.database, "SessionLocal", _StubSession)
    monkeypatch.setattr(app.database, "engine", engine)

    async def broken(db):
        raise RuntimeError("database unavailable")

    monkeypatch.setattr(app.jobs.tasks, "expire_offers", broken)

    with pytest.raises(RuntimeError):
        expire_special_offers.run()
    assert engine.disposed == 1

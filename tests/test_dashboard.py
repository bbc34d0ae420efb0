"""Tests for the dashboard metrics endpoint"""

from datetime import datetime, timedelta

import pytest
from httpx import AsyncClient
from sqlalchemy import select

from app.models.reservation import Guest, Reservation, ReservationRoom, ReservationStatus
from app.api.dashboard import window_start
from app.models.room import Room, HousekeepingStatus


@pytest.fixture
async def bookings(test_db, test_business_unit, test_room_types):
    """A day of front desk activity across the reservation lifecycle"""
    now = datetime.utcnow()
    today = now.replace(hour=0, minute=0, second=0, microsecond=0)

    result = await test_db.execute(select(Room).where(Room.business_unit_id == test_business_unit.id))
    rooms = {room.room_number: room for room in result.scalars().all()}
    rooms["D102"].housekeeping = HousekeepingStatus.DIRTY
    rooms["D103"].housekeeping = HousekeepingStatus.OUT_OF_ORDER

    guests = [
        Guest(business_unit_id=test_business_unit.id, first_name=first, last_name=last)
        for first, last in (
            ("Juan", "Dela Cruz"),
            ("Maria", "Clara"),
            ("Jose", "Rizal"),
            ("Andres", "Bonifacio"),
            ("Gabriela", "Silang"),
        )
    ]
    test_db.add_all(guests)
    await test_db.flush()

    specs = [
        # status, check in, check out, nights, total, room
        (ReservationStatus.CHECKED_IN, today, today + timedelta(days=2), 2, 8000, "D101"),
        (ReservationStatus.CONFIRMED, today, today + timedelta(days=1), 1, 4000, None),
        (ReservationStatus.CHECKED_OUT, today - timedelta(days=2), today, 2, 9000, "S201"),
        (ReservationStatus.CANCELLED, today, today + timedelta(days=1), 1, 5000, None),
        (ReservationStatus.PENDING, today, today + timedelta(days=1), 1, 4000, None),
    ]
    reservations = []
    for i, (status, check_in, check_out, nights, total, room_number) in enumerate(specs):
        reservation = Reservation(
            business_unit_id=test_business_unit.id,
            guest_id=guests[i].id,
            confirmation_number=f"TRP-{1000 + i}",
            status=status,
            check_in_date=check_in,
            check_out_date=check_out,
            nights=nights,
            total_amount=total,
            created_at=now - timedelta(minutes=10 - i),
        )
        if room_number:
            reservation.rooms = [ReservationRoom(room_id=rooms[room_number].id)]
        test_db.add(reservation)
        reservations.append(reservation)

    await test_db.commit()
    return reservations


@pytest.mark.asyncio
async def test_dashboard_today(front_desk_client: AsyncClient, test_business_unit, bookings):
    """Test metrics, housekeeping and today's activity"""
    response = await front_desk_client.get(f"/business-units/{test_business_unit.id}/dashboard")
    assert response.status_code == 200
    data = response.json()
    assert data["time_range"] == "today"

    metrics = data["metrics"]
    assert metrics["total_active_rooms"] == 4
    assert metrics["guests_checked_in"] == 1
    assert metrics["occupancy_rate"] == 25.0
    assert metrics["total_revenue"] == 12000.0
    assert metrics["total_room_nights"] == 3
    assert metrics["average_daily_rate"] == 4000.0

    assert data["housekeeping"] == {"clean": 2, "dirty": 1, "out_of_order": 1}

    assert data["arrivals_count"] == 2
    assert data["departures_count"] == 1
    activity = {(a["type"], a["guest_name"], a["room_number"]) for a in data["todays_activity"]}
    assert activity == {
        ("ARRIVAL", "Juan Dela Cruz", "D101"),
        ("ARRIVAL", "Maria Clara", "TBD"),
        ("DEPARTURE", "Jose Rizal", "S201"),
    }


@pytest.mark.asyncio
async def test_dashboard_week_includes_earlier_stays(manager_client: AsyncClient, test_business_unit, bookings):
    """Test that wider windows pick up earlier check-ins"""
    response = await manager_client.get(
        f"/business-units/{test_business_unit.id}/dashboard",
        params={"time_range": "7d"},
    )
    assert response.status_code == 200
    metrics = response.json()["metrics"]
    assert metrics["total_revenue"] == 21000.0
    assert metrics["total_room_nights"] == 5
    assert metrics["average_daily_rate"] == 4200.0


@pytest.mark.asyncio
async def test_dashboard_recent_bookings(manager_client: AsyncClient, test_business_unit, bookings):
    """Test that recent bookings are newest first and include every status"""
    response = await manager_client.get(f"/business-units/{test_business_unit.id}/dashboard")
    recent = response.json()["recent_bookings"]
    assert [b["confirmation_number"] for b in recent] == [
        "TRP-1004",
        "TRP-1003",
        "TRP-1002",
        "TRP-1001",
        "TRP-1000",
    ]
    assert recent[1]["status"] == "CANCELLED"
    assert recent[1]["guest_name"] == "Andres Bonifacio"


@pytest.mark.asyncio
async def test_dashboard_without_rooms(manager_client: AsyncClient, test_business_unit):
    """Test that an empty property reports zeros"""
    response = await manager_client.get(f"/business-units/{test_business_unit.id}/dashboard")
    assert response.status_code == 200
    data = response.json()
    assert data["metrics"]["total_active_rooms"] == 1
    assert data["metrics"]["occupancy_rate"] == 0.0
    assert data["metrics"]["average_daily_rate"] == 0.0
    assert data["todays_activity"] == []
    assert data["recent_bookings"] == []


@pytest.mark.asyncio
async def test_dashboard_rejects_unknown_range(manager_client: AsyncClient, test_business_unit):
    """Test that only today, 7d and 30d are accepted"""
    response = await manager_client.get(
        f"/business-units/{test_business_unit.id}/dashboard",
        params={"time_range": "90d"},
    )
    assert response.status_code == 422


def test_window_start_is_midnight_based():
    """Test that windows start at midnight of the boundary day"""
    now = datetime(2030, 6, 10, 15, 45, 12)
    assert window_start("today", now) == datetime(2030, 6, 10)
    assert window_start("7d", now) == datetime(2030, 6, 3)
    assert window_start("30d", now) == datetime(2030, 5, 11)


@pytest.mark.asyncio
async def test_dashboard_window_includes_boundary_day(
    test_db, manager_client: AsyncClient, test_business_unit, test_room_types
):
    """Test that a check-in at midnight seven days ago counts toward 7d"""
    today = datetime.utcnow().replace(hour=0, minute=0, second=0, microsecond=0)
    guest = Guest(business_unit_id=test_business_unit.id, first_name="Lapu", last_name="Lapu")
    test_db.add(guest)
    await test_db.flush()
    test_db.add(
        Reservation(
            business_unit_id=test_business_unit.id,
            guest_id=guest.id,
            confirmation_number="TRP-2000",
            status=ReservationStatus.CHECKED_OUT,
            check_in_date=today - timedelta(days=7),
            check_out_date=today - timedelta(days=6),
            nights=1,
            total_amount=1000,
        )
    )
    await test_db.commit()

    response = await manager_client.get(
        f"/business-units/{test_business_unit.id}/dashboard",
        params={"time_range": "7d"},
    )
    assert response.status_code == 200
    data = response.json()
    assert data["start_date"] == (today - timedelta(days=7)).isoformat()
    assert data["metrics"]["total_revenue"] == 1000.0
    assert data["metrics"]["total_room_nights"] == 1

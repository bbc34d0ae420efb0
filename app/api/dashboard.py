"""Dashboard metrics API endpoint"""

from datetime import datetime, timedelta
from uuid import UUID

from fastapi import APIRouter, Depends, Query
from sqlalchemy import select, func
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from app.database import get_db
from app.models.reservation import Reservation, ReservationRoom, ReservationStatus
from app.models.room import Room, HousekeepingStatus
from app.models.user import User
from app.schemas.dashboard import (
    DashboardResponse,
    DashboardMetrics,
    HousekeepingCounts,
    ActivityItem,
    RecentBooking,
)
from app.api.auth import get_current_active_user, verify_business_unit_access

router = APIRouter()

REVENUE_STATUSES = (
    ReservationStatus.CONFIRMED,
    ReservationStatus.CHECKED_IN,
    ReservationStatus.CHECKED_OUT,
)
ARRIVAL_STATUSES = (ReservationStatus.CONFIRMED, ReservationStatus.CHECKED_IN)
DEPARTURE_STATUSES = (ReservationStatus.CHECKED_IN, ReservationStatus.CHECKED_OUT)

RESERVATION_OPTIONS = (
    selectinload(Reservation.guest),
    selectinload(Reservation.rooms).selectinload(ReservationRoom.room),
)


def window_start(time_range: str, now: datetime) -> datetime:
    """Start of the reporting window, counted from today at midnight"""
    today = now.replace(hour=0, minute=0, second=0, microsecond=0)
    if time_range == "7d":
        return today - timedelta(days=7)
    if time_range == "30d":
        return today - timedelta(days=30)
    return today


def _room_number(reservation: Reservation, fallback: str) -> str:
    for allocation in reservation.rooms:
        if allocation.room is not None:
            return allocation.room.room_number
    return fallback


@router.get("", response_model=DashboardResponse)
async def get_dashboard(
    business_unit_id: UUID,
    time_range: str = Query("today", pattern="^(today|7d|30d)$"),
    current_user: User = Depends(get_current_active_user),
    db: AsyncSession = Depends(get_db),
):
    """Occupancy, revenue, housekeeping and today's front desk activity"""
    await verify_business_unit_access(business_unit_id, current_user)

    now = datetime.utcnow()
    start_date = window_start(time_range, now)
    today = now.replace(hour=0, minute=0, second=0, microsecond=0)
    tomorrow = today + timedelta(days=1)

    # Room inventory
    active_rooms = await db.execute(
        select(func.count(Room.id)).where(
            Room.business_unit_id == business_unit_id,
            Room.is_active == True,
        )
    )
    total_active_rooms = max(1, active_rooms.scalar() or 0)

    # Revenue and room nights
    revenue = await db.execute(
        select(
            func.coalesce(func.sum(Reservation.total_amount), 0),
            func.coalesce(func.sum(Reservation.nights), 0),
        ).where(
            Reservation.business_unit_id == business_unit_id,
            Reservation.status.in_(REVENUE_STATUSES),
            Reservation.check_in_date >= start_date,
        )
    )
    total_revenue, total_room_nights = revenue.one()
    total_revenue = float(total_revenue or 0)
    total_room_nights = int(total_room_nights or 0)
    average_daily_rate = total_revenue / total_room_nights if total_room_nights else 0.0

    checked_in = await db.execute(
        select(func.count(Reservation.id)).where(
            Reservation.business_unit_id == business_unit_id,
            Reservation.status == ReservationStatus.CHECKED_IN,
        )
    )
    guests_checked_in = checked_in.scalar() or 0
    occupancy_rate = guests_checked_in / total_active_rooms * 100

    # Housekeeping
    housekeeping_rows = await db.execute(
        select(Room.housekeeping, func.count(Room.id))
        .where(Room.business_unit_id == business_unit_id, Room.is_active == True)
        .group_by(Room.housekeeping)
    )
    housekeeping = {state: count for state, count in housekeeping_rows.all()}

    # Today's arrivals and departures
    arrivals_result = await db.execute(
        select(Reservation)
        .where(
            Reservation.business_unit_id == business_unit_id,
            Reservation.check_in_date >= today,
            Reservation.check_in_date < tomorrow,
            Reservation.status.in_(ARRIVAL_STATUSES),
        )
        .options(*RESERVATION_OPTIONS)
        .order_by(Reservation.check_in_date)
    )
    arrivals = arrivals_result.scalars().all()

    departures_result = await db.execute(
        select(Reservation)
        .where(
            Reservation.business_unit_id == business_unit_id,
            Reservation.check_out_date >= today,
            Reservation.check_out_date < tomorrow,
            Reservation.status.in_(DEPARTURE_STATUSES),
        )
        .options(*RESERVATION_OPTIONS)
        .order_by(Reservation.check_out_date)
    )
    departures = departures_result.scalars().all()

    todays_activity = [
        ActivityItem(
            id=r.id,
            type="ARRIVAL",
            guest_name=r.guest.full_name,
            room_number=_room_number(r, "TBD"),
            status=r.status.value,
        )
        for r in arrivals
    ] + [
        ActivityItem(
            id=r.id,
            type="DEPARTURE",
            guest_name=r.guest.full_name,
            room_number=_room_number(r, "N/A"),
            status=r.status.value,
        )
        for r in departures
    ]

    # Recent bookings
    recent_result = await db.execute(
        select(Reservation)
        .where(Reservation.business_unit_id == business_unit_id)
        .options(selectinload(Reservation.guest))
        .order_by(Reservation.created_at.desc())
        .limit(5)
    )
    recent_bookings = [
        RecentBooking(
            id=r.id,
            confirmation_number=r.confirmation_number,
            guest_name=r.guest.full_name,
            check_in_date=r.check_in_date,
            check_out_date=r.check_out_date,
            status=r.status.value,
            total_amount=float(r.total_amount or 0),
            created_at=r.created_at,
        )
        for r in recent_result.scalars().all()
    ]

    return DashboardResponse(
        time_range=time_range,
        start_date=start_date,
        metrics=DashboardMetrics(
            occupancy_rate=round(occupancy_rate, 2),
            average_daily_rate=round(average_daily_rate, 2),
            total_revenue=round(total_revenue, 2),
            total_room_nights=total_room_nights,
            guests_checked_in=guests_checked_in,
            total_active_rooms=total_active_rooms,
        ),
        housekeeping=HousekeepingCounts(
            clean=housekeeping.get(HousekeepingStatus.CLEAN, 0),
            dirty=housekeeping.get(HousekeepingStatus.DIRTY, 0),
            out_of_order=housekeeping.get(HousekeepingStatus.OUT_OF_ORDER, 0),
        ),
        arrivals_count=len(arrivals),
        departures_count=len(departures),
        todays_activity=todays_activity,
        recent_bookings=recent_bookings,
    )

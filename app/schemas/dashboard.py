"""Dashboard schemas"""

from datetime import datetime
from typing import List, Optional
from uuid import UUID
from pydantic import BaseModel


class DashboardMetrics(BaseModel):
    """Headline figures for the selected window"""
    occupancy_rate: float
    average_daily_rate: float
    total_revenue: float
    total_room_nights: int
    guests_checked_in: int
    total_active_rooms: int


class HousekeepingCounts(BaseModel):
    """Active rooms per housekeeping state"""
    clean: int
    dirty: int
    out_of_order: int


class ActivityItem(BaseModel):
    """Arrival or departure happening today"""
    id: UUID
    type: str  # ARRIVAL, DEPARTURE
    guest_name: str
    room_number: str
    status: str


class RecentBooking(BaseModel):
    """Recently created reservation"""
    id: UUID
    confirmation_number: str
    guest_name: str
    check_in_date: datetime
    check_out_date: datetime
    status: str
    total_amount: float
    created_at: Optional[datetime]


class DashboardResponse(BaseModel):
    """Dashboard payload for one business unit"""
    time_range: str
    start_date: datetime
    metrics: DashboardMetrics
    housekeeping: HousekeepingCounts
    arrivals_count: int
    departures_count: int
    todays_activity: List[ActivityItem]
    recent_bookings: List[RecentBooking]

"""Database models"""

from app.models.business_unit import BusinessUnit, PropertyType
from app.models.user import (
    User,
    UserStatus,
    Role,
    Permission,
    RolePermission,
    UserBusinessUnitRole,
    RoleName,
    PermissionName,
)
from app.models.room import RoomType, Amenity, RoomTypeAmenity, Room, RoomStatus, HousekeepingStatus
from app.models.reservation import Guest, Reservation, ReservationRoom, ReservationStatus
from app.models.cms import HeroSlide, Testimonial, FAQ, MediaItem, Page, ContentItem, WebsiteConfiguration
from app.models.marketing import Event, Restaurant, SpecialOffer, SpecialOfferRoomType
from app.models.inquiry import ContactForm, Newsletter
from app.models.audit import AuditLog

__all__ = [
    "BusinessUnit",
    "PropertyType",
    "User",
    "UserStatus",
    "Role",
    "Permission",
    "RolePermission",
    "UserBusinessUnitRole",
    "RoleName",
    "PermissionName",
    "RoomType",
    "Amenity",
    "RoomTypeAmenity",
    "Room",
    "RoomStatus",
    "HousekeepingStatus",
    "Guest",
    "Reservation",
    "ReservationRoom",
    "ReservationStatus",
    "HeroSlide",
    "Testimonial",
    "FAQ",
    "MediaItem",
    "Page",
    "ContentItem",
    "WebsiteConfiguration",
    "Event",
    "Restaurant",
    "SpecialOffer",
    "SpecialOfferRoomType",
    "ContactForm",
    "Newsletter",
    "AuditLog",
]

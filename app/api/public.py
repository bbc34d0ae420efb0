"""Public website API endpoints (no authentication)"""

from typing import List, Optional
from uuid import UUID

import structlog
from fastapi import APIRouter, Depends, HTTPException, Request
from sqlalchemy import select, func
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from app.config import settings
from app.database import get_db
from app.models.business_unit import BusinessUnit
from app.models.cms import HeroSlide, Testimonial, FAQ, MediaItem, WebsiteConfiguration
from app.models.inquiry import ContactForm, Newsletter
from app.models.marketing import Event, Restaurant, SpecialOffer, SpecialOfferRoomType, OfferStatus
from app.models.reservation import Guest
from app.models.room import RoomType, RoomTypeAmenity, Room, Amenity
from app.schemas.public import (
    HotelSummary,
    PublicBusinessUnit,
    PublicAmenity,
    PublicRoomType,
    PublicHotel,
    HomepageResponse,
    PropertyHomepageResponse,
    PropertyHotelInfo,
    RoomListing,
    PropertyRoomsResponse,
    RoomDetailResponse,
    QuoteRequest,
    QuoteResponse,
    ContactFormCreate,
    ContactFormResponse,
    NewsletterSubscribe,
    NewsletterResponse,
)

router = APIRouter()
logger = structlog.get_logger()

GALLERY_CATEGORY = "gallery"

ROOM_TYPE_OPTIONS = (selectinload(RoomType.amenities).selectinload(RoomTypeAmenity.amenity),)


def normalize_host(value: Optional[str]) -> str:
    """Lowercase hostname without scheme, port or path"""
    if not value:
        return ""
    host = value.strip().lower()
    if "://" in host:
        host = host.split("://", 1)[1]
    host = host.split("/", 1)[0]
    return host.split(":", 1)[0]


def room_type_payload(room_type: RoomType) -> PublicRoomType:
    amenities = [
        PublicAmenity.model_validate(link.amenity)
        for link in room_type.amenities
        if link.amenity is not None and link.amenity.is_active
    ]
    return PublicRoomType(
        id=room_type.id,
        name=room_type.name,
        display_name=room_type.display_name,
        description=room_type.description,
        type=room_type.type,
        max_occupancy=room_type.max_occupancy,
        bed_configuration=room_type.bed_configuration,
        room_size=float(room_type.room_size) if room_type.room_size is not None else None,
        base_rate=float(room_type.base_rate),
        primary_image=room_type.primary_image,
        images=room_type.images or [],
        amenities=amenities,
    )


def room_gallery(room_type: RoomType) -> List[str]:
    images = [room_type.primary_image] if room_type.primary_image else []
    for url in room_type.images or []:
        if url not in images:
            images.append(url)
    return images


async def get_public_business_unit(db: AsyncSession, business_unit_id: UUID) -> BusinessUnit:
    result = await db.execute(
        select(BusinessUnit).where(
            BusinessUnit.id == business_unit_id,
            BusinessUnit.is_active == True,
        )
    )
    business_unit = result.scalar_one_or_none()
    if not business_unit:
        raise HTTPException(status_code=404, detail="Property not found")
    return business_unit


async def resolve_business_unit_for_host(db: AsyncSession, host: Optional[str]) -> BusinessUnit:
    """Match the request host against unit websites, falling back to the oldest active unit"""
    result = await db.execute(
        select(BusinessUnit)
        .where(BusinessUnit.is_active == True)
        .order_by(BusinessUnit.created_at)
    )
    units = result.scalars().all()
    if not units:
        raise HTTPException(status_code=404, detail="No active properties")

    hostname = normalize_host(host)
    for unit in units:
        if hostname and normalize_host(unit.website) == hostname:
            return unit
    return units[0]


async def _active_room_types(db: AsyncSession, business_unit_id: UUID) -> List[RoomType]:
    result = await db.execute(
        select(RoomType)
        .where(RoomType.business_unit_id == business_unit_id, RoomType.is_active == True)
        .options(*ROOM_TYPE_OPTIONS)
        .order_by(RoomType.sort_order, RoomType.display_name)
    )
    return result.scalars().all()


async def _gallery(db: AsyncSession, business_unit_id: UUID) -> List[MediaItem]:
    result = await db.execute(
        select(MediaItem)
        .where(
            MediaItem.business_unit_id == business_unit_id,
            MediaItem.category == GALLERY_CATEGORY,
            MediaItem.is_active == True,
        )
        .order_by(MediaItem.created_at.desc())
    )
    return result.scalars().all()


async def compose_homepage(db: AsyncSession, business_unit: BusinessUnit) -> dict:
    """Fetch every homepage section for one business unit"""
    business_unit_id = business_unit.id

    hotels = await db.execute(
        select(BusinessUnit)
        .where(BusinessUnit.is_active == True)
        .order_by(BusinessUnit.created_at)
    )
    slides = await db.execute(
        select(HeroSlide)
        .where(HeroSlide.business_unit_id == business_unit_id, HeroSlide.is_active == True)
        .order_by(HeroSlide.sort_order)
    )
    amenities = await db.execute(
        select(Amenity)
        .where(Amenity.business_unit_id == business_unit_id, Amenity.is_active == True)
        .order_by(Amenity.sort_order, Amenity.name)
    )
    testimonials = await db.execute(
        select(Testimonial)
        .where(Testimonial.business_unit_id == business_unit_id, Testimonial.is_active == True)
        .order_by(Testimonial.is_featured.desc(), Testimonial.sort_order, Testimonial.created_at.desc())
        .limit(settings.homepage_testimonial_limit)
    )
    faqs = await db.execute(
        select(FAQ)
        .where(FAQ.business_unit_id == business_unit_id, FAQ.is_active == True)
        .order_by(FAQ.sort_order)
    )
    config = await db.execute(
        select(WebsiteConfiguration).where(WebsiteConfiguration.business_unit_id == business_unit_id)
    )

    return {
        "business_unit": PublicBusinessUnit.model_validate(business_unit),
        "hotels": [HotelSummary.model_validate(h) for h in hotels.scalars().all()],
        "hero_slides": slides.scalars().all(),
        "room_types": [room_type_payload(rt) for rt in await _active_room_types(db, business_unit_id)],
        "amenities": [PublicAmenity.model_validate(a) for a in amenities.scalars().all()],
        "testimonials": testimonials.scalars().all(),
        "faqs": faqs.scalars().all(),
        "website_config": config.scalar_one_or_none(),
    }


@router.get("/hotels", response_model=List[PublicHotel])
async def list_hotels(db: AsyncSession = Depends(get_db)):
    """Active properties with room types and inventory counts"""
    result = await db.execute(
        select(BusinessUnit)
        .where(BusinessUnit.is_active == True)
        .order_by(BusinessUnit.created_at)
    )
    units = result.scalars().all()

    room_counts = dict(
        (
            await db.execute(
                select(Room.business_unit_id, func.count(Room.id))
                .where(Room.is_active == True)
                .group_by(Room.business_unit_id)
            )
        ).all()
    )
    guest_counts = dict(
        (
            await db.execute(
                select(Guest.business_unit_id, func.count(Guest.id)).group_by(Guest.business_unit_id)
            )
        ).all()
    )

    hotels = []
    for unit in units:
        room_types = await _active_room_types(db, unit.id)
        hotels.append(
            PublicHotel(
                **PublicBusinessUnit.model_validate(unit).model_dump(),
                room_types=[room_type_payload(rt) for rt in room_types],
                room_count=room_counts.get(unit.id, 0),
                guest_count=guest_counts.get(unit.id, 0),
            )
        )
    return hotels


@router.get("/homepage", response_model=HomepageResponse)
async def get_homepage(request: Request, db: AsyncSession = Depends(get_db)):
    """Homepage for the property serving the request host"""
    business_unit = await resolve_business_unit_for_host(db, request.headers.get("host"))
    return HomepageResponse(**await compose_homepage(db, business_unit))


@router.get("/properties/{business_unit_id}/homepage", response_model=PropertyHomepageResponse)
async def get_property_homepage(business_unit_id: UUID, db: AsyncSession = Depends(get_db)):
    """Property homepage with gallery, events, restaurants and offers"""
    business_unit = await get_public_business_unit(db, business_unit_id)
    sections = await compose_homepage(db, business_unit)

    events = await db.execute(
        select(Event)
        .where(Event.business_unit_id == business_unit_id, Event.is_published == True)
        .options(selectinload(Event.business_unit))
        .order_by(Event.is_featured.desc(), Event.is_pinned.desc(), Event.sort_order, Event.start_date)
    )
    restaurants = await db.execute(
        select(Restaurant)
        .where(
            Restaurant.business_unit_id == business_unit_id,
            Restaurant.is_active == True,
            Restaurant.is_published == True,
        )
        .order_by(Restaurant.sort_order, Restaurant.name)
    )
    offers = await db.execute(
        select(SpecialOffer)
        .where(
            SpecialOffer.business_unit_id == business_unit_id,
            SpecialOffer.is_published == True,
            SpecialOffer.status == OfferStatus.ACTIVE,
        )
        .options(selectinload(SpecialOffer.room_types).selectinload(SpecialOfferRoomType.room_type))
        .order_by(SpecialOffer.is_featured.desc(), SpecialOffer.is_pinned.desc(), SpecialOffer.sort_order)
    )

    return PropertyHomepageResponse(
        **sections,
        gallery=await _gallery(db, business_unit_id),
        events=events.scalars().all(),
        restaurants=restaurants.scalars().all(),
        special_offers=offers.scalars().all(),
    )


@router.get("/properties/{business_unit_id}/rooms", response_model=PropertyRoomsResponse)
async def list_property_rooms(business_unit_id: UUID, db: AsyncSession = Depends(get_db)):
    """Rooms page: property header and room type cards"""
    business_unit = await get_public_business_unit(db, business_unit_id)
    gallery = await _gallery(db, business_unit_id)

    rooms = []
    for room_type in await _active_room_types(db, business_unit_id):
        payload = room_type_payload(room_type)
        rooms.append(
            RoomListing(
                id=payload.id,
                name=payload.name,
                display_name=payload.display_name,
                description=payload.description,
                price_per_night=payload.base_rate,
                max_occupancy=payload.max_occupancy,
                bed_configuration=payload.bed_configuration,
                room_size=payload.room_size,
                image=payload.primary_image or (payload.images[0] if payload.images else None),
                amenities=payload.amenities,
            )
        )

    return PropertyRoomsResponse(
        hotel=PropertyHotelInfo(
            id=business_unit.id,
            display_name=business_unit.display_name,
            description=business_unit.description,
            city=business_unit.city,
            country=business_unit.country,
            address=business_unit.address,
            gallery=[item.url for item in gallery],
        ),
        rooms=rooms,
    )


async def _get_public_room_type(db: AsyncSession, business_unit_id: UUID, room_type_id: UUID) -> RoomType:
    result = await db.execute(
        select(RoomType)
        .where(
            RoomType.id == room_type_id,
            RoomType.business_unit_id == business_unit_id,
            RoomType.is_active == True,
        )
        .options(*ROOM_TYPE_OPTIONS)
    )
    room_type = result.scalar_one_or_none()
    if not room_type:
        raise HTTPException(status_code=404, detail="Room not found")
    return room_type


@router.get("/properties/{business_unit_id}/rooms/{room_type_id}", response_model=RoomDetailResponse)
async def get_room_detail(business_unit_id: UUID, room_type_id: UUID, db: AsyncSession = Depends(get_db)):
    """Room detail page"""
    business_unit = await get_public_business_unit(db, business_unit_id)
    room_type = await _get_public_room_type(db, business_unit_id, room_type_id)

    return RoomDetailResponse(
        **room_type_payload(room_type).model_dump(),
        gallery=room_gallery(room_type),
        business_unit=PublicBusinessUnit.model_validate(business_unit),
        currency=settings.default_currency,
    )


@router.post("/properties/{business_unit_id}/rooms/{room_type_id}/quote", response_model=QuoteResponse)
async def quote_stay(
    business_unit_id: UUID,
    room_type_id: UUID,
    data: QuoteRequest,
    db: AsyncSession = Depends(get_db),
):
    """Price a stay: nights x rate plus tax"""
    await get_public_business_unit(db, business_unit_id)
    room_type = await _get_public_room_type(db, business_unit_id, room_type_id)

    if data.guests > room_type.max_occupancy:
        raise HTTPException(
            status_code=422,
            detail=f"{room_type.display_name} accommodates at most {room_type.max_occupancy} guests",
        )

    nights = (data.check_out - data.check_in).days
    nightly_rate = float(room_type.base_rate)
    subtotal = round(nightly_rate * nights, 2)
    taxes = round(subtotal * settings.booking_tax_rate, 2)

    return QuoteResponse(
        room_type_id=room_type.id,
        check_in=data.check_in,
        check_out=data.check_out,
        guests=data.guests,
        nights=nights,
        nightly_rate=nightly_rate,
        subtotal=subtotal,
        tax_rate=settings.booking_tax_rate,
        taxes=taxes,
        total=round(subtotal + taxes, 2),
        currency=settings.default_currency,
    )


@router.post("/properties/{business_unit_id}/contact", response_model=ContactFormResponse, status_code=201)
async def submit_contact_form(
    business_unit_id: UUID,
    data: ContactFormCreate,
    db: AsyncSession = Depends(get_db),
):
    """Store a contact form submission"""
    await get_public_business_unit(db, business_unit_id)

    submission = ContactForm(business_unit_id=business_unit_id, **data.model_dump())
    db.add(submission)
    await db.commit()
    await db.refresh(submission)

    logger.info("Contact form submitted", business_unit_id=str(business_unit_id), submission_id=str(submission.id))
    return submission


@router.post("/properties/{business_unit_id}/newsletter", response_model=NewsletterResponse)
async def subscribe_newsletter(
    business_unit_id: UUID,
    data: NewsletterSubscribe,
    db: AsyncSession = Depends(get_db),
):
    """Subscribe an email; repeated signups reactivate the same subscription"""
    await get_public_business_unit(db, business_unit_id)
    email = data.email.lower()

    result = await db.execute(
        select(Newsletter).where(
            Newsletter.business_unit_id == business_unit_id,
            Newsletter.email == email,
        )
    )
    subscription = result.scalar_one_or_none()

    if subscription is None:
        subscription = Newsletter(business_unit_id=business_unit_id, email=email, first_name=data.first_name)
        db.add(subscription)
        logger.info("Newsletter subscription created", business_unit_id=str(business_unit_id))
    else:
        subscription.is_active = True
        if data.first_name:
            subscription.first_name = data.first_name

    await db.commit()
    await db.refresh(subscription)
    return subscription

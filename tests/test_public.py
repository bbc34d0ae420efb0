"""Tests for the public website API"""

from datetime import datetime, timedelta

import pytest
from httpx import AsyncClient
from sqlalchemy import select

from app.api.public import normalize_host
from app.models.cms import HeroSlide, Testimonial, MediaItem, WebsiteConfiguration
from app.models.inquiry import ContactForm, Newsletter
from app.models.marketing import Event, SpecialOffer, OfferStatus
from app.models.reservation import Guest


@pytest.fixture
async def published_content(test_db, test_business_unit):
    """Mix of live and hidden website content"""
    start = datetime(2030, 6, 1, 18, 0)
    test_db.add_all([
        HeroSlide(business_unit_id=test_business_unit.id, title="Welcome", background_image="a.jpg", sort_order=1),
        HeroSlide(business_unit_id=test_business_unit.id, title="Hidden", background_image="b.jpg", is_active=False),
        Testimonial(business_unit_id=test_business_unit.id, guest_name="Ana", content="Lovely", rating=5),
        Testimonial(business_unit_id=test_business_unit.id, guest_name="Ben", content="Meh", rating=3, is_active=False),
        MediaItem(
            business_unit_id=test_business_unit.id,
            filename="beach.jpg",
            original_name="Beach",
            mime_type="image/jpeg",
            url="https://cdn.example.com/beach.jpg",
            category="gallery",
        ),
        Event(
            business_unit_id=test_business_unit.id,
            title="Jazz Night",
            slug="jazz-night",
            description="Live jazz",
            type="FESTIVAL",
            start_date=start,
            end_date=start + timedelta(hours=4),
            venue="Pool Deck",
            is_published=True,
        ),
        Event(
            business_unit_id=test_business_unit.id,
            title="Draft Gala",
            slug="draft-gala",
            description="Not yet announced",
            type="GALA",
            start_date=start,
            end_date=start + timedelta(hours=4),
            venue="Ballroom",
        ),
        SpecialOffer(
            business_unit_id=test_business_unit.id,
            title="Summer Escape",
            slug="summer-escape",
            description="Two nights",
            type="ROOM_PACKAGE",
            status=OfferStatus.ACTIVE,
            offer_price=7500,
            valid_from=datetime(2030, 3, 1),
            valid_to=datetime(2030, 5, 31),
            is_published=True,
        ),
        SpecialOffer(
            business_unit_id=test_business_unit.id,
            title="Draft Offer",
            slug="draft-offer",
            description="Pending approval",
            type="ROOM_PACKAGE",
            status=OfferStatus.DRAFT,
            offer_price=5000,
            valid_from=datetime(2030, 3, 1),
            valid_to=datetime(2030, 5, 31),
            is_published=True,
        ),
        WebsiteConfiguration(business_unit_id=test_business_unit.id, site_name="Anchor Hotel"),
    ])
    await test_db.commit()


def test_normalize_host():
    """Test hostname normalization"""
    assert normalize_host("https://Anchor.Tropicana.com:8443/rooms") == "anchor.tropicana.com"
    assert normalize_host("anchor.tropicana.com") == "anchor.tropicana.com"
    assert normalize_host(None) == ""


@pytest.mark.asyncio
async def test_list_hotels(test_db, client: AsyncClient, test_business_unit, other_business_unit, test_room_types):
    """Test hotel list with room types and counts"""
    test_db.add(Guest(business_unit_id=test_business_unit.id, first_name="Juan", last_name="Dela Cruz"))
    await test_db.commit()

    response = await client.get("/public/hotels")
    assert response.status_code == 200
    hotels = response.json()
    assert [h["name"] for h in hotels] == ["Anchor Hotel", "Dolores Lake Resort"]

    anchor = hotels[0]
    assert anchor["room_count"] == 4
    assert anchor["guest_count"] == 1
    assert [rt["name"] for rt in anchor["room_types"]] == ["DELUXE_ROOM", "EXECUTIVE_SUITE"]
    assert {a["name"] for a in anchor["room_types"][1]["amenities"]} == {"High-Speed WiFi", "Swimming Pool"}

    assert hotels[1]["room_count"] == 0
    assert hotels[1]["room_types"] == []


@pytest.mark.asyncio
async def test_inactive_units_are_hidden(test_db, client: AsyncClient, test_business_unit, other_business_unit):
    """Test that soft-deleted units disappear from the public site"""
    other_business_unit.is_active = False
    await test_db.commit()

    response = await client.get("/public/hotels")
    assert [h["name"] for h in response.json()] == ["Anchor Hotel"]

    response = await client.get(f"/public/properties/{other_business_unit.id}/homepage")
    assert response.status_code == 404


@pytest.mark.asyncio
async def test_homepage_resolves_host(client: AsyncClient, test_business_unit, other_business_unit):
    """Test that the Host header picks the property"""
    response = await client.get("/public/homepage", headers={"host": "lake.tropicana.com"})
    assert response.status_code == 200
    data = response.json()
    assert data["business_unit"]["name"] == "Dolores Lake Resort"
    assert len(data["hotels"]) == 2


@pytest.mark.asyncio
async def test_homepage_falls_back_to_oldest_unit(client: AsyncClient, test_business_unit, other_business_unit):
    """Test that unknown hosts get the first active property"""
    response = await client.get("/public/homepage", headers={"host": "unknown.example.com"})
    assert response.status_code == 200
    assert response.json()["business_unit"]["name"] == "Anchor Hotel"


@pytest.mark.asyncio
async def test_homepage_without_units(client: AsyncClient):
    """Test that an empty installation gives 404"""
    response = await client.get("/public/homepage")
    assert response.status_code == 404


@pytest.mark.asyncio
async def test_property_homepage_shows_published_content(
    client: AsyncClient, test_business_unit, test_room_types, published_content
):
    """Test that only live content reaches the public homepage"""
    response = await client.get(f"/public/properties/{test_business_unit.id}/homepage")
    assert response.status_code == 200
    data = response.json()

    assert [s["title"] for s in data["hero_slides"]] == ["Welcome"]
    assert [t["guest_name"] for t in data["testimonials"]] == ["Ana"]
    assert [e["title"] for e in data["events"]] == ["Jazz Night"]
    assert [o["title"] for o in data["special_offers"]] == ["Summer Escape"]
    assert [g["filename"] for g in data["gallery"]] == ["beach.jpg"]
    assert data["website_config"]["site_name"] == "Anchor Hotel"
    assert len(data["room_types"]) == 2


@pytest.mark.asyncio
async def test_property_rooms(client: AsyncClient, test_business_unit, test_room_types, published_content):
    """Test the rooms listing page"""
    response = await client.get(f"/public/properties/{test_business_unit.id}/rooms")
    assert response.status_code == 200
    data = response.json()

    assert data["hotel"]["display_name"] == "Anchor Hotel by Tropicana"
    assert data["hotel"]["gallery"] == ["https://cdn.example.com/beach.jpg"]

    deluxe, suite = data["rooms"]
    assert deluxe["price_per_night"] == 4000.0
    assert deluxe["image"] == "https://images.example.com/deluxe.jpg"
    assert suite["image"] is None
    assert [a["name"] for a in deluxe["amenities"]] == ["High-Speed WiFi"]


@pytest.mark.asyncio
async def test_room_detail(client: AsyncClient, test_business_unit, test_room_types):
    """Test the room detail page"""
    deluxe = test_room_types["deluxe"]
    response = await client.get(f"/public/properties/{test_business_unit.id}/rooms/{deluxe.id}")
    assert response.status_code == 200
    data = response.json()
    assert data["display_name"] == "Deluxe Room"
    assert data["gallery"] == [
        "https://images.example.com/deluxe.jpg",
        "https://images.example.com/deluxe-2.jpg",
    ]
    assert data["currency"] == "PHP"
    assert data["business_unit"]["id"] == str(test_business_unit.id)


@pytest.mark.asyncio
async def test_quote_stay(client: AsyncClient, test_business_unit, test_room_types):
    """Test nightly pricing with tax"""
    deluxe = test_room_types["deluxe"]
    path = f"/public/properties/{test_business_unit.id}/rooms/{deluxe.id}/quote"

    response = await client.post(path, json={"check_in": "2030-06-01", "check_out": "2030-06-04", "guests": 2})
    assert response.status_code == 200
    quote = response.json()
    assert quote["nights"] == 3
    assert quote["subtotal"] == 12000.0
    assert quote["taxes"] == 1440.0
    assert quote["total"] == 13440.0

    response = await client.post(path, json={"check_in": "2030-06-01", "check_out": "2030-06-04", "guests": 3})
    assert response.status_code == 422

    response = await client.post(path, json={"check_in": "2030-06-04", "check_out": "2030-06-04"})
    assert response.status_code == 422


@pytest.mark.asyncio
async def test_submit_contact_form(test_db, client: AsyncClient, test_business_unit):
    """Test that submissions are stored as NEW"""
    response = await client.post(
        f"/public/properties/{test_business_unit.id}/contact",
        json={"name": "Ana", "email": "ana@example.com", "subject": "Wedding", "message": "Do you host weddings?"},
    )
    assert response.status_code == 201
    assert response.json()["status"] == "NEW"

    result = await test_db.execute(select(ContactForm))
    assert result.scalar_one().message == "Do you host weddings?"

    response = await client.post(
        f"/public/properties/{test_business_unit.id}/contact",
        json={"name": "Ana", "email": "not-an-email", "message": "Hi"},
    )
    assert response.status_code == 422


@pytest.mark.asyncio
async def test_newsletter_is_idempotent(test_db, client: AsyncClient, test_business_unit):
    """Test that repeated signups reactivate one subscription"""
    path = f"/public/properties/{test_business_unit.id}/newsletter"

    response = await client.post(path, json={"email": "Ana@Example.com"})
    assert response.status_code == 200
    first = response.json()
    assert first["email"] == "ana@example.com"

    result = await test_db.execute(select(Newsletter))
    subscription = result.scalar_one()
    subscription.is_active = False
    await test_db.commit()

    response = await client.post(path, json={"email": "ana@example.com", "first_name": "Ana"})
    assert response.json()["id"] == first["id"]
    assert response.json()["is_active"] is True

"""Tests for website content management"""

from datetime import datetime, timedelta

import pytest
from httpx import AsyncClient
from sqlalchemy import select

from app.models.audit import AuditLog
from app.models.cms import ContentItem
from app.models.inquiry import ContactForm, Newsletter


def _cms(business_unit, resource: str) -> str:
    return f"/business-units/{business_unit.id}/cms/{resource}"


def _event_payload(**overrides):
    start = datetime(2030, 6, 1, 18, 0)
    payload = {
        "title": "Sunset Jazz Night",
        "slug": "sunset-jazz-night",
        "description": "Live jazz by the pool",
        "type": "FESTIVAL",
        "start_date": start.isoformat(),
        "end_date": (start + timedelta(hours=4)).isoformat(),
        "venue": "Pool Deck",
    }
    payload.update(overrides)
    return payload


def _offer_payload(room_type_ids, **overrides):
    payload = {
        "title": "Summer Escape",
        "slug": "summer-escape",
        "description": "Two nights with breakfast",
        "type": "ROOM_PACKAGE",
        "offer_price": 7500,
        "original_price": 9000,
        "valid_from": datetime(2030, 3, 1).isoformat(),
        "valid_to": datetime(2030, 5, 31).isoformat(),
        "room_type_ids": [str(rid) for rid in room_type_ids],
    }
    payload.update(overrides)
    return payload


@pytest.mark.asyncio
async def test_hero_slide_crud(test_db, manager_client: AsyncClient, test_business_unit):
    """Test hero slide create, update, list and delete"""
    path = _cms(test_business_unit, "hero-slides")

    response = await manager_client.post(path, json={"title": "Welcome", "background_image": "hero.jpg"})
    assert response.status_code == 201
    slide = response.json()
    assert slide["is_active"] is True
    assert slide["sort_order"] == 0

    response = await manager_client.put(f"{path}/{slide['id']}", json={"is_active": False, "subtitle": "Relax"})
    assert response.status_code == 200
    assert response.json()["subtitle"] == "Relax"
    assert response.json()["title"] == "Welcome"

    response = await manager_client.get(path, params={"active_only": True})
    assert response.json() == []

    response = await manager_client.get(path)
    assert len(response.json()) == 1

    response = await manager_client.delete(f"{path}/{slide['id']}")
    assert response.status_code == 204

    response = await manager_client.get(f"{path}/{slide['id']}")
    assert response.status_code == 404

    result = await test_db.execute(
        select(AuditLog.action).where(AuditLog.resource_type == "hero_slide")
    )
    assert sorted(result.scalars().all()) == ["create", "delete", "update"]


@pytest.mark.asyncio
async def test_hero_slide_requires_fields(manager_client: AsyncClient, test_business_unit):
    """Test that title and background image are required"""
    response = await manager_client.post(_cms(test_business_unit, "hero-slides"), json={"title": "Welcome"})
    assert response.status_code == 422


@pytest.mark.asyncio
async def test_writes_require_manage_content(
    front_desk_client: AsyncClient, test_business_unit
):
    """Test that reads need an assignment and writes need manage:content"""
    response = await front_desk_client.get(_cms(test_business_unit, "faqs"))
    assert response.status_code == 200

    response = await front_desk_client.post(
        _cms(test_business_unit, "faqs"),
        json={"question": "Pets?", "answer": "No", "category": "Policies"},
    )
    assert response.status_code == 403

    response = await front_desk_client.put(
        _cms(test_business_unit, "website-config"),
        json={"site_name": "Anchor"},
    )
    assert response.status_code == 403


@pytest.mark.asyncio
async def test_event_validation_and_slugs(manager_client: AsyncClient, test_business_unit):
    """Test event date checks, slug uniqueness and the embedded unit"""
    path = _cms(test_business_unit, "events")

    response = await manager_client.post(
        path,
        json=_event_payload(end_date=datetime(2030, 5, 1).isoformat()),
    )
    assert response.status_code == 422

    response = await manager_client.post(path, json=_event_payload())
    assert response.status_code == 201
    event = response.json()
    assert event["status"] == "PLANNING"
    assert event["timezone"] == "Asia/Manila"
    assert event["business_unit"]["id"] == str(test_business_unit.id)

    response = await manager_client.post(path, json=_event_payload(title="Another"))
    assert response.status_code == 409

    response = await manager_client.put(
        f"{path}/{event['id']}",
        json={"end_date": datetime(2030, 1, 1).isoformat()},
    )
    assert response.status_code == 422

    response = await manager_client.put(f"{path}/{event['id']}", json={"is_published": True, "status": "CONFIRMED"})
    assert response.status_code == 200
    assert response.json()["status"] == "CONFIRMED"


@pytest.mark.asyncio
async def test_event_list_order(manager_client: AsyncClient, test_business_unit):
    """Test that featured and pinned events come first"""
    path = _cms(test_business_unit, "events")
    await manager_client.post(path, json=_event_payload(slug="regular", title="Regular"))
    await manager_client.post(path, json=_event_payload(slug="pinned", title="Pinned", is_pinned=True))
    await manager_client.post(path, json=_event_payload(slug="featured", title="Featured", is_featured=True))

    response = await manager_client.get(path)
    assert [e["title"] for e in response.json()] == ["Featured", "Pinned", "Regular"]


@pytest.mark.asyncio
async def test_restaurant_slug_is_per_unit(
    admin_client: AsyncClient, test_business_unit, other_business_unit
):
    """Test that the same slug may be reused in another unit"""
    payload = {
        "name": "Harbor Grill",
        "slug": "harbor-grill",
        "description": "Seafood by the bay",
        "type": "RESTAURANT",
        "cuisine": ["Filipino", "Seafood"],
    }

    response = await admin_client.post(_cms(test_business_unit, "restaurants"), json=payload)
    assert response.status_code == 201
    assert response.json()["cuisine"] == ["Filipino", "Seafood"]

    response = await admin_client.post(_cms(test_business_unit, "restaurants"), json=payload)
    assert response.status_code == 409

    response = await admin_client.post(_cms(other_business_unit, "restaurants"), json=payload)
    assert response.status_code == 201


@pytest.mark.asyncio
async def test_special_offer_room_types(
    manager_client: AsyncClient, test_business_unit, test_room_types
):
    """Test offer creation, room type links and validity checks"""
    path = _cms(test_business_unit, "special-offers")
    deluxe = test_room_types["deluxe"]
    suite = test_room_types["suite"]

    response = await manager_client.post(path, json=_offer_payload([deluxe.id], status="ACTIVE"))
    assert response.status_code == 201
    offer = response.json()
    assert offer["status"] == "DRAFT"
    assert [link["room_type"]["name"] for link in offer["room_types"]] == ["DELUXE_ROOM"]

    response = await manager_client.put(
        f"{path}/{offer['id']}",
        json={"room_type_ids": [str(deluxe.id), str(suite.id)], "status": "ACTIVE"},
    )
    assert response.status_code == 200
    assert response.json()["status"] == "ACTIVE"
    assert {link["room_type_id"] for link in response.json()["room_types"]} == {str(deluxe.id), str(suite.id)}

    response = await manager_client.put(
        f"{path}/{offer['id']}",
        json={"valid_to": datetime(2030, 1, 1).isoformat()},
    )
    assert response.status_code == 422

    response = await manager_client.post(
        path,
        json=_offer_payload([], slug="bad-dates", valid_to=datetime(2030, 1, 1).isoformat()),
    )
    assert response.status_code == 422


@pytest.mark.asyncio
async def test_special_offer_rejects_foreign_room_type(
    admin_client: AsyncClient, other_business_unit, test_room_types
):
    """Test that room types of another unit give 400"""
    response = await admin_client.post(
        _cms(other_business_unit, "special-offers"),
        json=_offer_payload([test_room_types["deluxe"].id]),
    )
    assert response.status_code == 400


@pytest.mark.asyncio
async def test_amenity_and_testimonial_validation(manager_client: AsyncClient, test_business_unit):
    """Test required amenity fields and testimonial rating range"""
    response = await manager_client.post(_cms(test_business_unit, "amenities"), json={"name": "Spa"})
    assert response.status_code == 422

    response = await manager_client.post(
        _cms(test_business_unit, "amenities"),
        json={"name": "Spa", "icon": "Sparkles", "category": "Property"},
    )
    assert response.status_code == 201

    response = await manager_client.post(
        _cms(test_business_unit, "testimonials"),
        json={"guest_name": "Ana", "content": "Lovely stay", "rating": 6},
    )
    assert response.status_code == 422

    response = await manager_client.post(
        _cms(test_business_unit, "testimonials"),
        json={"guest_name": "Ana", "content": "Lovely stay", "rating": 5},
    )
    assert response.status_code == 201


@pytest.mark.asyncio
async def test_media_patch_rules(manager_client: AsyncClient, test_business_unit):
    """Test media defaults and the restricted patch"""
    path = _cms(test_business_unit, "media")

    response = await manager_client.post(
        path,
        json={
            "filename": "lobby.jpg",
            "original_name": "Lobby.jpg",
            "mime_type": "image/jpeg",
            "url": "https://cdn.example.com/lobby.jpg",
        },
    )
    assert response.status_code == 201
    item = response.json()
    assert item["size"] == 0
    assert item["tags"] == []

    # Only metadata fields are patchable
    response = await manager_client.patch(f"{path}/{item['id']}", json={"url": "https://evil.example.com"})
    assert response.status_code == 400

    response = await manager_client.patch(f"{path}/{item['id']}", json={"tags": ["lobby"], "alt_text": "Lobby"})
    assert response.status_code == 200
    assert response.json()["tags"] == ["lobby"]
    assert response.json()["url"] == "https://cdn.example.com/lobby.jpg"

    response = await manager_client.get(path, params={"category": "rooms"})
    assert response.json() == []


@pytest.mark.asyncio
async def test_gallery_items(manager_client: AsyncClient, test_business_unit):
    """Test gallery creation from an image URL"""
    path = _cms(test_business_unit, "gallery")

    response = await manager_client.post(
        path,
        json={"title": "Beach", "image_url": "https://cdn.example.com/photos/beach.jpg"},
    )
    assert response.status_code == 201
    item = response.json()
    assert item["filename"] == "beach.jpg"
    assert item["mime_type"] == "image/jpeg"
    assert item["category"] == "gallery"

    response = await manager_client.get(path)
    assert [g["title"] for g in response.json()] == ["Beach"]

    response = await manager_client.delete(f"{path}/{item['id']}")
    assert response.status_code == 204

    response = await manager_client.get(path)
    assert response.json() == []


@pytest.mark.asyncio
async def test_page_publishing(manager_client: AsyncClient, test_business_unit):
    """Test page defaults, publish stamping and validation"""
    path = _cms(test_business_unit, "pages")

    response = await manager_client.post(path, json={"title": "About", "slug": "about"})
    assert response.status_code == 201
    page = response.json()
    assert page["status"] == "DRAFT"
    assert page["content_type"] == "HTML"
    assert page["published_at"] is None

    response = await manager_client.patch(f"{path}/{page['id']}", json={})
    assert response.status_code == 400

    response = await manager_client.patch(f"{path}/{page['id']}", json={"status": "LIVE"})
    assert response.status_code == 422

    response = await manager_client.patch(f"{path}/{page['id']}", json={"status": "PUBLISHED"})
    assert response.status_code == 200
    assert response.json()["published_at"] is not None

    response = await manager_client.get(path, params={"status": "DRAFT"})
    assert response.json() == []


@pytest.mark.asyncio
async def test_features_and_contact_info(test_db, manager_client: AsyncClient, test_business_unit):
    """Test keyed content items for features and contact details"""
    features = _cms(test_business_unit, "features")
    contact = _cms(test_business_unit, "contact-info")

    response = await manager_client.post(
        features,
        json={"title": "Infinity Pool", "description": "Overlooking the bay", "icon_name": "Waves"},
    )
    assert response.status_code == 201
    feature = response.json()
    assert feature["key"].startswith("feature_")
    assert feature["section"] == "features"
    assert feature["status"] == "PUBLISHED"
    assert feature["payload"]["icon_name"] == "Waves"

    response = await manager_client.put(f"{features}/{feature['id']}", json={"is_active": False, "title": "Rooftop Pool"})
    assert response.status_code == 200
    assert response.json()["status"] == "DRAFT"
    assert response.json()["name"] == "Rooftop Pool"
    assert response.json()["payload"]["description"] == "Overlooking the bay"

    response = await manager_client.post(
        contact,
        json={"type": "PHONE", "label": "Front Desk", "value": "+63 83 555 1001", "icon_name": "Phone"},
    )
    assert response.status_code == 201
    item = response.json()
    assert item["key"].startswith("contact_phone_")
    assert item["payload"]["value"] == "+63 83 555 1001"

    # Sections do not leak into each other
    response = await manager_client.get(f"{features}")
    assert [i["section"] for i in response.json()] == ["features"]

    response = await manager_client.delete(f"{features}/{item['id']}")
    assert response.status_code == 404

    response = await manager_client.delete(f"{contact}/{item['id']}")
    assert response.status_code == 204

    result = await test_db.execute(select(ContentItem).where(ContentItem.section == "contact"))
    assert result.scalars().all() == []


@pytest.mark.asyncio
async def test_website_config_upsert(manager_client: AsyncClient, test_business_unit):
    """Test that the config is null until saved, then updated in place"""
    path = _cms(test_business_unit, "website-config")

    response = await manager_client.get(path)
    assert response.status_code == 200
    assert response.json() is None

    response = await manager_client.put(path, json={"site_name": "Anchor Hotel", "tagline": "Stay by the sea"})
    assert response.status_code == 200
    first = response.json()
    assert first["tagline"] == "Stay by the sea"

    response = await manager_client.put(path, json={"site_name": "Anchor Hotel GenSan"})
    assert response.status_code == 200
    assert response.json()["id"] == first["id"]
    assert response.json()["site_name"] == "Anchor Hotel GenSan"


@pytest.mark.asyncio
async def test_cms_analytics_counts(test_db, manager_client: AsyncClient, test_business_unit, other_business_unit):
    """Test that analytics reflect stored rows within the window"""
    now = datetime.utcnow()
    test_db.add_all([
        ContactForm(business_unit_id=test_business_unit.id, name="Ana", email="ana@example.com", message="Hi", created_at=now),
        ContactForm(
            business_unit_id=test_business_unit.id,
            name="Old",
            email="old@example.com",
            message="Hello",
            created_at=now - timedelta(days=45),
        ),
        ContactForm(business_unit_id=other_business_unit.id, name="Ben", email="ben@example.com", message="Hi", created_at=now),
        Newsletter(business_unit_id=test_business_unit.id, email="ana@example.com", created_at=now),
    ])
    await test_db.commit()

    await manager_client.post(_cms(test_business_unit, "pages"), json={"title": "About", "slug": "about"})
    await manager_client.post(
        _cms(test_business_unit, "pages"),
        json={"title": "Dining", "slug": "dining", "status": "PUBLISHED"},
    )

    response = await manager_client.get(_cms(test_business_unit, "analytics"))
    assert response.status_code == 200
    data = response.json()
    assert data["time_range"] == "30d"
    assert data["contact_submissions"] == 1
    assert data["newsletter_signups"] == 1
    assert data["content"]["pages"] == {"total": 2, "published": 1}
    assert data["content"]["events"] == {"total": 0, "published": 0}

    response = await manager_client.get(_cms(test_business_unit, "analytics"), params={"time_range": "90d"})
    assert response.json()["contact_submissions"] == 2

    response = await manager_client.get(_cms(test_business_unit, "analytics"), params={"time_range": "1y"})
    assert response.status_code == 422


@pytest.mark.asyncio
async def test_event_accepts_offset_dates(manager_client: AsyncClient, test_business_unit):
    """Test that zoned timestamps are stored as UTC and compare with stored dates"""
    path = _cms(test_business_unit, "events")

    response = await manager_client.post(
        path,
        json=_event_payload(start_date="2030-06-02T02:00:00+08:00", end_date="2030-06-01T22:00:00Z"),
    )
    assert response.status_code == 201
    event = response.json()
    assert event["start_date"] == "2030-06-01T18:00:00"
    assert event["end_date"] == "2030-06-01T22:00:00"

    response = await manager_client.put(f"{path}/{event['id']}", json={"end_date": "2030-06-01T23:30:00Z"})
    assert response.status_code == 200
    assert response.json()["end_date"] == "2030-06-01T23:30:00"

    response = await manager_client.put(f"{path}/{event['id']}", json={"end_date": "2030-06-01T17:00:00Z"})
    assert response.status_code == 422


@pytest.mark.asyncio
async def test_special_offer_accepts_offset_dates(
    manager_client: AsyncClient, test_business_unit, test_room_types
):
    """Test that zoned validity dates are stored as UTC"""
    path = _cms(test_business_unit, "special-offers")

    response = await manager_client.post(
        path,
        json=_offer_payload(
            [test_room_types["deluxe"].id],
            valid_from="2030-03-01T00:00:00Z",
            valid_to="2030-05-31T00:00:00Z",
        ),
    )
    assert response.status_code == 201
    offer = response.json()

    response = await manager_client.put(f"{path}/{offer['id']}", json={"valid_to": "2030-06-30T08:00:00+08:00"})
    assert response.status_code == 200
    assert response.json()["valid_to"] == "2030-06-30T00:00:00"

    response = await manager_client.put(f"{path}/{offer['id']}", json={"valid_to": "2030-01-01T00:00:00Z"})
    assert response.status_code == 422


@pytest.mark.asyncio
async def test_gallery_delete_ignores_other_media(test_db, manager_client: AsyncClient, test_business_unit):
    """Test that the gallery endpoint cannot delete non-gallery media"""
    response = await manager_client.post(
        _cms(test_business_unit, "media"),
        json={
            "filename": "floorplan.pdf",
            "original_name": "Floorplan.pdf",
            "mime_type": "application/pdf",
            "url": "https://cdn.example.com/floorplan.pdf",
            "category": "documents",
        },
    )
    assert response.status_code == 201
    item = response.json()

    response = await manager_client.delete(f"{_cms(test_business_unit, 'gallery')}/{item['id']}")
    assert response.status_code == 404

    response = await manager_client.get(_cms(test_business_unit, "media"), params={"category": "documents"})
    assert [m["id"] for m in response.json()] == [item["id"]]

    result = await test_db.execute(select(AuditLog).where(AuditLog.action == "delete"))
    assert result.scalars().all() == []

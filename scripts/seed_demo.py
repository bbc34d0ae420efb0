#!/usr/bin/env python3
"""
Seed script to create the demo Tropicana properties and website content
"""

import asyncio
import random
import uuid
from datetime import datetime

from passlib.context import CryptContext

pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")

ADMIN_EMAIL = "admin@tropicana.com"
ADMIN_USERNAME = "admin"
ADMIN_PASSWORD = "asdasd123"

PROPERTIES = [
    {
        "name": "Anchor Hotel",
        "display_name": "Anchor Hotel by Tropicana",
        "property_type": "BOUTIQUE_HOTEL",
        "city": "General Santos",
        "address": "123 Pioneer Avenue, General Santos City",
        "phone": "+63 83 555 1001",
        "email": "anchor@tropicana.com",
        "website": "anchor.tropicana.local",
        "logo": "https://images.pexels.com/photos/271624/pexels-photo-271624.jpeg",
    },
    {
        "name": "Dolores Tropicana Resort",
        "display_name": "Dolores Tropicana Resort",
        "property_type": "RESORT",
        "city": "General Santos",
        "address": "456 Beachfront, General Santos City",
        "phone": "+63 83 555 2002",
        "email": "tropicana@tropicana.com",
        "website": "tropicana.tropicana.local",
        "logo": "https://images.pexels.com/photos/258154/pexels-photo-258154.jpeg",
    },
    {
        "name": "Dolores Lake Resort",
        "display_name": "Dolores Lake Resort",
        "property_type": "RESORT",
        "city": "Lake Sebu",
        "address": "789 Lakeside Drive, Lake Sebu, South Cotabato",
        "phone": "+63 83 555 3003",
        "email": "lake@tropicana.com",
        "website": "lake.tropicana.local",
        "logo": "https://images.pexels.com/photos/1457842/pexels-photo-1457842.jpeg",
    },
    {
        "name": "Dolores Farm Resort",
        "display_name": "Dolores Farm Resort",
        "property_type": "RESORT",
        "city": "Polomolok",
        "address": "101 Agri-Tourism Rd, Polomolok, South Cotabato",
        "phone": "+63 83 555 4004",
        "email": "farm@tropicana.com",
        "website": "farm.tropicana.local",
        "logo": "https://images.pexels.com/photos/262048/pexels-photo-262048.jpeg",
    },
]

AMENITIES = [
    {"key": "wifi", "name": "High-Speed WiFi", "category": "Room", "icon": "Wifi"},
    {"key": "pool", "name": "Swimming Pool", "category": "Property", "icon": "Waves"},
    {"key": "parking", "name": "Free Parking", "category": "Property", "icon": "Car"},
    {"key": "restaurant", "name": "On-site Restaurant", "category": "Dining", "icon": "Utensils"},
    {"key": "ac", "name": "Air Conditioning", "category": "Room", "icon": "Wind"},
]

DELUXE_IMAGES = [
    "https://images.pexels.com/photos/271618/pexels-photo-271618.jpeg",
    "https://images.pexels.com/photos/271639/pexels-photo-271639.jpeg",
    "https://images.pexels.com/photos/1743231/pexels-photo-1743231.jpeg",
    "https://images.pexels.com/photos/279746/pexels-photo-279746.jpeg",
    "https://images.pexels.com/photos/6782473/pexels-photo-6782473.jpeg",
]

SUITE_IMAGES = [
    "https://images.pexels.com/photos/1457842/pexels-photo-1457842.jpeg",
    "https://images.pexels.com/photos/276724/pexels-photo-276724.jpeg",
    "https://images.pexels.com/photos/1571460/pexels-photo-1571460.jpeg",
    "https://images.pexels.com/photos/271753/pexels-photo-271753.jpeg",
    "https://images.pexels.com/photos/271805/pexels-photo-271805.jpeg",
]

TESTIMONIALS = [
    ("Maria Santos", "The staff made our anniversary weekend unforgettable. We will be back."),
    ("James Whitfield", "Spotless rooms, a beautiful pool and the best breakfast in Mindanao."),
    ("Angela Reyes", "Perfect base for exploring the region. Friendly, quiet and comfortable."),
]


async def seed_demo_data():
    """Seed demo data for development"""
    from sqlalchemy import select

    from app.database import SessionLocal, engine, Base
    from app.models.business_unit import BusinessUnit, PropertyType
    from app.models.cms import HeroSlide, Testimonial, FAQ, WebsiteConfiguration
    from app.models.room import Amenity, RoomType, RoomTypeAmenity, Room, RoomCategory
    from app.models.user import (
        User,
        UserStatus,
        Role,
        RoleName,
        Permission,
        PermissionName,
        RolePermission,
        UserBusinessUnitRole,
    )

    # Create tables
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    async with SessionLocal() as db:
        # Check if the admin already exists
        result = await db.execute(select(User).where(User.email == ADMIN_EMAIL))
        if result.scalar_one_or_none():
            print("Demo data already exists. Skipping...")
            return

        print("Creating admin user, roles and permissions...")

        admin_user = User(
            id=uuid.uuid4(),
            email=ADMIN_EMAIL,
            username=ADMIN_USERNAME,
            hashed_password=pwd_context.hash(ADMIN_PASSWORD),
            first_name="Tropicana",
            last_name="Admin",
            status=UserStatus.ACTIVE,
            email_verified_at=datetime.utcnow(),
        )
        db.add(admin_user)

        permissions = {
            name: Permission(id=uuid.uuid4(), name=name, module=name.split(":")[1])
            for name in (
                PermissionName.MANAGE_CONTENT,
                PermissionName.MANAGE_USERS,
                PermissionName.VIEW_REPORTS,
            )
        }
        db.add_all(permissions.values())

        role_grants = {
            RoleName.SUPER_ADMIN: ("Super Administrator", True, list(permissions)),
            RoleName.HOTEL_MANAGER: (
                "Hotel Manager",
                False,
                [PermissionName.MANAGE_CONTENT, PermissionName.MANAGE_USERS, PermissionName.VIEW_REPORTS],
            ),
            RoleName.FRONT_DESK: ("Front Desk Staff", False, [PermissionName.VIEW_REPORTS]),
        }
        roles = {}
        for role_name, (display_name, is_system, granted) in role_grants.items():
            role = Role(id=uuid.uuid4(), name=role_name, display_name=display_name, is_system=is_system)
            role.permissions = [RolePermission(permission=permissions[name]) for name in granted]
            db.add(role)
            roles[role_name] = role
        await db.flush()

        print("Creating business units...")

        business_units = []
        for data in PROPERTIES:
            bu = BusinessUnit(
                id=uuid.uuid4(),
                name=data["name"],
                display_name=data["display_name"],
                property_type=PropertyType(data["property_type"]),
                city=data["city"],
                country="Philippines",
                address=data["address"],
                phone=data["phone"],
                email=data["email"],
                website=data["website"],
                logo=data["logo"],
                created_by=admin_user.id,
            )
            db.add(bu)
            business_units.append(bu)
        await db.flush()

        for bu in business_units:
            db.add(UserBusinessUnitRole(
                user_id=admin_user.id,
                business_unit_id=bu.id,
                role_id=roles[RoleName.SUPER_ADMIN].id,
                assigned_by=admin_user.id,
            ))

        for bu in business_units:
            print(f"Seeding {bu.display_name}...")

            amenities = {}
            for index, item in enumerate(AMENITIES):
                amenity = Amenity(
                    business_unit_id=bu.id,
                    name=item["name"],
                    category=item["category"],
                    icon=item["icon"],
                    sort_order=index,
                )
                db.add(amenity)
                amenities[item["key"]] = amenity
            await db.flush()

            deluxe = RoomType(
                business_unit_id=bu.id,
                name="DELUXE_ROOM",
                display_name="Deluxe Room",
                type=RoomCategory.DELUXE,
                max_occupancy=2,
                bed_configuration="1 King Bed or 2 Twin Beds",
                room_size=28,
                base_rate=random.randint(3500, 5000),
                primary_image="https://images.pexels.com/photos/164595/pexels-photo-164595.jpeg",
                images=DELUXE_IMAGES,
                sort_order=0,
            )
            deluxe.amenities = [
                RoomTypeAmenity(amenity=amenities["wifi"]),
                RoomTypeAmenity(amenity=amenities["ac"]),
            ]
            suite = RoomType(
                business_unit_id=bu.id,
                name="EXECUTIVE_SUITE",
                display_name="Executive Suite",
                type=RoomCategory.SUITE,
                max_occupancy=4,
                bed_configuration="1 King Bed, 1 Sofa Bed",
                room_size=54,
                base_rate=random.randint(8000, 12000),
                primary_image="https://images.pexels.com/photos/262048/pexels-photo-262048.jpeg",
                images=SUITE_IMAGES,
                sort_order=1,
            )
            suite.amenities = [
                RoomTypeAmenity(amenity=amenities["wifi"]),
                RoomTypeAmenity(amenity=amenities["ac"]),
                RoomTypeAmenity(amenity=amenities["parking"]),
            ]
            db.add_all([deluxe, suite])
            await db.flush()

            for i in range(1, 11):
                db.add(Room(business_unit_id=bu.id, room_type_id=deluxe.id, room_number=f"D{100 + i}", floor=1))
            for i in range(1, 6):
                db.add(Room(business_unit_id=bu.id, room_type_id=suite.id, room_number=f"S{200 + i}", floor=2))

            db.add(WebsiteConfiguration(
                business_unit_id=bu.id,
                site_name=bu.display_name,
                tagline=f"Experience luxury at {bu.display_name}",
                primary_phone=bu.phone,
                primary_email=bu.email,
                address=bu.address,
            ))

            db.add(HeroSlide(
                business_unit_id=bu.id,
                title=f"Welcome to {bu.display_name}",
                subtitle="Your perfect getaway awaits.",
                background_image=bu.logo,
                cta_text="Book Now",
                cta_url="/booking",
            ))

            for index, (guest_name, content) in enumerate(TESTIMONIALS):
                db.add(Testimonial(
                    business_unit_id=bu.id,
                    guest_name=guest_name,
                    content=content,
                    rating=random.randint(4, 5),
                    is_featured=True,
                    sort_order=index,
                ))

            db.add(FAQ(
                business_unit_id=bu.id,
                question="What are the check-in and check-out times?",
                answer="Check-in is at 3:00 PM and check-out is at 12:00 PM.",
                category="General",
            ))

        await db.commit()

        hosts = "\n".join(f"  {bu.display_name}: {bu.website} (ID: {bu.id})" for bu in business_units)
        print(f"""
Demo data created successfully!

Business units:
{hosts}

Super Admin:
  Email: {ADMIN_EMAIL}
  Username: {ADMIN_USERNAME}
  Password: {ADMIN_PASSWORD}

Each property has 5 amenities, 2 room types, 15 rooms, a hero slide,
3 testimonials and an FAQ.
""")


if __name__ == "__main__":
    asyncio.run(seed_demo_data())

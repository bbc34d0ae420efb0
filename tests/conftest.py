"""Test configuration and fixtures"""

from datetime import datetime, timedelta
from uuid import uuid4

import pytest
from httpx import AsyncClient, ASGITransport
from sqlalchemy.ext.asyncio import create_async_engine, AsyncSession, async_sessionmaker
from sqlalchemy.pool import StaticPool

from app.main import app
from app.database import Base, get_db
from app.models.business_unit import BusinessUnit, PropertyType
from app.models.room import RoomType, Amenity, RoomTypeAmenity, Room, RoomCategory
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
from app.api.auth import get_password_hash, create_access_token


# Test database URL (use in-memory SQLite for tests)
TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


@pytest.fixture
async def test_db():
    """Create test database"""
    engine = create_async_engine(
        TEST_DATABASE_URL,
        echo=False,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    session_factory = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)

    async with session_factory() as session:
        yield session

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)

    await engine.dispose()


@pytest.fixture
async def permissions(test_db):
    """Create the built-in permissions"""
    items = {
        name: Permission(id=uuid4(), name=name, module=name.split(":")[1])
        for name in (
            PermissionName.MANAGE_CONTENT,
            PermissionName.MANAGE_USERS,
            PermissionName.VIEW_REPORTS,
        )
    }
    test_db.add_all(items.values())
    await test_db.commit()
    return items


@pytest.fixture
async def roles(test_db, permissions):
    """Create SUPER_ADMIN, HOTEL_MANAGER and FRONT_DESK roles"""
    grants = {
        RoleName.SUPER_ADMIN: ("Super Administrator", True, list(permissions)),
        RoleName.HOTEL_MANAGER: (
            "Hotel Manager",
            False,
            [PermissionName.MANAGE_CONTENT, PermissionName.MANAGE_USERS],
        ),
        RoleName.FRONT_DESK: ("Front Desk Staff", False, [PermissionName.VIEW_REPORTS]),
    }

    items = {}
    for name, (display_name, is_system, granted) in grants.items():
        role = Role(id=uuid4(), name=name, display_name=display_name, is_system=is_system)
        role.permissions = [RolePermission(permission=permissions[p]) for p in granted]
        test_db.add(role)
        items[name] = role

    await test_db.commit()
    return items


@pytest.fixture
async def test_business_unit(test_db):
    """Create a test business unit"""
    business_unit = BusinessUnit(
        id=uuid4(),
        name="Anchor Hotel",
        display_name="Anchor Hotel by Tropicana",
        property_type=PropertyType.BOUTIQUE_HOTEL,
        city="General Santos",
        country="Philippines",
        address="123 Pioneer Avenue",
        email="anchor@tropicana.com",
        website="anchor.tropicana.com",
        created_at=datetime.utcnow() - timedelta(days=2),
    )
    test_db.add(business_unit)
    await test_db.commit()
    return business_unit


@pytest.fixture
async def other_business_unit(test_db):
    """Create a second business unit"""
    business_unit = BusinessUnit(
        id=uuid4(),
        name="Dolores Lake Resort",
        display_name="Dolores Lake Resort",
        property_type=PropertyType.RESORT,
        city="Lake Sebu",
        country="Philippines",
        email="lake@tropicana.com",
        website="lake.tropicana.com",
        created_at=datetime.utcnow() - timedelta(days=1),
    )
    test_db.add(business_unit)
    await test_db.commit()
    return business_unit


async def create_test_user(db, username, assignments, status=UserStatus.ACTIVE, password="testpass123"):
    """Create a user assigned to (business_unit, role) pairs"""
    user = User(
        id=uuid4(),
        email=f"{username}@tropicana.com",
        username=username,
        hashed_password=get_password_hash(password),
        first_name=username.capitalize(),
        last_name="Tester",
        status=status,
    )
    db.add(user)
    await db.flush()

    for business_unit, role in assignments:
        db.add(
            UserBusinessUnitRole(
                user_id=user.id,
                business_unit_id=business_unit.id,
                role_id=role.id,
            )
        )
    await db.commit()
    return user


@pytest.fixture
async def test_admin_user(test_db, roles, test_business_unit, other_business_unit):
    """Super admin assigned to both business units"""
    return await create_test_user(
        test_db,
        "admin",
        [
            (test_business_unit, roles[RoleName.SUPER_ADMIN]),
            (other_business_unit, roles[RoleName.SUPER_ADMIN]),
        ],
    )


@pytest.fixture
async def test_manager_user(test_db, roles, test_business_unit):
    """Hotel manager assigned to the first business unit only"""
    return await create_test_user(test_db, "manager", [(test_business_unit, roles[RoleName.HOTEL_MANAGER])])


@pytest.fixture
async def test_front_desk_user(test_db, roles, test_business_unit):
    """Front desk user without content permissions"""
    return await create_test_user(test_db, "frontdesk", [(test_business_unit, roles[RoleName.FRONT_DESK])])


@pytest.fixture
async def test_room_types(test_db, test_business_unit):
    """Deluxe room and suite with amenities and physical rooms"""
    wifi = Amenity(business_unit_id=test_business_unit.id, name="High-Speed WiFi", icon="Wifi", category="Room", sort_order=0)
    pool = Amenity(business_unit_id=test_business_unit.id, name="Swimming Pool", icon="Waves", category="Property", sort_order=1)
    test_db.add_all([wifi, pool])
    await test_db.flush()

    deluxe = RoomType(
        id=uuid4(),
        business_unit_id=test_business_unit.id,
        name="DELUXE_ROOM",
        display_name="Deluxe Room",
        type=RoomCategory.DELUXE,
        max_occupancy=2,
        bed_configuration="1 King Bed",
        room_size=28,
        base_rate=4000,
        primary_image="https://images.example.com/deluxe.jpg",
        images=["https://images.example.com/deluxe-2.jpg"],
        sort_order=0,
    )
    deluxe.amenities = [RoomTypeAmenity(amenity=wifi)]
    suite = RoomType(
        id=uuid4(),
        business_unit_id=test_business_unit.id,
        name="EXECUTIVE_SUITE",
        display_name="Executive Suite",
        type=RoomCategory.SUITE,
        max_occupancy=4,
        base_rate=9000,
        images=[],
        sort_order=1,
    )
    suite.amenities = [RoomTypeAmenity(amenity=wifi), RoomTypeAmenity(amenity=pool)]
    test_db.add_all([deluxe, suite])
    await test_db.flush()

    for i in range(1, 4):
        test_db.add(Room(business_unit_id=test_business_unit.id, room_type_id=deluxe.id, room_number=f"D10{i}", floor=1))
    test_db.add(Room(business_unit_id=test_business_unit.id, room_type_id=suite.id, room_number="S201", floor=2))
    await test_db.commit()

    return {"deluxe": deluxe, "suite": suite}


@pytest.fixture
async def transport(test_db):
    """ASGI transport with the database overridden"""
    async def override_get_db():
        yield test_db

    app.dependency_overrides[get_db] = override_get_db
    yield ASGITransport(app=app)
    app.dependency_overrides.clear()


def bearer(user) -> dict:
    return {"Authorization": f"Bearer {create_access_token(user)}"}


@pytest.fixture
async def client(transport):
    """Unauthenticated test client"""
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


@pytest.fixture
async def admin_client(transport, test_admin_user):
    """Client authenticated as the super admin"""
    async with AsyncClient(transport=transport, base_url="http://test", headers=bearer(test_admin_user)) as client:
        yield client


@pytest.fixture
async def manager_client(transport, test_manager_user):
    """Client authenticated as the hotel manager"""
    async with AsyncClient(transport=transport, base_url="http://test", headers=bearer(test_manager_user)) as client:
        yield client


@pytest.fixture
async def front_desk_client(transport, test_front_desk_user):
    """Client authenticated as front desk staff"""
    async with AsyncClient(transport=transport, base_url="http://test", headers=bearer(test_front_desk_user)) as client:
        yield client


@pytest.fixture
def user_factory(test_db):
    """Create extra users inside a test"""
    async def factory(username, assignments, status=UserStatus.ACTIVE):
        return await create_test_user(test_db, username, assignments, status=status)
    return factory


@pytest.fixture
def auth_headers():
    """Bearer headers for a user"""
    return bearer

"""Initial migration

Revision ID: 001
Revises:
Create Date: 2025-01-01 00:00:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql

# revision identifiers, used by Alembic.
revision: str = '001'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

property_type = postgresql.ENUM(
    'HOTEL', 'RESORT', 'BOUTIQUE_HOTEL', 'VILLA', 'APARTMENT',
    name='propertytype', create_type=False,
)
user_status = postgresql.ENUM(
    'ACTIVE', 'INACTIVE', 'SUSPENDED', 'PENDING_ACTIVATION',
    name='userstatus', create_type=False,
)
room_category = postgresql.ENUM(
    'STANDARD', 'DELUXE', 'SUITE', 'VILLA', 'FAMILY',
    name='roomcategory', create_type=False,
)
room_status = postgresql.ENUM(
    'AVAILABLE', 'OCCUPIED', 'MAINTENANCE', 'OUT_OF_ORDER',
    name='roomstatus', create_type=False,
)
housekeeping_status = postgresql.ENUM(
    'CLEAN', 'DIRTY', 'INSPECTED', 'OUT_OF_ORDER',
    name='housekeepingstatus', create_type=False,
)
reservation_status = postgresql.ENUM(
    'PENDING', 'CONFIRMED', 'CHECKED_IN', 'CHECKED_OUT', 'CANCELLED', 'NO_SHOW',
    name='reservationstatus', create_type=False,
)
publish_status = postgresql.ENUM(
    'DRAFT', 'PUBLISHED', 'ARCHIVED',
    name='publishstatus', create_type=False,
)
content_type = postgresql.ENUM(
    'TEXT', 'HTML', 'MARKDOWN', 'JSON',
    name='contenttype', create_type=False,
)
event_status = postgresql.ENUM(
    'PLANNING', 'CONFIRMED', 'CANCELLED', 'COMPLETED',
    name='eventstatus', create_type=False,
)
offer_status = postgresql.ENUM(
    'DRAFT', 'ACTIVE', 'EXPIRED',
    name='offerstatus', create_type=False,
)

ENUMS = (
    property_type,
    user_status,
    room_category,
    room_status,
    housekeeping_status,
    reservation_status,
    publish_status,
    content_type,
    event_status,
    offer_status,
)


def _id():
    return sa.Column('id', postgresql.UUID(as_uuid=True), primary_key=True)


def _business_unit_id(nullable=False):
    return sa.Column(
        'business_unit_id',
        postgresql.UUID(as_uuid=True),
        sa.ForeignKey('business_units.id'),
        nullable=nullable,
    )


def _timestamps():
    return [
        sa.Column('created_at', sa.DateTime(), default=sa.func.now()),
        sa.Column('updated_at', sa.DateTime(), default=sa.func.now(), onupdate=sa.func.now()),
    ]


def upgrade() -> None:
    bind = op.get_bind()
    for enum_type in ENUMS:
        enum_type.create(bind, checkfirst=True)

    # Create business_units table
    op.create_table(
        'business_units',
        _id(),
        sa.Column('name', sa.String(255), nullable=False),
        sa.Column('display_name', sa.String(255), nullable=False),
        sa.Column('description', sa.Text()),
        sa.Column('property_type', property_type, default='HOTEL'),
        sa.Column('address', sa.Text()),
        sa.Column('city', sa.String(100)),
        sa.Column('country', sa.String(100)),
        sa.Column('phone', sa.String(50)),
        sa.Column('email', sa.String(255)),
        sa.Column('website', sa.String(255)),
        sa.Column('logo', sa.String(500)),
        sa.Column('is_active', sa.Boolean(), default=True),
        sa.Column('created_by', postgresql.UUID(as_uuid=True)),
        *_timestamps(),
    )

    # Create users table
    op.create_table(
        'users',
        _id(),
        sa.Column('email', sa.String(255), unique=True, nullable=False),
        sa.Column('username', sa.String(100), unique=True, nullable=False),
        sa.Column('hashed_password', sa.String(255), nullable=False),
        sa.Column('first_name', sa.String(100), nullable=False),
        sa.Column('last_name', sa.String(100), nullable=False),
        sa.Column('phone', sa.String(50)),
        sa.Column('avatar', sa.String(500)),
        sa.Column('status', user_status, default='PENDING_ACTIVATION'),
        sa.Column('email_verified_at', sa.DateTime()),
        sa.Column('refresh_token', sa.String(500)),
        sa.Column('last_login_at', sa.DateTime()),
        sa.Column('created_by', postgresql.UUID(as_uuid=True)),
        *_timestamps(),
    )

    # Create roles and permissions tables
    op.create_table(
        'roles',
        _id(),
        sa.Column('name', sa.String(100), unique=True, nullable=False),
        sa.Column('display_name', sa.String(255), nullable=False),
        sa.Column('description', sa.Text()),
        sa.Column('is_system', sa.Boolean(), default=False),
        *_timestamps(),
    )

    op.create_table(
        'permissions',
        _id(),
        sa.Column('name', sa.String(100), unique=True, nullable=False),
        sa.Column('module', sa.String(100)),
        sa.Column('description', sa.Text()),
        sa.Column('created_at', sa.DateTime(), default=sa.func.now()),
    )

    op.create_table(
        'role_permissions',
        sa.Column('role_id', postgresql.UUID(as_uuid=True), sa.ForeignKey('roles.id'), primary_key=True),
        sa.Column('permission_id', postgresql.UUID(as_uuid=True), sa.ForeignKey('permissions.id'), primary_key=True),
    )

    op.create_table(
        'user_business_unit_roles',
        _id(),
        sa.Column('user_id', postgresql.UUID(as_uuid=True), sa.ForeignKey('users.id'), nullable=False),
        _business_unit_id(),
        sa.Column('role_id', postgresql.UUID(as_uuid=True), sa.ForeignKey('roles.id'), nullable=False),
        sa.Column('assigned_by', postgresql.UUID(as_uuid=True), sa.ForeignKey('users.id')),
        sa.Column('assigned_at', sa.DateTime(), default=sa.func.now()),
        sa.UniqueConstraint('user_id', 'business_unit_id', name='uq_user_business_unit'),
    )

    # Create room inventory tables
    op.create_table(
        'room_types',
        _id(),
        _business_unit_id(),
        sa.Column('name', sa.String(100), nullable=False),
        sa.Column('display_name', sa.String(255), nullable=False),
        sa.Column('type', room_category, default='STANDARD'),
        sa.Column('description', sa.Text()),
        sa.Column('max_occupancy', sa.Integer(), nullable=False, default=2),
        sa.Column('bed_configuration', sa.String(255)),
        sa.Column('room_size', sa.Numeric(8, 2)),
        sa.Column('base_rate', sa.Numeric(12, 2), nullable=False),
        sa.Column('primary_image', sa.String(500)),
        sa.Column('images', postgresql.JSON(), default=[]),
        sa.Column('is_active', sa.Boolean(), default=True),
        sa.Column('sort_order', sa.Integer(), default=0),
        *_timestamps(),
    )

    op.create_table(
        'amenities',
        _id(),
        _business_unit_id(),
        sa.Column('name', sa.String(255), nullable=False),
        sa.Column('description', sa.Text()),
        sa.Column('icon', sa.String(100)),
        sa.Column('category', sa.String(100)),
        sa.Column('is_active', sa.Boolean(), default=True),
        sa.Column('sort_order', sa.Integer(), default=0),
        *_timestamps(),
    )

    op.create_table(
        'room_type_amenities',
        sa.Column('room_type_id', postgresql.UUID(as_uuid=True), sa.ForeignKey('room_types.id'), primary_key=True),
        sa.Column('amenity_id', postgresql.UUID(as_uuid=True), sa.ForeignKey('amenities.id'), primary_key=True),
    )

    op.create_table(
        'rooms',
        _id(),
        _business_unit_id(),
        sa.Column('room_type_id', postgresql.UUID(as_uuid=True), sa.ForeignKey('room_types.id'), nullable=False),
        sa.Column('room_number', sa.String(20), nullable=False),
        sa.Column('floor', sa.Integer()),
        sa.Column('status', room_status, default='AVAILABLE'),
        sa.Column('housekeeping', housekeeping_status, default='CLEAN'),
        sa.Column('is_active', sa.Boolean(), default=True),
        *_timestamps(),
    )

    # Create guests and reservations tables
    op.create_table(
        'guests',
        _id(),
        _business_unit_id(),
        sa.Column('first_name', sa.String(100), nullable=False),
        sa.Column('last_name', sa.String(100), nullable=False),
        sa.Column('email', sa.String(255)),
        sa.Column('phone', sa.String(50)),
        *_timestamps(),
    )

    op.create_table(
        'reservations',
        _id(),
        _business_unit_id(),
        sa.Column('guest_id', postgresql.UUID(as_uuid=True), sa.ForeignKey('guests.id'), nullable=False),
        sa.Column('confirmation_number', sa.String(50), unique=True, nullable=False),
        sa.Column('status', reservation_status, default='PENDING'),
        sa.Column('check_in_date', sa.DateTime(), nullable=False),
        sa.Column('check_out_date', sa.DateTime(), nullable=False),
        sa.Column('nights', sa.Integer(), nullable=False, default=1),
        sa.Column('adults', sa.Integer(), default=1),
        sa.Column('children', sa.Integer(), default=0),
        sa.Column('total_amount', sa.Numeric(12, 2), nullable=False, default=0),
        sa.Column('currency', sa.String(3), default='PHP'),
        sa.Column('special_requests', sa.Text()),
        *_timestamps(),
    )

    op.create_table(
        'reservation_rooms',
        _id(),
        sa.Column('reservation_id', postgresql.UUID(as_uuid=True), sa.ForeignKey('reservations.id'), nullable=False),
        sa.Column('room_id', postgresql.UUID(as_uuid=True), sa.ForeignKey('rooms.id'), nullable=False),
    )

    # Create website content tables
    op.create_table(
        'hero_slides',
        _id(),
        _business_unit_id(),
        sa.Column('title', sa.String(255), nullable=False),
        sa.Column('subtitle', sa.String(500)),
        sa.Column('description', sa.Text()),
        sa.Column('background_image', sa.String(500), nullable=False),
        sa.Column('background_video', sa.String(500)),
        sa.Column('cta_text', sa.String(100)),
        sa.Column('cta_url', sa.String(500)),
        sa.Column('cta_style', sa.String(50), default='primary'),
        sa.Column('text_position', sa.String(50), default='center'),
        sa.Column('text_color', sa.String(50), default='white'),
        sa.Column('overlay_opacity', sa.Numeric(3, 2), default=0.4),
        sa.Column('is_active', sa.Boolean(), default=True),
        sa.Column('sort_order', sa.Integer(), default=0),
        *_timestamps(),
    )

    op.create_table(
        'testimonials',
        _id(),
        _business_unit_id(),
        sa.Column('guest_name', sa.String(255), nullable=False),
        sa.Column('guest_title', sa.String(255)),
        sa.Column('content', sa.Text(), nullable=False),
        sa.Column('rating', sa.Integer(), nullable=False, default=5),
        sa.Column('guest_image', sa.String(500)),
        sa.Column('is_featured', sa.Boolean(), default=False),
        sa.Column('is_active', sa.Boolean(), default=True),
        sa.Column('sort_order', sa.Integer(), default=0),
        *_timestamps(),
    )

    op.create_table(
        'faqs',
        _id(),
        _business_unit_id(),
        sa.Column('question', sa.Text(), nullable=False),
        sa.Column('answer', sa.Text(), nullable=False),
        sa.Column('category', sa.String(100), nullable=False),
        sa.Column('is_active', sa.Boolean(), default=True),
        sa.Column('sort_order', sa.Integer(), default=0),
        *_timestamps(),
    )

    op.create_table(
        'media_items',
        _id(),
        _business_unit_id(),
        sa.Column('filename', sa.String(255), nullable=False),
        sa.Column('original_name', sa.String(255), nullable=False),
        sa.Column('mime_type', sa.String(100), nullable=False),
        sa.Column('size', sa.Integer(), default=0),
        sa.Column('url', sa.String(500), nullable=False),
        sa.Column('thumbnail_url', sa.String(500)),
        sa.Column('title', sa.String(255)),
        sa.Column('description', sa.Text()),
        sa.Column('alt_text', sa.String(255)),
        sa.Column('category', sa.String(100)),
        sa.Column('tags', postgresql.JSON(), default=[]),
        sa.Column('is_active', sa.Boolean(), default=True),
        *_timestamps(),
    )

    op.create_table(
        'pages',
        _id(),
        _business_unit_id(),
        sa.Column('title', sa.String(255), nullable=False),
        sa.Column('slug', sa.String(255), nullable=False),
        sa.Column('description', sa.Text()),
        sa.Column('content', sa.Text()),
        sa.Column('content_type', content_type, default='HTML'),
        sa.Column('meta_title', sa.String(255)),
        sa.Column('meta_description', sa.Text()),
        sa.Column('status', publish_status, default='DRAFT'),
        sa.Column('published_at', sa.DateTime()),
        *_timestamps(),
    )

    op.create_table(
        'content_items',
        _id(),
        _business_unit_id(),
        sa.Column('key', sa.String(255), nullable=False),
        sa.Column('section', sa.String(100), nullable=False),
        sa.Column('name', sa.String(255), nullable=False),
        sa.Column('description', sa.Text()),
        sa.Column('content', sa.Text(), nullable=False),
        sa.Column('content_type', content_type, default='JSON'),
        sa.Column('status', publish_status, default='DRAFT'),
        sa.Column('created_by_id', postgresql.UUID(as_uuid=True), sa.ForeignKey('users.id')),
        *_timestamps(),
    )

    op.create_table(
        'website_configurations',
        _id(),
        sa.Column(
            'business_unit_id',
            postgresql.UUID(as_uuid=True),
            sa.ForeignKey('business_units.id'),
            unique=True,
            nullable=False,
        ),
        sa.Column('site_name', sa.String(255), nullable=False),
        sa.Column('tagline', sa.String(500)),
        sa.Column('description', sa.Text()),
        sa.Column('logo', sa.String(500)),
        sa.Column('favicon', sa.String(500)),
        sa.Column('primary_color', sa.String(20)),
        sa.Column('secondary_color', sa.String(20)),
        sa.Column('primary_phone', sa.String(50)),
        sa.Column('primary_email', sa.String(255)),
        sa.Column('address', sa.Text()),
        sa.Column('social_links', postgresql.JSON(), default={}),
        sa.Column('meta_title', sa.String(255)),
        sa.Column('meta_description', sa.Text()),
        *_timestamps(),
    )

    # Create events, restaurants and offers tables
    op.create_table(
        'events',
        _id(),
        _business_unit_id(),
        sa.Column('title', sa.String(255), nullable=False),
        sa.Column('slug', sa.String(255), nullable=False),
        sa.Column('description', sa.Text(), nullable=False),
        sa.Column('short_desc', sa.String(500)),
        sa.Column('type', sa.String(50), nullable=False),
        sa.Column('status', event_status, default='PLANNING'),
        sa.Column('category', postgresql.JSON(), default=[]),
        sa.Column('tags', postgresql.JSON(), default=[]),
        sa.Column('start_date', sa.DateTime(), nullable=False),
        sa.Column('end_date', sa.DateTime(), nullable=False),
        sa.Column('start_time', sa.String(10)),
        sa.Column('end_time', sa.String(10)),
        sa.Column('timezone', sa.String(50), default='Asia/Manila'),
        sa.Column('is_multi_day', sa.Boolean(), default=False),
        sa.Column('venue', sa.String(255), nullable=False),
        sa.Column('venue_details', sa.Text()),
        sa.Column('venue_capacity', sa.Integer()),
        sa.Column('is_free', sa.Boolean(), default=True),
        sa.Column('ticket_price', sa.Numeric(12, 2)),
        sa.Column('currency', sa.String(3), default='PHP'),
        sa.Column('requires_booking', sa.Boolean(), default=False),
        sa.Column('max_attendees', sa.Integer()),
        sa.Column('current_attendees', sa.Integer(), default=0),
        sa.Column('featured_image', sa.String(500)),
        sa.Column('images', postgresql.JSON(), default=[]),
        sa.Column('highlights', postgresql.JSON(), default=[]),
        sa.Column('host_name', sa.String(255)),
        sa.Column('contact_info', sa.String(255)),
        sa.Column('is_published', sa.Boolean(), default=False),
        sa.Column('is_featured', sa.Boolean(), default=False),
        sa.Column('is_pinned', sa.Boolean(), default=False),
        sa.Column('sort_order', sa.Integer(), default=0),
        sa.Column('view_count', sa.Integer(), default=0),
        *_timestamps(),
        sa.UniqueConstraint('business_unit_id', 'slug', name='uq_events_business_unit_slug'),
    )

    op.create_table(
        'restaurants',
        _id(),
        _business_unit_id(),
        sa.Column('name', sa.String(255), nullable=False),
        sa.Column('slug', sa.String(255), nullable=False),
        sa.Column('description', sa.Text(), nullable=False),
        sa.Column('short_desc', sa.String(500)),
        sa.Column('type', sa.String(50), nullable=False),
        sa.Column('cuisine', postgresql.JSON(), default=[]),
        sa.Column('location', sa.String(255)),
        sa.Column('phone', sa.String(50)),
        sa.Column('email', sa.String(255)),
        sa.Column('operating_hours', postgresql.JSON(), default={}),
        sa.Column('features', postgresql.JSON(), default=[]),
        sa.Column('price_range', sa.String(10)),
        sa.Column('accepts_reservations', sa.Boolean(), default=True),
        sa.Column('featured_image', sa.String(500)),
        sa.Column('images', postgresql.JSON(), default=[]),
        sa.Column('is_active', sa.Boolean(), default=True),
        sa.Column('is_published', sa.Boolean(), default=False),
        sa.Column('is_featured', sa.Boolean(), default=False),
        sa.Column('sort_order', sa.Integer(), default=0),
        *_timestamps(),
        sa.UniqueConstraint('business_unit_id', 'slug', name='uq_restaurants_business_unit_slug'),
    )

    op.create_table(
        'special_offers',
        _id(),
        _business_unit_id(),
        sa.Column('title', sa.String(255), nullable=False),
        sa.Column('slug', sa.String(255), nullable=False),
        sa.Column('subtitle', sa.String(500)),
        sa.Column('description', sa.Text(), nullable=False),
        sa.Column('short_desc', sa.String(500)),
        sa.Column('type', sa.String(50), nullable=False),
        sa.Column('status', offer_status, default='DRAFT'),
        sa.Column('offer_price', sa.Numeric(12, 2), nullable=False),
        sa.Column('original_price', sa.Numeric(12, 2)),
        sa.Column('currency', sa.String(3), default='PHP'),
        sa.Column('valid_from', sa.DateTime(), nullable=False),
        sa.Column('valid_to', sa.DateTime(), nullable=False),
        sa.Column('booking_deadline', sa.DateTime()),
        sa.Column('min_nights', sa.Integer(), default=1),
        sa.Column('max_nights', sa.Integer()),
        sa.Column('inclusions', postgresql.JSON(), default=[]),
        sa.Column('exclusions', postgresql.JSON(), default=[]),
        sa.Column('terms_conditions', sa.Text()),
        sa.Column('featured_image', sa.String(500)),
        sa.Column('images', postgresql.JSON(), default=[]),
        sa.Column('promo_code', sa.String(50)),
        sa.Column('requires_code', sa.Boolean(), default=False),
        sa.Column('is_published', sa.Boolean(), default=False),
        sa.Column('is_featured', sa.Boolean(), default=False),
        sa.Column('is_pinned', sa.Boolean(), default=False),
        sa.Column('sort_order', sa.Integer(), default=0),
        *_timestamps(),
        sa.UniqueConstraint('business_unit_id', 'slug', name='uq_special_offers_business_unit_slug'),
    )

    op.create_table(
        'special_offer_room_types',
        sa.Column('offer_id', postgresql.UUID(as_uuid=True), sa.ForeignKey('special_offers.id'), primary_key=True),
        sa.Column('room_type_id', postgresql.UUID(as_uuid=True), sa.ForeignKey('room_types.id'), primary_key=True),
    )

    # Create public submission tables
    op.create_table(
        'contact_forms',
        _id(),
        _business_unit_id(),
        sa.Column('name', sa.String(255), nullable=False),
        sa.Column('email', sa.String(255), nullable=False),
        sa.Column('phone', sa.String(50)),
        sa.Column('subject', sa.String(255)),
        sa.Column('message', sa.Text(), nullable=False),
        sa.Column('status', sa.String(50), default='NEW'),
        sa.Column('created_at', sa.DateTime(), default=sa.func.now()),
    )

    op.create_table(
        'newsletters',
        _id(),
        _business_unit_id(),
        sa.Column('email', sa.String(255), nullable=False),
        sa.Column('first_name', sa.String(100)),
        sa.Column('is_active', sa.Boolean(), default=True),
        sa.Column('created_at', sa.DateTime(), default=sa.func.now()),
        sa.UniqueConstraint('business_unit_id', 'email', name='uq_newsletters_business_unit_email'),
    )

    # Create audit_logs table
    op.create_table(
        'audit_logs',
        _id(),
        _business_unit_id(nullable=True),
        sa.Column('actor_id', postgresql.UUID(as_uuid=True)),
        sa.Column('actor_type', sa.String(50)),
        sa.Column('actor_name', sa.String(255)),
        sa.Column('action', sa.String(100), nullable=False),
        sa.Column('resource_type', sa.String(50)),
        sa.Column('resource_id', postgresql.UUID(as_uuid=True)),
        sa.Column('data_json', postgresql.JSON()),
        sa.Column('ip_address', sa.String(50)),
        sa.Column('user_agent', sa.Text()),
        sa.Column('created_at', sa.DateTime(), default=sa.func.now()),
    )

    # Create indexes
    op.create_index('ix_user_business_unit_roles_business_unit_id', 'user_business_unit_roles', ['business_unit_id'])
    op.create_index('ix_room_types_business_unit_id', 'room_types', ['business_unit_id'])
    op.create_index('ix_rooms_business_unit_id', 'rooms', ['business_unit_id'])
    op.create_index('ix_reservations_business_unit_id', 'reservations', ['business_unit_id'])
    op.create_index('ix_reservations_check_in_date', 'reservations', ['check_in_date'])
    op.create_index('ix_reservations_check_out_date', 'reservations', ['check_out_date'])
    op.create_index('ix_hero_slides_business_unit_id', 'hero_slides', ['business_unit_id'])
    op.create_index('ix_media_items_business_unit_id', 'media_items', ['business_unit_id'])
    op.create_index('ix_content_items_section', 'content_items', ['business_unit_id', 'section'])
    op.create_index('ix_special_offers_valid_to', 'special_offers', ['valid_to'])
    op.create_index('ix_events_end_date', 'events', ['end_date'])
    op.create_index('ix_audit_logs_business_unit_id', 'audit_logs', ['business_unit_id'])


def downgrade() -> None:
    op.drop_table('audit_logs')
    op.drop_table('newsletters')
    op.drop_table('contact_forms')
    op.drop_table('special_offer_room_types')
    op.drop_table('special_offers')
    op.drop_table('restaurants')
    op.drop_table('events')
    op.drop_table('website_configurations')
    op.drop_table('content_items')
    op.drop_table('pages')
    op.drop_table('media_items')
    op.drop_table('faqs')
    op.drop_table('testimonials')
    op.drop_table('hero_slides')
    op.drop_table('reservation_rooms')
    op.drop_table('reservations')
    op.drop_table('guests')
    op.drop_table('rooms')
    op.drop_table('room_type_amenities')
    op.drop_table('amenities')
    op.drop_table('room_types')
    op.drop_table('user_business_unit_roles')
    op.drop_table('role_permissions')
    op.drop_table('permissions')
    op.drop_table('roles')
    op.drop_table('users')
    op.drop_table('business_units')

    bind = op.get_bind()
    for enum_type in reversed(ENUMS):
        enum_type.drop(bind, checkfirst=True)

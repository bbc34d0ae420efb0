"""User, role and permission models for dashboard authorization"""

import uuid
from datetime import datetime
from sqlalchemy import Column, String, Boolean, DateTime, ForeignKey, Enum, Text, UniqueConstraint
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import relationship
import enum

from app.database import Base


class UserStatus(str, enum.Enum):
    """Account lifecycle states"""
    ACTIVE = "ACTIVE"
    INACTIVE = "INACTIVE"
    SUSPENDED = "SUSPENDED"
    PENDING_ACTIVATION = "PENDING_ACTIVATION"


class RoleName:
    """Names of the built-in roles"""
    SUPER_ADMIN = "SUPER_ADMIN"
    HOTEL_MANAGER = "HOTEL_MANAGER"
    FRONT_DESK = "FRONT_DESK"


class PermissionName:
    """Names of the built-in permissions"""
    MANAGE_CONTENT = "manage:content"
    MANAGE_USERS = "manage:users"
    VIEW_REPORTS = "view:reports"


# Roles allowed to administer users of a business unit
ADMIN_ROLE_NAMES = {RoleName.SUPER_ADMIN, RoleName.HOTEL_MANAGER}


class Role(Base):
    """Named bundle of permissions"""
    __tablename__ = "roles"

    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    name = Column(String(100), unique=True, nullable=False)
    display_name = Column(String(255), nullable=False)
    description = Column(Text)
    is_system = Column(Boolean, default=False)
    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    # Relationships
    permissions = relationship("RolePermission", back_populates="role", cascade="all, delete-orphan")

    @property
    def permission_names(self) -> set:
        return {rp.permission.name for rp in self.permissions}


class Permission(Base):
    """Named capability, e.g. manage:content"""
    __tablename__ = "permissions"

    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    name = Column(String(100), unique=True, nullable=False)
    module = Column(String(100))
    description = Column(Text)
    created_at = Column(DateTime, default=datetime.utcnow)


class RolePermission(Base):
    """Role to permission join"""
    __tablename__ = "role_permissions"

    role_id = Column(UUID(as_uuid=True), ForeignKey("roles.id"), primary_key=True)
    permission_id = Column(UUID(as_uuid=True), ForeignKey("permissions.id"), primary_key=True)

    # Relationships
    role = relationship("Role", back_populates="permissions")
    permission = relationship("Permission")


class User(Base):
    """Dashboard users"""
    __tablename__ = "users"

    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)

    # Authentication
    email = Column(String(255), unique=True, nullable=False)
    username = Column(String(100), unique=True, nullable=False)
    hashed_password = Column(String(255), nullable=False)

    # Profile
    first_name = Column(String(100), nullable=False)
    last_name = Column(String(100), nullable=False)
    phone = Column(String(50))
    avatar = Column(String(500))

    # Status
    status = Column(Enum(UserStatus), default=UserStatus.PENDING_ACTIVATION)
    email_verified_at = Column(DateTime)

    # Tokens
    refresh_token = Column(String(500))

    # Timestamps
    last_login_at = Column(DateTime)
    created_by = Column(UUID(as_uuid=True))
    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    # Relationships
    assignments = relationship(
        "UserBusinessUnitRole",
        back_populates="user",
        cascade="all, delete-orphan",
        foreign_keys="UserBusinessUnitRole.user_id",
    )

    @property
    def is_active(self) -> bool:
        return self.status == UserStatus.ACTIVE

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"

    def assignment_for(self, business_unit_id):
        """Return the user's assignment to a business unit, if any"""
        for assignment in self.assignments:
            if assignment.business_unit_id == business_unit_id:
                return assignment
        return None

    def has_role(self, role_name: str) -> bool:
        """Check whether any assignment carries the given role"""
        return any(a.role.name == role_name for a in self.assignments)


class UserBusinessUnitRole(Base):
    """Assignment of a user to a business unit with a role"""
    __tablename__ = "user_business_unit_roles"
    __table_args__ = (
        UniqueConstraint("user_id", "business_unit_id", name="uq_user_business_unit"),
    )

    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    user_id = Column(UUID(as_uuid=True), ForeignKey("users.id"), nullable=False)
    business_unit_id = Column(UUID(as_uuid=True), ForeignKey("business_units.id"), nullable=False)
    role_id = Column(UUID(as_uuid=True), ForeignKey("roles.id"), nullable=False)
    assigned_by = Column(UUID(as_uuid=True), ForeignKey("users.id"))
    assigned_at = Column(DateTime, default=datetime.utcnow)

    # Relationships
    user = relationship("User", back_populates="assignments", foreign_keys=[user_id])
    business_unit = relationship("BusinessUnit", back_populates="assignments")
    role = relationship("Role")

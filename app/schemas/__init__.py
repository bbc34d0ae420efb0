"""Pydantic schemas for request/response validation"""

from app.schemas.auth import Token, TokenPayload, RefreshRequest, MessageResponse
from app.schemas.business_unit import (
    BusinessUnitSummary,
    BusinessUnitCreate,
    BusinessUnitUpdate,
    BusinessUnitResponse,
    RoleSummary,
    RoleResponse,
)
from app.schemas.user import (
    AssignmentCreate,
    AssignmentResponse,
    UserCreate,
    UserUpdate,
    UserStatusUpdate,
    UserResponse,
)
from app.schemas.dashboard import DashboardResponse
from app.schemas.public import HomepageResponse, PropertyHomepageResponse, QuoteRequest, QuoteResponse

__all__ = [
    "Token",
    "TokenPayload",
    "RefreshRequest",
    "MessageResponse",
    "BusinessUnitSummary",
    "BusinessUnitCreate",
    "BusinessUnitUpdate",
    "BusinessUnitResponse",
    "RoleSummary",
    "RoleResponse",
    "AssignmentCreate",
    "AssignmentResponse",
    "UserCreate",
    "UserUpdate",
    "UserStatusUpdate",
    "UserResponse",
    "DashboardResponse",
    "HomepageResponse",
    "PropertyHomepageResponse",
    "QuoteRequest",
    "QuoteResponse",
]

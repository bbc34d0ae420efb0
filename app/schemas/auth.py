"""Authentication schemas"""

from datetime import datetime
from typing import Optional
from pydantic import BaseModel


class Token(BaseModel):
    """JWT token response"""
    access_token: str
    refresh_token: str
    token_type: str = "bearer"
    expires_in: int


class TokenPayload(BaseModel):
    """JWT token payload"""
    sub: str  # User ID
    type: str
    jti: str
    exp: datetime


class RefreshRequest(BaseModel):
    """Token refresh request"""
    refresh_token: str


class MessageResponse(BaseModel):
    """Plain acknowledgement"""
    message: str
    detail: Optional[str] = None

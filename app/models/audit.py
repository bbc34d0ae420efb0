"""Audit log model"""

import uuid
from datetime import datetime
from sqlalchemy import Column, String, DateTime, ForeignKey, JSON, Text
from sqlalchemy.dialects.postgresql import UUID

from app.database import Base


class AuditLog(Base):
    """Audit trail for dashboard writes"""
    __tablename__ = "audit_logs"

    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    business_unit_id = Column(UUID(as_uuid=True), ForeignKey("business_units.id"))

    # Actor information
    actor_id = Column(UUID(as_uuid=True))  # User ID or null for system jobs
    actor_type = Column(String(50))  # user, system
    actor_name = Column(String(255))

    # Action details
    action = Column(String(100), nullable=False)  # create, update, delete, expire
    resource_type = Column(String(50))  # hero_slide, event, page, user, ...
    resource_id = Column(UUID(as_uuid=True))

    # Change data
    data_json = Column(JSON)

    # Request context
    ip_address = Column(String(50))
    user_agent = Column(Text)

    created_at = Column(DateTime, default=datetime.utcnow)

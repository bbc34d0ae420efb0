"""Audit trail helper for dashboard writes"""

from typing import Any, Mapping, Optional
from uuid import UUID

import structlog
from fastapi import Request
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.audit import AuditLog
from app.models.user import User

logger = structlog.get_logger()

SENSITIVE_KEYS = {"password", "hashed_password", "refresh_token"}


def _sanitize(obj: Any) -> Any:
    if isinstance(obj, dict):
        return {
            k: "<redacted>" if k in SENSITIVE_KEYS else _sanitize(v)
            for k, v in obj.items()
        }
    if isinstance(obj, (list, tuple)):
        return [_sanitize(v) for v in obj]
    if isinstance(obj, UUID):
        return str(obj)
    if hasattr(obj, "isoformat"):
        return obj.isoformat()
    if hasattr(obj, "value"):
        return obj.value
    return obj


def record_audit(
    db: AsyncSession,
    *,
    business_unit_id: Optional[UUID],
    actor: Optional[User],
    action: str,
    resource_type: str,
    resource_id: Optional[UUID] = None,
    data: Optional[Mapping[str, Any]] = None,
    request: Optional[Request] = None,
) -> AuditLog:
    """Stage an audit row in the caller's transaction"""
    ip_address = None
    user_agent = None
    if request is not None:
        ip_address = request.client.host if request.client else None
        user_agent = request.headers.get("user-agent")

    entry = AuditLog(
        business_unit_id=business_unit_id,
        actor_id=actor.id if actor else None,
        actor_type="user" if actor else "system",
        actor_name=actor.username if actor else None,
        action=action,
        resource_type=resource_type,
        resource_id=resource_id,
        data_json=_sanitize(dict(data)) if data is not None else None,
        ip_address=ip_address,
        user_agent=user_agent,
    )
    db.add(entry)

    logger.info(
        "Audit event",
        action=action,
        resource_type=resource_type,
        resource_id=str(resource_id) if resource_id else None,
        business_unit_id=str(business_unit_id) if business_unit_id else None,
        actor_id=str(actor.id) if actor else None,
    )
    return entry

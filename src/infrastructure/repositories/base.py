"""Helpers shared by the SQLAlchemy repositories."""

from datetime import datetime, timezone

import structlog
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from src.domain.entities import AuditInfo
from src.domain.exceptions import ResourceAlreadyExistsException

logger = structlog.get_logger(__name__)


def as_utc(value: datetime | None) -> datetime | None:
    """Attach UTC to naive timestamps read back from the database."""
    if value is not None and value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def audit_from_model(model) -> AuditInfo:
    return AuditInfo(
        created_at=as_utc(model.created_at),
        created_by=model.created_by,
        updated_at=as_utc(model.updated_at),
        updated_by=model.updated_by,
    )


def apply_audit(model, audit: AuditInfo) -> None:
    model.created_at = audit.created_at
    model.created_by = audit.created_by
    model.updated_at = audit.updated_at
    model.updated_by = audit.updated_by


NATURAL_KEY_COLUMN = "mobile_number"


def is_natural_key_violation(exc: IntegrityError) -> bool:
    """True when the failing constraint is the unique mobile number index."""
    return NATURAL_KEY_COLUMN in str(exc.orig)


async def flush_or_conflict(session: AsyncSession, resource: str, mobile_number: str) -> None:
    """
    Flush pending changes, reporting a natural-key collision as a conflict.

    The unique index on the natural key is what decides between two
    creates racing on the same mobile number. Any other integrity
    failure is a storage error and propagates unchanged.
    """
    try:
        await session.flush()
    except IntegrityError as exc:
        if not is_natural_key_violation(exc):
            logger.error("integrity_error", resource=resource, error=str(exc.orig))
            raise
        logger.warning(
            "unique_key_conflict",
            resource=resource,
            mobile_number=mobile_number,
        )
        raise ResourceAlreadyExistsException(
            resource, "mobileNumber", mobile_number
        ) from exc

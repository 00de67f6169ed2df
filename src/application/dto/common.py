"""Fields shared by every transfer representation."""

from dataclasses import dataclass
from datetime import datetime

from src.domain.entities import AuditInfo


@dataclass(frozen=True)
class AuditDTO:
    """Read-only audit fields exposed on responses."""

    created_at: datetime | None
    created_by: str | None
    updated_at: datetime | None
    updated_by: str | None

    @classmethod
    def from_entity(cls, audit: AuditInfo) -> "AuditDTO":
        return cls(
            created_at=audit.created_at,
            created_by=audit.created_by,
            updated_at=audit.updated_at,
            updated_by=audit.updated_by,
        )

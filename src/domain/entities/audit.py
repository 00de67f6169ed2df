"""Audit metadata carried by every persisted record."""

from dataclasses import dataclass
from datetime import datetime


@dataclass
class AuditInfo:
    """Who created and last changed a record, and when."""

    created_at: datetime | None = None
    created_by: str | None = None
    updated_at: datetime | None = None
    updated_by: str | None = None

    def stamp_created(self, actor: str, now: datetime) -> None:
        self.created_at = now
        self.created_by = actor
        self.updated_at = now
        self.updated_by = actor

    def stamp_updated(self, actor: str, now: datetime) -> None:
        self.updated_at = now
        self.updated_by = actor

"""Audit metadata carried by every persisted record."""

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Optional


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class AuditInfo:
    """Who created/last updated a record, and when."""

    created_at: Optional[datetime] = None
    created_by: Optional[str] = None
    updated_at: Optional[datetime] = None
    updated_by: Optional[str] = None

    def mark_created(self, auditor: str) -> None:
        self.created_at = utcnow()
        self.created_by = auditor

    def mark_updated(self, auditor: str) -> None:
        self.updated_at = utcnow()
        self.updated_by = auditor

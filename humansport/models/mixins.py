"""Column groups shared by several models."""

from __future__ import annotations

from datetime import datetime, timezone

from sqlalchemy import DateTime, String
from sqlalchemy.orm import Mapped, mapped_column

STATUS_ACTIVE = "active"
STATUS_INACTIVE = "inactive"


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class TimestampMixin:
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=utcnow, nullable=False
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=utcnow, onupdate=utcnow, nullable=False
    )


class SoftDeleteMixin:
    """Status column whose only transition is active -> inactive."""

    status: Mapped[str] = mapped_column(String(30), nullable=False, default=STATUS_ACTIVE)

    @property
    def is_active(self) -> bool:
        return self.status == STATUS_ACTIVE

    def deactivate(self) -> None:
        self.status = STATUS_INACTIVE

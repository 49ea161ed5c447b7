"""Membership catalog entries."""

from __future__ import annotations

from sqlalchemy import Float, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from humansport.core.database import Base
from humansport.models.mixins import SoftDeleteMixin, TimestampMixin


class Membership(SoftDeleteMixin, TimestampMixin, Base):
    """Represents a purchasable membership plan."""

    __tablename__ = "memberships"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, index=True)
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False)
    price: Mapped[float] = mapped_column(Float, nullable=False)
    duration_days: Mapped[int] = mapped_column(Integer, nullable=False)

    def __repr__(self) -> str:  # pragma: no cover - debugging helper
        return (
            "Membership(id={id}, name={name!r}, duration_days={days})"
        ).format(id=self.id, name=self.name, days=self.duration_days)

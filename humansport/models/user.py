from __future__ import annotations

from datetime import date
from enum import Enum
from typing import Optional

from sqlalchemy import Date, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from humansport.core.database import Base
from humansport.models.mixins import SoftDeleteMixin, TimestampMixin

DEFAULT_PHOTO = "default.jpg"


class Role(str, Enum):
    ADMIN = "admin"
    USER = "user"
    INSTRUCTOR = "instructor"
    MEMBER = "member"
    RECEPCIONIST = "recepcionist"


class User(SoftDeleteMixin, TimestampMixin, Base):
    __tablename__ = "users"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, index=True)
    first_name: Mapped[str] = mapped_column(String(200), nullable=False)
    last_name: Mapped[str] = mapped_column(String(200), nullable=False)
    email: Mapped[str] = mapped_column(String(255), unique=True, nullable=False, index=True)
    birthdate: Mapped[Optional[date]] = mapped_column(Date, nullable=True)
    phone: Mapped[str] = mapped_column(String(20), nullable=False)
    role: Mapped[str] = mapped_column(String(30), nullable=False, default=Role.USER.value)
    password_hash: Mapped[str] = mapped_column(Text, nullable=False)
    photo: Mapped[str] = mapped_column(Text, nullable=False, default=DEFAULT_PHOTO)

    def __repr__(self) -> str:  # pragma: no cover - debugging helper
        return f"User(id={self.id}, email={self.email!r}, role={self.role!r})"

from __future__ import annotations

from datetime import date
from typing import TYPE_CHECKING, Optional

from sqlalchemy import Date, ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from humansport.core.database import Base
from humansport.models.mixins import TimestampMixin

if TYPE_CHECKING:  # pragma: no cover
    from humansport.models.course import Course


class Instructor(TimestampMixin, Base):
    __tablename__ = "instructors"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, index=True)
    name: Mapped[str] = mapped_column(String(200), nullable=False)
    speciality: Mapped[str] = mapped_column(String(200), nullable=False)
    birthdate: Mapped[date] = mapped_column(Date, nullable=False)
    # Login account of the instructor, when they have one.
    user_id: Mapped[Optional[int]] = mapped_column(
        ForeignKey("users.id"), nullable=True, unique=True, index=True
    )

    courses: Mapped[list["Course"]] = relationship(back_populates="instructor")

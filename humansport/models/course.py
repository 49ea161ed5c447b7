from __future__ import annotations

from typing import TYPE_CHECKING, Any

from sqlalchemy import JSON, ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from humansport.core.database import Base
from humansport.models.mixins import SoftDeleteMixin, TimestampMixin

if TYPE_CHECKING:  # pragma: no cover
    from humansport.models.instructor import Instructor


class Course(SoftDeleteMixin, TimestampMixin, Base):
    __tablename__ = "courses"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, index=True)
    name: Mapped[str] = mapped_column(String(200), nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False)
    capacity: Mapped[int] = mapped_column(Integer, nullable=False)
    # [{"day": ..., "time": ..., "startDate": ..., "endDate": ...}]
    class_days: Mapped[list[dict[str, Any]]] = mapped_column(JSON, nullable=False, default=list)
    instructor_id: Mapped[int] = mapped_column(
        ForeignKey("instructors.id"), nullable=False, index=True
    )

    instructor: Mapped["Instructor"] = relationship(back_populates="courses")

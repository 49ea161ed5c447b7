from __future__ import annotations

from sqlalchemy import ForeignKey, Integer, Text
from sqlalchemy.orm import Mapped, mapped_column

from humansport.core.database import Base
from humansport.models.mixins import SoftDeleteMixin, TimestampMixin


class Booking(SoftDeleteMixin, TimestampMixin, Base):
    __tablename__ = "bookings"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, index=True)
    user_id: Mapped[int] = mapped_column(ForeignKey("users.id"), nullable=False, index=True)
    course_id: Mapped[int] = mapped_column(ForeignKey("courses.id"), nullable=False, index=True)
    comments: Mapped[str] = mapped_column(Text, nullable=False, default="")

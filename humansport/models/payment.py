from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING

from sqlalchemy import Float, ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from humansport.core.database import Base
from humansport.models.mixins import TimestampMixin

if TYPE_CHECKING:  # pragma: no cover
    from humansport.models.membership import Membership
    from humansport.models.user import User


class PaymentMethod(str, Enum):
    PAYPAL = "paypal"
    CASH = "cash"


class PaymentStatus(str, Enum):
    PENDING = "pending"
    COMPLETED = "completed"
    FAILED = "failed"


class Payment(TimestampMixin, Base):
    __tablename__ = "payments"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, index=True)
    user_id: Mapped[int] = mapped_column(ForeignKey("users.id"), nullable=False, index=True)
    membership_id: Mapped[int] = mapped_column(
        ForeignKey("memberships.id"), nullable=False, index=True
    )
    amount: Mapped[float] = mapped_column(Float, nullable=False)
    method: Mapped[str] = mapped_column(String(30), nullable=False)
    status: Mapped[str] = mapped_column(
        String(30), nullable=False, default=PaymentStatus.PENDING.value
    )

    user: Mapped["User"] = relationship()
    membership: Mapped["Membership"] = relationship()

"""Pydantic models for payment resources."""

from datetime import datetime
from typing import Optional

from pydantic import Field

from humansport.models.payment import PaymentMethod, PaymentStatus
from humansport.schemas.base import CamelModel, ORMResponse
from humansport.schemas.membership import MembershipResponse


class PaymentCreate(CamelModel):
    user_id: int = Field(..., ge=1)
    membership_id: int = Field(..., ge=1)
    amount: float = Field(..., gt=0)
    method: PaymentMethod


class PaymentStatusUpdate(CamelModel):
    status: PaymentStatus


class PaymentResponse(ORMResponse):
    id: int
    user_id: int
    membership_id: int
    amount: float
    method: str
    status: str
    created_at: datetime
    updated_at: datetime


class PaymentUserSummary(ORMResponse):
    id: int
    first_name: str
    last_name: str
    email: str


class PaymentDetailResponse(PaymentResponse):
    """Payment with its payer and purchased plan embedded."""

    user: Optional[PaymentUserSummary] = None
    membership: Optional[MembershipResponse] = None


__all__ = [
    "PaymentCreate",
    "PaymentStatusUpdate",
    "PaymentResponse",
    "PaymentDetailResponse",
    "PaymentUserSummary",
]

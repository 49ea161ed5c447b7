from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import ConfigDict, Field

from humansport.schemas.base import CamelModel
from humansport.schemas.membership import MembershipResponse
from humansport.schemas.payment import PaymentResponse


class MembershipStatusResponse(CamelModel):
    """Derived membership state of a user, as returned by the resolver."""

    model_config = ConfigDict(from_attributes=True)

    active: bool = Field(..., alias="status")
    reason: Optional[str] = None
    remaining_days: Optional[int] = Field(None, alias="remaningDays")
    expiration_date: Optional[datetime] = Field(None, alias="expirationDate")
    membership: Optional[MembershipResponse] = None
    payment: Optional[PaymentResponse] = None

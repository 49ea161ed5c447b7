"""Pydantic schemas for membership resources."""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import Field

from humansport.schemas.base import CamelModel, NonEmptyStr, ORMResponse


class MembershipBase(CamelModel):
    name: NonEmptyStr
    description: NonEmptyStr
    price: float = Field(..., ge=0)
    duration_days: int = Field(..., gt=0)


class MembershipCreate(MembershipBase):
    pass


class MembershipUpdate(CamelModel):
    name: Optional[NonEmptyStr] = None
    description: Optional[NonEmptyStr] = None
    price: Optional[float] = Field(None, ge=0)
    duration_days: Optional[int] = Field(None, gt=0)


class MembershipResponse(MembershipBase, ORMResponse):
    id: int
    status: str
    created_at: datetime
    updated_at: datetime

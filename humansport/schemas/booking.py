from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import Field

from humansport.schemas.base import CamelModel, ORMResponse


class BookingCreate(CamelModel):
    user_id: int = Field(..., ge=1)
    course_id: int = Field(..., ge=1)
    comments: str = ""


class BookingUpdate(CamelModel):
    comments: Optional[str] = None


class BookingResponse(ORMResponse):
    id: int
    user_id: int
    course_id: int
    status: str
    comments: str
    created_at: datetime
    updated_at: datetime

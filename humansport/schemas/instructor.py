from __future__ import annotations

from datetime import date, datetime
from typing import Optional

from pydantic import Field

from humansport.schemas.base import CamelModel, NameStr, ORMResponse


class InstructorBase(CamelModel):
    name: NameStr
    speciality: NameStr
    birthdate: date


class InstructorCreate(InstructorBase):
    user_id: Optional[int] = Field(None, ge=1)


class InstructorUpdate(CamelModel):
    name: Optional[NameStr] = None
    speciality: Optional[NameStr] = None
    birthdate: Optional[date] = None
    user_id: Optional[int] = Field(None, ge=1)


class InstructorResponse(InstructorBase, ORMResponse):
    id: int
    user_id: Optional[int] = None
    created_at: datetime
    updated_at: datetime

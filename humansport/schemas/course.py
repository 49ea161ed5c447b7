from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import Field

from humansport.schemas.base import CamelModel, NonEmptyStr, ORMResponse


class ClassDay(CamelModel):
    day: NonEmptyStr
    time: NonEmptyStr
    start_date: Optional[str] = None
    end_date: Optional[str] = None


class CourseBase(CamelModel):
    name: NonEmptyStr
    description: NonEmptyStr
    capacity: int = Field(..., gt=0)


class CourseCreate(CourseBase):
    instructor_id: int = Field(..., ge=1)
    class_days: list[ClassDay] = Field(default_factory=list)


class CourseReplace(CourseBase):
    """Full replacement of the descriptive fields of a course."""


class CourseUpdate(CamelModel):
    name: Optional[NonEmptyStr] = None
    description: Optional[NonEmptyStr] = None
    capacity: Optional[int] = Field(None, gt=0)
    instructor_id: Optional[int] = Field(None, ge=1)
    class_days: Optional[list[ClassDay]] = None


class CourseResponse(CourseBase, ORMResponse):
    id: int
    status: str
    instructor_id: int
    class_days: list[ClassDay] = Field(default_factory=list)
    created_at: datetime
    updated_at: datetime

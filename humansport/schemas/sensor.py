from __future__ import annotations

from datetime import datetime
from typing import Optional

from humansport.schemas.base import CamelModel, NameStr, NonEmptyStr, ORMResponse


class SensorValueResponse(CamelModel):
    value: str


class SensorMessageResponse(CamelModel):
    message: str


class SensorSnapshotRequest(CamelModel):
    name: NameStr = "proximity"
    timestamp: Optional[datetime] = None


class SensorEventCreate(CamelModel):
    name: NameStr
    timestamp: Optional[datetime] = None
    reading: NonEmptyStr


class SensorEventUpdate(CamelModel):
    timestamp: Optional[datetime] = None
    reading: Optional[NonEmptyStr] = None


class SensorEventResponse(ORMResponse):
    id: int
    name: str
    timestamp: datetime
    reading: str

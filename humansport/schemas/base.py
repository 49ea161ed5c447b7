"""Shared pydantic configuration: snake_case attributes, camelCase JSON."""

from __future__ import annotations

from typing import Annotated

from pydantic import BaseModel, ConfigDict, StringConstraints
from pydantic.alias_generators import to_camel

NonEmptyStr = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]
NameStr = Annotated[
    str,
    StringConstraints(strip_whitespace=True, min_length=1, max_length=200),
]
PhoneStr = Annotated[
    str,
    StringConstraints(strip_whitespace=True, min_length=5, max_length=20),
]


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ORMResponse(CamelModel):
    model_config = ConfigDict(from_attributes=True)

"""Structured validation results, independent of the persistence schema.

Request models reject bad input through pydantic; the helpers here turn
those failures (and the few checks pydantic cannot express) into a flat list
of :class:`FieldError` entries that the error handlers render as a 400.
"""

from __future__ import annotations

import re
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from typing import Any, Generic, Optional, TypeVar

from pydantic import BaseModel, ValidationError

ModelT = TypeVar("ModelT", bound=BaseModel)

PASSWORD_MIN_LENGTH = 5

_IGNORED_LOCATIONS = {"body", "query", "path", "form", "header"}


@dataclass(frozen=True)
class FieldError:
    field: str
    message: str

    def as_dict(self) -> dict[str, str]:
        return {"field": self.field, "message": self.message}


class FieldValidationError(Exception):
    """Raised when a payload fails validation outside of FastAPI's parsing."""

    def __init__(self, errors: list[FieldError]):
        super().__init__("; ".join(f"{e.field}: {e.message}" for e in errors))
        self.errors = errors


@dataclass
class ValidationResult(Generic[ModelT]):
    value: Optional[ModelT] = None
    errors: list[FieldError] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.errors

    def unwrap(self) -> ModelT:
        if self.errors or self.value is None:
            raise FieldValidationError(self.errors)
        return self.value


def field_errors_from(errors: Iterable[Mapping[str, Any]]) -> list[FieldError]:
    """Convert pydantic/FastAPI error dictionaries into field errors."""

    result: list[FieldError] = []
    for error in errors:
        location = [str(loc) for loc in error.get("loc", ()) if loc not in _IGNORED_LOCATIONS]
        message = error.get("msg", "Invalid input")
        if message.startswith("Value error, "):
            message = message[len("Value error, "):]
        result.append(FieldError(field=".".join(location) or "__root__", message=message))
    return result


def validate_payload(schema: type[ModelT], data: Mapping[str, Any]) -> ValidationResult[ModelT]:
    try:
        return ValidationResult(value=schema.model_validate(dict(data)))
    except ValidationError as exc:
        return ValidationResult(errors=field_errors_from(exc.errors()))


def password_problems(password: str) -> list[str]:
    """Return what keeps ``password`` from being a strong password."""

    problems = []
    if len(password) < PASSWORD_MIN_LENGTH:
        problems.append(f"at least {PASSWORD_MIN_LENGTH} characters")
    if not re.search(r"[a-z]", password):
        problems.append("one lowercase letter")
    if not re.search(r"[A-Z]", password):
        problems.append("one uppercase letter")
    if not re.search(r"\d", password):
        problems.append("one number")
    if not re.search(r"[^A-Za-z0-9]", password):
        problems.append("one symbol")
    return problems


def ensure_strong_password(password: str) -> str:
    problems = password_problems(password)
    if problems:
        raise ValueError("Password must contain " + ", ".join(problems))
    return password


__all__ = [
    "FieldError",
    "FieldValidationError",
    "ValidationResult",
    "field_errors_from",
    "validate_payload",
    "password_problems",
    "ensure_strong_password",
]

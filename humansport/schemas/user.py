from __future__ import annotations

from datetime import date, datetime
from typing import Annotated, Optional

from pydantic import EmailStr, StringConstraints, field_validator

from humansport.core.validation import ensure_strong_password
from humansport.models.user import Role
from humansport.schemas.base import CamelModel, NameStr, ORMResponse, PhoneStr
from humansport.schemas.membership_status import MembershipStatusResponse

PasswordStr = Annotated[str, StringConstraints(min_length=1, max_length=72)]


class UserCreate(CamelModel):
    first_name: NameStr
    last_name: NameStr
    email: EmailStr
    birthdate: date
    phone: PhoneStr
    role: Role = Role.USER
    password: PasswordStr

    @field_validator("password")
    @classmethod
    def validate_password(cls, v: str) -> str:
        return ensure_strong_password(v)


class UserUpdateByEmail(CamelModel):
    email: EmailStr
    first_name: Optional[NameStr] = None
    last_name: Optional[NameStr] = None
    birthdate: Optional[date] = None
    phone: Optional[PhoneStr] = None
    role: Optional[Role] = None
    photo: Optional[str] = None


class PasswordChangeRequest(CamelModel):
    email: EmailStr
    password: PasswordStr
    role: Optional[Role] = None

    @field_validator("password")
    @classmethod
    def validate_password(cls, v: str) -> str:
        return ensure_strong_password(v)


class LoginRequest(CamelModel):
    email: EmailStr
    password: PasswordStr


class UserResponse(ORMResponse):
    id: int
    first_name: str
    last_name: str
    email: str
    birthdate: Optional[date] = None
    phone: str
    role: str
    photo: str
    status: str
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class UserWithMembership(UserResponse):
    membership: Optional[MembershipStatusResponse] = None


class LoginResponse(UserResponse):
    message: str = "Welcome"
    jwtoken: str

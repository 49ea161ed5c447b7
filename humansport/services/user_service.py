from __future__ import annotations

import logging
from typing import Optional, Tuple

from fastapi import HTTPException, UploadFile, status

from humansport.core.security import create_access_token, hash_password, verify_password
from humansport.models import DEFAULT_PHOTO, Role, User
from humansport.repository import lifecycle, user_repository
from humansport.schemas.membership_status import MembershipStatusResponse
from humansport.schemas.user import (
    LoginRequest,
    PasswordChangeRequest,
    UserCreate,
    UserUpdateByEmail,
    UserWithMembership,
)
from humansport.services.base import BaseService, not_found
from humansport.services.membership_status_service import MembershipStatusService
from humansport.services.storage_service import StorageService

logger = logging.getLogger(__name__)

INVALID_LOGIN_DETAIL = "Invalid email or password"

# Only these callers may register accounts with a role other than "user".
STAFF_ROLES = frozenset({Role.ADMIN.value, Role.RECEPCIONIST.value})


class UserService(BaseService):
    def __init__(self, db):
        super().__init__(db)
        self.membership_status = MembershipStatusService(db)

    def _get_by_email(self, email: str) -> User:
        user = user_repository.get_user_by_email(self.db, email)
        if user is None:
            raise not_found("User not found")
        return user

    def register_user(
        self,
        user_in: UserCreate,
        photo: Optional[UploadFile] = None,
        storage: Optional[StorageService] = None,
        *,
        caller_role: Optional[str] = None,
    ) -> User:
        if user_repository.get_user_by_email(self.db, user_in.email):
            raise HTTPException(
                status_code=status.HTTP_409_CONFLICT,
                detail="Email already registered",
            )

        role = user_in.role
        if caller_role not in STAFF_ROLES and role != Role.USER:
            logger.info("Ignoring role %s requested without staff credentials", role.value)
            role = Role.USER

        photo_url = DEFAULT_PHOTO
        if photo is not None and photo.filename and storage is not None:
            photo_url = storage.upload_profile_photo(photo)

        user = User(
            first_name=user_in.first_name,
            last_name=user_in.last_name,
            email=user_in.email,
            birthdate=user_in.birthdate,
            phone=user_in.phone,
            role=role.value,
            password_hash=hash_password(user_in.password),
            photo=photo_url,
            status="active",
        )
        user_repository.create_user(self.db, user)
        user = self._commit(
            user, "Failed to create user", conflict_message="Email already registered"
        )
        logger.info("Registered user %s with role %s", user.id, user.role)
        return user

    def login_user(self, login_data: LoginRequest) -> Tuple[str, User]:
        user = user_repository.get_user_by_email(self.db, login_data.email)
        if (
            user is None
            or not user.is_active
            or not verify_password(login_data.password, user.password_hash)
        ):
            logger.info("Failed login attempt for %s", login_data.email)
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail=INVALID_LOGIN_DETAIL,
            )

        token = create_access_token(user_id=user.id, email=user.email, role=user.role)
        return token, user

    def list_users(
        self,
        *,
        role: Optional[str] = None,
        status_filter: Optional[str] = None,
    ) -> list[UserWithMembership]:
        users = user_repository.list_users(self.db, role=role, status_filter=status_filter)
        return self.membership_status.annotate(users)

    def get_user(self, user_id: int) -> User:
        user = user_repository.get_user_by_id(self.db, user_id)
        if user is None:
            raise not_found("User not found")
        return user

    def get_user_with_membership(self, user_id: int) -> UserWithMembership:
        user = self.get_user(user_id)
        return self.membership_status.annotate([user])[0]

    def get_membership_status(self, user_id: int) -> MembershipStatusResponse:
        return self.membership_status.resolve(user_id)

    def change_password(self, payload: PasswordChangeRequest) -> User:
        user = self._get_by_email(payload.email)
        user.password_hash = hash_password(payload.password)
        if payload.role is not None:
            user.role = payload.role.value
        return self._commit(user, "Failed to update password")

    def update_user_by_email(self, payload: UserUpdateByEmail) -> User:
        user = self._get_by_email(payload.email)
        update_data = payload.model_dump(exclude_unset=True, exclude={"email"})
        for field, value in update_data.items():
            if value is None:
                continue
            setattr(user, field, getattr(value, "value", value))
        return self._commit(user, "Failed to update user")

    def deactivate_user(self, email: str) -> User:
        user = self._get_by_email(email)
        lifecycle.soft_delete(self.db, user)
        user = self._commit(user, "Failed to deactivate user")
        logger.info("Deactivated user %s", user.id)
        return user


__all__ = ["UserService"]

"""API routes for user accounts."""

from datetime import date
from typing import List, Optional

from fastapi import APIRouter, Depends, File, Form, Query, UploadFile, status
from sqlalchemy.orm import Session

from humansport.core.security import TokenIdentity, get_optional_identity, require_roles
from humansport.core.validation import validate_payload
from humansport.dependencies import get_db
from humansport.models import Role
from humansport.schemas import (
    LoginRequest,
    LoginResponse,
    MembershipStatusResponse,
    PasswordChangeRequest,
    UserCreate,
    UserResponse,
    UserUpdateByEmail,
    UserWithMembership,
)
from humansport.services.storage_service import StorageService, get_storage_service
from humansport.services.user_service import UserService

router = APIRouter(prefix="/users", tags=["users"])

admin_only = require_roles(Role.ADMIN)
authenticated = require_roles()


def user_create_form(
    first_name: str = Form(..., alias="firstName"),
    last_name: str = Form(..., alias="lastName"),
    email: str = Form(...),
    birthdate: date = Form(...),
    phone: str = Form(...),
    password: str = Form(...),
    role: Optional[str] = Form(None),
) -> UserCreate:
    data = {
        "firstName": first_name,
        "lastName": last_name,
        "email": email,
        "birthdate": birthdate,
        "phone": phone,
        "password": password,
    }
    if role:
        data["role"] = role
    return validate_payload(UserCreate, data).unwrap()


@router.post("", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
def register_user(
    user_in: UserCreate = Depends(user_create_form),
    photo: Optional[UploadFile] = File(None),
    db: Session = Depends(get_db),
    storage: StorageService = Depends(get_storage_service),
    caller: Optional[TokenIdentity] = Depends(get_optional_identity),
):
    service = UserService(db)
    return service.register_user(
        user_in, photo, storage, caller_role=caller.role if caller else None
    )


@router.post("/login", response_model=LoginResponse)
def login_user(login_data: LoginRequest, db: Session = Depends(get_db)):
    service = UserService(db)
    token, user = service.login_user(login_data)
    user_out = UserResponse.model_validate(user)
    return LoginResponse(**user_out.model_dump(), jwtoken=token)


@router.get("", response_model=List[UserWithMembership], dependencies=[Depends(authenticated)])
def list_users(
    role: Optional[Role] = None,
    status_filter: Optional[str] = Query(None, alias="status"),
    db: Session = Depends(get_db),
):
    service = UserService(db)
    return service.list_users(
        role=role.value if role else None,
        status_filter=status_filter,
    )


@router.put("/pass", response_model=UserResponse, dependencies=[Depends(admin_only)])
def change_password(payload: PasswordChangeRequest, db: Session = Depends(get_db)):
    service = UserService(db)
    return service.change_password(payload)


@router.patch("/update/email", response_model=UserResponse, dependencies=[Depends(admin_only)])
def update_user_by_email(payload: UserUpdateByEmail, db: Session = Depends(get_db)):
    service = UserService(db)
    return service.update_user_by_email(payload)


@router.delete("/delete/{email}", response_model=UserResponse, dependencies=[Depends(admin_only)])
def deactivate_user(email: str, db: Session = Depends(get_db)):
    service = UserService(db)
    return service.deactivate_user(email)


@router.get("/{user_id}", response_model=UserWithMembership, dependencies=[Depends(authenticated)])
def get_user(user_id: int, db: Session = Depends(get_db)):
    service = UserService(db)
    return service.get_user_with_membership(user_id)


@router.get(
    "/{user_id}/memberships",
    response_model=MembershipStatusResponse,
    dependencies=[Depends(authenticated)],
)
def get_membership_status(user_id: int, db: Session = Depends(get_db)):
    service = UserService(db)
    return service.get_membership_status(user_id)


__all__ = ["router"]

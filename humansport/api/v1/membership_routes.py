"""API routes for the membership catalog."""

from typing import List, Literal, Optional

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from humansport.core.security import require_roles
from humansport.dependencies import get_db
from humansport.models import Role
from humansport.schemas import MembershipCreate, MembershipResponse, MembershipUpdate
from humansport.services.membership_service import MembershipService

router = APIRouter(prefix="/memberships", tags=["memberships"])

admin_only = require_roles(Role.ADMIN)


@router.get("", response_model=List[MembershipResponse])
def list_memberships(
    status_filter: Optional[Literal["active", "inactive"]] = Query(None, alias="status"),
    db: Session = Depends(get_db),
):
    service = MembershipService(db)
    return service.list_memberships(status_filter=status_filter)


@router.post(
    "",
    response_model=MembershipResponse,
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(admin_only)],
)
def create_membership(membership_in: MembershipCreate, db: Session = Depends(get_db)):
    service = MembershipService(db)
    return service.create_membership(membership_in)


@router.get("/{membership_id}", response_model=MembershipResponse)
def get_membership(membership_id: int, db: Session = Depends(get_db)):
    service = MembershipService(db)
    return service.get_membership(membership_id)


@router.patch(
    "/{membership_id}", response_model=MembershipResponse, dependencies=[Depends(admin_only)]
)
def update_membership(
    membership_id: int, membership_in: MembershipUpdate, db: Session = Depends(get_db)
):
    service = MembershipService(db)
    return service.update_membership(membership_id, membership_in)


@router.delete(
    "/{membership_id}", response_model=MembershipResponse, dependencies=[Depends(admin_only)]
)
def delete_membership(membership_id: int, db: Session = Depends(get_db)):
    service = MembershipService(db)
    return service.delete_membership(membership_id)


__all__ = ["router"]

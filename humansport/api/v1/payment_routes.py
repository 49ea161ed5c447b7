"""API routes for payment operations."""

from __future__ import annotations

from typing import List, Optional

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from humansport.core.security import require_roles
from humansport.dependencies import get_db
from humansport.models import PaymentStatus, Role
from humansport.schemas import PaymentCreate, PaymentDetailResponse, PaymentStatusUpdate
from humansport.services.payment_service import PaymentService

router = APIRouter(prefix="/payments", tags=["payments"])

authenticated = require_roles()
payment_staff = require_roles(Role.ADMIN, Role.RECEPCIONIST)


@router.get("", response_model=List[PaymentDetailResponse], dependencies=[Depends(authenticated)])
def list_payments(
    status_filter: Optional[PaymentStatus] = Query(None, alias="status"),
    user_id: Optional[int] = Query(None, alias="userId"),
    db: Session = Depends(get_db),
) -> List[PaymentDetailResponse]:
    service = PaymentService(db)
    return service.list_payments(
        status_filter=status_filter.value if status_filter else None,
        user_id=user_id,
    )


@router.get(
    "/{payment_id}",
    response_model=PaymentDetailResponse,
    dependencies=[Depends(authenticated)],
)
def get_payment(payment_id: int, db: Session = Depends(get_db)) -> PaymentDetailResponse:
    service = PaymentService(db)
    return service.get_payment(payment_id)


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    response_model=PaymentDetailResponse,
    dependencies=[Depends(authenticated)],
)
def create_payment(payload: PaymentCreate, db: Session = Depends(get_db)) -> PaymentDetailResponse:
    service = PaymentService(db)
    return service.create_payment(payload)


@router.patch(
    "/{payment_id}/status",
    response_model=PaymentDetailResponse,
    dependencies=[Depends(payment_staff)],
)
def update_payment_status(
    payment_id: int,
    payload: PaymentStatusUpdate,
    db: Session = Depends(get_db),
) -> PaymentDetailResponse:
    service = PaymentService(db)
    return service.update_status(payment_id, payload)


__all__ = ["router"]

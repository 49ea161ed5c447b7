"""API routes for class bookings."""

from typing import List, Literal, Optional

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from humansport.core.security import require_roles
from humansport.dependencies import get_db
from humansport.schemas import BookingCreate, BookingResponse, BookingUpdate
from humansport.services.booking_service import BookingService

router = APIRouter(
    prefix="/bookings",
    tags=["bookings"],
    dependencies=[Depends(require_roles())],
)


@router.get("", response_model=List[BookingResponse])
def list_bookings(
    status_filter: Literal["active", "inactive", "all"] = Query("active", alias="status"),
    user_id: Optional[int] = Query(None, alias="userId"),
    course_id: Optional[int] = Query(None, alias="courseId"),
    db: Session = Depends(get_db),
):
    service = BookingService(db)
    return service.list_bookings(
        status_filter=None if status_filter == "all" else status_filter,
        user_id=user_id,
        course_id=course_id,
    )


@router.post("", response_model=BookingResponse, status_code=status.HTTP_201_CREATED)
def create_booking(booking_in: BookingCreate, db: Session = Depends(get_db)):
    service = BookingService(db)
    return service.create_booking(booking_in)


@router.get("/{booking_id}", response_model=BookingResponse)
def get_booking(booking_id: int, db: Session = Depends(get_db)):
    service = BookingService(db)
    return service.get_booking(booking_id)


@router.patch("/{booking_id}", response_model=BookingResponse)
def update_booking(booking_id: int, booking_in: BookingUpdate, db: Session = Depends(get_db)):
    service = BookingService(db)
    return service.update_booking(booking_id, booking_in)


@router.delete("/{booking_id}", response_model=BookingResponse)
def delete_booking(booking_id: int, db: Session = Depends(get_db)):
    service = BookingService(db)
    return service.delete_booking(booking_id)


__all__ = ["router"]

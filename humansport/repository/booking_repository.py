from typing import List, Optional

from sqlalchemy.orm import Session

from humansport.models import Booking


def list_bookings(
    db: Session,
    *,
    status_filter: Optional[str] = None,
    user_id: Optional[int] = None,
    course_id: Optional[int] = None,
) -> List[Booking]:
    query = db.query(Booking)

    if status_filter is not None:
        query = query.filter(Booking.status == status_filter)
    if user_id is not None:
        query = query.filter(Booking.user_id == user_id)
    if course_id is not None:
        query = query.filter(Booking.course_id == course_id)

    return query.order_by(Booking.id).all()


def get_booking(db: Session, booking_id: int) -> Optional[Booking]:
    return db.query(Booking).filter(Booking.id == booking_id).first()


def create_booking(db: Session, booking: Booking) -> Booking:
    db.add(booking)
    return booking

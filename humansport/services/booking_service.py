from __future__ import annotations

import logging
from typing import Optional

from humansport.models import Booking
from humansport.repository import booking_repository, course_repository, lifecycle, user_repository
from humansport.schemas.booking import BookingCreate, BookingUpdate
from humansport.services.base import BaseService, not_found

logger = logging.getLogger(__name__)


class BookingService(BaseService):
    def _ensure_user_exists(self, user_id: int) -> None:
        if user_repository.get_user_by_id(self.db, user_id) is None:
            raise not_found("Associated user not found")

    def _ensure_course_exists(self, course_id: int) -> None:
        if course_repository.get_course(self.db, course_id) is None:
            raise not_found("Associated course not found")

    def list_bookings(
        self,
        *,
        status_filter: Optional[str] = None,
        user_id: Optional[int] = None,
        course_id: Optional[int] = None,
    ) -> list[Booking]:
        return booking_repository.list_bookings(
            self.db,
            status_filter=status_filter,
            user_id=user_id,
            course_id=course_id,
        )

    def get_booking(self, booking_id: int) -> Booking:
        booking = booking_repository.get_booking(self.db, booking_id)
        if booking is None:
            raise not_found("Booking not found")
        return booking

    def create_booking(self, booking_in: BookingCreate) -> Booking:
        self._ensure_user_exists(booking_in.user_id)
        self._ensure_course_exists(booking_in.course_id)

        booking = Booking(
            user_id=booking_in.user_id,
            course_id=booking_in.course_id,
            comments=booking_in.comments,
            status="active",
        )
        booking_repository.create_booking(self.db, booking)
        booking = self._commit(booking, "Failed to create booking")
        logger.info(
            "User %s booked course %s (booking %s)",
            booking.user_id,
            booking.course_id,
            booking.id,
        )
        return booking

    def update_booking(self, booking_id: int, booking_in: BookingUpdate) -> Booking:
        booking = self.get_booking(booking_id)
        if booking_in.comments is not None:
            booking.comments = booking_in.comments
        return self._commit(booking, "Failed to update booking")

    def delete_booking(self, booking_id: int) -> Booking:
        booking = self.get_booking(booking_id)
        lifecycle.soft_delete(self.db, booking)
        return self._commit(booking, "Failed to delete booking")

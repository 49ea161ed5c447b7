"""SQLAlchemy models for the gym API."""

from humansport.models.booking import Booking
from humansport.models.course import Course
from humansport.models.instructor import Instructor
from humansport.models.membership import Membership
from humansport.models.mixins import STATUS_ACTIVE, STATUS_INACTIVE
from humansport.models.payment import Payment, PaymentMethod, PaymentStatus
from humansport.models.sensor_event import SensorEvent
from humansport.models.user import DEFAULT_PHOTO, Role, User

__all__ = [
    "Booking",
    "Course",
    "Instructor",
    "Membership",
    "Payment",
    "PaymentMethod",
    "PaymentStatus",
    "Role",
    "SensorEvent",
    "User",
    "DEFAULT_PHOTO",
    "STATUS_ACTIVE",
    "STATUS_INACTIVE",
]

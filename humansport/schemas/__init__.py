"""Schemas exposed by the gym API."""

from humansport.schemas.booking import BookingCreate, BookingResponse, BookingUpdate
from humansport.schemas.course import (
    ClassDay,
    CourseCreate,
    CourseReplace,
    CourseResponse,
    CourseUpdate,
)
from humansport.schemas.instructor import InstructorCreate, InstructorResponse, InstructorUpdate
from humansport.schemas.membership import MembershipCreate, MembershipResponse, MembershipUpdate
from humansport.schemas.membership_status import MembershipStatusResponse
from humansport.schemas.payment import (
    PaymentCreate,
    PaymentDetailResponse,
    PaymentResponse,
    PaymentStatusUpdate,
)
from humansport.schemas.sensor import (
    SensorEventCreate,
    SensorEventResponse,
    SensorEventUpdate,
    SensorMessageResponse,
    SensorSnapshotRequest,
    SensorValueResponse,
)
from humansport.schemas.user import (
    LoginRequest,
    LoginResponse,
    PasswordChangeRequest,
    UserCreate,
    UserResponse,
    UserUpdateByEmail,
    UserWithMembership,
)

__all__ = [
    "BookingCreate",
    "BookingResponse",
    "BookingUpdate",
    "ClassDay",
    "CourseCreate",
    "CourseReplace",
    "CourseResponse",
    "CourseUpdate",
    "InstructorCreate",
    "InstructorResponse",
    "InstructorUpdate",
    "LoginRequest",
    "LoginResponse",
    "MembershipCreate",
    "MembershipResponse",
    "MembershipStatusResponse",
    "MembershipUpdate",
    "PasswordChangeRequest",
    "PaymentCreate",
    "PaymentDetailResponse",
    "PaymentResponse",
    "PaymentStatusUpdate",
    "SensorEventCreate",
    "SensorEventResponse",
    "SensorEventUpdate",
    "SensorMessageResponse",
    "SensorSnapshotRequest",
    "SensorValueResponse",
    "UserCreate",
    "UserResponse",
    "UserUpdateByEmail",
    "UserWithMembership",
]

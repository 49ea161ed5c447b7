"""Version 1 API routes for the gym API."""

from fastapi import APIRouter

from .booking_routes import router as booking_router
from .course_routes import router as course_router
from .instructor_routes import router as instructor_router
from .membership_routes import router as membership_router
from .payment_routes import router as payment_router
from .sensor_routes import router as sensor_router
from .user_routes import router as user_router

router = APIRouter()
router.include_router(user_router)
router.include_router(instructor_router)
router.include_router(course_router)
router.include_router(membership_router)
router.include_router(booking_router)
router.include_router(payment_router)
router.include_router(sensor_router)

__all__ = ["router"]

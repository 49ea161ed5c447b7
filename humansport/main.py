"""Entry point for the Human Sport gym API."""

import logging
import time
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from humansport import models  # noqa: F401  (registers tables on Base.metadata)
from humansport.api import api_router
from humansport.core.config import settings
from humansport.core.database import Base, engine
from humansport.core.error_handlers import register_exception_handlers
from humansport.core.logging_config import setup_logging
from humansport.services.sensor_service import SensorState, SerialSensorListener

setup_logging()
logger = logging.getLogger(__name__)

# Ensure database tables exist when the application starts (for development purposes).
Base.metadata.create_all(bind=engine)


@asynccontextmanager
async def lifespan(app: FastAPI):
    listener = None
    if settings.SENSOR_SERIAL_PORT:
        listener = SerialSensorListener(
            app.state.sensor_state,
            settings.SENSOR_SERIAL_PORT,
            settings.SENSOR_BAUD_RATE,
        )
        if listener.start():
            app.state.sensor_listener = listener
        else:
            listener = None
    try:
        yield
    finally:
        if listener is not None:
            listener.stop()
            app.state.sensor_listener = None


app = FastAPI(
    title=settings.PROJECT_NAME,
    description="Gym management API: users, instructors, courses, bookings, memberships and payments.",
    version="1.0.0",
    lifespan=lifespan,
)
app.state.sensor_state = SensorState()
app.state.sensor_listener = None

register_exception_handlers(app)


@app.middleware("http")
async def log_requests(request: Request, call_next):
    started = time.perf_counter()
    response = await call_next(request)
    elapsed_ms = (time.perf_counter() - started) * 1000
    logger.info(
        "%s %s -> %s (%.1f ms)",
        request.method,
        request.url.path,
        response.status_code,
        elapsed_ms,
    )
    return response


app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT", "PATCH", "DELETE"],
    allow_headers=["*"],
)

app.include_router(api_router)


@app.get("/health", tags=["health"])
def health_check():
    return {"status": "ok"}


__all__ = ["app"]

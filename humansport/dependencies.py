"""Common dependencies for the gym API."""

from collections.abc import Generator
from typing import Optional

from fastapi import HTTPException, Request, status
from sqlalchemy.exc import SQLAlchemyError

from humansport.core.database import SessionLocal
from humansport.services.sensor_service import SensorState, SerialSensorListener


def get_db() -> Generator:
    """Provide a transactional scope around a series of operations."""

    db = SessionLocal()
    try:
        yield db
    except SQLAlchemyError:
        db.rollback()
        raise
    finally:
        db.close()


def get_sensor_state(request: Request) -> SensorState:
    return request.app.state.sensor_state


def get_sensor_listener(request: Request) -> SerialSensorListener:
    listener: Optional[SerialSensorListener] = getattr(request.app.state, "sensor_listener", None)
    if listener is None:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Sensor listener is not configured",
        )
    return listener


__all__ = ["get_db", "get_sensor_state", "get_sensor_listener"]

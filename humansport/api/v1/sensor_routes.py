"""API routes for the proximity sensor and stored sensor events."""

from typing import List, Optional

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from humansport.core.security import require_roles
from humansport.dependencies import get_db, get_sensor_listener, get_sensor_state
from humansport.schemas import (
    SensorEventCreate,
    SensorEventResponse,
    SensorEventUpdate,
    SensorMessageResponse,
    SensorSnapshotRequest,
    SensorValueResponse,
)
from humansport.services.sensor_service import SensorService, SensorState, SerialSensorListener

router = APIRouter(
    prefix="/sensor",
    tags=["sensor"],
    dependencies=[Depends(require_roles())],
)


@router.get("", response_model=SensorValueResponse)
def read_sensor(state: SensorState = Depends(get_sensor_state)):
    return SensorValueResponse(value=state.read())


@router.get("/resume", response_model=SensorValueResponse)
def resume_sensor(
    listener: SerialSensorListener = Depends(get_sensor_listener),
    state: SensorState = Depends(get_sensor_state),
):
    listener.resume()
    return SensorValueResponse(value=state.read())


@router.get("/pause", response_model=SensorMessageResponse)
def pause_sensor(listener: SerialSensorListener = Depends(get_sensor_listener)):
    listener.pause()
    return SensorMessageResponse(message="paused")


@router.post("", response_model=SensorEventResponse, status_code=status.HTTP_201_CREATED)
def save_sensor_snapshot(
    payload: Optional[SensorSnapshotRequest] = None,
    db: Session = Depends(get_db),
    state: SensorState = Depends(get_sensor_state),
):
    service = SensorService(db, state)
    return service.snapshot(payload or SensorSnapshotRequest())


@router.get("/events", response_model=List[SensorEventResponse])
def list_sensor_events(
    db: Session = Depends(get_db),
    state: SensorState = Depends(get_sensor_state),
):
    return SensorService(db, state).list_events()


@router.post("/events", response_model=SensorEventResponse, status_code=status.HTTP_201_CREATED)
def create_sensor_event(
    payload: SensorEventCreate,
    db: Session = Depends(get_db),
    state: SensorState = Depends(get_sensor_state),
):
    return SensorService(db, state).create_event(payload)


@router.get("/events/{event_id}", response_model=SensorEventResponse)
def get_sensor_event(
    event_id: int,
    db: Session = Depends(get_db),
    state: SensorState = Depends(get_sensor_state),
):
    return SensorService(db, state).get_event(event_id)


@router.put("/events/{event_id}", response_model=SensorEventResponse)
def update_sensor_event(
    event_id: int,
    payload: SensorEventUpdate,
    db: Session = Depends(get_db),
    state: SensorState = Depends(get_sensor_state),
):
    return SensorService(db, state).update_event(event_id, payload)


@router.delete("/events/{event_id}", response_model=SensorMessageResponse)
def delete_sensor_event(
    event_id: int,
    db: Session = Depends(get_db),
    state: SensorState = Depends(get_sensor_state),
):
    SensorService(db, state).delete_event(event_id)
    return SensorMessageResponse(message="Sensor event deleted")


__all__ = ["router"]

"""Serial sensor listener and sensor event persistence."""

from __future__ import annotations

import logging
import threading
from datetime import datetime, timezone
from typing import Any, Callable, Optional

import serial
from fastapi import HTTPException, status
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from humansport.models import SensorEvent
from humansport.repository import sensor_event_repository
from humansport.schemas.sensor import SensorEventCreate, SensorEventUpdate, SensorSnapshotRequest
from humansport.services.base import BaseService, not_found, persistence_error

logger = logging.getLogger(__name__)


class SensorState:
    """Latest value read from the sensor. One writer, many readers."""

    def __init__(self, initial: str = ""):
        self._value = initial
        self._lock = threading.Lock()

    def read(self) -> str:
        with self._lock:
            return self._value

    def write(self, value: str) -> None:
        with self._lock:
            self._value = value


class SerialSensorListener:
    """Reads ``\\r\\n`` terminated lines from a serial port into a :class:`SensorState`.

    Only the most recent line is kept. Reading runs on a daemon thread and can
    be paused and resumed; while paused the port is left untouched so unread
    bytes stay in the driver buffer.
    """

    def __init__(
        self,
        state: SensorState,
        port: str,
        baudrate: int = 115200,
        *,
        serial_factory: Callable[..., Any] = serial.Serial,
        read_timeout: float = 1.0,
    ):
        self.state = state
        self.port = port
        self.baudrate = baudrate
        self._serial_factory = serial_factory
        self._read_timeout = read_timeout
        self._thread: Optional[threading.Thread] = None
        self._reading = threading.Event()
        self._stopped = threading.Event()

    @property
    def paused(self) -> bool:
        return not self._reading.is_set()

    def start(self) -> bool:
        try:
            connection = self._serial_factory(
                self.port, self.baudrate, timeout=self._read_timeout
            )
        except serial.SerialException as exc:
            logger.error("Could not open sensor port %s: %s", self.port, exc)
            return False

        self._stopped.clear()
        self._reading.set()
        self._thread = threading.Thread(
            target=self._run, args=(connection,), name="sensor-listener", daemon=True
        )
        self._thread.start()
        logger.info("Listening for sensor values on %s at %s baud", self.port, self.baudrate)
        return True

    def pause(self) -> None:
        self._reading.clear()

    def resume(self) -> None:
        self._reading.set()

    def stop(self) -> None:
        """Stop reading. The reader thread closes the port on its way out."""
        self._stopped.set()
        self._reading.set()
        if self._thread is None:
            return
        self._thread.join(timeout=self._read_timeout + 1)
        if self._thread.is_alive():
            logger.warning(
                "Sensor listener on %s still blocked in a read; the port closes when it returns",
                self.port,
            )
        self._thread = None

    def handle_line(self, raw: bytes) -> None:
        value = raw.decode("utf-8", errors="replace").strip("\r\n")
        if not value:
            return
        logger.debug("Sensor value received: %s", value)
        self.state.write(value)

    def _run(self, connection: Any) -> None:
        try:
            while not self._stopped.is_set():
                if not self._reading.wait(timeout=0.5):
                    continue
                if self._stopped.is_set():
                    break
                try:
                    raw = connection.readline()
                except serial.SerialException as exc:
                    logger.error("Error reading sensor port %s: %s", self.port, exc)
                    self._stopped.wait(self._read_timeout)
                    continue
                if raw:
                    self.handle_line(raw)
        finally:
            connection.close()
            logger.info("Sensor port %s closed", self.port)


class SensorService(BaseService):
    def __init__(self, db: Session, state: SensorState):
        super().__init__(db)
        self.state = state

    def list_events(self) -> list[SensorEvent]:
        return sensor_event_repository.list_sensor_events(self.db)

    def get_event(self, event_id: int) -> SensorEvent:
        event = sensor_event_repository.get_sensor_event(self.db, event_id)
        if event is None:
            raise not_found("Sensor event not found")
        return event

    def snapshot(self, payload: SensorSnapshotRequest) -> SensorEvent:
        reading = self.state.read()
        if not reading:
            raise HTTPException(
                status_code=status.HTTP_409_CONFLICT,
                detail="No sensor reading available yet",
            )
        event = SensorEvent(
            name=payload.name,
            timestamp=payload.timestamp or datetime.now(timezone.utc),
            reading=reading,
        )
        sensor_event_repository.create_sensor_event(self.db, event)
        return self._commit(event, "Failed to save sensor reading")

    def create_event(self, payload: SensorEventCreate) -> SensorEvent:
        event = SensorEvent(
            name=payload.name,
            timestamp=payload.timestamp or datetime.now(timezone.utc),
            reading=payload.reading,
        )
        sensor_event_repository.create_sensor_event(self.db, event)
        return self._commit(event, "Failed to create sensor event")

    def update_event(self, event_id: int, payload: SensorEventUpdate) -> SensorEvent:
        event = self.get_event(event_id)
        for field, value in payload.model_dump(exclude_unset=True).items():
            if value is not None:
                setattr(event, field, value)
        return self._commit(event, "Failed to update sensor event")

    def delete_event(self, event_id: int) -> None:
        event = self.get_event(event_id)
        try:
            sensor_event_repository.delete_sensor_event(self.db, event)
            self.db.commit()
        except SQLAlchemyError as exc:
            self.db.rollback()
            raise persistence_error("Failed to delete sensor event", exc) from exc


__all__ = ["SensorState", "SerialSensorListener", "SensorService"]

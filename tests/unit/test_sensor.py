import threading
import time

import pytest
import serial
from fastapi import HTTPException

from humansport.schemas import SensorEventCreate, SensorEventUpdate, SensorSnapshotRequest
from humansport.services.sensor_service import SensorService, SensorState, SerialSensorListener


class FakeSerial:
    def __init__(self, lines):
        self.lines = list(lines)
        self.closed = False
        self.lock = threading.Lock()

    def readline(self):
        with self.lock:
            if self.lines:
                return self.lines.pop(0)
        time.sleep(0.01)
        return b""

    def close(self):
        self.closed = True


def _wait_for(predicate, timeout=2.0):
    deadline = time.monotonic() + timeout
    while time.monotonic() < deadline:
        if predicate():
            return True
        time.sleep(0.01)
    return predicate()


def test_state_starts_empty_and_keeps_last_write():
    state = SensorState()
    assert state.read() == ""

    state.write("12")
    state.write("7")

    assert state.read() == "7"


def test_handle_line_strips_terminator():
    state = SensorState()
    listener = SerialSensorListener(state, "/dev/null", serial_factory=lambda *a, **k: None)

    listener.handle_line(b"42\r\n")

    assert state.read() == "42"


def test_handle_line_ignores_blank_lines():
    state = SensorState("42")
    listener = SerialSensorListener(state, "/dev/null", serial_factory=lambda *a, **k: None)

    listener.handle_line(b"\r\n")

    assert state.read() == "42"


def test_listener_reads_from_port_until_stopped():
    state = SensorState()
    port = FakeSerial([b"15\r\n", b"9\r\n"])
    opened = {}

    def factory(name, baudrate, timeout):
        opened.update(name=name, baudrate=baudrate, timeout=timeout)
        return port

    listener = SerialSensorListener(state, "/dev/ttyUSB0", 9600, serial_factory=factory, read_timeout=0.1)

    assert listener.start() is True
    assert _wait_for(lambda: state.read() == "9")
    listener.stop()

    assert opened == {"name": "/dev/ttyUSB0", "baudrate": 9600, "timeout": 0.1}
    assert port.closed


def test_paused_listener_leaves_port_untouched():
    state = SensorState()
    port = FakeSerial([])
    listener = SerialSensorListener(state, "/dev/ttyUSB0", serial_factory=lambda *a, **k: port, read_timeout=0.1)
    listener.start()

    listener.pause()
    assert listener.paused
    time.sleep(0.1)
    with port.lock:
        port.lines.append(b"33\r\n")
    time.sleep(0.2)
    assert state.read() == ""

    listener.resume()
    assert not listener.paused
    assert _wait_for(lambda: state.read() == "33")
    listener.stop()


def test_start_reports_unavailable_port():
    def factory(*args, **kwargs):
        raise serial.SerialException("could not open port")

    listener = SerialSensorListener(SensorState(), "/dev/missing", serial_factory=factory)

    assert listener.start() is False


class TestSensorService:
    def test_snapshot_persists_current_reading(self, db):
        service = SensorService(db, SensorState("18"))

        event = service.snapshot(SensorSnapshotRequest())

        assert event.id is not None
        assert event.name == "proximity"
        assert event.reading == "18"

    def test_snapshot_without_reading(self, db):
        service = SensorService(db, SensorState())

        with pytest.raises(HTTPException) as excinfo:
            service.snapshot(SensorSnapshotRequest())

        assert excinfo.value.status_code == 409

    def test_event_lifecycle(self, db):
        service = SensorService(db, SensorState())
        event = service.create_event(SensorEventCreate(name="door", reading="open"))

        updated = service.update_event(event.id, SensorEventUpdate(reading="closed"))
        assert updated.reading == "closed"
        assert updated.name == "door"

        service.delete_event(event.id)
        with pytest.raises(HTTPException) as excinfo:
            service.get_event(event.id)
        assert excinfo.value.status_code == 404


class BlockingSerial:
    """A port whose read only returns once released."""

    def __init__(self):
        self.reading = threading.Event()
        self.release = threading.Event()
        self.closed = False

    def readline(self):
        self.reading.set()
        self.release.wait()
        return b"77\r\n"

    def close(self):
        self.closed = True


def test_stop_leaves_port_to_a_reader_still_blocked():
    state = SensorState()
    port = BlockingSerial()
    listener = SerialSensorListener(
        state, "/dev/ttyUSB0", serial_factory=lambda *a, **k: port, read_timeout=0.05
    )
    listener.start()

    assert port.reading.wait(timeout=2)
    listener.stop()
    assert not port.closed

    port.release.set()
    assert _wait_for(lambda: port.closed)

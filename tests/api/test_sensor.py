from humansport.main import app


class FakeListener:
    def __init__(self):
        self.paused = False

    def pause(self):
        self.paused = True

    def resume(self):
        self.paused = False


def test_read_current_value(client, member_headers):
    app.state.sensor_state.write("21")

    response = client.get("/sensor", headers=member_headers)

    assert response.status_code == 200
    assert response.json() == {"value": "21"}


def test_pause_and_resume_without_listener(client, member_headers):
    assert client.get("/sensor/pause", headers=member_headers).status_code == 503
    assert client.get("/sensor/resume", headers=member_headers).status_code == 503


def test_pause_and_resume(client, member_headers):
    listener = FakeListener()
    app.state.sensor_listener = listener
    app.state.sensor_state.write("8")

    paused = client.get("/sensor/pause", headers=member_headers)
    assert paused.json() == {"message": "paused"}
    assert listener.paused

    resumed = client.get("/sensor/resume", headers=member_headers)
    assert resumed.json() == {"value": "8"}
    assert not listener.paused


def test_snapshot(client, member_headers):
    app.state.sensor_state.write("14")

    response = client.post("/sensor", json={"name": "entrance"}, headers=member_headers)

    assert response.status_code == 201
    assert response.json()["reading"] == "14"
    assert response.json()["name"] == "entrance"


def test_snapshot_without_reading(client, member_headers):
    response = client.post("/sensor", json={}, headers=member_headers)

    assert response.status_code == 409


def test_sensor_events_crud(client, member_headers):
    created = client.post(
        "/sensor/events",
        json={"name": "proximity", "reading": "30", "timestamp": "2025-03-01T10:00:00Z"},
        headers=member_headers,
    )
    assert created.status_code == 201
    event_id = created.json()["id"]

    updated = client.put(f"/sensor/events/{event_id}", json={"reading": "12"}, headers=member_headers)
    assert updated.json()["reading"] == "12"
    assert len(client.get("/sensor/events", headers=member_headers).json()) == 1

    deleted = client.delete(f"/sensor/events/{event_id}", headers=member_headers)
    assert deleted.json() == {"message": "Sensor event deleted"}
    assert client.get(f"/sensor/events/{event_id}", headers=member_headers).status_code == 404


def test_sensor_requires_authentication(client):
    assert client.get("/sensor").status_code == 401


def test_snapshot_without_body_uses_defaults(client, member_headers):
    app.state.sensor_state.write("5")

    response = client.post("/sensor", headers=member_headers)

    assert response.status_code == 201
    assert response.json()["name"] == "proximity"
    assert response.json()["reading"] == "5"

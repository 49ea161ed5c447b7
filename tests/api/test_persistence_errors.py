from sqlalchemy import text

from humansport.models import User


def _drop_bookings(db):
    db.execute(text("DROP TABLE bookings"))
    db.commit()


def test_failed_insert_rolls_back_and_reports_driver_error(
    client, db, member_headers, member_user, course
):
    user_id, course_id = member_user.id, course.id
    _drop_bookings(db)

    response = client.post(
        "/bookings", json={"userId": user_id, "courseId": course_id}, headers=member_headers
    )

    assert response.status_code == 500
    body = response.json()
    assert body["message"] == "Failed to create booking"
    assert "no such table: bookings" in body["errors"][0]
    # The session was rolled back and can be used again.
    assert db.query(User).filter(User.id == user_id).count() == 1


def test_failed_read_reports_database_error(client, db, member_headers, member_user):
    user_id = member_user.id
    _drop_bookings(db)

    response = client.get("/bookings", headers=member_headers)

    assert response.status_code == 500
    body = response.json()
    assert body["message"] == "Database error"
    assert "no such table: bookings" in body["errors"][0]
    assert db.query(User).filter(User.id == user_id).count() == 1

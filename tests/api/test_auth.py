from datetime import timedelta

from humansport.core.security import create_access_token


def test_missing_token(client):
    response = client.get("/courses")

    assert response.status_code == 401
    assert response.json() == {"message": "Access denied. No token provided."}


def test_bearer_without_token(client):
    response = client.get("/courses", headers={"Authorization": "Bearer"})

    assert response.status_code == 401
    assert response.json()["message"] == "Access denied. No token provided."


def test_invalid_token(client):
    response = client.get("/courses", headers={"Authorization": "Bearer not-a-jwt"})

    assert response.status_code == 401
    assert response.json()["message"] == "Access denied. Invalid token."


def test_expired_token(client, member_user):
    token = create_access_token(
        user_id=member_user.id,
        email=member_user.email,
        role=member_user.role,
        expires_delta=timedelta(seconds=-1),
    )

    response = client.get("/courses", headers={"Authorization": f"Bearer {token}"})

    assert response.status_code == 401


def test_wrong_role(client, member_headers):
    response = client.get("/instructors", headers=member_headers)

    assert response.status_code == 403
    assert response.json()["message"] == (
        "Access denied. You do not have permission for this action."
    )


def test_health_is_public(client):
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok"}

import os

# Must be set before the application modules read their settings.
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["SECRET_KEY"] = "test-secret"
os.environ["SENSOR_SERIAL_PORT"] = ""

from datetime import date, datetime, timedelta, timezone  # noqa: E402

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
from sqlalchemy import create_engine  # noqa: E402
from sqlalchemy.exc import SQLAlchemyError  # noqa: E402
from sqlalchemy.orm import sessionmaker  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402

from humansport.core.database import Base  # noqa: E402
from humansport.core.security import create_access_token, hash_password  # noqa: E402
from humansport.dependencies import get_db  # noqa: E402
from humansport.main import app  # noqa: E402
from humansport.models import (  # noqa: E402
    Course,
    Instructor,
    Membership,
    Payment,
    User,
)
from humansport.services.sensor_service import SensorState  # noqa: E402
from humansport.services.storage_service import get_storage_service  # noqa: E402

DEFAULT_PASSWORD = "Secret1!"

engine = create_engine(
    "sqlite://",
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

# Hashing once keeps the fixtures fast.
_DEFAULT_HASH = hash_password(DEFAULT_PASSWORD)


class FakeStorage:
    """Stands in for the S3 storage service."""

    def __init__(self):
        self.uploads = []

    def upload_profile_photo(self, upload):
        self.uploads.append((upload.filename, upload.file.read()))
        return f"https://cdn.humansport.com/profiles/{upload.filename}"


@pytest.fixture(scope="function")
def db():
    """
    Fresh schema for every test, dropped afterwards.
    """
    Base.metadata.create_all(bind=engine)
    session = TestingSessionLocal()

    yield session

    session.close()
    Base.metadata.drop_all(bind=engine)


@pytest.fixture(scope="function")
def storage():
    return FakeStorage()


@pytest.fixture(scope="function")
def client(db, storage):
    def override_get_db():
        try:
            yield db
        except SQLAlchemyError:
            db.rollback()
            raise

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_storage_service] = lambda: storage
    app.state.sensor_state = SensorState()
    app.state.sensor_listener = None
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture
def make_user(db):
    counter = {"n": 0}

    def _make_user(role="user", email=None, status="active", password_hash=_DEFAULT_HASH):
        counter["n"] += 1
        user = User(
            first_name="Test",
            last_name=f"{role.title()} {counter['n']}",
            email=email or f"{role}{counter['n']}@humansport.com",
            birthdate=date(1990, 8, 15),
            phone="5512345678",
            role=role,
            password_hash=password_hash,
            status=status,
        )
        db.add(user)
        db.commit()
        db.refresh(user)
        return user

    return _make_user


def headers_for(user):
    token = create_access_token(user_id=user.id, email=user.email, role=user.role)
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def admin_user(make_user):
    return make_user("admin", email="admin@humansport.com")


@pytest.fixture
def admin_headers(admin_user):
    return headers_for(admin_user)


@pytest.fixture
def member_user(make_user):
    return make_user("member", email="member@humansport.com")


@pytest.fixture
def member_headers(member_user):
    return headers_for(member_user)


@pytest.fixture
def receptionist_headers(make_user):
    return headers_for(make_user("recepcionist"))


@pytest.fixture
def instructor(db):
    instructor = Instructor(name="Laura Gómez", speciality="Spinning", birthdate=date(1985, 3, 2))
    db.add(instructor)
    db.commit()
    db.refresh(instructor)
    return instructor


@pytest.fixture
def course(db, instructor):
    course = Course(
        name="Spinning",
        description="Indoor cycling",
        capacity=20,
        instructor_id=instructor.id,
        class_days=[{"day": "Monday", "time": "18:00", "startDate": "2025-01-06", "endDate": "2025-06-30"}],
        status="active",
    )
    db.add(course)
    db.commit()
    db.refresh(course)
    return course


@pytest.fixture
def monthly_plan(db):
    membership = Membership(
        name="Monthly",
        description="Unlimited access for 30 days",
        price=499.0,
        duration_days=30,
        status="active",
    )
    db.add(membership)
    db.commit()
    db.refresh(membership)
    return membership


@pytest.fixture
def make_payment(db):
    def _make_payment(user, membership, *, status="completed", days_ago=0, method="cash", now=None):
        stamp = (now or datetime.now(timezone.utc)) - timedelta(days=days_ago)
        payment = Payment(
            user_id=user.id,
            membership_id=membership.id,
            amount=membership.price,
            method=method,
            status=status,
            created_at=stamp,
            updated_at=stamp,
        )
        db.add(payment)
        db.commit()
        db.refresh(payment)
        return payment

    return _make_payment


@pytest.fixture
def auth_headers():
    """Build bearer headers for any user created in a test."""
    return headers_for

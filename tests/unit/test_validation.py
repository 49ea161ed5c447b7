import pytest

from humansport.core.validation import (
    FieldValidationError,
    field_errors_from,
    password_problems,
    validate_payload,
)
from humansport.schemas import CourseCreate, UserCreate


def test_strong_password_has_no_problems():
    assert password_problems("Gym2025!") == []


@pytest.mark.parametrize(
    "password, problem",
    [
        ("Ab1!", "at least 5 characters"),
        ("ABCDE1!", "one lowercase letter"),
        ("abcde1!", "one uppercase letter"),
        ("Abcdef!", "one number"),
        ("Abcdef1", "one symbol"),
    ],
)
def test_weak_passwords(password, problem):
    assert problem in password_problems(password)


def test_validate_payload_success():
    result = validate_payload(
        CourseCreate,
        {"name": "Yoga", "description": "Morning yoga", "capacity": 10, "instructorId": 1},
    )

    assert result.ok
    assert result.value.instructor_id == 1
    assert result.value.class_days == []


def test_validate_payload_collects_field_errors():
    result = validate_payload(CourseCreate, {"name": "", "description": "x", "capacity": 0})

    assert not result.ok
    fields = {error.field for error in result.errors}
    assert {"name", "capacity", "instructorId"} <= fields
    with pytest.raises(FieldValidationError):
        result.unwrap()


def test_password_validator_message_is_clean():
    result = validate_payload(
        UserCreate,
        {
            "firstName": "Ana",
            "lastName": "López",
            "email": "ana@humansport.com",
            "birthdate": "1990-08-15",
            "phone": "5512345678",
            "password": "weak",
        },
    )

    [error] = result.errors
    assert error.field == "password"
    assert error.message.startswith("Password must contain")


def test_field_errors_from_drops_request_locations():
    errors = field_errors_from(
        [{"loc": ("body", "classDays", 0, "day"), "msg": "Field required"}]
    )

    assert errors[0].field == "classDays.0.day"
    assert errors[0].as_dict() == {"field": "classDays.0.day", "message": "Field required"}

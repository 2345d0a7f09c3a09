"""Payload parsing for customer requests."""

import pytest

from app.crm.errors import RequestValidationError
from app.crm.modules.customers.models import Gender
from app.crm.modules.customers.schemas import CustomerRegistrationRequest, CustomerUpdateRequest


def test_registration_strips_and_parses_gender():
    req = CustomerRegistrationRequest.from_payload(
        {"name": "  John ", "email": "john@mailservice.com ", "age": 21, "gender": "male"}
    )
    assert req == CustomerRegistrationRequest(name="John", email="john@mailservice.com", age=21, gender=Gender.MALE)


def test_registration_ignores_client_id():
    req = CustomerRegistrationRequest.from_payload(
        {"id": 99, "name": "Jane", "email": "jane@mailservice.com", "age": 30, "gender": "FEMALE"}
    )
    assert not hasattr(req, "id")


def test_registration_reports_every_problem():
    with pytest.raises(RequestValidationError) as exc:
        CustomerRegistrationRequest.from_payload({"name": " ", "age": "old", "gender": "other"})

    assert exc.value.message == (
        "name must not be blank; email is required; age must be an integer; "
        "gender must be one of: MALE, FEMALE"
    )


@pytest.mark.parametrize("age", [True, -1, 2.5])
def test_registration_rejects_bad_age(age):
    with pytest.raises(RequestValidationError, match="age"):
        CustomerRegistrationRequest.from_payload(
            {"name": "John", "email": "john@mailservice.com", "age": age, "gender": "MALE"}
        )


@pytest.mark.parametrize("payload", [None, [], "John"])
def test_non_object_payload_rejected(payload):
    with pytest.raises(RequestValidationError, match="JSON object"):
        CustomerUpdateRequest.from_payload(payload)


def test_update_fields_are_optional():
    assert CustomerUpdateRequest.from_payload({}) == CustomerUpdateRequest()
    assert CustomerUpdateRequest.from_payload({"name": None, "age": 40}) == CustomerUpdateRequest(age=40)


def test_update_rejects_wrong_types():
    with pytest.raises(RequestValidationError) as exc:
        CustomerUpdateRequest.from_payload({"name": 5, "email": ""})
    assert exc.value.message == "name must be a string; email must not be blank"


def test_requests_are_immutable():
    req = CustomerUpdateRequest(name="John")
    with pytest.raises(AttributeError):
        req.name = "Jane"  # type: ignore[misc]

"""Request values accepted by CustomerService, parsed from JSON payloads."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from app.crm.errors import RequestValidationError
from app.crm.modules.customers.models import Gender


def _clean_str(payload: dict, key: str, errors: list[str], *, required: bool) -> str | None:
    raw = payload.get(key)
    if raw is None:
        if required:
            errors.append(f"{key} is required")
        return None
    if not isinstance(raw, str):
        errors.append(f"{key} must be a string")
        return None
    value = raw.strip()
    if not value:
        errors.append(f"{key} must not be blank")
        return None
    return value


def _clean_age(payload: dict, errors: list[str], *, required: bool) -> int | None:
    raw = payload.get("age")
    if raw is None:
        if required:
            errors.append("age is required")
        return None
    # bool is an int subclass; reject it explicitly
    if isinstance(raw, bool) or not isinstance(raw, int):
        errors.append("age must be an integer")
        return None
    if raw < 0:
        errors.append("age must not be negative")
        return None
    return raw


def _clean_gender(payload: dict, errors: list[str]) -> Gender | None:
    raw = payload.get("gender")
    if raw is None:
        errors.append("gender is required")
        return None
    key = raw.strip().upper() if isinstance(raw, str) else ""
    if key not in Gender.__members__:
        errors.append(f"gender must be one of: {', '.join(Gender.__members__)}")
        return None
    return Gender[key]


def _require_object(payload: Any) -> dict:
    if not isinstance(payload, dict):
        raise RequestValidationError("request body must be a JSON object")
    return payload


@dataclass(frozen=True)
class CustomerRegistrationRequest:
    name: str
    email: str
    age: int
    gender: Gender

    @classmethod
    def from_payload(cls, payload: Any) -> "CustomerRegistrationRequest":
        """Validate a creation payload. Any client-supplied id is ignored."""
        payload = _require_object(payload)
        errors: list[str] = []
        name = _clean_str(payload, "name", errors, required=True)
        email = _clean_str(payload, "email", errors, required=True)
        age = _clean_age(payload, errors, required=True)
        gender = _clean_gender(payload, errors)
        if errors:
            raise RequestValidationError("; ".join(errors))
        return cls(name=name, email=email, age=age, gender=gender)  # type: ignore[arg-type]


@dataclass(frozen=True)
class CustomerUpdateRequest:
    """Partial update. None means "leave unchanged"."""

    name: str | None = None
    email: str | None = None
    age: int | None = None

    @classmethod
    def from_payload(cls, payload: Any) -> "CustomerUpdateRequest":
        payload = _require_object(payload)
        errors: list[str] = []
        name = _clean_str(payload, "name", errors, required=False)
        email = _clean_str(payload, "email", errors, required=False)
        age = _clean_age(payload, errors, required=False)
        if errors:
            raise RequestValidationError("; ".join(errors))
        return cls(name=name, email=email, age=age)

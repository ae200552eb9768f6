"""Unit tests for the wire envelope and user request models."""

from __future__ import annotations

from dataclasses import dataclass

import pytest
from pydantic import ValidationError

from api_envelope.models.responses import Envelope, PaginatedPayload
from api_envelope.models.users import CreateUserRequest, UpdateUserRequest, User


# ---------------------------------------------------------------------------
# Envelope
# ---------------------------------------------------------------------------


class TestEnvelope:
    def test_wire_keys_are_camel_case(self):
        env = Envelope(is_success=True, message="ok", data={"key": "value"})
        assert env.to_wire() == {"isSuccess": True, "message": "ok", "data": {"key": "value"}}

    def test_validation_errors_key_absent_when_unset(self):
        env = Envelope(is_success=False, message="nope")
        wire = env.to_wire()
        assert "validationErrors" not in wire
        assert wire["data"] is None

    def test_validation_errors_key_present_when_set(self):
        env = Envelope(
            is_success=False,
            message="Validation errors occurred",
            validation_errors={"email": ["Email is required"]},
        )
        assert env.to_wire()["validationErrors"] == {"email": ["Email is required"]}

    def test_accepts_alias_names(self):
        env = Envelope.model_validate({"isSuccess": True, "message": "ok", "data": 1})
        assert env.is_success is True
        assert env.data == 1

    def test_envelope_is_frozen(self):
        env = Envelope(is_success=True, message="ok")
        with pytest.raises(ValidationError):
            env.message = "changed"  # type: ignore[misc]

    def test_dataclass_payload_serializes_to_object(self):
        user = User(id="42", username="ann.example", email="ann@example.com")
        env = Envelope(is_success=True, message="ok", data=user)
        assert env.to_wire()["data"] == {
            "id": "42",
            "username": "ann.example",
            "email": "ann@example.com",
            "protected": False,
        }

    def test_generic_with_list_data(self):
        env = Envelope[list[int]](is_success=True, message="ok", data=[1, 2, 3])
        assert env.data == [1, 2, 3]


# ---------------------------------------------------------------------------
# PaginatedPayload
# ---------------------------------------------------------------------------


class TestPaginatedPayload:
    def test_fields(self):
        payload = PaginatedPayload(items=[1, 2], total=2, page=1, limit=10)
        assert payload.model_dump() == {"items": [1, 2], "total": 2, "page": 1, "limit": 10}

    @pytest.mark.parametrize(
        "field,value",
        [("total", -1), ("page", 0), ("limit", 0)],
    )
    def test_bounds(self, field, value):
        kwargs = {"items": [], "total": 0, "page": 1, "limit": 1}
        kwargs[field] = value
        with pytest.raises(ValidationError):
            PaginatedPayload(**kwargs)

    def test_nested_in_envelope(self):
        @dataclass
        class Row:
            id: int

        payload = PaginatedPayload(items=[Row(1), Row(2)], total=7, page=1, limit=2)
        env = Envelope(is_success=True, message="ok", data=payload)
        assert env.to_wire()["data"] == {
            "items": [{"id": 1}, {"id": 2}],
            "total": 7,
            "page": 1,
            "limit": 2,
        }


# ---------------------------------------------------------------------------
# User requests
# ---------------------------------------------------------------------------


class TestUserRequests:
    def test_create_request_fields_are_optional(self):
        req = CreateUserRequest()
        assert req.username is None
        assert req.email is None

    def test_update_request_partial(self):
        req = UpdateUserRequest(email="x@example.com")
        assert req.username is None
        assert req.email == "x@example.com"

    def test_create_request_rejects_wrong_type(self):
        with pytest.raises(ValidationError):
            CreateUserRequest(username=["not", "a", "string"])

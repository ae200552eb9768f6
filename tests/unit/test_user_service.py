"""Unit tests for UserService outcomes and the in-memory repository."""

from __future__ import annotations

import pytest

from api_envelope.models.outcomes import (
    Forbidden,
    NotFound,
    Success,
    SuccessEmpty,
    ValidationFailed,
)
from api_envelope.models.users import CreateUserRequest, UpdateUserRequest
from api_envelope.services.user_repository import InMemoryUserRepository, seed_demo_users
from api_envelope.services.user_service import UserService


@pytest.fixture
def repo() -> InMemoryUserRepository:
    return InMemoryUserRepository()


@pytest.fixture
def service(repo: InMemoryUserRepository) -> UserService:
    return UserService(repo)


# ---------------------------------------------------------------------------
# Repository
# ---------------------------------------------------------------------------


class TestInMemoryUserRepository:
    def test_add_and_get(self, repo):
        user = repo.add("ann.example", "ann@example.com")
        assert repo.get(user.id) == user
        assert user.protected is False

    def test_list_preserves_insertion_order(self, repo):
        first = repo.add("first.user", "a@example.com")
        second = repo.add("second.user", "b@example.com")
        assert [u.id for u in repo.list_all()] == [first.id, second.id]

    def test_delete(self, repo):
        user = repo.add("ann.example", "ann@example.com")
        assert repo.delete(user.id) is True
        assert repo.delete(user.id) is False
        assert repo.get(user.id) is None

    def test_seed_demo_users(self, repo):
        seed_demo_users(repo)
        users = repo.list_all()
        assert len(users) == 2
        assert users[0].protected is True


# ---------------------------------------------------------------------------
# Service
# ---------------------------------------------------------------------------


class TestCreateUser:
    def test_valid_user_is_success(self, service, repo):
        outcome = service.create_user(
            CreateUserRequest(username="ann.example", email="ann@example.com")
        )
        assert isinstance(outcome, Success)
        assert outcome.payload.username == "ann.example"
        assert repo.get(outcome.payload.id) is not None

    def test_missing_fields_report_every_rule(self, service):
        outcome = service.create_user(CreateUserRequest())
        assert isinstance(outcome, ValidationFailed)
        assert dict(outcome.errors) == {
            "username": ("Username is required", "Username must be 8 character long"),
            "email": ("Email is required", "Email must be valid email address"),
        }

    def test_short_username(self, service):
        outcome = service.create_user(CreateUserRequest(username="ann", email="ann@example.com"))
        assert isinstance(outcome, ValidationFailed)
        assert outcome.errors == {"username": ("Username must be 8 character long",)}

    @pytest.mark.parametrize("email", ["ann", "ann@", "@example.com", "ann@example", "a b@c.io"])
    def test_invalid_email(self, service, email):
        outcome = service.create_user(CreateUserRequest(username="ann.example", email=email))
        assert isinstance(outcome, ValidationFailed)
        assert outcome.errors == {"email": ("Email must be valid email address",)}

    def test_whitespace_only_username_counts_as_missing(self, service):
        outcome = service.create_user(CreateUserRequest(username="   ", email="ann@example.com"))
        assert outcome.errors["username"][0] == "Username is required"


class TestGetAndList:
    def test_get_missing_user(self, service):
        outcome = service.get_user("nope")
        assert isinstance(outcome, NotFound)
        assert outcome.message == "User not found"

    def test_get_existing_user(self, service, repo):
        user = repo.add("ann.example", "ann@example.com")
        outcome = service.get_user(user.id)
        assert isinstance(outcome, Success)
        assert outcome.payload == user

    def test_list_users_paginates(self, service, repo):
        for i in range(15):
            repo.add(f"user.number{i:02d}", f"user{i}@example.com")
        outcome = service.list_users(page=2, limit=10)
        assert isinstance(outcome, Success)
        assert len(outcome.payload.items) == 5
        assert outcome.payload.total == 15

    def test_list_users_out_of_range(self, service, repo):
        repo.add("ann.example", "ann@example.com")
        outcome = service.list_users(page=3, limit=10)
        assert outcome.payload.items == []
        assert outcome.payload.total == 1


class TestUpdateUser:
    def test_partial_update(self, service, repo):
        user = repo.add("ann.example", "ann@example.com")
        outcome = service.update_user(user.id, UpdateUserRequest(email="new@example.com"))
        assert isinstance(outcome, Success)
        assert outcome.payload.email == "new@example.com"
        assert outcome.payload.username == "ann.example"
        assert repo.get(user.id).email == "new@example.com"

    def test_update_validates_supplied_fields_only(self, service, repo):
        user = repo.add("ann.example", "ann@example.com")
        outcome = service.update_user(user.id, UpdateUserRequest(username="ann"))
        assert isinstance(outcome, ValidationFailed)
        assert set(outcome.errors) == {"username"}
        assert repo.get(user.id).username == "ann.example"

    def test_update_missing_user(self, service):
        outcome = service.update_user("nope", UpdateUserRequest(email="x@example.com"))
        assert isinstance(outcome, NotFound)


class TestDeleteUser:
    def test_delete_is_success_empty(self, service, repo):
        user = repo.add("ann.example", "ann@example.com")
        outcome = service.delete_user(user.id)
        assert isinstance(outcome, SuccessEmpty)
        assert repo.get(user.id) is None

    def test_delete_protected_user_is_forbidden(self, service, repo):
        admin = repo.add("administrator", "admin@example.com", protected=True)
        outcome = service.delete_user(admin.id)
        assert isinstance(outcome, Forbidden)
        assert repo.get(admin.id) is not None

    def test_delete_missing_user(self, service):
        assert isinstance(service.delete_user("nope"), NotFound)

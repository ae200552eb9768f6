"""User operations expressed as Outcomes.

UserService never raises for expected failures: a missing user, a rule
violation or a protected record all come back as the matching Outcome so
the router can hand them straight to the mapper.

Validation rules:
- username is required and must be at least 8 characters long
- email is required and must look like an email address
"""

from __future__ import annotations

import logging
import re
from dataclasses import replace

from api_envelope.models.outcomes import (
    Outcome,
    build_forbidden,
    build_not_found,
    build_success,
    build_success_empty,
    build_validation_failure,
    paginate,
)
from api_envelope.models.users import CreateUserRequest, UpdateUserRequest
from api_envelope.services.user_repository import UserRepository

logger = logging.getLogger(__name__)

MIN_USERNAME_LENGTH = 8

_EMAIL_PATTERN = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")


def _username_errors(username: str | None) -> list[str]:
    if username is None or not username.strip():
        return ["Username is required", f"Username must be {MIN_USERNAME_LENGTH} character long"]
    if len(username.strip()) < MIN_USERNAME_LENGTH:
        return [f"Username must be {MIN_USERNAME_LENGTH} character long"]
    return []


def _email_errors(email: str | None) -> list[str]:
    if email is None or not email.strip():
        return ["Email is required", "Email must be valid email address"]
    if not _EMAIL_PATTERN.match(email.strip()):
        return ["Email must be valid email address"]
    return []


class UserService:
    """User CRUD on top of a UserRepository.

    Parameters
    ----------
    repository:
        Storage collaborator.
    """

    def __init__(self, repository: UserRepository) -> None:
        self._repository = repository

    def list_users(self, page: int, limit: int) -> Outcome:
        return paginate(self._repository.list_all(), page=page, limit=limit)

    def get_user(self, user_id: str) -> Outcome:
        user = self._repository.get(user_id)
        if user is None:
            return build_not_found("User not found")
        return build_success(user)

    def create_user(self, payload: CreateUserRequest) -> Outcome:
        """Create a user. Returns the new record, which maps to 200."""
        errors: dict[str, list[str]] = {}
        if username_errors := _username_errors(payload.username):
            errors["username"] = username_errors
        if email_errors := _email_errors(payload.email):
            errors["email"] = email_errors
        if errors:
            return build_validation_failure(errors)

        user = self._repository.add(payload.username.strip(), payload.email.strip())
        logger.info("Created user %s", user.id)
        return build_success(user, "User created successfully")

    def update_user(self, user_id: str, payload: UpdateUserRequest) -> Outcome:
        """Apply the supplied fields. Rules only run for fields present in the body."""
        user = self._repository.get(user_id)
        if user is None:
            return build_not_found("User not found")

        errors: dict[str, list[str]] = {}
        if payload.username is not None and (username_errors := _username_errors(payload.username)):
            errors["username"] = username_errors
        if payload.email is not None and (email_errors := _email_errors(payload.email)):
            errors["email"] = email_errors
        if errors:
            return build_validation_failure(errors)

        updated = replace(
            user,
            username=payload.username.strip() if payload.username is not None else user.username,
            email=payload.email.strip() if payload.email is not None else user.email,
        )
        self._repository.save(updated)
        return build_success(updated, "User updated successfully")

    def delete_user(self, user_id: str) -> Outcome:
        """Delete a user. No payload, so this maps to 201."""
        user = self._repository.get(user_id)
        if user is None:
            return build_not_found("User not found")
        if user.protected:
            return build_forbidden("Protected users cannot be deleted")

        self._repository.delete(user_id)
        logger.info("Deleted user %s", user_id)
        return build_success_empty("User deleted successfully")

"""Request models and the in-memory record for the demo user API."""

from __future__ import annotations

from dataclasses import dataclass

from pydantic import BaseModel


class CreateUserRequest(BaseModel):
    """Body for ``POST /api/v1/users``.

    Fields are deliberately optional: presence and format rules are checked
    by ``UserService`` so every failure comes back as per-field messages.
    """

    username: str | None = None
    email: str | None = None


class UpdateUserRequest(BaseModel):
    """Body for ``PUT /api/v1/users/{user_id}``. Omitted fields are left unchanged."""

    username: str | None = None
    email: str | None = None


@dataclass
class User:
    id: str
    username: str
    email: str
    protected: bool = False  # protected users cannot be deleted

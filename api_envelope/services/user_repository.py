"""User persistence interface and the in-memory implementation used by the demo."""

from __future__ import annotations

from typing import Protocol
from uuid import uuid4

from api_envelope.models.users import User


class UserRepository(Protocol):
    def list_all(self) -> list[User]: ...

    def get(self, user_id: str) -> User | None: ...

    def add(self, username: str, email: str, *, protected: bool = False) -> User: ...

    def save(self, user: User) -> User: ...

    def delete(self, user_id: str) -> bool: ...


class InMemoryUserRepository:
    """Dict-backed repository. Insertion order is the listing order."""

    def __init__(self) -> None:
        self._users: dict[str, User] = {}

    def list_all(self) -> list[User]:
        return list(self._users.values())

    def get(self, user_id: str) -> User | None:
        return self._users.get(user_id)

    def add(self, username: str, email: str, *, protected: bool = False) -> User:
        user = User(id=str(uuid4()), username=username, email=email, protected=protected)
        self._users[user.id] = user
        return user

    def save(self, user: User) -> User:
        self._users[user.id] = user
        return user

    def delete(self, user_id: str) -> bool:
        return self._users.pop(user_id, None) is not None


def seed_demo_users(repository: UserRepository) -> None:
    """Populate a fresh repository with a protected admin and one regular user."""
    repository.add("administrator", "admin@example.com", protected=True)
    repository.add("ann.example", "ann@example.com")

"""Service layer: user operations and their storage collaborator."""

from api_envelope.services.user_repository import (
    InMemoryUserRepository,
    UserRepository,
    seed_demo_users,
)
from api_envelope.services.user_service import UserService

__all__ = ["InMemoryUserRepository", "UserRepository", "UserService", "seed_demo_users"]

"""User endpoints.

- GET    /api/v1/users            paginated list
- GET    /api/v1/users/{user_id}  single user
- POST   /api/v1/users            create (200 with the new user)
- PUT    /api/v1/users/{user_id}  update supplied fields
- DELETE /api/v1/users/{user_id}  delete (201, no payload)

Every handler returns ``render(outcome)``; status codes come from the mapper.
"""

from __future__ import annotations

from fastapi import APIRouter, Query
from fastapi.responses import JSONResponse

from api_envelope.models.users import CreateUserRequest, UpdateUserRequest
from api_envelope.services.user_service import UserService
from api_envelope.transport import render


def create_users_router(*, user_service: UserService, default_page_limit: int = 10) -> APIRouter:
    """Factory that creates the users router with injected dependencies."""

    users_router = APIRouter(prefix="/api/v1/users", tags=["users"])

    @users_router.get("")
    async def list_users(
        page: int = Query(default=1, ge=1),
        limit: int = Query(default=default_page_limit, ge=1),
    ) -> JSONResponse:
        return render(user_service.list_users(page=page, limit=limit))

    @users_router.get("/{user_id}")
    async def get_user(user_id: str) -> JSONResponse:
        return render(user_service.get_user(user_id))

    @users_router.post("")
    async def create_user(body: CreateUserRequest) -> JSONResponse:
        return render(user_service.create_user(body))

    @users_router.put("/{user_id}")
    async def update_user(user_id: str, body: UpdateUserRequest) -> JSONResponse:
        return render(user_service.update_user(user_id, body))

    @users_router.delete("/{user_id}")
    async def delete_user(user_id: str) -> JSONResponse:
        return render(user_service.delete_user(user_id))

    return users_router

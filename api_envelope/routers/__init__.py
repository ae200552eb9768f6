"""HTTP routers."""

from api_envelope.routers.health import create_health_router
from api_envelope.routers.users import create_users_router

__all__ = ["create_health_router", "create_users_router"]

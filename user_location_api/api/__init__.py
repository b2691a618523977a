"""
API endpoints package
"""
from .health import router as health_router
from .users_location import router as users_location_router

__all__ = [
    "health_router",
    "users_location_router"
]

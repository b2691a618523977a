"""
Data access layer (Repository pattern)
"""
from .location_repository import LocationRepository
from .user_repository import UserRepository

__all__ = [
    "LocationRepository",
    "UserRepository"
]

"""
Database models package
"""
from user_location_api.models.base import Base
from user_location_api.models.location import Location
from user_location_api.models.user import User

__all__ = [
    "Base",
    "Location",
    "User"
]

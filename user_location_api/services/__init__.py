"""
Business services package
"""
from .seed_service import seed_demo_data
from .user_location_service import UserLocationService

__all__ = [
    "seed_demo_data",
    "UserLocationService"
]

"""
Pydantic schemas for response validation
"""
from .health import HealthCheckResponse, RootResponse
from .user_location import UserLocationView

__all__ = [
    "HealthCheckResponse",
    "RootResponse",
    "UserLocationView"
]

"""
Entity to response view mappers
"""
from .user_location import DataIntegrityError, LocationMissingError, to_view

__all__ = [
    "DataIntegrityError",
    "LocationMissingError",
    "to_view"
]

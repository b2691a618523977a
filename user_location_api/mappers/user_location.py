"""
Entity to view mapping for user locations
"""

from user_location_api.models.user import User
from user_location_api.schemas.user_location import UserLocationView


class DataIntegrityError(Exception):
    """Raised when a persisted record violates an invariant of the read path."""
    pass


class LocationMissingError(DataIntegrityError):
    """Raised when a user does not reference a location."""

    def __init__(self, user_id):
        self.user_id = user_id
        super().__init__(f"User {user_id} has no location")


def to_view(user: User) -> UserLocationView:
    """
    Flatten a user and its location into a UserLocationView.

    Args:
        user: User with its location loaded

    Returns:
        View built from the user's id and email and the location's coordinates

    Raises:
        LocationMissingError: If the user has no location
    """
    location = user.location
    if location is None:
        raise LocationMissingError(user.id)

    return UserLocationView(
        userId=user.id,
        email=user.email,
        place=location.place,
        longitude=location.longitude,
        latitude=location.latitude,
    )

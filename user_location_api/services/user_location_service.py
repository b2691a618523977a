"""
User location query service
"""

import logging
from typing import List, Optional

from user_location_api.mappers.user_location import to_view
from user_location_api.repositories.user_repository import UserRepository
from user_location_api.schemas.user_location import UserLocationView

logger = logging.getLogger(__name__)


class UserLocationService:
    """Service combining user retrieval with the location view mapping"""

    def __init__(self, user_repository: UserRepository):
        self.user_repository = user_repository

    async def list_all_views(self) -> List[UserLocationView]:
        """
        Get the location view of every user.

        Returns:
            One view per user, in repository order
        """
        users = await self.user_repository.get_all()
        logger.debug(f"Mapping {len(users)} users to location views")
        return [to_view(user) for user in users]

    async def get_view_by_id(self, user_id: int) -> Optional[UserLocationView]:
        """
        Get the location view of a single user.

        Args:
            user_id: ID of the user

        Returns:
            The user's view, or None if no such user exists
        """
        user = await self.user_repository.get_by_id(user_id)
        if user is None:
            return None
        return to_view(user)

"""Repository for location data access."""

from typing import Optional

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from user_location_api.core.database import get_db
from user_location_api.models.location import Location
from user_location_api.repositories.user_repository import MAX_ID, MIN_ID


class LocationRepository:
    """Repository for location database operations."""

    def __init__(self, session_maker: async_sessionmaker[AsyncSession]):
        self._session_maker = session_maker

    async def save(self, location: Location) -> Location:
        """
        Persist a location.

        Args:
            location: Location object to store

        Returns:
            Stored location with its generated ID
        """
        async with get_db(self._session_maker) as session:
            session.add(location)
            await session.commit()
            await session.refresh(location)
            return location

    async def get_by_id(self, location_id: int) -> Optional[Location]:
        """
        Get a location by ID.

        Returns:
            Location object if found, None otherwise
        """
        if not MIN_ID <= location_id <= MAX_ID:
            return None
        async with get_db(self._session_maker) as session:
            return await session.get(Location, location_id)

    async def count(self) -> int:
        """Return the number of stored locations."""
        async with get_db(self._session_maker) as session:
            result = await session.execute(select(func.count(Location.id)))
            return result.scalar() or 0

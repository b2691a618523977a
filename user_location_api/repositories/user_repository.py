"""Repository for user data access."""

from typing import List, Optional

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker
from sqlalchemy.orm import joinedload

from user_location_api.core.database import get_db
from user_location_api.models.user import User

# Signed 64-bit range of an INTEGER primary key
MIN_ID = -(2 ** 63)
MAX_ID = 2 ** 63 - 1


class UserRepository:
    """
    Repository for user database operations.

    Reads always fetch the referenced location through an explicit join, so
    returned users are safe to use after their session has closed.
    """

    def __init__(self, session_maker: async_sessionmaker[AsyncSession]):
        self._session_maker = session_maker

    async def save(self, user: User) -> User:
        """
        Persist a user.

        Args:
            user: User object to store, referencing its location by ``location_id``

        Returns:
            Stored user with its generated ID
        """
        async with get_db(self._session_maker) as session:
            session.add(user)
            await session.commit()  # Explicit commit for write operation
            await session.refresh(user)
            return user

    async def get_all(self) -> List[User]:
        """
        Get every user together with its location.

        Returns:
            Users ordered by ID
        """
        async with get_db(self._session_maker) as session:
            result = await session.execute(
                select(User).options(joinedload(User.location)).order_by(User.id)
            )
            return list(result.scalars().all())

    async def get_by_id(self, user_id: int) -> Optional[User]:
        """
        Get a user by ID together with its location.

        Args:
            user_id: ID of the user

        Returns:
            User object if found, None otherwise
        """
        if not MIN_ID <= user_id <= MAX_ID:
            return None
        async with get_db(self._session_maker) as session:
            result = await session.execute(
                select(User).options(joinedload(User.location)).where(User.id == user_id)
            )
            return result.scalar_one_or_none()

    async def count(self) -> int:
        """Return the number of stored users."""
        async with get_db(self._session_maker) as session:
            result = await session.execute(select(func.count(User.id)))
            return result.scalar() or 0

"""
FastAPI dependency providers wiring repositories and services
"""
from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from user_location_api.core.database import get_session_maker
from user_location_api.repositories.user_repository import UserRepository
from user_location_api.services.user_location_service import UserLocationService


def get_user_repository(
    session_maker: async_sessionmaker[AsyncSession] = Depends(get_session_maker),
) -> UserRepository:
    """Build a user repository on the request's session factory"""
    return UserRepository(session_maker)


def get_user_location_service(
    user_repository: UserRepository = Depends(get_user_repository),
) -> UserLocationService:
    """Build the user location service"""
    return UserLocationService(user_repository)

"""
User location API endpoints
"""
import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException, status

from user_location_api.api.dependencies import get_user_location_service
from user_location_api.schemas.user_location import UserLocationView
from user_location_api.services.user_location_service import UserLocationService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/users-location", tags=["users-location"])


@router.get("", response_model=List[UserLocationView])
async def get_all_users_location(
    service: UserLocationService = Depends(get_user_location_service),
):
    """
    List every user with the location it references.

    Returns:
        Array of user location views
    """
    return await service.list_all_views()


@router.get("/{userId}", response_model=UserLocationView)
async def get_user_location_by_user_id(
    userId: int,
    service: UserLocationService = Depends(get_user_location_service),
):
    """
    Get a single user's location view.

    Args:
        userId: ID of the user

    Returns:
        User location view
    """
    view = await service.get_view_by_id(userId)
    if view is None:
        logger.info(f"User location requested for unknown user {userId}")
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"User {userId} not found"
        )
    return view

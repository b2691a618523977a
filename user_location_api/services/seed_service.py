"""
Demo data seeding
"""

import logging
from typing import List

from user_location_api.models.location import Location
from user_location_api.models.user import User
from user_location_api.repositories.location_repository import LocationRepository
from user_location_api.repositories.user_repository import UserRepository

logger = logging.getLogger(__name__)

DEMO_LOCATION = {
    "place": "St Petersburg",
    "description": "St Petersburg is  a great place to live",
    "longitude": 40.5,
    "latitude": 30.6,
}

DEMO_USERS = [
    {
        "first_name": "Paul",
        "last_name": "Ryan",
        "email": "paul@ryan.com",
        "password": "secret",
    },
    {
        "first_name": "Elton",
        "last_name": "John",
        "email": "john@elton.com",
        "password": "s3cr3t",
    },
]


async def seed_demo_data(
    location_repository: LocationRepository,
    user_repository: UserRepository,
) -> List[User]:
    """
    Insert one location and two users referencing it.

    Skipped when users already exist, so repeated startups do not
    duplicate the fixture.

    Returns:
        The users created, empty if seeding was skipped
    """
    existing = await user_repository.count()
    if existing:
        logger.info(f"Skipping demo seed, {existing} users already present")
        return []

    location = await location_repository.save(Location(**DEMO_LOCATION))

    users = []
    for user_data in DEMO_USERS:
        user = await user_repository.save(User(location_id=location.id, **user_data))
        users.append(user)

    logger.info(f"Seeded demo location {location.id} with {len(users)} users")
    return users

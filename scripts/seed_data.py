#!/usr/bin/env python3
"""
Database seeding script for the Users Location API
"""
import asyncio

from user_location_api.core.database import async_engine, async_session_maker, init_db
from user_location_api.repositories import LocationRepository, UserRepository
from user_location_api.services.seed_service import seed_demo_data


async def main():
    """Main seeding function"""
    print("🌱 Starting database seeding...")

    try:
        await init_db()
        users = await seed_demo_data(
            LocationRepository(async_session_maker),
            UserRepository(async_session_maker),
        )
        if not users:
            print("⚠️  Database already seeded, skipping...")
            return
        print(f"🎉 Seeded {len(users)} users successfully!")
    except Exception as e:
        print(f"❌ Error seeding database: {e}")
        raise
    finally:
        await async_engine.dispose()


if __name__ == "__main__":
    asyncio.run(main())

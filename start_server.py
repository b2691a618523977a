#!/usr/bin/env python3
"""
Development server startup script
"""
import os

if __name__ == "__main__":
    import uvicorn

    from user_location_api.core.config import settings

    print("🚀 Starting Users Location API server...")
    print("📁 Working directory:", os.getcwd())
    print("🗄️  Database:", settings.DATABASE_URL_ASYNC)
    print("🌱 Demo seeding:", "enabled" if settings.SEED_DEMO_DATA else "disabled")
    print("=" * 50)

    uvicorn.run(
        "user_location_api.main:app",
        host="0.0.0.0",
        port=8000,
        reload=settings.is_development,
        reload_dirs=["user_location_api"],
        log_level=settings.LOG_LEVEL.lower()
    )

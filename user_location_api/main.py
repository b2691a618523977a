"""
Users Location FastAPI Application Entry Point
"""
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
import logging

from user_location_api.api import health, users_location
from user_location_api.core.config import settings
from user_location_api.core.database import async_session_maker, init_db
from user_location_api.mappers.user_location import DataIntegrityError
from user_location_api.middleware.security_headers import SecurityHeadersMiddleware
from user_location_api.repositories import LocationRepository, UserRepository
from user_location_api.services.seed_service import seed_demo_data

# Configure logging
logging.basicConfig(level=logging.DEBUG if settings.is_development else settings.LOG_LEVEL)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Create the schema and load the demo fixture on startup"""
    await init_db()
    if settings.SEED_DEMO_DATA:
        await seed_demo_data(
            LocationRepository(async_session_maker),
            UserRepository(async_session_maker),
        )
    logger.info(f"{settings.APP_NAME} started")
    yield


app = FastAPI(
    title=settings.APP_NAME,
    description="Users joined to their locations",
    version=settings.APP_VERSION,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list,
    allow_credentials=True,
    allow_methods=["GET", "OPTIONS"],
    allow_headers=["*"],
)

# Add security headers middleware
app.add_middleware(SecurityHeadersMiddleware)


@app.exception_handler(DataIntegrityError)
async def data_integrity_error_handler(request: Request, exc: DataIntegrityError):
    """Fail the single request when stored data breaks a read-path invariant"""
    logger.error(f"Data integrity error on {request.method} {request.url.path}: {str(exc)}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": f"Data integrity error: {str(exc)}"}
    )


# API routes
app.include_router(health.router)
app.include_router(users_location.router)


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "user_location_api.main:app",
        host="0.0.0.0",
        port=8000,
        reload=settings.is_development
    )

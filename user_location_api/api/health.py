"""
Service status endpoints
"""
import logging

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from user_location_api.core.config import settings
from user_location_api.core.database import get_db, get_session_maker
from user_location_api.schemas.health import HealthCheckResponse, RootResponse

logger = logging.getLogger(__name__)

router = APIRouter(tags=["health"])

SERVICE_NAME = "users-location-api"


@router.get("/", response_model=RootResponse)
async def root():
    """Root endpoint"""
    return {"message": f"{settings.APP_NAME} is running", "version": settings.APP_VERSION}


@router.get("/health", response_model=HealthCheckResponse)
async def health_check(
    session_maker: async_sessionmaker[AsyncSession] = Depends(get_session_maker),
):
    """Health check endpoint, verifies the database answers a trivial query"""
    try:
        async with get_db(session_maker) as session:
            await session.execute(text("SELECT 1"))
    except SQLAlchemyError as e:
        logger.error(f"Database health check failed: {str(e)}")
        return JSONResponse(
            status_code=503,
            content={"status": "unhealthy", "service": SERVICE_NAME, "database": "unavailable"}
        )
    return {"status": "healthy", "service": SERVICE_NAME, "database": "ok"}

"""Schemas for service status endpoints."""

from pydantic import BaseModel


class RootResponse(BaseModel):
    """Response model for the root endpoint"""
    message: str
    version: str


class HealthCheckResponse(BaseModel):
    """Response model for the health check"""
    status: str
    service: str
    database: str

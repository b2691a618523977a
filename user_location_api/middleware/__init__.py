"""
Middleware package for FastAPI application
"""
from .security_headers import SecurityHeadersMiddleware

__all__ = ["SecurityHeadersMiddleware"]

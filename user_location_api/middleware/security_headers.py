"""
Security headers middleware to ensure all responses include required security headers
"""
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
import logging

logger = logging.getLogger(__name__)

SECURITY_HEADERS = {
    "X-Content-Type-Options": "nosniff",
    "X-Frame-Options": "DENY",
    "Referrer-Policy": "strict-origin-when-cross-origin",
}

READ_PATH_PREFIX = "/users-location"
READ_CACHE_CONTROL = "public, max-age=300"


class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    """
    Middleware to add security headers to all responses
    """

    async def dispatch(self, request: Request, call_next):
        response = await call_next(request)

        for header, value in SECURITY_HEADERS.items():
            response.headers.setdefault(header, value)

        # Only successful reads are cacheable
        if (
            request.method == "GET"
            and request.url.path.startswith(READ_PATH_PREFIX)
            and response.status_code == 200
        ):
            response.headers["Cache-Control"] = READ_CACHE_CONTROL
        else:
            response.headers["Cache-Control"] = "no-store"

        logger.debug(f"Added security headers to {request.method} {request.url.path}")

        return response

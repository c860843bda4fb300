"""
Middleware configuration for the application.
Includes Correlation ID setup, request logging and CORS.
"""

import time
import structlog
from typing import Callable
from fastapi import Request, Response
from fastapi.middleware.cors import CORSMiddleware
from asgi_correlation_id import CorrelationIdMiddleware
from starlette.middleware.base import BaseHTTPMiddleware

from app.config import get_settings

logger = structlog.get_logger(__name__)


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Log each API request with its status and timing."""

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        # Static media is served without logging
        if request.url.path.startswith("/uploads/"):
            return await call_next(request)

        start_time = time.perf_counter()
        try:
            response = await call_next(request)
        except Exception:
            logger.exception(
                "Request failed",
                method=request.method,
                path=request.url.path,
                process_time_ms=round((time.perf_counter() - start_time) * 1000, 2),
            )
            raise

        logger.info(
            "Request completed",
            method=request.method,
            path=request.url.path,
            status_code=response.status_code,
            client_ip=request.client.host if request.client else "unknown",
            process_time_ms=round((time.perf_counter() - start_time) * 1000, 2),
        )
        return response


def setup_middleware(app):
    """Setup all middleware for the application.

    Starlette runs middleware in reverse order of addition, so CORS is added
    last to wrap everything and answer preflight requests first.
    """
    settings = get_settings()

    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(
        CorrelationIdMiddleware,
        header_name="X-Request-ID",
        update_request_header=True,
    )
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=["X-Request-ID"],
    )

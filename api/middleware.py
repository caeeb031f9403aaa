"""
Consolidated middleware for the MacroRelay API
"""

import time
import logging
from uuid import uuid4

from fastapi import Request, status
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import Response

from api.dependencies import get_rate_limiter
from app.exceptions import RelayError, RateLimitError

logger = logging.getLogger("macrorelay.middleware")


# ============================================================================
# Helper Functions
# ============================================================================


def client_key(request: Request) -> str:
    """Identify the caller for rate limiting"""
    return request.client.host if request.client else "unknown"


def error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


# ============================================================================
# Request Logging Middleware
# ============================================================================


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Middleware to log all HTTP requests and responses"""

    async def dispatch(self, request: Request, call_next):
        # Generate unique request ID
        request_id = str(uuid4())
        request.state.request_id = request_id

        logger.info(
            "Request started",
            extra={
                "request_id": request_id,
                "method": request.method,
                "url": str(request.url),
                "client": request.client.host if request.client else None,
            },
        )

        start_time = time.time()

        try:
            response: Response = await call_next(request)
            process_time = time.time() - start_time

            logger.info(
                "Request completed",
                extra={
                    "request_id": request_id,
                    "method": request.method,
                    "url": str(request.url),
                    "status_code": response.status_code,
                    "process_time": f"{process_time:.4f}s",
                },
            )

            response.headers["X-Request-ID"] = request_id
            response.headers["X-Process-Time"] = f"{process_time:.4f}"

            return response

        except Exception as exc:
            process_time = time.time() - start_time
            logger.error(
                "Request failed",
                extra={
                    "request_id": request_id,
                    "method": request.method,
                    "url": str(request.url),
                    "error": str(exc),
                    "process_time": f"{process_time:.4f}s",
                },
                exc_info=True,
            )
            raise


# ============================================================================
# Rate Limiting Middleware
# ============================================================================


class RateLimitMiddleware(BaseHTTPMiddleware):
    """Reject requests once a client exhausts its window quota.

    The limiter is read from ``app.state.rate_limiter`` so the application
    factory owns its lifetime.
    """

    async def dispatch(self, request: Request, call_next):
        limiter = get_rate_limiter(request)
        key = client_key(request)

        if not limiter.hit(key):
            exc = RateLimitError()
            logger.warning(f"Rate limit exceeded for {key} on {request.url.path}")
            return JSONResponse(status_code=exc.http_status, content=exc.to_dict())

        return await call_next(request)


# ============================================================================
# Error Handlers
# ============================================================================


async def relay_exception_handler(request: Request, exc: RelayError):
    """Handle domain errors using their own status code"""
    if exc.http_status >= 500:
        logger.error(f"Error on {request.url}: {exc.message}")
    else:
        logger.warning(f"Client error on {request.url}: {exc.message}")

    return JSONResponse(status_code=exc.http_status, content=exc.to_dict())


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Handle request parsing errors (malformed JSON, bad parameter types)"""
    logger.warning(f"Validation error on {request.url}: {exc.errors()}")

    return error_response(status.HTTP_400_BAD_REQUEST, "Invalid request body.")


async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    """Handle HTTP exceptions"""
    logger.warning(f"HTTP {exc.status_code} on {request.url}: {exc.detail}")

    return error_response(exc.status_code, str(exc.detail))


async def general_exception_handler(request: Request, exc: Exception):
    """Handle unexpected errors"""
    logger.exception(f"Unexpected error on {request.url}: {str(exc)}")

    return error_response(
        status.HTTP_500_INTERNAL_SERVER_ERROR, "An unexpected error occurred"
    )

"""
MacroRelay FastAPI Application
Main entry point: meal macro estimation and USDA food search relay
"""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException
import logging
import uvicorn
from contextlib import asynccontextmanager
from typing import Optional

from api.routes import health, meals, foods
from adapters import CompletionClient, FoodDataClient
from services.rate_limiter import FixedWindowRateLimiter

from app.config import Settings, settings as default_settings

from api.middleware import (
    RequestLoggingMiddleware,
    RateLimitMiddleware,
    relay_exception_handler,
    validation_exception_handler,
    http_exception_handler,
    general_exception_handler,
)
from app.exceptions import RelayError

# Setup logging with configured level and format
logging.basicConfig(
    level=getattr(logging, default_settings.log_level.upper()),
    format=default_settings.log_format,
)
_logger = logging.getLogger("macrorelay.main")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Lifespan context manager for application startup and shutdown.
    Logs the listening address and releases provider connections on exit.
    """
    config: Settings = app.state.settings
    _logger.info(
        f"Starting {config.app_name} {config.app_version} in {config.environment.value} mode"
    )
    _logger.info(f"Server running on port {config.port}")
    _logger.info(f"Health check: http://localhost:{config.port}/health")
    if not config.has_completion_credentials():
        _logger.warning("GROQ_API_KEY is not set; meal estimation will return 500")

    try:
        yield
    finally:
        _logger.info(f"Shutting down {config.app_name}")
        try:
            await app.state.completion_client.close()
        except Exception as e:
            _logger.exception("Error closing completion client during shutdown: %s", e)


def create_app(
    config: Optional[Settings] = None,
    completion_client: Optional[CompletionClient] = None,
    food_data_client: Optional[FoodDataClient] = None,
    rate_limiter: Optional[FixedWindowRateLimiter] = None,
) -> FastAPI:
    """
    Build the application and its shared components.

    The rate limiter and provider clients are created once here and stored on
    ``app.state``; middleware and routes reach them through
    ``api.dependencies``.
    """
    config = config or default_settings

    application = FastAPI(
        title=config.api_title,
        version=config.app_version,
        description=config.api_description,
        lifespan=lifespan,
        debug=config.debug,
        openapi_url="/openapi.json" if not config.is_production() else None,
        docs_url="/docs" if not config.is_production() else None,
        redoc_url="/redoc" if not config.is_production() else None,
    )

    application.state.settings = config
    # Compare against None: an empty limiter has len() == 0 and is falsy
    if rate_limiter is None:
        rate_limiter = FixedWindowRateLimiter(
            max_requests=config.rate_limit_max_requests,
            window_seconds=config.rate_limit_window_sec,
        )
    if completion_client is None:
        completion_client = CompletionClient(
            api_key=config.groq_api_key,
            base_url=config.groq_base_url,
            model=config.groq_model,
            temperature=config.groq_temperature,
        )
    if food_data_client is None:
        food_data_client = FoodDataClient(
            api_key=config.usda_api_key,
            base_url=config.usda_api_url,
            data_types=config.usda_data_types,
        )
    application.state.rate_limiter = rate_limiter
    application.state.completion_client = completion_client
    application.state.food_data_client = food_data_client

    # Innermost first: rate limit, then CORS, then request logging outermost
    application.add_middleware(RateLimitMiddleware)
    application.add_middleware(
        CORSMiddleware,
        allow_origins=config.cors_origins,
        allow_credentials=False,
        allow_methods=config.cors_allow_methods,
        allow_headers=config.cors_allow_headers,
    )
    application.add_middleware(RequestLoggingMiddleware)

    # Register exception handlers
    application.add_exception_handler(RelayError, relay_exception_handler)
    application.add_exception_handler(RequestValidationError, validation_exception_handler)
    application.add_exception_handler(StarletteHTTPException, http_exception_handler)
    application.add_exception_handler(Exception, general_exception_handler)

    application.include_router(health.router)
    application.include_router(meals.router)
    application.include_router(foods.router)

    return application


app = create_app()


if __name__ == "__main__":
    uvicorn.run(
        "main:app",
        host=default_settings.host,
        port=default_settings.port,
        reload=default_settings.is_development(),
        log_level=default_settings.log_level.lower(),
    )

"""
API dependencies for dependency injection
"""

from fastapi import Request

from adapters import CompletionClient, FoodDataClient
from services.rate_limiter import FixedWindowRateLimiter


def get_completion_client(request: Request) -> CompletionClient:
    """
    Completion provider client dependency for FastAPI routes.

    Usage:
        @router.post("/example")
        async def example(client: CompletionClient = Depends(get_completion_client)):
            ...
    """
    return request.app.state.completion_client


def get_food_data_client(request: Request) -> FoodDataClient:
    """USDA search client dependency for FastAPI routes."""
    return request.app.state.food_data_client


def get_rate_limiter(request: Request) -> FixedWindowRateLimiter:
    return request.app.state.rate_limiter

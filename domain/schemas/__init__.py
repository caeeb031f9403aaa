"""
Domain schemas package - Pydantic models for validation.
"""

from domain.schemas.meal_schemas import (
    MealEstimateRequest,
    MealItem,
    MealEstimate,
)
from domain.schemas.health_schemas import HealthResponse

__all__ = [
    "MealEstimateRequest",
    "MealItem",
    "MealEstimate",
    "HealthResponse",
]

"""Services package - Business logic layer"""

from services.rate_limiter import FixedWindowRateLimiter, RateLimitEntry
from services.meal_estimation_service import MealEstimationService
from services.food_search_service import FoodSearchService

# Note: meal_validation contains utility functions, not a class

__all__ = [
    "FixedWindowRateLimiter",
    "RateLimitEntry",
    "MealEstimationService",
    "FoodSearchService",
]

"""
Adapters package - External service connections.
Clients for the completion provider and the USDA food database.
"""

from adapters.completion_adapter import CompletionClient
from adapters.food_data_adapter import FoodDataClient

__all__ = [
    "CompletionClient",
    "FoodDataClient",
]

"""API routes package"""

from . import health, meals, foods

__all__ = ["health", "meals", "foods"]

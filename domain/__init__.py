"""
Domain layer - Meal estimate schemas, enums, and the estimation prompt.
"""

from domain import enums, prompts, schemas

__all__ = ["enums", "prompts", "schemas"]

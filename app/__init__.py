"""
App package - Application configuration and core utilities.
Contains settings, exceptions, and foundational application code.
"""

from app.config import settings
from app.exceptions import (
    RelayError,
    ClientInputError,
    ConfigurationError,
    UpstreamError,
    RateLimitError,
)

__all__ = [
    "settings",
    "RelayError",
    "ClientInputError",
    "ConfigurationError",
    "UpstreamError",
    "RateLimitError",
]

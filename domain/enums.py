"""
Domain enums for MacroRelay.
Contains the enumeration types shared by the prompt and the meal schemas.
"""

import enum


class Confidence(str, enum.Enum):
    """How sure the completion provider is about a meal estimate"""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"

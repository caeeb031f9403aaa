"""
Shape validation and normalization of completion-provider meal estimates.

The provider is asked (see ``domain.prompts``) for a JSON object with a fixed
schema. Nothing guarantees it complies, so every field is checked here before
the payload is rounded and handed back to the client.
"""

import logging
import math
from dataclasses import dataclass
from typing import Any, Mapping, Optional

from pydantic import ValidationError

from domain.schemas.meal_schemas import MealEstimate

logger = logging.getLogger("macrorelay.meal_validation")

INVALID_FORMAT_MESSAGE = "Invalid response format from AI service"
INVALID_ITEM_MESSAGE = "Invalid item format in AI response"

_ITEM_TEXT_FIELDS = ("name", "quantity")
_NUMERIC_FIELDS = ("calories", "protein", "carbs", "fat")
_TOTAL_NUMERIC_FIELDS = ("total_calories", "protein", "carbs", "fat")


@dataclass(frozen=True)
class MealValidationResult:
    """Either a normalized estimate or the reason the payload was rejected."""

    estimate: Optional[MealEstimate] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None


def _is_number(value: Any) -> bool:
    # bool is an int subclass but not a JSON number
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    # json.loads accepts NaN/Infinity and overflows 1e400 to inf
    try:
        return math.isfinite(value)
    except OverflowError:
        return False


def _round_half_up(value: float, digits: int = 0) -> float:
    factor = 10 ** digits
    return math.floor(value * factor + 0.5) / factor


def round_calories(value: float) -> int:
    """Round calories to the nearest integer, ties towards +infinity."""
    return int(_round_half_up(value))


def round_macro(value: float) -> float:
    """Round grams of protein, carbs or fat to one decimal place.

    Ties go towards +infinity (3.25 -> 3.3), and an already rounded value is
    returned unchanged.
    """
    return _round_half_up(value, 1)


def _check_shape(payload: Any) -> Optional[str]:
    if not isinstance(payload, Mapping):
        return INVALID_FORMAT_MESSAGE
    if not isinstance(payload.get("description"), str):
        return INVALID_FORMAT_MESSAGE
    if not isinstance(payload.get("items"), list):
        return INVALID_FORMAT_MESSAGE
    if not all(_is_number(payload.get(field)) for field in _TOTAL_NUMERIC_FIELDS):
        return INVALID_FORMAT_MESSAGE
    if not isinstance(payload.get("assumptions"), list):
        return INVALID_FORMAT_MESSAGE

    for item in payload["items"]:
        if not isinstance(item, Mapping):
            return INVALID_ITEM_MESSAGE
        if not all(isinstance(item.get(field), str) for field in _ITEM_TEXT_FIELDS):
            return INVALID_ITEM_MESSAGE
        if not all(_is_number(item.get(field)) for field in _NUMERIC_FIELDS):
            return INVALID_ITEM_MESSAGE
    return None


def _normalize_item(item: Mapping[str, Any]) -> dict:
    return {
        **item,
        "calories": round_calories(item["calories"]),
        "protein": round_macro(item["protein"]),
        "carbs": round_macro(item["carbs"]),
        "fat": round_macro(item["fat"]),
    }


def normalize_meal_estimate(payload: Mapping[str, Any]) -> dict:
    """
    Round every numeric field of an already validated estimate.

    Calories (per item and total) become integers, protein/carbs/fat keep one
    decimal place. Unknown keys are copied through. Totals are not recomputed
    from the items: the provider's own totals are trusted.
    """
    return {
        **payload,
        "items": [_normalize_item(item) for item in payload["items"]],
        "total_calories": round_calories(payload["total_calories"]),
        "protein": round_macro(payload["protein"]),
        "carbs": round_macro(payload["carbs"]),
        "fat": round_macro(payload["fat"]),
    }


def validate_meal_estimate(payload: Any) -> MealValidationResult:
    """
    Validate a parsed provider response and normalize it.

    Args:
        payload: Object decoded from the provider's JSON text

    Returns:
        MealValidationResult holding the typed estimate, or the error message
        describing the first shape violation found. Expected mismatches never
        raise.
    """
    error = _check_shape(payload)
    if error is not None:
        logger.warning("Rejected provider payload: %s", error)
        return MealValidationResult(error=error)

    try:
        estimate = MealEstimate.model_validate(normalize_meal_estimate(payload))
    except (ValidationError, OverflowError) as exc:
        logger.warning("Normalized estimate failed schema validation: %s", exc)
        return MealValidationResult(error=INVALID_FORMAT_MESSAGE)

    return MealValidationResult(estimate=estimate)

"""
Validation and normalization of completion-provider meal estimates.
"""

import pytest

from domain.schemas.meal_schemas import MealEstimate
from services.meal_validation import (
    INVALID_FORMAT_MESSAGE,
    INVALID_ITEM_MESSAGE,
    normalize_meal_estimate,
    round_calories,
    round_macro,
    validate_meal_estimate,
)
from test_constants import EGGS_AND_TOAST, CHICKEN_RICE_BROCCOLI
from test_fixtures import provider_payload


# =============================================================================
# ROUNDING
# =============================================================================


@pytest.mark.parametrize(
    "value,expected",
    [(3.25, 3.3), (3.24, 3.2), (12.05, 12.1), (0, 0.0), (1.1, 1.1), (-0.25, -0.2)],
)
def test_round_macro_half_up(value, expected):
    assert round_macro(value) == pytest.approx(expected)


@pytest.mark.parametrize(
    "value,expected", [(181.6, 182), (2.5, 3), (3.5, 4), (262.1, 262), (-2.5, -2)]
)
def test_round_calories_half_up(value, expected):
    result = round_calories(value)
    assert result == expected
    assert isinstance(result, int)


@pytest.mark.parametrize("value", [3.25, 16.21, 13.46, 0.05, 99.99])
def test_round_macro_idempotent(value):
    once = round_macro(value)
    assert round_macro(once) == once


# =============================================================================
# VALID PAYLOADS
# =============================================================================


def test_valid_payload_is_rounded():
    result = validate_meal_estimate(provider_payload(EGGS_AND_TOAST))

    assert result.ok
    estimate = result.estimate
    assert isinstance(estimate, MealEstimate)
    assert estimate.total_calories == 262
    assert estimate.protein == pytest.approx(16.2)
    assert estimate.carbs == pytest.approx(15.0)
    assert estimate.fat == pytest.approx(14.6)

    eggs, toast = estimate.items
    assert eggs.calories == 182
    assert eggs.protein == pytest.approx(12.3)
    assert eggs.carbs == pytest.approx(1.2)
    assert eggs.fat == pytest.approx(13.5)
    assert toast.calories == 81
    assert toast.protein == pytest.approx(4.0)


def test_text_fields_passed_through():
    result = validate_meal_estimate(provider_payload(EGGS_AND_TOAST))
    dumped = result.estimate.model_dump(exclude_unset=True)

    assert dumped["description"] == EGGS_AND_TOAST["description"]
    assert dumped["confidence"] == "high"
    assert dumped["assumptions"] == EGGS_AND_TOAST["assumptions"]
    assert dumped["items"][0]["quantity"] == "2 large eggs"


def test_extra_fields_are_preserved():
    payload = provider_payload(CHICKEN_RICE_BROCCOLI, meal_type="dinner")
    payload["items"][0]["fiber"] = 0

    dumped = validate_meal_estimate(payload).estimate.model_dump(exclude_unset=True)
    assert dumped["meal_type"] == "dinner"
    assert dumped["items"][0]["fiber"] == 0


def test_totals_are_not_recomputed_from_items():
    # the provider's totals are trusted even when they disagree with the items
    payload = provider_payload(EGGS_AND_TOAST, total_calories=999.4)
    result = validate_meal_estimate(payload)

    assert result.ok
    assert result.estimate.total_calories == 999


def test_confidence_is_not_validated():
    payload = provider_payload(EGGS_AND_TOAST, confidence="very sure")
    assert validate_meal_estimate(payload).estimate.confidence == "very sure"


def test_normalization_is_idempotent():
    once = normalize_meal_estimate(provider_payload(EGGS_AND_TOAST))
    twice = normalize_meal_estimate(once)
    assert once == twice


def test_empty_items_are_accepted():
    payload = provider_payload(EGGS_AND_TOAST, items=[])
    assert validate_meal_estimate(payload).ok


# =============================================================================
# INVALID PAYLOADS
# =============================================================================


@pytest.mark.parametrize(
    "field", ["description", "items", "total_calories", "protein", "carbs", "fat", "assumptions"]
)
def test_missing_top_level_field(field):
    payload = provider_payload(EGGS_AND_TOAST)
    del payload[field]

    result = validate_meal_estimate(payload)
    assert not result.ok
    assert result.estimate is None
    assert result.error == INVALID_FORMAT_MESSAGE


@pytest.mark.parametrize(
    "overrides",
    [
        {"total_calories": "262"},
        {"protein": None},
        {"fat": True},
        {"items": {"name": "eggs"}},
        {"assumptions": "none"},
        {"description": 42},
    ],
)
def test_wrong_top_level_type(overrides):
    result = validate_meal_estimate(provider_payload(EGGS_AND_TOAST, **overrides))
    assert result.error == INVALID_FORMAT_MESSAGE


@pytest.mark.parametrize(
    "field,value",
    [
        ("protein", float("inf")),
        ("carbs", float("nan")),
        ("fat", float("-inf")),
        ("total_calories", 10**400),
    ],
)
def test_non_finite_totals_rejected(field, value):
    result = validate_meal_estimate(provider_payload(EGGS_AND_TOAST, **{field: value}))
    assert result.error == INVALID_FORMAT_MESSAGE


@pytest.mark.parametrize("value", [float("nan"), float("inf"), 10**400])
def test_non_finite_item_values_rejected(value):
    payload = provider_payload(EGGS_AND_TOAST)
    payload["items"][0]["calories"] = value

    assert validate_meal_estimate(payload).error == INVALID_ITEM_MESSAGE


@pytest.mark.parametrize("payload", [None, [], "text", 12])
def test_non_object_payload(payload):
    assert validate_meal_estimate(payload).error == INVALID_FORMAT_MESSAGE


@pytest.mark.parametrize(
    "item_overrides",
    [
        {"name": None},
        {"quantity": 2},
        {"calories": "180"},
        {"protein": None},
        {"carbs": False},
        {"fat": [1]},
    ],
)
def test_invalid_item(item_overrides):
    payload = provider_payload(EGGS_AND_TOAST)
    payload["items"][1].update(item_overrides)

    result = validate_meal_estimate(payload)
    assert result.error == INVALID_ITEM_MESSAGE


def test_non_object_item():
    payload = provider_payload(EGGS_AND_TOAST)
    payload["items"].append("bacon")

    assert validate_meal_estimate(payload).error == INVALID_ITEM_MESSAGE

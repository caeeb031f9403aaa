from pydantic import BaseModel, ConfigDict, Field, StrictStr
from typing import Any, List, Optional


class MealEstimateRequest(BaseModel):
    """Schema for a meal estimation request body"""

    userInput: StrictStr = Field(
        ..., min_length=1, description="Free-text meal description"
    )

    model_config = ConfigDict(extra="ignore")


class MealItem(BaseModel):
    """A single food item of an estimated meal, after rounding"""

    name: str
    quantity: str = Field(..., description="Amount with unit (e.g., '2 eggs', '150g')")
    calories: int
    protein: float = Field(..., description="Grams, one decimal place")
    carbs: float = Field(..., description="Grams, one decimal place")
    fat: float = Field(..., description="Grams, one decimal place")

    # Provider-supplied extras are passed through to the client
    model_config = ConfigDict(extra="allow")


class MealEstimate(BaseModel):
    """Normalized meal estimate returned to the client"""

    description: str
    items: List[MealItem]
    total_calories: int
    protein: float
    carbs: float
    fat: float
    confidence: Optional[Any] = Field(
        None, description="low | medium | high, as reported by the provider"
    )
    assumptions: List[Any] = Field(default_factory=list)

    model_config = ConfigDict(extra="allow")

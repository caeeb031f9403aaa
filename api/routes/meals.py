"""Meal macro estimation routes"""

from typing import Any
import logging

from fastapi import APIRouter, Body, Depends

from adapters import CompletionClient
from api.dependencies import get_completion_client
from app.exceptions import ClientInputError, RelayError, UpstreamError
from services import MealEstimationService

router = APIRouter(prefix="/api", tags=["Meals"])
logger = logging.getLogger("macrorelay.api.meals")


@router.post("/estimate-meal")
async def estimate_meal(
    payload: Any = Body(None, examples=[{"userInput": "2 eggs and toast"}]),
    client: CompletionClient = Depends(get_completion_client),
):
    """
    Estimate calories and macros of a free-text meal description.

    The description is sent to the completion provider with a fixed system
    prompt; the returned JSON is validated and rounded before it is returned.

    Args:
        payload: JSON body ``{"userInput": "<meal description>"}``
        client: Completion provider client (injected)

    Returns:
        Normalized meal estimate

    Raises:
        400: If userInput is missing or not a string
        500: Missing credential, provider failure or malformed provider output
    """
    try:
        return await MealEstimationService.estimate(client, payload)
    except ClientInputError:
        raise
    except RelayError as e:
        logger.error(f"Error estimating meal macros: {e}")
        raise
    except Exception as e:
        logger.exception("Error estimating meal macros")
        raise UpstreamError(str(e) or "Error estimating meal macros") from e

from typing import Any, Dict
import json
import logging

from pydantic import ValidationError

from adapters.completion_adapter import CompletionClient
from app.exceptions import ClientInputError, ConfigurationError, UpstreamError
from domain.prompts import MEAL_ESTIMATION_SYSTEM_PROMPT
from domain.schemas.meal_schemas import MealEstimateRequest
from services.meal_validation import validate_meal_estimate

logger = logging.getLogger("macrorelay.meal_estimation")

INVALID_INPUT_MESSAGE = "Invalid request. userInput is required and must be a string."


class MealEstimationService:
    @staticmethod
    def validate_request(payload: Any) -> str:
        """
        Extract the meal description from a request body.

        Args:
            payload: Decoded JSON body (may be anything a client sent)

        Returns:
            The raw ``userInput`` string

        Raises:
            ClientInputError: If the body is not an object or ``userInput`` is
                missing, empty or not a string
        """
        if not isinstance(payload, dict):
            raise ClientInputError(INVALID_INPUT_MESSAGE)
        try:
            return MealEstimateRequest.model_validate(payload).userInput
        except ValidationError as exc:
            raise ClientInputError(INVALID_INPUT_MESSAGE) from exc

    @staticmethod
    async def estimate(client: CompletionClient, payload: Any) -> Dict[str, Any]:
        """
        Estimate the macros of a free-text meal description.

        Flow:
        1. Validate the request body (400 on failure, no outbound call)
        2. Check the completion credential is configured
        3. Ask the provider for a JSON estimate using the fixed system prompt
        4. Parse and validate the returned JSON
        5. Return the rounded estimate

        Raises:
            ClientInputError: On a malformed request body
            ConfigurationError: If the provider key is not configured
            UpstreamError: If the provider fails or returns an unusable payload
        """
        user_input = MealEstimationService.validate_request(payload)

        if not client.is_configured:
            raise ConfigurationError("Groq API key not configured on server")

        logger.info("Estimating meal macros (%d chars)", len(user_input))
        content = await client.complete_json(MEAL_ESTIMATION_SYSTEM_PROMPT, user_input)
        if not content:
            raise UpstreamError("No response from AI service")

        try:
            parsed = json.loads(content)
        except json.JSONDecodeError as exc:
            raise UpstreamError(str(exc)) from exc

        result = validate_meal_estimate(parsed)
        if not result.ok:
            raise UpstreamError(result.error)

        logger.debug(
            "Meal estimate: %d items, %d kcal",
            len(result.estimate.items),
            result.estimate.total_calories,
        )
        return result.estimate.model_dump(exclude_unset=True)

from typing import Any, Optional, Tuple
import logging
import re

from adapters.food_data_adapter import FoodDataClient
from app.exceptions import ClientInputError

logger = logging.getLogger("macrorelay.food_search")

_LEADING_INT = re.compile(r"\s*([+-]?[0-9]+)")


def parse_int_param(value: Optional[str]) -> Optional[int]:
    """
    Parse a query parameter the way ``parseInt(value, 10)`` does.

    Leading whitespace and a sign are accepted, parsing stops at the first
    non-digit ("12abc" -> 12, "1.5" -> 1). Only ASCII digits count. Returns
    None when no digits lead.
    """
    if value is None:
        return None
    match = _LEADING_INT.match(value)
    if match is None:
        return None
    return int(match.group(1))


class FoodSearchService:
    @staticmethod
    def validate_search_params(
        query: Any, page_size: str = "10", page_number: str = "1"
    ) -> Tuple[str, int, int]:
        """
        Validate food search parameters.

        Returns:
            (query, page_size, page_number) with the page values as ints

        Raises:
            ClientInputError: If query is missing/empty, is not a single
                string (repeated in the query string), or a page value is
                not an integer >= 1
        """
        if not query or not isinstance(query, str):
            raise ClientInputError("Invalid request. query parameter is required.")

        size = parse_int_param(page_size)
        number = parse_int_param(page_number)
        if size is None or number is None or size < 1 or number < 1:
            raise ClientInputError("Invalid pageSize or pageNumber parameters.")

        return query, size, number

    @staticmethod
    async def search(
        client: FoodDataClient,
        query: Any,
        page_size: str = "10",
        page_number: str = "1",
    ) -> Any:
        """Validate the parameters, then return the upstream search body verbatim."""
        query, size, number = FoodSearchService.validate_search_params(
            query, page_size, page_number
        )
        logger.info("Searching foods: query=%r page=%d size=%d", query, number, size)
        return await client.search_foods(query, size, number)

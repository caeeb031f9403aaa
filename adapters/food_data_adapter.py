"""USDA FoodData Central adapter for food search.
"""

from typing import Any, Optional
import logging

import httpx

from app.exceptions import UpstreamError

logger = logging.getLogger("macrorelay.food_data")


class FoodDataClient:
    """
    Client for the FoodData Central ``/foods/search`` endpoint.

    A fresh ``httpx.AsyncClient`` is opened per call; ``transport`` can be
    supplied to route requests elsewhere (e.g. ``httpx.MockTransport``).
    """

    def __init__(
        self,
        api_key: str = "DEMO_KEY",
        base_url: str = "https://api.nal.usda.gov/fdc/v1",
        data_types: str = "Foundation,Survey (FNDDS)",
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self._api_key = api_key
        self._base_url = base_url.rstrip("/")
        self._data_types = data_types
        self._transport = transport

    @property
    def search_url(self) -> str:
        return f"{self._base_url}/foods/search"

    async def search_foods(self, query: str, page_size: int, page_number: int) -> Any:
        """
        Search foods and return the upstream JSON body unchanged.

        Raises:
            UpstreamError: If the upstream status is not 2xx
            httpx.HTTPError: On transport failures
        """
        params = {
            "api_key": self._api_key,
            "query": query,
            "pageSize": page_size,
            "pageNumber": page_number,
            "dataType": self._data_types,
        }

        async with httpx.AsyncClient(transport=self._transport) as client:
            response = await client.get(self.search_url, params=params)

        if not response.is_success:
            logger.warning(
                "USDA search failed with status %d for query %r",
                response.status_code,
                query,
            )
            raise UpstreamError(f"USDA API Error: {response.status_code}")

        return response.json()

"""USDA food search routes"""

from typing import List, Optional
import logging

from fastapi import APIRouter, Depends, Query

from adapters import FoodDataClient
from api.dependencies import get_food_data_client
from app.exceptions import ClientInputError, RelayError, UpstreamError
from services import FoodSearchService

router = APIRouter(prefix="/api", tags=["Foods"])
logger = logging.getLogger("macrorelay.api.foods")


@router.get("/search-foods")
async def search_foods(
    query: Optional[List[str]] = Query(None, description="Search terms"),
    pageSize: str = Query("10", description="Results per page, >= 1"),
    pageNumber: str = Query("1", description="1-based page number"),
    client: FoodDataClient = Depends(get_food_data_client),
):
    """
    Search the USDA FoodData Central database.

    The upstream response body is returned as-is.

    Raises:
        400: If query is missing or repeated, or the page parameters are invalid
        500: If the USDA API fails
    """
    # A repeated key arrives as a list and is rejected like a missing one
    terms = query[0] if query is not None and len(query) == 1 else query
    try:
        return await FoodSearchService.search(client, terms, pageSize, pageNumber)
    except ClientInputError:
        raise
    except RelayError as e:
        logger.error(f"Error searching foods: {e}")
        raise
    except Exception as e:
        logger.exception("Error searching foods")
        raise UpstreamError(str(e) or "Error searching foods") from e

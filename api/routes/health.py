"""Health check route"""

from datetime import datetime, timezone

from fastapi import APIRouter

from domain.schemas.health_schemas import HealthResponse

router = APIRouter(tags=["Health"])


def utc_timestamp() -> str:
    """Current UTC time as ISO-8601 with milliseconds and a 'Z' suffix"""
    now = datetime.now(timezone.utc)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")


@router.get("/health", response_model=HealthResponse)
def health_check():
    """Basic health check endpoint"""
    return HealthResponse(status="ok", timestamp=utc_timestamp())

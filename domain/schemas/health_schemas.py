from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    """Health check response"""

    status: str = Field("ok", description="Always 'ok' while the process serves requests")
    timestamp: str = Field(..., description="Current UTC time, ISO-8601")

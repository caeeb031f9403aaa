from typing import Any, Mapping, Optional


class RelayError(Exception):
    """Base class for errors surfaced to API clients as ``{"error": message}``.

    Attributes:
        message: human-readable message
        details: optional mapping with extra context
        code: optional machine-readable error code
        http_status: suggested HTTP status code for handlers
    """

    http_status = 500
    default_message = "Internal server error"

    def __init__(self, message: Optional[str] = None, details: Optional[Mapping[str, Any]] = None, code: Optional[str] = None):
        message = message or self.default_message
        super().__init__(message)
        self.message = message
        self.details = details
        self.code = code

    def to_dict(self) -> dict:
        payload: dict[str, Any] = {"error": self.message}
        if self.code:
            payload["code"] = self.code
        if self.details:
            payload["details"] = self.details
        return payload

    def __str__(self) -> str:
        return self.message


class ClientInputError(RelayError):
    """Raised when a request field is missing or malformed. http_status is 400."""

    http_status = 400
    default_message = "Invalid request"


class ConfigurationError(RelayError):
    """Raised when a required credential or setting is absent. http_status is 500."""

    http_status = 500
    default_message = "Server is not configured"


class UpstreamError(RelayError):
    """Raised when an external provider fails or returns a malformed payload.

    http_status is 500.
    """

    http_status = 500
    default_message = "Upstream service error"


class RateLimitError(RelayError):
    """Raised when a client exceeds its request quota. http_status is 429."""

    http_status = 429
    default_message = "Too many requests. Please try again later."

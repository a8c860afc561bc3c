"""Exception taxonomy for brand kit generation.

Each exception carries a diagnostic `message` and `details` for server-side
logs, and a fixed `public_message` that is the only text a client ever sees.
"""

from typing import Any, Dict, Optional

from fastapi.responses import JSONResponse


class BrandKitException(Exception):
    """Base exception for all generation failures."""

    public_message = "Unexpected server error"
    status_code = 500

    def __init__(self, message: Optional[str] = None, details: Optional[Dict[str, Any]] = None):
        self.message = message or self.public_message
        self.details = details or {}
        super().__init__(self.message)


class ConfigurationError(BrandKitException):
    """Raised when the provider credential is not configured."""

    public_message = "Missing OpenAI API key on server"


class ProviderError(BrandKitException):
    """Raised when the provider call fails at transport level or returns a non-success status."""

    public_message = "Failed to generate brand kit"

    def __init__(self,
                 message: Optional[str] = None,
                 provider_status: Optional[int] = None,
                 model: Optional[str] = None,
                 details: Optional[Dict[str, Any]] = None):
        self.provider_status = provider_status
        self.model = model
        provider_details = details or {}
        if provider_status is not None:
            provider_details["provider_status"] = provider_status
        if model:
            provider_details["model"] = model
        super().__init__(message, provider_details)


class EmptyResponseError(BrandKitException):
    """Raised when the completion carries no content."""

    public_message = "No content returned from AI"


class InvalidOutputError(BrandKitException):
    """Raised when the completion content is not a usable JSON object."""

    public_message = "Invalid JSON from AI"


class UnexpectedError(BrandKitException):
    """Raised for any other failure in the request path."""

    public_message = "Unexpected server error"


def to_error_response(exc: BrandKitException) -> JSONResponse:
    """Render an exception as the client-facing error body."""
    return JSONResponse(status_code=exc.status_code, content={"error": exc.public_message})

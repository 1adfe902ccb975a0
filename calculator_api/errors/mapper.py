"""Error response mapping for the web interface.

Converts exceptions raised while handling a request into the single
``{"error": <message>}`` body shape and an HTTP status code.
"""

from dataclasses import dataclass
from typing import Dict, Any, Optional

from pydantic import ValidationError as PydanticValidationError

from calculator_api.exceptions import (
    CalculatorError,
    ResourceNotFoundError,
)

# Missing and malformed operands are reported identically
OPERANDS_REQUIRED_MESSAGE = "Parameters a and b are required"
INTERNAL_ERROR_MESSAGE = "Internal server error"


@dataclass
class ErrorResponse:
    """Structured error response for API consumers."""

    error_code: str
    message: str
    details: Optional[Dict[str, Any]] = None


def map_exception_to_response(error: Exception) -> ErrorResponse:
    """Convert an exception to a structured ErrorResponse.

    Args:
        error: The exception to convert

    Returns:
        ErrorResponse with structured error information
    """
    if isinstance(error, CalculatorError):
        return ErrorResponse(
            error_code=error.code,
            message=error.message,
            details=error.details if error.details else None,
        )

    if isinstance(error, PydanticValidationError):
        return ErrorResponse(
            error_code="VALIDATION_ERROR",
            message=OPERANDS_REQUIRED_MESSAGE,
            details={
                "fields": [".".join(str(p) for p in e["loc"]) for e in error.errors()],
            },
        )

    # Anything else is a bug; keep internals out of the response
    return ErrorResponse(
        error_code="INTERNAL_ERROR",
        message=INTERNAL_ERROR_MESSAGE,
        details={"exception_type": type(error).__name__},
    )


def map_error_for_web(error: Exception) -> Dict[str, Any]:
    """Map exception to the web API error body.

    Args:
        error: The exception to convert

    Returns:
        Dictionary suitable for a JSONResponse
    """
    return {"error": map_exception_to_response(error).message}


def get_http_status_for_error(error: Exception) -> int:
    """Determine appropriate HTTP status code for an error.

    Args:
        error: The exception

    Returns:
        HTTP status code
    """
    if isinstance(error, ResourceNotFoundError):
        return 404
    elif isinstance(error, CalculatorError):
        return 400
    elif isinstance(error, PydanticValidationError):
        return 400
    else:
        return 500

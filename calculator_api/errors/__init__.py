"""Error handling utilities for calculator-api."""

from calculator_api.errors.mapper import (
    ErrorResponse,
    OPERANDS_REQUIRED_MESSAGE,
    INTERNAL_ERROR_MESSAGE,
    map_exception_to_response,
    map_error_for_web,
    get_http_status_for_error,
)

__all__ = [
    "ErrorResponse",
    "OPERANDS_REQUIRED_MESSAGE",
    "INTERNAL_ERROR_MESSAGE",
    "map_exception_to_response",
    "map_error_for_web",
    "get_http_status_for_error",
]

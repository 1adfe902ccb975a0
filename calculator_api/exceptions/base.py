"""Exception classes for the calculator API.

Every exception carries a machine-readable ``code``, a human-readable
``message`` (the text returned to HTTP clients) and optional ``details``
that are logged but never sent over the wire.
"""

from typing import Any, Dict, Optional


class CalculatorError(Exception):
    """Base exception for all calculator-api errors."""

    def __init__(self, code: str, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.code = code
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        return self.message

    def __repr__(self) -> str:
        return f"{type(self).__name__}(code={self.code!r}, message={self.message!r})"


class ValidationError(CalculatorError):
    """Raised when request input is missing or malformed."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(code="VALIDATION_ERROR", message=message, details=details)


class ResourceNotFoundError(CalculatorError):
    """Raised when a path or operation does not exist."""

    def __init__(self, message: str = "Not found", details: Optional[Dict[str, Any]] = None):
        super().__init__(code="RESOURCE_NOT_FOUND", message=message, details=details)


class ConfigurationError(CalculatorError):
    """Raised when environment or command line configuration is invalid."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(code="CONFIGURATION_ERROR", message=message, details=details)


class MathError(CalculatorError):
    """Base for all arithmetic errors."""
    pass


class DivisionByZeroError(MathError):
    """Raised at the web layer when a divide request has a zero divisor."""

    def __init__(self, message: str = "Cannot divide by zero", details: Optional[Dict[str, Any]] = None):
        super().__init__(code="DIVISION_BY_ZERO", message=message, details=details)

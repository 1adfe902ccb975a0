"""Custom exceptions for the calculator API."""

from calculator_api.exceptions.base import (
    CalculatorError,
    ValidationError,
    ResourceNotFoundError,
    ConfigurationError,
    MathError,
    DivisionByZeroError,
)

__all__ = [
    "CalculatorError",
    "ValidationError",
    "ResourceNotFoundError",
    "ConfigurationError",
    "MathError",
    "DivisionByZeroError",
]

"""HTTP interface for the calculator."""

from calculator_api.web_server.models import Operands, first_values, parse_operands
from calculator_api.web_server.web_server import (
    CalculatorWebServer,
    create_app,
    error_response,
    json_number,
)

__all__ = [
    "Operands",
    "first_values",
    "parse_operands",
    "CalculatorWebServer",
    "create_app",
    "error_response",
    "json_number",
]

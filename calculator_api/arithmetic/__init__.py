"""Arithmetic - the four binary operations behind the HTTP endpoints."""

from calculator_api.arithmetic.base import ArithmeticFailure, MathResult
from calculator_api.arithmetic.operations import add, subtract, multiply, divide
from calculator_api.arithmetic.engine import OPERATIONS, ArithmeticEngine

__all__ = [
    "ArithmeticFailure",
    "MathResult",
    "add",
    "subtract",
    "multiply",
    "divide",
    "OPERATIONS",
    "ArithmeticEngine",
]

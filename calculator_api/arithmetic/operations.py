"""Binary arithmetic on two float operands.

Pure functions with standard IEEE-754 semantics. Only divide can fail, and
it reports the failure through its return value.
"""

from calculator_api.arithmetic.base import ArithmeticFailure, MathResult


def add(a: float, b: float) -> float:
    return a + b


def subtract(a: float, b: float) -> float:
    return a - b


def multiply(a: float, b: float) -> float:
    return a * b


def divide(a: float, b: float) -> MathResult:
    """Divide a by b.

    Returns a failed MathResult for a zero divisor (including -0.0) instead
    of raising ZeroDivisionError.
    """
    if b == 0:
        return MathResult.failure(ArithmeticFailure.DIVISION_BY_ZERO)
    return MathResult.success(a / b)

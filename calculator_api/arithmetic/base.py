"""Result type for arithmetic operations.

Operations that can fail return a MathResult instead of raising, so the
caller decides how a failure is reported.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional


class ArithmeticFailure(str, Enum):
    """Named failure an operation can return."""

    DIVISION_BY_ZERO = "DIVISION_BY_ZERO"

    @property
    def message(self) -> str:
        return _FAILURE_MESSAGES[self]


_FAILURE_MESSAGES = {
    ArithmeticFailure.DIVISION_BY_ZERO: "Cannot divide by zero",
}


@dataclass(frozen=True)
class MathResult:
    """Either a numeric value or a named failure, never both."""

    value: Optional[float] = None
    error: Optional[ArithmeticFailure] = None

    def __post_init__(self) -> None:
        if (self.value is None) == (self.error is None):
            raise ValueError("MathResult needs exactly one of value or error")

    @classmethod
    def success(cls, value: float) -> MathResult:
        return cls(value=value)

    @classmethod
    def failure(cls, error: ArithmeticFailure) -> MathResult:
        return cls(error=error)

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def message(self) -> Optional[str]:
        """Human-readable failure message, None on success."""
        return self.error.message if self.error is not None else None

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        if self.error is not None:
            return {"error": self.error.message}
        return {"result": self.value}

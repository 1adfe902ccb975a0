"""Arithmetic Engine - Facade over the binary operations.

Maps an operation name onto its function and normalizes every outcome to a
MathResult, so the web layer handles one return type.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Callable, List, Mapping, Union

from calculator_api.arithmetic.base import MathResult
from calculator_api.arithmetic.operations import add, subtract, multiply, divide
from calculator_api.exceptions import ResourceNotFoundError
from calculator_api.logger import session_logger as logger
from calculator_api.logger.decorators import log_execution_time

Operation = Callable[[float, float], Union[float, MathResult]]

# Declaration order is the order endpoints are advertised in
OPERATIONS: Mapping[str, Operation] = MappingProxyType({
    "add": add,
    "subtract": subtract,
    "multiply": multiply,
    "divide": divide,
})


class ArithmeticEngine:
    """Unified interface to the arithmetic operations."""

    def __init__(self) -> None:
        self._operations = OPERATIONS
        logger.info("ArithmeticEngine initialized", operations=self.list_operations())

    def has_operation(self, operation: str) -> bool:
        return operation in self._operations

    @log_execution_time
    def compute(self, operation: str, a: float, b: float) -> MathResult:
        """Apply ``operation`` to the two operands.

        Raises:
            ResourceNotFoundError: If ``operation`` is not a known name
        """
        func = self._operations.get(operation)
        if func is None:
            raise ResourceNotFoundError(
                f"Unknown operation: {operation}",
                details={"operation": operation, "available": self.list_operations()},
            )

        outcome = func(a, b)
        if isinstance(outcome, MathResult):
            return outcome
        return MathResult.success(outcome)

    def list_operations(self) -> List[str]:
        return list(self._operations)

    def endpoints(self) -> List[str]:
        """URL paths, one per operation."""
        return [f"/{name}" for name in self._operations]

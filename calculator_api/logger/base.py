"""Logger interface for calculator-api.

Implementations take a message plus arbitrary keyword context, so callers
can log structured fields without formatting them into the message.
"""

from abc import ABC, abstractmethod
from typing import Any


class Logger(ABC):
    """Abstract logger accepting a message and structured keyword fields."""

    @abstractmethod
    def debug(self, message: str, **kwargs: Any) -> None:
        pass

    @abstractmethod
    def info(self, message: str, **kwargs: Any) -> None:
        pass

    @abstractmethod
    def warning(self, message: str, **kwargs: Any) -> None:
        pass

    @abstractmethod
    def error(self, message: str, **kwargs: Any) -> None:
        pass

    @abstractmethod
    def critical(self, message: str, **kwargs: Any) -> None:
        pass

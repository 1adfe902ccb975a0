"""Server startup validation utilities."""

from typing import List

from calculator_api.config import ServerSettings
from calculator_api.logger import Logger


def validate_server_settings(settings: ServerSettings, logger: Logger) -> None:
    """
    Validate the listener settings before binding.

    Args:
        settings: Host and port the server will bind to
        logger: Logger instance for reporting status

    Raises:
        RuntimeError: If the host is empty or the port is out of range
    """
    problems: List[str] = []

    if not settings.host.strip():
        problems.append("host must not be empty")

    if not 1 <= settings.port <= 65535:
        problems.append(f"port must be between 1 and 65535, got {settings.port}")

    if problems:
        error_msg = (
            "Invalid server settings:\n"
            + "\n".join(f"  - {p}" for p in problems)
            + "\n\nSet PORT / CALC_API_HOST or pass --port / --host."
        )
        raise RuntimeError(error_msg)

    logger.debug(
        "Server settings validated",
        host=settings.host,
        port=settings.port,
    )

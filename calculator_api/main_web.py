"""Calculator API web server entry point."""

import argparse
import logging
import sys
from typing import List, Optional

import uvicorn

from calculator_api.config import ServerSettings, get_settings
from calculator_api.exceptions import ConfigurationError
from calculator_api.logger import Logger, session_logger
from calculator_api.startup.validation import validate_server_settings
from calculator_api.web_server import CalculatorWebServer

logger: Logger = session_logger

# uvicorn only knows these names; anything else (NOTSET, custom levels) runs at info
_UVICORN_LOG_LEVELS = {
    logging.CRITICAL: "critical",
    logging.ERROR: "error",
    logging.WARNING: "warning",
    logging.INFO: "info",
    logging.DEBUG: "debug",
}


def uvicorn_log_level(level: int) -> str:
    return _UVICORN_LOG_LEVELS.get(level, "info")


def build_parser(defaults: ServerSettings) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Calculator API - arithmetic over HTTP/JSON")
    parser.add_argument(
        "--host",
        type=str,
        default=defaults.host,
        help=f"Host address to bind to (default: {defaults.host}, or CALC_API_HOST env var)",
    )
    parser.add_argument(
        "--port",
        type=int,
        default=defaults.port,
        help=f"Port number to listen on (default: {defaults.port}, or PORT env var)",
    )
    return parser


def serve(server: CalculatorWebServer, log_level: str = "info") -> None:
    """Bind ``server`` to its host and port and block until shutdown."""
    logger.info("=" * 70)
    logger.info("STARTING CALCULATOR API")
    logger.info("=" * 70)
    logger.info("Configuration", host=server.host, port=server.port)
    logger.info(f"Server running on http://localhost:{server.port}")
    logger.info(f"Health check: http://localhost:{server.port}/health")
    logger.info("=" * 70)
    uvicorn.run(server.get_app(), host=server.host, port=server.port, log_level=log_level)
    logger.info("Web server shutdown complete")


def main(argv: Optional[List[str]] = None) -> int:
    try:
        settings = get_settings()
    except ConfigurationError as e:
        logger.error("FATAL: Invalid configuration", error=e.message, **e.details)
        return 1

    args = build_parser(settings.server).parse_args(argv)
    server_settings = ServerSettings(host=args.host, port=args.port)

    try:
        validate_server_settings(server_settings, logger)
    except RuntimeError as e:
        logger.error("FATAL: Server settings validation failed", error=str(e))
        return 1

    server = CalculatorWebServer(host=server_settings.host, port=server_settings.port)

    try:
        serve(server, log_level=uvicorn_log_level(settings.log.level))
    except KeyboardInterrupt:
        logger.info("Web server stopped by user")
    except Exception as e:
        logger.error("Failed to start web server", error=str(e), error_type=type(e).__name__)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())

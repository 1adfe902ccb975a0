"""Calculator Web Server - JSON endpoints over the arithmetic engine."""

import math
from typing import Any, Awaitable, Callable, Dict, Optional

from starlette.applications import Starlette
from starlette.exceptions import HTTPException
from starlette.middleware.cors import CORSMiddleware
from starlette.requests import Request
from starlette.responses import JSONResponse, Response
from starlette.routing import Route

from calculator_api.arithmetic import ArithmeticEngine, ArithmeticFailure
from calculator_api.config import DEFAULT_HOST, DEFAULT_PORT
from calculator_api.errors import map_error_for_web, get_http_status_for_error
from calculator_api.exceptions import (
    CalculatorError,
    DivisionByZeroError,
    ResourceNotFoundError,
    ValidationError,
)
from calculator_api.logger import session_logger as logger
from calculator_api.web_server.models import first_values, parse_operands

Endpoint = Callable[[Request], Awaitable[Response]]

# Largest magnitude at which every integer is exactly representable as a float
_MAX_SAFE_INTEGER = 2 ** 53

_FAILURE_ERRORS = {
    ArithmeticFailure.DIVISION_BY_ZERO: DivisionByZeroError,
}


def json_number(value: float) -> Optional[float]:
    """Render a float the way JSON clients expect.

    Integral values become ints (``5`` rather than ``5.0``, ``-0.0`` as
    ``0``) and non-finite values become ``None``, which keeps the body
    valid JSON.
    """
    if not math.isfinite(value):
        return None
    if value.is_integer() and abs(value) < _MAX_SAFE_INTEGER:
        return int(value)
    return value


def _jsonable(payload: Dict[str, Any]) -> Dict[str, Any]:
    return {
        key: json_number(value) if isinstance(value, float) else value
        for key, value in payload.items()
    }


def error_response(error: Exception) -> JSONResponse:
    """Build the ``{"error": ...}`` response for an exception."""
    return JSONResponse(
        map_error_for_web(error),
        status_code=get_http_status_for_error(error),
    )


class CalculatorWebServer:
    """Web server for the calculator - one GET route per arithmetic operation."""

    SERVICE_NAME = "Calculator API"
    VERSION = "1.0.0"

    def __init__(
        self,
        engine: Optional[ArithmeticEngine] = None,
        host: str = DEFAULT_HOST,
        port: int = DEFAULT_PORT,
    ):
        self.engine = engine if engine is not None else ArithmeticEngine()
        self.host = host
        self.port = port
        self.app = self._create_app()

    def _create_app(self) -> Any:
        """Create the Starlette application."""
        routes = [
            Route("/", endpoint=self.root, methods=["GET"]),
            Route("/health", endpoint=self.health, methods=["GET"]),
        ]
        for operation in self.engine.list_operations():
            routes.append(
                Route(
                    f"/{operation}",
                    endpoint=self._operation_endpoint(operation),
                    methods=["GET"],
                    name=operation,
                )
            )

        app = Starlette(
            debug=False,
            routes=routes,
            exception_handlers={
                HTTPException: self.http_error,
                Exception: self.server_error,
            },
        )
        # "/add/" is an unknown path, not a redirect to "/add"
        app.router.redirect_slashes = False

        return CORSMiddleware(app, allow_origins=["*"], allow_methods=["GET"])

    async def root(self, request: Request) -> JSONResponse:
        """Service metadata and the list of operation endpoints."""
        return JSONResponse({
            "message": self.SERVICE_NAME,
            "version": self.VERSION,
            "endpoints": self.engine.endpoints(),
        })

    async def health(self, request: Request) -> JSONResponse:
        """Liveness check."""
        return JSONResponse({"status": "healthy"})

    def _operation_endpoint(self, operation: str) -> Endpoint:
        async def endpoint(request: Request) -> Response:
            return await self.calculate(request, operation)

        return endpoint

    async def calculate(self, request: Request, operation: str) -> JSONResponse:
        """Validate ``a`` and ``b`` then apply ``operation`` to them."""
        try:
            operands = parse_operands(first_values(request.query_params))
        except ValidationError as e:
            logger.info(
                "Rejected operands",
                path=request.url.path,
                errors=e.details.get("errors"),
            )
            return error_response(e)

        result = self.engine.compute(operation, operands.a, operands.b)
        if result.error is not None:
            error: CalculatorError = _FAILURE_ERRORS[result.error]()
            logger.info(
                "Arithmetic failure",
                path=request.url.path,
                error_code=error.code,
            )
            return error_response(error)

        return JSONResponse(_jsonable(result.to_dict()))

    async def http_error(self, request: Request, exc: Exception) -> Response:
        """Render routing errors (404, 405) as JSON."""
        if not isinstance(exc, HTTPException):
            return await self.server_error(request, exc)

        if exc.status_code == 404:
            logger.info("Route not found", path=request.url.path)
            return error_response(ResourceNotFoundError())

        if exc.status_code == 405:
            logger.info(
                "Method not allowed",
                path=request.url.path,
                method=request.method,
            )
            return JSONResponse(
                {"error": "Method not allowed"},
                status_code=405,
                headers=exc.headers,
            )

        return JSONResponse(
            {"error": exc.detail},
            status_code=exc.status_code,
            headers=exc.headers,
        )

    async def server_error(self, request: Request, exc: Exception) -> Response:
        """Last-resort handler; details go to the log, not the client."""
        logger.error(
            "Unhandled error",
            path=request.url.path,
            error=str(exc),
            error_type=type(exc).__name__,
        )
        return error_response(exc)

    def get_app(self) -> Any:
        """Return the ASGI application."""
        return self.app


def create_app(engine: Optional[ArithmeticEngine] = None) -> Any:
    """Build a fresh ASGI app without binding a port."""
    return CalculatorWebServer(engine=engine).get_app()

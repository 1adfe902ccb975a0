"""Calculator API - add, subtract, multiply and divide over HTTP/JSON.

The arithmetic functions and the app factory can be used directly, without
starting a listener:

    from calculator_api import add, divide, create_app

    add(2, 3)            # 5
    divide(10, 0).ok     # False
    app = create_app()   # ASGI app, e.g. for starlette.testclient.TestClient
"""

from calculator_api.arithmetic import (
    ArithmeticEngine,
    ArithmeticFailure,
    MathResult,
    add,
    subtract,
    multiply,
    divide,
)
from calculator_api.web_server import CalculatorWebServer, create_app

__all__ = [
    "ArithmeticEngine",
    "ArithmeticFailure",
    "MathResult",
    "add",
    "subtract",
    "multiply",
    "divide",
    "CalculatorWebServer",
    "create_app",
]

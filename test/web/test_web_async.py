"""Test the ASGI app through httpx's async transport."""

import asyncio

import httpx
import pytest

from calculator_api.web_server import create_app


@pytest.fixture
def base_url():
    return "http://calculator.test"


class TestAsyncRequests:
    """Concurrent requests share no state."""

    @pytest.mark.asyncio
    async def test_scenarios(self, base_url):
        transport = httpx.ASGITransport(app=create_app())
        async with httpx.AsyncClient(transport=transport, base_url=base_url) as client:
            add = await client.get("/add", params={"a": "2", "b": "3"})
            divide = await client.get("/divide", params={"a": "10", "b": "0"})
            missing = await client.get("/subtract", params={"a": "abc", "b": "3"})

        assert (add.status_code, add.json()) == (200, {"result": 5})
        assert (divide.status_code, divide.json()) == (400, {"error": "Cannot divide by zero"})
        assert (missing.status_code, missing.json()) == (400, {"error": "Parameters a and b are required"})

    @pytest.mark.asyncio
    async def test_concurrent_identical_requests(self, base_url):
        transport = httpx.ASGITransport(app=create_app())
        async with httpx.AsyncClient(transport=transport, base_url=base_url) as client:
            responses = await asyncio.gather(
                *(client.get("/multiply", params={"a": "1.5", "b": "4"}) for _ in range(20))
            )

        assert {r.status_code for r in responses} == {200}
        assert {r.text for r in responses} == {'{"result":6}'}

    @pytest.mark.asyncio
    async def test_interleaved_operations(self, base_url):
        transport = httpx.ASGITransport(app=create_app())
        cases = [
            ("/add", 5),
            ("/subtract", 1),
            ("/multiply", 6),
            ("/divide", 1.5),
        ]
        async with httpx.AsyncClient(transport=transport, base_url=base_url) as client:
            responses = await asyncio.gather(
                *(client.get(path, params={"a": "3", "b": "2"}) for path, _ in cases)
            )

        assert [r.json()["result"] for r in responses] == [expected for _, expected in cases]

"""Pytest configuration and shared fixtures."""

import asyncio
from typing import Any

import pytest

from strapi_fluent import StrapiConfig


@pytest.fixture
def strapi_config() -> StrapiConfig:
    """Create a test Strapi configuration.

    Returns:
        Test configuration with mock values
    """
    return StrapiConfig(
        base_url="http://localhost:1337/api",
        api_token="test-token-12345678",
    )


class RecordingTransport:
    """In-memory transport that records calls and replays scripted results.

    Results are registered per (method, endpoint). When several results are
    registered they are returned in order and the last one repeats; an
    exception instance is raised instead of returned.
    """

    def __init__(self) -> None:
        self.calls: list[tuple[str, str, Any]] = []
        self._routes: dict[tuple[str, str], list[Any]] = {}

    def route(self, method: str, endpoint: str, *results: Any) -> None:
        self._routes[(method, endpoint)] = list(results)

    def calls_for(self, method: str) -> list[tuple[str, str, Any]]:
        return [call for call in self.calls if call[0] == method]

    async def _handle(self, method: str, endpoint: str, json: Any = None) -> Any:
        self.calls.append((method, endpoint, json))
        # Yield so concurrently gathered calls interleave like real requests
        await asyncio.sleep(0)

        results = self._routes.get((method, endpoint))
        if not results:
            raise AssertionError(f"Unexpected request: {method} {endpoint}")
        result = results.pop(0) if len(results) > 1 else results[0]
        if isinstance(result, BaseException):
            raise result
        return result

    async def get(self, endpoint: str) -> Any:
        return await self._handle("GET", endpoint)

    async def post(self, endpoint: str, json: Any) -> Any:
        return await self._handle("POST", endpoint, json)

    async def put(self, endpoint: str, json: Any) -> Any:
        return await self._handle("PUT", endpoint, json)

    async def delete(self, endpoint: str) -> Any:
        return await self._handle("DELETE", endpoint)


@pytest.fixture
def transport() -> RecordingTransport:
    """Create an empty recording transport."""
    return RecordingTransport()

"""Protocols for dependency injection.

The resource layer only needs something that can issue the four HTTP verbs
against a path, so tests and alternative transports can stand in for the
default httpx-based AsyncClient.
"""

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class ConfigProvider(Protocol):
    """Anything that can supply connection settings."""

    def get_base_url(self) -> str:
        """Base URL that endpoint paths are joined to."""
        ...

    def get_api_token(self) -> str:
        """Bearer token for the Authorization header."""
        ...

    @property
    def timeout(self) -> float:
        """Per-request timeout in seconds."""
        ...

    @property
    def verify_ssl(self) -> bool:
        """Whether TLS certificates are verified."""
        ...


@runtime_checkable
class Transport(Protocol):
    """Asynchronous HTTP verbs over resource paths.

    Paths look like ``/articles/5?filters%5Btitle%5D=x``. Each method returns
    the decoded response body, or None when the response has no body, and
    raises a StrapiError subclass on failure.
    """

    async def get(self, endpoint: str) -> Any:
        ...

    async def post(self, endpoint: str, json: Any) -> Any:
        ...

    async def put(self, endpoint: str, json: Any) -> Any:
        ...

    async def delete(self, endpoint: str) -> Any:
        ...


@runtime_checkable
class AsyncHTTPClient(Protocol):
    """Subset of httpx.AsyncClient used by AsyncClient."""

    async def request(self, method: str, url: str, **kwargs: Any) -> Any:
        ...

    async def aclose(self) -> None:
        ...

"""Asynchronous HTTP transport for the Strapi API.

All network calls made by resource requests and atomic batches go through
this client, so they can be awaited together on one event loop.
"""

import logging
from typing import Any

import httpx

from ..exceptions import (
    ConnectionError as StrapiConnectionError,
)
from ..exceptions import (
    FormatError,
)
from ..exceptions import (
    TimeoutError as StrapiTimeoutError,
)
from ..protocols import AsyncHTTPClient, ConfigProvider
from .base import BaseClient

logger = logging.getLogger(__name__)


class AsyncClient(BaseClient):
    """Asynchronous HTTP client for Strapi API.

    Example:
        ```python
        import asyncio
        from strapi_fluent import AsyncClient, StrapiConfig

        async def main():
            config = StrapiConfig(
                base_url="http://localhost:1337/api",
                api_token="your-token"
            )

            async with AsyncClient(config) as client:
                body = await client.get("/articles")
                print(body)

        asyncio.run(main())
        ```
    """

    def __init__(
        self,
        config: ConfigProvider,
        http_client: AsyncHTTPClient | None = None,
    ) -> None:
        """Initialize the asynchronous client.

        Args:
            config: Configuration provider (typically StrapiConfig)
            http_client: Async HTTP client (defaults to httpx.AsyncClient)
        """
        super().__init__(config)

        self._client: AsyncHTTPClient | httpx.AsyncClient = (
            http_client or self._create_default_http_client()
        )
        self._owns_client = http_client is None

    def _create_default_http_client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            timeout=self.config.timeout,
            verify=self.config.verify_ssl,
        )

    async def __aenter__(self) -> "AsyncClient":
        """Async context manager entry."""
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        """Async context manager exit - closes the client."""
        await self.close()

    async def close(self) -> None:
        """Close the HTTP client and release connections.

        Only closes the client if it was created by this instance
        (not injected from outside).
        """
        if self._owns_client:
            await self._client.aclose()
        logger.info("Closed asynchronous Strapi client")

    async def request(
        self,
        method: str,
        endpoint: str,
        json: Any = None,
        headers: dict[str, str] | None = None,
    ) -> Any:
        """Make an HTTP request to the Strapi API.

        Args:
            method: HTTP method (GET, POST, PUT, DELETE)
            endpoint: Resource path, optionally with an encoded query string
            json: JSON request body
            headers: Additional headers

        Returns:
            Decoded response body, or None when the response has no body

        Raises:
            RemoteError: On non-2xx responses
            FormatError: On a success response that is not JSON
            ConnectionError: On connection failures
            TimeoutError: On request timeout
        """
        url = self._build_url(endpoint)
        request_headers = self._get_headers(headers)

        logger.debug(f"{method} {url}")

        try:
            response = await self._client.request(
                method=method,
                url=url,
                json=json,
                headers=request_headers,
            )
        except httpx.ConnectError as e:
            raise StrapiConnectionError(f"Failed to connect to {self.base_url}: {e}") from e
        except httpx.TimeoutException as e:
            raise StrapiTimeoutError(
                f"Request timed out after {self.config.timeout}s: {e}"
            ) from e

        if not response.is_success:
            self._handle_error_response(response)

        # 204 No Content is common for DELETE
        if response.status_code == 204 or not response.content:
            logger.debug(f"Response: {response.status_code} (no content)")
            return None

        try:
            data = response.json()
        except ValueError as json_error:
            content_type = response.headers.get("content-type", "unknown")
            body_preview = response.text[:500] if response.text else ""
            raise FormatError(
                f"Received non-JSON response (content-type: {content_type})",
                details={"body_preview": body_preview},
            ) from json_error

        logger.debug(f"Response: {response.status_code}")
        return data

    async def get(self, endpoint: str) -> Any:
        """Make a GET request."""
        return await self.request("GET", endpoint)

    async def post(self, endpoint: str, json: Any) -> Any:
        """Make a POST request with a JSON body."""
        return await self.request("POST", endpoint, json=json)

    async def put(self, endpoint: str, json: Any) -> Any:
        """Make a PUT request with a JSON body."""
        return await self.request("PUT", endpoint, json=json)

    async def delete(self, endpoint: str) -> Any:
        """Make a DELETE request."""
        return await self.request("DELETE", endpoint)

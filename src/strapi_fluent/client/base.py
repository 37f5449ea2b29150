"""Base HTTP client for Strapi API communication.

This module provides URL building, authentication headers and the mapping
of HTTP error statuses to strapi-fluent exceptions.
"""

import logging
from typing import Any

import httpx

from ..exceptions import (
    AuthenticationError,
    AuthorizationError,
    ConflictError,
    NotFoundError,
    RateLimitError,
    RemoteError,
    ServerError,
    ValidationError,
)
from ..protocols import ConfigProvider

logger = logging.getLogger(__name__)


class BaseClient:
    """Shared plumbing for the transport.

    Not intended to be used directly - use AsyncClient instead.
    """

    def __init__(self, config: ConfigProvider) -> None:
        """Initialize the base client.

        Args:
            config: Configuration provider with URL, token and options

        Raises:
            ValueError: If the API token is empty
        """
        self.config = config
        self.base_url = config.get_base_url().rstrip("/")
        self._token = config.get_api_token()

        if not self._token or not self._token.strip():
            raise ValueError("API token is required and cannot be empty")

        logger.info(f"Initialized Strapi client for {self.base_url}")

    def _get_headers(self, extra_headers: dict[str, str] | None = None) -> dict[str, str]:
        """Build request headers with bearer authentication."""
        headers = {
            "Content-Type": "application/json",
            "Accept": "application/json",
            "Authorization": f"Bearer {self._token}",
        }

        if extra_headers:
            headers.update(extra_headers)

        return headers

    def _build_url(self, endpoint: str) -> str:
        """Join an endpoint path (optionally with a query string) to the base URL.

        Examples:
            >>> client._build_url("/articles/5?locale=fr")
            'http://localhost:1337/api/articles/5?locale=fr'
        """
        return f"{self.base_url}/{endpoint.lstrip('/')}"

    def _handle_error_response(self, response: httpx.Response) -> None:
        """Raise the exception matching an error response.

        Args:
            response: HTTPX response object

        Raises:
            RemoteError subclass based on status code
        """
        status_code = response.status_code

        try:
            body: Any = response.json()
        except ValueError:
            body = response.text

        error_message = response.text or f"HTTP {status_code}"
        error_details: dict[str, Any] = {}
        if isinstance(body, dict) and isinstance(body.get("error"), dict):
            error_message = body["error"].get("message", error_message)
            error_details = body["error"].get("details") or {}

        kwargs = {"status_code": status_code, "body": body, "details": error_details}

        if status_code == 400:
            raise ValidationError(f"Validation error: {error_message}", **kwargs)
        elif status_code == 401:
            raise AuthenticationError(f"Authentication failed: {error_message}", **kwargs)
        elif status_code == 403:
            raise AuthorizationError(f"Authorization failed: {error_message}", **kwargs)
        elif status_code == 404:
            raise NotFoundError(f"Resource not found: {error_message}", **kwargs)
        elif status_code == 409:
            raise ConflictError(f"Conflict: {error_message}", **kwargs)
        elif status_code == 429:
            retry_after = response.headers.get("Retry-After")
            raise RateLimitError(
                f"Rate limit exceeded: {error_message}",
                retry_after=int(retry_after) if retry_after and retry_after.isdigit() else None,
                **kwargs,
            )
        elif 500 <= status_code < 600:
            raise ServerError(f"Server error: {error_message}", **kwargs)
        else:
            raise RemoteError(
                f"Unexpected error (HTTP {status_code}): {error_message}", **kwargs
            )

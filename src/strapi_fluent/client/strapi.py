"""High level client: resource handles and atomic batches over one transport."""

import logging
from collections.abc import Callable, Mapping, Sequence
from typing import Any

from ..atomic import AtomicCoordinator
from ..models.operations import BulkOperation
from ..protocols import ConfigProvider, Transport
from ..resources.handle import ResourceHandle
from .async_client import AsyncClient

logger = logging.getLogger(__name__)


class StrapiClient:
    """Fluent Strapi client.

    Any string names a resource; handles are created on first use and cached.

    Example:
        ```python
        async with StrapiClient(config) as strapi:
            articles = strapi.get_resource("articles")
            page = await articles.query().pagination(page=1, page_size=10).find_many()

            await strapi["users"].query().auth(identifier="me", password="secret")

            await strapi.atomic([
                {"type": "create", "contentType": "articles", "data": {"data": {"title": "A"}}},
                {"type": "delete", "contentType": "articles", "id": "9"},
            ])
        ```
    """

    def __init__(
        self,
        config: ConfigProvider | None = None,
        transport: Transport | None = None,
        id_factory: Callable[[], str] | None = None,
    ) -> None:
        """Initialize the client.

        Args:
            config: Connection settings; required unless ``transport`` is given
            transport: Transport to use instead of an AsyncClient built from ``config``
            id_factory: Correlation id generator for atomic batches

        Raises:
            ValueError: If neither config nor transport is given
        """
        if transport is None:
            if config is None:
                raise ValueError("Either config or transport is required")
            transport = AsyncClient(config)
            self._owns_transport = True
        else:
            self._owns_transport = False

        self.transport = transport
        self.coordinator = AtomicCoordinator(transport, id_factory=id_factory)
        self._resources: dict[str, ResourceHandle] = {}

    def get_resource(self, name: str) -> ResourceHandle:
        """Return the handle for a resource, creating it on first access."""
        handle = self._resources.get(name)
        if handle is None:
            handle = ResourceHandle(name, self.transport)
            self._resources[name] = handle
            logger.debug(f"Created resource handle for {name}")
        return handle

    def __getitem__(self, name: str) -> ResourceHandle:
        return self.get_resource(name)

    async def atomic(self, operations: Sequence[BulkOperation | Mapping[str, Any]]) -> list[Any]:
        """Run a batch with compensating rollback; see AtomicCoordinator."""
        return await self.coordinator.atomic(operations)

    async def close(self) -> None:
        """Close the transport if this client created it."""
        if self._owns_transport and isinstance(self.transport, AsyncClient):
            await self.transport.close()

    async def __aenter__(self) -> "StrapiClient":
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        await self.close()

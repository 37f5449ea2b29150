"""Resource handles: the entry point for one named collection."""

import asyncio
import logging
from collections.abc import Awaitable, Mapping, Sequence
from typing import Any

from ..models.enums import OperationType
from ..models.operations import BulkOperation
from ..protocols import Transport
from .request import ResourceRequest
from .target import NamedResource

logger = logging.getLogger(__name__)


class ResourceHandle:
    """A named remote collection, e.g. ``articles`` or ``users``."""

    def __init__(self, name: str, transport: Transport) -> None:
        self.name = name
        self.transport = transport
        self.target = NamedResource(name=name, transport=transport)

    def query(self) -> ResourceRequest:
        """Start a new request with an empty query."""
        return ResourceRequest(self.target)

    async def bulk(self, entries: Sequence[BulkOperation | Mapping[str, Any]]) -> list[Any]:
        """Run independent create/update/delete operations concurrently.

        Every entry is validated before anything is sent, so one malformed
        entry means no request is made at all. Once dispatched, the first
        failure fails the whole call; operations that already completed on
        the server are NOT undone (see AtomicCoordinator for that).

        Args:
            entries: Operations or mappings with ``type``, ``id`` and ``data``

        Returns:
            Decoded responses in the order of ``entries``

        Raises:
            InvalidOperationError: If any entry has the wrong shape
            StrapiError: The first remote or network failure
        """
        operations = [BulkOperation.coerce(entry) for entry in entries]

        calls: list[Awaitable[Any]] = [self._dispatch(operation) for operation in operations]
        logger.debug(f"Dispatching {len(calls)} bulk operations on {self.name}")
        return list(await asyncio.gather(*calls))

    def _dispatch(self, operation: BulkOperation) -> Awaitable[Any]:
        request = ResourceRequest(self.target)
        if operation.type is OperationType.CREATE:
            return request.create(operation.data)
        if operation.type is OperationType.UPDATE:
            return request.update(operation.id, operation.data)  # type: ignore[arg-type]
        return request.delete(operation.id)  # type: ignore[arg-type]

    def __repr__(self) -> str:
        return f"ResourceHandle({self.name!r})"

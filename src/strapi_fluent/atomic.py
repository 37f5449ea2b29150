"""Atomic batches with compensating rollback.

Strapi has no multi-record transactions. AtomicCoordinator approximates one
for a batch of create/update/delete operations:

1. Tag: validate every operation, then give each a fresh correlation id.
2. Snapshot: read the current state of every update/delete target, one
   request at a time, before anything is modified.
3. Execute: send all operations concurrently and wait for all of them.
   A successful create records the new record so it can be deleted later.
   If any operation failed, compensate in batch order, one request at a
   time: restore updated records, re-create deleted records (they get new
   identifiers) and delete created records. Then re-raise the failure.
   Only a delete refused with a 4xx status is left alone, since the record
   is known to still exist.
4. Cleanup: drop every snapshot of the batch, whatever happened.

Compensation is best-effort. If a compensating request fails, RollbackError
is raised and the data may be left partially compensated.
"""

import asyncio
import logging
import uuid
from collections.abc import Callable, Mapping, Sequence
from typing import Any

from .exceptions import InvalidOperationError, RemoteError, RollbackError, ServerError
from .models.enums import OperationType
from .models.operations import (
    BulkOperation,
    SnapshotStore,
    record_identifier,
    restore_payload,
)
from .protocols import Transport
from .resources.request import ResourceRequest
from .resources.target import AtomicRoot

logger = logging.getLogger(__name__)


def _uuid4() -> str:
    return str(uuid.uuid4())


class AtomicCoordinator:
    """Run batches of operations with snapshot-based compensation.

    Example:
        ```python
        coordinator = AtomicCoordinator(transport)
        results = await coordinator.atomic([
            {"type": "create", "contentType": "articles", "data": {"data": {"title": "A"}}},
            {"type": "update", "contentType": "articles", "id": "5",
             "data": {"data": {"title": "B"}}},
            {"type": "delete", "contentType": "tags", "id": "9"},
        ])
        ```

    Args:
        transport: Transport used for every request
        id_factory: Returns a new correlation id on each call (uuid4 by default)
        snapshot_store_factory: Builds the snapshot store of each batch
    """

    def __init__(
        self,
        transport: Transport,
        id_factory: Callable[[], str] | None = None,
        snapshot_store_factory: Callable[[], SnapshotStore] = SnapshotStore,
    ) -> None:
        self.transport = transport
        self._id_factory = id_factory or _uuid4
        self._snapshot_store_factory = snapshot_store_factory

    async def atomic(self, operations: Sequence[BulkOperation | Mapping[str, Any]]) -> list[Any]:
        """Apply a batch all-or-nothing, as far as compensation allows.

        Args:
            operations: Operations or mappings with ``type``, ``contentType``,
                ``id`` and ``data``

        Returns:
            Decoded responses in the order of ``operations``

        Raises:
            InvalidOperationError: If any operation is malformed (no request is made)
            RollbackError: If a compensating request failed
            StrapiError: The original failure, after compensation succeeded
        """
        batch = self._tag(operations)
        snapshots = self._snapshot_store_factory()

        try:
            await self._take_snapshots(batch, snapshots)

            outcomes = await asyncio.gather(
                *(self._execute(operation, snapshots) for operation in batch),
                return_exceptions=True,
            )

            failure = next(
                (outcome for outcome in outcomes if isinstance(outcome, BaseException)),
                None,
            )
            if failure is None:
                logger.info(f"Atomic batch of {len(batch)} operations applied")
                return list(outcomes)

            logger.warning(
                f"Atomic batch failed ({failure}), compensating {len(snapshots)} operations"
            )
            await self._compensate(batch, snapshots, failure)
            raise failure
        finally:
            for operation in batch:
                snapshots.discard(operation.correlation_id)  # type: ignore[arg-type]

    def _tag(self, operations: Sequence[BulkOperation | Mapping[str, Any]]) -> list[BulkOperation]:
        batch = [BulkOperation.coerce(operation) for operation in operations]
        for operation in batch:
            if not operation.content_type:
                raise InvalidOperationError(
                    f"Invalid bulk operation: {operation.type.value} has no contentType",
                    details={"type": operation.type.value, "id": operation.id},
                )
        for operation in batch:
            operation.correlation_id = self._id_factory()
        return batch

    async def _take_snapshots(self, batch: list[BulkOperation], snapshots: SnapshotStore) -> None:
        for operation in batch:
            if operation.type is OperationType.CREATE or operation.id is None:
                continue
            prior_state = await self._request(operation).find_one(operation.id)
            snapshots.save(operation.correlation_id, operation.type, prior_state)  # type: ignore[arg-type]
            logger.debug(f"Snapshot of {operation.content_type}/{operation.id} taken")

    async def _execute(self, operation: BulkOperation, snapshots: SnapshotStore) -> Any:
        request = self._request(operation)
        correlation_id: str = operation.correlation_id  # type: ignore[assignment]

        try:
            if operation.type is OperationType.CREATE:
                saved = await request.create(operation.data)
                snapshots.save(correlation_id, OperationType.CREATE, saved)
                return saved
            if operation.type is OperationType.UPDATE:
                return await request.update(operation.id, operation.data)  # type: ignore[arg-type]
            return await request.delete(operation.id)  # type: ignore[arg-type]
        except RemoteError as e:
            # A delete refused with a 4xx left the record in place; re-creating
            # it would duplicate it. A 5xx may still have been applied.
            if operation.type is OperationType.DELETE and not isinstance(e, ServerError):
                snapshots.discard(correlation_id)
            raise

    async def _compensate(
        self, batch: list[BulkOperation], snapshots: SnapshotStore, failure: BaseException
    ) -> None:
        for operation in batch:
            snapshot = snapshots.get(operation.correlation_id)  # type: ignore[arg-type]
            if snapshot is None:
                continue

            if operation.type is not OperationType.CREATE and snapshot.prior_state is None:
                logger.warning(
                    f"No prior state for {operation.content_type}/{operation.id}, "
                    f"cannot undo {operation.type.value}"
                )
                continue

            request = self._request(operation)
            try:
                if operation.type is OperationType.UPDATE and operation.id is not None:
                    await request.update(operation.id, restore_payload(snapshot.prior_state))
                    logger.debug(f"Restored {operation.content_type}/{operation.id}")
                elif snapshot.kind is OperationType.DELETE:
                    await request.create(restore_payload(snapshot.prior_state))
                    logger.debug(f"Re-created deleted {operation.content_type}/{operation.id}")
                elif operation.type is OperationType.CREATE:
                    created_id = record_identifier(snapshot.prior_state)
                    if created_id is not None:
                        await request.delete(created_id)
                        logger.debug(f"Deleted created {operation.content_type}/{created_id}")
            except Exception as e:
                logger.error(
                    f"Rollback failed on {operation.type.value} of {operation.content_type}: {e}"
                )
                raise RollbackError(
                    f"Rollback failed on {operation.type.value} of "
                    f"{operation.content_type}: {e}",
                    original_error=failure,
                    correlation_id=operation.correlation_id,
                ) from e

    def _request(self, operation: BulkOperation) -> ResourceRequest:
        return ResourceRequest(
            AtomicRoot(segment=operation.content_type or "", transport=self.transport)
        )

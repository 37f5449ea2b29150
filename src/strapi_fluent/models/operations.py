"""Operation and snapshot models for bulk and atomic batches."""

from collections.abc import Iterator, Mapping
from dataclasses import dataclass
from typing import Any

from pydantic import BaseModel, Field, field_validator
from pydantic import ValidationError as PydanticValidationError

from ..exceptions import InvalidOperationError
from .enums import OperationType

# Keys the backend assigns; never sent back when restoring a record.
IDENTIFIER_KEYS = ("id", "documentId")


class BulkOperation(BaseModel):
    """A single create, update or delete in a batch.

    Accepted shapes:
        - create: ``data`` set, no ``id``
        - update: ``id`` and ``data`` set
        - delete: ``id`` set

    Example:
        >>> BulkOperation(type="update", id="5", data={"title": "B"})
    """

    type: OperationType
    id: str | None = None
    data: dict[str, Any] | None = None
    content_type: str | None = Field(None, alias="contentType")
    correlation_id: str | None = None

    model_config = {"populate_by_name": True}

    @field_validator("id", mode="before")
    @classmethod
    def stringify_id(cls, value: Any) -> Any:
        """Accept numeric ids; paths are built from strings."""
        if isinstance(value, int) and not isinstance(value, bool):
            return str(value)
        return value

    @classmethod
    def coerce(cls, entry: "BulkOperation | Mapping[str, Any]") -> "BulkOperation":
        """Turn a mapping into a BulkOperation and check its shape.

        Raises:
            InvalidOperationError: If the entry is not a recognized operation
        """
        if isinstance(entry, BulkOperation):
            operation = entry.model_copy()
        else:
            try:
                operation = cls.model_validate(entry)
            except PydanticValidationError as e:
                raise InvalidOperationError(
                    f"Invalid bulk operation: {e.errors()[0]['msg']}",
                    details={"entry": entry},
                ) from e
        operation.check_shape()
        return operation

    def check_shape(self) -> None:
        """Raise InvalidOperationError unless required fields match the type."""
        if self.type is OperationType.CREATE:
            valid = self.id is None and self.data is not None
        elif self.type is OperationType.UPDATE:
            valid = self.id is not None and self.data is not None
        else:
            valid = self.id is not None

        if not valid:
            raise InvalidOperationError(
                f"Invalid bulk operation: {self.type.value} with "
                f"id={self.id!r} and data={'set' if self.data is not None else 'missing'}",
                details={"type": self.type.value, "id": self.id},
            )


def unwrap_record(body: Any) -> Any:
    """Return the record inside a ``{"data": {...}}`` response envelope."""
    if isinstance(body, Mapping) and isinstance(body.get("data"), Mapping):
        return body["data"]
    return body


def record_identifier(body: Any) -> str | None:
    """Return the routable identifier of a record in a response body.

    Prefers ``documentId`` (Strapi v5 routes by it) over the numeric ``id``.
    """
    record = unwrap_record(body)
    if not isinstance(record, Mapping):
        return None
    for key in ("documentId", "id"):
        if record.get(key) is not None:
            return str(record[key])
    return None


def restore_payload(body: Any) -> Any:
    """Build a write payload that recreates a previously fetched record.

    Identifier keys are dropped and the response envelope, if any, is kept.
    """
    if isinstance(body, Mapping) and isinstance(body.get("data"), Mapping):
        return {"data": _strip_identifiers(body["data"])}
    if isinstance(body, Mapping):
        return _strip_identifiers(body)
    return body


def _strip_identifiers(record: Mapping[str, Any]) -> dict[str, Any]:
    # v4 nests fields under "attributes"
    if isinstance(record.get("attributes"), Mapping):
        return dict(record["attributes"])
    return {key: value for key, value in record.items() if key not in IDENTIFIER_KEYS}


@dataclass
class SnapshotEntry:
    """State captured for one operation, used to compute its inverse."""

    kind: OperationType
    prior_state: Any


class SnapshotStore:
    """Snapshots of one atomic batch, keyed by correlation id."""

    def __init__(self) -> None:
        self._entries: dict[str, SnapshotEntry] = {}

    def save(self, correlation_id: str, kind: OperationType, prior_state: Any) -> None:
        self._entries[correlation_id] = SnapshotEntry(kind=kind, prior_state=prior_state)

    def get(self, correlation_id: str) -> SnapshotEntry | None:
        return self._entries.get(correlation_id)

    def discard(self, correlation_id: str) -> None:
        self._entries.pop(correlation_id, None)

    def __contains__(self, correlation_id: object) -> bool:
        return correlation_id in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

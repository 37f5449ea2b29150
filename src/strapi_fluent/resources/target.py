"""Resource targets.

A request is bound either to a named collection (``NamedResource``) or, for
atomic batches, to a path picked per operation (``AtomicRoot``). Both carry
the path segment and the transport; only named resources can reach the
authentication endpoints.
"""

from dataclasses import dataclass

from ..protocols import Transport

USERS_RESOURCE = "users"


@dataclass(frozen=True)
class NamedResource:
    """A collection addressed by its API name, e.g. ``articles``."""

    name: str
    transport: Transport

    @property
    def path(self) -> str:
        return f"/{self.name.strip('/')}"


@dataclass(frozen=True)
class AtomicRoot:
    """A collection targeted by one operation of an atomic batch."""

    segment: str
    transport: Transport

    @property
    def path(self) -> str:
        return f"/{self.segment.strip('/')}"


ResourceTarget = NamedResource | AtomicRoot


def supports_auth(target: ResourceTarget) -> bool:
    """Return True if the target may call the fixed auth endpoints."""
    return isinstance(target, NamedResource) and target.name == USERS_RESOURCE

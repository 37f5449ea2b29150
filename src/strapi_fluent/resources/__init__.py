"""Resource handles and requests."""

from .handle import ResourceHandle
from .request import ResourceRequest
from .target import AtomicRoot, NamedResource, ResourceTarget

__all__ = [
    "ResourceHandle",
    "ResourceRequest",
    "AtomicRoot",
    "NamedResource",
    "ResourceTarget",
]

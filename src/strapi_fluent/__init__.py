"""strapi-fluent: a fluent Python client for the Strapi REST API.

This package provides:
- A chainable query builder (filters, sort, pagination, populate, ...)
- Per-resource handles with CRUD, auth and concurrent bulk operations
- Atomic batches that roll back through compensating operations
- An asyncio transport built on httpx
"""

from .__version__ import __version__
from .atomic import AtomicCoordinator
from .client import AsyncClient, StrapiClient
from .exceptions import (
    AuthenticationError,
    AuthorizationError,
    ConfigurationError,
    ConflictError,
    FormatError,
    InvalidOperationError,
    NetworkError,
    NotFoundError,
    RateLimitError,
    RemoteError,
    RollbackError,
    ServerError,
    StrapiError,
    ValidationError,
)
from .models import (
    BulkOperation,
    ConfigFactory,
    OperationType,
    PublicationState,
    QueryState,
    SnapshotStore,
    StrapiConfig,
    load_config,
)
from .protocols import AsyncHTTPClient, ConfigProvider, Transport
from .resources import AtomicRoot, NamedResource, ResourceHandle, ResourceRequest

__all__ = [
    "__version__",
    # Clients
    "StrapiClient",
    "AsyncClient",
    "AtomicCoordinator",
    # Resources
    "ResourceHandle",
    "ResourceRequest",
    "NamedResource",
    "AtomicRoot",
    # Models
    "QueryState",
    "BulkOperation",
    "OperationType",
    "PublicationState",
    "SnapshotStore",
    # Configuration
    "StrapiConfig",
    "ConfigFactory",
    "load_config",
    # Protocols (for dependency injection)
    "ConfigProvider",
    "Transport",
    "AsyncHTTPClient",
    # Exceptions
    "StrapiError",
    "ConfigurationError",
    "InvalidOperationError",
    "FormatError",
    "RemoteError",
    "ValidationError",
    "AuthenticationError",
    "AuthorizationError",
    "NotFoundError",
    "ConflictError",
    "RateLimitError",
    "ServerError",
    "NetworkError",
    "RollbackError",
]

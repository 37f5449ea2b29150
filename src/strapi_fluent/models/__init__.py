"""Data models for strapi-fluent."""

from .config import StrapiConfig
from .config_factory import ConfigFactory, load_config
from .enums import OperationType, PublicationState
from .operations import BulkOperation, SnapshotEntry, SnapshotStore
from .query import QueryState

__all__ = [
    "StrapiConfig",
    "ConfigFactory",
    "load_config",
    "OperationType",
    "PublicationState",
    "BulkOperation",
    "SnapshotEntry",
    "SnapshotStore",
    "QueryState",
]

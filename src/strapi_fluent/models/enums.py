"""Enumerations shared across strapi-fluent models."""

from enum import Enum


class OperationType(str, Enum):
    """Kind of a bulk or atomic operation."""

    CREATE = "create"
    UPDATE = "update"
    DELETE = "delete"


class PublicationState(str, Enum):
    """Strapi publication state filter."""

    LIVE = "live"
    PREVIEW = "preview"

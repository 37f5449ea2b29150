"""HTTP transport and the high level client."""

from .async_client import AsyncClient
from .strapi import StrapiClient

__all__ = [
    "AsyncClient",
    "StrapiClient",
]

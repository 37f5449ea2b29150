"""Utility modules for strapi-fluent."""

from strapi_fluent.utils.querystring import flatten, stringify

__all__ = [
    "flatten",
    "stringify",
]

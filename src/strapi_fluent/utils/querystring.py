"""Bracket-notation query string encoding.

Strapi parses query strings with the ``qs`` library, which expects nested
structures flattened into ``key[sub][0]=value`` pairs. This module produces
the same encoding from plain Python mappings and sequences, and leaves the
percent-encoding to httpx.

Examples:
    >>> stringify({"filters": {"title": {"$eq": "Hello"}}})
    'filters%5Btitle%5D%5B%24eq%5D=Hello'
    >>> stringify({"sort": ["title:asc", "id:desc"]})
    'sort%5B0%5D=title%3Aasc&sort%5B1%5D=id%3Adesc'
"""

from collections.abc import Mapping
from enum import Enum
from typing import Any

import httpx


def flatten(value: Any, prefix: str = "") -> list[tuple[str, str]]:
    """Flatten a nested mapping into bracket-notation key/value pairs.

    ``None`` values are dropped, booleans become ``true``/``false`` and list
    items are indexed.

    Args:
        value: Mapping, sequence or scalar to flatten
        prefix: Key path accumulated so far

    Returns:
        Ordered list of (key, value) pairs, not yet percent-encoded
    """
    pairs: list[tuple[str, str]] = []

    if value is None:
        return pairs

    if isinstance(value, Mapping):
        for key, item in value.items():
            pairs.extend(flatten(item, f"{prefix}[{key}]" if prefix else str(key)))
    elif isinstance(value, (list, tuple)):
        for index, item in enumerate(value):
            pairs.extend(flatten(item, f"{prefix}[{index}]"))
    elif prefix:
        pairs.append((prefix, _scalar(value)))

    return pairs


def stringify(query: Mapping[str, Any] | None) -> str:
    """Encode a query mapping as a bracket-notation query string."""
    if not query:
        return ""
    return str(httpx.QueryParams(flatten(query)))


def _scalar(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, Enum):
        return str(value.value)
    return str(value)

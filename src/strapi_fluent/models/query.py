"""Query state builder.

QueryState accumulates the options of a Strapi collection query. Each
setter overwrites only its own key and returns the builder, so calls chain:

    >>> state = (
    ...     QueryState()
    ...     .filters({"title": {"$contains": "news"}})
    ...     .sort(["publishedAt:desc"])
    ...     .pagination(page=1, page_size=25)
    ... )
    >>> state.to_query_string()
    'filters%5Btitle%5D%5B%24contains%5D=news&sort%5B0%5D=publishedAt%3Adesc&pagination%5Bpage%5D=1&pagination%5BpageSize%5D=25'

Values are not validated; the server decides whether a filter or sort
expression is acceptable.
"""

from copy import deepcopy
from typing import Any

from ..utils.querystring import stringify
from .enums import PublicationState


class QueryState:
    """Fluent accumulator for filters, sort, pagination and population."""

    def __init__(self, initial: dict[str, Any] | None = None) -> None:
        self._state: dict[str, Any] = dict(initial or {})

    def pagination(
        self, page: int, page_size: int, with_count: bool | None = None
    ) -> "QueryState":
        """Page-based pagination.

        Replaces any previous pagination, including offset pagination.
        """
        self._state["pagination"] = {
            "page": page,
            "pageSize": page_size,
            "withCount": with_count,
        }
        return self

    def offset_pagination(
        self, start: int, limit: int, with_count: bool | None = None
    ) -> "QueryState":
        """Offset-based pagination.

        Replaces any previous pagination, including page pagination.
        """
        self._state["pagination"] = {
            "start": start,
            "limit": limit,
            "withCount": with_count,
        }
        return self

    def filters(self, filters: dict[str, Any]) -> "QueryState":
        self._state["filters"] = filters
        return self

    def sort(self, sort: list[str]) -> "QueryState":
        self._state["sort"] = sort
        return self

    def populate(self, populate: str | list[str] | dict[str, Any]) -> "QueryState":
        self._state["populate"] = populate
        return self

    def fields(self, fields: list[str]) -> "QueryState":
        self._state["fields"] = fields
        return self

    def locale(self, locale: str) -> "QueryState":
        self._state["locale"] = locale
        return self

    def publication_state(self, state: PublicationState | str) -> "QueryState":
        """Restrict to published entries ("live") or include drafts ("preview").

        Other strings are passed through for the server to judge.
        """
        self._state["publicationState"] = (
            state.value if isinstance(state, PublicationState) else state
        )
        return self

    def to_dict(self) -> dict[str, Any]:
        """Return a copy of the accumulated query."""
        return deepcopy(self._state)

    def to_query_string(self) -> str:
        """Encode the accumulated query in bracket notation."""
        return stringify(self._state)

    def copy(self) -> "QueryState":
        return QueryState(self.to_dict())

    def __repr__(self) -> str:
        return f"QueryState({self._state!r})"

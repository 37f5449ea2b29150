"""Resource requests: one query state bound to one resource.

Each call issues exactly one HTTP request and returns the decoded body, or
None when the server sent no body. Remote errors propagate unchanged.
"""

from collections.abc import Mapping
from typing import Any

from ..exceptions import InvalidOperationError
from ..models.enums import PublicationState
from ..models.query import QueryState
from ..utils.querystring import stringify
from .target import USERS_RESOURCE, ResourceTarget, supports_auth

AUTH_LOCAL_PATH = "/auth/local"
AUTH_REGISTER_PATH = "/auth/local/register"


class ResourceRequest:
    """Fluent request against one resource.

    Example:
        ```python
        articles = await (
            client.get_resource("articles")
            .query()
            .filters({"title": {"$contains": "news"}})
            .sort(["publishedAt:desc"])
            .pagination(page=1, page_size=10)
            .find_many()
        )
        ```
    """

    def __init__(self, target: ResourceTarget, query: QueryState | None = None) -> None:
        self.target = target
        self.query_state = query if query is not None else QueryState()

    @property
    def path(self) -> str:
        return self.target.path

    # Query building

    def pagination(
        self, page: int, page_size: int, with_count: bool | None = None
    ) -> "ResourceRequest":
        self.query_state.pagination(page, page_size, with_count)
        return self

    def offset_pagination(
        self, start: int, limit: int, with_count: bool | None = None
    ) -> "ResourceRequest":
        self.query_state.offset_pagination(start, limit, with_count)
        return self

    def filters(self, filters: dict[str, Any]) -> "ResourceRequest":
        self.query_state.filters(filters)
        return self

    def sort(self, sort: list[str]) -> "ResourceRequest":
        self.query_state.sort(sort)
        return self

    def populate(self, populate: str | list[str] | dict[str, Any]) -> "ResourceRequest":
        self.query_state.populate(populate)
        return self

    def fields(self, fields: list[str]) -> "ResourceRequest":
        self.query_state.fields(fields)
        return self

    def locale(self, locale: str) -> "ResourceRequest":
        self.query_state.locale(locale)
        return self

    def publication_state(self, state: PublicationState | str) -> "ResourceRequest":
        self.query_state.publication_state(state)
        return self

    # Reads

    async def find_many(self) -> Any:
        """GET the collection with the accumulated query."""
        return await self.target.transport.get(self._with_query(self.path))

    async def find_one(self, id: str | int) -> Any:
        """GET one record with the accumulated query."""
        return await self.target.transport.get(self._with_query(f"{self.path}/{id}"))

    async def raw_find_many(self, query: str | Mapping[str, Any], to_stringify: bool = True) -> Any:
        """GET the collection with a query the builder cannot express.

        Args:
            query: Mapping to encode, or an already encoded query string
            to_stringify: Encode ``query``; pass False to send a string verbatim
        """
        if to_stringify and not isinstance(query, str):
            query_string = stringify(query)
        else:
            query_string = str(query)
        return await self.target.transport.get(f"{self.path}?{query_string}")

    # Writes

    async def create(self, data: Any) -> Any:
        """POST a new record; the body is sent as given."""
        return await self.target.transport.post(self.path, json=data)

    async def update(self, id: str | int, data: Any) -> Any:
        """PUT new values onto an existing record."""
        return await self.target.transport.put(f"{self.path}/{id}", json=data)

    async def delete(self, id: str | int) -> Any:
        """DELETE a record."""
        return await self.target.transport.delete(f"{self.path}/{id}")

    # Authentication (users only)

    async def auth(self, identifier: str, password: str) -> Any:
        """Log a user in through the local provider.

        Raises:
            InvalidOperationError: If this request is not bound to "users"
        """
        self._require_users("auth")
        return await self.target.transport.post(
            AUTH_LOCAL_PATH, json={"identifier": identifier, "password": password}
        )

    async def register(self, username: str, email: str, password: str) -> Any:
        """Register a user through the local provider.

        Raises:
            InvalidOperationError: If this request is not bound to "users"
        """
        self._require_users("register")
        return await self.target.transport.post(
            AUTH_REGISTER_PATH,
            json={"username": username, "email": email, "password": password},
        )

    def _require_users(self, method: str) -> None:
        if not supports_auth(self.target):
            raise InvalidOperationError(
                f"{method} is only available for the {USERS_RESOURCE!r} resource",
                details={"path": self.path},
            )

    def _with_query(self, path: str) -> str:
        query_string = self.query_state.to_query_string()
        return f"{path}?{query_string}" if query_string else path

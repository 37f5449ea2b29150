"""Tests for bracket-notation query string encoding."""

import httpx

from strapi_fluent.models.enums import PublicationState
from strapi_fluent.utils import flatten, stringify


class TestFlatten:
    """Tests for flatten."""

    def test_nested_mapping(self) -> None:
        """Nested keys become bracket paths."""
        assert flatten({"filters": {"title": {"$eq": "Hello"}}}) == [
            ("filters[title][$eq]", "Hello")
        ]

    def test_list_items_are_indexed(self) -> None:
        """List items get positional indices."""
        assert flatten({"sort": ["title:asc", "id:desc"]}) == [
            ("sort[0]", "title:asc"),
            ("sort[1]", "id:desc"),
        ]

    def test_list_of_mappings(self) -> None:
        """Mappings inside lists keep their keys after the index."""
        query = {"filters": {"$or": [{"title": "a"}, {"title": "b"}]}}
        assert flatten(query) == [
            ("filters[$or][0][title]", "a"),
            ("filters[$or][1][title]", "b"),
        ]

    def test_none_is_omitted(self) -> None:
        """None values are dropped entirely."""
        assert flatten({"pagination": {"page": 1, "withCount": None}}) == [
            ("pagination[page]", "1")
        ]

    def test_booleans_and_enums(self) -> None:
        """Booleans are lowercased and enums use their value."""
        assert flatten({"a": True, "b": False, "c": PublicationState.PREVIEW}) == [
            ("a", "true"),
            ("b", "false"),
            ("c", "preview"),
        ]


class TestStringify:
    """Tests for stringify."""

    def test_empty(self) -> None:
        """Empty or missing query encodes to an empty string."""
        assert stringify({}) == ""
        assert stringify(None) == ""

    def test_brackets_and_operators_are_encoded(self) -> None:
        """Brackets, dollar signs and colons are percent-encoded."""
        assert stringify({"filters": {"title": {"$eq": "Hello"}}}) == (
            "filters%5Btitle%5D%5B%24eq%5D=Hello"
        )
        assert stringify({"sort": ["title:asc"]}) == "sort%5B0%5D=title%3Aasc"

    def test_spaces_and_ampersands_in_values(self) -> None:
        """Reserved characters in values cannot break the query apart."""
        encoded = stringify({"q": "a b&c"})
        assert "&" not in encoded
        assert httpx.QueryParams(encoded)["q"] == "a b&c"

    def test_multiple_keys_keep_order(self) -> None:
        """Pairs appear in insertion order."""
        assert stringify({"locale": "fr", "populate": "*"}) == "locale=fr&populate=%2A"

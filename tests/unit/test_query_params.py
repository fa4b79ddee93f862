"""Unit tests for query string helpers."""

from __future__ import annotations

from jsonapi_mapper.utils.query_params import encode_query_params, parse_query_params


class TestParseQueryParams:
    def test_empty(self) -> None:
        assert parse_query_params({}) == {"include": None, "page": {}}

    def test_include_split(self) -> None:
        parsed = parse_query_params({"include": "author, comments.author,,"})
        assert parsed["include"] == ["author", "comments.author"]

    def test_empty_include(self) -> None:
        assert parse_query_params({"include": ""})["include"] == []

    def test_page_values(self) -> None:
        parsed = parse_query_params({"page[offset]": "20", "page[cursor]": "abc"})
        assert parsed["page"] == {"offset": 20, "cursor": "abc"}

    def test_other_params_ignored(self) -> None:
        parsed = parse_query_params({"sort": "-title", "include": None})
        assert parsed == {"include": None, "page": {}}


class TestEncodeQueryParams:
    def test_empty(self) -> None:
        assert encode_query_params(None) == ""
        assert encode_query_params({}) == ""

    def test_scalars(self) -> None:
        assert encode_query_params({"sort": "-title", "flag": True}) == "sort=-title&flag=true"

    def test_nested_and_sequences(self) -> None:
        encoded = encode_query_params({"fields": {"articles": ["title", "body"]}})
        assert encoded == "fields%5Barticles%5D=title%2Cbody"

    def test_none_dropped(self) -> None:
        assert encode_query_params({"include": None, "sort": "id"}) == "sort=id"

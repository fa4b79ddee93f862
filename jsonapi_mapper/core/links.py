"""JSON:API link builders.

Every builder is a pure function of its arguments; generated links all
share the same query-string encoding.
"""

from __future__ import annotations

from typing import Any, Mapping

from jsonapi_mapper.core.exceptions import InvalidResourceTypeError
from jsonapi_mapper.core.options import PaginationInfo
from jsonapi_mapper.core.template import LinkTemplateFn, RelationshipLinksFn
from jsonapi_mapper.utils.query_params import encode_query_params


def _check_type(type_: Any) -> None:
    if not isinstance(type_, str) or not type_:
        raise InvalidResourceTypeError(type_)


def _with_query(url: str, query: Mapping[str, Any] | None) -> str:
    encoded = encode_query_params(query)
    return f"{url}?{encoded}" if encoded else url


def _collection_url(base_url: str, type_: str) -> str:
    return f"{base_url.rstrip('/')}/{type_}"


def build_top(
    base_url: str,
    type_: str,
    pagination: PaginationInfo | None = None,
    query: Mapping[str, Any] | None = None,
) -> dict[str, str]:
    """Return the top-level links for a document of ``type_`` resources."""
    _check_type(type_)
    url = _collection_url(base_url, type_)
    if pagination is None:
        return {"self": _with_query(url, query)}

    limit = pagination.limit

    def build_url(page_offset: int) -> str:
        params = {
            key: value
            for key, value in (query or {}).items()
            if not str(key).startswith("page[")
        }
        raw_page = params.pop("page", None)
        page = dict(raw_page) if isinstance(raw_page, Mapping) else {}
        page.update({"offset": page_offset, "limit": limit})
        params["page"] = page
        return _with_query(url, params)

    last_offset = (max(pagination.total - 1, 0) // limit) * limit
    links = {
        "self": build_url(pagination.offset),
        "first": build_url(0),
        "last": build_url(last_offset),
    }
    if pagination.offset > 0:
        links["prev"] = build_url(max(pagination.offset - limit, 0))
    if pagination.offset + limit < pagination.total:
        links["next"] = build_url(pagination.offset + limit)
    return links


def build_self(
    base_url: str, type_: str, query: Mapping[str, Any] | None = None
) -> LinkTemplateFn:
    """Return a function producing the self link of a ``type_`` resource."""
    _check_type(type_)
    url = _collection_url(base_url, type_)
    frozen_query = dict(query or {})

    def self_link(resource_id: str) -> str:
        return _with_query(f"{url}/{resource_id}", frozen_query)

    return self_link


def build_relationship(base_url: str, type_: str, relation: str) -> RelationshipLinksFn:
    """Return a function producing the links of a relationship object."""
    _check_type(type_)
    url = _collection_url(base_url, type_)

    def relationship_links(resource_id: str) -> dict[str, str]:
        resource_path = f"{url}/{resource_id}"
        return {
            "self": f"{resource_path}/relationships/{relation}",
            "related": f"{resource_path}/{relation}",
        }

    return relationship_links

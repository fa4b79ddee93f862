"""Build mapping options from an incoming FastAPI request."""

from __future__ import annotations

from fastapi import Request

from jsonapi_mapper.core.options import MappingOptions, PaginationInfo
from jsonapi_mapper.utils.query_params import parse_query_params


def mapping_options_from_request(
    request: Request, *, total: int | None = None
) -> MappingOptions:
    """Return mapping options matching the request's query string.

    ``include`` restricts the relations to the first segment of every
    include path. Pagination links are only produced when ``total`` is
    known. Every parameter except ``page[...]`` is preserved on links; a
    bare ``page`` parameter is dropped too once pagination takes over.
    """
    params = parse_query_params(request.query_params)

    relations: bool | frozenset[str] = True
    if params["include"] is not None:
        relations = frozenset(path.split(".")[0] for path in params["include"])

    pagination = None
    if total is not None:
        page = params["page"]
        pagination = PaginationInfo(
            offset=page.get("offset", 0),
            limit=page.get("limit", 10),
            total=total,
        )

    query = {
        key: value
        for key, value in request.query_params.items()
        if not key.startswith("page[")
        and not (key == "page" and pagination is not None)
    }
    return MappingOptions(relations=relations, pagination=pagination, query=query or None)

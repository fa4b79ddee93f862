"""JSON:API top-level document assembly."""

from typing import Any, Iterable, Mapping


class JSONAPIDocumentBuilder:
    """Assemble JSON:API v1.1 top-level documents from resource objects."""

    def build_single(
        self,
        resource: Mapping[str, Any] | None,
        *,
        included: Iterable[Mapping[str, Any]] | None = None,
        links: Mapping[str, Any] | None = None,
        meta: Mapping[str, Any] | None = None,
        jsonapi: Mapping[str, Any] | None = None,
    ) -> dict[str, Any]:
        """Return a document whose primary data is one resource (or null)."""
        data = None if resource is None else dict(resource)
        return self._document(data, included=included, links=links, meta=meta, jsonapi=jsonapi)

    def build_collection(
        self,
        resources: Iterable[Mapping[str, Any]],
        *,
        included: Iterable[Mapping[str, Any]] | None = None,
        links: Mapping[str, Any] | None = None,
        meta: Mapping[str, Any] | None = None,
        jsonapi: Mapping[str, Any] | None = None,
    ) -> dict[str, Any]:
        """Return a document whose primary data is a list of resources."""
        data = [dict(item) for item in resources]
        return self._document(data, included=included, links=links, meta=meta, jsonapi=jsonapi)

    def _document(
        self,
        data: Any,
        *,
        included: Iterable[Mapping[str, Any]] | None,
        links: Mapping[str, Any] | None,
        meta: Mapping[str, Any] | None,
        jsonapi: Mapping[str, Any] | None,
    ) -> dict[str, Any]:
        document: dict[str, Any] = {}
        if jsonapi:
            document["jsonapi"] = dict(jsonapi)
        document["data"] = data
        included = list(included or [])
        if included:
            document["included"] = [dict(item) for item in included]
        if links:
            document["links"] = dict(links)
        if meta:
            document["meta"] = dict(meta)
        return document

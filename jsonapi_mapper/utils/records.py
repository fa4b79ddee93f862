"""Record introspection helpers used by the mapper."""

from __future__ import annotations

from typing import Any

from jsonapi_mapper.adapters.base import RecordAdapter
from jsonapi_mapper.adapters.sqlalchemy import SQLAlchemyAdapter
from jsonapi_mapper.core.exceptions import UnsupportedDataError
from jsonapi_mapper.core.links import build_relationship, build_self
from jsonapi_mapper.core.template import RelationTemplate

default_adapter: RecordAdapter = SQLAlchemyAdapter()


def is_model(data: Any, *, adapter: RecordAdapter = default_adapter) -> bool:
    """Return True if ``data`` is a single record."""
    return adapter.is_model(data)


def is_collection(data: Any, *, adapter: RecordAdapter = default_adapter) -> bool:
    """Return True if ``data`` is a collection of records."""
    return not adapter.is_model(data) and adapter.is_collection(data)


def get_data_attributes_list(
    data: Any, *, adapter: RecordAdapter = default_adapter
) -> list[str]:
    """Return the attribute names of a record.

    Collections are represented by their first member. ``None`` and empty
    collections have no attributes.
    """
    if data is None:
        return []
    if is_model(data, adapter=adapter):
        return list(adapter.attributes(data))
    if is_collection(data, adapter=adapter):
        first = adapter.first(data)
        return [] if first is None else list(adapter.attributes(first))
    raise UnsupportedDataError(data)


def build_relation(
    base_url: str,
    type_: str,
    relation_name: str,
    related_attributes: list[str],
    include_links: bool,
) -> RelationTemplate:
    """Build the template of relation ``relation_name`` of ``type_`` resources."""
    return RelationTemplate(
        type_=relation_name,
        attributes=list(related_attributes),
        relationship_links=build_relationship(base_url, type_, relation_name)
        if include_links
        else None,
        included_links=build_self(base_url, relation_name) if include_links else None,
        included=include_links,
    )


def to_json(data: Any, *, adapter: RecordAdapter = default_adapter) -> Any:
    """Return a plain snapshot of a record or collection."""
    if not (is_model(data, adapter=adapter) or is_collection(data, adapter=adapter)):
        raise UnsupportedDataError(data)
    return adapter.snapshot(data)

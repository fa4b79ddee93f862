"""SQLAlchemy record adapter."""

from __future__ import annotations

import logging
from collections.abc import Collection, Mapping
from typing import Any, Iterable

from sqlalchemy import inspect
from sqlalchemy.orm import InstanceState, Mapper, RelationshipDirection
from sqlalchemy.orm.attributes import NO_VALUE
from sqlalchemy.orm.exc import UnmappedColumnError

logger = logging.getLogger(__name__)


class SQLAlchemyAdapter:
    """Expose SQLAlchemy instances through the record adapter protocol.

    Only values already present in an instance's state are read: unloaded
    columns and relationships are treated as absent, and no lazy load or
    refresh is ever emitted.
    """

    def __init__(self, *, exclude_foreign_keys: bool = True) -> None:
        """Configure attribute filtering.

        With ``exclude_foreign_keys`` the columns backing a many-to-one
        relationship (``author_id``) are left out of the attribute list.
        """
        self.exclude_foreign_keys = exclude_foreign_keys

    def _state(self, data: Any) -> InstanceState | None:
        state = inspect(data, raiseerr=False)
        return state if isinstance(state, InstanceState) else None

    def is_model(self, data: Any) -> bool:
        return self._state(data) is not None

    def is_collection(self, data: Any) -> bool:
        if isinstance(data, (str, bytes, Mapping)) or not isinstance(data, Collection):
            return False
        return all(self.is_model(item) for item in data)

    def members(self, collection: Any) -> Iterable[Any]:
        return iter(collection)

    def first(self, collection: Any) -> Any | None:
        return next(iter(collection), None)

    def _primary_keys(self, mapper: Mapper) -> set[str]:
        return {mapper.get_property_by_column(column).key for column in mapper.primary_key}

    def _foreign_keys(self, mapper: Mapper) -> set[str]:
        keys: set[str] = set()
        for relationship in mapper.relationships:
            if relationship.direction is not RelationshipDirection.MANYTOONE:
                continue
            for column in relationship.local_columns:
                try:
                    keys.add(mapper.get_property_by_column(column).key)
                except UnmappedColumnError:
                    continue
        return keys

    def attributes(self, record: Any) -> list[str]:
        state = inspect(record)
        mapper = state.mapper
        excluded = self._primary_keys(mapper) | set(mapper.relationships.keys())
        if self.exclude_foreign_keys:
            excluded |= self._foreign_keys(mapper)
        unloaded = state.unloaded
        return [
            attr.key
            for attr in mapper.column_attrs
            if attr.key not in excluded
            and attr.key not in unloaded
            and not attr.key.startswith("_")
        ]

    def relations(self, record: Any) -> dict[str, Any]:
        state = inspect(record)
        loaded: dict[str, Any] = {}
        for relationship in state.mapper.relationships:
            value = state.attrs[relationship.key].loaded_value
            if value is NO_VALUE:
                continue
            if isinstance(value, Mapping):
                value = list(value.values())
            loaded[relationship.key] = value
        return loaded

    def identifier(self, record: Any) -> str:
        state = inspect(record)
        mapper = state.mapper
        values = [
            state.dict.get(mapper.get_property_by_column(column).key)
            for column in mapper.primary_key
        ]
        if all(value is None for value in values):
            return ""
        return ",".join("" if value is None else str(value) for value in values)

    def snapshot(self, data: Any) -> Any:
        if self.is_model(data):
            return self._snapshot_record(data, frozenset())
        return [self._snapshot_record(item, frozenset()) for item in data]

    def _snapshot_record(self, record: Any, ancestors: frozenset[int]) -> dict[str, Any]:
        if id(record) in ancestors:
            logger.debug("Cutting snapshot cycle at %r", record)
            return {"id": self.identifier(record)}

        state = inspect(record)
        mapper = state.mapper
        primary_keys = self._primary_keys(mapper)
        unloaded = state.unloaded
        result: dict[str, Any] = {"id": self.identifier(record)}
        for attr in mapper.column_attrs:
            if attr.key in primary_keys or attr.key in unloaded:
                continue
            result[attr.key] = state.dict.get(attr.key)

        path = ancestors | {id(record)}
        for name, related in self.relations(record).items():
            if related is None:
                result[name] = None
            elif self.is_model(related):
                result[name] = self._snapshot_record(related, path)
            else:
                result[name] = [self._snapshot_record(item, path) for item in related]
        return result

"""Record adapter protocol.

An adapter gives the mapper read access to records of one ORM. The mapper
itself never touches ORM objects directly.
"""

from __future__ import annotations

from typing import Any, Iterable, Protocol, runtime_checkable


@runtime_checkable
class RecordAdapter(Protocol):
    """Read-only access to records and collections of records."""

    def is_model(self, data: Any) -> bool:
        """Return True if ``data`` is a single record."""
        ...

    def is_collection(self, data: Any) -> bool:
        """Return True if ``data`` is a collection of records."""
        ...

    def members(self, collection: Any) -> Iterable[Any]:
        """Iterate the records of a collection in order."""
        ...

    def first(self, collection: Any) -> Any | None:
        """Return the first record of a collection, or None when empty."""
        ...

    def attributes(self, record: Any) -> list[str]:
        """Return the record's own field names in declaration order."""
        ...

    def relations(self, record: Any) -> dict[str, Any]:
        """Return the loaded relations of a record by name."""
        ...

    def identifier(self, record: Any) -> str:
        """Return the record identifier as a string."""
        ...

    def snapshot(self, data: Any) -> Any:
        """Return a plain dict/list copy of a record or collection."""
        ...

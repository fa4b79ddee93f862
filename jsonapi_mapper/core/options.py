"""Per-call mapping options."""

from __future__ import annotations

import warnings
from typing import Any, Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


class PaginationInfo(BaseModel):
    """Offset based paging descriptor used for pagination links."""

    model_config = ConfigDict(frozen=True)

    offset: int = Field(default=0, ge=0)
    limit: int = Field(default=10, ge=1)
    total: int = Field(default=0, ge=0)


def _include_relations(values: Mapping[str, Any]) -> Any:
    include = values.get("includeRelations", values.get("include_relations"))
    if include is False:
        return None
    return include


def warn_include_relations(values: Mapping[str, Any], stacklevel: int = 1) -> None:
    """Warn if ``values`` use the deprecated ``includeRelations`` spelling.

    ``stacklevel`` counts from the caller of this function. A ``False``
    value never overrides ``relations`` and is not reported.
    """
    if _include_relations(values) is not None:
        warnings.warn(
            "'includeRelations' is deprecated, use 'relations' instead.",
            DeprecationWarning,
            stacklevel=stacklevel + 1,
        )


class MappingOptions(BaseModel):
    """Options steering relation inclusion and link generation.

    ``relations`` is ``True`` (every loaded relation), ``False`` (none) or a
    set of permitted relation names. ``includeRelations`` is the deprecated
    spelling; unless it is ``None`` or ``False`` it replaces ``relations``
    before anything else reads the options.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    relations: bool | frozenset[str] = True
    include_relations: Optional[bool | frozenset[str]] = Field(
        default=None, alias="includeRelations"
    )
    pagination: Optional[PaginationInfo] = None
    query: Optional[dict[str, Any]] = None

    def __init__(self, **data: Any) -> None:
        warn_include_relations(data, stacklevel=2)
        super().__init__(**data)

    @model_validator(mode="before")
    @classmethod
    def _apply_include_relations(cls, values: Any) -> Any:
        if not isinstance(values, Mapping):
            return values
        include = _include_relations(values)
        if include is None:
            return values
        return {**values, "relations": include}

    @field_validator("relations", "include_relations", mode="before")
    @classmethod
    def _wrap_single_name(cls, value: Any) -> Any:
        if isinstance(value, str):
            return [value]
        return value

    def permits(self, relation: str) -> bool:
        """Return True if ``relation`` may be added to the template."""
        if self.relations is True:
            return True
        if self.relations is False:
            return False
        return relation in self.relations

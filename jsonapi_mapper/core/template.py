"""Encoding templates handed to the document encoder."""

from __future__ import annotations

from dataclasses import dataclass, field, fields, replace
from typing import Any, Callable, Mapping, Optional

LinkTemplateFn = Callable[[str], str]
RelationshipLinksFn = Callable[[str], dict[str, str]]


@dataclass(frozen=True)
class RelationTemplate:
    """Describe how one relation is encoded.

    ``type_`` is the resource type of the related records and ``ref`` the
    snapshot key holding their identifier. ``relationship_links`` receives
    the parent identifier, ``included_links`` the related identifier.
    """

    type_: str
    attributes: list[str] = field(default_factory=list)
    ref: str = "id"
    relationship_links: Optional[RelationshipLinksFn] = None
    included_links: Optional[LinkTemplateFn] = None
    included: bool = False


@dataclass(frozen=True)
class Template:
    """Describe the document shape for one resource type.

    ``attributes`` lists plain attribute names followed by the names of
    permitted relations; it is ``None`` when nothing could be inferred (an
    empty collection).
    """

    top_level_links: dict[str, str] = field(default_factory=dict)
    data_links: dict[str, LinkTemplateFn] = field(default_factory=dict)
    attributes: Optional[list[str]] = None
    relations: dict[str, RelationTemplate] = field(default_factory=dict)
    meta: Optional[dict[str, Any]] = None
    jsonapi: Optional[dict[str, Any]] = None


TEMPLATE_FIELDS = frozenset(item.name for item in fields(Template))


def merge_template(template: Template, overrides: Mapping[str, Any] | None) -> Template:
    """Return a copy of ``template`` with ``overrides`` applied on top.

    The merge is shallow and the override always wins, except for
    ``relations`` which is merged per relation name. Neither argument is
    modified.
    """
    if not overrides:
        return template
    unknown = set(overrides) - TEMPLATE_FIELDS
    if unknown:
        raise TypeError(f"Unknown template option(s): {', '.join(sorted(unknown))}.")

    changes = dict(overrides)
    if "attributes" in changes and changes["attributes"] is not None:
        changes["attributes"] = list(changes["attributes"])
    if "relations" in changes:
        changes["relations"] = {**template.relations, **(changes["relations"] or {})}
    return replace(template, **changes)

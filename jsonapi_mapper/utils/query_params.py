"""Helpers for JSON:API query parameter parsing and encoding."""

from __future__ import annotations

from typing import Any, Iterator, Mapping
from urllib.parse import urlencode


def _split_csv(value: str) -> list[str]:
    return [item for item in (part.strip() for part in value.split(",")) if item]


def parse_query_params(params: Mapping[str, Any]) -> dict[str, Any]:
    """Normalize the ``include`` and ``page`` parameter families."""
    normalized: dict[str, Any] = {"include": None, "page": {}}

    for key, value in params.items():
        if value is None:
            continue
        raw_value = str(value)
        if key == "include":
            normalized["include"] = _split_csv(raw_value)
        elif key.startswith("page[") and key.endswith("]"):
            page_key = key[len("page[") : -1]
            try:
                normalized["page"][page_key] = int(raw_value)
            except ValueError:
                normalized["page"][page_key] = raw_value
    return normalized


def _flatten(prefix: str, value: Any) -> Iterator[tuple[str, str]]:
    if value is None:
        return
    if isinstance(value, Mapping):
        for key, item in value.items():
            yield from _flatten(f"{prefix}[{key}]", item)
    elif isinstance(value, (list, tuple, set, frozenset)):
        yield prefix, ",".join(str(item) for item in value)
    elif isinstance(value, bool):
        yield prefix, "true" if value else "false"
    else:
        yield prefix, str(value)


def encode_query_params(query: Mapping[str, Any] | None) -> str:
    """Encode ``query`` into a query string.

    Nested mappings use bracket keys (``{"page": {"limit": 5}}`` becomes
    ``page[limit]=5``) and sequences are comma separated, mirroring
    :func:`parse_query_params`. ``None`` values are dropped.
    """
    if not query:
        return ""
    pairs: list[tuple[str, str]] = []
    for key, value in query.items():
        pairs.extend(_flatten(str(key), value))
    return urlencode(pairs)

"""Test doubles shared by the test suites."""

from __future__ import annotations

from typing import Any

from jsonapi_mapper.core.template import Template

BASE_URL = "http://api.test"


class RecordingSerializer:
    """Serializer double that keeps every call it receives."""

    def __init__(self) -> None:
        self.calls: list[tuple[str, Any, Template]] = []

    def __call__(self, type_: str, data: Any, template: Template) -> dict[str, Any]:
        self.calls.append((type_, data, template))
        return {"encoded": type_}

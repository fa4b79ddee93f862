"""Shared test fixtures."""

from __future__ import annotations

import pytest
from helpers import BASE_URL, RecordingSerializer

from jsonapi_mapper import Mapper


@pytest.fixture
def base_url() -> str:
    return BASE_URL


@pytest.fixture
def mapper() -> Mapper:
    """Mapper using the default JSON:API serializer."""
    return Mapper(BASE_URL)


@pytest.fixture
def recorder() -> RecordingSerializer:
    return RecordingSerializer()


@pytest.fixture
def recording_mapper(recorder: RecordingSerializer) -> Mapper:
    """Mapper whose serializer records the template it is handed."""
    return Mapper(BASE_URL, serializer=recorder)

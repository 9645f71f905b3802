"""Shared fixtures for envbind tests."""

from typing import Callable, Dict

import pytest

from envbind.sources import MappingSource


@pytest.fixture
def make_source() -> Callable[..., MappingSource]:
    """Build an in-memory environment from keyword or mapping values."""

    def _make(values: Dict[str, str] = None, **kwargs: str) -> MappingSource:
        return MappingSource({**(values or {}), **kwargs})

    return _make


@pytest.fixture
def empty_source() -> MappingSource:
    return MappingSource()

"""Shared pytest fixtures for the full better-slug test suite."""

from __future__ import annotations

from collections.abc import Iterator

import pytest

from better_slug import reset_counters


@pytest.fixture(autouse=True)
def _reset_process_counters() -> Iterator[None]:
    """Start every test with an empty process-level counter table."""

    reset_counters()
    yield
    reset_counters()

"""Integration-test fixtures for deterministic CLI environments."""

from __future__ import annotations

import os

import pytest


@pytest.fixture(autouse=True)
def _clear_better_slug_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """Drop `BETTER_SLUG_*` variables so CLI option layers start from defaults."""

    for key in list(os.environ):
        if key.startswith("BETTER_SLUG_"):
            monkeypatch.delenv(key)

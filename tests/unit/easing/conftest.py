"""Shared pytest fixtures for easing tests."""

from __future__ import annotations

import pytest

from tweenkit.core.easing.models import EaseType


@pytest.fixture(params=list(EaseType), ids=lambda e: e.value)
def any_ease_type(request: pytest.FixtureRequest) -> EaseType:
    """Every ease type, one test per curve."""
    return request.param


@pytest.fixture
def interior_progress() -> list[float]:
    """Progress values strictly inside (0, 1)."""
    return [0.05, 0.2, 0.35, 0.5, 0.65, 0.8, 0.95]

"""Benchmark fixtures and configuration."""

from __future__ import annotations

import pytest


@pytest.fixture
def record_values() -> list[tuple[str, int, float]]:
    """Rows shaped like a small report: name, count, ratio."""
    return [(f"item-{i}", i * 37, i / 7) for i in range(200)]


@pytest.fixture
def long_values() -> list[str]:
    """Values that outgrow the first-guess render buffer."""
    return ["x" * (64 + i) for i in range(100)]

"""Shared pytest fixtures for caseintel tests."""

from __future__ import annotations

import os

import pytest

from caseintel.normalization.service import reset_transformer
from caseintel.observability import reset_observability_cache
from caseintel.settings import get_settings


@pytest.fixture(autouse=True)
def _isolated_settings(monkeypatch):
    """Strip CASEINTEL_* overrides so every test starts from the defaults."""

    for name in list(os.environ):
        if name.startswith("CASEINTEL_"):
            monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    reset_observability_cache()
    reset_transformer()
    yield
    get_settings.cache_clear()
    reset_observability_cache()
    reset_transformer()


class RecordingObservability:
    """Observability stand-in that records events and metrics in memory."""

    def __init__(self) -> None:
        self.events: list[tuple[str, dict]] = []
        self.counters: list[tuple[str, float]] = []
        self.timings: list[tuple[str, float]] = []
        self.tags: list[tuple[str, dict]] = []

    def emit_event(self, event: str, **fields) -> None:
        self.events.append((event, fields))

    def increment(self, metric: str, *, value: float = 1.0, tags=None) -> None:
        self.counters.append((metric, value))
        self.tags.append((metric, dict(tags or {})))

    def record_timing(self, metric: str, value_ms: float, *, tags=None) -> None:
        self.timings.append((metric, value_ms))
        self.tags.append((metric, dict(tags or {})))


@pytest.fixture
def recording_observability() -> RecordingObservability:
    return RecordingObservability()

"""Shared, memoized entry point for case-study normalization.

Every report runs over the same raw collection, so the enriched output is
cached by a content hash of the input. Cached results are deep-copied on the
way out; callers may mutate what they receive.
"""

from __future__ import annotations

import copy
import hashlib
import json
import logging
import threading
import time
from collections import OrderedDict
from typing import Any

from caseintel.normalization.normalizer import transform_case_studies
from caseintel.normalization.schema import TransformResult
from caseintel.observability import Observability, get_observability
from caseintel.settings import Settings, get_settings

LOGGER = logging.getLogger(__name__)


def content_hash(case_studies: Any, *, encoding: str, weight: int) -> str:
    """Return a stable SHA-256 digest for a raw case-study collection."""

    payload = json.dumps(
        {"encoding": encoding, "weight": weight, "records": case_studies},
        sort_keys=True,
        default=str,
        ensure_ascii=False,
    )
    return hashlib.sha256(payload.encode("utf-8")).hexdigest()


class CaseStudyTransformer:
    """Runs :func:`transform_case_studies` with caching and telemetry."""

    def __init__(
        self,
        *,
        settings: Settings | None = None,
        observability: Observability | None = None,
        encoding: str | None = None,
    ) -> None:
        self.settings = settings or get_settings()
        self.encoding = encoding or self.settings.taxonomy.list_encoding
        self.weight = self.settings.taxonomy.challenge_weight
        self.cache_size = self.settings.taxonomy.cache_size
        self.metric_tags = {"encoding": self.encoding}
        self._observability = observability or get_observability(component="taxonomy", settings=self.settings)
        self._cache: "OrderedDict[str, TransformResult]" = OrderedDict()
        self._lock = threading.Lock()

    def transform(self, case_studies: Any) -> TransformResult:
        """Return the enriched collection and stats for ``case_studies``."""

        key = content_hash(case_studies, encoding=self.encoding, weight=self.weight) if self.cache_size else None
        if key is not None:
            with self._lock:
                cached = self._cache.get(key)
                if cached is not None:
                    self._cache.move_to_end(key)
                    self._observability.increment("taxonomy.cache_hit", tags=self.metric_tags)
                    return copy.deepcopy(cached)

        started = time.perf_counter()
        result = transform_case_studies(case_studies, encoding=self.encoding, weight=self.weight)
        elapsed_ms = (time.perf_counter() - started) * 1000.0

        stats = result.stats.to_dict()
        self._observability.emit_event(
            "taxonomy.transform", encoding=self.encoding, duration_ms=round(elapsed_ms, 3), **stats
        )
        self._observability.record_timing("taxonomy.transform", elapsed_ms, tags=self.metric_tags)
        for name in ("autoNormalized", "unresolved", "skipped"):
            if stats[name]:
                self._observability.increment(f"taxonomy.records.{name}", value=stats[name], tags=self.metric_tags)

        if key is not None:
            with self._lock:
                self._cache[key] = copy.deepcopy(result)
                self._cache.move_to_end(key)
                while len(self._cache) > self.cache_size:
                    evicted, _ = self._cache.popitem(last=False)
                    LOGGER.debug("Evicted cached transform %s", evicted[:12])
        return result

    def clear_cache(self) -> None:
        """Drop every cached result."""

        with self._lock:
            self._cache.clear()


_SHARED_TRANSFORMER: CaseStudyTransformer | None = None
_SHARED_LOCK = threading.Lock()


def get_transformer() -> CaseStudyTransformer:
    """Return the process-wide transformer built from the active settings.

    The shared instance is rebuilt whenever :func:`get_settings` hands back a
    different settings object, e.g. after :func:`reload_settings`.
    """

    global _SHARED_TRANSFORMER
    settings = get_settings()
    with _SHARED_LOCK:
        if _SHARED_TRANSFORMER is None or _SHARED_TRANSFORMER.settings is not settings:
            _SHARED_TRANSFORMER = CaseStudyTransformer(settings=settings)
        return _SHARED_TRANSFORMER


def reset_transformer() -> None:
    """Drop the shared transformer and its cache (used in tests)."""

    global _SHARED_TRANSFORMER
    with _SHARED_LOCK:
        _SHARED_TRANSFORMER = None


__all__ = ["CaseStudyTransformer", "content_hash", "get_transformer", "reset_transformer"]

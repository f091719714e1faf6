"""Structured events and StatsD metrics for caseintel.

Every event and metric is stamped with the service name, the active
environment and the emitting component, so taxonomy runs triggered from the
API, the CLI and batch jobs can be told apart downstream. Callers add their own
tags (for example the list encoding of a transform) per call.
"""

from __future__ import annotations

import json
import logging
import socket
import threading
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Mapping

from caseintel.settings import Settings, get_settings

_LOGGER = logging.getLogger("caseintel.observability")
_CLIENT_LOCK = threading.Lock()
_SHARED_CLIENT: "StatsdClient | None" = None


def format_statsd_packet(metric: str, value: float, metric_type: str, tags: Mapping[str, str] | None = None) -> str:
    """Render one DogStatsD-style line, e.g. ``taxonomy.transform:12.5|ms|#env:dev``."""

    number = f"{value:.6f}".rstrip("0").rstrip(".") or "0"
    packet = f"{metric}:{number}|{metric_type}"
    if tags:
        packet += "|#" + ",".join(f"{key}:{val}" for key, val in sorted(tags.items()))
    return packet


@dataclass(slots=True)
class StatsdClient:
    """Fire-and-forget UDP StatsD sender."""

    host: str
    port: int
    prefix: str = ""
    _socket: socket.socket = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._socket = socket.socket(socket.AF_INET, socket.SOCK_DGRAM)

    def send(self, metric: str, value: float, metric_type: str, tags: Mapping[str, str] | None = None) -> None:
        name = f"{self.prefix}.{metric}" if self.prefix else metric
        packet = format_statsd_packet(name, value, metric_type, tags)
        try:
            self._socket.sendto(packet.encode("utf-8"), (self.host, self.port))
        except OSError:  # pragma: no cover - UDP errors are not actionable here
            _LOGGER.debug("StatsD send failed for metric %s", metric, exc_info=True)


class Observability:
    """Emit structured log events and StatsD counters/timings for one component."""

    def __init__(
        self,
        *,
        settings: Settings,
        component: str | None = None,
        client: StatsdClient | None = None,
        logger: logging.Logger | None = None,
    ) -> None:
        self.component = component or "core"
        self.base_tags = {
            "service": settings.observability.service_name,
            "env": settings.env,
            "component": self.component,
        }
        self._structured = bool(settings.observability.structured_logging)
        self._client = client
        self._logger = logger or _LOGGER

    def emit_event(self, event: str, **fields: Any) -> None:
        """Log ``event`` with the base tags and ``fields``; JSON when structured logging is on."""

        payload = {
            "event": event,
            **self.base_tags,
            "timestamp": datetime.now(timezone.utc).isoformat(),
            **{str(key): value for key, value in fields.items()},
        }
        if self._structured:
            self._logger.info(json.dumps(payload, default=str))
        else:
            self._logger.info("%s | %s", event, payload)

    def increment(self, metric: str, *, value: float = 1.0, tags: Mapping[str, Any] | None = None) -> None:
        self._send(metric, value, "c", tags)

    def record_timing(self, metric: str, value_ms: float, *, tags: Mapping[str, Any] | None = None) -> None:
        self._send(metric, value_ms, "ms", tags)

    def metric_tags(self, tags: Mapping[str, Any] | None = None) -> dict[str, str]:
        """Merge per-call ``tags`` over the base tags; ``None`` values are dropped."""

        merged = dict(self.base_tags)
        for key, value in (tags or {}).items():
            if value is not None:
                merged[str(key)] = str(value)
        return merged

    def _send(self, metric: str, value: float, metric_type: str, tags: Mapping[str, Any] | None) -> None:
        if self._client is None:
            return
        self._client.send(metric, value, metric_type, self.metric_tags(tags))


def get_observability(*, component: str | None = None, settings: Settings | None = None) -> Observability:
    """Return an :class:`Observability` for ``component`` sharing one StatsD client."""

    resolved = settings or get_settings()
    return Observability(settings=resolved, component=component, client=_shared_client(resolved))


def reset_observability_cache() -> None:
    """Forget the shared StatsD client (used in tests)."""

    global _SHARED_CLIENT
    with _CLIENT_LOCK:
        _SHARED_CLIENT = None


def _shared_client(settings: Settings) -> StatsdClient | None:
    global _SHARED_CLIENT
    host = settings.observability.statsd_host
    if not host:
        return None
    with _CLIENT_LOCK:
        if _SHARED_CLIENT is None:
            _SHARED_CLIENT = StatsdClient(
                host=host,
                port=settings.observability.statsd_port,
                prefix=settings.observability.statsd_prefix,
            )
        return _SHARED_CLIENT


__all__ = ["Observability", "StatsdClient", "format_statsd_packet", "get_observability", "reset_observability_cache"]

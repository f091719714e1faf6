"""Tests for structured events and StatsD metrics."""

from __future__ import annotations

import json
import logging

from caseintel.observability import Observability, StatsdClient, format_statsd_packet, get_observability
from caseintel.settings import Settings
from caseintel.settings.config import ObservabilitySettings


class _CapturingSocket:
    def __init__(self) -> None:
        self.sent: list[bytes] = []

    def sendto(self, payload: bytes, address) -> None:
        self.sent.append(payload)


def _settings(**observability) -> Settings:
    return Settings(env="dev", observability=ObservabilitySettings(**observability))


def test_emit_event_carries_service_env_and_component(caplog):
    observability = Observability(settings=_settings(service_name="caseintel-api"), component="taxonomy")

    with caplog.at_level(logging.INFO, logger="caseintel.observability"):
        observability.emit_event("taxonomy.transform", encoding="json", total=3)

    payload = json.loads(caplog.records[-1].getMessage())
    assert payload["event"] == "taxonomy.transform"
    assert payload["service"] == "caseintel-api"
    assert payload["env"] == "dev"
    assert payload["component"] == "taxonomy"
    assert payload["encoding"] == "json"
    assert payload["total"] == 3


def test_metrics_are_noops_without_statsd_host():
    observability = get_observability(component="taxonomy", settings=_settings(statsd_host=None))

    observability.increment("taxonomy.cache_hit")
    observability.record_timing("taxonomy.transform", 12.5)


def test_metric_tags_merge_over_base_tags():
    observability = Observability(settings=_settings(), component="taxonomy")

    tags = observability.metric_tags({"encoding": "native", "component": "cli", "skip": None})

    assert tags == {"service": "caseintel", "env": "dev", "component": "cli", "encoding": "native"}


def test_format_statsd_packet():
    assert format_statsd_packet("taxonomy.transform", 12.5, "ms") == "taxonomy.transform:12.5|ms"
    assert format_statsd_packet("a", 2, "c", {"b": "2", "a": "1"}) == "a:2|c|#a:1,b:2"
    assert format_statsd_packet("a", 0, "c") == "a:0|c"


def test_statsd_client_sends_tagged_packets():
    client = StatsdClient(host="127.0.0.1", port=8125, prefix="caseintel")
    client._socket = _CapturingSocket()
    observability = Observability(settings=_settings(structured_logging=False), component="taxonomy", client=client)

    observability.increment("taxonomy.records.skipped", value=2, tags={"encoding": "json"})
    observability.record_timing("taxonomy.transform", 12.5)

    assert client._socket.sent == [
        b"caseintel.taxonomy.records.skipped:2|c|#component:taxonomy,encoding:json,env:dev,service:caseintel",
        b"caseintel.taxonomy.transform:12.5|ms|#component:taxonomy,env:dev,service:caseintel",
    ]

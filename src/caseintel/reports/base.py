"""Shared helpers for report builders.

Reports only ever read the enriched output of the normalizer. Normalized list
fields are decoded here, whatever encoding they were stored in, so no report
has to care whether it got JSON strings or native lists.
"""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from typing import Dict, Iterable, List, Tuple

from caseintel.normalization.fields import resolve_list, resolve_text
from caseintel.normalization.normalizer import is_resolved
from caseintel.normalization.reference_data import PLACEHOLDER_TOKENS, SERVICE_SILOS
from caseintel.normalization.schema import TransformResult
from caseintel.reports.models import CountEntry

UNKNOWN_PROVIDER = "Unknown"


@dataclass(frozen=True)
class ResolvedCaseStudy:
    """The normalized view of one resolved case study."""

    industry: str
    services: Tuple[str, ...]
    provider: str
    technologies: Tuple[str, ...] = ()
    raw_services: Tuple[str, ...] = ()


def canonical_services(record) -> Tuple[str, ...]:
    """Decode ``services_normalized`` and keep only canonical silos, deduplicated."""

    services = resolve_list(record, "services_normalized")
    return tuple(silo for silo in SERVICE_SILOS if silo in services)


def provider_of(record) -> str:
    return resolve_text(record, "bpo_provider") or UNKNOWN_PROVIDER


def raw_technologies(record) -> Tuple[str, ...]:
    """Technology mentions as written on the record, without placeholders."""

    return tuple(
        tech for tech in resolve_list(record, "technologies_used") if tech.lower() not in PLACEHOLDER_TOKENS
    )


def resolved_case_studies(result: TransformResult) -> List[ResolvedCaseStudy]:
    """Return the resolved records of ``result`` with decoded taxonomy fields.

    Records whose services hold no canonical silo are dropped here; they are
    surfaced through the ``non_canonical`` counter instead.
    """

    resolved: List[ResolvedCaseStudy] = []
    for record in result.enriched:
        if not is_resolved(record):
            continue
        services = canonical_services(record)
        if not services:
            continue
        resolved.append(
            ResolvedCaseStudy(
                industry=resolve_text(record, "client_industry_normalized"),
                services=services,
                provider=provider_of(record),
                technologies=raw_technologies(record),
                raw_services=tuple(resolve_list(record, "services_provided")),
            )
        )
    return resolved


def report_counters(result: TransformResult) -> Dict[str, int]:
    """Batch counters plus ``non_canonical``.

    ``non_canonical`` counts records that are resolved but whose stored
    services contain no canonical silo. They are left out of every report and
    are not part of ``unresolved``.
    """

    non_canonical = sum(1 for record in result.enriched if is_resolved(record) and not canonical_services(record))
    return {
        "auto_normalized": result.stats.auto_normalized,
        "unresolved": result.stats.unresolved,
        "skipped": result.stats.skipped,
        "non_canonical": non_canonical,
    }


def ranked(counter: Counter, limit: int | None = None) -> List[Tuple[str, int]]:
    """Sort ``counter`` by count descending, then label, and truncate."""

    items = sorted(counter.items(), key=lambda item: (-item[1], item[0]))
    return items[:limit] if limit is not None else items


def count_entries(pairs: Iterable[Tuple[str, int]]) -> List[CountEntry]:
    return [CountEntry(label=label, count=count) for label, count in pairs]

"""Technology landscape across case studies."""

from __future__ import annotations

from collections import Counter, defaultdict
from typing import Dict, Mapping, Set

from caseintel.normalization.fields import resolve_list
from caseintel.normalization.reference_data import TECH_CATEGORIES
from caseintel.normalization.schema import TransformResult
from caseintel.reports.base import provider_of, ranked, report_counters
from caseintel.reports.models import TechnologyEntry, TechnologyLandscapeReport


def build_technology_landscape(result: TransformResult) -> TechnologyLandscapeReport:
    """Count normalized technology labels across every enriched record.

    Industry and service resolution is not required here; any record carrying
    normalized technologies contributes. Every category in
    :data:`TECH_CATEGORIES` is listed, with a zero count when unused.
    """

    counts: Counter = Counter()
    providers: Dict[str, Set[str]] = defaultdict(set)
    with_technology = 0

    for record in result.enriched:
        if not isinstance(record, Mapping):
            continue
        labels = set(resolve_list(record, "technologies_normalized"))
        if not labels:
            continue
        with_technology += 1
        provider = provider_of(record)
        for label in labels:
            counts[label] += 1
            providers[label].add(provider)

    for category in TECH_CATEGORIES:
        counts.setdefault(category, 0)

    technologies = [
        TechnologyEntry(
            name=name,
            count=count,
            provider_count=len(providers[name]),
            categorized=name in TECH_CATEGORIES,
        )
        for name, count in ranked(counts)
    ]
    return TechnologyLandscapeReport(
        technologies=technologies,
        categories=list(TECH_CATEGORIES),
        case_studies_with_technology=with_technology,
        **report_counters(result),
    )

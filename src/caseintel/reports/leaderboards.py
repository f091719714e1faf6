"""Whitespace leaderboard and provider benchmarking.

"Whitespace" here is the sales sense of the word: industries and service silos
with little documented case-study activity.
"""

from __future__ import annotations

from collections import Counter, defaultdict
from typing import Dict, List, Set

from caseintel.normalization.reference_data import SERVICE_SILOS
from caseintel.normalization.schema import TransformResult
from caseintel.reports.base import count_entries, ranked, report_counters, resolved_case_studies
from caseintel.reports.models import ProviderBenchmark, ProviderBenchmarkReport, WhitespaceEntry, WhitespaceReport

TOP_SERVICES = 3
MISSING_SERVICES = 3
TOP_INDUSTRIES = 3
MAX_GAPS = 5


def build_whitespace_leaderboard(result: TransformResult) -> WhitespaceReport:
    """Rank industries from least to most case-study activity.

    Each entry lists its busiest silos and the first canonical silos it has no
    case study for.
    """

    totals: Counter = Counter()
    providers: Dict[str, Set[str]] = defaultdict(set)
    services: Dict[str, Counter] = defaultdict(Counter)

    for case_study in resolved_case_studies(result):
        totals[case_study.industry] += 1
        providers[case_study.industry].add(case_study.provider)
        services[case_study.industry].update(case_study.services)

    entries: List[WhitespaceEntry] = []
    for industry, total in totals.items():
        present = services[industry]
        entries.append(
            WhitespaceEntry(
                industry=industry,
                total_case_studies=total,
                provider_count=len(providers[industry]),
                top_services=count_entries(ranked(present, TOP_SERVICES)),
                missing_services=[silo for silo in SERVICE_SILOS if silo not in present][:MISSING_SERVICES],
            )
        )

    entries.sort(key=lambda entry: (entry.total_case_studies, entry.industry))
    return WhitespaceReport(industries=entries, **report_counters(result))


def build_provider_benchmarks(result: TransformResult) -> ProviderBenchmarkReport:
    """Profile each provider's industry and service coverage against the whole set."""

    totals: Counter = Counter()
    industries: Dict[str, Counter] = defaultdict(Counter)
    services: Dict[str, Counter] = defaultdict(Counter)
    all_industries: List[str] = []

    for case_study in resolved_case_studies(result):
        totals[case_study.provider] += 1
        industries[case_study.provider][case_study.industry] += 1
        services[case_study.provider].update(case_study.services)
        if case_study.industry not in all_industries:
            all_industries.append(case_study.industry)

    benchmarks = []
    for provider in sorted(totals):
        present_industries = industries[provider]
        present_services = services[provider]
        benchmarks.append(
            ProviderBenchmark(
                provider=provider,
                total_case_studies=totals[provider],
                top_industries=count_entries(ranked(present_industries, TOP_INDUSTRIES)),
                top_services=count_entries(ranked(present_services, TOP_SERVICES)),
                industry_gaps=[name for name in all_industries if name not in present_industries][:MAX_GAPS],
                service_gaps=[silo for silo in SERVICE_SILOS if silo not in present_services][:MAX_GAPS],
            )
        )

    return ProviderBenchmarkReport(
        providers=benchmarks,
        industries=all_industries,
        service_silos=list(SERVICE_SILOS),
        **report_counters(result),
    )

"""Executive roadmap: the least-covered industries as ranked opportunities."""

from __future__ import annotations

from collections import Counter, defaultdict
from typing import Dict, List, Sequence, Set

from caseintel.normalization.reference_data import SERVICE_SILOS
from caseintel.normalization.schema import TransformResult
from caseintel.reports.base import report_counters, resolved_case_studies
from caseintel.reports.models import ExecutiveRoadmapReport, RoadmapOpportunity

MAX_OPPORTUNITIES = 5
HIGH_PRIORITY_RANKS = 2
WHITESPACE_SERVICES = 3


def _rationale(count: int, providers: int, missing: Sequence[str]) -> str:
    gaps = f"Key service silo gaps: {', '.join(missing)}." if missing else "Limited service coverage documented."
    return f"Only {count} case studies from {providers} provider(s). {gaps}"


def build_executive_roadmap(result: TransformResult) -> ExecutiveRoadmapReport:
    """Rank the industries with the fewest resolved case studies.

    The two least-covered industries are "High" priority, the rest "Medium".
    Ties are broken by industry name.
    """

    totals: Counter = Counter()
    providers: Dict[str, Set[str]] = defaultdict(set)
    services: Dict[str, Set[str]] = defaultdict(set)

    for case_study in resolved_case_studies(result):
        totals[case_study.industry] += 1
        providers[case_study.industry].add(case_study.provider)
        services[case_study.industry].update(case_study.services)

    least_covered = sorted(totals.items(), key=lambda item: (item[1], item[0]))[:MAX_OPPORTUNITIES]
    opportunities: List[RoadmapOpportunity] = []
    for rank, (industry, count) in enumerate(least_covered, start=1):
        missing = [silo for silo in SERVICE_SILOS if silo not in services[industry]][:WHITESPACE_SERVICES]
        provider_count = len(providers[industry])
        opportunities.append(
            RoadmapOpportunity(
                rank=rank,
                industry=industry,
                priority="High" if rank <= HIGH_PRIORITY_RANKS else "Medium",
                case_study_count=count,
                provider_count=provider_count,
                whitespace_services=missing,
                rationale=_rationale(count, provider_count, missing),
            )
        )

    return ExecutiveRoadmapReport(opportunities=opportunities, **report_counters(result))

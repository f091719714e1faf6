"""Industry x service-silo views: the activity heatmap and the coverage matrix."""

from __future__ import annotations

from collections import Counter
from typing import Dict, List, Sequence, Tuple

from caseintel.normalization.reference_data import SERVICE_SILOS
from caseintel.normalization.schema import TransformResult
from caseintel.reports.base import ResolvedCaseStudy, count_entries, ranked, report_counters, resolved_case_studies
from caseintel.reports.models import CoverageGap, CoverageMatrixReport, HeatmapReport, MatrixRow

TOP_N = 5
GAP_THRESHOLD = 1


def _tally(case_studies: Sequence[ResolvedCaseStudy]) -> Tuple[Counter, Counter, Dict[Tuple[str, str], int]]:
    industries: Counter = Counter()
    silos: Counter = Counter()
    cells: Dict[Tuple[str, str], int] = {}
    for case_study in case_studies:
        industries[case_study.industry] += 1
        for silo in case_study.services:
            silos[silo] += 1
            key = (case_study.industry, silo)
            cells[key] = cells.get(key, 0) + 1
    return industries, silos, cells


def _rows(industries: List[str], silos: Sequence[str], cells: Dict[Tuple[str, str], int]) -> List[MatrixRow]:
    rows = []
    for industry in industries:
        counts = {silo: cells.get((industry, silo), 0) for silo in silos}
        rows.append(MatrixRow(industry=industry, counts=counts, total=sum(counts.values())))
    return rows


def build_industry_heatmap(result: TransformResult) -> HeatmapReport:
    """Count resolved case studies per industry and canonical service silo.

    Every silo appears as a column, zero-filled, so gaps stay visible.
    Industries are ordered by how many case studies they have.
    """

    industries, silos, cells = _tally(resolved_case_studies(result))
    ordered = [industry for industry, _ in ranked(industries)]
    return HeatmapReport(
        industries=ordered,
        service_silos=list(SERVICE_SILOS),
        rows=_rows(ordered, SERVICE_SILOS, cells),
        top_industries=count_entries(ranked(industries, TOP_N)),
        top_silos=count_entries(ranked(+silos, TOP_N)),
        **report_counters(result),
    )


def build_service_coverage_matrix(result: TransformResult) -> CoverageMatrixReport:
    """Industry x service matrix limited to silos that have at least one case study.

    Cells with at most one case study are reported as coverage gaps.
    """

    industries, silos, cells = _tally(resolved_case_studies(result))
    ordered = [industry for industry, _ in ranked(industries)]
    services = [silo for silo in SERVICE_SILOS if silos[silo] > 0]
    rows = _rows(ordered, services, cells)
    gaps = [
        CoverageGap(industry=row.industry, service=service, count=row.counts[service])
        for row in rows
        for service in services
        if row.counts[service] <= GAP_THRESHOLD
    ]
    return CoverageMatrixReport(
        industries=ordered,
        services=services,
        rows=rows,
        gaps=gaps,
        **report_counters(result),
    )

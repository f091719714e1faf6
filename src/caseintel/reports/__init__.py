"""Aggregation views over normalized case studies."""

from caseintel.reports.ai_automation import build_ai_automation_report
from caseintel.reports.coverage import build_industry_heatmap, build_service_coverage_matrix
from caseintel.reports.leaderboards import build_provider_benchmarks, build_whitespace_leaderboard
from caseintel.reports.roadmap import build_executive_roadmap
from caseintel.reports.technology import build_technology_landscape

REPORT_BUILDERS = {
    "heatmap": build_industry_heatmap,
    "coverage": build_service_coverage_matrix,
    "whitespace": build_whitespace_leaderboard,
    "providers": build_provider_benchmarks,
    "technology": build_technology_landscape,
    "roadmap": build_executive_roadmap,
    "ai-automation": build_ai_automation_report,
}

__all__ = [
    "REPORT_BUILDERS",
    "build_ai_automation_report",
    "build_executive_roadmap",
    "build_industry_heatmap",
    "build_provider_benchmarks",
    "build_service_coverage_matrix",
    "build_technology_landscape",
    "build_whitespace_leaderboard",
]

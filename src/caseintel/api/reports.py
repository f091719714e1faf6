"""Report API router.

Each endpoint normalizes the posted case studies through the shared
transformer and returns one aggregation view over the enriched result.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends

from caseintel.api.auth import require_api_key
from caseintel.api.taxonomy import CaseStudyBatch, get_case_study_transformer
from caseintel.normalization.service import CaseStudyTransformer
from caseintel.reports import (
    build_ai_automation_report,
    build_executive_roadmap,
    build_industry_heatmap,
    build_provider_benchmarks,
    build_service_coverage_matrix,
    build_technology_landscape,
    build_whitespace_leaderboard,
)
from caseintel.reports.models import (
    AIAutomationReport,
    CoverageMatrixReport,
    ExecutiveRoadmapReport,
    HeatmapReport,
    ProviderBenchmarkReport,
    TechnologyLandscapeReport,
    WhitespaceReport,
)

router = APIRouter(prefix="/reports", tags=["reports"], dependencies=[Depends(require_api_key)])


@router.post("/heatmap", response_model=HeatmapReport, summary="Industry activity heatmap")
def industry_heatmap(
    payload: CaseStudyBatch,
    transformer: CaseStudyTransformer = Depends(get_case_study_transformer),
) -> HeatmapReport:
    return build_industry_heatmap(transformer.transform(payload.case_studies))


@router.post("/coverage", response_model=CoverageMatrixReport, summary="Service coverage matrix")
def service_coverage(
    payload: CaseStudyBatch,
    transformer: CaseStudyTransformer = Depends(get_case_study_transformer),
) -> CoverageMatrixReport:
    return build_service_coverage_matrix(transformer.transform(payload.case_studies))


@router.post("/whitespace", response_model=WhitespaceReport, summary="Whitespace leaderboard")
def whitespace_leaderboard(
    payload: CaseStudyBatch,
    transformer: CaseStudyTransformer = Depends(get_case_study_transformer),
) -> WhitespaceReport:
    return build_whitespace_leaderboard(transformer.transform(payload.case_studies))


@router.post("/providers", response_model=ProviderBenchmarkReport, summary="Provider benchmarking")
def provider_benchmarks(
    payload: CaseStudyBatch,
    transformer: CaseStudyTransformer = Depends(get_case_study_transformer),
) -> ProviderBenchmarkReport:
    return build_provider_benchmarks(transformer.transform(payload.case_studies))


@router.post("/technology", response_model=TechnologyLandscapeReport, summary="Technology landscape")
def technology_landscape(
    payload: CaseStudyBatch,
    transformer: CaseStudyTransformer = Depends(get_case_study_transformer),
) -> TechnologyLandscapeReport:
    return build_technology_landscape(transformer.transform(payload.case_studies))


@router.post("/roadmap", response_model=ExecutiveRoadmapReport, summary="Executive whitespace roadmap")
def executive_roadmap(
    payload: CaseStudyBatch,
    transformer: CaseStudyTransformer = Depends(get_case_study_transformer),
) -> ExecutiveRoadmapReport:
    return build_executive_roadmap(transformer.transform(payload.case_studies))


@router.post("/ai-automation", response_model=AIAutomationReport, summary="AI and automation adoption")
def ai_automation(
    payload: CaseStudyBatch,
    transformer: CaseStudyTransformer = Depends(get_case_study_transformer),
) -> AIAutomationReport:
    return build_ai_automation_report(transformer.transform(payload.case_studies))

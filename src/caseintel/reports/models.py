"""Pydantic models returned by the case-study report builders."""

from __future__ import annotations

from typing import Dict, List, Literal

from pydantic import BaseModel, Field


class ReportBase(BaseModel):
    """Normalization counters every report surfaces alongside its data."""

    auto_normalized: int = 0
    unresolved: int = 0
    skipped: int = 0
    non_canonical: int = 0


class CountEntry(BaseModel):
    """A label with the number of case studies behind it."""

    label: str
    count: int


class MatrixRow(BaseModel):
    """One industry row of an industry x service-silo matrix."""

    industry: str
    counts: Dict[str, int] = Field(default_factory=dict)
    total: int = 0


class CoverageGap(BaseModel):
    """An industry/service combination with little or no case-study activity."""

    industry: str
    service: str
    count: int


class HeatmapReport(ReportBase):
    """Industry activity heatmap across all canonical service silos."""

    industries: List[str] = Field(default_factory=list)
    service_silos: List[str] = Field(default_factory=list)
    rows: List[MatrixRow] = Field(default_factory=list)
    top_industries: List[CountEntry] = Field(default_factory=list)
    top_silos: List[CountEntry] = Field(default_factory=list)


class CoverageMatrixReport(ReportBase):
    """Industry x service coverage limited to silos with data, plus gaps."""

    industries: List[str] = Field(default_factory=list)
    services: List[str] = Field(default_factory=list)
    rows: List[MatrixRow] = Field(default_factory=list)
    gaps: List[CoverageGap] = Field(default_factory=list)


class WhitespaceEntry(BaseModel):
    """Whitespace summary for one industry."""

    industry: str
    total_case_studies: int
    provider_count: int
    top_services: List[CountEntry] = Field(default_factory=list)
    missing_services: List[str] = Field(default_factory=list)


class WhitespaceReport(ReportBase):
    """Industries ordered from least to most documented activity."""

    industries: List[WhitespaceEntry] = Field(default_factory=list)


class ProviderBenchmark(BaseModel):
    """Coverage profile for one BPO provider."""

    provider: str
    total_case_studies: int
    top_industries: List[CountEntry] = Field(default_factory=list)
    top_services: List[CountEntry] = Field(default_factory=list)
    industry_gaps: List[str] = Field(default_factory=list)
    service_gaps: List[str] = Field(default_factory=list)


class ProviderBenchmarkReport(ReportBase):
    """Per-provider benchmarks across normalized industries and silos."""

    providers: List[ProviderBenchmark] = Field(default_factory=list)
    industries: List[str] = Field(default_factory=list)
    service_silos: List[str] = Field(default_factory=list)


class TechnologyEntry(BaseModel):
    """Usage of one normalized technology label."""

    name: str
    count: int
    provider_count: int
    categorized: bool


class TechnologyLandscapeReport(ReportBase):
    """Technology usage across case studies, zero-filled for every category."""

    technologies: List[TechnologyEntry] = Field(default_factory=list)
    categories: List[str] = Field(default_factory=list)
    case_studies_with_technology: int = 0


class RoadmapOpportunity(BaseModel):
    """One least-covered industry, ranked as a sales opportunity."""

    rank: int
    industry: str
    priority: Literal["High", "Medium"]
    case_study_count: int
    provider_count: int
    whitespace_services: List[str] = Field(default_factory=list)
    rationale: str


class ExecutiveRoadmapReport(ReportBase):
    """The least-covered industries with their service-silo gaps."""

    opportunities: List[RoadmapOpportunity] = Field(default_factory=list)


class AIIndustryEntry(BaseModel):
    """AI/automation case-study activity in one industry."""

    industry: str
    count: int
    provider_count: int
    top_technologies: List[str] = Field(default_factory=list)


class AIProviderEntry(BaseModel):
    """AI/automation case-study activity of one provider."""

    provider: str
    count: int
    industry_count: int
    top_technologies: List[str] = Field(default_factory=list)


class AIAutomationReport(ReportBase):
    """Share and spread of AI and automation work across case studies."""

    total_ai: int = 0
    ai_percentage: int = 0
    industries: List[AIIndustryEntry] = Field(default_factory=list)
    providers: List[AIProviderEntry] = Field(default_factory=list)
    top_technologies: List[CountEntry] = Field(default_factory=list)
    use_cases: List[CountEntry] = Field(default_factory=list)
    no_ai_industries: List[str] = Field(default_factory=list)

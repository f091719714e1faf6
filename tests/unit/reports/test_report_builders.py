"""Tests for the taxonomy report builders."""

from __future__ import annotations

import pytest

from caseintel.normalization.normalizer import transform_case_studies
from caseintel.normalization.reference_data import SERVICE_SILOS, TECH_CATEGORIES
from caseintel.reports import (
    REPORT_BUILDERS,
    build_ai_automation_report,
    build_executive_roadmap,
    build_industry_heatmap,
    build_provider_benchmarks,
    build_service_coverage_matrix,
    build_technology_landscape,
    build_whitespace_leaderboard,
)
from caseintel.reports.ai_automation import AI_SILO, use_cases_for
from caseintel.reports.base import ResolvedCaseStudy

FINANCE = "Finance, Accounting, & Claims"
RISK = "Risk, Compliance, & Trust"
SUPPORT = "General Customer Service & Support"

CASE_STUDIES = [
    {
        "bpo_provider": "Acme",
        "client_industry": "insurance",
        "business_challenge": "Slow claims processing",
        "technologies_used": ["UiPath", "Kustomer"],
    },
    {
        "bpo_provider": "Acme",
        "client_industry": "bank",
        "business_challenge": "Fraud and KYC review backlog",
    },
    {
        "BPO Provider": "Beta",
        "client_industry": "hospital",
        "business_challenge": "Patient customer support during open enrollment",
        "technologies_used": "Genesys Cloud; UiPath",
    },
    {"bpo_provider": "Beta", "title": "Quarterly update"},
    {},
    {
        "client_industry_normalized": "Gaming",
        "services_normalized": '["Collections"]',
        "business_challenge": "Player support",
    },
]


@pytest.fixture
def result():
    return transform_case_studies(CASE_STUDIES)


def test_heatmap(result):
    report = build_industry_heatmap(result)

    assert report.industries == ["Financial Services", "Healthcare"]
    assert report.service_silos == list(SERVICE_SILOS)
    financial = report.rows[0]
    assert financial.counts[FINANCE] == 1
    assert financial.counts[RISK] == 1
    assert financial.counts[SUPPORT] == 0
    assert set(financial.counts) == set(SERVICE_SILOS)
    assert financial.total == 2
    assert [(entry.label, entry.count) for entry in report.top_industries] == [
        ("Financial Services", 2),
        ("Healthcare", 1),
    ]
    assert {entry.label for entry in report.top_silos} == {FINANCE, RISK, SUPPORT}
    assert (report.auto_normalized, report.unresolved, report.skipped) == (3, 1, 1)


def test_non_canonical_services_are_ignored(result):
    """Records whose stored services are all non-canonical never reach a report."""
    assert "Gaming" not in build_industry_heatmap(result).industries
    assert "Gaming" not in [entry.industry for entry in build_whitespace_leaderboard(result).industries]
    assert build_industry_heatmap(result).non_canonical == 1
    assert build_whitespace_leaderboard(result).unresolved == 1


def test_coverage_matrix(result):
    report = build_service_coverage_matrix(result)

    assert report.services == [SUPPORT, FINANCE, RISK]
    assert [row.industry for row in report.rows] == ["Financial Services", "Healthcare"]
    assert len(report.gaps) == 6
    assert all(gap.count <= 1 for gap in report.gaps)


def test_whitespace_leaderboard(result):
    report = build_whitespace_leaderboard(result)

    assert [entry.industry for entry in report.industries] == ["Healthcare", "Financial Services"]
    healthcare, financial = report.industries
    assert healthcare.total_case_studies == 1
    assert healthcare.missing_services == [
        "Sales & Omnichannel Experience",
        "AI & Advanced Analytics",
        "Automation & Digital Transformation",
    ]
    assert financial.provider_count == 1
    assert [entry.label for entry in financial.top_services] == [FINANCE, RISK]


def test_provider_benchmarks(result):
    report = build_provider_benchmarks(result)

    assert [benchmark.provider for benchmark in report.providers] == ["Acme", "Beta"]
    acme, beta = report.providers
    assert acme.total_case_studies == 2
    assert [(entry.label, entry.count) for entry in acme.top_industries] == [("Financial Services", 2)]
    assert acme.industry_gaps == ["Healthcare"]
    assert acme.service_gaps == [
        SUPPORT,
        "Sales & Omnichannel Experience",
        "AI & Advanced Analytics",
        "Automation & Digital Transformation",
        "General Back Office & Operations",
    ]
    # The unresolved "Quarterly update" record does not count for Beta.
    assert beta.total_case_studies == 1
    assert beta.industry_gaps == ["Financial Services"]


def test_technology_landscape(result):
    report = build_technology_landscape(result)
    by_name = {entry.name: entry for entry in report.technologies}

    assert report.technologies[0].name == "RPA & Automation"
    assert by_name["RPA & Automation"].count == 2
    assert by_name["RPA & Automation"].provider_count == 2
    assert by_name["Contact Center Platforms"].count == 1
    assert by_name["Kustomer"].categorized is False
    assert by_name["Cloud Infrastructure"].count == 0
    assert set(TECH_CATEGORIES) <= set(by_name)
    assert report.case_studies_with_technology == 2


def test_reports_over_native_encoding_match_json():
    json_report = build_industry_heatmap(transform_case_studies(CASE_STUDIES))
    native_report = build_industry_heatmap(transform_case_studies(CASE_STUDIES, encoding="native"))
    assert native_report == json_report


@pytest.mark.parametrize("name", sorted(REPORT_BUILDERS))
def test_reports_handle_empty_input(name):
    report = REPORT_BUILDERS[name](transform_case_studies([]))
    assert report.unresolved == 0
    assert report.skipped == 0
    assert report.non_canonical == 0


def test_executive_roadmap(result):
    report = build_executive_roadmap(result)

    healthcare, financial = report.opportunities
    assert (healthcare.rank, healthcare.industry, healthcare.priority) == (1, "Healthcare", "High")
    assert healthcare.whitespace_services == [
        "Sales & Omnichannel Experience",
        "AI & Advanced Analytics",
        "Automation & Digital Transformation",
    ]
    assert healthcare.rationale == (
        "Only 1 case studies from 1 provider(s). Key service silo gaps: Sales & Omnichannel Experience, "
        "AI & Advanced Analytics, Automation & Digital Transformation."
    )
    assert (financial.rank, financial.case_study_count, financial.provider_count) == (2, 2, 1)
    assert financial.whitespace_services == [SUPPORT, "Sales & Omnichannel Experience", "AI & Advanced Analytics"]


def test_executive_roadmap_keeps_five_least_covered():
    industries = ["bank", "hospital", "retail", "telecom", "airline", "university"]
    result = transform_case_studies(
        [{"client_industry": industry, "business_challenge": "Customer support"} for industry in industries]
    )

    report = build_executive_roadmap(result)

    assert [opp.industry for opp in report.opportunities] == [
        "Education",
        "Financial Services",
        "Healthcare",
        "Retail & Consumer",
        "Technology & Telecom",
    ]
    assert [opp.priority for opp in report.opportunities] == ["High", "High", "Medium", "Medium", "Medium"]


AI_CASE_STUDIES = [
    {
        "bpo_provider": "Acme",
        "client_industry": "bank",
        "business_challenge": "Deploy RPA bots for dispute intake",
        "services_provided": "RPA",
        "technologies_used": ["UiPath"],
    },
    {
        "bpo_provider": "Beta",
        "client_industry": "bank",
        "business_challenge": "Predictive analytics to reduce churn",
        "services_provided": "chatbot",
        "technologies_used": ["Dialogflow", "N/A"],
    },
    {
        "bpo_provider": "Acme",
        "client_industry": "hospital",
        "business_challenge": "Workflow automation with machine learning triage",
        "services_provided": "machine learning",
        "technologies_used": ["UiPath", "Azure"],
    },
    {"bpo_provider": "Beta", "client_industry": "retail", "business_challenge": "Customer support for order returns"},
]


def test_ai_automation_report():
    report = build_ai_automation_report(transform_case_studies(AI_CASE_STUDIES))

    assert report.total_ai == 3
    assert report.ai_percentage == 75
    assert [(entry.industry, entry.count, entry.provider_count) for entry in report.industries] == [
        ("Financial Services", 2, 2),
        ("Healthcare", 1, 1),
    ]
    assert report.industries[0].top_technologies == ["UiPath", "Dialogflow"]
    acme = report.providers[0]
    assert (acme.provider, acme.count, acme.industry_count) == ("Acme", 2, 2)
    assert acme.top_technologies == ["UiPath", "Azure"]
    assert [(entry.label, entry.count) for entry in report.top_technologies] == [
        ("UiPath", 2),
        ("Azure", 1),
        ("Dialogflow", 1),
    ]
    assert {entry.label: entry.count for entry in report.use_cases} == {
        "RPA & Process Automation": 1,
        "Chatbots & Virtual Assistants": 1,
        "Digital Transformation": 1,
        "Machine Learning Models": 1,
        "Intelligent Automation": 1,
    }
    assert report.no_ai_industries == ["Retail & Consumer"]


def test_use_cases_match_raw_mentions():
    case_study = ResolvedCaseStudy(
        industry="Financial Services",
        services=(AI_SILO,),
        provider="Acme",
        technologies=("ChatGPT",),
        raw_services=("speech analytics",),
    )
    assert use_cases_for(case_study) == [
        "Analytics & Business Intelligence",
        "Generative AI",
        "Voice & Sentiment Analytics",
    ]


def test_ai_report_without_ai_work(result):
    report = build_ai_automation_report(result)

    assert report.total_ai == 0
    assert report.ai_percentage == 0
    assert report.no_ai_industries == ["Financial Services", "Healthcare", "Gaming"]

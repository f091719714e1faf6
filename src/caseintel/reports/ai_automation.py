"""AI and automation adoption across case studies.

A case study counts as AI/automation work when its canonical services include
either :data:`AI_SILOS` entry. Use cases are inferred from the raw technology
and service mentions of those case studies.
"""

from __future__ import annotations

from collections import Counter, defaultdict
from typing import Dict, Iterable, List, Set

from caseintel.normalization.fields import resolve_text
from caseintel.normalization.schema import TransformResult
from caseintel.reports.base import ResolvedCaseStudy, count_entries, ranked, report_counters, resolved_case_studies
from caseintel.reports.models import AIAutomationReport, AIIndustryEntry, AIProviderEntry

AI_SILO = "AI & Advanced Analytics"
AUTOMATION_SILO = "Automation & Digital Transformation"
AI_SILOS = (AI_SILO, AUTOMATION_SILO)

TOP_TECHNOLOGIES = 15
MAX_PROVIDERS = 10
TECHNOLOGIES_PER_ENTRY = 3

# Use cases that apply to AI & Advanced Analytics work, matched by substring.
AI_USE_CASES = (
    ("Chatbots & Virtual Assistants", ("chatbot", "virtual assistant", "conversational")),
    ("Analytics & Business Intelligence", ("analytics", "predictive", "business intelligence")),
    ("Generative AI", ("genai", "generative ai", "llm", "gpt")),
    ("Machine Learning Models", ("machine learning", "ml model", "ai model")),
    ("Voice & Sentiment Analytics", ("sentiment", "voice analytics", "speech")),
)


def use_cases_for(case_study: ResolvedCaseStudy) -> List[str]:
    """Return the use-case buckets one AI/automation case study falls into."""

    text = " ".join(case_study.technologies + case_study.raw_services).lower()
    automation = AUTOMATION_SILO in case_study.services
    ai = AI_SILO in case_study.services

    found: List[str] = []
    if automation:
        if "rpa" in text or "robotic process" in text:
            found.append("RPA & Process Automation")
        else:
            found.append("Digital Transformation")
    if ai:
        found.extend(label for label, keywords in AI_USE_CASES if any(keyword in text for keyword in keywords))
    if automation and ai:
        found.append("Intelligent Automation")
    return found


def _first_seen(values: Iterable[str], limit: int) -> List[str]:
    return list(dict.fromkeys(values))[:limit]


def build_ai_automation_report(result: TransformResult) -> AIAutomationReport:
    """Summarize AI/automation case studies by industry, provider, technology and use case."""

    resolved = resolved_case_studies(result)
    ai_case_studies = [cs for cs in resolved if any(silo in cs.services for silo in AI_SILOS)]

    industries: Counter = Counter()
    industry_providers: Dict[str, Set[str]] = defaultdict(set)
    industry_techs: Dict[str, List[str]] = defaultdict(list)
    providers: Counter = Counter()
    provider_industries: Dict[str, Set[str]] = defaultdict(set)
    provider_techs: Dict[str, List[str]] = defaultdict(list)
    technologies: Counter = Counter()
    use_cases: Counter = Counter()

    for case_study in ai_case_studies:
        industries[case_study.industry] += 1
        industry_providers[case_study.industry].add(case_study.provider)
        industry_techs[case_study.industry].extend(case_study.technologies)
        providers[case_study.provider] += 1
        provider_industries[case_study.provider].add(case_study.industry)
        provider_techs[case_study.provider].extend(case_study.technologies)
        technologies.update(set(case_study.technologies))
        use_cases.update(use_cases_for(case_study))

    all_industries = (resolve_text(record, "client_industry_normalized") for record in result.enriched)
    no_ai = [industry for industry in dict.fromkeys(all_industries) if industry and industry not in industries]

    return AIAutomationReport(
        total_ai=len(ai_case_studies),
        ai_percentage=round(100 * len(ai_case_studies) / len(resolved)) if resolved else 0,
        industries=[
            AIIndustryEntry(
                industry=industry,
                count=count,
                provider_count=len(industry_providers[industry]),
                top_technologies=_first_seen(industry_techs[industry], TECHNOLOGIES_PER_ENTRY),
            )
            for industry, count in ranked(industries)
        ],
        providers=[
            AIProviderEntry(
                provider=provider,
                count=count,
                industry_count=len(provider_industries[provider]),
                top_technologies=_first_seen(provider_techs[provider], TECHNOLOGIES_PER_ENTRY),
            )
            for provider, count in ranked(providers, MAX_PROVIDERS)
        ],
        top_technologies=count_entries(ranked(technologies, TOP_TECHNOLOGIES)),
        use_cases=count_entries(ranked(use_cases)),
        no_ai_industries=no_ai,
        **report_counters(result),
    )

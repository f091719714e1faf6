"""Service-silo classification for case studies.

A transparent, rule-based classifier: each rule is a regex over the combined
case-study text, and every rule that matches contributes its silo. Output is
always reordered to the canonical :data:`SERVICE_SILOS` order so that every
report sees the same list for the same record.
"""

import re
from typing import Any, List, Pattern, Tuple

from caseintel.normalization.fields import joined_text
from caseintel.normalization.reference_data import SERVICE_SILOS

# Business-challenge text is the strongest signal of the service actually
# delivered, so it is repeated this many times in the classified text.
DEFAULT_CHALLENGE_WEIGHT = 3

# Ordered (pattern, silo) rules. Collections work is receivables recovery and
# lands in the finance silo.
SERVICE_PATTERNS: List[Tuple[str, str]] = [
    (
        r"\b(collections?|recovery|past[- ]due|delinquen\w*|charge[- ]offs?|dunning|payment arrangements?"
        r"|skip[- ]trac\w*|repossessions?)\b",
        "Finance, Accounting, & Claims",
    ),
    (
        r"\b(fraud|kyc|aml|sanctions|pep|transaction monitoring|chargebacks?|dispute management|risk review"
        r"|compliance|audit|ofac|identity verification|document verification)\b",
        "Risk, Compliance, & Trust",
    ),
    (
        r"\b(claims?|adjudicat\w*|billing|invoic\w*|accounts payable|accounts receivable|ap|ar|reconcil\w*"
        r"|fp&a|bookkeeping)\b",
        "Finance, Accounting, & Claims",
    ),
    (
        r"\b(customer service|customer support|cx|case management|ticket(?:ing)?|help ?desk|care|inbound"
        r"|contact center)\b",
        "General Customer Service & Support",
    ),
    (
        r"\b(tech(?:nical)? support|it support|service desk|desktop support|infra(?:structure)?|network ops"
        r"|sre|devops|qa testing|penetration testing|soc|siem)\b",
        "IT & Technology Services",
    ),
    (
        r"\b(sales|upsell|cross[- ]sell|retention|renewals|lead gen|acquisition|outbound|inbound sales"
        r"|omnichannel|ecommerce)\b",
        "Sales & Omnichannel Experience",
    ),
    (
        r"\b(automation|rpa|bots?|workflows?|self[- ]service|process (?:re)?engineering|digitiz\w*"
        r"|orchestration)\b",
        "Automation & Digital Transformation",
    ),
    (
        r"\b(ai|genai|nlp|ml|machine learning|predictive|analytics|insights|llm|chatbots?|iva|ivr)\b",
        "AI & Advanced Analytics",
    ),
    (
        r"\b(back[- ]?office|data entry|order processing|catalog|annotation|labeling|content ops|fulfillment"
        r"|document processing)\b",
        "General Back Office & Operations",
    ),
    (
        r"\b(hr|recruit(?:ment|ing)|talent acquisition|onboarding|payroll|l&d|training)\b",
        "HR & People Services",
    ),
    (
        r"\b(consult(?:ing)?|advisory|pmo|coe|transformation office|operating model)\b",
        "Specialized Operations & Consulting",
    ),
]

# Pre-compile regex for performance
SERVICE_RULES: List[Tuple[Pattern[str], str]] = [
    (re.compile(pattern, re.IGNORECASE), silo) for pattern, silo in SERVICE_PATTERNS
]

_unknown = sorted({silo for _, silo in SERVICE_RULES} - set(SERVICE_SILOS))
if _unknown:  # pragma: no cover - guards edits to the rule table
    raise ValueError(f"Service rules reference unknown silos: {_unknown}")


def service_text(services: Any, challenge: Any, solution: Any, title: Any, *, weight: int = DEFAULT_CHALLENGE_WEIGHT) -> str:
    """Build the lower-cased text the service rules run against."""

    return joined_text(title, services, *([challenge] * max(1, weight)), solution)


def detect_service_silos(
    services: Any = "",
    challenge: Any = "",
    solution: Any = "",
    title: Any = "",
    *,
    weight: int = DEFAULT_CHALLENGE_WEIGHT,
) -> List[str]:
    """Detect the service silos a case study describes.

    Args:
        services: Raw services text (already joined if it was a list).
        challenge: Business challenge description, weighted ``weight`` times.
        solution: Solution overview.
        title: Case-study title.
        weight: Repetitions of the challenge text.

    Returns:
        Matching silos in canonical :data:`SERVICE_SILOS` order; empty when no
        rule fires.
    """

    text = service_text(services, challenge, solution, title, weight=weight)
    if not text:
        return []
    hits = {silo for regex, silo in SERVICE_RULES if regex.search(text)}
    return [silo for silo in SERVICE_SILOS if silo in hits]

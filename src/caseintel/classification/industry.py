"""Industry classification for case studies (up to 3 levels).

Each level is a flat decision table of ``(regex, label)`` rules evaluated in
declaration order; the first match wins. Level 2 tables are keyed by their
level 1 parent and level 3 tables by their level 2 parent, so a deeper label
can only ever appear under the parent it is declared for. A miss at any level
halts the cascade at that depth.
"""

import re
from typing import Any, Dict, List, Optional, Pattern, Sequence, Tuple

from caseintel.normalization.fields import joined_text
from caseintel.normalization.schema import IndustryPath

Rule = Tuple[Pattern[str], str]


def _compile(rules: Sequence[Tuple[str, str]]) -> List[Rule]:
    return [(re.compile(pattern, re.IGNORECASE), label) for pattern, label in rules]


# --- Level 1: broad sectors ---
INDUSTRY_L1_RULES: List[Rule] = _compile(
    [
        (r"\b(credit cards?|cardholders?|issuers?|acquirers?|chargebacks?|interchange|card services)\b", "Financial Services"),
        (r"\b(mortgages?|escrow|servicing|loans?|lending)\b", "Financial Services"),
        (r"\b(auto loans?|auto finance|auto lending|repossessions?)\b", "Financial Services"),
        (r"\b(bank|banking|bfsi|deposits?|treasury|payments?|fintech|financial institutions?)\b", "Financial Services"),
        (r"\b(insurance|insurer|policy|claims|underwriting|actuarial|p&c|life insurance|annuit(?:y|ies))\b", "Financial Services"),
        (r"\b(wealth|investments?|brokerage|trading|securities|retirement|401k)\b", "Financial Services"),
        (
            r"\b(healthcare|health care|hospitals?|clinics?|patients?|medical|physicians?|payers?|pbm|pharmacy"
            r"|health ?plans?)\b",
            "Healthcare",
        ),
        (r"\b(medicare|medicaid|health insurance|prior auth\w*|eligibility)\b", "Healthcare"),
        (r"\b(retail|retailer|ecommerce|e-commerce|online shopping|marketplace|consumer goods|cpg)\b", "Retail & Consumer"),
        (r"\b(amazon|walmart|target|shopping|storefront)\b", "Retail & Consumer"),
        (r"\b(telecom\w*|wireless|broadband|cable|isp|mobile|cellular|5g)\b", "Technology & Telecom"),
        (r"\b(streaming|media|entertainment|content|broadcasting)\b", "Technology & Telecom"),
        (r"\b(software|saas|technology|tech company|cloud services?)\b", "Technology & Telecom"),
        (r"\b(travel|airlines?|hotels?|hospitality|booking|reservations?|tourism)\b", "Travel & Hospitality"),
        (r"\b(utility|utilities|power|electric|gas|water|energy)\b", "Utilities & Energy"),
        (r"\b(government|public sector|municipal|federal|state|civic|agency)\b", "Government & Public Sector"),
        (r"\b(education|university|college|school|academic|students?|higher ed)\b", "Education"),
        (r"\b(logistics|transportation|shipping|freight|delivery|supply chain|warehouse)\b", "Logistics & Transportation"),
        (r"\b(manufacturing|manufacturer|industrial|factory|assembly line)\b", "Manufacturing & Industrial"),
        (r"\b(real estate|proptech|property management)\b", "Real Estate"),
        (r"\b(law firm|legal services|accounting firm|professional services)\b", "Professional Services"),
    ]
)

# --- Level 2: sub-sectors keyed by level 1 parent ---
INDUSTRY_L2_RULES: Dict[str, List[Rule]] = {
    "Financial Services": _compile(
        [
            (r"\b(credit cards?|cardholders?|issuers?|acquirers?)\b", "Credit Cards & Payments"),
            (r"\b(mortgages?|escrow)\b", "Mortgage & Lending"),
            (r"\b(auto loans?|auto finance)\b", "Auto Finance"),
            (r"\b(insurance|insurer|policy|underwriting)\b", "Insurance"),
            (r"\b(bank|banking|deposits?)\b", "Banking"),
            (r"\b(wealth|investments?|brokerage)\b", "Wealth Management"),
        ]
    ),
    "Healthcare": _compile(
        [
            (r"\b(hospitals?|clinics?|physicians?|providers?)\b", "Healthcare Providers"),
            (r"\b(payers?|insurance|medicare|medicaid|health ?plans?)\b", "Healthcare Payers"),
            (r"\b(pharmacy|pbm)\b", "Pharmacy Benefits"),
        ]
    ),
    "Retail & Consumer": _compile(
        [
            (r"\b(ecommerce|e-commerce|online)\b", "E-Commerce"),
            (r"\b(retail|retailer|stores?)\b", "Retail"),
            (r"\b(cpg|consumer goods)\b", "Consumer Packaged Goods"),
        ]
    ),
    "Technology & Telecom": _compile(
        [
            (r"\b(telecom\w*|wireless|mobile|cellular)\b", "Telecommunications"),
            (r"\b(software|saas|cloud)\b", "Software & SaaS"),
            (r"\b(streaming|media|entertainment)\b", "Media & Entertainment"),
        ]
    ),
}

# --- Level 3: segments keyed by level 2 parent ---
INDUSTRY_L3_RULES: Dict[str, List[Rule]] = {
    "Credit Cards & Payments": _compile(
        [
            (r"\b(disputes?|chargebacks?)\b", "Dispute Management"),
            (r"\b(fraud)\b", "Fraud Prevention"),
            (r"\b(customer service|cardholders?)\b", "Cardholder Services"),
        ]
    ),
    "Mortgage & Lending": _compile(
        [
            (r"\b(servicing|loan servicing)\b", "Loan Servicing"),
            (r"\b(origination|applications?)\b", "Loan Origination"),
            (r"\b(collections?|default)\b", "Collections & Default"),
        ]
    ),
    "Insurance": _compile(
        [
            (r"\b(claims?)\b", "Claims Processing"),
            (r"\b(underwriting)\b", "Underwriting"),
            (r"\b(policy|policyholders?)\b", "Policy Administration"),
        ]
    ),
    "Telecommunications": _compile(
        [
            (r"\b(customer service|support)\b", "Customer Support"),
            (r"\b(sales|retention)\b", "Sales & Retention"),
            (r"\b(tech support|technical)\b", "Technical Support"),
        ]
    ),
}


def _first_match(rules: Sequence[Rule], text: str) -> Optional[str]:
    if not text:
        return None
    for regex, label in rules:
        if regex.search(text):
            return label
    return None


def industry_level_1(industry: Any = "", challenge: Any = "", title: Any = "", services: Any = "") -> Optional[str]:
    """Return the broad sector for the combined text, or ``None``."""

    return _first_match(INDUSTRY_L1_RULES, joined_text(industry, challenge, title, services))


def industry_level_2(level_1: Optional[str], industry: Any = "", challenge: Any = "", title: Any = "") -> Optional[str]:
    """Return the sub-sector declared under ``level_1``, or ``None``."""

    if not level_1:
        return None
    return _first_match(INDUSTRY_L2_RULES.get(level_1, ()), joined_text(industry, challenge, title))


def industry_level_3(level_2: Optional[str], industry: Any = "", challenge: Any = "", services: Any = "") -> Optional[str]:
    """Return the segment declared under ``level_2``, or ``None``."""

    if not level_2:
        return None
    return _first_match(INDUSTRY_L3_RULES.get(level_2, ()), joined_text(industry, challenge, services))


def classify_industry(industry: Any = "", challenge: Any = "", title: Any = "", services: Any = "") -> IndustryPath:
    """Run the full level 1 -> 2 -> 3 cascade.

    Args:
        industry: Raw client industry text.
        challenge: Business challenge description.
        title: Case-study title.
        services: Raw services text.

    Returns:
        An :class:`IndustryPath`; falsy when level 1 did not resolve.
    """

    level_1 = industry_level_1(industry, challenge, title, services)
    if not level_1:
        return IndustryPath()
    level_2 = industry_level_2(level_1, industry, challenge, title)
    level_3 = industry_level_3(level_2, industry, challenge, services)
    return IndustryPath(level_1=level_1, level_2=level_2, level_3=level_3)


def _build_hierarchy() -> Dict[str, Dict[str, List[str]]]:
    hierarchy: Dict[str, Dict[str, List[str]]] = {}
    for _, level_1 in INDUSTRY_L1_RULES:
        hierarchy.setdefault(level_1, {})
    for level_1, rules in INDUSTRY_L2_RULES.items():
        for _, level_2 in rules:
            children = [label for _, label in INDUSTRY_L3_RULES.get(level_2, ())]
            hierarchy[level_1].setdefault(level_2, children)
    return hierarchy


# Level 1 -> level 2 -> [level 3], in declaration order.
INDUSTRY_HIERARCHY: Dict[str, Dict[str, List[str]]] = _build_hierarchy()

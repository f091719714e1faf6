"""Technology-name canonicalization.

Maps free-text technology mentions ("Salesforce Service Cloud", "UiPath") onto
the categories in :data:`TECH_CATEGORIES`. Unmatched names are kept as-is so
specific brands are not lost.
"""

from typing import Any, List, Optional

from caseintel.normalization.fields import clean_text
from caseintel.normalization.reference_data import PLACEHOLDER_TOKENS, TECH_CATEGORIES

MIN_TOKEN_LENGTH = 2


def normalize_technology(tech: Any) -> Optional[str]:
    """Return the canonical category for one technology token.

    Matching is symmetric containment: a keyword inside the token, or the token
    inside a keyword, both count. The first category in declaration order wins.

    Args:
        tech: Raw technology mention.

    Returns:
        The category name, the cleaned original token when no category
        matches, or ``None`` for empty and placeholder tokens.
    """

    original = clean_text(tech)
    token = original.lower()
    if not token or token in PLACEHOLDER_TOKENS or len(token) < MIN_TOKEN_LENGTH:
        return None

    for category, keywords in TECH_CATEGORIES.items():
        for keyword in keywords:
            if keyword in token or token in keyword:
                return category

    return original


def normalize_technologies(techs: Any) -> List[str]:
    """Canonicalize a list of technology tokens.

    Results are deduplicated, keeping first-seen order. Non-list input yields
    an empty list.
    """

    if not isinstance(techs, (list, tuple)):
        return []

    normalized: List[str] = []
    seen = set()
    for tech in techs:
        value = normalize_technology(tech)
        if value and value not in seen:
            seen.add(value)
            normalized.append(value)
    return normalized

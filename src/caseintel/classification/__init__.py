"""Rule-based service and industry classifiers."""

from caseintel.classification.industry import INDUSTRY_HIERARCHY, classify_industry
from caseintel.classification.services import SERVICE_RULES, detect_service_silos

__all__ = ["INDUSTRY_HIERARCHY", "SERVICE_RULES", "classify_industry", "detect_service_silos"]

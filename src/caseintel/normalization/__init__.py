"""Case-study taxonomy normalization: field resolution, canonical reference data and the batch transform."""

from caseintel.normalization.reference_data import FIELD_SYNONYMS, SERVICE_SILOS, TECH_CATEGORIES

__all__ = ["FIELD_SYNONYMS", "SERVICE_SILOS", "TECH_CATEGORIES"]

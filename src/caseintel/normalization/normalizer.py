"""Case-study taxonomy normalizer.

Enriches raw case-study records with canonical service silos, the industry
cascade and canonical technology categories, and counts what happened along
the way. This is the single transform every report consumes; the rules
themselves live in :mod:`caseintel.classification` and
:mod:`caseintel.normalization.technology`.

Normalized values already present on a record are never overwritten, which
makes the transform idempotent: running it over its own output changes
nothing. A freshly computed value owns its level fields: stale
``*_Level_*`` keys carried in from the input are replaced or removed.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Mapping, Optional

from caseintel.classification.industry import classify_industry
from caseintel.classification.services import DEFAULT_CHALLENGE_WEIGHT, detect_service_silos
from caseintel.normalization.fields import clean_text, encode_list, resolve_list, resolve_text
from caseintel.normalization.schema import TransformResult, TransformStats
from caseintel.normalization.technology import normalize_technologies

LOGGER = logging.getLogger(__name__)

LEVEL_SEPARATOR = "; "
INDUSTRY_LEVEL_KEYS = ("Industry_Level_1", "Industry_Level_2", "Industry_Level_3")


def _assign(record: Dict[str, Any], key: str, value: Optional[str]) -> None:
    if value:
        record[key] = value
    else:
        record.pop(key, None)


def _fill_levels(record: Dict[str, Any], values: List[str], first_key: str, rest_key: str) -> None:
    """Derive level fields from a pre-existing list, only where the record has none."""

    if values and not clean_text(record.get(first_key)):
        record[first_key] = values[0]
    if len(values) > 1 and not clean_text(record.get(rest_key)):
        record[rest_key] = LEVEL_SEPARATOR.join(values[1:])


def _set_levels(record: Dict[str, Any], values: List[str], first_key: str, rest_key: str) -> None:
    """Replace both level fields with a freshly computed list; empty levels are removed."""

    _assign(record, first_key, values[0] if values else None)
    _assign(record, rest_key, LEVEL_SEPARATOR.join(values[1:]))


def _keep_existing(record: Dict[str, Any], key: str, values: List[str], encoding: str) -> None:
    """Keep a pre-existing normalized list as stored, writing it only when it came from a synonym key."""

    if not clean_text(record.get(key)):
        record[key] = encode_list(values, encoding)


def _normalize_services(
    record: Dict[str, Any],
    fields: Mapping[str, Any],
    existing: List[str],
    *,
    encoding: str,
    weight: int,
) -> bool:
    """Fill ``services_normalized``; return True when freshly computed with content."""

    if existing:
        _keep_existing(record, "services_normalized", existing, encoding)
        _fill_levels(record, existing, "Service_Level_1", "Service_Level_2")
        return False

    detected = detect_service_silos(
        " ".join(fields["services"]),
        fields["challenge"],
        fields["solution"],
        fields["title"],
        weight=weight,
    )
    record["services_normalized"] = encode_list(detected, encoding)
    _set_levels(record, detected, "Service_Level_1", "Service_Level_2")
    return bool(detected)


def _normalize_industry(record: Dict[str, Any], fields: Mapping[str, Any], existing: str) -> bool:
    """Fill the industry cascade; return True when freshly computed with content."""

    if existing:
        if not clean_text(record.get("client_industry_normalized")):
            record["client_industry_normalized"] = existing
        if not clean_text(record.get("Industry_Level_1")):
            record["Industry_Level_1"] = existing
        return False

    path = classify_industry(fields["industry"], fields["challenge"], fields["title"], " ".join(fields["services"]))
    for key, value in zip(INDUSTRY_LEVEL_KEYS, (path.level_1, path.level_2, path.level_3)):
        _assign(record, key, value)
    if not path:
        return False

    record["client_industry_normalized"] = path.level_1
    return True


def _normalize_technologies(
    record: Dict[str, Any], fields: Mapping[str, Any], existing: List[str], *, encoding: str
) -> bool:
    """Fill ``technologies_normalized``; return True when freshly computed with content."""

    if existing:
        _keep_existing(record, "technologies_normalized", existing, encoding)
        _fill_levels(record, existing, "Tech_Level_1", "Tech_Level_2")
        return False

    normalized = normalize_technologies(fields["technologies"])
    record["technologies_normalized"] = encode_list(normalized, encoding)
    _set_levels(record, normalized, "Tech_Level_1", "Tech_Level_2")
    return bool(normalized)


def _enrich_record(
    row: Mapping[str, Any], stats: TransformStats, *, encoding: str, weight: int
) -> Dict[str, Any]:
    record = dict(row)
    fields = {
        "title": resolve_text(row, "title"),
        "industry": resolve_text(row, "client_industry"),
        "challenge": resolve_text(row, "business_challenge"),
        "solution": resolve_text(row, "solution_overview"),
        "services": resolve_list(row, "services_provided"),
        "technologies": resolve_list(row, "technologies_used"),
    }

    if not (fields["title"] or fields["challenge"] or fields["solution"] or fields["services"]):
        stats.skipped += 1
        return record

    existing_industry = resolve_text(row, "client_industry_normalized")
    existing_services = resolve_list(row, "services_normalized")
    existing_techs = resolve_list(row, "technologies_normalized")

    fresh_services = _normalize_services(record, fields, existing_services, encoding=encoding, weight=weight)
    fresh_industry = _normalize_industry(record, fields, existing_industry)
    fresh_techs = _normalize_technologies(record, fields, existing_techs, encoding=encoding)

    if fresh_services or fresh_industry or fresh_techs:
        stats.auto_normalized += 1

    if not is_resolved(record) or not fields["challenge"]:
        stats.unresolved += 1

    return record


def is_resolved(record: Any) -> bool:
    """Return True when ``record`` has a normalized industry and services.

    Services are decoded before the emptiness test, so an explicit empty list
    encoding (``"[]"``) counts as unresolved.
    """

    return bool(resolve_text(record, "client_industry_normalized")) and bool(
        resolve_list(record, "services_normalized")
    )


def transform_case_studies(
    case_studies: Any,
    *,
    encoding: str = "json",
    weight: int = DEFAULT_CHALLENGE_WEIGHT,
) -> TransformResult:
    """Enrich case studies with normalized taxonomy fields.

    Args:
        case_studies: Ordered sequence of raw case-study mappings. Anything
            that is not a list or tuple yields an empty result.
        encoding: ``"json"`` to store normalized lists as JSON array strings,
            ``"native"`` to store plain lists.
        weight: How many times the business challenge is repeated in the
            service-classification text.

    Returns:
        :class:`TransformResult` with one enriched record per input record, in
        input order, and the batch stats.
    """

    if encoding not in {"json", "native"}:
        raise ValueError(f"Unsupported list encoding: {encoding!r}")
    if not isinstance(case_studies, (list, tuple)):
        return TransformResult()

    stats = TransformStats(total=len(case_studies))
    enriched: List[Any] = []

    for index, row in enumerate(case_studies):
        if not isinstance(row, Mapping):
            LOGGER.debug("Skipping non-mapping case study at index %s (%s)", index, type(row).__name__)
            stats.skipped += 1
            enriched.append(row)
            continue
        try:
            enriched.append(_enrich_record(row, stats, encoding=encoding, weight=weight))
        except Exception:
            LOGGER.exception("Failed to normalize case study at index %s; passing it through", index)
            stats.unresolved += 1
            enriched.append(dict(row))

    LOGGER.debug(
        "Normalized %s case studies: auto=%s unresolved=%s skipped=%s",
        stats.total,
        stats.auto_normalized,
        stats.unresolved,
        stats.skipped,
    )
    return TransformResult(enriched=enriched, stats=stats)


__all__ = ["is_resolved", "transform_case_studies"]

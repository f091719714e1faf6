"""Field resolution and list coercion for loosely-typed case-study records.

Case studies arrive from an external store with drifting field names and with
list-like values stored as real lists, JSON-encoded strings, or delimiter-joined
strings. The helpers here turn that into clean strings and clean lists without
ever raising.
"""

from __future__ import annotations

import json
import re
from typing import Any, Iterable, List, Mapping, Sequence

from caseintel.normalization.reference_data import FIELD_SYNONYMS

_WHITESPACE_CHARS = re.compile(r"[\r\n\t\u00a0]")
_WHITESPACE_RUNS = re.compile(r"\s+")
_LIST_DELIMITERS = re.compile(r"[;|,/]")

MISSING = ""


def clean_text(value: Any) -> str:
    """Return ``value`` as a single-line, trimmed string.

    Falsy values (``None``, ``0``, ``False``, empty containers) become ``""``.
    Lists and tuples are joined with ``", "`` after dropping falsy items.
    """

    if not value:
        return ""
    if isinstance(value, (list, tuple)):
        value = ", ".join(str(item) for item in value if item)
    text = _WHITESPACE_CHARS.sub(" ", str(value))
    return _WHITESPACE_RUNS.sub(" ", text).strip()


def joined_text(*values: Any) -> str:
    """Concatenate the truthy ``values`` into one lower-cased, cleaned string."""

    return clean_text(" ".join(clean_text(value) for value in values if value)).lower()


def resolve_field(record: Any, names: Sequence[str]) -> Any:
    """Return the first candidate value whose cleaned form is non-empty.

    Args:
        record: Mapping-like case study. Anything else resolves to ``MISSING``.
        names: Candidate keys, tried in order.

    Returns:
        The raw (uncleaned) value stored under the first matching key, or
        ``MISSING`` when no candidate carries content.
    """

    if not isinstance(record, Mapping):
        return MISSING
    for name in names:
        value = record.get(name)
        if value is not None and clean_text(value):
            return value
    return MISSING


def resolve_text(record: Any, field: str) -> str:
    """Resolve a logical field via ``FIELD_SYNONYMS`` and return it cleaned."""

    return clean_text(resolve_field(record, FIELD_SYNONYMS[field]))


def resolve_list(record: Any, field: str) -> List[str]:
    """Resolve a logical field via ``FIELD_SYNONYMS`` and coerce it to a list."""

    return coerce_list(resolve_field(record, FIELD_SYNONYMS[field]))


def _clean_items(items: Iterable[Any]) -> List[str]:
    cleaned = (clean_text(item) for item in items if item)
    return [item for item in cleaned if item]


def coerce_list(value: Any) -> List[str]:
    """Coerce an array-like value into a list of non-empty, trimmed strings.

    * lists, tuples and sets are cleaned item by item;
    * strings shaped like a JSON array are decoded when possible;
    * other strings are split on ``;``, ``|``, ``,`` and ``/``;
    * anything else yields an empty list.
    """

    if not value:
        return []
    if isinstance(value, (list, tuple, set, frozenset)):
        return _clean_items(value)
    if not isinstance(value, str):
        return []

    if value.startswith("[") and value.endswith("]"):
        try:
            parsed = json.loads(value)
        except ValueError:
            parsed = None
        if isinstance(parsed, list):
            return _clean_items(parsed)

    parts = (part.strip() for part in _LIST_DELIMITERS.split(clean_text(value)))
    return [part for part in parts if part]


def encode_list(values: Sequence[str], encoding: str = "json") -> Any:
    """Serialize a normalized list for storage.

    ``"json"`` produces a JSON array string for stores that only persist
    scalars; ``"native"`` returns a plain list copy.
    """

    if encoding == "native":
        return list(values)
    if encoding != "json":
        raise ValueError(f"Unsupported list encoding: {encoding!r}")
    return json.dumps(list(values))


__all__ = [
    "MISSING",
    "clean_text",
    "coerce_list",
    "encode_list",
    "joined_text",
    "resolve_field",
    "resolve_list",
    "resolve_text",
]

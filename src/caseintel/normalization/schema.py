"""Result structures produced by case-study normalization.

Defines dataclasses for the industry cascade and for the batch transform
output consumed by the report builders and the API.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional


@dataclass(frozen=True)
class IndustryPath:
    """Industry cascade for one case study.

    Attributes:
        level_1: Broad sector, e.g. "Financial Services".
        level_2: Sub-sector declared under ``level_1``, e.g. "Insurance".
        level_3: Segment declared under ``level_2``, e.g. "Claims Processing".
    """

    level_1: Optional[str] = None
    level_2: Optional[str] = None
    level_3: Optional[str] = None

    def __bool__(self) -> bool:
        return self.level_1 is not None


@dataclass
class TransformStats:
    """Counters accumulated over one transform batch."""

    total: int = 0
    auto_normalized: int = 0
    unresolved: int = 0
    skipped: int = 0

    def to_dict(self) -> Dict[str, int]:
        """Return the stats with the camelCase keys used by dashboard consumers."""

        return {
            "total": self.total,
            "autoNormalized": self.auto_normalized,
            "unresolved": self.unresolved,
            "skipped": self.skipped,
        }


@dataclass
class TransformResult:
    """Enriched records plus the stats of the run that produced them.

    Attributes:
        enriched: One record per input record, in input order.
        stats: Batch counters.
    """

    enriched: List[Any] = field(default_factory=list)
    stats: TransformStats = field(default_factory=TransformStats)

    def to_dict(self) -> Dict[str, Any]:
        return {"enriched": list(self.enriched), "stats": self.stats.to_dict()}

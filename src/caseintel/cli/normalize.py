"""Command-line entry point for batch case-study normalization.

Reads a JSON array of case studies, writes the enriched records, and prints
the normalization stats (and optionally one report) as JSON.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Sequence

from caseintel.normalization.service import CaseStudyTransformer
from caseintel.reports import REPORT_BUILDERS
from caseintel.settings import get_settings

LOGGER = logging.getLogger("caseintel.cli.normalize")


def _configure_logging(level_name: str) -> None:
    level = getattr(logging, level_name.upper(), logging.INFO)
    logging.basicConfig(level=level, format="%(asctime)s %(levelname)s %(name)s %(message)s")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Normalize case studies onto the service, industry and technology taxonomy.")
    parser.add_argument("input", type=Path, help="Path to a JSON array of case-study records.")
    parser.add_argument("--output", type=Path, default=None, help="Where to write enriched records (default: stdout).")
    parser.add_argument(
        "--encoding",
        choices=("json", "native"),
        default=None,
        help="How normalized lists are stored (default: taxonomy.list_encoding setting).",
    )
    parser.add_argument("--report", choices=sorted(REPORT_BUILDERS), default=None, help="Also print one report.")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the normalizer over a file; return a process exit code."""

    args = build_parser().parse_args(argv)
    settings = get_settings()
    _configure_logging(settings.log_level)

    try:
        with args.input.open(encoding="utf-8") as handle:
            case_studies = json.load(handle)
    except (OSError, ValueError) as exc:
        LOGGER.error("Could not read case studies from %s: %s", args.input, exc)
        return 1
    if not isinstance(case_studies, list):
        LOGGER.error("Expected a JSON array of case studies in %s", args.input)
        return 1

    transformer = CaseStudyTransformer(settings=settings, encoding=args.encoding)
    result = transformer.transform(case_studies)

    enriched = json.dumps(result.enriched, indent=2, ensure_ascii=False, default=str)
    if args.output:
        args.output.parent.mkdir(parents=True, exist_ok=True)
        args.output.write_text(enriched + "\n", encoding="utf-8")
        LOGGER.info("Wrote %s enriched case studies to %s", len(result.enriched), args.output)
    else:
        print(enriched)

    summary = {"stats": result.stats.to_dict()}
    if args.report:
        summary["report"] = REPORT_BUILDERS[args.report](result).model_dump()
    print(json.dumps(summary, indent=2, ensure_ascii=False), file=sys.stderr if not args.output else sys.stdout)
    return 0


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())

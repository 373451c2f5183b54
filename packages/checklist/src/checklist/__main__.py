# This project was developed with assistance from AI tools.
"""CLI entrypoint for checklist generation.

Usage:
    python -m checklist snapshot.json                      # Checklist as of today
    python -m checklist snapshot.json --date 2026-02-15    # Pinned reference date
    python -m checklist snapshot.json --activate 8_income_maternity
    python -m checklist --list-dormant                     # Sections ops can switch on
"""

import argparse
import json
import logging
import sys
from datetime import date
from pathlib import Path

from pydantic import ValidationError

from .config import settings
from .engine import generate_checklist
from .rules import ALL_RULES, DORMANT_SECTIONS, activate_sections
from .schemas.snapshot import ApplicationSnapshot


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="checklist",
        description="Generate the mortgage document checklist for an application snapshot",
    )
    parser.add_argument("snapshot", nargs="?", type=Path, help="Application snapshot JSON file")
    parser.add_argument(
        "--date",
        type=date.fromisoformat,
        default=None,
        help="Reference date (YYYY-MM-DD) for tax-year labels; defaults to today",
    )
    parser.add_argument(
        "--activate",
        nargs="+",
        default=[],
        metavar="SECTION",
        help="Dormant section(s) to switch on for this application",
    )
    parser.add_argument(
        "--list-dormant",
        action="store_true",
        help="Print the dormant sections and exit",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """Run the CLI. Returns the process exit code."""
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(level=settings.LOG_LEVEL)

    if args.list_dormant:
        print(json.dumps([ds.model_dump(mode="json") for ds in DORMANT_SECTIONS], indent=2))
        return 0

    if args.snapshot is None:
        parser.error("a snapshot file is required unless --list-dormant is given")

    try:
        raw = json.loads(args.snapshot.read_text())
    except (OSError, json.JSONDecodeError) as exc:
        parser.error(f"cannot read snapshot {args.snapshot}: {exc}")

    try:
        snapshot = ApplicationSnapshot.model_validate(raw)
    except ValidationError as exc:
        print(f"Invalid snapshot:\n{exc}", file=sys.stderr)
        return 1

    rules = ALL_RULES
    if args.activate:
        try:
            rules = activate_sections(ALL_RULES, args.activate)
        except ValueError as exc:
            parser.error(str(exc))

    checklist = generate_checklist(snapshot, rules=rules, reference_date=args.date)
    print(json.dumps(checklist.model_dump(mode="json", by_alias=True), indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())

#!/usr/bin/env python3
"""
pensum_cli.py - Inspect and update curriculum progress from the terminal.

Uses the same catalog, progress database and statistics as the Streamlit app.

Usage:
  python scripts/pensum_cli.py stats --terms 4
  python scripts/pensum_cli.py list --level 2
  python scripts/pensum_cli.py cycle MAT101
  python scripts/pensum_cli.py set SIS201 aprobada
  python scripts/pensum_cli.py reset MAT101
  python scripts/pensum_cli.py reset-all
"""

import argparse
import logging
import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

import yaml
from pydantic import ValidationError

from pensum.config import load_settings
from pensum.schemas import CompletionState, Statistics
from pensum.tracker import CourseStateController, ProgressStore
from pensum.utils import configure_logging, load_catalog
from pensum.viewer import STATE_ICONS, STATE_LABELS, format_statistics

logger = logging.getLogger(__name__)


STAT_LINES = [
    ("approved_credits", "Créditos aprobados"),
    ("pending_credits", "Créditos pendientes"),
    ("in_progress_credits", "Créditos en curso"),
    ("progress_percent", "Avance"),
    ("average_credits_per_term", "Promedio por semestre"),
]


def print_statistics(stats: Statistics):
    shown = format_statistics(stats)
    width = max(len(label) for _, label in STAT_LINES)
    for key, label in STAT_LINES:
        print(f"  {label:<{width}}  {shown[key]}")
    print(f"  {'(semestres restantes)':<{width}}  {stats.remaining_terms}")


def print_cards(controller: CourseStateController, level: int | None = None):
    for column in controller.get_board():
        if level is not None and column.level != level:
            continue
        print(f"Nivel {column.level}  ({column.approved_count}/{column.total_count})")
        for card in column.cards:
            course = card.course
            print(
                f"  {STATE_ICONS[card.state]} {course.id:<8} {course.name:<45} "
                f"{course.credits:>2} Cr  {STATE_LABELS[card.state]}"
            )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Track course completion for a curriculum",
        formatter_class=argparse.RawDescriptionHelpFormatter
    )
    parser.add_argument(
        "--catalog",
        type=Path,
        default=None,
        help="Catalog YAML (default: PENSUM_CATALOG_PATH or data/pensum.yaml)"
    )
    parser.add_argument(
        "--db",
        type=Path,
        default=None,
        help="Progress database (default: PENSUM_PROGRESS_DB or ~/.pensum/progress.db)"
    )
    # --terms is accepted after any subcommand, e.g. "stats --terms 4"
    terms_parent = argparse.ArgumentParser(add_help=False)
    terms_parent.add_argument(
        "--terms",
        default=None,
        help="Remaining terms used for the per-term average"
    )

    sub = parser.add_subparsers(dest="command", required=True)

    sub.add_parser("stats", parents=[terms_parent], help="Show statistics")

    list_cmd = sub.add_parser("list", parents=[terms_parent], help="List courses with their state")
    list_cmd.add_argument("--level", type=int, default=None, help="Only this level")

    cycle_cmd = sub.add_parser("cycle", parents=[terms_parent], help="Advance a course to its next state")
    cycle_cmd.add_argument("course_id")

    reset_cmd = sub.add_parser("reset", parents=[terms_parent], help="Mark a course as not taken")
    reset_cmd.add_argument("course_id")

    set_cmd = sub.add_parser("set", parents=[terms_parent], help="Set a course state")
    set_cmd.add_argument("course_id")
    set_cmd.add_argument("state", choices=[s.value for s in CompletionState])

    sub.add_parser("reset-all", parents=[terms_parent], help="Clear all progress")

    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    settings = load_settings()
    configure_logging(settings.log_level)

    try:
        catalog = load_catalog(args.catalog or settings.catalog_path)
    except (FileNotFoundError, yaml.YAMLError, ValidationError) as e:
        logger.error(f"Could not load catalog: {e}")
        return 1

    store = ProgressStore(args.db or settings.progress_db, storage_key=settings.storage_key)
    terms = args.terms if args.terms is not None else settings.remaining_terms
    controller = CourseStateController(catalog, store, remaining_terms=terms)

    if args.command == "list":
        print_cards(controller, args.level)
        return 0

    if args.command in ("cycle", "reset", "set"):
        if args.course_id not in catalog:
            logger.warning(f"Unknown course id: {args.course_id}")
        elif args.command == "cycle":
            controller.cycle(args.course_id)
        elif args.command == "reset":
            controller.reset(args.course_id)
        else:
            controller.set_state(args.course_id, args.state)
    elif args.command == "reset-all":
        controller.reset_all()

    print_statistics(controller.statistics)
    return 0


if __name__ == "__main__":
    sys.exit(main())

# src/yahtzee/cli/main.py
"""
Command line interface for the :mod:`yahtzee` package.

``yahtzee score 3 3 3 2 2`` prints what the roll is worth in every category;
``yahtzee table --output scores.yaml`` exports the full lookup table.
"""
from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Sequence, TextIO

import yaml  # type: ignore[import-untyped]

from yahtzee.config import AppConfig, apply_dot_overrides, load_app_config
from yahtzee.errors import YahtzeeError
from yahtzee.game.categories import Category, build_rulebook, score_all
from yahtzee.game.scoring_lookup import build_score_lookup_table, score_rows
from yahtzee.utils.logging import configure_logging, parse_level
from yahtzee.utils.writer import atomic_path

LOGGER = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------


def build_parser() -> argparse.ArgumentParser:
    """Construct the top-level CLI parser."""
    parser = argparse.ArgumentParser(prog="yahtzee")
    parser.add_argument("--config", type=Path, help="Path to YAML configuration")
    parser.add_argument(
        "--set",
        dest="overrides",
        action="append",
        default=[],
        metavar="KEY=VALUE",
        help="Override configuration values, e.g. rules.full_house=30",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help="Root logging level (defaults to logging.level from the config)",
    )

    sub = parser.add_subparsers(dest="command", required=True)

    # score
    score_parser = sub.add_parser("score", help="Score one roll")
    score_parser.add_argument("dice", nargs="+", type=int, help="Five dice faces, 1-6")
    score_parser.add_argument(
        "--category",
        dest="categories",
        action="append",
        default=[],
        metavar="NAME",
        help="Only report these categories (repeatable)",
    )

    # table
    table_parser = sub.add_parser("table", help="Export scores for every distinct roll")
    table_parser.add_argument(
        "--output", type=Path, required=True, help="Destination YAML file"
    )

    return parser


# ---------------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------------


def _run_score(cfg: AppConfig, dice: list[int], names: list[str], out: TextIO) -> None:
    """Print ``category: points`` lines for *dice*."""
    categories = [Category.from_name(n) for n in names] or list(Category)
    scores = score_all(dice, build_rulebook(cfg.rules))
    for category in categories:
        out.write(f"{category.name.lower()}: {scores[category]}\n")
    LOGGER.info(
        "Roll scored",
        extra={"stage": "score", "dice": dice, "categories": len(categories)},
    )


def _run_table(cfg: AppConfig, output: Path) -> None:
    """Write the lookup table for the configured rulebook to *output*."""
    table = build_score_lookup_table(build_rulebook(cfg.rules))
    payload = yaml.safe_dump(score_rows(table), sort_keys=False)
    with atomic_path(output) as tmp_path:
        Path(tmp_path).write_text(payload, encoding="utf-8")
    LOGGER.info(
        "Score table written",
        extra={"stage": "table", "rows": len(table), "output": str(output)},
    )


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------


def main(argv: Sequence[str] | None = None, out: TextIO | None = None) -> None:
    """Entry point for the ``yahtzee`` CLI dispatcher."""
    parser = build_parser()
    args = parser.parse_args(argv)
    out = out or sys.stdout

    try:
        cfg = load_app_config(args.config) if args.config is not None else AppConfig()
        cfg = apply_dot_overrides(cfg, list(args.overrides or []))
    except (OSError, TypeError, ValueError, AttributeError, yaml.YAMLError) as exc:
        parser.error(f"invalid configuration: {exc}")

    try:
        configure_logging(
            level=parse_level(args.log_level or cfg.logging.level),
            log_file=cfg.logging.log_file,
        )
    except OSError as exc:
        parser.error(f"cannot open log file: {exc}")

    LOGGER.info(
        "CLI arguments parsed",
        extra={
            "stage": "cli",
            "command": args.command,
            "config_path": str(args.config) if args.config is not None else None,
            "overrides": list(args.overrides or []),
        },
    )

    try:
        if args.command == "score":
            _run_score(cfg, args.dice, args.categories, out)
        elif args.command == "table":
            _run_table(cfg, args.output)
    except (YahtzeeError, ValueError, OSError) as exc:
        parser.error(str(exc))


if __name__ == "__main__":  # pragma: no cover - direct execution path
    main()

"""CLI entrypoint for inspecting crossword grids."""

from __future__ import annotations

import argparse
import json
from pathlib import Path
from typing import Any, Dict, List

from crossword_grid.core.constants import MAX_GRID_WIDTH, Direction
from crossword_grid.core.exceptions import CrosswordError
from crossword_grid.core.models import Cursor, GridWord
from crossword_grid.engine.grid import Grid, GridConfig
from crossword_grid.engine.validator import GridValidator
from crossword_grid.utils.logger import configure_logging, level_from_name
from crossword_grid.utils.pretty import pretty_print_grid


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Inspect word numbering and cursor navigation of a crossword grid",
    )
    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument("--diagram", type=Path, help="Diagram file ('W' = wall, anything else = letter)")
    source.add_argument("--width", type=int, help="Start from a blank width x width grid")
    parser.add_argument(
        "--toggle",
        type=int,
        nargs="+",
        default=[],
        metavar="INDEX",
        help="Toggle these squares (and their symmetric counterparts) in order",
    )
    parser.add_argument("--cursor", type=int, help="Cursor index to report the run and neighbours for")
    parser.add_argument(
        "--direction",
        type=str,
        choices=[d.value for d in Direction],
        default=Direction.ACROSS.value,
        help="Cursor direction",
    )
    parser.add_argument("--require-symmetry", action="store_true", help="Reject asymmetric diagrams")
    parser.add_argument(
        "--max-width",
        type=int,
        default=MAX_GRID_WIDTH,
        help=f"Largest width accepted for blank grids (default {MAX_GRID_WIDTH})",
    )
    parser.add_argument("--json", action="store_true", help="Print a JSON report instead of text")
    parser.add_argument(
        "--log-level",
        type=str,
        default="WARNING",
        help="Logging level (DEBUG, INFO, WARNING, ERROR)",
    )
    return parser


def load_grid(args: argparse.Namespace) -> Grid:
    config = GridConfig(require_symmetry=args.require_symmetry, max_width=args.max_width)
    if args.diagram is not None:
        return Grid.from_string(args.diagram.read_text(encoding="utf-8"), config=config)
    return Grid.blank(args.width, config=config)


def _word_payload(word: GridWord) -> Dict[str, int]:
    return {"index": word.index, "label": word.label, "length": word.length}


def build_report(grid: Grid, cursor: Cursor | None = None) -> Dict[str, Any]:
    validation = GridValidator().validate(grid)
    report: Dict[str, Any] = {
        "grid": grid.to_jsonable(),
        "valid": validation.ok,
        "validation": validation.messages,
        "words": {d.value: [_word_payload(w) for w in grid.get_words(d)] for d in Direction},
    }
    if cursor is not None:
        nxt = grid.get_next_word_start(cursor)
        prev = grid.get_prev_word_start(cursor)
        report["cursor"] = {
            "index": cursor.index,
            "direction": cursor.direction.value,
            "run": grid.get_current_word_run(cursor),
            "next": {"index": nxt.index, "direction": nxt.direction.value},
            "prev": {"index": prev.index, "direction": prev.direction.value},
        }
    return report


def main(argv: List[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(level_from_name(args.log_level))

    try:
        grid = load_grid(args)
    except CrosswordError as exc:
        parser.error(str(exc))

    cleared: List[int] = []
    for index in args.toggle:
        if grid.toggle_square(index):
            cleared.extend(sorted({index, len(grid) - 1 - index}))

    cursor = Cursor(args.cursor, Direction(args.direction)) if args.cursor is not None else None
    report = build_report(grid, cursor)
    report["cleared"] = cleared

    if args.json:
        print(json.dumps(report, indent=2))
        return 0

    highlight = report["cursor"]["run"] if cursor is not None else None
    pretty_print_grid(grid, highlight=highlight)
    if cursor is not None:
        print()
        print(f"Cursor {cursor.index} {cursor.direction.value}: run {report['cursor']['run']}")
        print(f"  next -> {report['cursor']['next']}")
        print(f"  prev -> {report['cursor']['prev']}")
    for message in report["validation"]:
        print(f"Validation: {message}")
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())

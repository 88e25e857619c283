"""Pretty-print helpers for crossword grids."""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING, Iterable, List, Optional

from ..core.constants import Direction, Square

if TYPE_CHECKING:
    from ..engine.grid import Grid


WALL_SYMBOL = "#"
LETTER_SYMBOL = "."
HIGHLIGHT_SYMBOL = "*"


def square_symbol(grid: Grid, index: int, highlight: Iterable[int] = ()) -> str:
    if grid.squares[index] is Square.WALL:
        return WALL_SYMBOL
    label = grid.get_word_label_for_square(index)
    if label is not None:
        return str(label)
    return HIGHLIGHT_SYMBOL if index in highlight else LETTER_SYMBOL


def format_grid(grid: Grid, highlight: Optional[Iterable[int]] = None) -> str:
    """Render the grid with clue numbers, optionally marking a word run."""

    marked = set(highlight or ())
    width = grid.width
    header_cells = [f"{c:>3}" for c in range(width)]
    lines = ["    " + "".join(header_cells)]
    lines.append("    " + "-" * (3 * width))
    for r in range(grid.height):
        row_cells = [square_symbol(grid, r * width + c, marked) for c in range(width)]
        lines.append(f"{r:>2} |" + "".join(f"{symbol:>3}" for symbol in row_cells))
    return "\n".join(lines)


def format_word_list(grid: Grid) -> str:
    lines: List[str] = []
    for direction in Direction:
        lines.append(f"{direction.value.capitalize()}:")
        for word in grid.get_words(direction):
            lines.append(f"  {word.label:>3}. ({word.length}) at {word.index}")
    return "\n".join(lines)


def pretty_print_grid(grid: Grid, *, label: str | None = None, highlight=None, stream=None) -> None:
    """Print the numbered grid followed by its word list."""

    stream = stream or sys.stdout
    if label:
        print(label, file=stream)
    print(format_grid(grid, highlight), file=stream)
    print(file=stream)
    print(format_word_list(grid), file=stream)

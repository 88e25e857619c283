"""Editor-side helpers: active word highlighting and a single-cursor session."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import List, Optional

from ..core.constants import Direction
from ..core.models import Cursor, GridWord
from ..utils.logger import get_logger
from .grid import Grid


LOGGER = get_logger(__name__)


class ClueCursorType(str, Enum):
    """Whether a highlighted clue matches the cursor's direction."""

    PRIMARY = "primary"
    SECONDARY = "secondary"


@dataclass(frozen=True)
class ClueCursor:
    descriptor: GridWord
    type: ClueCursorType


@dataclass(frozen=True)
class PuzzleCursors:
    """What the editor highlights: one clue per direction and a grid run."""

    across: Optional[ClueCursor] = None
    down: Optional[ClueCursor] = None
    grid_run: Optional[List[int]] = None


def _clue_cursor(word: Optional[GridWord], direction: Direction, cursor: Cursor) -> Optional[ClueCursor]:
    if word is None:
        return None
    kind = ClueCursorType.PRIMARY if cursor.direction == direction else ClueCursorType.SECONDARY
    return ClueCursor(descriptor=word, type=kind)


def cursors_for_grid_cursor(
    grid: Grid,
    cursor: Optional[Cursor],
    previous: Optional[PuzzleCursors] = None,
) -> PuzzleCursors:
    """Highlights for a cursor placed on the grid.

    A ``None`` cursor clears the grid run but keeps the previous clue
    highlights.
    """

    if cursor is None:
        previous = previous or PuzzleCursors()
        return PuzzleCursors(across=previous.across, down=previous.down, grid_run=None)

    word = grid.get_current_word(cursor.index)
    return PuzzleCursors(
        across=_clue_cursor(word.across, Direction.ACROSS, cursor),
        down=_clue_cursor(word.down, Direction.DOWN, cursor),
        grid_run=grid.get_current_word_run(cursor),
    )


def cursors_for_clue_cursor(grid: Grid, cursor: Optional[Cursor]) -> PuzzleCursors:
    """Highlights for a cursor placed from the clue list: only the run."""

    if cursor is None:
        return PuzzleCursors()
    return PuzzleCursors(grid_run=grid.get_current_word_run(cursor))


class EditorSession:
    """One editing session: a grid, its cursor and the resulting highlights."""

    def __init__(self, grid: Grid, cursor: Optional[Cursor] = None) -> None:
        self.grid = grid
        self.cursor = cursor or Cursor(0, Direction.ACROSS)
        self.cursors = cursors_for_grid_cursor(grid, self.cursor)

    def _set_cursor(self, cursor: Cursor) -> Cursor:
        self.cursor = cursor
        self.cursors = cursors_for_grid_cursor(self.grid, cursor, self.cursors)
        return cursor

    def move_to(self, index: int, direction: Optional[Direction] = None) -> Cursor:
        return self._set_cursor(Cursor(index, direction or self.cursor.direction))

    def flip_direction(self) -> Cursor:
        return self._set_cursor(self.cursor.flipped())

    def next_word(self) -> Cursor:
        return self._set_cursor(self.grid.get_next_word_start(self.cursor))

    def prev_word(self) -> Cursor:
        return self._set_cursor(self.grid.get_prev_word_start(self.cursor))

    def select_clue(self, word: GridWord, direction: Direction) -> Cursor:
        """Jump to a word picked from the clue list."""

        self.cursor = Cursor(word.index, direction)
        self.cursors = cursors_for_clue_cursor(self.grid, self.cursor)
        return self.cursor

    def toggle_wall(self) -> List[int]:
        """Toggle the square under the cursor (and its mirror).

        Returns the indices whose stored answers should be cleared, which is
        empty unless the squares became walls.
        """

        index = self.cursor.index
        if not self.grid.toggle_square(index):
            self.cursors = cursors_for_grid_cursor(self.grid, self.cursor, self.cursors)
            return []
        mirror = len(self.grid) - 1 - index
        LOGGER.debug("Clearing answers at %s and %s", index, mirror)
        self.cursors = cursors_for_grid_cursor(self.grid, self.cursor, self.cursors)
        return sorted({index, mirror})

"""Cursor navigation between word starts.

Both functions are pure transitions over a grid snapshot: they never mutate
the grid and always return a cursor, falling back to degenerate positions
(the first or one-past-the-last index) when the grid has no words or the
cursor is out of range.

Moving past the last word in one direction wraps to the first word in the
other direction. Grids that only have words in one direction (a single
column, for instance) wrap back onto the same direction instead.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, List, Optional

from ..core.models import Cursor, WordStart

if TYPE_CHECKING:
    from .grid import Grid


def _matching_starts(grid: Grid, cursor: Cursor) -> List[WordStart]:
    return [start for start in grid.word_starts if start.allows(cursor.direction)]


def _current_position(grid: Grid, cursor: Cursor, matching: List[WordStart]) -> Optional[int]:
    """Position in ``matching`` of the word under the cursor, if there is one."""

    word = grid.get_current_word(cursor.index)[cursor.direction]
    if word is None:
        return None
    for position, start in enumerate(matching):
        if start.index == word.index:
            return position
    return None


def next_word_start(grid: Grid, cursor: Cursor) -> Cursor:
    """Return the cursor for the word after the one under ``cursor``."""

    count = len(grid)
    if not grid.in_bounds(cursor.index) or not grid.word_starts:
        return Cursor(0, cursor.direction.flip())

    if grid.is_wall(cursor.index):
        wrapped = cursor.index + 1 >= count
        return Cursor(
            (cursor.index + 1) % count,
            cursor.direction.flip() if wrapped else cursor.direction,
        )

    matching = _matching_starts(grid, cursor)
    position = _current_position(grid, cursor, matching)
    if position is None:
        # Not inside a word: continue from the last start before the cursor.
        following = next((p for p, start in enumerate(matching) if start.index > cursor.index), -1)
        position = following - 1
        if position < -1:
            position = len(matching)

    if position >= len(matching) - 1:
        other = cursor.direction.flip()
        wrapped_start = next((start for start in grid.word_starts if start.allows(other)), None)
        if wrapped_start is None:
            return Cursor(matching[0].index, cursor.direction)
        return Cursor(wrapped_start.index, other)

    return Cursor(matching[position + 1].index, cursor.direction)


def prev_word_start(grid: Grid, cursor: Cursor) -> Cursor:
    """Return the cursor for the word before the one under ``cursor``."""

    count = len(grid)
    if not grid.in_bounds(cursor.index) or not grid.word_starts:
        return Cursor(count, cursor.direction.flip())

    if grid.is_wall(cursor.index):
        wrapped = cursor.index - 1 < 0
        return Cursor(
            (cursor.index + count - 1) % count,
            cursor.direction.flip() if wrapped else cursor.direction,
        )

    matching = _matching_starts(grid, cursor)
    position = _current_position(grid, cursor, matching)
    if position is None:
        preceding = next((p for p, start in enumerate(matching) if start.index < cursor.index), -1)
        position = preceding + 1
        if position > len(matching):
            position = -1

    if position <= 0:
        other = cursor.direction.flip()
        wrapped_start = next(
            (start for start in reversed(grid.word_starts) if start.allows(other)),
            None,
        )
        if wrapped_start is None:
            return Cursor(matching[-1].index, cursor.direction)
        return Cursor(wrapped_start.index, other)

    return Cursor(matching[position - 1].index, cursor.direction)

"""Shared constants and enumerations for the crossword grid model."""

from __future__ import annotations

from enum import Enum


class Square(str, Enum):
    """The two kinds of grid square."""

    LETTER = "LETTER"
    WALL = "WALL"

    def toggled(self) -> "Square":
        return Square.WALL if self is Square.LETTER else Square.LETTER


class Direction(str, Enum):
    """Cursor and word orientations."""

    ACROSS = "across"
    DOWN = "down"

    def flip(self) -> "Direction":
        return Direction.DOWN if self is Direction.ACROSS else Direction.ACROSS


class StartDirection(str, Enum):
    """Orientation(s) of the word(s) beginning at a word start."""

    ACROSS = "across"
    DOWN = "down"
    BOTH = "both"

    def allows(self, direction: Direction) -> bool:
        return self is StartDirection.BOTH or self.value == direction.value


def flip_direction(direction: Direction) -> Direction:
    return direction.flip()


# Diagram format
WALL_CHAR = "W"
LETTER_CHAR = "."
LAYOUT_CHARS = "-| \t\r"

# Largest width the puzzle-creation flow accepts.
MAX_GRID_WIDTH = 21

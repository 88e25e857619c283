"""Data models shared by the grid, the navigator and the editor helpers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .constants import Direction, StartDirection


@dataclass(frozen=True)
class Cursor:
    """An editing position: a grid index plus an orientation."""

    index: int
    direction: Direction = Direction.ACROSS

    def flipped(self) -> "Cursor":
        return Cursor(self.index, self.direction.flip())


@dataclass(frozen=True)
class WordStart:
    """A square beginning an across word, a down word, or both."""

    index: int
    direction: StartDirection

    def allows(self, direction: Direction) -> bool:
        return self.direction.allows(direction)


@dataclass(frozen=True)
class GridWord:
    """A word located in the grid, identified by its start square."""

    index: int
    length: int
    label: int


@dataclass(frozen=True)
class CurrentWord:
    """The across and down words passing through a square."""

    across: Optional[GridWord] = None
    down: Optional[GridWord] = None

    def __getitem__(self, direction: Direction) -> Optional[GridWord]:
        return self.across if direction == Direction.ACROSS else self.down

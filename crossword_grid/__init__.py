"""Crossword grid model for an interactive puzzle editor.

This package exposes the public API surface via:

- ``crossword_grid.engine.grid.Grid``: word starts, runs, lookups and wall toggling.
- ``crossword_grid.engine.navigation``: the next/previous word cursor transitions.
- ``crossword_grid.engine.editor.EditorSession``: one grid plus its edit cursor.
"""

from .core.constants import Direction, Square, StartDirection, flip_direction
from .core.exceptions import ConfigurationError, CrosswordError, SerializationError
from .core.models import Cursor, CurrentWord, GridWord, WordStart
from .engine.editor import EditorSession, PuzzleCursors
from .engine.grid import Grid, GridConfig

__all__ = [
    "ConfigurationError",
    "CrosswordError",
    "Cursor",
    "CurrentWord",
    "Direction",
    "EditorSession",
    "Grid",
    "GridConfig",
    "GridWord",
    "PuzzleCursors",
    "SerializationError",
    "Square",
    "StartDirection",
    "WordStart",
    "flip_direction",
]

__version__ = "0.1.0"

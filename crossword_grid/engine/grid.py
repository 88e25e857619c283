"""Grid representation: word starts, runs, lookups and symmetric wall toggling."""

from __future__ import annotations

import json
import math
from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Optional, Sequence, Tuple

from ..core.constants import (
    LAYOUT_CHARS,
    LETTER_CHAR,
    MAX_GRID_WIDTH,
    WALL_CHAR,
    Direction,
    Square,
    StartDirection,
)
from ..core.exceptions import ConfigurationError, SerializationError
from ..core.models import Cursor, CurrentWord, GridWord, WordStart
from ..utils.logger import get_logger
from .navigation import next_word_start, prev_word_start
from .validator import GridValidator


LOGGER = get_logger(__name__)

JSON_TAG = "grid"
JSON_VERSION = 1


@dataclass
class GridConfig:
    """Configuration values applied when a grid is built."""

    require_symmetry: bool = False
    max_width: int = MAX_GRID_WIDTH


def infer_width(square_count: int) -> int:
    """Return ``sqrt(square_count)`` for a square number of cells, otherwise 1."""

    root = math.isqrt(square_count)
    if root > 0 and root * root == square_count:
        return root
    return 1


class Grid:
    """A rectangular crossword grid stored as a flat, row-major list of squares."""

    def __init__(
        self,
        squares: Iterable[Square],
        width: Optional[int] = None,
        config: Optional[GridConfig] = None,
    ) -> None:
        self.config = config or GridConfig()
        self._squares: List[Square] = []
        self._word_starts: List[WordStart] = []
        self._labels: Dict[int, int] = {}
        self.width = 1
        self.replace_squares(squares, width)

    # ------------------------------------------------------------------
    # Construction helpers
    # ------------------------------------------------------------------
    @classmethod
    def from_string(cls, diagram: str, config: Optional[GridConfig] = None) -> "Grid":
        """Parse an ASCII diagram, ``W`` marking walls and anything else a letter.

        Layout characters (``-``, ``|`` and horizontal whitespace) are dropped
        and newlines separate rows. The width is the length of the first row
        when there is more than one row; otherwise it is inferred from the
        square count. Parsing is best-effort and never raises.
        """

        cleaned = diagram
        for char in LAYOUT_CHARS:
            cleaned = cleaned.replace(char, "")
        cleaned = cleaned.strip("\n")

        squares = [Square.WALL if char == WALL_CHAR else Square.LETTER for char in cleaned.replace("\n", "")]

        width = cleaned.find("\n")
        if width < 1:
            width = infer_width(len(squares))
        elif len(squares) % width:
            LOGGER.warning(
                "Diagram rows do not fit a width of %s for %s squares; inferring width",
                width,
                len(squares),
            )
            width = infer_width(len(squares))

        return cls(squares, width, config=config)

    @classmethod
    def blank(cls, width: int, config: Optional[GridConfig] = None) -> "Grid":
        """Create a ``width`` x ``width`` grid containing only letter squares."""

        config = config or GridConfig()
        if not 1 <= width <= config.max_width:
            raise ConfigurationError(
                f"Grid width must be between 1 and {config.max_width}, got {width}"
            )
        return cls([Square.LETTER] * (width * width), width, config=config)

    def replace_squares(self, squares: Iterable[Square], width: Optional[int] = None) -> None:
        """Swap in a whole new square sequence (and optionally width)."""

        squares = [Square(square) for square in squares]
        if width is None:
            width = infer_width(len(squares))
        if width < 1:
            raise ConfigurationError(f"Grid width must be positive, got {width}")
        if len(squares) % width:
            raise ConfigurationError(
                f"{len(squares)} squares cannot be split into rows of width {width}"
            )
        if self.config.require_symmetry:
            asymmetric = GridValidator.asymmetric_indices(squares)
            if asymmetric:
                raise ConfigurationError(
                    f"Grid of {len(squares)} squares (width {width}) is not symmetric "
                    f"at indices {asymmetric}"
                )

        self._squares = squares
        self.width = width
        self.refresh_word_starts()

    # ------------------------------------------------------------------
    # Basic queries
    # ------------------------------------------------------------------
    @property
    def squares(self) -> Tuple[Square, ...]:
        return tuple(self._squares)

    @property
    def word_starts(self) -> Tuple[WordStart, ...]:
        return tuple(self._word_starts)

    @property
    def height(self) -> int:
        return len(self._squares) // self.width

    def __len__(self) -> int:
        return len(self._squares)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Grid):
            return NotImplemented
        return self.width == other.width and self._squares == other._squares

    def __repr__(self) -> str:
        return f"Grid(width={self.width}, height={self.height}, word_starts={len(self._word_starts)})"

    def __str__(self) -> str:
        return self.to_string()

    def in_bounds(self, index: int) -> bool:
        return 0 <= index < len(self._squares)

    def is_wall(self, index: int) -> bool:
        return self._squares[index] is Square.WALL

    def get_word_label_for_square(self, index: int) -> Optional[int]:
        """Return the clue number of the word start at ``index``, if it is one."""

        return self._labels.get(index)

    # ------------------------------------------------------------------
    # Word runs
    # ------------------------------------------------------------------
    def get_current_word_run(self, cursor: Cursor) -> List[int]:
        """Return the square indexes of the run containing the cursor.

        The list is empty when the cursor is out of bounds, on a wall, or the
        grid has no word starts at all. A lone letter yields a one-element run.
        """

        index = cursor.index
        if not self.in_bounds(index) or not self._word_starts or self.is_wall(index):
            return []

        if cursor.direction == Direction.ACROSS:
            step = 1
            first = index - index % self.width
            last = first + self.width - 1
        else:
            step = self.width
            first = index % self.width
            last = (self.height - 1) * self.width + first

        run: List[int] = []
        position = index - step
        while position >= first and not self.is_wall(position):
            run.append(position)
            position -= step
        run.reverse()
        run.append(index)
        position = index + step
        while position <= last and not self.is_wall(position):
            run.append(position)
            position += step
        return run

    def get_current_word(self, index: int) -> CurrentWord:
        """Return the across and down words passing through ``index``.

        A direction is ``None`` when the square is a wall or sits in a
        single-letter run for that direction.
        """

        if not self.in_bounds(index) or self.is_wall(index):
            return CurrentWord()

        row_start = index - index % self.width
        across = self._scan_for_start(index, 1, row_start, Direction.ACROSS)
        down = self._scan_for_start(index, self.width, 0, Direction.DOWN)
        return CurrentWord(across=across, down=down)

    def _scan_for_start(self, index: int, step: int, lowest: int, direction: Direction) -> Optional[GridWord]:
        starts = {start.index for start in self._word_starts if start.allows(direction)}
        position = index
        while position >= lowest:
            if self.is_wall(position):
                return None
            if position in starts:
                return self._word_at(position, direction)
            position -= step
        return None

    def _word_at(self, index: int, direction: Direction) -> GridWord:
        return GridWord(
            index=index,
            length=len(self.get_current_word_run(Cursor(index, direction))),
            label=self._labels[index],
        )

    def get_words(self, direction: Direction) -> List[GridWord]:
        """List every word running in ``direction``, in clue-number order."""

        return [
            self._word_at(start.index, direction)
            for start in self._word_starts
            if start.allows(direction)
        ]

    # ------------------------------------------------------------------
    # Navigation
    # ------------------------------------------------------------------
    def get_next_word_start(self, cursor: Cursor) -> Cursor:
        return next_word_start(self, cursor)

    def get_prev_word_start(self, cursor: Cursor) -> Cursor:
        return prev_word_start(self, cursor)

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------
    def toggle_square(self, index: int) -> bool:
        """Toggle ``index`` and its symmetric counterpart.

        Returns True when the squares became walls, i.e. any answer letters
        stored for them should be cleared.
        """

        if not self.in_bounds(index):
            LOGGER.warning("Ignoring toggle outside grid of %s squares: %s", len(self._squares), index)
            return False

        new_square = self._squares[index].toggled()
        mirror = len(self._squares) - 1 - index
        self._squares[index] = new_square
        self._squares[mirror] = new_square
        LOGGER.info("Set squares %s and %s to %s", index, mirror, new_square.value)

        self.refresh_word_starts()
        return new_square is Square.WALL

    def refresh_word_starts(self) -> None:
        """Recompute the ascending list of word starts (and their labels)."""

        count = len(self._squares)
        width = self.width
        starts: List[WordStart] = []
        for i, square in enumerate(self._squares):
            if square is Square.WALL:
                continue
            col = i % width
            opens_across = col == 0 or self._squares[i - 1] is Square.WALL
            continues_across = col < width - 1 and self._squares[i + 1] is Square.LETTER
            opens_down = i < width or self._squares[i - width] is Square.WALL
            continues_down = i + width < count and self._squares[i + width] is Square.LETTER

            across = opens_across and continues_across
            down = opens_down and continues_down
            if across and down:
                starts.append(WordStart(i, StartDirection.BOTH))
            elif across:
                starts.append(WordStart(i, StartDirection.ACROSS))
            elif down:
                starts.append(WordStart(i, StartDirection.DOWN))

        self._word_starts = starts
        self._labels = {start.index: label for label, start in enumerate(starts, start=1)}
        LOGGER.debug("Derived %s word starts for %sx%s grid", len(starts), width, self.height)

    # ------------------------------------------------------------------
    # Serialization helpers
    # ------------------------------------------------------------------
    def to_string(self) -> str:
        border = " " + "-" * self.width + " "
        lines = [border]
        for row in range(self.height):
            cells = self._squares[row * self.width:(row + 1) * self.width]
            lines.append("|" + "".join(WALL_CHAR if s is Square.WALL else LETTER_CHAR for s in cells) + "|")
        lines.append(border)
        return "\n".join(lines)

    def to_jsonable(self) -> Dict[str, Any]:
        return {"width": self.width, "squares": [square.value for square in self._squares]}

    @classmethod
    def from_jsonable(cls, data: Dict[str, Any], config: Optional[GridConfig] = None) -> "Grid":
        try:
            width = data["width"]
            squares: Sequence[str] = data["squares"]
            if not isinstance(width, int) or isinstance(width, bool) or not isinstance(squares, list):
                raise TypeError("width must be an integer and squares a list")
            decoded = [Square(value) for value in squares]
        except (KeyError, TypeError, ValueError) as exc:
            raise SerializationError(f"Invalid grid payload: {exc}") from exc
        return cls(decoded, width, config=config)

    def to_json(self) -> str:
        return json.dumps({"t": JSON_TAG, "v": JSON_VERSION, "d": self.to_jsonable()})

    @classmethod
    def from_json(cls, text: str, config: Optional[GridConfig] = None) -> "Grid":
        try:
            wrapper = json.loads(text)
        except json.JSONDecodeError as exc:
            raise SerializationError(f"Grid payload is not valid JSON: {exc}") from exc
        if not isinstance(wrapper, dict) or set(wrapper) != {"t", "v", "d"}:
            raise SerializationError("Grid payload must be a {t, v, d} envelope")
        if wrapper["t"] != JSON_TAG:
            raise SerializationError(f"Unexpected payload tag: {wrapper['t']!r}")
        if wrapper["v"] != JSON_VERSION:
            raise SerializationError(f"Unsupported grid payload version: {wrapper['v']!r}")
        if not isinstance(wrapper["d"], dict):
            raise SerializationError("Grid payload data must be an object")
        return cls.from_jsonable(wrapper["d"], config=config)

"""Deterministic structural checks for crossword grids."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, List, Sequence

from ..core.constants import Square
from ..core.exceptions import ConfigurationError
from ..utils.logger import get_logger

if TYPE_CHECKING:
    from .grid import Grid


LOGGER = get_logger(__name__)


@dataclass
class ValidationResult:
    ok: bool
    messages: List[str] = field(default_factory=list)


class GridValidator:
    """Runs structural validation over a grid snapshot."""

    @staticmethod
    def asymmetric_indices(squares: Sequence[Square]) -> List[int]:
        """Indices in the first half whose point reflection differs from them."""

        count = len(squares)
        return [i for i in range(count // 2) if squares[i] != squares[count - 1 - i]]

    def validate(self, grid: Grid) -> ValidationResult:
        try:
            self._check_dimensions(grid)
            self._check_symmetry(grid)
            self._check_word_starts(grid)
        except ConfigurationError as exc:
            LOGGER.error("Grid validation failed: %s", exc)
            return ValidationResult(ok=False, messages=[str(exc)])
        return ValidationResult(ok=True)

    def _check_dimensions(self, grid: Grid) -> None:
        if grid.width < 1 or len(grid) % grid.width:
            raise ConfigurationError(
                f"{len(grid)} squares cannot be split into rows of width {grid.width}"
            )

    def _check_symmetry(self, grid: Grid) -> None:
        asymmetric = self.asymmetric_indices(grid.squares)
        if asymmetric:
            raise ConfigurationError(f"Walls are not symmetric at indices {asymmetric}")

    def _check_word_starts(self, grid: Grid) -> None:
        indices = [start.index for start in grid.word_starts]
        for previous, current in zip(indices, indices[1:]):
            if current <= previous:
                raise ConfigurationError(f"Word starts out of order at index {current}")
        for index in indices:
            if grid.is_wall(index):
                raise ConfigurationError(f"Word start recorded on wall square {index}")

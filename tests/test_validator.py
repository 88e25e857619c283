import unittest

from crossword_grid.core.constants import Square
from crossword_grid.engine.grid import Grid
from crossword_grid.engine.validator import GridValidator


class GridValidatorTests(unittest.TestCase):
    def setUp(self) -> None:
        self.validator = GridValidator()

    def test_symmetric_grid_passes(self) -> None:
        result = self.validator.validate(Grid.from_string("W..\n...\n..W"))
        self.assertTrue(result.ok)
        self.assertEqual(result.messages, [])

    def test_asymmetric_grid_fails(self) -> None:
        with self.assertLogs("crossword_grid.engine.validator", level="ERROR"):
            result = self.validator.validate(Grid.from_string("W..\n...\n..."))
        self.assertFalse(result.ok)
        self.assertIn("[0]", result.messages[0])

    def test_asymmetric_indices(self) -> None:
        L, W = Square.LETTER, Square.WALL
        self.assertEqual(GridValidator.asymmetric_indices([W, L, L, L]), [0])
        self.assertEqual(GridValidator.asymmetric_indices([W, L, W]), [])
        self.assertEqual(GridValidator.asymmetric_indices([]), [])

    def test_toggled_grids_stay_valid(self) -> None:
        grid = Grid.blank(5)
        for index in [0, 7, 12, 3, 7]:
            grid.toggle_square(index)
            self.assertTrue(self.validator.validate(grid).ok)


if __name__ == "__main__":  # pragma: no cover
    unittest.main()

import unittest

from crossword_grid.core.constants import Direction, Square
from crossword_grid.core.models import Cursor, GridWord
from crossword_grid.engine.editor import (
    ClueCursor,
    ClueCursorType,
    EditorSession,
    PuzzleCursors,
    cursors_for_clue_cursor,
    cursors_for_grid_cursor,
)
from crossword_grid.engine.grid import Grid

A = Direction.ACROSS
D = Direction.DOWN

SAMPLE = """
..W..
.....
W...W
.....
..W..
"""


class PuzzleCursorTests(unittest.TestCase):
    def setUp(self) -> None:
        self.grid = Grid.from_string(SAMPLE)

    def test_grid_cursor_marks_primary_direction(self) -> None:
        cursors = cursors_for_grid_cursor(self.grid, Cursor(12, D))
        self.assertEqual(cursors.down, ClueCursor(GridWord(7, 3, 6), ClueCursorType.PRIMARY))
        self.assertEqual(cursors.across, ClueCursor(GridWord(11, 3, 7), ClueCursorType.SECONDARY))
        self.assertEqual(cursors.grid_run, [7, 12, 17])

    def test_grid_cursor_on_wall(self) -> None:
        cursors = cursors_for_grid_cursor(self.grid, Cursor(2, A))
        self.assertEqual(cursors, PuzzleCursors(across=None, down=None, grid_run=[]))

    def test_cleared_grid_cursor_keeps_clues(self) -> None:
        previous = cursors_for_grid_cursor(self.grid, Cursor(12, A))
        cursors = cursors_for_grid_cursor(self.grid, None, previous)
        self.assertEqual(cursors.across, previous.across)
        self.assertEqual(cursors.down, previous.down)
        self.assertIsNone(cursors.grid_run)

    def test_clue_cursor_only_highlights_run(self) -> None:
        cursors = cursors_for_clue_cursor(self.grid, Cursor(15, A))
        self.assertEqual(cursors, PuzzleCursors(grid_run=[15, 16, 17, 18, 19]))
        self.assertEqual(cursors_for_clue_cursor(self.grid, None), PuzzleCursors())


class EditorSessionTests(unittest.TestCase):
    def setUp(self) -> None:
        self.session = EditorSession(Grid.from_string(SAMPLE))

    def test_initial_state(self) -> None:
        self.assertEqual(self.session.cursor, Cursor(0, A))
        self.assertEqual(self.session.cursors.grid_run, [0, 1])
        self.assertEqual(self.session.cursors.across.type, ClueCursorType.PRIMARY)
        self.assertEqual(self.session.cursors.down.descriptor, GridWord(0, 2, 1))

    def test_word_navigation(self) -> None:
        self.assertEqual(self.session.next_word(), Cursor(3, A))
        self.assertEqual(self.session.cursors.grid_run, [3, 4])
        self.assertEqual(self.session.prev_word(), Cursor(0, A))
        self.assertEqual(self.session.prev_word(), Cursor(19, D))
        self.assertEqual(self.session.cursors.grid_run, [19, 24])

    def test_flip_and_move(self) -> None:
        self.assertEqual(self.session.flip_direction(), Cursor(0, D))
        self.assertEqual(self.session.cursors.grid_run, [0, 5])
        self.assertEqual(self.session.cursors.down.type, ClueCursorType.PRIMARY)
        self.assertEqual(self.session.move_to(12), Cursor(12, D))
        self.assertEqual(self.session.cursors.grid_run, [7, 12, 17])
        self.assertEqual(self.session.move_to(13, A), Cursor(13, A))

    def test_toggle_wall_reports_cleared_squares(self) -> None:
        self.session.move_to(12)
        self.assertEqual(self.session.toggle_wall(), [12])
        self.assertEqual(self.session.grid.squares[12], Square.WALL)
        self.assertEqual(self.session.cursors.grid_run, [])
        self.assertIsNone(self.session.cursors.across)

        self.session.move_to(0)
        self.assertEqual(self.session.toggle_wall(), [0, 24])
        self.assertEqual(self.session.toggle_wall(), [])
        self.assertEqual(self.session.grid.squares[24], Square.LETTER)

    def test_select_clue(self) -> None:
        word = self.session.grid.get_words(A)[3]
        self.assertEqual(self.session.select_clue(word, A), Cursor(11, A))
        self.assertIsNone(self.session.cursors.across)
        self.assertEqual(self.session.cursors.grid_run, [11, 12, 13])

    def test_sessions_are_independent(self) -> None:
        other = EditorSession(Grid.from_string(SAMPLE))
        self.session.move_to(6)
        self.session.toggle_wall()
        self.assertEqual(other.grid.squares[6], Square.LETTER)
        self.assertEqual(other.cursor, Cursor(0, A))


if __name__ == "__main__":  # pragma: no cover
    unittest.main()

import io
import logging
import unittest

from crossword_grid.utils.logger import configure_logging, get_logger, level_from_name


class LoggerTests(unittest.TestCase):
    def tearDown(self) -> None:
        configure_logging(logging.WARNING)

    def test_level_from_name(self) -> None:
        self.assertEqual(level_from_name("debug"), logging.DEBUG)
        self.assertEqual(level_from_name("ERROR"), logging.ERROR)
        self.assertEqual(level_from_name("loud"), logging.WARNING)
        self.assertEqual(level_from_name("loud", logging.INFO), logging.INFO)

    def test_configure_logging_writes_to_stream(self) -> None:
        stream = io.StringIO()
        configure_logging(logging.INFO, stream=stream)
        get_logger("crossword_grid.test").info("toggled %s", 3)
        self.assertIn("| INFO    | crossword_grid.test | toggled 3", stream.getvalue())
        self.assertEqual(len(logging.getLogger().handlers), 1)


if __name__ == "__main__":  # pragma: no cover
    unittest.main()

from __future__ import annotations

import sys
import tempfile
import unittest
from pathlib import Path

from loguru import logger

from foldview.runtime.logging import setup_logging


class SetupLoggingTests(unittest.TestCase):
    def tearDown(self) -> None:
        logger.remove()
        logger.add(sys.stderr)

    def test_records_go_to_file_sink(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            target = Path(tmp) / "logs" / "foldview.log"

            self.assertEqual(setup_logging("debug", target), target)
            logger.debug("entered {}", "src")
            logger.remove()

            content = target.read_text(encoding="utf-8")
            self.assertIn("logging initialized at level DEBUG", content)
            self.assertIn("entered src", content)

    def test_unknown_level_disables_logging(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            self.assertIsNone(setup_logging("chatty", Path(tmp) / "foldview.log"))


if __name__ == "__main__":
    unittest.main()

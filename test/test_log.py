"""Tests for logger configuration and request logging."""

import logging
import sys
import tempfile
import unittest
from pathlib import Path
from unittest.mock import MagicMock, patch

REPO_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(REPO_ROOT / "src"))

from BvbrcApi.client.context import create_context
from BvbrcApi.client.runner import BvbrcApiClient
from BvbrcApi.utils.log import configure_logging, log


class TestConfigureLogging(unittest.TestCase):
    def tearDown(self) -> None:
        for handler in list(log.handlers):
            handler.close()
        log.handlers.clear()
        log.addHandler(logging.NullHandler())
        log.setLevel(logging.NOTSET)
        log.propagate = True

    def test_console_only(self) -> None:
        path = configure_logging(level="warning")
        self.assertIsNone(path)
        self.assertEqual(log.level, logging.WARNING)
        self.assertEqual(len(log.handlers), 1)

    def test_file_logging_writes_abbreviated_level(self) -> None:
        with tempfile.TemporaryDirectory() as tmp_dir:
            path = configure_logging(level="INFO", log_to_file=True, log_dir=tmp_dir, name="unit")
            self.assertIsNotNone(path)
            log.debug("hello file")
            for handler in log.handlers:
                handler.flush()
            content = path.read_text(encoding="utf-8")
            for handler in list(log.handlers):
                handler.close()
            log.handlers.clear()

        self.assertTrue(path.name.startswith("unit_"))
        self.assertIn("[DEBG] hello file", content)


class TestRequestLogging(unittest.TestCase):
    def test_request_is_logged_without_headers(self) -> None:
        client = BvbrcApiClient(create_context(auth_token="very-secret"))
        self.addCleanup(client.close)
        response = MagicMock(status_code=200, reason="OK", content=b"[]")
        response.json.return_value = []

        with patch.object(client._session, "post", return_value=response):
            with self.assertLogs("BvbrcApi", level="DEBUG") as logs:
                client.run("genome", "eq(genome_id,1)")

        output = "\n".join(logs.output)
        self.assertIn("eq(genome_id,1)&limit(1000)", output)
        self.assertNotIn("very-secret", output)


if __name__ == "__main__":
    unittest.main()

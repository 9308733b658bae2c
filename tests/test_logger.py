"""Tests for structlog configuration (console + JSONL file)."""

import json
import logging
import sys
import tempfile
import unittest
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

import structlog

from graph_email_client.utils import logger as logger_module


class TestLogger(unittest.TestCase):
    def setUp(self):
        logger_module._configured = False
        structlog.reset_defaults()

    def tearDown(self):
        package_logger = logging.getLogger("graph_email_client")
        for handler in list(package_logger.handlers):
            handler.close()
            package_logger.removeHandler(handler)
        logger_module._configured = False
        structlog.reset_defaults()

    def test_events_written_as_jsonl_with_bindings(self):
        with tempfile.TemporaryDirectory() as tmp:
            log_file = Path(tmp) / "logs" / "client.jsonl"
            logger_module.configure_logging(level="INFO", log_file=log_file)
            log = logger_module.get_logger("graph_email_client.test", mailbox="me")
            log.info("mail_client.read_emails.retrieved", count=3)
            log.debug("mail_client.debug_only")
            for handler in logging.getLogger("graph_email_client").handlers:
                handler.flush()

            lines = log_file.read_text(encoding="utf-8").splitlines()
            self.assertEqual(len(lines), 1)
            record = json.loads(lines[0])
            self.assertEqual(record["event"], "mail_client.read_emails.retrieved")
            self.assertEqual(record["count"], 3)
            self.assertEqual(record["mailbox"], "me")
            self.assertEqual(record["level"], "info")

            for handler in list(logging.getLogger("graph_email_client").handlers):
                handler.close()

    def test_noisy_sdk_loggers_quieted(self):
        logger_module.configure_logging(level="DEBUG")
        self.assertEqual(logging.getLogger("httpx").level, logging.WARNING)
        self.assertEqual(logging.getLogger("msal").level, logging.WARNING)

    def test_level_coercion(self):
        self.assertEqual(logger_module._coerce_level("warning"), logging.WARNING)
        self.assertEqual(logger_module._coerce_level("15"), 15)
        self.assertEqual(logger_module._coerce_level("nonsense"), logging.INFO)


if __name__ == "__main__":
    unittest.main()

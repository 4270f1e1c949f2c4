# monitoring/tests.py
"""
Tests for the monitoring application: the HTML logger and the
DEBUG-only log page.
"""

import tempfile
from pathlib import Path

from django.test import SimpleTestCase, override_settings
from django.urls import reverse

from monitoring import html_logger


class HtmlLoggerTests(SimpleTestCase):
    def setUp(self):
        log_dir = tempfile.TemporaryDirectory()
        self.addCleanup(log_dir.cleanup)
        self.log_dir = Path(log_dir.name) / "nested"
        overrides = override_settings(MONITORING_LOG_DIR=self.log_dir)
        overrides.enable()
        self.addCleanup(overrides.disable)

    def test_entries_are_appended_with_level(self):
        html_logger.info("board loaded")
        html_logger.warn("signup rejected")
        html_logger.error("api down")

        content = (self.log_dir / html_logger.LOG_FILENAME).read_text(encoding="utf-8")
        self.assertTrue(content.startswith("<!doctype html>"))
        self.assertIn('class="log-info"', content)
        self.assertIn('class="log-warn"', content)
        self.assertIn('class="log-error"', content)
        self.assertLess(content.index("board loaded"), content.index("api down"))

    def test_entries_are_escaped(self):
        html_logger.info("<script>alert('x')</script>")
        content = html_logger.log_file().read_text(encoding="utf-8")
        self.assertNotIn("<script>", content)
        self.assertIn("&lt;script&gt;", content)

    def test_entries_reach_standard_logging(self):
        with self.assertLogs("monitoring", level="WARNING") as logs:
            html_logger.warn("signup rejected")
        self.assertEqual(logs.records[0].getMessage(), "signup rejected")

    @override_settings(DEBUG=True)
    def test_logs_page_in_debug(self):
        html_logger.info("board loaded")
        resp = self.client.get(reverse("monitoring:logs"))
        self.assertEqual(resp.status_code, 200)
        self.assertContains(resp, "board loaded")

    @override_settings(DEBUG=True)
    def test_logs_page_without_file(self):
        resp = self.client.get(reverse("monitoring:logs"))
        self.assertContains(resp, "No logs yet.")

    @override_settings(DEBUG=False)
    def test_logs_page_hidden_without_debug(self):
        resp = self.client.get(reverse("monitoring:logs"))
        self.assertEqual(resp.status_code, 404)

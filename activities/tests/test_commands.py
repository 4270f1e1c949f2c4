# activities/tests/test_commands.py
"""
Tests for the ``show_activities`` management command.
"""

from io import StringIO
from unittest.mock import patch

import requests
from django.core.management import call_command
from django.core.management.base import CommandError

from activities.loader import LOAD_FAILED_TEXT
from activities.rendering import NO_PARTICIPANTS_TEXT

from .utils import BoardTestCase, catalog_payload, fake_response


class ShowActivitiesCommandTests(BoardTestCase):
    def run_command(self, *args):
        out = StringIO()
        with patch("activities.gateways.requests.get") as get:
            get.return_value = fake_response(200, catalog_payload())
            call_command("show_activities", *args, stdout=out, no_color=True)
        return out.getvalue()

    def test_prints_every_activity(self):
        output = self.run_command()
        self.assertIn("Categories: Chess, Programming, Creative", output)
        for name in catalog_payload():
            self.assertIn(name, output)
        self.assertIn("Availability: -1 spots left", output)
        self.assertIn("    - emma@mergington.edu", output)
        self.assertIn(NO_PARTICIPANTS_TEXT, output)

    def test_filters_and_sort(self):
        output = self.run_command("--category", "Creative", "--sort", "schedule")
        self.assertNotIn("Chess Club", output)
        self.assertLess(output.index("Drama Club"), output.index("Art Studio"))

    def test_no_match(self):
        output = self.run_command("--search", "underwater basket weaving")
        self.assertIn("No matching activities.", output)

    def test_load_failure(self):
        with patch("activities.gateways.requests.get") as get:
            get.side_effect = requests.ConnectionError("refused")
            with self.assertRaisesMessage(CommandError, LOAD_FAILED_TEXT):
                call_command("show_activities", stdout=StringIO())

# activities/tests/utils.py
"""
Shared fixtures for the activities test suite.

Provides a sample catalog in the API's wire format, a factory for
fake ``requests`` responses, and a base test case that sends the
HTML log to a temporary directory.
"""

import copy
import tempfile
from unittest import mock

import requests
from django.test import SimpleTestCase, override_settings

API_BASE = "http://api.test"

#: Sample body of ``GET /activities``
CATALOG = {
    "Chess Club": {
        "description": "Learn strategies and compete in chess tournaments",
        "schedule": "Fridays, 3:30 PM - 5:00 PM",
        "max_participants": 12,
        "participants": ["michael@mergington.edu", "daniel@mergington.edu"],
    },
    "Programming Class": {
        "description": "Learn programming fundamentals and build software projects",
        "schedule": "Tuesdays and Thursdays, 3:30 PM - 4:30 PM",
        "max_participants": 20,
        "participants": ["emma@mergington.edu"],
    },
    "Art Studio": {
        "description": "Painting and drawing",
        "schedule": "Wednesdays, 3:30 PM - 5:00 PM",
        "max_participants": 2,
        "participants": ["a@mergington.edu", "b@mergington.edu", "c@mergington.edu"],
        "category": "Creative",
    },
    "Drama Club": {
        "description": "Acting and stagecraft",
        "schedule": "Mondays, 4:00 PM - 5:30 PM",
        "max_participants": 15,
        "participants": [],
        "category": "Creative",
    },
    "Chess Masters": {
        "description": "Advanced openings and endgames",
        "schedule": "Saturdays, 10:00 AM - 12:00 PM",
        "max_participants": 8,
        "participants": [],
    },
}


def catalog_payload():
    """Return a fresh deep copy of :data:`CATALOG`."""
    return copy.deepcopy(CATALOG)


def fake_response(status_code=200, payload=None, json_error=False):
    """
    Build a stand-in for a ``requests.Response``.

    Parameters
    ----------
    status_code : int
        HTTP status of the answer.
    payload : Any
        Value returned by ``json()``.
    json_error : bool
        Make ``json()`` raise as for a non-JSON body.
    """
    resp = mock.Mock()
    resp.status_code = status_code
    if json_error:
        resp.json.side_effect = ValueError("Expecting value")
    else:
        resp.json.return_value = payload
    if status_code >= 400:
        resp.raise_for_status.side_effect = requests.HTTPError(f"{status_code} Error")
    else:
        resp.raise_for_status.return_value = None
    return resp


class BoardTestCase(SimpleTestCase):
    """
    Base test case for the board.

    Points the gateway at a fake API root and writes the HTML log
    to a temporary directory removed after each test.
    """

    def setUp(self):
        log_dir = tempfile.TemporaryDirectory()
        self.addCleanup(log_dir.cleanup)
        self.log_dir = log_dir.name

        overrides = override_settings(
            ACTIVITY_API_BASE_URL=API_BASE,
            ACTIVITY_API_TIMEOUT=None,
            MONITORING_LOG_DIR=self.log_dir,
        )
        overrides.enable()
        self.addCleanup(overrides.disable)

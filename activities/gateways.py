# activities/gateways.py
"""
Gateways to the external activities API.

This module defines the interface used by the board to read the
activity catalog and to submit signup and unregister actions, and
its HTTP implementation. The server remains the authority on
capacity, duplicates and email format: nothing is validated here.
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional, Protocol
from urllib.parse import quote
import logging
import os

import requests
from requests.exceptions import RequestException

from .exceptions import (
    ActionRejectedError,
    ActionTransportError,
    ActivityBoardError,
    CatalogLoadError,
)
from .models import Activity, parse_catalog

logger = logging.getLogger(__name__)

# Characters left alone by JavaScript's encodeURIComponent, besides
# the letters, digits and "-_.~" that quote() never escapes.
_URI_COMPONENT_SAFE = "!*'()"


def encode_component(value: str) -> str:
    """
    Percent-encode a value for use in a path segment or query value.

    Parameters
    ----------
    value : str
        Raw activity name or email.

    Returns
    -------
    str
        The encoded value; ``/``, ``?``, ``&``, ``+``, ``@`` and
        spaces are all escaped.
    """
    return quote(value, safe=_URI_COMPONENT_SAFE)


class ActivityGateway(Protocol):
    """
    Protocol for activity gateways.

    Any gateway must be able to fetch the catalog and to submit the
    two board actions.
    """

    def fetch_activities(self) -> Dict[str, Activity]:
        """
        Fetch the full activity catalog.

        Returns
        -------
        dict
            Mapping of activity name to :class:`Activity`.
        """
        ...

    def signup(self, *, activity: str, email: str) -> str:
        """
        Sign an email up for an activity.

        Returns
        -------
        str
            The server's confirmation message.
        """
        ...

    def unregister(self, *, activity: str, email: str) -> str:
        """
        Remove an email from an activity.

        Returns
        -------
        str
            The server's confirmation message.
        """
        ...


@dataclass
class HttpActivityGateway:
    """
    HTTP gateway to the activities REST API.

    Attributes
    ----------
    base_url : str, optional
        Root URL of the API. Falls back to the ``ACTIVITY_API_BASE_URL``
        environment variable.
    timeout_sec : float, optional
        Timeout for every request. ``None`` leaves the transport default.
    """

    base_url: Optional[str] = None
    timeout_sec: Optional[float] = None

    # ---------- internal helpers ----------

    def _require_base(self, error_cls=ActivityBoardError) -> str:
        """
        Ensure that the base URL is defined.

        Raises
        ------
        ActivityBoardError
            An instance of ``error_cls`` if no base URL is configured.
        """
        base = self.base_url or os.getenv("ACTIVITY_API_BASE_URL")
        if not base:
            raise error_cls("ACTIVITY_API_BASE_URL is not configured")
        return base.rstrip("/")

    def _action_url(self, activity: str, action: str, email: str) -> str:
        base = self._require_base(ActionTransportError)
        return (
            f"{base}/activities/{encode_component(activity)}/{action}"
            f"?email={encode_component(email)}"
        )

    @staticmethod
    def _read_action_answer(resp) -> str:
        """
        Interpret the answer to a signup or unregister call.

        Raises
        ------
        ActionRejectedError
            If the status is not a success status.
        ActionTransportError
            If the body is not JSON.
        """
        try:
            data: Any = resp.json()
        except ValueError as exc:
            logger.exception("Activities API sent a non-JSON answer (status %s)", resp.status_code)
            raise ActionTransportError("Unreadable answer from the activities API") from exc

        if not isinstance(data, dict):
            data = {}

        if 200 <= resp.status_code < 300:
            message = data.get("message")
            return "" if message is None else str(message)

        detail = data.get("detail")
        if detail is not None and not isinstance(detail, str):
            detail = str(detail)
        logger.info("Activities API rejected action (status %s): %s", resp.status_code, detail)
        raise ActionRejectedError(detail, status_code=resp.status_code)

    # ---------- public API ----------

    def fetch_activities(self) -> Dict[str, Activity]:
        """
        Fetch the full activity catalog from ``GET /activities``.

        Returns
        -------
        dict
            Mapping of activity name to :class:`Activity`.

        Raises
        ------
        CatalogLoadError
            If the request fails, the status is not a success status,
            or the body is not a catalog.
        """
        url = f"{self._require_base(CatalogLoadError)}/activities"
        try:
            resp = requests.get(url, timeout=self.timeout_sec)
            resp.raise_for_status()
            return parse_catalog(resp.json())
        except (RequestException, ValueError) as exc:
            logger.exception("Fetching activities failed")
            raise CatalogLoadError("Failed to fetch activities") from exc

    def signup(self, *, activity: str, email: str) -> str:
        """
        Call ``POST /activities/{activity}/signup?email={email}``.

        Raises
        ------
        ActionRejectedError
            If the server refuses the signup.
        ActionTransportError
            If the request does not complete.
        """
        url = self._action_url(activity, "signup", email)
        try:
            resp = requests.post(url, timeout=self.timeout_sec)
        except RequestException as exc:
            logger.exception("Signup request failed")
            raise ActionTransportError("Failed to reach the activities API") from exc
        return self._read_action_answer(resp)

    def unregister(self, *, activity: str, email: str) -> str:
        """
        Call ``DELETE /activities/{activity}/unregister?email={email}``.

        Raises
        ------
        ActionRejectedError
            If the server refuses the unregistration.
        ActionTransportError
            If the request does not complete.
        """
        url = self._action_url(activity, "unregister", email)
        try:
            resp = requests.delete(url, timeout=self.timeout_sec)
        except RequestException as exc:
            logger.exception("Unregister request failed")
            raise ActionTransportError("Failed to reach the activities API") from exc
        return self._read_action_answer(resp)


def get_activity_gateway():
    """
    Factory function to build the activity gateway.

    Returns
    -------
    ActivityGateway
        An :class:`HttpActivityGateway` configured from Django settings.
    """
    from django.conf import settings

    return HttpActivityGateway(
        base_url=getattr(settings, "ACTIVITY_API_BASE_URL", None),
        timeout_sec=getattr(settings, "ACTIVITY_API_TIMEOUT", None),
    )

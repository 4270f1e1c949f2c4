# activities/status.py
"""
Status area messages.

Outcomes of board actions go through Django's messages framework.
The message level tag (``success`` or ``error``) is the style class
of the status area, which the page hides again after
``ACTIVITY_BOARD_STATUS_HIDE_AFTER_MS``.
"""

from django.contrib import messages

from .exceptions import ActionRejectedError

#: Shown when the server rejects an action without a detail
REJECTED_FALLBACK_TEXT = "An error occurred"
#: Shown when a signup request does not complete
SIGNUP_FAILED_TEXT = "Failed to sign up. Please try again."
#: Shown when an unregister request does not complete
UNREGISTER_FAILED_TEXT = "Failed to unregister. Please try again."


def report_success(request, text: str) -> None:
    """Show the server's confirmation text with the success style."""
    messages.success(request, text)


def report_rejection(request, exc: ActionRejectedError) -> None:
    """Show the server's detail, or the generic fallback, with the error style."""
    messages.error(request, exc.detail or REJECTED_FALLBACK_TEXT)


def report_failure(request, text: str) -> None:
    """Show a transport failure text with the error style."""
    messages.error(request, text)

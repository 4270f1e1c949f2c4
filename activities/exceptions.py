# activities/exceptions.py
"""
Custom exceptions for the activities application.

This module defines domain-specific exceptions raised while talking
to the external activities API. Gateways raise them, views catch
them and turn them into status messages for the user.
"""


class ActivityBoardError(Exception):
    """
    Base class for activity board errors.

    All custom exceptions of the board inherit from this class.
    It can be used to catch any failure of the external API.
    """


class CatalogLoadError(ActivityBoardError):
    """
    Raised when the activity catalog cannot be fetched or parsed.

    Covers transport failures, non-success status codes, bodies
    that are not JSON, and JSON that does not describe activities.
    """


class ActionError(ActivityBoardError):
    """
    Base class for failures of a signup or unregister action.
    """


class ActionRejectedError(ActionError):
    """
    Raised when the server answers an action with a non-success status.

    Attributes
    ----------
    detail : str or None
        The ``detail`` field of the server's answer, if any.
    status_code : int or None
        The HTTP status code of the answer.
    """

    def __init__(self, detail=None, status_code=None):
        super().__init__(detail or "Action rejected by the server")
        self.detail = detail
        self.status_code = status_code


class ActionTransportError(ActionError):
    """
    Raised when an action request never completes or its answer is unreadable.
    """

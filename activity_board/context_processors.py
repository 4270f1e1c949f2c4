"""
Custom context processors for the Activity Board project.

These processors inject project-specific variables into all
template contexts, making them available globally in templates.
"""

from django.conf import settings


def board_settings(request):
    """
    Inject board configuration into the template context.

    Parameters
    ----------
    request : HttpRequest
        The current HTTP request.

    Returns
    -------
    dict
        A dictionary containing:
        - ``STATUS_HIDE_AFTER_MS`` : delay before the status area is hidden.
        - ``ACTIVITY_API_BASE_URL`` : URL of the activities API, shown in the footer.
    """
    return {
        "STATUS_HIDE_AFTER_MS": getattr(settings, "ACTIVITY_BOARD_STATUS_HIDE_AFTER_MS", 5000),
        "ACTIVITY_API_BASE_URL": getattr(settings, "ACTIVITY_API_BASE_URL", None),
    }

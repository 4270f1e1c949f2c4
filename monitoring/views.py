# monitoring/views.py
"""
Views for the monitoring application.

This module provides a view for inspecting the board's HTML log
directly in the browser while developing.
"""

from django.conf import settings
from django.http import Http404
from django.shortcuts import render

from .html_logger import log_file


def logs_view(request):
    """
    Display application logs as HTML content.

    The board has no authentication, so the page only exists when
    ``DEBUG`` is on.

    Parameters
    ----------
    request : HttpRequest
        The current HTTP request.

    Returns
    -------
    HttpResponse
        A rendered template containing the log HTML or a
        placeholder message if no log file is available.

    Raises
    ------
    Http404
        If ``DEBUG`` is off.
    """
    if not settings.DEBUG:
        raise Http404("Logs are only available in DEBUG mode.")

    path = log_file()
    if path.exists():
        html = path.read_text(encoding="utf-8")
    else:
        html = "<p>No logs yet.</p>"

    return render(request, "monitoring/logs.html", {"log_html": html})

# monitoring/html_logger.py
"""
HTML logger for the monitoring application.

This module provides simple logging functions (info, warn, error)
that append log entries to an HTML file. The generated log file
can be displayed directly in a browser and styled with basic CSS.

Entries are escaped: they routinely carry activity names and
emails typed by users. Each entry is also forwarded to the
standard ``logging`` module under the ``monitoring`` logger.
"""

from pathlib import Path
import logging

from django.conf import settings
from django.utils.html import escape
from django.utils.timezone import now

logger = logging.getLogger("monitoring")

#: Name of the HTML log file inside ``MONITORING_LOG_DIR``
LOG_FILENAME = "app.log.html"

# HTML header of the log file
HEADER = """<!doctype html>
<html lang="en"><head><meta charset="utf-8"><title>Logs</title>
<style>
.log-info{ background:#e3f2fd; color:#0d47a1; padding:.5rem; border-left:4px solid #1976d2; margin:.25rem 0; }
.log-warn{ background:#fff8e1; color:#e65100; padding:.5rem; border-left:4px solid #ff9800; margin:.25rem 0; }
.log-error{ background:#ffebee; color:#b71c1c; padding:.5rem; border-left:4px solid #f44336; margin:.25rem 0; }
</style></head><body>
<h3>Activity board logs</h3>
"""


def log_file() -> Path:
    """
    Return the path of the HTML log file.

    The directory comes from ``settings.MONITORING_LOG_DIR`` and
    defaults to ``BASE_DIR / "logs"``.
    """
    log_dir = getattr(settings, "MONITORING_LOG_DIR", None) or Path(settings.BASE_DIR) / "logs"
    return Path(log_dir) / LOG_FILENAME


def _append(html_line: str):
    """
    Append a single HTML line to the log file, creating it if needed.

    Parameters
    ----------
    html_line : str
        The HTML-formatted log entry to append.
    """
    path = log_file()
    path.parent.mkdir(parents=True, exist_ok=True)
    if not path.exists():
        path.write_text(HEADER, encoding="utf-8")
    with path.open("a", encoding="utf-8") as f:
        f.write(html_line + "\n")


def _entry(css_class: str, label: str, message: str) -> str:
    ts = now().strftime("%Y-%m-%d %H:%M:%S")
    return f'<div class="{css_class}"><strong>[{label} {ts}]</strong> {escape(message)}</div>'


def info(message: str):
    """
    Log an informational message.

    Parameters
    ----------
    message : str
        The message to log.
    """
    logger.info(message)
    _append(_entry("log-info", "INFO", message))


def warn(message: str):
    """
    Log a warning message.

    Parameters
    ----------
    message : str
        The message to log.
    """
    logger.warning(message)
    _append(_entry("log-warn", "WARN", message))


def error(message: str):
    """
    Log an error message.

    Parameters
    ----------
    message : str
        The message to log.
    """
    logger.error(message)
    _append(_entry("log-error", "ERROR", message))

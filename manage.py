#!/usr/bin/env python
"""
Command-line entry point of the Activity Board site.

Common commands::

    python manage.py runserver          # serve the board
    python manage.py show_activities    # print the board in the terminal
    python manage.py test               # run the test suite

The activities API is read from ``ACTIVITY_API_BASE_URL``.
"""

import os
import sys


def main():
    """
    Point Django at the board settings and run the requested command.
    """
    os.environ.setdefault("DJANGO_SETTINGS_MODULE", "activity_board.settings")
    from django.core.management import execute_from_command_line

    execute_from_command_line(sys.argv)


if __name__ == "__main__":
    main()

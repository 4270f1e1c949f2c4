# activities/apps.py
"""
Application configuration for the activities module.

The activities app renders the activity board on top of the
external activities API. It declares no database model.
"""

from django.apps import AppConfig


class ActivitiesConfig(AppConfig):
    """
    Configuration class for the activities application.

    Attributes
    ----------
    name : str
        The full Python path to the application.
    verbose_name : str
        Human readable name of the application.
    """

    name = "activities"
    verbose_name = "Activity board"

# monitoring/apps.py
"""
Application configuration for the monitoring module.

This module defines the app configuration for monitoring,
which records board events in an HTML log file and displays it.
"""

from django.apps import AppConfig


class MonitoringConfig(AppConfig):
    """
    Configuration class for the monitoring application.

    Attributes
    ----------
    name : str
        Full Python path to the monitoring application.
    """

    # Application name used by Django to locate the app
    name = "monitoring"

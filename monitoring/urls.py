# monitoring/urls.py
"""
URL configuration for the monitoring application.

Exposes the HTML log written by :mod:`monitoring.html_logger`.
"""

from django.urls import path
from .views import logs_view

# Application namespace for reverse lookups
app_name = "monitoring"

#: URL patterns for the monitoring application
urlpatterns = [
    # HTML log of board events, 404 unless DEBUG is on
    path("logs/", logs_view, name="logs"),
]

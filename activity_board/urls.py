"""
Root URL configuration for the Activity Board project.

This module defines the global URL routes and delegates
to application-specific ``urls.py`` modules.

For more details, see:
https://docs.djangoproject.com/en/stable/topics/http/urls/
"""

from django.urls import path, include

#: Global URL patterns for the project
urlpatterns = [
    # Monitoring application (application logs, DEBUG only)
    path("monitoring/", include("monitoring.urls")),

    # Activities application (board, filters, signup and unregister)
    path("", include("activities.urls")),
]

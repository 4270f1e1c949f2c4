# activities/urls.py
"""
URL configuration for the activities application.

This module defines the routes of the activity board. Each route
maps to a class-based view that handles the corresponding HTTP
requests.
"""

from django.urls import path
from .views import ActivityBoardView, ActivityListView, SignupView, UnregisterView

# Application namespace used for reverse lookups
app_name = "activities"

#: URL patterns for the activities application
urlpatterns = [
    # Board page, fetches the catalog from the activities API
    path("", ActivityBoardView.as_view(), name="board"),

    # Same page rendered from the cached catalog (filter, sort and search controls)
    path("list/", ActivityListView.as_view(), name="list"),

    # Signup action (POST-only)
    path("signup/", SignupView.as_view(), name="signup"),

    # Unregister action for one participant (POST-only)
    path("unregister/", UnregisterView.as_view(), name="unregister"),
]

# activities/views.py
"""
Views for the activities application.

This module defines the class-based views of the activity board:
the board page (fetches the catalog), the list view (re-renders
the cached catalog with new control values), and the signup and
unregister actions that call the external activities API.
"""

from django.shortcuts import render
from django.views.generic import View

from monitoring.html_logger import info, warn, error

from .exceptions import ActionRejectedError, ActionTransportError
from .forms import FilterForm, SignupForm, UnregisterForm
from .gateways import get_activity_gateway
from .loader import LOAD_FAILED_TEXT, load_catalog
from .models import get_board_state, save_board_state
from .rendering import (
    NO_PARTICIPANTS_TEXT,
    bind_unregister_actions,
    category_options,
    render_board,
)
from .status import (
    SIGNUP_FAILED_TEXT,
    UNREGISTER_FAILED_TEXT,
    report_failure,
    report_rejection,
    report_success,
)


class BoardMixin:
    """
    Shared rendering of the board page.

    The control values always come from the query string, so that
    actions posted from a filtered board re-render it with the same
    filters.
    """

    template_name = "activities/board.html"

    def get_state(self):
        """
        Return the board state of the current session.

        Returns
        -------
        BoardState
            The cached catalog, or an empty state on a new session.
        """
        return get_board_state(self.request.session)

    def refresh(self, state, gateway):
        """
        Reload the catalog into ``state`` and store it in the session.

        Returns
        -------
        bool
            Whether the catalog was replaced.
        """
        if load_catalog(state, gateway):
            save_board_state(self.request.session, state)
            return True
        error(f"Failed to load activities from the API, {len(state.catalog)} kept in cache.")
        return False

    def render_board_page(self, state, *, load_failed=False, signup_data=None):
        """
        Render the full board page.

        Parameters
        ----------
        state : BoardState
            Board state holding the catalog to display.
        load_failed : bool
            Show the load failure text in place of the activity list.
        signup_data : QueryDict, optional
            Submitted signup values to keep in the form. ``None``
            renders an empty form.

        Returns
        -------
        HttpResponse
            The rendered board.
        """
        filter_form = FilterForm(
            self.request.GET or None, category_options=category_options(state)
        )
        view = bind_unregister_actions(
            render_board(state, filter_form.criteria(), load_failed=load_failed)
        )
        signup_form = SignupForm(signup_data, activity_options=view.activity_options)
        return render(
            self.request,
            self.template_name,
            {
                "board": view,
                "filter_form": filter_form,
                "signup_form": signup_form,
                "load_failed_text": LOAD_FAILED_TEXT,
                "no_participants_text": NO_PARTICIPANTS_TEXT,
            },
        )


class ActivityBoardView(BoardMixin, View):
    """
    Board page: fetch the catalog, then render it.
    """

    def get(self, request):
        state = self.get_state()
        loaded = self.refresh(state, get_activity_gateway())
        return self.render_board_page(state, load_failed=not loaded)


class ActivityListView(BoardMixin, View):
    """
    Re-render the board from the cached catalog.

    Used by the category, sort and search controls; never calls the
    external API.
    """

    def get(self, request):
        return self.render_board_page(self.get_state())


class SignupView(BoardMixin, View):
    """
    Sign an email up for an activity through the external API.
    """

    def post(self, request):
        """
        Handle the signup form.

        On success the status area shows the server's message, the form
        is cleared and the catalog is fetched again. On failure the status
        area shows the error and the cached catalog is rendered as is.

        Parameters
        ----------
        request : HttpRequest
            The HTTP request carrying ``email`` and ``activity``.

        Returns
        -------
        HttpResponse
            The re-rendered board.
        """
        state = self.get_state()
        form = SignupForm(request.POST)
        form.is_valid()
        activity = form.cleaned_data.get("activity", "")
        email = form.cleaned_data.get("email", "")

        gateway = get_activity_gateway()
        try:
            message = gateway.signup(activity=activity, email=email)
        except ActionRejectedError as exc:
            report_rejection(request, exc)
            warn(f"Signup rejected (activity={activity!r}, status={exc.status_code}): {exc.detail!r}.")
            return self.render_board_page(state, signup_data=request.POST)
        except ActionTransportError as exc:
            report_failure(request, SIGNUP_FAILED_TEXT)
            error(f"Error signing up (activity={activity!r}): {exc!r}.")
            return self.render_board_page(state, signup_data=request.POST)

        report_success(request, message)
        info(f"Signup accepted (activity={activity!r}).")
        loaded = self.refresh(state, gateway)
        return self.render_board_page(state, load_failed=not loaded)


class UnregisterView(BoardMixin, View):
    """
    Remove a participant from an activity through the external API.
    """

    def post(self, request):
        state = self.get_state()
        form = UnregisterForm(request.POST)
        form.is_valid()
        activity = form.cleaned_data.get("activity", "")
        email = form.cleaned_data.get("email", "")

        gateway = get_activity_gateway()
        try:
            message = gateway.unregister(activity=activity, email=email)
        except ActionRejectedError as exc:
            report_rejection(request, exc)
            warn(f"Unregister rejected (activity={activity!r}, status={exc.status_code}): {exc.detail!r}.")
            return self.render_board_page(state)
        except ActionTransportError as exc:
            report_failure(request, UNREGISTER_FAILED_TEXT)
            error(f"Error unregistering (activity={activity!r}): {exc!r}.")
            return self.render_board_page(state)

        report_success(request, message)
        info(f"Unregister accepted (activity={activity!r}).")
        loaded = self.refresh(state, gateway)
        return self.render_board_page(state, load_failed=not loaded)

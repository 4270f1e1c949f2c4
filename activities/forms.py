# activities/forms.py
"""
Forms for the activities application.

This module defines the board controls (category, sort, search),
the signup form, and the per-participant unregister form. None of
them validate the activity or the email: the external API is the
authority on both.
"""

from django import forms

from .pipeline import SORT_CHOICES, FilterCriteria


class FilterForm(forms.Form):
    """
    Category, sort and search controls of the board.

    Submitted with GET to the list view. Unknown values are accepted
    as-is: an unknown category matches nothing and an unknown sort
    keeps the current order.

    Attributes
    ----------
    category : forms.CharField
        Rendered as a select with ``All`` followed by the categories
        discovered in the catalog.
    sort : forms.CharField
        Rendered as a select with the values of :data:`SORT_CHOICES`.
    search : forms.CharField
        Free text search input.
    """

    category = forms.CharField(
        required=False,
        label="Category",
        widget=forms.Select(attrs={"id": "filter-category", "data-board-control": "change"}),
    )
    sort = forms.CharField(
        required=False,
        label="Sort by",
        widget=forms.Select(
            choices=SORT_CHOICES,
            attrs={"id": "sort-activities", "data-board-control": "change"},
        ),
    )
    search = forms.CharField(
        required=False,
        label="Search",
        strip=False,
        widget=forms.TextInput(
            attrs={
                "id": "search-activities",
                "placeholder": "Search activities...",
                "data-board-control": "input",
            }
        ),
    )

    def __init__(self, *args, **kwargs):
        """
        Initialize the form with the category options.

        Parameters
        ----------
        *args : tuple
            Positional arguments passed to the base form.
        **kwargs : dict
            Keyword arguments. May include ``category_options``, a list
            of ``(value, label)`` pairs for the category select.
        """
        category_options = kwargs.pop("category_options", [("", "All")])
        super().__init__(*args, **kwargs)
        self.fields["category"].widget.choices = category_options

    def criteria(self) -> FilterCriteria:
        """
        Return the control values as :class:`FilterCriteria`.

        An unbound or invalid form yields empty criteria.
        """
        if not self.is_bound or not self.is_valid():
            return FilterCriteria()
        data = self.cleaned_data
        return FilterCriteria(
            category=data.get("category") or "",
            search=data.get("search") or "",
            sort=data.get("sort") or "",
        )


class SignupForm(forms.Form):
    """
    Form signing an email up for an activity.

    The activity select lists the activities currently displayed,
    after a placeholder option.
    """

    email = forms.CharField(
        required=False,
        strip=False,
        label="Student Email",
        widget=forms.EmailInput(
            attrs={"id": "email", "placeholder": "your-email@mergington.edu", "required": True}
        ),
    )
    activity = forms.CharField(
        required=False,
        strip=False,
        label="Select Activity",
        widget=forms.Select(attrs={"id": "activity", "required": True}),
    )

    def __init__(self, *args, **kwargs):
        activity_options = kwargs.pop("activity_options", [])
        super().__init__(*args, **kwargs)
        self.fields["activity"].widget.choices = activity_options


class UnregisterForm(forms.Form):
    """
    Hidden form behind each participant's unregister button.
    """

    activity = forms.CharField(required=False, strip=False, widget=forms.HiddenInput)
    email = forms.CharField(required=False, strip=False, widget=forms.HiddenInput)

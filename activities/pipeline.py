# activities/pipeline.py
"""
Filter, search and sort pipeline for the activity board.

The pipeline turns the in-memory catalog and the three board
controls (category, search, sort) into the ordered sequence of
``(name, activity)`` pairs to display. It performs no I/O and
always gives the same output for the same input.

Steps are applied in a fixed order: category filter, then search
filter, then sort. The two filters commute; the sort comes last.
"""

from dataclasses import dataclass
from typing import Iterable, List, Mapping, Tuple

import unidecode

#: Sort control value ordering by activity name
SORT_BY_NAME = "name"
#: Sort control value ordering by schedule text
SORT_BY_SCHEDULE = "schedule"

#: Choices offered by the sort control; the empty value keeps server order
SORT_CHOICES = [
    ("", "Default order"),
    (SORT_BY_NAME, "Name"),
    (SORT_BY_SCHEDULE, "Schedule"),
]


@dataclass(frozen=True)
class FilterCriteria:
    """
    Values of the three board controls.

    Attributes
    ----------
    category : str
        Category to keep, or empty for all categories.
    search : str
        Raw search text; trimmed and lower-cased before matching.
    sort : str
        ``"name"``, ``"schedule"``, or anything else for no sorting.
    """

    category: str = ""
    search: str = ""
    sort: str = ""


def discover_categories(activities: Iterable) -> List[str]:
    """
    Return the distinct derived categories, in order of first occurrence.

    Parameters
    ----------
    activities : iterable of Activity
        Activities in catalog order.
    """
    seen = {}
    for activity in activities:
        seen.setdefault(activity.derived_category, None)
    return list(seen)


def collation_key(text: str):
    """
    Sort key for display strings.

    Accents and case are folded first, so ``"\u00c9checs"`` sorts between
    ``"Art"`` and ``"Zumba"``. The accented then raw text only break ties.
    """
    return (unidecode.unidecode(text).casefold(), text.casefold(), text)


def filter_by_category(items: List[Tuple[str, object]], category: str):
    if not category:
        return list(items)
    return [(name, activity) for name, activity in items if activity.derived_category == category]


def filter_by_search(items: List[Tuple[str, object]], search: str):
    term = (search or "").strip().lower()
    if not term:
        return list(items)
    return [
        (name, activity)
        for name, activity in items
        if term in name.lower()
        or term in activity.description.lower()
        or term in activity.schedule.lower()
    ]


def sort_activities(items: List[Tuple[str, object]], sort: str):
    """
    Sort ``(name, activity)`` pairs by name or schedule.

    Any other ``sort`` value returns the pairs in their current order.
    """
    if sort == SORT_BY_NAME:
        return sorted(items, key=lambda item: collation_key(item[0]))
    if sort == SORT_BY_SCHEDULE:
        return sorted(items, key=lambda item: collation_key(item[1].schedule))
    return list(items)


def select_activities(catalog: Mapping[str, object], criteria: FilterCriteria):
    """
    Run the full pipeline over a catalog.

    Parameters
    ----------
    catalog : mapping
        Activity name to :class:`~activities.models.Activity`.
    criteria : FilterCriteria
        Current values of the board controls.

    Returns
    -------
    list of tuple
        ``(name, activity)`` pairs in display order.
    """
    items = list(catalog.items())
    items = filter_by_category(items, criteria.category)
    items = filter_by_search(items, criteria.search)
    return sort_activities(items, criteria.sort)

# activities/rendering.py
"""
View models for the activity board.

Rendering is split in two steps:

1. :func:`render_board` is a pure function from the board state and
   the control values to a :class:`BoardView`. It rebuilds every card
   and option from scratch on each call.
2. :func:`bind_unregister_actions` attaches an unregister form to each
   participant row of a view. It replaces whatever was attached
   before, so running it twice leaves the same bindings.
"""

from dataclasses import dataclass, field
from typing import List, Optional, Tuple, Union

from .forms import UnregisterForm
from .models import BoardState
from .pipeline import FilterCriteria, select_activities

#: Text of the first option of the activity select
SELECT_PLACEHOLDER = "-- Select an activity --"
#: Text of the category option that disables the category filter
ALL_CATEGORIES = "All"
#: Text shown on a card whose participant list is empty
NO_PARTICIPANTS_TEXT = "No participants yet"


@dataclass
class ParticipantRow:
    """
    One participant of an activity card.

    Attributes
    ----------
    activity : str
        Name of the activity the participant is registered to.
    email : str
        Participant email.
    unregister_form : UnregisterForm, optional
        Form posted by the row's unregister button; set by
        :func:`bind_unregister_actions`.
    """

    activity: str
    email: str
    unregister_form: Optional[UnregisterForm] = None


@dataclass
class ActivityCard:
    name: str
    description: str
    schedule: str
    spots_left: Union[int, float]
    participants: List[ParticipantRow] = field(default_factory=list)

    @property
    def has_participants(self) -> bool:
        return bool(self.participants)


@dataclass
class BoardView:
    """
    Everything the board template displays.

    Attributes
    ----------
    cards : list of ActivityCard
        Activity cards in display order.
    activity_options : list of tuple
        ``(value, label)`` pairs of the signup activity select: the
        placeholder, then one option per card, in card order.
    category_options : list of tuple
        ``(value, label)`` pairs of the category select.
    criteria : FilterCriteria
        The control values the view was rendered with.
    load_failed : bool
        Whether the list area shows the load failure text instead of cards.
    """

    cards: List[ActivityCard]
    activity_options: List[Tuple[str, str]]
    category_options: List[Tuple[str, str]]
    criteria: FilterCriteria
    load_failed: bool = False

    def participant_rows(self):
        for card in self.cards:
            yield from card.participants


def category_options(state: BoardState) -> List[Tuple[str, str]]:
    """Return ``All`` followed by the state's categories, in discovery order."""
    return [("", ALL_CATEGORIES)] + [(category, category) for category in state.categories]


def render_board(
    state: BoardState, criteria: FilterCriteria, *, load_failed: bool = False
) -> BoardView:
    """
    Build the board view for the current state and controls.

    Parameters
    ----------
    state : BoardState
        Board state holding the catalog.
    criteria : FilterCriteria
        Values of the category, search and sort controls.
    load_failed : bool
        Set when the catalog load that triggered this render failed.

    Returns
    -------
    BoardView
        A new view; participant rows are not bound yet.
    """
    cards = []
    for name, activity in select_activities(state.catalog, criteria):
        cards.append(
            ActivityCard(
                name=name,
                description=activity.description,
                schedule=activity.schedule,
                spots_left=activity.spots_left,
                participants=[
                    ParticipantRow(activity=name, email=email)
                    for email in activity.participants
                ],
            )
        )

    return BoardView(
        cards=cards,
        activity_options=[("", SELECT_PLACEHOLDER)] + [(card.name, card.name) for card in cards],
        category_options=category_options(state),
        criteria=criteria,
        load_failed=load_failed,
    )


def bind_unregister_actions(view: BoardView) -> BoardView:
    """
    Attach a fresh unregister form to every participant row.

    Parameters
    ----------
    view : BoardView
        The view to bind; modified in place.

    Returns
    -------
    BoardView
        The same view, for chaining.
    """
    for row in view.participant_rows():
        row.unregister_form = UnregisterForm(
            initial={"activity": row.activity, "email": row.email},
            auto_id=False,
        )
    return view

# activities/models.py
"""
In-memory models for the activities application.

This module defines the Activity record as published by the
external activities API, and the BoardState holding the catalog
of one browsing session. Nothing here is stored in a database:
the catalog is replaced wholesale each time it is fetched.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Union
import math

from .pipeline import discover_categories

#: Session key under which the board state is kept
SESSION_KEY = "activity_board"


@dataclass(frozen=True)
class Activity:
    """
    An activity as published by the external API.

    Attributes
    ----------
    name : str
        Unique identifier of the activity, also its display title.
    description : str
        Free text description.
    schedule : str
        Free text schedule, also used as a sort key.
    max_participants : int or float
        Capacity announced by the server (wire name ``max_participants``),
        kept as sent. Always finite.
    participants : tuple of str
        Participant emails, in registration order.
    category : str, optional
        Explicit category. When missing or empty, the category is
        derived from the name (see :attr:`derived_category`).
    """

    name: str
    description: str = ""
    schedule: str = ""
    max_participants: Union[int, float] = 0
    participants: tuple = ()
    category: Optional[str] = None

    @classmethod
    def from_wire(cls, name: str, record: Dict[str, Any]) -> "Activity":
        """
        Build an activity from one entry of ``GET /activities``.

        Parameters
        ----------
        name : str
            The key of the entry.
        record : dict
            The activity record.

        Returns
        -------
        Activity
            The parsed activity.

        Raises
        ------
        ValueError
            If the record is not an object or one of its fields has
            the wrong type.
        """
        if not isinstance(record, dict):
            raise ValueError(f"Activity {name!r} is not an object")

        description = record.get("description") or ""
        schedule = record.get("schedule") or ""
        if not isinstance(description, str) or not isinstance(schedule, str):
            raise ValueError(f"Activity {name!r} has a non-text description or schedule")

        max_participants = record.get("max_participants", 0)
        if isinstance(max_participants, bool) or not isinstance(max_participants, (int, float)):
            raise ValueError(f"Activity {name!r} has an invalid max_participants")
        if isinstance(max_participants, float) and not math.isfinite(max_participants):
            raise ValueError(f"Activity {name!r} has a non-finite max_participants")

        participants = record.get("participants") or []
        if not isinstance(participants, list) or not all(
            isinstance(email, str) for email in participants
        ):
            raise ValueError(f"Activity {name!r} has an invalid participants list")

        category = record.get("category")
        if category is not None and not isinstance(category, str):
            raise ValueError(f"Activity {name!r} has a non-text category")

        return cls(
            name=name,
            description=description,
            schedule=schedule,
            max_participants=max_participants,
            participants=tuple(participants),
            category=category,
        )

    def to_wire(self) -> Dict[str, Any]:
        """Return the record in the API's wire format."""
        record: Dict[str, Any] = {
            "description": self.description,
            "schedule": self.schedule,
            "max_participants": self.max_participants,
            "participants": list(self.participants),
        }
        if self.category is not None:
            record["category"] = self.category
        return record

    @property
    def derived_category(self) -> str:
        """
        Category used by the category filter.

        The explicit category when it is set, otherwise the first
        whitespace-delimited token of the name.
        """
        if self.category:
            return self.category
        tokens = self.name.split()
        return tokens[0] if tokens else ""

    @property
    def spots_left(self) -> Union[int, float]:
        """Capacity minus participant count. Never clamped, may be negative."""
        return self.max_participants - len(self.participants)


def parse_catalog(payload: Any) -> Dict[str, Activity]:
    """
    Parse the body of ``GET /activities`` into a catalog.

    Parameters
    ----------
    payload : Any
        The decoded JSON body.

    Returns
    -------
    dict
        Mapping of activity name to :class:`Activity`, in the
        server's order.

    Raises
    ------
    ValueError
        If the payload is not an object of activity records.
    """
    if not isinstance(payload, dict):
        raise ValueError("Activity catalog is not a JSON object")
    return {name: Activity.from_wire(name, record) for name, record in payload.items()}


@dataclass
class BoardState:
    """
    State of the activity board for one browsing session.

    Created empty, replaced wholesale by the catalog loader, and read
    by the filter pipeline and the renderer. The loader is the only
    writer.

    Attributes
    ----------
    catalog : dict
        Mapping of activity name to :class:`Activity`, as last fetched.
    categories : list of str
        Distinct derived categories, in order of first occurrence.
    """

    catalog: Dict[str, Activity] = field(default_factory=dict)
    categories: List[str] = field(default_factory=list)

    def replace(self, catalog: Dict[str, Activity]) -> None:
        """Swap in a freshly fetched catalog and rediscover its categories."""
        self.catalog = dict(catalog)
        self.categories = discover_categories(self.catalog.values())

    def to_session(self) -> Dict[str, Any]:
        return {
            "catalog": {name: activity.to_wire() for name, activity in self.catalog.items()},
            "categories": list(self.categories),
        }

    @classmethod
    def from_session(cls, data: Optional[Dict[str, Any]]) -> "BoardState":
        if not data:
            return cls()
        return cls(
            catalog=parse_catalog(data.get("catalog") or {}),
            categories=list(data.get("categories") or []),
        )


def get_board_state(session) -> BoardState:
    """
    Return the board state stored in a session, or an empty one.

    Parameters
    ----------
    session : SessionBase
        The Django session of the current request.
    """
    return BoardState.from_session(session.get(SESSION_KEY))


def save_board_state(session, state: BoardState) -> None:
    """Store the board state in the session, replacing the previous one."""
    session[SESSION_KEY] = state.to_session()

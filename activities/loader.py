# activities/loader.py
"""
Catalog loader for the activity board.

Fetches the whole catalog through a gateway and swaps it into the
board state. A failed fetch leaves the previous catalog in place;
there is no retry.
"""

import logging

from .exceptions import CatalogLoadError
from .models import BoardState

logger = logging.getLogger(__name__)

#: Text shown in place of the activity list when loading fails
LOAD_FAILED_TEXT = "Failed to load activities. Please try again later."


def load_catalog(state: BoardState, gateway) -> bool:
    """
    Replace the board catalog with a freshly fetched one.

    Parameters
    ----------
    state : BoardState
        The board state to update in place.
    gateway : ActivityGateway
        Gateway used to fetch the catalog.

    Returns
    -------
    bool
        ``True`` when the catalog was replaced, ``False`` when the
        fetch failed and the previous catalog was kept.
    """
    try:
        catalog = gateway.fetch_activities()
    except CatalogLoadError:
        logger.error("Error fetching activities, keeping %d cached", len(state.catalog))
        return False
    state.replace(catalog)
    logger.info("Loaded %d activities in %d categories", len(state.catalog), len(state.categories))
    return True

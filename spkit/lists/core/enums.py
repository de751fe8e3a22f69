"""Core enumerations.

Key Types:
    - SelectionMode: Which retrieval path a ListItemRequest takes
    - PageSignal: Value a per-page callback may return to control paging
"""

from enum import Enum


class SelectionMode(str, Enum):
    """Mutually exclusive ways of selecting list items.

    ``ALL_ITEMS`` is the default when no selector is supplied.
    """

    BY_ID = "by_id"
    BY_UNIQUE_ID = "by_unique_id"
    BY_QUERY = "by_query"
    ALL_ITEMS = "all_items"

    @property
    def is_paged(self) -> bool:
        """Whether this mode goes through the pagination loop."""
        return self in (SelectionMode.BY_QUERY, SelectionMode.ALL_ITEMS)


class PageSignal(str, Enum):
    """Control value returned from a per-page callback."""

    CONTINUE = "continue"
    STOP = "stop"

"""Base list store abstract class.

Architecture:
    This module defines the ListStore abstract base class that every remote
    list store must implement. It provides:
    - Abstract methods for the two remote operations (get_items, get_item_by_id)
    - Resource cleanup (close) and async context manager support

    A store is the explicit session object for one site: it owns whatever
    connection and credential state it needs, and is passed into every
    retrieval. Nothing in the library keeps a process-wide "current
    connection".

Note:
    Stores perform exactly one remote round trip per call. Transient network
    retry, if any, belongs to the transport a store is built on, never to the
    pagination layer.

See Also:
    - SharePointRESTStore: aiohttp-based implementation
    - CursorPaginator: Drives get_items page by page
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Sequence
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ..models import ItemPage, ListItem, ListRef


class ListStore(ABC):
    """Abstract base class for remote list stores."""

    def __init__(self, name: str) -> None:
        self.name = name

    @abstractmethod
    async def get_items(
        self,
        list_ref: ListRef,
        view_xml: str,
        cursor: str | None = None,
    ) -> ItemPage:
        """Run a view query and return one page of items.

        Args:
            list_ref: List to query
            view_xml: CAML <View> definition
            cursor: Continuation from the previous page, None for the first

        Returns:
            ItemPage with next_cursor set when more pages remain

        Raises:
            RemoteFetchError: Any store-side failure (ThrottlingError when the
                store rejects the query as too expensive)
        """
        pass

    @abstractmethod
    async def get_item_by_id(
        self,
        list_ref: ListRef,
        item_id: int,
        fields: Sequence[str] | None = None,
    ) -> ListItem:
        """Fetch a single item by its integer id."""
        pass

    @abstractmethod
    async def close(self) -> None:
        """Close connections and cleanup resources."""
        pass

    async def __aenter__(self) -> ListStore:
        """Context manager entry."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Context manager exit."""
        await self.close()

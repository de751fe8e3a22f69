"""Facade for list item retrieval.

ListItemsAPI turns a selection request (by id, by unique id, by query, or
all items) into the matching retrieval path and streams the resulting items.

Architecture:
    - By id: a single ``get_item_by_id`` call
    - By unique id: a single GetItems call with a GUID equality query
    - By query / all items: PagedRetriever, which pages through the query and
      falls back to key-range windows when the store throttles

    The store is injected, so one API instance works against exactly one
    site session and tests can pass a fake store.
"""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator, Sequence
from uuid import UUID

from ..core.base import ListStore
from ..core.enums import SelectionMode
from ..models import ListItem, ListItemRequest, ListRef
from ..query import build_unique_id_query
from ..runtime.paging import PageCallback, PagedRetriever, RepartitionPolicy

logger = logging.getLogger(__name__)


class ListItemsAPI:
    """High-level entry point for reading list items.

    Example:
        >>> async with ListItemsAPI(SharePointRESTStore(site_url, access_token=token)) as api:
        ...     async for item in api.get_list_item("Tasks", page_size=1000):
        ...         print(item.id, item.get("Title"))
    """

    def __init__(self, store: ListStore, *, policy: RepartitionPolicy | None = None) -> None:
        """Initialize the API.

        Args:
            store: Session for the site holding the lists
            policy: Fallback policy (default: ID windows of 4999)
        """
        self._store = store
        self._retriever = PagedRetriever(store, policy)

    @property
    def store(self) -> ListStore:
        return self._store

    def get_list_item(
        self,
        list_ref: ListRef | UUID | str,
        *,
        id: int | None = None,
        unique_id: UUID | str | None = None,
        query: str | None = None,
        fields: Sequence[str] | None = None,
        page_size: int | None = None,
        on_page: PageCallback | None = None,
    ) -> AsyncIterator[ListItem]:
        """Retrieve list items.

        Args:
            list_ref: List title, list GUID or ListRef
            id: Item id to retrieve
            unique_id: Item unique id (GUID) to retrieve
            query: CAML <View> query to run
            fields: Fields to load; all fields when None
            page_size: Items per page request (query / all items only)
            on_page: Called with each ItemPage after its items are yielded;
                returning False or PageSignal.STOP ends the retrieval

        Returns:
            Async iterator of ListItem

        Raises:
            pydantic.ValidationError: If more than one selector is given
            MalformedQueryError: If query is not a parseable <View>
            ThrottlingError: If the store throttles and the fallback cannot help
            RemoteFetchError: Any other store failure
        """
        request = ListItemRequest(
            list_ref=ListRef.from_value(list_ref),
            item_id=id,
            unique_id=UUID(str(unique_id)) if unique_id is not None else None,
            query=query,
            fields=list_of(fields),
            page_size=page_size,
        )
        return self.iter_request(request, on_page=on_page)

    async def iter_request(
        self,
        request: ListItemRequest,
        *,
        on_page: PageCallback | None = None,
    ) -> AsyncIterator[ListItem]:
        """Stream the items selected by a ListItemRequest."""
        mode = request.mode
        logger.debug(
            "list_items_request",
            extra={"list": str(request.list_ref), "mode": mode.value},
        )

        if mode == SelectionMode.BY_ID:
            yield await self._store.get_item_by_id(
                request.list_ref, request.item_id, request.fields
            )
            return

        if mode == SelectionMode.BY_UNIQUE_ID:
            view = build_unique_id_query(request.unique_id, request.fields)
            page = await self._store.get_items(request.list_ref, view.to_xml(), None)
            for item in page.items:
                yield item
            return

        async for item in self._retriever.iter_items(
            request.list_ref, request.to_query_spec(), on_page=on_page
        ):
            yield item

    async def fetch_all(
        self,
        list_ref: ListRef | UUID | str,
        **kwargs,
    ) -> list[ListItem]:
        """Collect get_list_item results into a list."""
        return [item async for item in self.get_list_item(list_ref, **kwargs)]

    async def close(self) -> None:
        await self._store.close()

    async def __aenter__(self) -> ListItemsAPI:
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()


def list_of(fields: Sequence[str] | None) -> list[str] | None:
    if fields is None:
        return None
    if isinstance(fields, str):
        return [fields]
    return [str(f) for f in fields]

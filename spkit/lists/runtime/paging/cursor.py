"""Cursor-driven pagination over a single view query."""

from __future__ import annotations

from collections.abc import AsyncIterator
from time import perf_counter

from ...core.base import ListStore
from ...models import ItemPage, ListRef
from ...query import ViewQuery
from .telemetry import log_page_fetched


class CursorPaginator:
    """Fetches a query page by page until the store reports no cursor.

    Exactly one store call is outstanding at a time and each page is yielded
    as soon as it arrives. Store errors propagate unchanged.
    """

    def __init__(self, store: ListStore) -> None:
        self._store = store

    async def fetch(self, list_ref: ListRef, query: ViewQuery, cursor: str | None) -> ItemPage:
        """Single page round trip."""
        return await self._store.get_items(list_ref, query.to_xml(), cursor)

    async def pages(
        self,
        list_ref: ListRef,
        query: ViewQuery,
        *,
        window_index: int | None = None,
    ) -> AsyncIterator[ItemPage]:
        """Yield pages in cursor order, starting from no cursor."""
        cursor: str | None = None
        page_index = 0
        while True:
            start = perf_counter()
            page = await self.fetch(list_ref, query, cursor)
            latency_ms = (perf_counter() - start) * 1000.0

            page = page.model_copy(update={"page_index": page_index, "window_index": window_index})
            log_page_fetched(
                list_name=str(list_ref),
                page_index=page_index,
                items=len(page.items),
                has_more=page.next_cursor is not None,
                window_index=window_index,
                latency_ms=latency_ms,
            )
            yield page

            if page.next_cursor is None:
                break
            cursor = page.next_cursor
            page_index += 1

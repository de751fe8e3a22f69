"""Paged retrieval with throttling fallback.

The PagedRetriever ties the paging components together for one request:
build the query, page through it, and hand over to the RangeRepartitioner
when the store throttles. Items reach the caller through a ResultSink so the
per-page callback always runs between fetches.
"""

from __future__ import annotations

from collections.abc import AsyncIterator
from contextlib import aclosing

from ...core.base import ListStore
from ...core.exceptions import RemoteFetchError
from ...models import ListItem, ListRef, QuerySpec
from ...query import build_view_query
from .cursor import CursorPaginator
from .definitions import RepartitionPolicy
from .repartition import RangeRepartitioner
from .sink import PageCallback, ResultSink
from .telemetry import log_paging_error, log_paging_stopped, log_throttled
from .throttle import is_throttled


class PagedRetriever:
    """Streams every item matched by a QuerySpec."""

    def __init__(self, store: ListStore, policy: RepartitionPolicy | None = None) -> None:
        self._paginator = CursorPaginator(store)
        self._repartitioner = RangeRepartitioner(self._paginator, policy)

    async def iter_items(
        self,
        list_ref: ListRef,
        spec: QuerySpec,
        *,
        on_page: PageCallback | None = None,
    ) -> AsyncIterator[ListItem]:
        """Yield items page by page.

        Raises:
            MalformedQueryError: If spec.view_xml cannot be parsed
            ThrottlingError: If the store throttles and the fallback cannot run
            RemoteFetchError: Any other store failure
        """
        query = build_view_query(spec, key_field=self._repartitioner.policy.key_field)
        sink = ResultSink(on_page)
        last_item: ListItem | None = None
        throttled: RemoteFetchError | None = None

        async with aclosing(self._paginator.pages(list_ref, query)) as pages:
            while True:
                try:
                    page = await anext(pages)
                except StopAsyncIteration:
                    break
                except RemoteFetchError as e:
                    if not is_throttled(e):
                        _log_error(list_ref, e)
                        raise
                    throttled = e
                    break

                async for item in sink.deliver(page):
                    yield item
                if page.items:
                    last_item = page.items[-1]
                if sink.stopped:
                    log_paging_stopped(list_name=str(list_ref), pages=sink.pages, items=sink.items)
                    return

        if throttled is None:
            return

        resumed = sink.pages > 0
        can_fallback = self._repartitioner.can_handle(query, resumed=resumed)
        after_key: int | None = None
        if can_fallback and last_item is not None:
            try:
                after_key = self._repartitioner.policy.key_of(last_item)
            except (KeyError, TypeError, ValueError):
                # Resume point unknown, so delivered items could repeat.
                can_fallback = False
        log_throttled(
            list_name=str(list_ref),
            error_code=throttled.server_error_code,
            fallback=can_fallback,
        )
        if not can_fallback:
            raise throttled

        fallback = self._repartitioner.pages(
            list_ref,
            query,
            error=throttled,
            page_size=spec.effective_page_size,
            after_key=after_key,
        )
        async with aclosing(fallback) as window_pages:
            try:
                async for page in window_pages:
                    async for item in sink.deliver(page):
                        yield item
                    if sink.stopped:
                        log_paging_stopped(
                            list_name=str(list_ref), pages=sink.pages, items=sink.items
                        )
                        return
            except RemoteFetchError as e:
                _log_error(list_ref, e)
                raise


def _log_error(list_ref: ListRef, error: RemoteFetchError) -> None:
    log_paging_error(
        list_name=str(list_ref),
        error_type=type(error).__name__,
        error_message=str(error),
    )

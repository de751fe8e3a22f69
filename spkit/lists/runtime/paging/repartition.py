"""Key-range repartitioning fallback for throttled queries.

When the store rejects a query as too expensive, the same result set can
still be read as a sequence of cheap queries, each bounded to a window of the
indexed key. The repartitioner:

1. Probes the highest key currently in the list (one item, key only,
   ordered descending).
2. Walks fixed-span windows ``(i*span, (i+1)*span]`` from zero until the
   windows cover the highest key.
3. Runs each window query through the CursorPaginator to completion.

Windows run strictly one after another; the point of the fallback is to
lower server load, so there is no fan-out.
"""

from __future__ import annotations

from collections.abc import AsyncIterator
from contextlib import aclosing

from ...core.exceptions import BoundsComputationError, RemoteFetchError
from ...models import ItemPage, ListRef
from ...query import ViewQuery, build_max_key_query, build_window_query
from .cursor import CursorPaginator
from .definitions import RepartitionPolicy
from .telemetry import log_bounds_failed, log_window_completed, log_window_plan
from .windows import WindowPlanner


class RangeRepartitioner:
    """Re-reads a throttled query window by window over the indexed key."""

    def __init__(self, paginator: CursorPaginator, policy: RepartitionPolicy | None = None) -> None:
        self._paginator = paginator
        self._policy = policy or RepartitionPolicy()

    @property
    def policy(self) -> RepartitionPolicy:
        return self._policy

    def can_handle(self, query: ViewQuery, *, resumed: bool = False) -> bool:
        """Whether the fallback may take over the given query.

        A caller filter makes synthesized windows unsafe. Resuming after
        pages were already delivered additionally needs key order, which only
        holds when the view has no explicit ordering.
        """
        if not self._policy.enabled or query.has_filter:
            return False
        if resumed and query.has_order_by:
            return False
        return True

    async def compute_upper_bound(self, list_ref: ListRef) -> int:
        """Highest key in the list.

        Raises:
            BoundsComputationError: If the probe does not return exactly one
                item carrying an integer key
        """
        probe = build_max_key_query(self._policy.key_field)
        page = await self._paginator.fetch(list_ref, probe, None)
        if len(page.items) != 1:
            raise BoundsComputationError(
                f"Max-key probe returned {len(page.items)} items, expected 1",
                result_count=len(page.items),
            )
        try:
            return self._policy.key_of(page.items[0])
        except (KeyError, TypeError, ValueError) as e:
            raise BoundsComputationError(
                f"Max-key probe item has no usable {self._policy.key_field!r} value",
                result_count=1,
            ) from e

    async def pages(
        self,
        list_ref: ListRef,
        base_query: ViewQuery,
        *,
        error: RemoteFetchError,
        page_size: int | None = None,
        after_key: int | None = None,
    ) -> AsyncIterator[ItemPage]:
        """Yield every page of every window in ascending key order.

        Args:
            list_ref: List being read
            base_query: The query that was throttled
            error: The triggering throttling error, re-raised if no upper
                bound can be determined
            page_size: Caller page size; also the window span when positive
            after_key: Skip keys up to and including this one (already delivered)
        """
        try:
            max_key = await self.compute_upper_bound(list_ref)
        except BoundsComputationError as bounds_error:
            log_bounds_failed(list_name=str(list_ref), result_count=bounds_error.result_count)
            raise error from bounds_error

        planner = WindowPlanner(self._policy.window_span(page_size))
        log_window_plan(
            list_name=str(list_ref),
            max_key=max_key,
            window_span=planner.span,
            total_windows=planner.count(max_key),
        )

        for window in planner.iter_windows(max_key):
            if after_key is not None and window.high <= after_key:
                continue
            low = window.low if after_key is None else max(window.low, after_key)
            query = build_window_query(
                base_query,
                low=low,
                high=window.high,
                page_size=page_size,
                key_field=self._policy.key_field,
            )

            pages = items = 0
            async with aclosing(
                self._paginator.pages(list_ref, query, window_index=window.index)
            ) as window_pages:
                async for page in window_pages:
                    pages += 1
                    items += len(page.items)
                    yield page

            log_window_completed(
                list_name=str(list_ref),
                window_index=window.index,
                low=low,
                high=window.high,
                pages=pages,
                items=items,
            )

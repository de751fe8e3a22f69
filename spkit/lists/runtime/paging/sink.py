"""Result sink forwarding pages to the caller."""

from __future__ import annotations

import inspect
from collections.abc import AsyncIterator, Callable
from typing import Any

from ...core.enums import PageSignal
from ...models import ItemPage, ListItem

# May return an awaitable; False or PageSignal.STOP ends the retrieval.
PageCallback = Callable[[ItemPage], Any]


class ResultSink:
    """Streams page items to the consumer and runs the per-page callback.

    The callback runs after the page's items have been handed to the
    consumer and before the next page is fetched. Returning ``False`` or
    ``PageSignal.STOP`` from it ends the retrieval cleanly.
    """

    def __init__(self, on_page: PageCallback | None = None) -> None:
        self._on_page = on_page
        self._stopped = False
        self.pages = 0
        self.items = 0

    @property
    def stopped(self) -> bool:
        return self._stopped

    async def deliver(self, page: ItemPage) -> AsyncIterator[ListItem]:
        """Yield the page's items in order, then invoke the callback."""
        for item in page.items:
            yield item
            self.items += 1
        self.pages += 1

        if self._on_page is None:
            return
        result = self._on_page(page)
        if inspect.isawaitable(result):
            result = await result
        if result is False or result == PageSignal.STOP:
            self._stopped = True

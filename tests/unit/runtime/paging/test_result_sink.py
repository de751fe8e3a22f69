"""Unit tests for ResultSink delivery and callbacks."""

from __future__ import annotations

import pytest

from spkit.lists.core import PageSignal
from spkit.lists.models import ItemPage
from spkit.lists.runtime.paging import ResultSink


async def _drain(sink: ResultSink, page: ItemPage) -> list[int]:
    return [item.id async for item in sink.deliver(page)]


class TestResultSink:
    """Test ResultSink functionality."""

    @pytest.mark.asyncio
    async def test_items_then_callback(self, items_factory):
        events: list[object] = []
        sink = ResultSink(lambda page: events.append(("page", page.page_index)))
        page = ItemPage(items=items_factory([1, 2, 3]), page_index=0)

        async for item in sink.deliver(page):
            events.append(item.id)

        assert events == [1, 2, 3, ("page", 0)]
        assert sink.pages == 1
        assert sink.items == 3
        assert not sink.stopped

    @pytest.mark.asyncio
    async def test_no_callback(self, items_factory):
        sink = ResultSink()
        assert await _drain(sink, ItemPage(items=items_factory([5, 6]))) == [5, 6]
        assert not sink.stopped

    @pytest.mark.asyncio
    async def test_async_callback_awaited(self, items_factory):
        seen: list[int] = []

        async def on_page(page: ItemPage) -> None:
            seen.append(len(page.items))

        sink = ResultSink(on_page)
        await _drain(sink, ItemPage(items=items_factory([1, 2])))

        assert seen == [2]

    @pytest.mark.asyncio
    async def test_false_stops(self, items_factory):
        sink = ResultSink(lambda page: False)
        await _drain(sink, ItemPage(items=items_factory([1])))
        assert sink.stopped

    @pytest.mark.asyncio
    async def test_stop_signal_stops(self, items_factory):
        async def on_page(page: ItemPage) -> PageSignal:
            return PageSignal.STOP

        sink = ResultSink(on_page)
        await _drain(sink, ItemPage(items=items_factory([1])))
        assert sink.stopped

    @pytest.mark.asyncio
    async def test_none_and_continue_keep_going(self, items_factory):
        for result in (None, True, PageSignal.CONTINUE, 0):
            sink = ResultSink(lambda page, result=result: result)
            await _drain(sink, ItemPage(items=items_factory([1])))
            assert not sink.stopped

    @pytest.mark.asyncio
    async def test_empty_page_still_calls_back(self):
        calls: list[ItemPage] = []
        sink = ResultSink(calls.append)
        assert await _drain(sink, ItemPage(items=[])) == []
        assert len(calls) == 1

    @pytest.mark.asyncio
    async def test_callback_error_propagates(self, items_factory):
        def on_page(page: ItemPage) -> None:
            raise RuntimeError("callback failed")

        sink = ResultSink(on_page)
        with pytest.raises(RuntimeError, match="callback failed"):
            await _drain(sink, ItemPage(items=items_factory([1])))

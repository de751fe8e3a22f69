"""Throttle-resilient pagination layer.

Architecture:
    The paging layer consists of:
    - definitions.py: RepartitionPolicy (key field, default window span)
    - throttle.py: Classifies store errors as query throttling
    - cursor.py: CursorPaginator, one page per store round trip
    - windows.py: Window and WindowPlanner for the key-range fallback
    - repartition.py: RangeRepartitioner, the throttling fallback
    - sink.py: ResultSink, ordered delivery plus the per-page callback
    - retrieval.py: PagedRetriever, which wires the above together
    - telemetry.py: Structured logging

Usage:
    >>> retriever = PagedRetriever(store)
    >>> async for item in retriever.iter_items(ListRef(title="Tasks"), QuerySpec(page_size=1000)):
    ...     print(item.id)
"""

from __future__ import annotations

from .cursor import CursorPaginator
from .definitions import DEFAULT_WINDOW_SPAN, RepartitionPolicy
from .repartition import RangeRepartitioner
from .retrieval import PagedRetriever
from .sink import PageCallback, ResultSink
from .throttle import SP_QUERY_THROTTLED, ThrottleSignature, is_throttled, matches_signature
from .windows import Window, WindowPlanner

__all__ = [
    "CursorPaginator",
    "DEFAULT_WINDOW_SPAN",
    "PageCallback",
    "PagedRetriever",
    "RangeRepartitioner",
    "RepartitionPolicy",
    "ResultSink",
    "SP_QUERY_THROTTLED",
    "ThrottleSignature",
    "Window",
    "WindowPlanner",
    "is_throttled",
    "matches_signature",
]

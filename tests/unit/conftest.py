"""Shared fixtures for unit tests.

FakeListStore is an in-process ListStore that evaluates the small subset of
CAML the library emits (And/Or/Gt/Geq/Lt/Leq/Eq, OrderBy, RowLimit) and can
be told to throttle or fail specific calls.
"""

from __future__ import annotations

import xml.etree.ElementTree as ET
from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass
from uuid import NAMESPACE_URL, UUID, uuid5

import pytest

from spkit.lists.core import ListStore, RemoteFetchError, ThrottlingError
from spkit.lists.models import ItemPage, ListItem, ListRef
from spkit.lists.runtime.paging import SP_QUERY_THROTTLED


def make_unique_id(item_id: int) -> UUID:
    return uuid5(NAMESPACE_URL, f"item/{item_id}")


def make_items(ids: Iterable[int]) -> list[ListItem]:
    return [
        ListItem(
            id=i,
            unique_id=make_unique_id(i),
            field_values={"ID": i, "Title": f"Item {i}", "Status": "Open" if i % 2 else "Closed"},
        )
        for i in ids
    ]


def make_throttling_error() -> ThrottlingError:
    return ThrottlingError(
        "The attempted operation is prohibited because it exceeds the list view threshold.",
        status_code=500,
        server_error_code=SP_QUERY_THROTTLED.error_code,
        server_error_type_name=SP_QUERY_THROTTLED.type_name,
    )


@dataclass
class FakeCall:
    """One get_items call as seen by the fake store."""

    index: int
    view_xml: str
    cursor: str | None
    has_where: bool
    row_limit: int | None
    descending: bool

    @property
    def is_probe(self) -> bool:
        return self.descending and self.row_limit == 1

    @property
    def key_bounds(self) -> tuple[int, int] | None:
        """(low, high) of a Gt/Leq window predicate, if present."""
        root = ET.fromstring(self.view_xml)
        gt = root.find(".//Where/And/Gt/Value")
        leq = root.find(".//Where/And/Leq/Value")
        if gt is None or leq is None:
            return None
        return int(gt.text), int(leq.text)


class FakeListStore(ListStore):
    """In-memory list store.

    Args:
        items: Items in the list
        throttle: Predicate deciding whether a call is throttled
        errors: Exceptions to raise, keyed by zero-based call index
        full_page_cursor: Return a cursor whenever a paged page is full, even
            if nothing follows (the REST adapter rule), instead of only when
            more items remain
    """

    def __init__(
        self,
        items: Sequence[ListItem],
        *,
        throttle: Callable[[FakeCall], bool] | None = None,
        errors: dict[int, Exception] | None = None,
        full_page_cursor: bool = False,
    ) -> None:
        super().__init__("fake")
        self.items = sorted(items, key=lambda item: item.id)
        self.throttle = throttle
        self.errors = errors or {}
        self.full_page_cursor = full_page_cursor
        self.calls: list[FakeCall] = []
        self.by_id_calls: list[tuple[int, list[str] | None]] = []
        self.closed = False

    async def get_items(self, list_ref: ListRef, view_xml: str, cursor: str | None = None) -> ItemPage:
        root = ET.fromstring(view_xml)
        where = root.find(".//Where")
        order = root.find(".//OrderBy/FieldRef")
        row_limit_el = root.find(".//RowLimit")
        row_limit = int(row_limit_el.text) if row_limit_el is not None and row_limit_el.text else None
        descending = order is not None and order.get("Ascending", "TRUE").upper() == "FALSE"

        call = FakeCall(
            index=len(self.calls),
            view_xml=view_xml,
            cursor=cursor,
            has_where=where is not None,
            row_limit=row_limit,
            descending=descending,
        )
        self.calls.append(call)

        if call.index in self.errors:
            raise self.errors[call.index]
        if self.throttle is not None and self.throttle(call):
            raise make_throttling_error()

        matched = [item for item in self.items if where is None or _matches(where[0], item)]
        if descending:
            matched = list(reversed(matched))
        if cursor is not None:
            after = int(cursor.rsplit("=", 1)[1])
            matched = [item for item in matched if item.id > after]

        if row_limit is None:
            return ItemPage(items=matched)

        page = matched[:row_limit]
        paged = row_limit_el.get("Paged", "").upper() == "TRUE"
        next_cursor = None
        has_more = len(page) >= row_limit if self.full_page_cursor else len(matched) > row_limit
        if paged and page and has_more:
            next_cursor = f"Paged=TRUE&p_ID={page[-1].id}"
        return ItemPage(items=page, next_cursor=next_cursor)

    async def get_item_by_id(
        self, list_ref: ListRef, item_id: int, fields: Sequence[str] | None = None
    ) -> ListItem:
        self.by_id_calls.append((item_id, list(fields) if fields is not None else None))
        for item in self.items:
            if item.id == item_id:
                if fields is None:
                    return item
                values = {k: v for k, v in item.field_values.items() if k in fields}
                return item.model_copy(update={"field_values": values})
        raise RemoteFetchError(
            "Item does not exist. It may have been deleted by another user.",
            status_code=404,
            server_error_code=-2147024809,
            server_error_type_name="System.ArgumentException",
        )

    async def close(self) -> None:
        self.closed = True


def _matches(condition: ET.Element, item: ListItem) -> bool:
    if condition.tag in ("And", "Or"):
        results = [_matches(child, item) for child in condition]
        return all(results) if condition.tag == "And" else any(results)

    name = condition.find("FieldRef").get("Name")
    value = condition.find("Value")
    raw = value.text
    if name in ("ID", "Id"):
        actual, expected = item.id, int(raw)
    elif value.get("Type") in ("Counter", "Integer", "Number"):
        actual, expected = int(item.field_values[name]), int(raw)
    elif name == "GUID":
        actual, expected = str(item.unique_id).lower(), raw.lower()
    else:
        actual, expected = item.field_values.get(name), raw

    if condition.tag == "Eq":
        return actual == expected
    if condition.tag == "Gt":
        return actual > expected
    if condition.tag == "Geq":
        return actual >= expected
    if condition.tag == "Lt":
        return actual < expected
    if condition.tag == "Leq":
        return actual <= expected
    raise AssertionError(f"Unsupported CAML operator in fake store: {condition.tag}")


def throttle_unbounded(call: FakeCall) -> bool:
    """Throttle every query that is neither filtered nor the max-key probe."""
    return not call.has_where and not call.is_probe


@pytest.fixture
def store_factory() -> type[FakeListStore]:
    return FakeListStore


@pytest.fixture
def items_factory() -> Callable[[Iterable[int]], list[ListItem]]:
    return make_items


@pytest.fixture
def throttling_error_factory() -> Callable[[], ThrottlingError]:
    return make_throttling_error


@pytest.fixture
def throttle_unbounded_rule() -> Callable[[FakeCall], bool]:
    return throttle_unbounded


@pytest.fixture
def tasks() -> ListRef:
    return ListRef(title="Tasks")

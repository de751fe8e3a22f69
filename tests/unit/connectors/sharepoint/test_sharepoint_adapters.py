"""Unit tests for SharePoint REST response adapters and error mapping."""

from __future__ import annotations

from uuid import UUID

import pytest

from spkit.lists.connectors.sharepoint.rest import (
    ItemsPageAdapter,
    ListItemAdapter,
    paging_info,
    parse_error_body,
    sharepoint_error,
)
from spkit.lists.connectors.sharepoint.rest.adapters import to_list_item
from spkit.lists.core import ListDataError, RemoteFetchError, ThrottlingError

GUID = "8f1c4a52-6b3e-4d8a-9c1e-2b7f0e3d5a61"

THROTTLED_BODY = {
    "odata.error": {
        "code": "-2147024860, Microsoft.SharePoint.SPQueryThrottledException",
        "message": {
            "lang": "en-US",
            "value": "The attempted operation is prohibited because it exceeds the list view threshold.",
        },
    }
}


def _rows(ids):
    return [{"Id": i, "ID": i, "GUID": GUID, "Title": f"Item {i}"} for i in ids]


class TestToListItem:
    """Test item payload conversion."""

    def test_basic_row(self):
        item = to_list_item({"Id": 4, "GUID": GUID, "Title": "Fix roof", "odata.etag": '"2"'})

        assert item.id == 4
        assert item.unique_id == UUID(GUID)
        assert item["Title"] == "Fix roof"
        assert "odata.etag" not in item.field_values

    def test_upper_case_id_and_unique_id(self):
        item = to_list_item({"ID": "12", "UniqueId": GUID})
        assert item.id == 12
        assert item.unique_id == UUID(GUID)

    def test_missing_unique_id(self):
        assert to_list_item({"Id": 1}).unique_id is None

    def test_missing_id(self):
        with pytest.raises(ListDataError):
            to_list_item({"Title": "no id"})

    def test_non_dict(self):
        with pytest.raises(ListDataError):
            to_list_item(["Id", 1])


class TestItemsPageAdapter:
    """Test GetItems page parsing and cursor derivation."""

    def test_full_paged_page_has_cursor(self):
        page = ItemsPageAdapter().parse({"value": _rows([1, 2, 3])}, {"row_limit": 3, "paged": True})

        assert [item.id for item in page.items] == [1, 2, 3]
        assert page.next_cursor == "Paged=TRUE&p_ID=3"

    def test_short_page_ends(self):
        page = ItemsPageAdapter().parse({"value": _rows([1, 2])}, {"row_limit": 3, "paged": True})
        assert page.next_cursor is None
        assert page.is_last

    def test_unpaged_row_limit_ends(self):
        page = ItemsPageAdapter().parse({"value": _rows([9])}, {"row_limit": 1, "paged": False})
        assert page.next_cursor is None

    def test_no_row_limit_ends(self):
        page = ItemsPageAdapter().parse({"value": _rows(range(1, 6))}, {})
        assert page.next_cursor is None
        assert len(page) == 5

    def test_empty_page(self):
        page = ItemsPageAdapter().parse({"value": []}, {"row_limit": 10, "paged": True})
        assert page.items == []
        assert page.next_cursor is None

    def test_invalid_payload(self):
        with pytest.raises(ListDataError):
            ItemsPageAdapter().parse([], {})
        with pytest.raises(ListDataError):
            ItemsPageAdapter().parse({"value": {"Id": 1}}, {})


class TestSortedViewCursor:
    """Test cursors for views sorted on a non-ID field."""

    def test_cursor_carries_sort_field_position(self):
        page = ItemsPageAdapter().parse(
            {"value": _rows([4, 2, 9])}, {"row_limit": 3, "paged": True, "order_by": "Title"}
        )
        assert page.next_cursor == "Paged=TRUE&p_Title=Item%209&p_ID=9"

    def test_id_sort_uses_plain_cursor(self):
        for field in ("ID", "Id"):
            page = ItemsPageAdapter().parse(
                {"value": _rows([1, 2])}, {"row_limit": 2, "paged": True, "order_by": field}
            )
            assert page.next_cursor == "Paged=TRUE&p_ID=2"

    def test_sort_value_is_url_encoded(self):
        item = to_list_item({"Id": 12, "Title": "R&D / Q1=done"})
        assert paging_info(item, "Title") == "Paged=TRUE&p_Title=R%26D%20%2F%20Q1%3Ddone&p_ID=12"

    def test_missing_sort_value_is_empty(self):
        item = to_list_item({"Id": 3})
        assert paging_info(item, "Modified") == "Paged=TRUE&p_Modified=&p_ID=3"


def test_list_item_adapter():
    item = ListItemAdapter().parse({"Id": 5, "Title": "x"}, {})
    assert item.id == 5


class TestErrorMapping:
    """Test SharePoint error body parsing."""

    def test_parse_throttled_body(self):
        code, type_name, message = parse_error_body(THROTTLED_BODY)

        assert code == -2147024860
        assert type_name == "Microsoft.SharePoint.SPQueryThrottledException"
        assert message.startswith("The attempted operation is prohibited")

    def test_parse_verbose_error_key(self):
        body = {"error": {"code": "-2130575338, Microsoft.SharePoint.SPException", "message": "Bad"}}
        assert parse_error_body(body) == (
            -2130575338,
            "Microsoft.SharePoint.SPException",
            "Bad",
        )

    def test_parse_text_body(self):
        assert parse_error_body("Service Unavailable") == (None, None, "Service Unavailable")
        assert parse_error_body(None) == (None, None, "")

    def test_parse_non_numeric_code(self):
        body = {"odata.error": {"code": "Unauthorized", "message": {"value": "Access denied"}}}
        code, type_name, message = parse_error_body(body)
        assert code is None
        assert message == "Access denied"

    def test_throttled_body_maps_to_throttling_error(self):
        error = sharepoint_error(500, THROTTLED_BODY)

        assert isinstance(error, ThrottlingError)
        assert error.status_code == 500
        assert error.server_error_code == -2147024860
        assert "list view threshold" in str(error)

    def test_other_error_maps_to_remote_fetch_error(self):
        body = {"odata.error": {"code": "-2147024809, System.ArgumentException", "message": {"value": "Item does not exist"}}}
        error = sharepoint_error(404, body)

        assert type(error) is RemoteFetchError
        assert error.server_error_type_name == "System.ArgumentException"

    def test_same_code_other_type_is_not_throttling(self):
        body = {"odata.error": {"code": "-2147024860, System.Exception", "message": {"value": "x"}}}
        assert not isinstance(sharepoint_error(500, body), ThrottlingError)

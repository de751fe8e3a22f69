"""Response adapters for SharePoint REST list endpoints.

Payloads are JSON light with ``odata=nometadata``:

- GetItems: ``{"value": [{"Id": 1, "GUID": "...", "Title": "..."}, ...]}``
- items(id): ``{"Id": 1, "GUID": "...", "Title": "..."}``
- Errors: ``{"odata.error": {"code": "-2147024860, Microsoft.SharePoint.SPQueryThrottledException",
  "message": {"lang": "en-US", "value": "..."}}}``
"""

from __future__ import annotations

from typing import Any
from urllib.parse import quote
from uuid import UUID

from ....core.exceptions import ListDataError, RemoteFetchError, ThrottlingError
from ....models import ItemPage, ListItem
from ....runtime.paging.throttle import matches_signature
from ....runtime.rest import ResponseAdapter
from ..config import (
    ID_KEYS,
    PAGING_INFO_TEMPLATE,
    SORTED_PAGING_INFO_TEMPLATE,
    UNIQUE_ID_KEYS,
)


def _first(row: dict[str, Any], keys: tuple[str, ...]) -> Any:
    for key in keys:
        if row.get(key) is not None:
            return row[key]
    return None


def to_list_item(row: Any) -> ListItem:
    """Convert one item payload into a ListItem."""
    if not isinstance(row, dict):
        raise ListDataError(f"Invalid item format: expected dict, got {type(row)}")

    item_id = _first(row, ID_KEYS)
    if item_id is None:
        raise ListDataError("Item payload has no Id field")

    unique_id = _first(row, UNIQUE_ID_KEYS)
    field_values = {
        key: value
        for key, value in row.items()
        if not key.startswith("odata.") and key != "__metadata"
    }
    return ListItem(
        id=int(item_id),
        unique_id=UUID(str(unique_id)) if unique_id is not None else None,
        field_values=field_values,
    )


def paging_info(last: ListItem, sort_field: str | None = None) -> str:
    """PagingInfo positioned after ``last`` in a view sorted on ``sort_field``."""
    if sort_field is None or sort_field in ID_KEYS:
        return PAGING_INFO_TEMPLATE.format(last_id=last.id)
    value = last.get(sort_field)
    return SORTED_PAGING_INFO_TEMPLATE.format(
        field=sort_field,
        value="" if value is None else quote(str(value), safe=""),
        last_id=last.id,
    )


class ItemsPageAdapter(ResponseAdapter):
    """Adapter for GetItems responses.

    GetItems does not return a continuation itself. A page that is full
    relative to the view's row limit gets a ``Paged=TRUE&p_ID=<last id>``
    cursor, which also carries the last value of a non-ID sort field; a
    short page, or a view without a row limit, ends pagination.
    """

    def parse(self, response: Any, params: dict[str, Any]) -> ItemPage:
        if not isinstance(response, dict):
            raise ListDataError(f"Invalid GetItems response: expected dict, got {type(response)}")
        rows = response.get("value", [])
        if not isinstance(rows, list):
            raise ListDataError("Invalid GetItems response: 'value' is not a list")

        items = [to_list_item(row) for row in rows]

        row_limit = params.get("row_limit")
        next_cursor = None
        if params.get("paged") and row_limit and items and len(items) >= row_limit:
            next_cursor = paging_info(items[-1], params.get("order_by"))
        return ItemPage(items=items, next_cursor=next_cursor)


class ListItemAdapter(ResponseAdapter):
    """Adapter for single item responses."""

    def parse(self, response: Any, params: dict[str, Any]) -> ListItem:
        return to_list_item(response)


def parse_error_body(body: Any) -> tuple[int | None, str | None, str]:
    """Extract (error code, exception type name, message) from an error body."""
    if not isinstance(body, dict):
        return None, None, str(body) if body else ""

    error = body.get("odata.error") or body.get("error")
    if not isinstance(error, dict):
        return None, None, ""

    code: int | None = None
    type_name: str | None = None
    raw_code = str(error.get("code", ""))
    if raw_code:
        number, _, name = raw_code.partition(",")
        try:
            code = int(number.strip())
        except ValueError:
            code = None
        type_name = name.strip() or None

    message = error.get("message", "")
    if isinstance(message, dict):
        message = message.get("value", "")
    return code, type_name, str(message)


def sharepoint_error(status: int, body: Any) -> RemoteFetchError:
    """Error factory used by the HTTP client for SharePoint responses."""
    code, type_name, message = parse_error_body(body)
    text = f"SharePoint error {status}: {message}" if message else f"SharePoint error {status}"
    error_cls = ThrottlingError if matches_signature(code, type_name) else RemoteFetchError
    return error_cls(
        text,
        status_code=status,
        server_error_code=code,
        server_error_type_name=type_name,
    )

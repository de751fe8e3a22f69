"""SharePoint REST endpoint specs."""

from __future__ import annotations

from typing import Any

from ....runtime.rest import RestEndpointSpec
from ..config import API_PREFIX


def _items_path(params: dict[str, Any]) -> str:
    return f"{API_PREFIX}/{params['list_ref'].api_path()}/GetItems"


def _items_body(params: dict[str, Any]) -> dict[str, Any]:
    query: dict[str, Any] = {"ViewXml": params["view_xml"]}
    cursor = params.get("cursor")
    if cursor is not None:
        query["ListItemCollectionPosition"] = {"PagingInfo": cursor}
    return {"query": query}


def _item_path(params: dict[str, Any]) -> str:
    return f"{API_PREFIX}/{params['list_ref'].api_path()}/items({int(params['item_id'])})"


def _item_query(params: dict[str, Any]) -> dict[str, Any] | None:
    fields = params.get("fields")
    if not fields:
        return None
    selected = list(fields)
    # The item id is needed to build a ListItem.
    if not any(key in selected for key in ("Id", "ID")):
        selected.insert(0, "Id")
    return {"$select": ",".join(selected)}


GET_ITEMS = RestEndpointSpec(
    id="get_items",
    method="POST",
    build_path=_items_path,
    build_body=_items_body,
)

GET_ITEM_BY_ID = RestEndpointSpec(
    id="get_item_by_id",
    method="GET",
    build_path=_item_path,
    build_query=_item_query,
)

"""SharePoint REST list store.

This store talks to the SharePoint REST API of a single site. It is the
explicit session object for that site: it owns the HTTP session and the
access token it was given, and nothing else in the library keeps connection
state.

Architecture:
    Endpoint specs and response adapters are executed through RestRunner,
    one HTTP request per store call. Error responses are mapped by
    ``sharepoint_error`` so throttled queries surface as ThrottlingError.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from ....core.base import ListStore
from ....models import ItemPage, ListItem, ListRef
from ....query import ViewQuery
from ....runtime.rest import RestRunner
from ....utils.http import HTTPClient
from ..config import DEFAULT_TIMEOUT, default_headers
from .adapters import ItemsPageAdapter, ListItemAdapter, sharepoint_error
from .endpoints import GET_ITEM_BY_ID, GET_ITEMS


class SharePointRESTStore(ListStore):
    """List store backed by the SharePoint REST API.

    Example:
        >>> async with SharePointRESTStore(
        ...     "https://contoso.sharepoint.com/sites/team", access_token=token
        ... ) as store:
        ...     page = await store.get_items(ListRef(title="Tasks"), view_xml)
    """

    def __init__(
        self,
        site_url: str,
        *,
        access_token: str | None = None,
        headers: dict[str, str] | None = None,
        timeout: float = DEFAULT_TIMEOUT,
        http: HTTPClient | None = None,
    ) -> None:
        """Initialize the store.

        Args:
            site_url: Absolute URL of the site (web) holding the lists
            access_token: Pre-acquired bearer token; token acquisition is the
                caller's responsibility
            headers: Extra headers, e.g. cookies for other auth schemes
            timeout: Total request timeout in seconds
            http: Preconfigured HTTPClient, mainly for tests
        """
        super().__init__("sharepoint")
        self.site_url = site_url.rstrip("/")
        self._http = http or HTTPClient(
            base_url=self.site_url,
            timeout=timeout,
            headers={**default_headers(access_token), **(headers or {})},
            error_factory=sharepoint_error,
        )
        self._runner = RestRunner(self._http)

    async def get_items(
        self,
        list_ref: ListRef,
        view_xml: str,
        cursor: str | None = None,
    ) -> ItemPage:
        view = ViewQuery.parse(view_xml)
        params: dict[str, Any] = {
            "list_ref": list_ref,
            "view_xml": view_xml,
            "cursor": cursor,
            "row_limit": view.row_limit,
            "paged": view.row_limit_paged,
            "order_by": view.order_by_field,
        }
        return await self._runner.run(spec=GET_ITEMS, adapter=ItemsPageAdapter(), params=params)

    async def get_item_by_id(
        self,
        list_ref: ListRef,
        item_id: int,
        fields: Sequence[str] | None = None,
    ) -> ListItem:
        params: dict[str, Any] = {
            "list_ref": list_ref,
            "item_id": item_id,
            "fields": list(fields) if fields is not None else None,
        }
        return await self._runner.run(
            spec=GET_ITEM_BY_ID, adapter=ListItemAdapter(), params=params
        )

    async def close(self) -> None:
        await self._http.close()

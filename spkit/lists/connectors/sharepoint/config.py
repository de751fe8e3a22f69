"""Shared SharePoint REST constants.

This module centralizes paths and headers used by the REST store so the
store itself can stay small and focused.
"""

from __future__ import annotations

# Site-relative prefix for all web-scoped REST calls.
API_PREFIX = "_api/web"

# JSON light without metadata keeps item payloads flat.
ODATA_ACCEPT = "application/json;odata=nometadata"
ODATA_CONTENT_TYPE = "application/json;odata=nometadata"

DEFAULT_TIMEOUT = 60.0

# Keys SharePoint uses for the item id and unique id in item payloads.
ID_KEYS = ("Id", "ID")
UNIQUE_ID_KEYS = ("GUID", "UniqueId")

# PagingInfo continuation. Views sorted on another field also carry that
# field's last value as p_<Field>, ahead of p_ID.
PAGING_INFO_TEMPLATE = "Paged=TRUE&p_ID={last_id}"
SORTED_PAGING_INFO_TEMPLATE = "Paged=TRUE&p_{field}={value}&p_ID={last_id}"


def default_headers(access_token: str | None = None) -> dict[str, str]:
    """Headers sent with every request.

    Args:
        access_token: Pre-acquired OAuth bearer token (optional)
    """
    headers = {"Accept": ODATA_ACCEPT, "Content-Type": ODATA_CONTENT_TYPE}
    if access_token:
        headers["Authorization"] = f"Bearer {access_token}"
    return headers

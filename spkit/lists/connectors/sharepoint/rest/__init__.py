"""SharePoint REST store."""

from .adapters import (
    ItemsPageAdapter,
    ListItemAdapter,
    paging_info,
    parse_error_body,
    sharepoint_error,
)
from .store import SharePointRESTStore

__all__ = [
    "ItemsPageAdapter",
    "ListItemAdapter",
    "SharePointRESTStore",
    "paging_info",
    "parse_error_body",
    "sharepoint_error",
]

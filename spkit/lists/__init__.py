"""spkit.lists - Throttle-resilient SharePoint list item retrieval."""

from .api import ListItemsAPI
from .connectors.sharepoint import SharePointRESTStore
from .core import (
    BoundsComputationError,
    ListDataError,
    ListStore,
    MalformedQueryError,
    PageSignal,
    RemoteFetchError,
    SelectionMode,
    ThrottlingError,
    ValidationError,
)
from .models import ItemPage, KeyRange, ListItem, ListItemRequest, ListRef, QuerySpec
from .query import ViewQuery
from .runtime.paging import (
    PagedRetriever,
    RepartitionPolicy,
    Window,
    WindowPlanner,
    is_throttled,
)

__version__ = "0.1.0"

__all__ = [
    # Facade
    "ListItemsAPI",
    # Stores
    "ListStore",
    "SharePointRESTStore",
    # Enums
    "PageSignal",
    "SelectionMode",
    # Models
    "ItemPage",
    "KeyRange",
    "ListItem",
    "ListItemRequest",
    "ListRef",
    "QuerySpec",
    # Query
    "ViewQuery",
    # Paging
    "PagedRetriever",
    "RepartitionPolicy",
    "Window",
    "WindowPlanner",
    "is_throttled",
    # Exceptions
    "ListDataError",
    "MalformedQueryError",
    "ValidationError",
    "BoundsComputationError",
    "RemoteFetchError",
    "ThrottlingError",
]

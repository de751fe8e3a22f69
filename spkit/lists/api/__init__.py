"""Public API facade."""

from .list_items_api import ListItemsAPI

__all__ = ["ListItemsAPI"]

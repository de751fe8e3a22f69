"""Data models for list retrieval.

Architecture:
    This module exports the Pydantic v2 models used throughout the library.
    All models are immutable (frozen=True); a page or item handed to a caller
    cannot be modified by later processing.

Model Categories:
    - Addressing: ListRef
    - Records: ListItem, ItemPage
    - Requests: QuerySpec, KeyRange, ListItemRequest
"""

from .list_item import ListItem
from .list_ref import ListRef
from .page import ItemPage
from .query_spec import KeyRange, QuerySpec
from .request import ListItemRequest

__all__ = [
    "ItemPage",
    "KeyRange",
    "ListItem",
    "ListItemRequest",
    "ListRef",
    "QuerySpec",
]

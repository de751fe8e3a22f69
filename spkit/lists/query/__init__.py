"""CAML view query construction."""

from .builder import (
    DEFAULT_KEY_FIELD,
    build_max_key_query,
    build_unique_id_query,
    build_view_query,
    build_window_query,
)
from .view import ViewQuery, comparison

__all__ = [
    "DEFAULT_KEY_FIELD",
    "ViewQuery",
    "build_max_key_query",
    "build_unique_id_query",
    "build_view_query",
    "build_window_query",
    "comparison",
]
